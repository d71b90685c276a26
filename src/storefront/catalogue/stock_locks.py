"""In-process locks that serialise stock changes per product.

Order placement and cancellation hold the locks of every product they touch
for the whole validate / withdraw / commit sequence. Locks are always taken in
sorted id order so two orders over overlapping products cannot deadlock.
The locks are per process; separate server processes do not share them.
"""

import threading
import weakref
from contextlib import contextmanager

_registry_lock = threading.Lock()
# A product's lock lives only while some caller holds a reference to it
_product_locks: weakref.WeakValueDictionary = weakref.WeakValueDictionary()


def _lock_for(product_id: str) -> threading.Lock:
    with _registry_lock:
        lock = _product_locks.get(product_id)
        if lock is None:
            lock = threading.Lock()
            _product_locks[product_id] = lock
        return lock


@contextmanager
def stock_locks(product_ids):
    """Hold the locks of all ``product_ids`` (deduplicated, sorted) for the block."""
    ordered = sorted({str(product_id) for product_id in product_ids})
    acquired = []
    try:
        for product_id in ordered:
            lock = _lock_for(product_id)
            lock.acquire()
            acquired.append(lock)
        yield
    finally:
        for lock in reversed(acquired):
            lock.release()
