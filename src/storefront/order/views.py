"""Order read models assembled on demand: items, address and payment joined."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.address.address import Address
from storefront.order.order import Order
from storefront.payment.payment import Payment


def payment_details(payment) -> dict:
    return {
        "id": str(payment.id),
        "order_id": str(payment.order_id),
        "amount": payment.amount,
        "method": payment.method,
        "status": payment.status,
        "gateway_order_id": payment.gateway_order_id,
        "gateway_payment_id": payment.gateway_payment_id,
        "created_at": payment.created_at,
        "updated_at": payment.updated_at,
    }


def address_details(address) -> dict:
    return {
        "id": str(address.id),
        "user_id": str(address.user_id),
        "full_name": address.full_name,
        "phone": address.phone,
        "line1": address.line1,
        "line2": address.line2,
        "city": address.city,
        "state": address.state,
        "pincode": address.pincode,
        "country": address.country,
    }


def order_details(order) -> dict:
    address = None
    if order.address_id:
        try:
            address = address_details(current_domain.repository_for(Address).get(order.address_id))
        except ObjectNotFoundError:
            # The address may have been deleted after the order was placed
            address = None

    payment = current_domain.repository_for(Payment).for_order(order.id)

    return {
        "id": str(order.id),
        "user_id": str(order.user_id),
        "store_id": str(order.store_id),
        "address_id": str(order.address_id) if order.address_id else None,
        "total_amount": order.total_amount,
        "status": order.status,
        "items": [
            {
                "id": str(item.id),
                "product_id": str(item.product_id),
                "quantity": item.quantity,
                "price": item.price,
            }
            for item in order.items
        ],
        "address": address,
        "payment": payment_details(payment) if payment else None,
        "created_at": order.created_at,
        "updated_at": order.updated_at,
        "cancelled_at": order.cancelled_at,
    }


def get_order(order_id) -> dict:
    return order_details(current_domain.repository_for(Order).get(order_id))


def orders_for_user(user_id) -> list[dict]:
    return [order_details(order) for order in current_domain.repository_for(Order).for_user(user_id)]


def orders_for_store(store_id) -> list[dict]:
    return [order_details(order) for order in current_domain.repository_for(Order).for_store(store_id)]
