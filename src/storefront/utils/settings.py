"""Access to ``[tool.protean.custom]`` settings, overridable from the environment."""

import os

from protean.utils.globals import current_domain


def setting(name, default=None):
    """Return ``name`` from the environment, else from the domain's custom config."""
    value = os.environ.get(name)
    if value:
        return value
    return current_domain.config.get("custom", {}).get(name, default)
