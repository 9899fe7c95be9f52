"""Static-setting enhancers.

Both build a thin pass-through container carrying the new attribute rather
than writing it onto the component they receive.
"""

from typing import Any

from hoc_py.compose import enhancer
from hoc_py.container import check_static_name, create_container
from hoc_py.errors import TypeConstraintError


def set_display_name(name: str):
    """Give the component a new ``display_name``."""
    if not isinstance(name, str) or not name:
        raise TypeConstraintError(f"setDisplayName expects a non-empty string, got {name!r}", name)

    @enhancer(name="setDisplayName")
    def enhance(component):
        return create_container(component, "setDisplayName", namespace={"display_name": name})

    return enhance


def set_static(name: str, value: Any):
    """Attach ``value`` as the class attribute ``name``."""
    check_static_name(name, "setStatic")

    @enhancer(name="setStatic")
    def enhance(component):
        return create_container(component, "setStatic", namespace={name: value})

    return enhance


__all__ = ["set_display_name", "set_static"]
