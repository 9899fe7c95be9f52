"""Static metadata preservation.

Static metadata is whatever public attributes a caller hung on a component
class: debug names, helper functions, constants. Containers copy them forward
so tools that introspect the outermost class still find them.
"""

import inspect
import logging
from typing import Any, Dict, Iterable

from hoc_py.base import Component


logger = logging.getLogger(__name__)


# Names intrinsic to a component or container. Never copied.
RESERVED_STATICS = frozenset(
    {name for name in dir(Component) if not name.startswith("_")}
    | {
        "display_name",
        "props_contract",
        "wrapped",
        "hoc_name",
        "options",
        "consumed_props",
        "forwards_ref",
        "injected_props",
        "child_props",
    }
)


def own_statics(component: type) -> Dict[str, Any]:
    """Public class attributes defined by ``component`` and its user bases.

    Plain functions and properties belong to instances and are left out;
    ``staticmethod`` and ``classmethod`` objects and plain values are kept.
    Walks the MRO and stops at the first framework class (one that defines
    ``_hoc_framework`` itself). The nearest definition of a name wins.
    """
    found: Dict[str, Any] = {}
    seen = set()
    for klass in component.__mro__:
        if "_hoc_framework" in vars(klass) or klass is object:
            break
        for name, value in vars(klass).items():
            if name.startswith("_") or name in seen:
                continue
            seen.add(name)
            if inspect.isfunction(value) or isinstance(value, property):
                continue
            found[name] = value
    return found


def hoist_statics(container: type, wrapped: type, exclude: Iterable[str] = ()) -> type:
    """Copy ``wrapped``'s statics onto ``container``.

    A name is skipped when it is reserved, listed in ``exclude`` or already
    present on ``container``. ``wrapped`` is only read. Copying twice has the
    same result as copying once.

    Returns:
        ``container``
    """
    excluded = set(exclude)
    for name, value in own_statics(wrapped).items():
        if name in RESERVED_STATICS or name in excluded:
            logger.debug("Not hoisting reserved static '%s' from %s", name, wrapped.__name__)
            continue
        if hasattr(container, name):
            continue
        try:
            setattr(container, name, value)
        except (AttributeError, TypeError) as exc:
            logger.debug("Could not hoist static '%s' onto %s: %s", name, container.__name__, exc)
    return container


__all__ = ["RESERVED_STATICS", "own_statics", "hoist_statics"]
