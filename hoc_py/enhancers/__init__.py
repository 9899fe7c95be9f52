"""Built-in enhancers."""

from .data import DataOptions, DataContainer, with_data
from .updates import UpdateGate, should_update, only_update_for_keys, pure
from .mapping import map_props, with_props, default_props, rename_prop, rename_props
from .state import StateContainer, with_state
from .naming import set_display_name, set_static

__all__ = [
    # Data sources
    "DataOptions",
    "DataContainer",
    "with_data",
    # Update gates
    "UpdateGate",
    "should_update",
    "only_update_for_keys",
    "pure",
    # Props
    "map_props",
    "with_props",
    "default_props",
    "rename_prop",
    "rename_props",
    # State
    "StateContainer",
    "with_state",
    # Statics
    "set_display_name",
    "set_static",
]
