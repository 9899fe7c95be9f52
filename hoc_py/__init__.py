"""
hoc-py: higher-order component composition.

Enhancers are functions that take a component class and return a new
container class wrapping it. They compose right to left, never touch the
component they wrap, carry its static attributes forward and forward refs
to the innermost instance.
"""

# Components
from .base import (
    Component,
    Element,
    Ref,
    create_element,
    create_ref,
    is_component,
    get_display_name,
    wrap_display_name,
)
from .decorators import component

# Composition
from .compose import compose, enhancer, identity
from .container import ContainerComponent, create_container, unwrap
from .statics import RESERVED_STATICS, hoist_statics, own_statics

# Props
from .props import (
    Props,
    freeze_props,
    omit_props,
    merge_props,
    same_value,
    changed_keys,
    shallow_equal,
    check_props,
)

# Built-in enhancers
from .enhancers import (
    with_data,
    should_update,
    only_update_for_keys,
    pure,
    map_props,
    with_props,
    default_props,
    rename_prop,
    rename_props,
    with_state,
    set_display_name,
    set_static,
)

# Subscriptions and host
from .subscriptions import DataSource, MemoryDataSource, SubscriptionSet
from .host import Root, mount, mounted

# Settings and errors
from .config import HocSettings, configure, get_settings, override_settings
from .errors import (
    HocError,
    TypeConstraintError,
    MutationViolation,
    SubscriptionOwnershipError,
    SubscriptionLeakWarning,
)

__all__ = [
    # Components
    'Component',
    'Element',
    'Ref',
    'create_element',
    'create_ref',
    'is_component',
    'get_display_name',
    'wrap_display_name',
    'component',
    # Composition
    'compose',
    'enhancer',
    'identity',
    'ContainerComponent',
    'create_container',
    'unwrap',
    'RESERVED_STATICS',
    'hoist_statics',
    'own_statics',
    # Props
    'Props',
    'freeze_props',
    'omit_props',
    'merge_props',
    'same_value',
    'changed_keys',
    'shallow_equal',
    'check_props',
    # Enhancers
    'with_data',
    'should_update',
    'only_update_for_keys',
    'pure',
    'map_props',
    'with_props',
    'default_props',
    'rename_prop',
    'rename_props',
    'with_state',
    'set_display_name',
    'set_static',
    # Subscriptions and host
    'DataSource',
    'MemoryDataSource',
    'SubscriptionSet',
    'Root',
    'mount',
    'mounted',
    # Settings
    'HocSettings',
    'configure',
    'get_settings',
    'override_settings',
    # Errors
    'HocError',
    'TypeConstraintError',
    'MutationViolation',
    'SubscriptionOwnershipError',
    'SubscriptionLeakWarning',
]

__version__ = '1.0.0'
