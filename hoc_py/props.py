"""Props helpers.

Props are immutable mappings built fresh for every invocation. Containers
compute their child's props as the pass-through part of what they received
(minus the keys they consume) merged with what they inject.
"""

from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional


Props = Mapping[str, Any]

_PRIMITIVES = (bool, int, float, complex, str, bytes, type(None))

EMPTY_PROPS: Props = MappingProxyType({})


def freeze_props(mapping: Optional[Mapping[str, Any]] = None, **extra: Any) -> Props:
    """Build an immutable props mapping from ``mapping`` and keyword extras."""
    data = dict(mapping or {})
    data.update(extra)
    return MappingProxyType(data)


def omit_props(props: Mapping[str, Any], keys: Iterable[str]) -> Props:
    """Return ``props`` without ``keys``."""
    dropped = set(keys)
    return MappingProxyType({k: v for k, v in props.items() if k not in dropped})


def merge_props(
    received: Mapping[str, Any],
    consumed: Iterable[str] = (),
    injected: Optional[Mapping[str, Any]] = None,
) -> Props:
    """Compute a wrapped component's props.

    Keys in ``consumed`` are dropped from ``received``; ``injected`` is laid
    over the rest. On a key collision the injected value wins.
    """
    dropped = set(consumed)
    data = {k: v for k, v in received.items() if k not in dropped}
    if injected:
        data.update(injected)
    return MappingProxyType(data)


def same_value(a: Any, b: Any) -> bool:
    """Identity comparison, relaxed to ``==`` for primitives of the same type."""
    if a is b:
        return True
    if type(a) is type(b) and isinstance(a, _PRIMITIVES):
        return a == b
    return False


def changed_keys(prev: Mapping[str, Any], next_: Mapping[str, Any], keys: Iterable[str]) -> List[str]:
    """Tracked keys whose value differs between ``prev`` and ``next_``.

    A key missing from either side is not compared.
    """
    changed = []
    for key in keys:
        if key not in prev or key not in next_:
            continue
        if not same_value(prev[key], next_[key]):
            changed.append(key)
    return changed


def shallow_equal(a: Mapping[str, Any], b: Mapping[str, Any]) -> bool:
    if a is b:
        return True
    if set(a) != set(b):
        return False
    return all(same_value(a[key], b[key]) for key in a)


def check_props(component: type, props: Mapping[str, Any]) -> List[str]:
    """List contract violations for ``props`` against ``component.props_contract``.

    Only keys present in both are checked; a contract entry of ``object`` or
    ``Any`` accepts everything.
    """
    problems = []
    contract = getattr(component, "props_contract", None) or {}
    for key, expected in contract.items():
        if key not in props or expected is Any or expected is object:
            continue
        if not isinstance(expected, type) and not isinstance(expected, tuple):
            continue
        value = props[key]
        if not isinstance(value, expected):
            problems.append(
                f"prop '{key}' expected {getattr(expected, '__name__', expected)}, got {type(value).__name__}"
            )
    return problems


__all__ = [
    "Props",
    "EMPTY_PROPS",
    "freeze_props",
    "omit_props",
    "merge_props",
    "same_value",
    "changed_keys",
    "shallow_equal",
    "check_props",
]
