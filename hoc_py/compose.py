"""Enhancer composition.

An enhancer is a unary function taking a component class and returning a new
one. ``compose(e1, e2, ..., en)`` applies them right to left, so
``compose(e1, e2)(C) == e1(e2(C))``.
"""

import inspect
import logging
from functools import wraps
from typing import Any, Callable, Dict, Optional, Type

from hoc_py.base import Component, get_display_name, is_component
from hoc_py.config import get_settings
from hoc_py.errors import MutationViolation, TypeConstraintError


logger = logging.getLogger(__name__)

Enhancer = Callable[[Type[Component]], Type[Component]]


def identity(component: Type[Component]) -> Type[Component]:
    """The enhancer that changes nothing."""
    return component


def enhancer_name(fn: Any) -> str:
    return getattr(fn, "hoc_name", None) or getattr(fn, "__name__", None) or repr(fn)


def _snapshot(component: type) -> Dict[str, Any]:
    return dict(vars(component))


def _changed(before: Dict[str, Any], after: Dict[str, Any]) -> set:
    changed = set(before) ^ set(after)
    changed.update(k for k in set(before) & set(after) if before[k] is not after[k])
    return changed


def _check_result(fn: Any, component: type, result: Any) -> Type[Component]:
    if result is component:
        raise MutationViolation(enhancer_name(fn), get_display_name(component))
    if not is_component(result):
        raise TypeConstraintError(
            f"Enhancer '{enhancer_name(fn)}' must return a Component subclass, got {type(result).__name__}",
            result,
        )
    return result


def enhancer(fn: Optional[Callable] = None, *, name: Optional[str] = None):
    """Mark a function as an enhancer and enforce the wrapping contract.

    The decorated function must take one component and return a new one.
    Calls are checked: the input has to be a component, the output has to be
    a different component, and (with ``check_mutation`` on) the input's class
    attributes must be unchanged afterwards.

    Usage:
        @enhancer(name="withTheme")
        def with_theme(component):
            return create_container(component, "withTheme", ...)
    """

    def decorate(func: Callable) -> Enhancer:
        hoc_name = name or func.__name__

        @wraps(func)
        def checked(component):
            if not is_component(component):
                raise TypeConstraintError(
                    f"Enhancer '{hoc_name}' expects a Component subclass, got {type(component).__name__}",
                    component,
                )
            before = _snapshot(component) if get_settings().check_mutation else None
            result = func(component)
            if before is not None:
                changed = _changed(before, _snapshot(component))
                if changed:
                    raise MutationViolation(hoc_name, get_display_name(component), changed)
            return _check_result(checked, component, result)

        checked.hoc_name = hoc_name
        return checked

    if fn is not None:
        return decorate(fn)
    return decorate


def _is_identity(fn: Any) -> bool:
    if fn is identity:
        return True
    chain = getattr(fn, "chain", None)
    return chain is not None and all(_is_identity(f) for f in chain)


def _check_unary(fn: Any) -> None:
    if is_component(fn):
        raise TypeConstraintError(
            f"compose() got the component '{get_display_name(fn)}' where an enhancer was expected", fn
        )
    if not callable(fn):
        raise TypeConstraintError(f"compose() arguments must be callable, got {type(fn).__name__}", fn)
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return
    try:
        signature.bind(object())
    except TypeError as exc:
        raise TypeConstraintError(
            f"Enhancer '{enhancer_name(fn)}' must accept exactly one component argument: {exc}", fn
        ) from exc


def compose(*enhancers: Any) -> Enhancer:
    """Combine enhancers into one, applied right to left.

    ``compose()`` is ``identity`` and ``compose(e)`` is ``e`` itself. A single
    list or tuple argument is treated as the sequence.

    Raises:
        TypeConstraintError: If an element is not a unary callable
    """
    if len(enhancers) == 1 and isinstance(enhancers[0], (list, tuple)):
        enhancers = tuple(enhancers[0])
    for fn in enhancers:
        _check_unary(fn)

    if not enhancers:
        return identity
    if len(enhancers) == 1:
        return enhancers[0]

    chain = tuple(enhancers)

    def composed(component):
        if not is_component(component):
            raise TypeConstraintError(
                f"Composed enhancer expects a Component subclass, got {type(component).__name__}", component
            )
        result = component
        for fn in reversed(chain):
            if _is_identity(fn):
                continue
            result = _check_result(fn, result, fn(result))
        logger.debug("Composed %s from %s", get_display_name(result), get_display_name(component))
        return result

    composed.hoc_name = "compose(" + ", ".join(enhancer_name(fn) for fn in chain) + ")"
    composed.chain = chain
    return composed


__all__ = ["Enhancer", "identity", "enhancer", "compose", "enhancer_name"]
