"""Reference host.

Drives component instances through the lifecycle hook contract:

- mount: construct each layer, render it, mount the element it returns;
  ``on_mount`` runs children first
- update: push new props from the top; each layer sees ``on_receive_props``
  then ``should_update``; a layer that declines keeps the new props but is
  not re-rendered
- unmount: parents first; refs are released and every instance is checked
  for subscriptions it still holds

Only a single chain of elements is handled. There is no reconciliation of
siblings, keys or batching; this host exists so containers can be exercised
the way a real scheduler would.
"""

from __future__ import annotations

import logging
import warnings
from contextlib import contextmanager
from dataclasses import replace
from typing import Any, Iterator, List, Mapping, Optional, Type

from hoc_py.base import Component, Element, Ref, create_element, get_display_name
from hoc_py.config import get_settings
from hoc_py.errors import HocError, SubscriptionLeakWarning
from hoc_py.logs import EventType, NDJSONLogger
from hoc_py.props import check_props


logger = logging.getLogger(__name__)


class _Node:
    __slots__ = ("element", "instance", "child", "value")

    def __init__(self, element: Element, instance: Component):
        self.element = element
        self.instance = instance
        self.child: Optional[_Node] = None
        self.value: Any = None

    def chain(self) -> List["_Node"]:
        nodes = []
        node: Optional[_Node] = self
        while node is not None:
            nodes.append(node)
            node = node.child
        return nodes


class Root:
    """A mounted component chain."""

    def __init__(self, event_log: Optional[NDJSONLogger] = None):
        self.event_log = event_log
        self._top: Optional[_Node] = None

    @property
    def mounted(self) -> bool:
        return self._top is not None

    @property
    def instance(self) -> Optional[Component]:
        return self._top.instance if self._top else None

    @property
    def instances(self) -> List[Component]:
        """Mounted instances from outermost to innermost."""
        return [node.instance for node in self._top.chain()] if self._top else []

    @property
    def output(self) -> Any:
        """Render output of the innermost layer."""
        if self._top is None:
            return None
        return self._top.chain()[-1].value

    def find(self, component: Type[Component]) -> Optional[Component]:
        for instance in self.instances:
            if type(instance) is component:
                return instance
        return None

    def emit(self, event_type: Any, instance: Component, **payload: Any) -> None:
        if self.event_log is not None:
            self.event_log.log(event_type, get_display_name(type(instance)), **payload)

    # Lifecycle entry points

    def mount(
        self,
        component: Type[Component],
        props: Optional[Mapping[str, Any]] = None,
        ref: Optional[Ref] = None,
    ) -> "Root":
        if self._top is not None:
            raise HocError("Root is already mounted; unmount it first")
        element = create_element(component, props, ref)
        self._top = self._mount_element(element)
        return self

    def update(self, props: Optional[Mapping[str, Any]] = None) -> "Root":
        if self._top is None:
            raise HocError("Cannot update a root that is not mounted")
        top = self._top.element
        self._update(self._top, create_element(top.type, props, top.ref))
        return self

    def rerender(self, instance: Component) -> None:
        """Re-render ``instance`` with its current props (``force_update``)."""
        node = self._node_for(instance)
        if node is None:
            raise HocError(f"'{get_display_name(type(instance))}' is not mounted in this root")
        prev = instance.props
        self._rerender(node)
        instance.on_update(prev)
        self.emit(EventType.UPDATE, instance, forced=True)

    def unmount(self) -> None:
        """Unmount everything. Calling it again is a no-op."""
        if self._top is None:
            return
        top, self._top = self._top, None
        self._unmount_nodes(top.chain())

    # Internals

    def _node_for(self, instance: Component) -> Optional[_Node]:
        if self._top is None:
            return None
        for node in self._top.chain():
            if node.instance is instance:
                return node
        return None

    def _mount_element(self, element: Element) -> _Node:
        created: List[_Node] = []
        started: List[_Node] = []
        try:
            node = self._build(element, created)
            for pending in reversed(created):
                started.append(pending)
                pending.instance.on_mount()
                self.emit(EventType.MOUNT, pending.instance)
        except Exception as exc:
            logger.debug("Mount of %s failed, tearing down: %s", get_display_name(element.type), exc)
            if created:
                self.emit(EventType.ERROR, created[0].instance, phase="mount", error=str(exc))
            started_ids = {id(n) for n in started}
            for pending in created:
                if id(pending) in started_ids:
                    for cleanup_error in self._teardown(pending):
                        logger.error("Cleanup after failed mount raised: %s", cleanup_error)
                else:
                    self._release(pending)
            raise
        return node

    def _build(self, element: Element, created: List[_Node]) -> _Node:
        instance = element.type(element.props)
        instance.ref = element.ref
        instance._host = self
        self._check_props(element)
        node = _Node(element, instance)
        created.append(node)
        result = instance.render()
        if isinstance(result, Element):
            node.child = self._build(result, created)
        else:
            node.value = result
        self._attach_ref(node)
        return node

    def _update(self, node: _Node, element: Element) -> None:
        instance = node.instance
        prev = instance.props
        self._check_props(element)
        instance.on_receive_props(element.props)
        allowed = instance.should_update(element.props)
        instance.props = element.props
        old_ref = node.element.ref
        ref_changed = element.ref is not old_ref
        if ref_changed:
            if old_ref is not None and old_ref.current is instance:
                old_ref.current = None
            instance.ref = element.ref
        node.element = element
        if not allowed:
            if ref_changed:
                self._retarget_ref(node, old_ref)
            self.emit(EventType.SKIP, instance)
            return
        self._rerender(node)
        instance.on_update(prev)
        self.emit(EventType.UPDATE, instance)

    def _rerender(self, node: _Node) -> None:
        result = node.instance.render()
        if isinstance(result, Element):
            if node.child is not None and node.child.element.type is result.type:
                self._update(node.child, result)
            else:
                if node.child is not None:
                    old, node.child = node.child, None
                    self._unmount_nodes(old.chain())
                node.child = self._mount_element(result)
            node.value = None
        else:
            if node.child is not None:
                old, node.child = node.child, None
                self._unmount_nodes(old.chain())
            node.value = result
        self._attach_ref(node)

    def _retarget_ref(self, node: _Node, old: Optional[Ref]) -> None:
        """Move a changed ref down the forwarding chain of ``node`` without rendering.

        A child counts as forwarding when it received the old ref, or, when
        there was none, when ``node`` is a container that forwards refs.
        """
        new = node.element.ref
        while node.child is not None:
            child = node.child
            if old is not None:
                forwarded = child.element.ref is old
            else:
                forwarded = child.element.ref is None and getattr(node.instance, "forwards_ref", False)
            if not forwarded:
                break
            if old is not None and old.current is child.instance:
                old.current = None
            child.element = replace(child.element, ref=new)
            child.instance.ref = new
            node = child
        self._attach_ref(node)

    def _attach_ref(self, node: _Node) -> None:
        ref = node.element.ref
        if ref is None:
            return
        if node.child is not None and node.child.element.ref is ref:
            return
        ref.current = node.instance

    def _unmount_nodes(self, nodes: List[_Node]) -> None:
        errors = []
        for node in nodes:
            errors.extend(self._teardown(node))
        if errors:
            raise errors[0]

    def _teardown(self, node: _Node) -> List[Exception]:
        instance = node.instance
        errors: List[Exception] = []
        try:
            instance.on_unmount()
        except Exception as exc:
            logger.error("%s.on_unmount raised: %s", get_display_name(type(instance)), exc)
            self.emit(EventType.ERROR, instance, phase="unmount", error=str(exc))
            errors.append(exc)
        finally:
            self._release(node)
        self.emit(EventType.UNMOUNT, instance)
        return errors

    def _release(self, node: _Node) -> None:
        instance = node.instance
        pending = instance.subscriptions.pending
        if pending:
            name = get_display_name(type(instance))
            self.emit(EventType.LEAK, instance, handles=pending)
            if get_settings().warn_on_leak:
                warnings.warn(
                    SubscriptionLeakWarning(f"{name} unmounted holding {len(pending)} subscription(s): {pending!r}"),
                    stacklevel=4,
                )
            instance.subscriptions.release_all()
        if instance.ref is not None and instance.ref.current is instance:
            instance.ref.current = None
        instance._host = None

    def _check_props(self, element: Element) -> None:
        if not get_settings().check_prop_types:
            return
        for problem in check_props(element.type, element.props):
            logger.warning("%s: %s", get_display_name(element.type), problem)


def mount(
    component: Type[Component],
    props: Optional[Mapping[str, Any]] = None,
    ref: Optional[Ref] = None,
    event_log: Optional[NDJSONLogger] = None,
) -> Root:
    """Mount ``component`` in a new Root."""
    return Root(event_log).mount(component, props, ref)


@contextmanager
def mounted(
    component: Type[Component],
    props: Optional[Mapping[str, Any]] = None,
    ref: Optional[Ref] = None,
    event_log: Optional[NDJSONLogger] = None,
) -> Iterator[Root]:
    """Mount for the duration of the block; always unmounts on exit."""
    root = Root(event_log)
    root.mount(component, props, ref)
    try:
        yield root
    finally:
        root.unmount()


__all__ = ["Root", "mount", "mounted"]
