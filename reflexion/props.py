import logging
from typing import Any, Callable, TypeAlias

from reflexion.node import (
    Node,
    PatchAddEventListener,
    PatchRemoveAttribute,
    PatchRemoveEventListener,
    PatchSetAttribute,
)
from reflexion.vdom import Props

logger = logging.getLogger(__name__)

IsUnset: TypeAlias = Callable[[Any], bool]

FORCE_UPDATE = "forceUpdate"


def is_event_property(name: str) -> bool:
    return name.startswith("on")


def is_framework_property(name: str) -> bool:
    return is_event_property(name) or name == FORCE_UPDATE


def event_name_from_property(name: str) -> str:
    return name[2:].lower()


def attribute_name(name: str) -> str:
    return "class" if name == "className" else name


def is_falsy(value: Any) -> bool:
    """Treat every falsy value (``0``, ``""``, ``False``, ``None``) as unset."""
    return not value


def is_none(value: Any) -> bool:
    """Treat only ``None`` as unset, so ``0``, ``""`` and ``False`` are rendered."""
    return value is None


class PropertyReconciler:
    """Moves a live node's attributes from one props mapping to another.

    ``is_unset`` decides which new values remove an attribute instead of
    setting it. ``resubscribe_events`` controls whether a changed event
    handler is swapped on the live node; when it is off, the handler bound at
    materialization stays bound for the lifetime of the live node.
    """

    _is_unset: IsUnset
    _resubscribe_events: bool

    def __init__(
        self,
        is_unset: IsUnset = is_falsy,
        resubscribe_events: bool = False,
    ) -> None:
        self._is_unset = is_unset
        self._resubscribe_events = resubscribe_events

    def set_property(self, target: Node, name: str, value: Any) -> None:
        if is_framework_property(name):
            return
        logger.debug(f"set {attribute_name(name)}={value!r}")
        target.apply(PatchSetAttribute(name=attribute_name(name), value=value))

    def remove_property(self, target: Node, name: str, value: Any = None) -> None:
        if is_framework_property(name):
            return
        logger.debug(f"remove {attribute_name(name)}")
        target.apply(PatchRemoveAttribute(name=attribute_name(name)))

    def set_properties(self, target: Node, props: Props) -> None:
        for name, value in props.items():
            self.set_property(target, name, value)

    def subscribe_events(self, target: Node, props: Props) -> None:
        for name, handler in props.items():
            if is_event_property(name):
                target.apply(
                    PatchAddEventListener(
                        event=event_name_from_property(name), handler=handler
                    )
                )

    def diff_property(
        self, target: Node, name: str, new_value: Any, old_value: Any
    ) -> None:
        if type(new_value) is type(old_value) and new_value == old_value:
            return
        if self._is_unset(new_value):
            self.remove_property(target, name, old_value)
        else:
            self.set_property(target, name, new_value)

    def reconcile_properties(
        self, target: Node, new_props: Props, old_props: Props | None = None
    ) -> None:
        if old_props is None:
            old_props = {}
        names = list(new_props) + [n for n in old_props if n not in new_props]
        for name in names:
            self.diff_property(target, name, new_props.get(name), old_props.get(name))
        if self._resubscribe_events:
            self._resubscribe(target, names, new_props, old_props)

    def _resubscribe(
        self, target: Node, names: list[str], new_props: Props, old_props: Props
    ) -> None:
        for name in names:
            if not is_event_property(name):
                continue
            new_handler = new_props.get(name)
            old_handler = old_props.get(name)
            if new_handler is old_handler:
                continue
            event = event_name_from_property(name)
            if old_handler is not None:
                target.apply(PatchRemoveEventListener(event=event, handler=old_handler))
            if new_handler is not None:
                target.apply(PatchAddEventListener(event=event, handler=new_handler))
