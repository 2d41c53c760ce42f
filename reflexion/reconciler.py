import logging
from itertools import zip_longest
from typing import Any, Generic, TypeVar

from reflexion.node import (
    Document,
    Node,
    PatchAppendChild,
    PatchRemoveChild,
    PatchReplaceChild,
)
from reflexion.props import IsUnset, PropertyReconciler, is_falsy
from reflexion.vdom import VDom, VDomElement

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Node)


def changed(new_vdom: VDom, old_vdom: VDom) -> bool:
    match (new_vdom, old_vdom):
        case (str(), str()):
            return new_vdom != old_vdom
        case (VDomElement(), VDomElement()):
            return new_vdom.tag != old_vdom.tag
        case (str() | VDomElement(), str() | VDomElement()):
            return True
        case (_, _):
            raise ValueError(f"unexpected: {new_vdom!r} {old_vdom!r}")


class Reconciler(Generic[N]):
    """Synchronizes a live tree with virtual trees through an injected document.

    The reconciler keeps no rendering state between calls: the caller holds on
    to the previously rendered tree and passes it back as ``old_vdom``.
    """

    _document: Document
    _props: PropertyReconciler

    def __init__(
        self,
        document: Document,
        is_unset: IsUnset = is_falsy,
        resubscribe_events: bool = False,
    ) -> None:
        self._document = document
        self._props = PropertyReconciler(
            is_unset=is_unset, resubscribe_events=resubscribe_events
        )

    def materialize(self, vdom: VDom) -> N:
        match vdom:
            case str():
                return self._document.create_text(vdom)  # type: ignore
            case VDomElement(tag, props, children):
                node = self._document.create_element(tag)
                self._props.set_properties(node, props)
                self._props.subscribe_events(node, props)
                for child in children:
                    node.apply(PatchAppendChild(child=self.materialize(child)))
                return node  # type: ignore
            case _:
                raise ValueError(f"unexpected: {vdom!r}")

    def reconcile(
        self,
        parent: Node,
        new_vdom: VDom | None,
        old_vdom: VDom | None = None,
        index: int = 0,
    ) -> None:
        match (new_vdom, old_vdom):
            case (None, None):
                return
            case (_, None):
                logger.debug(f"append {_describe(new_vdom)}")
                parent.apply(PatchAppendChild(child=self.materialize(new_vdom)))
            case (None, _):
                logger.debug(f"remove {_describe(old_vdom)} at {index}")
                parent.apply(PatchRemoveChild(index=index))
            case _ if changed(new_vdom, old_vdom):
                logger.debug(
                    f"replace {_describe(old_vdom)} with {_describe(new_vdom)} at {index}"
                )
                parent.apply(
                    PatchReplaceChild(index=index, child=self.materialize(new_vdom))
                )
            case (VDomElement(), VDomElement()):
                node = parent.child_at(index)
                self._props.reconcile_properties(node, new_vdom.props, old_vdom.props)
                self._reconcile_children(node, new_vdom, old_vdom)
            case (str(), str()):
                return

    def _reconcile_children(
        self, node: Node, new_vdom: VDomElement, old_vdom: VDomElement
    ) -> None:
        new_count = len(new_vdom.children)
        for i, (new_child, old_child) in enumerate(
            zip_longest(new_vdom.children, old_vdom.children)
        ):
            # removals shift the surplus children down to the end of the new list
            self.reconcile(node, new_child, old_child, min(i, new_count))


def _describe(vdom: Any) -> str:
    if isinstance(vdom, VDomElement):
        return f"<{vdom.tag}>"
    return repr(vdom)


def reconcile(
    document: Document,
    parent: Node,
    new_vdom: VDom | None,
    old_vdom: VDom | None = None,
    index: int = 0,
    is_unset: IsUnset = is_falsy,
    resubscribe_events: bool = False,
) -> None:
    Reconciler[Node](
        document, is_unset=is_unset, resubscribe_events=resubscribe_events
    ).reconcile(parent, new_vdom, old_vdom, index)
