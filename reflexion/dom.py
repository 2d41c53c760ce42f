from browser import DOMNode, document  # type: ignore

from reflexion.node import (
    Node,
    Patch,
    PatchAddEventListener,
    PatchAppendChild,
    PatchRemoveAttribute,
    PatchRemoveChild,
    PatchRemoveEventListener,
    PatchReplaceChild,
    PatchSetAttribute,
)
from reflexion.reconciler import Reconciler
from reflexion.vdom import VDom


class DomNode(Node):
    dom: "DOMNode"

    def __init__(self, dom: "DOMNode") -> None:
        self.dom = dom

    def child_at(self, index: int) -> "DomNode":
        return DomNode(self.dom.childNodes[index])

    def apply(self, patch: Patch) -> None:
        match patch:
            case PatchSetAttribute(name, value):
                self.dom.setAttribute(name, value)
            case PatchRemoveAttribute(name):
                self.dom.removeAttribute(name)
            case PatchAddEventListener(event, handler):
                self.dom.addEventListener(event, handler)
            case PatchRemoveEventListener(event, handler):
                self.dom.removeEventListener(event, handler)
            case PatchAppendChild(child) if isinstance(child, DomNode):
                self.dom.appendChild(child.dom)
            case PatchRemoveChild(index):
                self.dom.removeChild(self.dom.childNodes[index])
            case PatchReplaceChild(index, child) if isinstance(child, DomNode):
                self.dom.replaceChild(child.dom, self.dom.childNodes[index])
            case _:
                raise ValueError(f"Unknown patch: {patch}")


class BrowserDocument:
    def create_text(self, text: str) -> DomNode:
        return DomNode(document.createTextNode(text))

    def create_element(self, tag: str) -> DomNode:
        return DomNode(document.createElement(tag))


def render(
    new_vdom: VDom | None,
    old_vdom: VDom | None = None,
    root: "DOMNode | None" = None,
) -> None:
    parent = DomNode(root if root is not None else document.body)
    Reconciler[DomNode](BrowserDocument()).reconcile(parent, new_vdom, old_vdom)
