from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version(__name__)
except PackageNotFoundError:
    __version__: str = "unknown"

from .node import Document, Node, Patch
from .props import (
    PropertyReconciler,
    event_name_from_property,
    is_event_property,
    is_falsy,
    is_framework_property,
    is_none,
)
from .reconciler import Reconciler, changed, reconcile
from .vdom import Props, VDom, VDomElement, h

__all__ = [
    "Document",
    "Node",
    "Patch",
    "Props",
    "PropertyReconciler",
    "Reconciler",
    "VDom",
    "VDomElement",
    "changed",
    "event_name_from_property",
    "h",
    "is_event_property",
    "is_falsy",
    "is_framework_property",
    "is_none",
    "reconcile",
]
