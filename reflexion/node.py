from dataclasses import dataclass
from typing import Any, Callable, Protocol


@dataclass(slots=True, frozen=True)
class PatchSetAttribute:
    name: str
    value: Any


@dataclass(slots=True, frozen=True)
class PatchRemoveAttribute:
    name: str


@dataclass(slots=True, frozen=True)
class PatchAddEventListener:
    event: str
    handler: Callable[..., Any]


@dataclass(slots=True, frozen=True)
class PatchRemoveEventListener:
    event: str
    handler: Callable[..., Any]


@dataclass(slots=True, frozen=True)
class PatchAppendChild:
    child: Any


@dataclass(slots=True, frozen=True)
class PatchRemoveChild:
    index: int


@dataclass(slots=True, frozen=True)
class PatchReplaceChild:
    index: int
    child: Any


Patch = (
    PatchSetAttribute
    | PatchRemoveAttribute
    | PatchAddEventListener
    | PatchRemoveEventListener
    | PatchAppendChild
    | PatchRemoveChild
    | PatchReplaceChild
)


class Node(Protocol):
    def apply(self, patch: Patch) -> None:
        ...

    def child_at(self, index: int) -> "Node":
        ...


class Document(Protocol):
    def create_text(self, text: str) -> Node:
        ...

    def create_element(self, tag: str) -> Node:
        ...
