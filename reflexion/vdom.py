from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, TypeAlias

Props: TypeAlias = Mapping[str, Any]


@dataclass(slots=True, frozen=True)
class VDomElement:
    tag: str
    props: Props
    children: tuple["VDom", ...]


VDom = VDomElement | str


def h(
    tag: str,
    props: Props | None = None,
    *children: VDom,
) -> VDomElement:
    if props is None:
        props = {}
    return VDomElement(
        tag=tag, props=MappingProxyType(dict(props)), children=children
    )
