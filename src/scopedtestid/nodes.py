from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Mapping


@dataclass(frozen=True, slots=True)
class Node:
    """A concrete rendered node that can carry attributes."""

    tag: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        object.__setattr__(self, "children", tuple(self.children))

    def get(self, name: str) -> str | None:
        return self.attributes.get(name)

    def with_attribute(self, name: str, value: str) -> Node:
        return replace(self, attributes={**self.attributes, name: value})

    def with_children(self, *children: Any) -> Node:
        return replace(self, children=children)


@dataclass(frozen=True, slots=True)
class Fragment:
    """Transparent grouping placeholder; it renders its children but has no attributes."""

    children: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


class ContentKind(Enum):
    SINGLE = "single"
    MULTIPLE = "multiple"
    FRAGMENT = "fragment"
    INVALID = "invalid"


def classify_content(content: Any) -> ContentKind:
    if isinstance(content, (list, tuple)):
        if len(content) > 1:
            return ContentKind.MULTIPLE
        if len(content) == 1:
            return classify_content(content[0])
        return ContentKind.INVALID
    if isinstance(content, Fragment):
        return ContentKind.FRAGMENT
    if isinstance(content, Node):
        return ContentKind.SINGLE
    return ContentKind.INVALID


def unwrap_single(content: Any) -> Any:
    while isinstance(content, (list, tuple)) and len(content) == 1:
        content = content[0]
    return content


def iter_nodes(root: Any) -> Iterator[Node]:
    if isinstance(root, Node):
        yield root
        children: tuple[Any, ...] = root.children
    elif isinstance(root, Fragment):
        children = root.children
    elif isinstance(root, (list, tuple)):
        children = tuple(root)
    else:
        return
    for child in children:
        yield from iter_nodes(child)


def find_by_attribute(root: Any, name: str, value: str) -> Node | None:
    for node in iter_nodes(root):
        if node.attributes.get(name) == value:
            return node
    return None


def find_by_tag(root: Any, tag: str) -> Node | None:
    lowered = tag.lower()
    for node in iter_nodes(root):
        if node.tag.lower() == lowered:
            return node
    return None


def collect_attribute_values(root: Any, name: str) -> list[str]:
    return [node.attributes[name] for node in iter_nodes(root) if name in node.attributes]
