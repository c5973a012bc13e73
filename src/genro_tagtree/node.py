# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Node - the immutable tree value behind every tag.

A Node is the only storage representation of the markup tree. It is a
frozen value: every operation that looks like a mutation returns a new
Node and leaves the receiver untouched. Unchanged substructure (the
children tuple, untouched attributes) is shared by reference, so deriving
a node is cheap and any subtree can be reused under several parents.

Node kinds:
    - STANDARD: open and close tag, may have children
    - VOID: self-closing element, no children
    - TEXT: raw content, no name or attributes
    - COMMENT: comment content, no name or attributes
    - GROUP: nameless container, children are emitted without a wrapper

Example:
    >>> form = Node.standard('form')
    >>> form = form.add_or_replace(Attribute('method', 'post'))
    >>> form = form.add_or_replace(Attribute('method', 'get'))
    >>> form.attributes
    (Attribute(key='method', value='get'),)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum

from .attribute import Attribute

logger = logging.getLogger(__name__)


class NodeKind(Enum):
    """Structural variant of a Node."""

    STANDARD = 'standard'
    VOID = 'void'
    TEXT = 'text'
    COMMENT = 'comment'
    GROUP = 'group'


_PARENT_KINDS = frozenset({NodeKind.STANDARD, NodeKind.GROUP})


def _merge(
    attributes: tuple[Attribute, ...], attribute: Attribute
) -> tuple[Attribute, ...]:
    """Set attribute in place if its key exists, else append it."""
    for index, current in enumerate(attributes):
        if current.same_key(attribute):
            if current == attribute:
                return attributes
            return attributes[:index] + (attribute,) + attributes[index + 1:]
    return attributes + (attribute,)


@dataclass(frozen=True, slots=True, repr=False)
class Node:
    """An immutable markup tree node.

    Attributes:
        kind: The structural variant (see NodeKind).
        name: Element name; empty for TEXT, COMMENT and GROUP.
        attributes: Ordered attributes, unique by key.
        children: Ordered child nodes. The same node may appear twice.
        contents: Raw content of TEXT and COMMENT nodes.

    Any iterable is accepted for attributes and children and stored as a
    tuple. Duplicate attribute keys are folded with the add_or_replace
    rule: the first position is kept, the last value wins.
    """

    kind: NodeKind
    name: str = ''
    attributes: tuple[Attribute, ...] = ()
    children: tuple[Node, ...] = ()
    contents: str | None = None

    def __post_init__(self) -> None:
        attributes = tuple(self.attributes)
        if len({attribute.key for attribute in attributes}) != len(attributes):
            folded: tuple[Attribute, ...] = ()
            for attribute in attributes:
                folded = _merge(folded, attribute)
            attributes = folded
        object.__setattr__(self, 'attributes', attributes)
        object.__setattr__(self, 'children', tuple(self.children))

    def __repr__(self) -> str:
        if self.kind in (NodeKind.TEXT, NodeKind.COMMENT):
            return f"Node({self.kind.value}, {self.contents!r})"
        return (
            f"Node({self.kind.value}, {self.name!r}, "
            f"attributes={len(self.attributes)}, children={len(self.children)})"
        )

    # ==================== Named Constructors ====================

    @classmethod
    def standard(
        cls,
        name: str,
        children: Iterable[Node] = (),
        attributes: Iterable[Attribute] = (),
    ) -> Node:
        """Create an element with open and close tags."""
        return cls(NodeKind.STANDARD, name, tuple(attributes), tuple(children))

    @classmethod
    def void(cls, name: str, attributes: Iterable[Attribute] = ()) -> Node:
        """Create a self-closing element."""
        return cls(NodeKind.VOID, name, tuple(attributes))

    @classmethod
    def text(cls, contents: str) -> Node:
        """Create a raw text node."""
        return cls(NodeKind.TEXT, contents=contents)

    @classmethod
    def comment(cls, contents: str) -> Node:
        """Create a comment node."""
        return cls(NodeKind.COMMENT, contents=contents)

    @classmethod
    def group(cls, children: Iterable[Node] = ()) -> Node:
        """Create a nameless container for a run of sibling nodes."""
        return cls(NodeKind.GROUP, children=tuple(children))

    # ==================== Attributes ====================

    def add_or_replace(self, attribute: Attribute) -> Node:
        """Return a copy of this node with attribute set.

        If an attribute with the same key exists, it is replaced at the
        same position; otherwise the attribute is appended. Re-setting an
        attribute never reorders the others. Always succeeds.

        Args:
            attribute: The attribute to set.

        Returns:
            A new Node sharing kind, name, children and contents with this
            one (or this node itself if the attribute is already set).
        """
        attributes = _merge(self.attributes, attribute)
        if attributes is self.attributes:
            return self
        if len(attributes) == len(self.attributes):
            logger.debug("replaced attribute %r on <%s>", attribute.key, self.name)
        else:
            logger.debug("appended attribute %r on <%s>", attribute.key, self.name)
        return replace(self, attributes=attributes)

    def remove_attribute(self, key: str) -> Node:
        """Return a copy of this node without the attribute named key.

        The remaining attributes keep their order. If key is not set the
        node itself is returned.
        """
        attributes = tuple(a for a in self.attributes if a.key != key)
        if len(attributes) == len(self.attributes):
            return self
        return replace(self, attributes=attributes)

    def get_attribute(self, key: str, default: str | None = None) -> str | None:
        """Get an attribute value.

        A valueless attribute returns None, use has_attribute() to tell
        it apart from a missing one.
        """
        for attribute in self.attributes:
            if attribute.key == key:
                return attribute.value
        return default

    def has_attribute(self, key: str) -> bool:
        """True if an attribute named key is set."""
        return any(attribute.key == key for attribute in self.attributes)

    # ==================== Children ====================

    @property
    def can_have_children(self) -> bool:
        """True for STANDARD and GROUP nodes."""
        return self.kind in _PARENT_KINDS

    def with_children(self, children: Iterable[Node]) -> Node:
        """Return a copy of this node with children replaced.

        VOID, TEXT and COMMENT nodes never have children: for them the
        node itself is returned unchanged.
        """
        if not self.can_have_children:
            return self
        return replace(self, children=tuple(children))

    def append(self, *children: Node) -> Node:
        """Return a copy of this node with children added at the end.

        Like with_children(), a no-op for kinds without children.
        """
        if not self.can_have_children:
            return self
        return replace(self, children=self.children + children)


def add_or_replace(node: Node, attribute: Attribute) -> Node:
    """Functional form of Node.add_or_replace()."""
    return node.add_or_replace(attribute)
