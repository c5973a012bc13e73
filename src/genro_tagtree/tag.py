# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tag - the capability shared by every concrete element type.

A tag is a typed, immutable view over exactly one Node (its backing node).
Fluent setters never change the tag: they derive a new node through
Node.add_or_replace() and wrap it in a new instance of the same class,
so calls can be chained freely.

Construction forms:
    - Form.from_node(node): wrap an existing node as is
    - Form(child, child, ...): children given directly (tags, strings,
      None for skipped branches, or nested iterables of those)
    - Form(builder=func) / Form.build(func): children produced by a
      builder function (see the builder module)

Defining a new element only takes a subclass. The tag name defaults to
the lower-cased class name:

    >>> class Nav(Element):
    ...     pass
    >>> Nav().node.name
    'nav'
    >>> class UserCard(Element, tag='user-card'):
    ...     pass
    >>> UserCard().node.name
    'user-card'
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Callable, ClassVar, TypeVar

from .attribute import Attribute
from .node import Node, NodeKind

T = TypeVar('T', bound='Tag')


def _child_nodes(
    children: Iterable[Any], builder: Callable[[], Any] | None
) -> tuple[Node, ...]:
    """Flatten children and the builder result into backing nodes."""
    # Import here to avoid circular dependency
    from .builder import nodes

    if builder is not None:
        return nodes(children, builder())
    return nodes(children)


class Tag:
    """Base class for all tags.

    Subclasses decide how the backing node is created from constructor
    arguments; identity wrap and equality are shared. Fluent attribute
    setters live on named elements only, since raw kinds carry no
    attributes.

    Attributes:
        kind: The NodeKind of the nodes this tag class creates.
    """

    __slots__ = ('_node',)

    kind: ClassVar[NodeKind]

    def __init__(self, node: Node) -> None:
        object.__setattr__(self, '_node', node)

    @classmethod
    def from_node(cls: type[T], node: Node) -> T:
        """Wrap an existing node without transforming it."""
        tag = cls.__new__(cls)
        Tag.__init__(tag, node)
        return tag

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"'{type(self).__name__}' is immutable")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._node == other._node  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._node))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._node!r})"

    @property
    def node(self) -> Node:
        """The backing node."""
        return self._node

    def wrap(self: T, node: Node) -> T:
        """Wrap node in a new instance of this tag's class."""
        return type(self).from_node(node)


class _NamedTag(Tag):
    """A tag backed by a named element node.

    Handles the class keyword that names the element:
    class Foo(Element, tag='foo-bar'). Without it, direct subclasses
    use their lower-cased class name and further subclasses inherit it.
    """

    __slots__ = ()

    tag_name: ClassVar[str] = ''

    def __init_subclass__(cls, tag: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if tag is not None:
            cls.tag_name = tag
        elif not cls.tag_name and 'tag_name' not in cls.__dict__:
            cls.tag_name = cls.__name__.lower()

    # ==================== Generic Attributes ====================

    def attribute(
        self: T, key: str, value: str | None = None, condition: bool = True
    ) -> T:
        """Set an attribute, or return self unchanged if condition is false.

        A value of None sets a valueless attribute.
        """
        if not condition:
            return self
        return self.wrap(self._node.add_or_replace(Attribute(key, value)))

    def flag(self: T, key: str, condition: bool = True) -> T:
        """Set a valueless (boolean) attribute."""
        return self.attribute(key, None, condition)

    def remove_attribute(self: T, key: str) -> T:
        """Drop an attribute, keeping the others in place."""
        return self.wrap(self._node.remove_attribute(key))

    def id(self: T, value: str) -> T:
        """Specifies a unique id for the element."""
        return self.attribute('id', value)

    def style(self: T, value: str) -> T:
        """Specifies an inline CSS style for the element."""
        return self.attribute('style', value)

    def title(self: T, value: str) -> T:
        """Specifies extra information about the element."""
        return self.attribute('title', value)

    # ==================== Class Attribute ====================

    def _classes(self) -> list[str]:
        return (self._node.get_attribute('class') or '').split()

    def _set_classes(self: T, classes: list[str]) -> T:
        if not classes:
            return self.remove_attribute('class')
        return self.attribute('class', ' '.join(classes))

    def class_(self: T, *names: str) -> T:
        """Replace the class attribute with names."""
        return self._set_classes(list(names))

    def add_class(self: T, *names: str) -> T:
        """Add class names that are not already present."""
        classes = self._classes()
        for name in names:
            if name not in classes:
                classes.append(name)
        return self._set_classes(classes)

    def remove_class(self: T, *names: str) -> T:
        """Remove class names; the attribute is dropped when empty."""
        return self._set_classes([c for c in self._classes() if c not in names])

    def toggle_class(self: T, name: str, condition: bool) -> T:
        """Add name if condition is true, remove it otherwise."""
        if condition:
            return self.add_class(name)
        return self.remove_class(name)


class Element(_NamedTag):
    """A standard element with open and close tags and children."""

    __slots__ = ()

    kind = NodeKind.STANDARD
    tag_name = ''

    def __init__(
        self, *children: Any, builder: Callable[[], Any] | None = None
    ) -> None:
        super().__init__(Node.standard(self.tag_name, _child_nodes(children, builder)))

    @classmethod
    def build(cls: type[T], func: Callable[[], Any]) -> T:
        """Create the element with children produced by func."""
        return cls(builder=func)


class VoidElement(_NamedTag):
    """A self-closing element. It never has children."""

    __slots__ = ()

    kind = NodeKind.VOID
    tag_name = ''

    def __init__(self) -> None:
        super().__init__(Node.void(self.tag_name))


class Text(Tag):
    """Raw text content."""

    __slots__ = ()

    kind = NodeKind.TEXT

    def __init__(self, contents: str) -> None:
        super().__init__(Node.text(contents))

    @property
    def contents(self) -> str:
        return self._node.contents or ''


class Comment(Tag):
    """A comment."""

    __slots__ = ()

    kind = NodeKind.COMMENT

    def __init__(self, contents: str) -> None:
        super().__init__(Node.comment(contents))

    @property
    def contents(self) -> str:
        return self._node.contents or ''


class Group(Tag):
    """A run of sibling tags kept together without a wrapping element."""

    __slots__ = ()

    kind = NodeKind.GROUP

    def __init__(
        self, *children: Any, builder: Callable[[], Any] | None = None
    ) -> None:
        super().__init__(Node.group(_child_nodes(children, builder)))

    @classmethod
    def build(cls, func: Callable[[], Any]) -> Group:
        """Create the group with children produced by func."""
        return cls(builder=func)
