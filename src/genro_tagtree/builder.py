# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Builder mechanism - flatten declared tags into one ordered sequence.

A parent element receives its children as a flat, ordered list of tags.
The functions here let a declaration site produce that list from a mix of
literal tags, conditionals and loops, without special syntax: a builder
is just a function (or generator function) returning tags.

Accepted items:
    - a Tag: kept as is
    - a str: wrapped in a Text tag
    - None or False: a branch that is not taken, contributes nothing
    - any other ordered iterable (list, tuple, generator): flattened in
      order; mappings and sets are rejected

Example:
    Using a generator function as builder block::

        @tag_builder
        def fields(user):
            yield Label('Email')
            yield Input().name('email')
            if user.is_admin:
                yield Input().name('role')
            for tag in user.tags:
                yield Input().type_(InputType.CHECKBOX).value(tag)

        form = Form(fields(user))

    Using the combinators inline::

        form = Form(
            Label('Email'),
            when(show_role, Input().name('role')),
            each(tags, lambda tag: Option(tag).value(tag)),
        )
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Set
from functools import wraps
from typing import Any, Callable

from .exceptions import NotATagError
from .node import Node
from .tag import Tag, Text

logger = logging.getLogger(__name__)


def _flatten(items: Iterable[Any], out: list[Tag]) -> None:
    """Append the tags found in items to out, depth first."""
    for item in items:
        if item is None or item is False:
            continue
        if isinstance(item, Tag):
            out.append(item)
        elif isinstance(item, str):
            out.append(Text(item))
        elif isinstance(item, (bytes, Mapping, Set)) or not isinstance(item, Iterable):
            raise NotATagError(
                f"Expected a Tag, str, None or an iterable of tags, "
                f"got {type(item).__name__}: {item!r}"
            )
        else:
            _flatten(item, out)


def collect(*items: Any) -> list[Tag]:
    """Flatten items into a single ordered list of tags.

    Args:
        *items: Tags, strings (wrapped as Text), None/False placeholders
            for skipped branches, or iterables (possibly nested) of those.

    Returns:
        The tags in declaration order. Skipped branches leave no trace.

    Raises:
        NotATagError: If an item is bytes, a mapping, a set or any other
            non-tag value.
    """
    tags: list[Tag] = []
    _flatten(items, tags)
    logger.debug("collected %d tags", len(tags))
    return tags


def nodes(*items: Any) -> tuple[Node, ...]:
    """Flatten items like collect() and return their backing nodes."""
    return tuple(tag.node for tag in collect(*items))


def when(condition: Any, *then: Any, otherwise: Any = ()) -> list[Tag]:
    """Include then if condition is truthy, otherwise the alternative.

    Example:
        >>> when(user.is_admin, Input().name('role'))
        >>> when(logged_in, Button('Logout'), otherwise=Button('Login'))
    """
    if condition:
        return collect(*then)
    return collect(otherwise)


def each(iterable: Iterable[Any], func: Callable[[Any], Any]) -> list[Tag]:
    """Map func over iterable and flatten the results in order."""
    return collect(func(item) for item in iterable)


def build(func: Callable[[], Any]) -> list[Tag]:
    """Evaluate a builder block and flatten its result."""
    return collect(func())


def tag_builder(func: Callable[..., Any]) -> Callable[..., list[Tag]]:
    """Decorator turning a builder function into one returning list[Tag].

    The decorated function may return a list, return a single tag, or be a
    generator function yielding tags.
    """
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> list[Tag]:
        return collect(func(*args, **kwargs))

    return wrapper
