# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-TagTree - Immutable markup trees with a declarative builder.

A lightweight, zero-dependency library for composing typed element trees
(tags, attributes, children) that a separate serializer turns into markup.
"""

__version__ = "0.1.0"

from .attribute import Attribute
from .builder import build, collect, each, nodes, tag_builder, when
from .exceptions import NotATagError, TagTreeError
from .node import Node, NodeKind, add_or_replace
from .tag import Comment, Element, Group, Tag, Text, VoidElement

__all__ = [
    # Core classes
    "Attribute",
    "Node",
    "NodeKind",
    "add_or_replace",
    # Tag capability
    "Tag",
    "Element",
    "VoidElement",
    "Text",
    "Comment",
    "Group",
    # Builder
    "collect",
    "nodes",
    "when",
    "each",
    "build",
    "tag_builder",
    # Exceptions
    "TagTreeError",
    "NotATagError",
]
