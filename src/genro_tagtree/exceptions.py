# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TagTree exceptions."""

from __future__ import annotations


class TagTreeError(Exception):
    """Base exception for TagTree errors."""

    pass


class NotATagError(TagTreeError, TypeError):
    """Raised when a builder receives something that is not a Tag."""

    pass
