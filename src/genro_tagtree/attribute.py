# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Attribute value type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Attribute:
    """A single markup attribute.

    The key is not validated. A value of None marks a valueless
    (boolean) attribute, present by name only.

    Example:
        >>> Attribute('method', 'post')
        Attribute(key='method', value='post')
        >>> Attribute('novalidate').is_flag
        True
    """

    key: str
    value: str | None = None

    @property
    def is_flag(self) -> bool:
        """True if the attribute has no value."""
        return self.value is None

    def same_key(self, other: Attribute) -> bool:
        """True if other names the same attribute (exact key match)."""
        return self.key == other.key
