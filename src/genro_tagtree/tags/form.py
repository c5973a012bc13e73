# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""The <form> element.

The <form> tag is used to create an HTML form for user input. It can
contain input, textarea, button, select, option, fieldset, label and
similar form controls (see the controls module).

Example:
    >>> form = (
    ...     Form(Input().name('q'), Button('Search'))
    ...     .action('/search')
    ...     .method(Method.GET)
    ...     .novalidate()
    ... )
"""

from __future__ import annotations

from enum import Enum

from ..tag import Element


class Method(str, Enum):
    """HTTP method used to send the form data."""

    GET = 'get'
    POST = 'post'


class Enctype(str, Enum):
    """Encoding of the form data (only used with method="post")."""

    URLENCODED = 'application/x-www-form-urlencoded'
    MULTIPART = 'multipart/form-data'
    PLAIN = 'text/plain'


class Target(str, Enum):
    """Where to display the response."""

    BLANK = '_blank'
    SELF = '_self'
    PARENT = '_parent'
    TOP = '_top'


class Rel(str, Enum):
    """Relationship between the form and the linked resource."""

    EXTERNAL = 'external'
    HELP = 'help'
    LICENSE = 'license'
    NEXT = 'next'
    NOFOLLOW = 'nofollow'
    NOOPENER = 'noopener'
    NOREFERRER = 'noreferrer'
    OPENER = 'opener'
    PREV = 'prev'
    SEARCH = 'search'


class Form(Element):
    """An HTML form for user input."""

    __slots__ = ()

    def accept_charset(self, value: str) -> Form:
        """Specifies the character encodings used for the form submission."""
        return self.attribute('accept-charset', value)

    def action(self, value: str) -> Form:
        """Specifies where to send the form data when the form is submitted."""
        return self.attribute('action', value)

    def autocomplete(self, value: bool = True) -> Form:
        """Specifies whether the form should have autocomplete on or off."""
        return self.attribute('autocomplete', 'on' if value else 'off')

    def enctype(self, value: Enctype | str) -> Form:
        """Specifies how the form data should be encoded."""
        return self.attribute('enctype', Enctype(value).value)

    def method(self, value: Method | str) -> Form:
        """Specifies the HTTP method to use when sending form data."""
        return self.attribute('method', Method(value).value)

    def name(self, value: str) -> Form:
        """Specifies the name of the form."""
        return self.attribute('name', value)

    def novalidate(self, condition: bool = True) -> Form:
        """Specifies that the form should not be validated when submitted."""
        return self.flag('novalidate', condition)

    def rel(self, value: Rel | str) -> Form:
        """Specifies the relationship to the linked resource."""
        return self.attribute('rel', Rel(value).value)

    def target(self, value: Target | str) -> Form:
        """Specifies where to display the response."""
        return self.attribute('target', Target(value).value)
