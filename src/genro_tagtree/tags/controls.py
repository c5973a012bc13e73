# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Form control elements."""

from __future__ import annotations

from enum import Enum

from ..tag import Element, VoidElement


class InputType(str, Enum):
    """Type of an <input> control."""

    BUTTON = 'button'
    CHECKBOX = 'checkbox'
    COLOR = 'color'
    DATE = 'date'
    DATETIME_LOCAL = 'datetime-local'
    EMAIL = 'email'
    FILE = 'file'
    HIDDEN = 'hidden'
    IMAGE = 'image'
    MONTH = 'month'
    NUMBER = 'number'
    PASSWORD = 'password'
    RADIO = 'radio'
    RANGE = 'range'
    RESET = 'reset'
    SEARCH = 'search'
    SUBMIT = 'submit'
    TEL = 'tel'
    TEXT = 'text'
    TIME = 'time'
    URL = 'url'
    WEEK = 'week'


class ButtonType(str, Enum):
    """Type of a <button>."""

    BUTTON = 'button'
    RESET = 'reset'
    SUBMIT = 'submit'


class Input(VoidElement):
    """An input field where the user can enter data."""

    __slots__ = ()

    def type_(self, value: InputType | str) -> Input:
        return self.attribute('type', InputType(value).value)

    def name(self, value: str) -> Input:
        return self.attribute('name', value)

    def value(self, value: str) -> Input:
        return self.attribute('value', value)

    def placeholder(self, value: str) -> Input:
        """Short hint describing the expected value."""
        return self.attribute('placeholder', value)

    def required(self, condition: bool = True) -> Input:
        return self.flag('required', condition)

    def disabled(self, condition: bool = True) -> Input:
        return self.flag('disabled', condition)

    def checked(self, condition: bool = True) -> Input:
        """Pre-selects a checkbox or radio input."""
        return self.flag('checked', condition)


class Label(Element):
    """A caption for a form control."""

    __slots__ = ()

    def for_(self, value: str) -> Label:
        """Id of the control the label is bound to."""
        return self.attribute('for', value)


class Button(Element):
    """A clickable button."""

    __slots__ = ()

    def type_(self, value: ButtonType | str) -> Button:
        return self.attribute('type', ButtonType(value).value)

    def name(self, value: str) -> Button:
        return self.attribute('name', value)

    def value(self, value: str) -> Button:
        return self.attribute('value', value)

    def disabled(self, condition: bool = True) -> Button:
        return self.flag('disabled', condition)


class Textarea(Element):
    """A multi-line text input control."""

    __slots__ = ()

    def name(self, value: str) -> Textarea:
        return self.attribute('name', value)

    def rows(self, value: int) -> Textarea:
        return self.attribute('rows', str(value))

    def cols(self, value: int) -> Textarea:
        return self.attribute('cols', str(value))

    def placeholder(self, value: str) -> Textarea:
        return self.attribute('placeholder', value)

    def required(self, condition: bool = True) -> Textarea:
        return self.flag('required', condition)


class Select(Element):
    """A drop-down list of options."""

    __slots__ = ()

    def name(self, value: str) -> Select:
        return self.attribute('name', value)

    def multiple(self, condition: bool = True) -> Select:
        """Allows more than one option to be selected."""
        return self.flag('multiple', condition)

    def required(self, condition: bool = True) -> Select:
        return self.flag('required', condition)


class Option(Element):
    """An option in a drop-down list."""

    __slots__ = ()

    def value(self, value: str) -> Option:
        return self.attribute('value', value)

    def selected(self, condition: bool = True) -> Option:
        return self.flag('selected', condition)

    def disabled(self, condition: bool = True) -> Option:
        return self.flag('disabled', condition)


class Fieldset(Element):
    """Groups related controls in a form."""

    __slots__ = ()

    def disabled(self, condition: bool = True) -> Fieldset:
        """Disables every control in the group."""
        return self.flag('disabled', condition)


class Legend(Element):
    """A caption for a fieldset."""

    __slots__ = ()
