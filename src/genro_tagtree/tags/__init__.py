# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Concrete tags - form and form control elements."""

from .controls import (
    Button,
    ButtonType,
    Fieldset,
    Input,
    InputType,
    Label,
    Legend,
    Option,
    Select,
    Textarea,
)
from .form import Enctype, Form, Method, Rel, Target

__all__ = [
    'Form',
    'Method',
    'Enctype',
    'Target',
    'Rel',
    'Input',
    'InputType',
    'Label',
    'Button',
    'ButtonType',
    'Textarea',
    'Select',
    'Option',
    'Fieldset',
    'Legend',
]
