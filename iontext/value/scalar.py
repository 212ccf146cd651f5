#
# Copyright (c) 2023 Radiance Technologies, Inc.
#
# This file is part of IONTEXT.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this program. If not, see
# <http://www.gnu.org/licenses/>.
#
"""
Defines leaf values: null, booleans, numbers, strings, and symbols.
"""
from typing import Iterable, Optional

import numpy as np

from iontext.util.string import quote
from iontext.value.node import IonType, IonValue

INT64 = np.iinfo(np.int64)
"""
The range of integer values.
"""


class IonNull(IonValue):
    """
    The null value.
    """

    ion_type = IonType.NULL

    def _payload_eq(self, other: IonValue) -> bool:
        return True

    def _render_payload(self) -> str:
        return "null"

    def to_python_ds(self) -> None:  # noqa: D102
        return None


class IonBool(IonValue):
    """
    A boolean value.
    """

    ion_type = IonType.BOOL

    def __init__(self, value: bool, annotations: Iterable[str] = ()) -> None:
        super().__init__(annotations)
        self._value = bool(value)

    @property
    def value(self) -> bool:  # noqa: D102
        return self._value

    def _payload_eq(self, other: 'IonBool') -> bool:
        return self._value == other._value

    def _render_payload(self) -> str:
        return "true" if self._value else "false"

    def to_python_ds(self) -> bool:  # noqa: D102
        return self._value


class IonInt(IonValue):
    """
    A signed 64-bit integer value.

    Raises
    ------
    ValueError
        If the value does not fit in a signed 64-bit integer.
    """

    ion_type = IonType.INT

    def __init__(self, value: int, annotations: Iterable[str] = ()) -> None:
        super().__init__(annotations)
        value = int(value)
        if not INT64.min <= value <= INT64.max:
            raise ValueError(f"Integer out of 64-bit range: {value}")
        self._value = value

    @property
    def value(self) -> int:  # noqa: D102
        return self._value

    def _payload_eq(self, other: 'IonInt') -> bool:
        return self._value == other._value

    def _render_payload(self) -> str:
        return str(self._value)

    def to_python_ds(self) -> int:  # noqa: D102
        return self._value


class IonFloat(IonValue):
    """
    A 64-bit floating-point value.
    """

    ion_type = IonType.FLOAT

    def __init__(self, value: float, annotations: Iterable[str] = ()) -> None:
        super().__init__(annotations)
        self._value = float(value)

    @property
    def value(self) -> float:  # noqa: D102
        return self._value

    def _payload_eq(self, other: 'IonFloat') -> bool:
        return self._value == other._value

    def _render_payload(self) -> str:
        """
        Render the shortest digits that round-trip, in positional form.

        The result always contains a decimal point (e.g., ``1.0``) so
        that it is read back as a float rather than an integer.
        """
        if np.isnan(self._value):
            return "nan"
        elif np.isinf(self._value):
            return "inf" if self._value > 0 else "-inf"
        return np.format_float_positional(self._value, unique=True, trim='0')

    def to_python_ds(self) -> float:  # noqa: D102
        return self._value


class _IonText(IonValue):
    """
    A value whose payload is text.
    """

    def __init__(
            self,
            text: Optional[str] = None,
            annotations: Iterable[str] = ()) -> None:
        super().__init__(annotations)
        self._text = text if text is not None else ""

    @property
    def text(self) -> str:  # noqa: D102
        return self._text

    def _payload_eq(self, other: '_IonText') -> bool:
        return self._text == other._text

    def to_python_ds(self) -> str:  # noqa: D102
        return self._text


class IonString(_IonText):
    """
    A string value, rendered double-quoted and escaped.
    """

    ion_type = IonType.STRING

    def _render_payload(self) -> str:
        return quote(self._text)


class IonSymbol(_IonText):
    """
    A symbol value.

    Symbols are always rendered single-quoted so that they are never
    confused with keywords such as ``null``.
    """

    ion_type = IonType.SYMBOL

    def _render_payload(self) -> str:
        return f"'{self._text}'"
