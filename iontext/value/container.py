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
Defines container values: structs, lists, and s-expressions.
"""
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from iontext.util.dataclasses import immutable_dataclass
from iontext.util.string import KEYWORDS, is_identifier, quote
from iontext.value.node import IonType, IonValue


@immutable_dataclass
class Field:
    """
    A named member of a struct.
    """

    name: str
    value: IonValue

    def render(self) -> str:
        """
        Render the field as ``name: value``.

        Names that would not be read back as a plain symbol are
        rendered as quoted strings.
        """
        name = self.name
        if not is_identifier(name) or name in KEYWORDS:
            name = quote(name)
        return f"{name}: {self.value.render()}"


class IonStruct(IonValue):
    """
    An ordered collection of named fields.

    Field order is kept for rendering but ignored by equality.
    Field names need not be unique.
    """

    ion_type = IonType.STRUCT

    def __init__(
            self,
            fields: Iterable[Field] = (),
            annotations: Iterable[str] = ()) -> None:
        super().__init__(annotations)
        self._fields = tuple(fields)

    def __contains__(self, name: str) -> bool:  # noqa: D105
        return any(f.name == name for f in self._fields)

    def __getitem__(self, name: str) -> IonValue:
        """
        Get the value of the last field with the given name.

        Raises
        ------
        KeyError
            If no field has the given name.
        """
        for f in reversed(self._fields):
            if f.name == name:
                return f.value
        raise KeyError(name)

    def __iter__(self) -> Iterator[Field]:  # noqa: D105
        return iter(self._fields)

    def __len__(self) -> int:  # noqa: D105
        return len(self._fields)

    @property
    def fields(self) -> Tuple[Field, ...]:  # noqa: D102
        return self._fields

    def _payload_eq(self, other: 'IonStruct') -> bool:
        if len(self._fields) != len(other._fields):
            return False
        remaining = list(other._fields)
        for f in self._fields:
            for i, g in enumerate(remaining):
                if f == g:
                    del remaining[i]
                    break
            else:
                return False
        return True

    def _render_payload(self) -> str:
        return "{" + ", ".join(f.render() for f in self._fields) + "}"

    def get(self,
            name: str,
            default: Optional[IonValue] = None) -> Optional[IonValue]:
        """
        Get the value of the last field with the given name, if any.
        """
        try:
            return self[name]
        except KeyError:
            return default

    def is_container(self) -> bool:  # noqa: D102
        return True

    def names(self) -> List[str]:
        """
        Get the field names in order, including duplicates.
        """
        return [f.name for f in self._fields]

    def to_python_ds(self) -> Dict[str, Any]:
        """
        Convert to a dictionary in which later duplicate names win.
        """
        return {f.name: f.value.to_python_ds() for f in self._fields}


class _IonSequence(IonValue):
    """
    An ordered sequence of values.
    """

    c_open: str
    c_close: str
    c_delim: str

    def __init__(
            self,
            elements: Iterable[IonValue] = (),
            annotations: Iterable[str] = ()) -> None:
        super().__init__(annotations)
        self._elements = tuple(elements)

    def __getitem__(self, index: int) -> IonValue:  # noqa: D105
        return self._elements[index]

    def __iter__(self) -> Iterator[IonValue]:  # noqa: D105
        return iter(self._elements)

    def __len__(self) -> int:  # noqa: D105
        return len(self._elements)

    @property
    def elements(self) -> Tuple[IonValue, ...]:  # noqa: D102
        return self._elements

    def _payload_eq(self, other: '_IonSequence') -> bool:
        return self._elements == other._elements

    def _render_payload(self) -> str:
        return (
            self.c_open + self.c_delim.join(e.render() for e in self._elements)
            + self.c_close)

    def is_container(self) -> bool:  # noqa: D102
        return True

    def to_python_ds(self) -> list:  # noqa: D102
        return [e.to_python_ds() for e in self._elements]


class IonList(_IonSequence):
    """
    A bracketed, comma-separated sequence of values.
    """

    ion_type = IonType.LIST
    c_open = "["
    c_close = "]"
    c_delim = ", "


class IonSexp(_IonSequence):
    """
    A parenthesized, space-separated sequence of values.
    """

    ion_type = IonType.SEXP
    c_open = "("
    c_close = ")"
    c_delim = " "
