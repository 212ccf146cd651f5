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
Defines the abstract value node of a parsed document.
"""
import abc
from enum import Enum
from typing import Any, ClassVar, Iterable, Tuple

from iontext.util.string import is_identifier


class IonType(Enum):
    """
    Enumerates the types of values in the textual notation.
    """

    NULL = 0
    BOOL = 1
    INT = 2
    FLOAT = 3
    STRING = 4
    SYMBOL = 5
    STRUCT = 6
    LIST = 7
    SEXP = 8


class IonValue(abc.ABC):
    """
    Abstract class of a node in a parsed document tree.

    Each concrete subclass carries only the payload of its own type.
    Nodes are not modified after construction.

    Parameters
    ----------
    annotations : Iterable[str], optional
        Names of the annotations attached to the value, by default
        none.
    """

    ion_type: ClassVar[IonType]

    def __init__(self, annotations: Iterable[str] = ()) -> None:
        self._annotations = tuple(annotations)

    def __eq__(self, other: object) -> bool:  # noqa: D105
        if not isinstance(other, IonValue):
            return NotImplemented
        return (
            type(other) is type(self)
            and self._annotations == other._annotations
            and self._payload_eq(other))

    __hash__ = None

    def __repr__(self) -> str:  # noqa: D105
        return f"{type(self).__name__}({self.render()})"

    def __str__(self) -> str:
        """
        Get the textual representation of this value.
        """
        return self.render()

    @property
    def annotations(self) -> Tuple[str, ...]:
        """
        Get the names of the annotations attached to this value.
        """
        return self._annotations

    @abc.abstractmethod
    def _payload_eq(self, other: 'IonValue') -> bool:
        """
        Compare the payload of this value with another of the same type.
        """
        ...

    @abc.abstractmethod
    def _render_payload(self) -> str:
        """
        Render this value without its annotations.
        """
        ...

    def is_container(self) -> bool:
        """
        Return whether this value is a struct, list, or s-expression.
        """
        return False

    def is_scalar(self) -> bool:
        """
        Return whether this value has no children.
        """
        return not self.is_container()

    def render(self) -> str:
        """
        Render this value in the textual notation.

        Annotations are emitted as ``name::`` prefixes in order.
        For any value produced by parsing, parsing the result yields a
        value equal to this one. Text containing a backslash, which
        parsing never produces, renders with a ``\\\\`` escape that
        the lexer does not accept.

        Returns
        -------
        str
            The textual representation of this value.
        """
        prefix = ''.join(
            f"{render_annotation(name)}::" for name in self._annotations)
        return prefix + self._render_payload()

    @abc.abstractmethod
    def to_python_ds(self) -> Any:
        """
        Convert this value to plain Python data.

        Annotations are discarded.

        Returns
        -------
        Any
            None, a bool, int, float, str, list, or dict.

        See Also
        --------
        IonValue.from_python_ds : For the inverse operation.
        """
        ...

    @classmethod
    def from_python_ds(cls, python_ds: Any) -> 'IonValue':
        """
        Convert plain Python data to a value tree.

        Parameters
        ----------
        python_ds : Any
            None, a bool, int, float, str, dict with string keys, or a
            list or tuple of such data.

        Returns
        -------
        IonValue
            The equivalent value. Strings become `IonString` values and
            dictionaries become `IonStruct` values.

        Raises
        ------
        TypeError
            If the data contains an unsupported type or a non-string
            dictionary key.
        """
        from iontext.value.container import Field, IonList, IonStruct
        from iontext.value.scalar import (
            IonBool,
            IonFloat,
            IonInt,
            IonNull,
            IonString,
        )
        if python_ds is None:
            return IonNull()
        elif isinstance(python_ds, bool):
            return IonBool(python_ds)
        elif isinstance(python_ds, int):
            return IonInt(python_ds)
        elif isinstance(python_ds, float):
            return IonFloat(python_ds)
        elif isinstance(python_ds, str):
            return IonString(python_ds)
        elif isinstance(python_ds, dict):
            fields = []
            for name, child in python_ds.items():
                if not isinstance(name, str):
                    raise TypeError(f"Struct field names must be str: {name!r}")
                fields.append(Field(name, cls.from_python_ds(child)))
            return IonStruct(fields)
        elif isinstance(python_ds, (list, tuple)):
            return IonList([cls.from_python_ds(child) for child in python_ds])
        else:
            raise TypeError(
                f"Cannot convert object of type {type(python_ds)}")
        # end if


def render_annotation(name: str) -> str:
    """
    Render an annotation name, quoting it if it is not an identifier.
    """
    if is_identifier(name):
        return name
    return f"'{name}'"
