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
Defines exceptions raised while reading the textual notation.
"""
from typing import Optional


class IonParseError(ValueError):
    """
    Base class of all errors raised while parsing.

    Parameters
    ----------
    msg : str
        A description of the problem.
    literal : Optional[str], optional
        The offending text, if any, by default None.
    source : Optional[str], optional
        The name of the input (e.g., a file path) being parsed, by
        default None for in-memory input.
    """

    def __init__(
            self,
            msg: str,
            literal: Optional[str] = None,
            source: Optional[str] = None) -> None:
        super().__init__(msg)
        self.msg = msg
        self.literal = literal
        self.source = source

    def __reduce__(self):  # noqa: D105
        return (type(self), (self.msg, self.literal, self.source))

    def __str__(self) -> str:  # noqa: D105
        if self.source:
            return f"{self.source}: {self.msg}"
        return self.msg


class LexError(IonParseError):
    """
    An unrecognized character or a malformed quoted literal.
    """

    pass


class IonSyntaxError(IonParseError):
    """
    A token appeared where the grammar does not allow it.
    """

    pass


class NumericConversionError(IonParseError):
    """
    A numeric literal could not be converted to an integer or float.
    """

    pass


class UnexpectedEndOfInput(IonParseError):
    """
    The input ended while a value was still incomplete.
    """

    pass


class NestingDepthError(IonParseError):
    """
    Containers were nested more deeply than the parser allows.
    """

    pass
