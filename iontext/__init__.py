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
Reads and writes a textual, human-readable data-interchange notation.

Examples
--------
>>> from iontext import parse_str
>>> value = parse_str("point::{x: 1, y: 2.5}")
>>> value.annotations
('point',)
>>> print(value)
point::{x: 1, y: 2.5}
"""

from .exception import (  # noqa: F401
    IonParseError,
    IonSyntaxError,
    LexError,
    NestingDepthError,
    NumericConversionError,
    UnexpectedEndOfInput,
)
from .lexer import Lexer  # noqa: F401
from .parser import IonParser, parse, parse_file, parse_str  # noqa: F401
from .token import Token, TokenKind  # noqa: F401
from .value import (  # noqa: F401
    Field,
    IonBool,
    IonFloat,
    IonInt,
    IonList,
    IonNull,
    IonSexp,
    IonString,
    IonStruct,
    IonSymbol,
    IonType,
    IonValue,
)
