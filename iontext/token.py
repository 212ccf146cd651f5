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
Abstractions for lexical tokens of the textual notation.
"""
from enum import Enum

from iontext.util.dataclasses import immutable_dataclass


class TokenKind(Enum):
    """
    The classification of a lexical token.
    """

    ILLEGAL = 0
    EOF = 1
    WHITESPACE = 2
    COMMA = 3
    COLON = 4
    DOUBLE_COLON = 5
    SYMBOL = 6
    STRING = 7
    OPEN_BRACE = 8
    CLOSE_BRACE = 9
    OPEN_BRACKET = 10
    CLOSE_BRACKET = 11
    OPEN_PAREN = 12
    CLOSE_PAREN = 13
    NUMBER = 14

    def __str__(self) -> str:  # noqa: D105
        return self.name


CLOSING_KINDS = frozenset(
    {TokenKind.CLOSE_BRACE,
     TokenKind.CLOSE_BRACKET,
     TokenKind.CLOSE_PAREN})
"""
Tokens that close a container.
"""

PUNCTUATION = {
    ',': TokenKind.COMMA,
    '{': TokenKind.OPEN_BRACE,
    '}': TokenKind.CLOSE_BRACE,
    '[': TokenKind.OPEN_BRACKET,
    ']': TokenKind.CLOSE_BRACKET,
    '(': TokenKind.OPEN_PAREN,
    ')': TokenKind.CLOSE_PAREN,
}
"""
Single-character tokens.
"""


@immutable_dataclass
class Token:
    """
    A lexical token paired with its literal text.

    For quoted symbols and strings, the literal is the unescaped content
    without the surrounding delimiters.
    """

    kind: TokenKind
    literal: str = ""

    def __str__(self) -> str:
        """
        Get a condensed representation for diagnostics.
        """
        return f"{self.kind} {self.literal!r}"

    def is_eof(self) -> bool:
        """
        Return whether this token marks the end of input.
        """
        return self.kind == TokenKind.EOF


EOF_TOKEN = Token(TokenKind.EOF, "")
