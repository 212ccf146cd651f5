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
Defines a recursive-descent parser of the textual notation.
"""
import logging
import os
from typing import NoReturn, Optional, Tuple, Type, Union

import numpy as np

from iontext.exception import (
    IonParseError,
    IonSyntaxError,
    LexError,
    NestingDepthError,
    NumericConversionError,
    UnexpectedEndOfInput,
)
from iontext.lexer import Lexer, Source
from iontext.token import CLOSING_KINDS, Token, TokenKind
from iontext.util.logging import log_and_raise
from iontext.value import (
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
    IonValue,
)
from iontext.value.scalar import INT64

PathLike = Union[str, os.PathLike]
Annotations = Tuple[str, ...]

_OPENING_KINDS = frozenset(
    {TokenKind.OPEN_BRACE,
     TokenKind.OPEN_BRACKET,
     TokenKind.OPEN_PAREN})


class IonParser:
    """
    Parses a single value from a stream of tokens.

    The parser keeps its own single-token pushback slot, independent of
    the lexer's, which it uses to look past a symbol for an annotation
    separator.

    Parameters
    ----------
    lexer : Lexer
        The source of tokens.
    source : Optional[str], optional
        A name for the input (e.g., a file path) reported in errors, by
        default None.
    """

    logger = logging.getLogger(__name__)

    MAX_DEPTH = 100
    """
    The maximum number of containers that may be open at once.

    Deeper input raises `NestingDepthError` before the interpreter's
    recursion limit is reached.
    """

    def __init__(self, lexer: Lexer, source: Optional[str] = None) -> None:
        self._lexer = lexer
        self._source = source
        self._buffered: Optional[Token] = None
        self._depth = 0

    def _scan(self) -> Token:
        if self._buffered is not None:
            token, self._buffered = self._buffered, None
            return token
        return self._lexer.scan()

    def _unscan(self, token: Token) -> None:
        self._buffered = token

    def _scan_ignore_whitespace(self) -> Token:
        token = self._scan()
        while token.kind == TokenKind.WHITESPACE:
            token = self._scan()
        return token

    def _raise(
            self,
            error: Type[IonParseError],
            msg: str,
            literal: Optional[str] = None) -> NoReturn:
        log_and_raise(self.logger, error(msg, literal, self._source))

    def parse_value(self) -> Optional[IonValue]:
        """
        Parse the next complete value.

        Returns
        -------
        Optional[IonValue]
            The parsed value, or None if the input is exhausted before
            any value begins.

        Raises
        ------
        IonParseError
            If the input is malformed.
        """
        return self._parse_token(self._scan_ignore_whitespace())

    def _parse_token(  # noqa: C901
            self,
            token: Token,
            annotations: Annotations = ()) -> Optional[IonValue]:
        """
        Parse the value that begins with the given token.

        Commas and colons in place of a value produce no value (None)
        unless an annotation requires one.
        """
        kind = token.kind
        if kind == TokenKind.EOF:
            if annotations:
                self._raise(
                    UnexpectedEndOfInput,
                    f"Unexpected EOF after annotation {annotations[0]!r}")
            return None
        elif kind == TokenKind.ILLEGAL:
            self._raise_illegal(token.literal)
        elif kind == TokenKind.SYMBOL:
            return self._parse_symbol(token.literal, annotations)
        elif kind in _OPENING_KINDS:
            return self._parse_nested(token, annotations)
        elif kind in CLOSING_KINDS or kind == TokenKind.DOUBLE_COLON:
            self._raise(IonSyntaxError, f"Unexpected {kind}", token.literal)
        elif kind == TokenKind.COMMA or kind == TokenKind.COLON:
            if annotations:
                self._raise(
                    IonSyntaxError,
                    f"Expected a value after annotation {annotations[0]!r}, "
                    f"encountered {kind}",
                    token.literal)
            return None
        elif kind == TokenKind.NUMBER:
            return self._parse_number(token.literal, annotations)
        elif kind == TokenKind.STRING:
            return IonString(token.literal, annotations)
        self._raise(IonSyntaxError, f"Token not handled: {token}", token.literal)

    def _raise_illegal(self, literal: str) -> NoReturn:
        if literal.startswith(('"', "'")):
            msg = f"Unterminated quoted literal: {literal!r}"
        elif literal.startswith("\\"):
            msg = f"Invalid escape sequence: {literal!r}"
        else:
            msg = f"Unexpected character: {literal!r}"
        self._raise(LexError, msg, literal)

    def _parse_symbol(self, literal: str, annotations: Annotations) -> IonValue:
        """
        Parse a symbol, keyword, or annotated value.
        """
        next_token = self._scan_ignore_whitespace()
        if next_token.kind == TokenKind.DOUBLE_COLON:
            if annotations:
                self._raise(
                    IonSyntaxError,
                    "Multiple annotations are not supported: "
                    f"{annotations[0]}::{literal}::",
                    literal)
            return self._parse_token(self._scan_ignore_whitespace(), (literal,))
        self._unscan(next_token)
        if literal == "true":
            return IonBool(True, annotations)
        elif literal == "false":
            return IonBool(False, annotations)
        elif literal == "null":
            return IonNull(annotations)
        return IonSymbol(literal, annotations)

    def _parse_number(self, literal: str, annotations: Annotations) -> IonValue:
        """
        Convert a numeric literal to a 64-bit float or signed integer.

        Literals with a decimal point are floats; the ``0x`` and ``0b``
        radix prefixes are only allowed on integers.
        """
        if "." in literal:
            if not literal.startswith(("0x", "0b")):
                try:
                    value = float(literal)
                except ValueError:
                    pass
                else:
                    if np.isfinite(value):
                        return IonFloat(value, annotations)
            self._raise(
                NumericConversionError,
                f"Cannot parse real number: {literal!r}",
                literal)
        base = 10
        digits = literal
        if literal.startswith("0x"):
            base = 16
            digits = literal[2 :]
        elif literal.startswith("0b"):
            base = 2
            digits = literal[2 :]
        try:
            value = int(digits, base)
        except ValueError:
            value = None
        if value is None or not INT64.min <= value <= INT64.max:
            self._raise(
                NumericConversionError,
                f"Cannot parse base {base} integer: {digits!r}",
                literal)
        return IonInt(value, annotations)

    def _parse_nested(
            self,
            token: Token,
            annotations: Annotations) -> IonValue:
        """
        Parse the container opened by `token`, tracking nesting depth.
        """
        if self._depth >= self.MAX_DEPTH:
            self._raise(
                NestingDepthError,
                f"Containers nested deeper than {self.MAX_DEPTH} levels",
                token.literal)
        self._depth += 1
        try:
            if token.kind == TokenKind.OPEN_BRACE:
                return self._parse_struct(annotations)
            elif token.kind == TokenKind.OPEN_PAREN:
                return self._parse_sequence(TokenKind.CLOSE_PAREN, annotations)
            return self._parse_sequence(TokenKind.CLOSE_BRACKET, annotations)
        finally:
            self._depth -= 1

    def _parse_sequence(
            self,
            end: TokenKind,
            annotations: Annotations) -> IonValue:
        """
        Parse the elements of a list or s-expression up to `end`.

        Commas between elements are skipped wherever they appear.
        """
        elements = []
        token = self._scan_ignore_whitespace()
        while not token.is_eof():
            if token.kind in (TokenKind.CLOSE_BRACKET, TokenKind.CLOSE_PAREN):
                if token.kind != end:
                    self._raise(
                        IonSyntaxError,
                        f"Bad sequence, expecting {end}, "
                        f"encountered {token.kind}",
                        token.literal)
                if end == TokenKind.CLOSE_PAREN:
                    return IonSexp(elements, annotations)
                return IonList(elements, annotations)
            element = self._parse_token(token)
            if element is not None:
                elements.append(element)
            token = self._scan_ignore_whitespace()
        self._raise(UnexpectedEndOfInput, "Unexpected EOF")

    def _parse_struct(self, annotations: Annotations) -> IonValue:
        """
        Parse the fields of a struct up to the closing brace.
        """
        fields = []
        token = self._scan_ignore_whitespace()
        while not token.is_eof():
            if token.kind == TokenKind.CLOSE_BRACE:
                return IonStruct(fields, annotations)
            elif token.kind == TokenKind.COMMA:
                token = self._scan_ignore_whitespace()
                continue
            name = self._parse_token(token)
            if (not isinstance(name,
                               (IonSymbol,
                                IonString)) or name.annotations):
                self._raise(
                    IonSyntaxError,
                    f"Invalid struct field name: {name!r}",
                    token.literal)
            token = self._scan_ignore_whitespace()
            if token.kind != TokenKind.COLON:
                if token.is_eof():
                    break
                self._raise(
                    IonSyntaxError,
                    f"Bad struct syntax, encountered {token.kind}",
                    token.literal)
            fields.append(Field(name.text, self._parse_field_value(name.text)))
            token = self._scan_ignore_whitespace()
        self._raise(UnexpectedEndOfInput, "Unexpected EOF")

    def _parse_field_value(self, name: str) -> IonValue:
        token = self._scan_ignore_whitespace()
        if token.is_eof():
            self._raise(UnexpectedEndOfInput, "Unexpected EOF")
        value = self._parse_token(token)
        if value is None:
            self._raise(
                IonSyntaxError,
                f"Missing value for struct field {name!r}, "
                f"encountered {token.kind}",
                token.literal)
        return value

    @classmethod
    def parse(
            cls,
            source: Source,
            encoding: str = "utf-8",
            source_name: Optional[str] = None) -> Optional[IonValue]:
        """
        Parse exactly one top-level value.

        Any content after the value is left unread.

        Parameters
        ----------
        source : Source
            A binary or text stream positioned at the start of the
            value, or a `str` or `bytes` object.
        encoding : str, optional
            The encoding of binary input, by default UTF-8.
        source_name : Optional[str], optional
            A name for the input reported in errors, by default None.

        Returns
        -------
        Optional[IonValue]
            The parsed value, or None if the input is empty (or holds
            only whitespace and comments).

        Raises
        ------
        LexError
            If an unrecognized character or malformed quoted literal is
            encountered.
        IonSyntaxError
            If a token appears where the grammar does not allow it.
        NumericConversionError
            If a numeric literal cannot be converted.
        UnexpectedEndOfInput
            If the input ends inside a container or after an
            annotation.
        NestingDepthError
            If containers are nested more than `MAX_DEPTH` levels deep.
        """
        parser = cls(Lexer(source, encoding), source_name)
        value = parser.parse_value()
        cls.logger.debug(
            f"Parsed {value.ion_type if value is not None else 'nothing'}"
            f" from {source_name or type(source).__name__}")
        return value

    @classmethod
    def parse_str(cls, text: str) -> Optional[IonValue]:
        """
        Parse exactly one top-level value from a string.
        """
        return cls.parse(text)

    @classmethod
    def parse_file(
            cls,
            path: PathLike,
            encoding: str = "utf-8") -> Optional[IonValue]:
        """
        Parse exactly one top-level value from a file.

        The file is closed before returning, whether or not parsing
        succeeds.

        Parameters
        ----------
        path : PathLike
            The path to the file.
        encoding : str, optional
            The encoding of the file, by default UTF-8.

        Returns
        -------
        Optional[IonValue]
            The parsed value, or None if the file holds no value.

        Raises
        ------
        OSError
            If the file cannot be opened.
        IonParseError
            If the file content is malformed, with the path recorded as
            the error's `source`.
        """
        with open(path, "rb") as f:
            return cls.parse(f, encoding, source_name=str(path))


parse = IonParser.parse
parse_str = IonParser.parse_str
parse_file = IonParser.parse_file
