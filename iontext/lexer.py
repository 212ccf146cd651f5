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
Defines a tokenizer of the textual notation.
"""
import codecs
import io
import logging
from typing import IO, Optional, Union

from iontext.token import EOF_TOKEN, PUNCTUATION, Token, TokenKind

logger = logging.getLogger(__name__)

_WHITESPACE = frozenset(" \t\n\r")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGITS = frozenset("0123456789")
_IDENTIFIER_CHARS = _LETTERS | _DIGITS | {"_"}

_DECIMAL_DIGITS = _DIGITS | {"."}
_HEX_DIGITS = _DIGITS | frozenset("abcdefABCDEF.")
_BINARY_DIGITS = frozenset("01.")

# Escape sequences valid within quoted symbols and strings.
_ESCAPES = {
    '"': '"',
    't': '\t',
    'n': '\n',
    'r': '\r',
}

Source = Union[str, bytes, IO[str], IO[bytes]]


class CharSource:
    """
    A character reader with a single character of pushback.

    Whether a stream is textual is decided by the type of data it
    returns rather than by its class, so text-mode file objects that do
    not derive from `io.TextIOBase` are read as text too.
    Binary streams are decoded incrementally one byte at a time so that
    no more input is consumed than has been scanned.

    Parameters
    ----------
    source : Source
        A string, bytes, or a text or binary stream.
    encoding : str, optional
        The encoding of binary input, by default UTF-8.
    """

    def __init__(self, source: Source, encoding: str = "utf-8") -> None:
        if isinstance(source, str):
            source = io.StringIO(source)
        elif isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(source)
        self._stream = source
        self._decoder = codecs.getincrementaldecoder(encoding)()
        self._unread: Optional[str] = None

    def read(self) -> str:
        """
        Read the next character, or the empty string at end of input.
        """
        if self._unread is not None:
            ch, self._unread = self._unread, None
            return ch
        data = self._stream.read(1)
        if isinstance(data, str):
            return data
        while data:
            ch = self._decoder.decode(data)
            if ch:
                return ch
            data = self._stream.read(1)
        return self._decoder.decode(b"", final=True)

    def unread(self, ch: str) -> None:
        """
        Return a character to be produced by the next `read`.

        The end of input (an empty string) is never stored since it is
        reproduced by the underlying stream anyway.
        """
        if ch:
            self._unread = ch


class Lexer:
    """
    Converts a character stream into a sequence of classified tokens.

    Whitespace is returned as tokens while comments are skipped
    entirely.
    At most one scanned token may be pushed back at a time; a second
    `pushback` before the next `scan` replaces the first.

    Parameters
    ----------
    source : Source
        The input to tokenize.
    encoding : str, optional
        The encoding of binary input, by default UTF-8.
    """

    def __init__(self, source: Source, encoding: str = "utf-8") -> None:
        self._chars = CharSource(source, encoding)
        self._pushed: Optional[Token] = None

    def __iter__(self):
        """
        Yield tokens up to, but not including, the end of input.
        """
        while True:
            token = self.scan()
            if token.is_eof():
                return
            yield token

    def pushback(self, token: Token) -> None:
        """
        Restore a previously scanned token.

        Parameters
        ----------
        token : Token
            The token to be returned by the next call to `scan`.
        """
        self._pushed = token

    def scan(self) -> Token:
        """
        Scan the next token.

        Returns
        -------
        Token
            The next token. Once the input is exhausted, an EOF token is
            returned on every call.
        """
        if self._pushed is not None:
            token, self._pushed = self._pushed, None
            return token
        while True:
            ch = self._chars.read()
            if ch == "":
                return EOF_TOKEN
            elif ch == '/':
                next_ch = self._chars.read()
                if next_ch == '/':
                    # comments are transparent; scan again
                    self._skip_line()
                    continue
                self._chars.unread(next_ch)
                return Token(TokenKind.ILLEGAL, ch)
            else:
                return self._scan_from(ch)

    def _scan_from(self, ch: str) -> Token:
        """
        Scan a token that begins with the given character.
        """
        if ch in _WHITESPACE:
            return self._scan_whitespace(ch)
        elif ch in _LETTERS:
            return self._scan_identifier(ch)
        elif ch in _DIGITS:
            return self._scan_number(ch)
        elif ch == ':':
            next_ch = self._chars.read()
            if next_ch == ':':
                return Token(TokenKind.DOUBLE_COLON, "::")
            self._chars.unread(next_ch)
            return Token(TokenKind.COLON, ch)
        elif ch == "'":
            return self._scan_quoted(TokenKind.SYMBOL, ch)
        elif ch == '"':
            return self._scan_quoted(TokenKind.STRING, ch)
        elif ch in PUNCTUATION:
            return Token(PUNCTUATION[ch], ch)
        else:
            return Token(TokenKind.ILLEGAL, ch)

    def _scan_run(self, first: str, allowed: frozenset) -> str:
        """
        Read `first` and every following character in `allowed`.
        """
        buf = [first]
        while True:
            ch = self._chars.read()
            if ch in allowed:
                buf.append(ch)
            else:
                self._chars.unread(ch)
                break
        return ''.join(buf)

    def _scan_whitespace(self, first: str) -> Token:
        return Token(TokenKind.WHITESPACE, self._scan_run(first, _WHITESPACE))

    def _scan_identifier(self, first: str) -> Token:
        return Token(
            TokenKind.SYMBOL,
            self._scan_run(first,
                           _IDENTIFIER_CHARS))

    def _scan_number(self, first: str) -> Token:
        """
        Scan a numeric literal without validating it.

        A leading ``0x`` or ``0b`` selects the hexadecimal or binary
        digit set.
        """
        prefix = first
        digits = _DECIMAL_DIGITS
        if first == '0':
            ch = self._chars.read()
            if ch == 'x':
                digits = _HEX_DIGITS
                prefix += ch
            elif ch == 'b':
                digits = _BINARY_DIGITS
                prefix += ch
            else:
                self._chars.unread(ch)
        ch = self._chars.read()
        if ch in digits:
            return Token(TokenKind.NUMBER, prefix + self._scan_run(ch, digits))
        self._chars.unread(ch)
        return Token(TokenKind.NUMBER, prefix)

    def _scan_quoted(self, kind: TokenKind, delim: str) -> Token:
        r"""
        Scan a delimited literal, resolving escape sequences.

        A backslash followed by a newline continues the literal on the
        next line, discarding the line break and any whitespace that
        immediately follows it.

        Returns
        -------
        Token
            A token of the given `kind` with the unescaped content, or an
            ILLEGAL token carrying either an unsupported escape sequence
            (e.g., ``\q``) or, if the input ends before the closing
            delimiter, the opening delimiter and the content read so far.
        """
        buf = []
        escaped = False
        while True:
            ch = self._chars.read()
            if ch == "":
                logger.debug(f"Unterminated literal opened by {delim}")
                return Token(TokenKind.ILLEGAL, delim + ''.join(buf))
            elif escaped:
                escaped = False
                if ch in _ESCAPES:
                    buf.append(_ESCAPES[ch])
                elif ch == '\n':
                    self._skip_whitespace()
                else:
                    return Token(TokenKind.ILLEGAL, "\\" + ch)
            elif ch == delim:
                break
            elif ch == '\\':
                escaped = True
            else:
                buf.append(ch)
        return Token(kind, ''.join(buf))

    def _skip_line(self) -> None:
        while True:
            ch = self._chars.read()
            if ch == "" or ch == '\n':
                break

    def _skip_whitespace(self) -> None:
        while True:
            ch = self._chars.read()
            if ch not in _WHITESPACE:
                self._chars.unread(ch)
                break
