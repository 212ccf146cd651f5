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
Test suite for tokenization.
"""

import io
import tempfile
import unittest
from typing import List

from iontext.lexer import CharSource, Lexer
from iontext.token import Token, TokenKind


def kinds(text: str) -> List[TokenKind]:
    """
    Get the kinds of all tokens scanned from the given text.
    """
    return [t.kind for t in Lexer(text)]


class TestLexer(unittest.TestCase):
    """
    Test suite for `Lexer`.
    """

    def test_punctuation(self):
        """
        Verify that single- and double-character tokens are recognized.
        """
        self.assertEqual(
            kinds("{}[](),:::"),
            [
                TokenKind.OPEN_BRACE,
                TokenKind.CLOSE_BRACE,
                TokenKind.OPEN_BRACKET,
                TokenKind.CLOSE_BRACKET,
                TokenKind.OPEN_PAREN,
                TokenKind.CLOSE_PAREN,
                TokenKind.COMMA,
                TokenKind.DOUBLE_COLON,
                TokenKind.COLON
            ])

    def test_whitespace(self):
        """
        Verify that a run of whitespace is a single token.
        """
        lexer = Lexer(" \t\n x")
        self.assertEqual(lexer.scan(), Token(TokenKind.WHITESPACE, " \t\n "))
        self.assertEqual(lexer.scan(), Token(TokenKind.SYMBOL, "x"))

    def test_identifier(self):
        """
        Verify that identifiers, including keywords, are symbols.
        """
        lexer = Lexer("abc_1 true null")
        self.assertEqual(lexer.scan(), Token(TokenKind.SYMBOL, "abc_1"))
        lexer.scan()
        self.assertEqual(lexer.scan(), Token(TokenKind.SYMBOL, "true"))
        lexer.scan()
        self.assertEqual(lexer.scan(), Token(TokenKind.SYMBOL, "null"))

    def test_numbers(self):
        """
        Verify that numeric literals are scanned by digit set.
        """
        self.assertEqual(Lexer("123,").scan(), Token(TokenKind.NUMBER, "123"))
        self.assertEqual(Lexer("1.5.2").scan(), Token(TokenKind.NUMBER, "1.5.2"))
        self.assertEqual(
            Lexer("0xFFaa]").scan(),
            Token(TokenKind.NUMBER,
                  "0xFFaa"))
        self.assertEqual(
            Lexer("0b1012").scan(),
            Token(TokenKind.NUMBER,
                  "0b101"))
        self.assertEqual(Lexer("0x").scan(), Token(TokenKind.NUMBER, "0x"))
        self.assertEqual(Lexer("0").scan(), Token(TokenKind.NUMBER, "0"))
        lexer = Lexer("0y")
        self.assertEqual(lexer.scan(), Token(TokenKind.NUMBER, "0"))
        self.assertEqual(lexer.scan(), Token(TokenKind.SYMBOL, "y"))

    def test_quoted(self):
        """
        Verify that quoted literals are unescaped.
        """
        self.assertEqual(
            Lexer('"a\\tb\\nc\\rd\\"e"').scan(),
            Token(TokenKind.STRING,
                  'a\tb\nc\rd"e'))
        self.assertEqual(
            Lexer("'hello world'").scan(),
            Token(TokenKind.SYMBOL,
                  "hello world"))
        self.assertEqual(Lexer('""').scan(), Token(TokenKind.STRING, ""))
        self.assertEqual(
            Lexer("'say \"hi\"'").scan(),
            Token(TokenKind.SYMBOL,
                  'say "hi"'))

    def test_line_continuation(self):
        """
        Verify that an escaped newline drops the following indentation.
        """
        self.assertEqual(
            Lexer('"abc\\\n   def"').scan(),
            Token(TokenKind.STRING,
                  "abcdef"))

    def test_illegal(self):
        """
        Verify that unrecognized input yields illegal tokens.
        """
        self.assertEqual(Lexer('"\\q"').scan(), Token(TokenKind.ILLEGAL, "\\q"))
        self.assertEqual(Lexer("-1").scan(), Token(TokenKind.ILLEGAL, "-"))
        self.assertEqual(Lexer("/x").scan(), Token(TokenKind.ILLEGAL, "/"))
        self.assertEqual(Lexer('"abc').scan(), Token(TokenKind.ILLEGAL, '"abc'))

    def test_comments(self):
        """
        Verify that line comments are skipped.
        """
        self.assertEqual(
            kinds("// one\n// two\n42 // three"),
            [TokenKind.NUMBER,
             TokenKind.WHITESPACE])
        self.assertEqual(kinds("// only a comment"), [])

    def test_eof(self):
        """
        Verify that the end of input is reported repeatedly.
        """
        lexer = Lexer("")
        self.assertTrue(lexer.scan().is_eof())
        self.assertTrue(lexer.scan().is_eof())
        self.assertEqual(lexer.scan().literal, "")

    def test_pushback(self):
        """
        Verify that a single pushed-back token is returned next.
        """
        lexer = Lexer("a b")
        first = lexer.scan()
        lexer.pushback(first)
        self.assertEqual(lexer.scan(), first)
        second = lexer.scan()
        self.assertEqual(second.kind, TokenKind.WHITESPACE)
        # a second pushback replaces the first
        lexer.pushback(first)
        lexer.pushback(second)
        self.assertEqual(lexer.scan(), second)
        self.assertEqual(lexer.scan(), Token(TokenKind.SYMBOL, "b"))

    def test_binary_source(self):
        """
        Verify that binary input is decoded without over-reading.
        """
        stream = io.BytesIO("'é' rest".encode("utf-8"))
        lexer = Lexer(stream)
        self.assertEqual(lexer.scan(), Token(TokenKind.SYMBOL, "é"))
        self.assertEqual(stream.read(), b" rest")


class TestCharSource(unittest.TestCase):
    """
    Test suite for `CharSource`.
    """

    def test_unread(self):
        """
        Verify that one character can be returned to the source.
        """
        chars = CharSource("ab")
        self.assertEqual(chars.read(), "a")
        chars.unread("a")
        self.assertEqual(chars.read(), "a")
        self.assertEqual(chars.read(), "b")
        self.assertEqual(chars.read(), "")
        chars.unread("")
        self.assertEqual(chars.read(), "")

    def test_text_mode_streams(self):
        """
        Verify that text streams are detected by the data they return.
        """
        with tempfile.SpooledTemporaryFile(mode="w+") as f:
            self.assertNotIsInstance(f, io.TextIOBase)
            f.write("'é' [1]")
            f.seek(0)
            chars = CharSource(f)
            self.assertEqual(chars.read(), "'")
            self.assertEqual(chars.read(), "é")
            self.assertEqual(chars.read(), "'")
            self.assertEqual(kinds(f), [TokenKind.WHITESPACE,
                                        TokenKind.OPEN_BRACKET,
                                        TokenKind.NUMBER,
                                        TokenKind.CLOSE_BRACKET])
        with tempfile.SpooledTemporaryFile(mode="w+b") as f:
            f.write("'é'".encode("utf-8"))
            f.seek(0)
            self.assertEqual(
                Lexer(f).scan(),
                Token(TokenKind.SYMBOL,
                      "é"))

    def test_tokens_are_hashable(self):
        """
        Verify that equal tokens hash alike.
        """
        self.assertEqual(
            len({Token(TokenKind.COMMA,
                       ","),
                 Token(TokenKind.COMMA,
                       ",")}),
            1)


if __name__ == '__main__':
    unittest.main()
