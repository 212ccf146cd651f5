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
String escaping and quoting utilities for rendering.
"""

import re

_identifier_regex = re.compile(r"[A-Za-z][A-Za-z0-9_]*")
_escape_regex = re.compile('(["\\\\\t\n\r])')

_escaped_chars = {x: repr(x)[1 :-1]
                  for x in "\t\n\r"} | {x: "\\" + x for x in "\"\\"}

KEYWORDS = frozenset({"true", "false", "null"})
"""
Identifiers that denote literals rather than symbols.
"""


def escape(s: str) -> str:
    r"""
    Escape double quotes, backslashes, tabs, newlines, and returns.

    Parameters
    ----------
    s : str
        A string.

    Returns
    -------
    str
        The escaped string, e.g., ``a"b`` becomes ``a\"b``.
    """
    return _escape_regex.sub(lambda m: _escaped_chars[m.group(0)], s)


def quote(s: str) -> str:
    """
    Escape the given string and surround it in double quotes.
    """
    return f'"{escape(s)}"'


def is_identifier(s: str) -> bool:
    """
    Return whether `s` would be read back as a bare symbol token.

    Keywords such as ``true`` are lexically identifiers, so they are
    accepted here as well.
    """
    return _identifier_regex.fullmatch(s) is not None
