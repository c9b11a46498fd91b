# Copyright (C) 2020 Dmitry Marakasov <amdmi3@amdmi3.ru>
#
# This file is part of cpeparser
#
# cpeparser is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# cpeparser is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with cpeparser.  If not, see <http://www.gnu.org/licenses/>.

import string
from dataclasses import dataclass
from typing import Optional

from cpeparser.values import LogicalValue


PUNCTUATION = frozenset(string.punctuation)

_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)
_LITERAL = _ALPHANUMERIC | {'_'}
_WILDCARDS = frozenset('*?')


@dataclass(frozen=True)
class Status:
    valid: bool
    message: Optional[str] = None


VALID = Status(True)


def _invalid(message: str) -> Status:
    return Status(False, message)


def component(value: Optional[str]) -> Status:
    """Check that a single attribute value is in the well-formed format.

    Letters, digits and underscore may appear as is, any other printable
    ASCII punctuation must be quoted with a backslash. An unquoted
    asterisk is only allowed as the first or the last character, and
    unquoted question marks only as a run at either end of the value.
    """
    if value is None:
        return _invalid('value is missing')

    if value == '':
        return _invalid('value is empty')

    if value in (LogicalValue.ANY.abbreviation, LogicalValue.NA.abbreviation):
        return VALID

    length = len(value)
    has_literal = False
    prev_wildcard: Optional[str] = None
    pos = 0

    while pos < length:
        char = value[pos]

        if char == '\\':
            if pos + 1 == length:
                return _invalid('unterminated escape sequence at the end of value')

            quoted = value[pos + 1]
            if quoted in _ALPHANUMERIC:
                return _invalid(f'character {quoted!r} at position {pos + 1} must not be escaped')
            if quoted not in PUNCTUATION:
                return _invalid(f'invalid character {quoted!r} at position {pos + 1}')

            has_literal = True
            prev_wildcard = None
            pos += 2
            continue

        if char == '*':
            if pos != 0 and pos != length - 1:
                return _invalid(f'embedded unescaped asterisk at position {pos}')
            if prev_wildcard is not None:
                return _invalid(f'unescaped asterisk at position {pos} follows another wildcard')
            prev_wildcard = char
        elif char == '?':
            if prev_wildcard == '*':
                return _invalid(f'unescaped question mark at position {pos} follows an asterisk')
            if has_literal and set(value[pos:]) != {'?'}:
                return _invalid(f'embedded unescaped question mark at position {pos}')
            prev_wildcard = char
        elif char in _LITERAL:
            has_literal = True
            prev_wildcard = None
        elif char in PUNCTUATION:
            return _invalid(f'unescaped reserved character {char!r} at position {pos}')
        else:
            return _invalid(f'invalid character {char!r} at position {pos}')

        pos += 1

    return VALID
