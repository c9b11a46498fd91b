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

import re

from cpeparser.exceptions import CpeEncodingError, CpeParsingError
from cpeparser.validate import PUNCTUATION
from cpeparser.values import LogicalValue, Part


_ANY = LogicalValue.ANY.abbreviation
_NA = LogicalValue.NA.abbreviation

_ESCAPE_RE = re.compile(r'\\(.)', re.DOTALL)
_PERCENT_RE = re.compile(r'%([0-9A-Fa-f]{2})')

# quoted characters the formatted string binding emits unquoted
_FS_UNQUOTED = frozenset('.-_')

# characters passed through by the 2.2 URI binding
_URI_UNENCODED = frozenset('.-_')

# literal hyphen as the whole value, distinct from NA
_QUOTED_HYPHEN = '\\' + _NA

# 2.3 extension of the URI binding for wildcards
_URI_WILDCARDS = {
    '%01': '?',
    '%02': '*',
}


def from_well_formed(value: str) -> str:
    """Strip quoting, producing human readable text."""
    return _ESCAPE_RE.sub(r'\1', value)


def to_well_formed(text: str) -> str:
    """Quote every punctuation character of plain text."""
    if text in (_ANY, _NA):
        return text

    return ''.join('\\' + char if char in PUNCTUATION and char != '_' else char for char in text)


def well_formed_to_fs(value: str) -> str:
    if value in (_ANY, _NA, _QUOTED_HYPHEN):
        return value

    return _ESCAPE_RE.sub(lambda match: match.group(1) if match.group(1) in _FS_UNQUOTED else match.group(0), value)


def fs_to_well_formed(token: str) -> str:
    if token in (_ANY, _NA):
        return token

    res = ''
    escaped = False

    for char in token:
        if escaped:
            res += '\\' + char
            escaped = False
        elif char == '\\':
            escaped = True
        elif char in PUNCTUATION and char not in '_*?':
            res += '\\' + char
        else:
            res += char

    if escaped:
        raise CpeParsingError(f'Unterminated escape sequence in {token!r}')

    return res


def _pct_encode(char: str) -> str:
    if char in _URI_UNENCODED:
        return char
    return f'%{ord(char):02x}'


def well_formed_to_cpe_uri(value: str) -> str:
    """Bind a well-formed value to a CPE 2.2 URI component.

    Unquoted wildcards have no counterpart in the 2.2 URI, so values
    carrying them cannot be encoded.
    """
    if value == '' or value == _ANY:
        return ''

    if value == _NA:
        return value

    if value == _QUOTED_HYPHEN:
        return f'%{ord(_NA):02x}'

    res = ''
    escaped = False

    for char in value:
        if escaped:
            res += _pct_encode(char)
            escaped = False
        elif char == '\\':
            escaped = True
        elif char in '*?':
            raise CpeEncodingError(f'Wildcard in {value!r} cannot be represented in CPE 2.2 URI')
        else:
            res += char

    return res


def part_to_cpe_uri(part: Part) -> str:
    return part.abbreviation


def cpe_uri_to_well_formed(token: str) -> str:
    if token == '':
        return _ANY

    if token == _NA:
        return token

    res = ''
    pos = 0

    while pos < len(token):
        char = token[pos]

        if char == '%':
            code = token[pos:pos + 3]

            if code in _URI_WILDCARDS:
                res += _URI_WILDCARDS[code]
            elif _PERCENT_RE.fullmatch(code):
                decoded = chr(int(code[1:], 16))
                if decoded not in PUNCTUATION:
                    raise CpeParsingError(f'Unexpected percent-encoded character {code!r} in {token!r}')
                res += '\\' + decoded if decoded != '_' else decoded
            else:
                raise CpeParsingError(f'Malformed percent-encoding in {token!r}')

            pos += 3
            continue

        if char in PUNCTUATION and char != '_':
            res += '\\' + char
        else:
            res += char

        pos += 1

    return res
