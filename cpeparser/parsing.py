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

from cpeparser.convert import cpe_uri_to_well_formed, fs_to_well_formed
from cpeparser.cpe import Cpe
from cpeparser.exceptions import CpeParsingError
from cpeparser.util import escaped_split
from cpeparser.values import Part


_FS_PREFIX = 'cpe:2.3:'
_URI_PREFIX = 'cpe:/'

_FS_COMPONENTS = 13
_URI_COMPONENTS = 7
_PACKED_EDITION_COMPONENTS = 6


def parse_formatted_string(cpe_str: str) -> Cpe:
    if not cpe_str.lower().startswith(_FS_PREFIX):
        raise CpeParsingError(f'Not a CPE 2.3 formatted string: {cpe_str!r}')

    components = escaped_split(cpe_str, ':')

    if len(components) != _FS_COMPONENTS:
        raise CpeParsingError(f'Expected {_FS_COMPONENTS} components in {cpe_str!r}, got {len(components)}')

    _, _, part, *attributes = components

    return Cpe(Part.from_abbreviation(part), *map(fs_to_well_formed, attributes))


def parse_uri(cpe_str: str) -> Cpe:
    if not cpe_str.lower().startswith(_URI_PREFIX):
        raise CpeParsingError(f'Not a CPE 2.2 URI: {cpe_str!r}')

    components = cpe_str[len(_URI_PREFIX):].split(':')

    if len(components) > _URI_COMPONENTS:
        raise CpeParsingError(f'Too many components in {cpe_str!r}')

    components += [''] * (_URI_COMPONENTS - len(components))

    part, vendor, product, version, update, edition, language = components

    extended = [''] * 4
    if edition.startswith('~'):
        packed = edition.split('~')
        if len(packed) != _PACKED_EDITION_COMPONENTS:
            raise CpeParsingError(f'Malformed packed edition {edition!r} in {cpe_str!r}')
        _, edition, *extended = packed

    return Cpe(
        Part.from_abbreviation(part),
        cpe_uri_to_well_formed(vendor),
        cpe_uri_to_well_formed(product),
        cpe_uri_to_well_formed(version),
        cpe_uri_to_well_formed(update),
        cpe_uri_to_well_formed(edition),
        cpe_uri_to_well_formed(language),
        *map(cpe_uri_to_well_formed, extended),
    )


def parse(cpe_str: str) -> Cpe:
    """Parse CPE 2.3 formatted string or CPE 2.2 URI."""
    lowered = cpe_str.lower()

    if lowered.startswith(_FS_PREFIX):
        return parse_formatted_string(cpe_str)
    elif lowered.startswith(_URI_PREFIX):
        return parse_uri(cpe_str)

    raise CpeParsingError(f'Unrecognized CPE name: {cpe_str!r}')
