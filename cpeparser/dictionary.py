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


import logging
import xml.etree.ElementTree as ElementTree
from typing import IO, Iterable, List

from cpeparser.cpe import Cpe
from cpeparser.exceptions import CpeError, CpeParsingError
from cpeparser.parsing import parse_formatted_string


_CPE_DICT_NS = '{http://cpe.mitre.org/dictionary/2.0}'
_CPE_EXT_NS = '{http://scap.nist.gov/schema/cpe-extension/2.3}'


def _current_names(cpe23_item: ElementTree.Element) -> List[str]:
    name = cpe23_item.attrib['name']

    deprecation = cpe23_item.find(f'{_CPE_EXT_NS}deprecation')
    if deprecation is None:
        return [name]

    replacements = [elem.attrib['name'] for elem in deprecation.iter(f'{_CPE_EXT_NS}deprecated-by')]
    if not replacements:
        raise CpeParsingError(f'Deprecation of {name} does not name a replacement')

    return replacements


def iter_cpe_dict(source: IO[bytes]) -> Iterable[Cpe]:
    """Iterate over identifiers from the official CPE dictionary.

    Items marked as deprecated are skipped. Names which carry a
    deprecation are replaced by every name they are deprecated by.
    Names which fail to parse are logged and skipped, while a malformed
    deprecation raises CpeParsingError.
    """
    root = None
    num_skipped = 0

    for event, elem in ElementTree.iterparse(source, events=('start', 'end')):
        if root is None:
            root = elem

        if event != 'end' or elem.tag != f'{_CPE_DICT_NS}cpe-item':
            continue

        cpe23_item = elem.find(f'{_CPE_EXT_NS}cpe23-item')

        if elem.attrib.get('deprecated') != 'true' and cpe23_item is not None:
            for name in _current_names(cpe23_item):
                try:
                    cpe = parse_formatted_string(name)
                except CpeError as e:
                    logging.warning(f'skipping dictionary entry {name}: {e}')
                    num_skipped += 1
                    continue

                yield cpe

        root.clear()

    if num_skipped:
        logging.info(f'{num_skipped} dictionary entries skipped')
