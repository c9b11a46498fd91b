#!/usr/bin/env python3
#
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

import argparse
import gzip
import logging
import sys
from typing import IO, Iterable, Optional

from cpeparser.cpe import Cpe
from cpeparser.cvefeed import iter_cve_feed
from cpeparser.dictionary import iter_cpe_dict
from cpeparser.exceptions import CpeError
from cpeparser.parsing import parse


def _open_data_file(path: str) -> IO[bytes]:
    if path.endswith('.gz'):
        return gzip.open(path, 'rb')
    return open(path, 'rb')


class Tool:
    _options: argparse.Namespace

    _pattern: Optional[Cpe] = None

    def __init__(self, options: argparse.Namespace) -> None:
        self._options = options

        if options.match is not None:
            self._pattern = parse(options.match)
            logging.debug(f'using pattern {self._pattern}')

    def _format(self, cpe: Cpe) -> str:
        if self._options.uri:
            return cpe.to_uri()
        return cpe.to_formatted_string()

    def _filter(self, cpes: Iterable[Cpe]) -> Iterable[Cpe]:
        for cpe in cpes:
            if self._pattern is None or self._pattern.matches(cpe):
                yield cpe

    def _convert_names(self) -> bool:
        success = True

        for name in self._options.names:
            try:
                cpe = parse(name)
                if self._pattern is None or self._pattern.matches(cpe):
                    print(self._format(cpe))
            except CpeError as e:
                logging.error(f'{name}: {e}')
                success = False

        return success

    def _process_dictionary(self) -> None:
        logging.info(f'processing dictionary {self._options.dictionary}')

        num_matches = 0
        with _open_data_file(self._options.dictionary) as stream:
            for cpe in self._filter(iter_cpe_dict(stream)):
                try:
                    print(self._format(cpe))
                except CpeError as e:
                    logging.warning(f'{cpe}: {e}')
                    continue
                num_matches += 1

        logging.info(f'dictionary processed ({num_matches} matches)')

    def _process_cve_feed(self) -> None:
        logging.info(f'processing CVE feed {self._options.cve_feed}')

        num_matches = 0
        with _open_data_file(self._options.cve_feed) as stream:
            for cve in iter_cve_feed(stream):
                for match in cve.iter_candidate_matches(self._pattern):
                    print(f'{cve.cve_id} {match!r}')
                    num_matches += 1

        logging.info(f'CVE feed processed ({num_matches} matches)')

    def run(self) -> bool:
        success = self._convert_names()

        if self._options.dictionary is not None:
            self._process_dictionary()

        if self._options.cve_feed is not None:
            self._process_cve_feed()

        return success


def main() -> int:
    parser = argparse.ArgumentParser(formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument('-d', '--debug', action='store_true', help='enable debug logging')
    parser.add_argument('-u', '--uri', action='store_true', help='output CPE 2.2 URIs instead of CPE 2.3 formatted strings')
    parser.add_argument('-m', '--match', metavar='PATTERN', help='only output names matched by this CPE')
    parser.add_argument('-D', '--dictionary', metavar='PATH', help='read names from CPE dictionary XML file (optionally gzipped)')
    parser.add_argument('-C', '--cve-feed', metavar='PATH', help='look up CVEs affecting the --match CPE in NVD JSON feed (optionally gzipped)')
    parser.add_argument('names', metavar='NAME', nargs='*', help='CPE 2.3 formatted strings or CPE 2.2 URIs to convert')

    args = parser.parse_args()

    if args.cve_feed is not None and args.match is None:
        parser.error('--cve-feed requires --match')

    logging.basicConfig(format='%(asctime)s %(levelname)-8s %(message)s', level=logging.DEBUG if args.debug else logging.INFO)

    return 0 if Tool(args).run() else 1


if __name__ == '__main__':
    sys.exit(main())
