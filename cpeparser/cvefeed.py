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
from dataclasses import dataclass, field
from typing import Any, IO, Iterable, List, Optional, Union

from jsonslicer import JsonSlicer

from cpeparser.cpe import Cpe
from cpeparser.exceptions import CpeError, CpeParsingError
from cpeparser.parsing import parse_formatted_string
from cpeparser.values import LogicalValue


@dataclass(unsafe_hash=True)
class CpeMatch:
    vulnerable: bool
    criteria: Cpe
    start_version: Optional[str] = None
    end_version: Optional[str] = None
    start_version_excluded: bool = False
    end_version_excluded: bool = False

    def __repr__(self) -> str:
        return f'{"+" if self.vulnerable else "-"}{self.criteria} {"(" if self.start_version_excluded else "["}{self.start_version}, {self.end_version}{")" if self.end_version_excluded else "]"}'

    @property
    def has_version_range(self) -> bool:
        return self.start_version is not None or self.end_version is not None

    @staticmethod
    def parse(data: Any) -> 'CpeMatch':
        res = CpeMatch(
            vulnerable=data['vulnerable'],
            criteria=parse_formatted_string(data['cpe23Uri']),
        )

        if res.criteria.well_formed('version') != LogicalValue.ANY.abbreviation:
            if any(key in data for key in ('versionStartExcluding', 'versionStartIncluding', 'versionEndExcluding', 'versionEndIncluding')):
                raise CpeParsingError(f'Unexpected version range for versioned CPE {data["cpe23Uri"]}')
        else:
            if 'versionStartExcluding' in data:
                res.start_version = data['versionStartExcluding']
                res.start_version_excluded = True
            if 'versionStartIncluding' in data:
                res.start_version = data['versionStartIncluding']
            if 'versionEndExcluding' in data:
                res.end_version = data['versionEndExcluding']
                res.end_version_excluded = True
            if 'versionEndIncluding' in data:
                res.end_version = data['versionEndIncluding']

        return res


@dataclass
class CveConfigurationNode:
    operator: str
    childs: List[Union['CveConfigurationNode', CpeMatch]] = field(default_factory=list)

    @staticmethod
    def parse(data: Any) -> 'CveConfigurationNode':
        res = CveConfigurationNode(
            operator=data['operator']
        )

        for child in data.get('children', []):
            res.childs.append(CveConfigurationNode.parse(child))

        for cpe_match in data.get('cpe_match', []):
            res.childs.append(CpeMatch.parse(cpe_match))

        return res

    def iter_matches(self) -> Iterable[CpeMatch]:
        for child in self.childs:
            if isinstance(child, CveConfigurationNode):
                yield from child.iter_matches()
            else:
                yield child


@dataclass
class CveItem:
    cve_id: str
    last_modified: str

    configuration_nodes: List[CveConfigurationNode] = field(default_factory=list)

    @staticmethod
    def parse(data: Any) -> 'CveItem':
        return CveItem(
            cve_id=data['cve']['CVE_data_meta']['ID'],
            last_modified=data['lastModifiedDate'],
            configuration_nodes=[CveConfigurationNode.parse(node) for node in data['configurations']['nodes']]
        )

    def iter_candidate_matches(self, target: Cpe) -> Iterable[CpeMatch]:
        """Iterate over vulnerable matches whose criteria match target.

        Version ranges are not evaluated, matches having one should be
        checked against the target version by the caller.
        """
        for node in self.configuration_nodes:
            for match in node.iter_matches():
                if match.vulnerable and match.criteria.matches(target):
                    yield match


def iter_cve_feed(stream: IO[bytes]) -> Iterable[CveItem]:
    num_skipped = 0

    for cve in JsonSlicer(stream, ('CVE_Items', None)):
        try:
            yield CveItem.parse(cve)
        except CpeError as e:
            logging.warning(f'skipping {cve["cve"]["CVE_data_meta"]["ID"]}: {e}')
            num_skipped += 1

    if num_skipped:
        logging.info(f'{num_skipped} CVE items skipped')
