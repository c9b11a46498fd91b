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

from enum import Enum

from cpeparser.exceptions import CpeParsingError


class LogicalValue(Enum):
    ANY = '*'
    NA = '-'

    @property
    def abbreviation(self) -> str:
        return self.value


class Part(Enum):
    APPLICATION = 'a'
    OPERATING_SYSTEM = 'o'
    HARDWARE_DEVICE = 'h'
    ANY = '*'
    NA = '-'

    @property
    def abbreviation(self) -> str:
        return self.value

    @staticmethod
    def from_abbreviation(abbreviation: str) -> 'Part':
        # 2.2 URIs leave unspecified components empty
        if abbreviation == '':
            return Part.ANY

        try:
            return Part(abbreviation.lower())
        except ValueError:
            raise CpeParsingError(f'Unknown CPE part: {abbreviation!r}') from None
