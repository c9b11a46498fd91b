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

from typing import Union

from cpeparser.values import LogicalValue, Part


def _compare_parts(left: Part, right: Part) -> bool:
    return left == right or left == Part.ANY


def _compare_strings(left: str, right: str) -> bool:
    if left.lower() == right.lower():
        return True
    elif left == LogicalValue.ANY.abbreviation:
        return True
    elif left == LogicalValue.NA.abbreviation:
        return False
    elif right == LogicalValue.NA.abbreviation:
        return False
    elif right == LogicalValue.ANY.abbreviation:
        return False

    return False


def compare_attributes(left: Union[Part, str], right: Union[Part, str]) -> bool:
    """Compare a pattern attribute (left) with a candidate attribute (right).

    The comparison is asymmetric: ANY on the left matches everything
    including NA, while ANY on the right only matches ANY. The CPE
    matching specification leaves ANY against NA undefined, here it
    is a match.
    """
    if isinstance(left, Part) and isinstance(right, Part):
        return _compare_parts(left, right)

    if isinstance(left, str) and isinstance(right, str):
        return _compare_strings(left, right)

    raise TypeError(f'Cannot compare {type(left).__name__} with {type(right).__name__}')
