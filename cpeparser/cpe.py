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

from typing import Any, Optional, Tuple

from cpeparser import validate
from cpeparser.convert import from_well_formed, part_to_cpe_uri, well_formed_to_cpe_uri, well_formed_to_fs
from cpeparser.exceptions import CpeValidationError
from cpeparser.matching import compare_attributes
from cpeparser.values import LogicalValue, Part


ATTRIBUTES = (
    'vendor',
    'product',
    'version',
    'update',
    'edition',
    'language',
    'sw_edition',
    'target_sw',
    'target_hw',
    'other',
)

# packed into the edition component of a 2.2 URI
_EXTENDED_ATTRIBUTES = ('sw_edition', 'target_sw', 'target_hw', 'other')


def _display_attribute(name: str) -> property:
    slot = '_' + name

    def getter(self: 'Cpe') -> str:
        return from_well_formed(getattr(self, slot))

    return property(getter, doc=f'{name} of the CPE as human readable text')


class Cpe:
    """Common Platform Enumeration name.

    Attributes are given and stored in the CPE 2.3 well-formed format,
    that is with all punctuation except underscore quoted with a
    backslash. Missing (None or empty) attributes default to ANY.
    Every attribute is validated on construction, and the object is
    immutable afterwards.
    """

    __slots__ = ('_part',) + tuple('_' + name for name in ATTRIBUTES)

    _part: Part
    _vendor: str
    _product: str
    _version: str
    _update: str
    _edition: str
    _language: str
    _sw_edition: str
    _target_sw: str
    _target_hw: str
    _other: str

    def __init__(
        self,
        part: Part = Part.ANY,
        vendor: Optional[str] = None,
        product: Optional[str] = None,
        version: Optional[str] = None,
        update: Optional[str] = None,
        edition: Optional[str] = None,
        language: Optional[str] = None,
        sw_edition: Optional[str] = None,
        target_sw: Optional[str] = None,
        target_hw: Optional[str] = None,
        other: Optional[str] = None,
    ) -> None:
        if not isinstance(part, Part):
            raise CpeValidationError('part', f'expected Part, got {part!r}')

        values = (vendor, product, version, update, edition, language, sw_edition, target_sw, target_hw, other)

        object.__setattr__(self, '_part', part)

        for name, value in zip(ATTRIBUTES, values):
            if not value:
                value = LogicalValue.ANY.abbreviation

            status = validate.component(value)
            if not status.valid:
                raise CpeValidationError(name, status.message or 'invalid value')

            object.__setattr__(self, '_' + name, value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __reduce__(self) -> Tuple[Any, ...]:
        return (type(self), self._as_tuple())

    def _as_tuple(self) -> Tuple[Any, ...]:
        return (self._part,) + tuple(getattr(self, '_' + name) for name in ATTRIBUTES)

    @property
    def part(self) -> Part:
        return self._part

    vendor = _display_attribute('vendor')
    product = _display_attribute('product')
    version = _display_attribute('version')
    update = _display_attribute('update')
    edition = _display_attribute('edition')
    language = _display_attribute('language')
    sw_edition = _display_attribute('sw_edition')
    target_sw = _display_attribute('target_sw')
    target_hw = _display_attribute('target_hw')
    other = _display_attribute('other')

    def well_formed(self, name: str) -> str:
        if name not in ATTRIBUTES:
            raise KeyError(name)
        return getattr(self, '_' + name)

    def to_uri(self) -> str:
        """Bind the CPE to CPE 2.2 URI.

        Attributes introduced in CPE 2.3 are packed into the edition
        component if any of them is set.
        """
        res = 'cpe:/' + ':'.join([
            part_to_cpe_uri(self._part),
            well_formed_to_cpe_uri(self._vendor),
            well_formed_to_cpe_uri(self._product),
            well_formed_to_cpe_uri(self._version),
            well_formed_to_cpe_uri(self._update),
        ]) + ':'

        if all(getattr(self, '_' + name) in ('', LogicalValue.ANY.abbreviation) for name in _EXTENDED_ATTRIBUTES):
            res += well_formed_to_cpe_uri(self._edition)
        else:
            res += '~' + '~'.join(well_formed_to_cpe_uri(getattr(self, '_' + name)) for name in ('edition',) + _EXTENDED_ATTRIBUTES)

        res += ':' + well_formed_to_cpe_uri(self._language)

        return res.rstrip(':')

    def to_formatted_string(self) -> str:
        return ':'.join(['cpe', '2.3', self._part.abbreviation] + [well_formed_to_fs(getattr(self, '_' + name)) for name in ATTRIBUTES])

    def matches(self, target: 'Cpe') -> bool:
        """Check whether target is matched by this CPE used as a pattern."""
        return compare_attributes(self._part, target._part) and all(
            compare_attributes(getattr(self, '_' + name), getattr(target, '_' + name))
            for name in ATTRIBUTES
        )

    def matched_by(self, target: 'Cpe') -> bool:
        return target.matches(self)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Cpe):
            return NotImplemented
        return self._as_tuple() == other._as_tuple()

    def __hash__(self) -> int:
        return hash(self._as_tuple())

    def __repr__(self) -> str:
        return self.to_formatted_string()
