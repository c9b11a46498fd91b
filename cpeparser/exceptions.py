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


class CpeError(Exception):
    pass


class CpeValidationError(CpeError):
    field: str
    reason: str

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f'Invalid {field} component: {reason}')
        self.field = field
        self.reason = reason


class CpeEncodingError(CpeError):
    pass


class CpeParsingError(CpeError):
    pass
