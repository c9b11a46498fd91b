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

import unittest

from cpeparser.convert import cpe_uri_to_well_formed, from_well_formed, fs_to_well_formed, part_to_cpe_uri, to_well_formed, well_formed_to_cpe_uri, well_formed_to_fs
from cpeparser.exceptions import CpeEncodingError, CpeParsingError
from cpeparser.values import Part


class TestFromWellFormed(unittest.TestCase):
    def test_plain(self):
        self.assertEqual(from_well_formed('vendor'), 'vendor')
        self.assertEqual(from_well_formed('*'), '*')
        self.assertEqual(from_well_formed('-'), '-')

    def test_quoted(self):
        self.assertEqual(from_well_formed('2\\.4\\.51'), '2.4.51')
        self.assertEqual(from_well_formed('foo\\\\bar'), 'foo\\bar')
        self.assertEqual(from_well_formed('foo\\\\\\:bar'), 'foo\\:bar')
        self.assertEqual(from_well_formed('\\*'), '*')

    def test_wildcards_kept(self):
        self.assertEqual(from_well_formed('*foo\\.?'), '*foo.?')


class TestToWellFormed(unittest.TestCase):
    def test_quoting(self):
        self.assertEqual(to_well_formed('2.4.51'), '2\\.4\\.51')
        self.assertEqual(to_well_formed('internet_explorer'), 'internet_explorer')
        self.assertEqual(to_well_formed('foo\\bar'), 'foo\\\\bar')
        self.assertEqual(to_well_formed('a*b'), 'a\\*b')

    def test_logical(self):
        self.assertEqual(to_well_formed('*'), '*')
        self.assertEqual(to_well_formed('-'), '-')


class TestFormattedString(unittest.TestCase):
    def test_to_fs(self):
        self.assertEqual(well_formed_to_fs('vendor'), 'vendor')
        self.assertEqual(well_formed_to_fs('*'), '*')
        self.assertEqual(well_formed_to_fs('-'), '-')
        self.assertEqual(well_formed_to_fs('2\\.4\\-rc\\_1'), '2.4-rc_1')
        self.assertEqual(well_formed_to_fs('foo\\:bar\\$'), 'foo\\:bar\\$')
        self.assertEqual(well_formed_to_fs('foo\\\\\\.'), 'foo\\\\.')
        self.assertEqual(well_formed_to_fs('*foo?'), '*foo?')

    def test_lone_quoted_hyphen(self):
        self.assertEqual(well_formed_to_fs('\\-'), '\\-')
        self.assertEqual(fs_to_well_formed('\\-'), '\\-')
        self.assertEqual(well_formed_to_fs('\\-\\-'), '--')

    def test_from_fs(self):
        self.assertEqual(fs_to_well_formed('2.4.51'), '2\\.4\\.51')
        self.assertEqual(fs_to_well_formed('foo\\:bar'), 'foo\\:bar')
        self.assertEqual(fs_to_well_formed('linux_kernel'), 'linux_kernel')
        self.assertEqual(fs_to_well_formed('*foo?'), '*foo?')
        self.assertEqual(fs_to_well_formed('\\*'), '\\*')
        self.assertEqual(fs_to_well_formed('*'), '*')
        self.assertEqual(fs_to_well_formed('-'), '-')

    def test_from_fs_unterminated(self):
        with self.assertRaises(CpeParsingError):
            fs_to_well_formed('foo\\')


class TestUri(unittest.TestCase):
    def test_logical(self):
        self.assertEqual(well_formed_to_cpe_uri('*'), '')
        self.assertEqual(well_formed_to_cpe_uri(''), '')
        self.assertEqual(well_formed_to_cpe_uri('-'), '-')

    def test_plain(self):
        self.assertEqual(well_formed_to_cpe_uri('internet_explorer'), 'internet_explorer')

    def test_encoding(self):
        self.assertEqual(well_formed_to_cpe_uri('8\\.0\\.6001'), '8.0.6001')
        self.assertEqual(well_formed_to_cpe_uri('rc\\-1'), 'rc-1')
        self.assertEqual(well_formed_to_cpe_uri('foo\\!bar'), 'foo%21bar')
        self.assertEqual(well_formed_to_cpe_uri('foo\\~bar'), 'foo%7ebar')
        self.assertEqual(well_formed_to_cpe_uri('foo\\:bar'), 'foo%3abar')
        self.assertEqual(well_formed_to_cpe_uri('foo\\\\bar'), 'foo%5cbar')
        self.assertEqual(well_formed_to_cpe_uri('\\*'), '%2a')

    def test_lone_quoted_hyphen(self):
        self.assertEqual(well_formed_to_cpe_uri('\\-'), '%2d')
        self.assertEqual(cpe_uri_to_well_formed('%2d'), '\\-')

    def test_wildcards(self):
        with self.assertRaises(CpeEncodingError):
            well_formed_to_cpe_uri('foo*')
        with self.assertRaises(CpeEncodingError):
            well_formed_to_cpe_uri('?foo')

    def test_part(self):
        self.assertEqual(part_to_cpe_uri(Part.APPLICATION), 'a')
        self.assertEqual(part_to_cpe_uri(Part.ANY), '*')

    def test_decoding(self):
        self.assertEqual(cpe_uri_to_well_formed(''), '*')
        self.assertEqual(cpe_uri_to_well_formed('-'), '-')
        self.assertEqual(cpe_uri_to_well_formed('8.0.6001'), '8\\.0\\.6001')
        self.assertEqual(cpe_uri_to_well_formed('foo%21bar'), 'foo\\!bar')
        self.assertEqual(cpe_uri_to_well_formed('foo%7Ebar'), 'foo\\~bar')
        self.assertEqual(cpe_uri_to_well_formed('foo%5fbar'), 'foo_bar')
        self.assertEqual(cpe_uri_to_well_formed('%01foo%02'), '?foo*')

    def test_decoding_errors(self):
        with self.assertRaises(CpeParsingError):
            cpe_uri_to_well_formed('foo%2')
        with self.assertRaises(CpeParsingError):
            cpe_uri_to_well_formed('foo%zzbar')
        with self.assertRaises(CpeParsingError):
            cpe_uri_to_well_formed('foo%41bar')


if __name__ == '__main__':
    unittest.main()
