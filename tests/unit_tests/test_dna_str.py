########## LICENCE ##########
# atgtools
# Copyright (C) 2024 Genome Research Ltd
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#############################

import pytest
from atgtools.errors import SequenceDecodeError
from atgtools.strings.dna_str import DnaStr


@pytest.mark.parametrize('data,exp', [
    (b"A\nC\r\nGT", 'ACGT'),
    (b"acgtn", 'ACGTN'),
    (b"", ''),
    (b"\n", ''),
    (b"AC\nGT\n", 'ACGT')
])
def test_dna_str_from_raw_bytes(data, exp):
    assert DnaStr.from_raw_bytes(data) == exp


@pytest.mark.parametrize('data', [
    b"ACGU",
    b"AC GT",
    b"AC\xffGT",
    b">chr1"
])
def test_dna_str_from_raw_bytes_invalid(data):
    with pytest.raises(SequenceDecodeError):
        DnaStr.from_raw_bytes(data)


@pytest.mark.parametrize('seq,rev,comp,rc', [
    ('AACGT', 'TGCAA', 'TTGCA', 'ACGTT'),
    ('N', 'N', 'N', 'N'),
    ('', '', '', '')
])
def test_dna_str_transforms(seq, rev, comp, rc):
    s = DnaStr(seq)
    assert s.reverse() == rev
    assert s.complement() == comp
    assert s.reverse_complement() == rc
    assert s.reverse_complement().reverse_complement() == s


def test_dna_str_invalid():
    with pytest.raises(SequenceDecodeError):
        DnaStr('ACGX')


def test_dna_str_parse():
    assert DnaStr.parse('acg') == 'ACG'
    assert DnaStr.parse(None) == ''


@pytest.mark.parametrize('n,exp', [
    (2, ['AC', 'GT', 'A']),
    (5, ['ACGTA']),
    (10, ['ACGTA'])
])
def test_dna_str_chunks(n, exp):
    assert DnaStr('ACGTA').chunks(n) == exp
