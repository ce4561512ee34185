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

from contextlib import nullcontext

import pytest
from atgtools import utils
from atgtools.uint_range import UIntRange


@pytest.mark.parametrize('seq,rc', [
    ('AAA', 'TTT'),
    ('AAT', 'ATT'),
    ('ACGTN', 'NACGT')
])
def test_reverse_complement(seq, rc):
    assert utils.reverse_complement(seq) == rc


@pytest.mark.parametrize('seq,is_valid', [
    ('ACGT', True),
    ('ACGTN', True),
    ('', True),
    ('acgt', False),
    ('ACGT ', False)
])
def test_is_dna(seq, is_valid):
    assert utils.is_dna(seq) == is_valid


@pytest.mark.parametrize('s,exp', [
    ('1', 'chr1'),
    ('chr1', 'chr1'),
    ('CHR1', 'chr1'),
    ('Chrx', 'chrx'),
    ('MT', 'chrMT')
])
def test_parse_chrom(s, exp):
    assert utils.parse_chrom(s) == exp


@pytest.mark.parametrize('s,exp', [
    ('chr1:10-20', ('chr1', UIntRange(10, 20))),
    ('chr1:1,000-2,000', ('chr1', UIntRange(1000, 2000))),
    ('X:5-5', ('X', UIntRange(5, 5))),
    ('chr1:0-20', None),
    ('chr1:20-10', None),
    ('chr1', None),
    ('chr1:10', None)
])
def test_parse_region(s, exp):
    with pytest.raises(ValueError) if exp is None else nullcontext():
        assert utils.parse_region(s) == exp


def test_group_by_first_seen():
    groups = utils.group_by_first_seen(['b1', 'a1', 'b2', 'c1', 'a2'], lambda x: x[0])
    assert list(groups.keys()) == ['b', 'a', 'c']
    assert groups['b'] == ['b1', 'b2']
    assert groups['a'] == ['a1', 'a2']
