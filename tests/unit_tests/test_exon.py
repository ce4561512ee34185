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
from atgtools.exon import Exon
from atgtools.frame import Frame
from atgtools.uint_range import UIntRange


@pytest.mark.parametrize('start,end,cds_start,cds_end,is_valid', [
    (10, 20, None, None, True),
    (10, 20, 10, 20, True),
    (10, 20, 12, 15, True),
    (10, 20, 5, 15, False),
    (10, 20, 15, 25, False),
    (10, 20, 12, None, False),
    (10, 20, None, 15, False),
    (20, 10, None, None, False)
])
def test_exon_new(start, end, cds_start, cds_end, is_valid):
    with pytest.raises(ValueError) if not is_valid else nullcontext():
        exon = Exon.new(start, end, cds_start, cds_end)

    if is_valid:
        assert exon.cds_start == cds_start
        assert exon.cds_end == cds_end
        assert exon.is_coding == (cds_start is not None)


@pytest.mark.parametrize('cds,frame,exp', [
    (None, Frame.ZERO, None),
    ((1, 3), Frame.ZERO, Frame.ZERO),
    ((1, 4), Frame.ZERO, Frame.ONE),
    ((1, 5), Frame.ZERO, Frame.TWO),
    ((1, 5), Frame.ONE, Frame.ZERO),
    ((1, 2), Frame.TWO, Frame.ONE),
    ((1, 2), Frame.UNSPECIFIED, Frame.TWO)
])
def test_exon_downstream_frame(cds, frame, exp):
    exon = Exon(1, 10, cds=UIntRange(*cds) if cds else None, frame=frame)
    assert exon.downstream_frame() == exp


def test_exon_coding_len():
    assert Exon.new(10, 20).coding_len == 0
    assert Exon.new(10, 20, 12, 15).coding_len == 4


def test_exon_with_frame():
    exon = Exon.new(10, 20, 12, 15)
    assert exon.with_frame(Frame.TWO).frame == Frame.TWO
    assert exon.frame == Frame.UNSPECIFIED


def test_exon_with_cds():
    exon = Exon.new(10, 20, 12, 15).with_cds(None)
    assert not exon.is_coding
    assert exon.cds_start is None

    with pytest.raises(ValueError):
        exon.with_cds(UIntRange(5, 15))


def test_exon_equality():
    assert Exon.new(10, 20, 12, 15, Frame.ONE) == Exon.new(10, 20, 12, 15, Frame.ONE)
    assert Exon.new(10, 20, 12, 15, Frame.ONE) != Exon.new(10, 20, 12, 15, Frame.TWO)
