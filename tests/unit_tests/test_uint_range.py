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
from atgtools.uint_range import UIntRange


def test_uint_range_sort():
    a = UIntRange(10, 12)
    b = UIntRange(1, 8)
    assert sorted([a, b]) == [b, a]


@pytest.mark.parametrize('start,end,is_valid', [
    (1, 1, True),
    (1, 10, True),
    (0, 0, True),
    (10, 9, False),
    (-1, 5, False)
])
def test_uint_range_init(start, end, is_valid):
    with pytest.raises(ValueError) if not is_valid else nullcontext():
        r = UIntRange(start, end)

    if is_valid:
        assert len(r) == end - start + 1


@pytest.mark.parametrize('x,exp', [
    (9, False),
    (10, True),
    (20, True),
    (21, False),
    (UIntRange(12, 15), True),
    (UIntRange(5, 15), False)
])
def test_uint_range_contains(x, exp):
    assert (x in UIntRange(10, 20)) == exp


@pytest.mark.parametrize('a,b,exp', [
    ((10, 20), (15, 25), (15, 20)),
    ((10, 20), (20, 30), (20, 20)),
    ((10, 20), (21, 30), None),
    ((10, 20), (12, 14), (12, 14))
])
def test_uint_range_intersect(a, b, exp):
    r = UIntRange(*a).intersect(UIntRange(*b))
    assert (r.to_tuple() if r else None) == exp


@pytest.mark.parametrize('a,b,exp', [
    ((10, 20), (15, 25), (10, 25)),
    ((10, 20), (21, 30), None)
])
def test_uint_range_union(a, b, exp):
    r = UIntRange(*a).union(UIntRange(*b))
    assert (r.to_tuple() if r else None) == exp


@pytest.mark.parametrize('a,b,exp', [
    ((10, 20), (12, 14), [(10, 11), (15, 20)]),
    ((10, 20), (10, 14), [(15, 20)]),
    ((10, 20), (15, 20), [(10, 14)]),
    ((10, 20), (5, 25), []),
    ((10, 20), (30, 40), [(10, 20)])
])
def test_uint_range_subtract(a, b, exp):
    assert [
        r.to_tuple()
        for r in UIntRange(*a).subtract(UIntRange(*b))
    ] == exp


@pytest.mark.parametrize('b,exp', [
    ((21, 30), True),
    ((1, 9), True),
    ((15, 16), True),
    ((22, 30), False),
    ((1, 8), False)
])
def test_uint_range_is_adjacent(b, exp):
    assert UIntRange(10, 20).is_adjacent(UIntRange(*b)) == exp


def test_uint_range_from_length():
    assert UIntRange.from_length(10, 3) == UIntRange(10, 12)

    with pytest.raises(ValueError):
        UIntRange.from_length(10, 0)


def test_uint_range_span():
    assert UIntRange.span([UIntRange(30, 40), UIntRange(5, 8)]) == UIntRange(5, 40)

