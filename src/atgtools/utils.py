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

from __future__ import annotations

import re
from typing import Callable, Hashable, Iterable, TypeVar

from .uint_range import UIntRange

T = TypeVar('T')

dna_re = re.compile('^[ACGTN]*$')
invalid_nt_re = re.compile('[^ACGTN]')
dna_complement_tr_table = str.maketrans('ACGTN', 'TGCAN')
region_re = re.compile(r'^(?P<contig>[^:\s]+):(?P<start>[0-9,]+)-(?P<end>[0-9,]+)$')


def is_dna(s: str) -> bool:
    return dna_re.match(s) is not None


def get_invalid_nt_index(s: str) -> int | None:
    m = invalid_nt_re.search(s)
    return m.start() if m else None


def complement(seq: str) -> str:
    return seq.translate(dna_complement_tr_table)


def reverse_complement(seq: str) -> str:
    return seq[::-1].translate(dna_complement_tr_table)


def group_by_first_seen(a: Iterable[T], k: Callable[[T], Hashable]) -> dict[Hashable, list[T]]:
    """Group items by key, preserving the order in which keys are first seen"""

    groups: dict[Hashable, list[T]] = {}
    for x in a:
        groups.setdefault(k(x), []).append(x)
    return groups


def parse_chrom(s: str) -> str:
    """
    Normalise a chromosome name to carry a lowercase 'chr' prefix

    e.g. '1' -> 'chr1', 'CHR1' -> 'chr1', 'MT' -> 'chrMT'
    """

    return 'chr' + (s[3:] if s.lower().startswith('chr') else s)


def parse_region(s: str) -> tuple[str, UIntRange]:
    """Parse a 1-based, end-inclusive region (e.g. 'chr1:100-200')"""

    m = region_re.match(s.strip())
    if not m:
        raise ValueError(f"Invalid region '{s}'!")
    start = int(m.group('start').replace(',', ''))
    end = int(m.group('end').replace(',', ''))
    if start < 1:
        raise ValueError(f"Invalid region '{s}': positions are one-based!")
    return m.group('contig'), UIntRange(start, end)
