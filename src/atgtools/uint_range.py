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

from collections.abc import Container
from dataclasses import dataclass
from typing import Iterable, Sized, TypeVar


UIntRangeT = TypeVar('UIntRangeT', bound='UIntRange')


@dataclass(slots=True, frozen=True)
class UIntRange(Sized, Container):
    """End-inclusive integer range"""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid range [{self.start}, {self.end}]!")

    def __len__(self) -> int:
        return self.end - self.start + 1

    def __lt__(self, other) -> bool:
        return (
            self.end < other.end if self.start == other.start else
            self.start < other.start
        )

    def __repr__(self) -> str:
        return f"[{self.start}, {self.end}]"

    def __contains__(self, x) -> bool:
        if isinstance(x, int):
            return self.start <= x <= self.end
        elif isinstance(x, UIntRange):
            return x.start in self and x.end in self
        raise TypeError("Operand type not supported!")

    @classmethod
    def from_length(cls, start: int, length: int) -> UIntRange:
        if length < 1:
            raise ValueError("Invalid range length: not strictly positive!")
        return cls(start, start + length - 1)

    @classmethod
    def span(cls, ranges: Iterable[UIntRangeT]) -> UIntRange:
        return cls(
            min(r.start for r in ranges),
            max(r.end for r in ranges)
        )

    def to_range(self) -> UIntRange:
        return UIntRange(self.start, self.end)

    def to_tuple(self) -> tuple[int, int]:
        return self.start, self.end

    def overlaps(self, other: UIntRange) -> bool:
        return self.start <= other.end and other.start <= self.end

    def is_adjacent(self, other: UIntRange) -> bool:
        """Overlapping or book-ended"""

        return self.start <= other.end + 1 and other.start <= self.end + 1

    def intersect(self, r: UIntRange) -> UIntRange | None:
        if not self.overlaps(r):
            return None
        return UIntRange(max(self.start, r.start), min(self.end, r.end))

    def union(self, r: UIntRange) -> UIntRange | None:
        if not self.overlaps(r):
            return None
        return UIntRange(min(self.start, r.start), max(self.end, r.end))

    def subtract(self, r: UIntRange) -> list[UIntRange]:
        """Generate the parts of the range not covered by another"""

        if not self.overlaps(r):
            return [self.to_range()]

        result: list[UIntRange] = []
        if r.start > self.start:
            result.append(UIntRange(self.start, r.start - 1))
        if r.end < self.end:
            result.append(UIntRange(r.end + 1, self.end))
        return result

