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

from enum import Enum

from .errors import FrameError, InvalidFrame


class Frame(Enum):
    """
    Reading frame offset of a coding exon

    The value is the number of bases of the first codon that were
    already consumed by the upstream coding sequence, as in the
    RefGene 'exonFrames' column:

    - 0: the coding sequence starts with a whole codon
    - 1: the first base completes a codon started upstream (XX|X)
    - 2: the first two bases complete a codon started upstream (X|XX)

    GTF uses the complementary convention (bases to skip before the
    first whole codon), where 1 and 2 are swapped.

    RefGene writes an unspecified frame as '-1': the '.' token is read
    as unspecified but written back as '-1'.
    """

    UNSPECIFIED = -1
    ZERO = 0
    ONE = 1
    TWO = 2

    @classmethod
    def from_integer(cls, n: int) -> Frame:
        return cls(n % 3)

    @classmethod
    def from_gtf(cls, s: str) -> Frame:
        try:
            return GTF_FRAMES[s]
        except KeyError:
            raise InvalidFrame(f"Invalid GTF frame '{s}'!")

    @classmethod
    def from_refgene(cls, s: str) -> Frame:
        try:
            return REFGENE_FRAMES[s]
        except KeyError:
            raise InvalidFrame(f"Invalid RefGene frame '{s}'!")

    def to_gtf(self) -> str:
        return FRAME_GTF[self]

    def to_refgene(self) -> str:
        return FRAME_REFGENE[self]

    @property
    def is_known(self) -> bool:
        return self is not Frame.UNSPECIFIED

    def __add__(self, other) -> Frame:
        if not isinstance(other, Frame):
            return NotImplemented
        match self.is_known, other.is_known:
            case True, True:
                return Frame.from_integer(self.value + other.value)
            case True, False:
                return self
            case False, True:
                return other
            case _:
                raise FrameError("Unable to add two unspecified frames!")


GTF_FRAMES: dict[str, Frame] = {
    '.': Frame.UNSPECIFIED,
    '0': Frame.ZERO,
    '1': Frame.TWO,
    '2': Frame.ONE
}

REFGENE_FRAMES: dict[str, Frame] = {
    '-1': Frame.UNSPECIFIED,
    '.': Frame.UNSPECIFIED,
    '0': Frame.ZERO,
    '1': Frame.ONE,
    '2': Frame.TWO
}

FRAME_GTF: dict[Frame, str] = {
    Frame.UNSPECIFIED: '.',
    Frame.ZERO: '0',
    Frame.ONE: '2',
    Frame.TWO: '1'
}

FRAME_REFGENE: dict[Frame, str] = {
    Frame.UNSPECIFIED: '-1',
    Frame.ZERO: '0',
    Frame.ONE: '1',
    Frame.TWO: '2'
}
