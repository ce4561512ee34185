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

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from .errors import CodonBuildError
from .frame import Frame
from .strings.strand import Strand
from .uint_range import UIntRange

if TYPE_CHECKING:
    from .transcript import Transcript

CODON_LENGTH = 3


@dataclass(slots=True, frozen=True)
class CodonFragment(UIntRange):
    """Part of a codon contained in a single exon"""

    chrom: str
    frame: Frame
    strand: Strand

    def to_tuple(self) -> tuple[int, int, Frame]:
        return self.start, self.end, self.frame


def _build_fragments(transcript: Transcript, parts: Iterable[UIntRange]) -> list[CodonFragment]:
    # Frames count the codon bases preceding each fragment, left to right
    fragments: list[CodonFragment] = []
    consumed: int = 0
    for part in parts:
        fragments.append(CodonFragment(
            part.start,
            part.end,
            transcript.chrom,
            Frame.from_integer(consumed),
            transcript.strand))
        consumed += len(part)
    return fragments


@dataclass(slots=True, frozen=True)
class Codon:
    """
    Three nucleotides of a transcript, possibly split across exons

    Fragments are ordered from the genomic leftmost to the rightmost,
    independently of the strand of the transcript.
    """

    fragments: tuple[CodonFragment, ...]

    def __post_init__(self) -> None:
        length = sum(len(f) for f in self.fragments)
        if length != CODON_LENGTH:
            raise CodonBuildError(f"Invalid codon length: {length} != {CODON_LENGTH}!")

    def __len__(self) -> int:
        return CODON_LENGTH

    @property
    def start(self) -> int:
        return self.fragments[0].start

    @property
    def end(self) -> int:
        return self.fragments[-1].end

    def to_tuples(self) -> list[tuple[int, int, Frame]]:
        return [f.to_tuple() for f in self.fragments]

    @classmethod
    def from_transcript(cls, transcript: Transcript, pos: int) -> Codon:
        """
        Build the codon starting at a position in the direction of transcription

        ```
                123456789
                ----x----  pos = 5
        plus:   ----XXX--  5-7
        minus:  --XXX----  3-5
        ```
        """

        if transcript.strand.is_plus:
            return cls.downstream(transcript, pos)
        if transcript.strand.is_minus:
            return cls.upstream(transcript, pos)
        raise CodonBuildError("Transcript with unknown strand!")

    @classmethod
    def downstream(cls, transcript: Transcript, pos: int) -> Codon:
        """Build the codon starting at a position, reading left to right"""

        _validate_anchor(transcript, pos)

        consumed: int = 0
        parts: list[UIntRange] = []
        for exon in transcript.exons:
            if not exon.cds:
                continue

            # Remaining bases of the codon, from the anchor or the CDS start
            window_start = max(pos, exon.cds.start)
            part = exon.cds.intersect(
                UIntRange(window_start, window_start + CODON_LENGTH - 1 - consumed))
            if part is None:
                continue

            parts.append(part)
            consumed += len(part)
            if consumed >= CODON_LENGTH:
                break

        return cls._from_parts(transcript, parts)

    @classmethod
    def upstream(cls, transcript: Transcript, pos: int) -> Codon:
        """Build the codon ending at a position, reading right to left"""

        _validate_anchor(transcript, pos)

        consumed: int = 0
        parts: list[UIntRange] = []
        for exon in reversed(transcript.exons):
            if not exon.cds:
                continue

            # Remaining bases of the codon, up to the anchor or the CDS end
            window_end = min(pos, exon.cds.end)
            part = exon.cds.intersect(
                UIntRange(max(0, window_end - (CODON_LENGTH - 1 - consumed)), window_end))
            if part is None:
                continue

            parts.append(part)
            consumed += len(part)
            if consumed >= CODON_LENGTH:
                break

        parts.reverse()
        return cls._from_parts(transcript, parts)

    @classmethod
    def _from_parts(cls, transcript: Transcript, parts: list[UIntRange]) -> Codon:
        if sum(len(p) for p in parts) < CODON_LENGTH:
            raise CodonBuildError(
                "Codon out of the CDS of transcript %s!" % transcript.name)
        return cls(tuple(_build_fragments(transcript, parts)))


def _validate_anchor(transcript: Transcript, pos: int) -> None:
    if transcript.strand.is_unknown:
        raise CodonBuildError("Transcript with unknown strand!")

    cds_start = transcript.cds_start
    cds_end = transcript.cds_end
    if cds_start is None or cds_end is None:
        raise CodonBuildError("Transcript %s is non-coding!" % transcript.name)

    if not cds_start <= pos <= cds_end:
        raise CodonBuildError(
            "Position %d is outside the CDS (%d-%d)!" % (pos, cds_start, cds_end))
