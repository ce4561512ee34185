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

from dataclasses import dataclass, field, replace
import logging
from typing import Iterable

from .codon import Codon
from .enums import CdsStat
from .errors import CodonBuildError, TranscriptBuildError
from .exon import Exon
from .frame import Frame
from .strings.strand import Strand, UNKNOWN


# Chromosome, start, end (one-based, end-inclusive)
Coordinate = tuple[str, int, int]


@dataclass(slots=True, frozen=True)
class Transcript:
    """
    Genomic representation of a transcript

    Exons are sorted by genomic position, independently of the strand.
    The CDS statuses refer to the genomic leftmost (start) and
    rightmost (end) boundaries of the coding sequence: use the
    start and stop codon statuses for the strand-aware view.

    The RefGene bin and the score are not part of the identity
    of a transcript and are ignored when comparing transcripts.
    """

    name: str
    gene: str
    chrom: str
    strand: Strand
    exons: tuple[Exon, ...]
    cds_start_stat: CdsStat = CdsStat.NONE
    cds_end_stat: CdsStat = CdsStat.NONE
    score: float | None = field(default=None, compare=False)
    bin: int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'exons', tuple(sorted(self.exons)))
        if not isinstance(self.strand, Strand):
            object.__setattr__(self, 'strand', Strand(self.strand))
        if not self.exons:
            raise TranscriptBuildError("No exons in transcript %s!" % self.name)

    def __str__(self) -> str:
        return f"[{self.gene}] {self.name} ({self.chrom}:{self.tx_start}-{self.tx_end})"

    @property
    def forward(self) -> bool:
        return self.strand.is_forward

    @property
    def exon_count(self) -> int:
        return len(self.exons)

    @property
    def tx_start(self) -> int:
        return self.exons[0].start

    @property
    def tx_end(self) -> int:
        return self.exons[-1].end

    @property
    def is_coding(self) -> bool:
        return any(exon.is_coding for exon in self.exons)

    @property
    def cds_start(self) -> int | None:
        for exon in self.exons:
            if exon.cds:
                return exon.cds.start
        return None

    @property
    def cds_end(self) -> int | None:
        for exon in reversed(self.exons):
            if exon.cds:
                return exon.cds.end
        return None

    @property
    def cds_start_codon_stat(self) -> CdsStat:
        return self.cds_end_stat if self.strand.is_minus else self.cds_start_stat

    @property
    def cds_stop_codon_stat(self) -> CdsStat:
        return self.cds_start_stat if self.strand.is_minus else self.cds_end_stat

    def with_exons(self, exons: Iterable[Exon]) -> Transcript:
        return replace(self, exons=tuple(exons))

    def with_strand(self, strand: Strand) -> Transcript:
        return replace(self, strand=strand)

    def _get_codon(self, start_codon: bool) -> list[tuple[int, int, Frame]]:
        cds_start = self.cds_start
        cds_end = self.cds_end
        if cds_start is None or cds_end is None or self.strand.is_unknown:
            return []

        try:
            codon = (
                Codon.downstream(self, cds_start)
                if start_codon == self.strand.is_plus else
                Codon.upstream(self, cds_end)
            )
        except CodonBuildError as ex:
            logging.debug(
                "No %s codon for transcript %s: %s" %
                ('start' if start_codon else 'stop', self.name, ex.args[0]))
            return []

        return codon.to_tuples()

    def start_codon(self) -> list[tuple[int, int, Frame]]:
        """
        Positions and frames of the start codon, split across exons

        ```
              1....   2....   3....   4....   5....
              12345   12345   12345   12345   12345
           ---=====---===XX---XXXXX---XXXX=---=====---
        1. ---=====---ATGXX---XXXXX---XXXX=---=====--- >> all in one exon
        2. ---=====---===AT---GXXXX---XXXX=---=====--- >> split
        3. ---=====---====A-----T-----GXXX=---=====--- >> split across three exons
        ```

        Empty if the transcript is non-coding or the codon can't be built.
        """

        return self._get_codon(True)

    def stop_codon(self) -> list[tuple[int, int, Frame]]:
        """
        Positions and frames of the stop codon, split across exons

        Empty if the transcript is non-coding or the codon can't be built.
        """

        return self._get_codon(False)

    def exon_coordinates(self) -> list[Coordinate]:
        return [
            (self.chrom, exon.start, exon.end)
            for exon in self.exons
        ]

    def cds_coordinates(self) -> list[Coordinate]:
        return [
            (self.chrom, exon.cds.start, exon.cds.end)
            for exon in self.exons
            if exon.cds
        ]

    def utr_coordinates(self) -> list[Coordinate]:
        """
        Non-coding sections of all exons

        Fully non-coding exons are reported whole, along with the
        flanks of partially coding exons.
        """

        coords: list[Coordinate] = []
        for exon in self.exons:
            if exon.cds:
                coords.extend(
                    (self.chrom, r.start, r.end)
                    for r in exon.subtract(exon.cds)
                )
            else:
                coords.append((self.chrom, exon.start, exon.end))
        return coords

    def utr5_coordinates(self) -> list[Coordinate]:
        utr = self.utr_coordinates()
        cds_start = self.cds_start
        cds_end = self.cds_end
        if cds_start is None or cds_end is None:
            return utr
        return (
            [c for c in utr if c[2] < cds_start] if self.forward else
            [c for c in utr if c[1] > cds_end]
        )

    def utr3_coordinates(self) -> list[Coordinate]:
        cds_start = self.cds_start
        cds_end = self.cds_end
        if cds_start is None or cds_end is None:
            return []
        utr = self.utr_coordinates()
        return (
            [c for c in utr if c[1] > cds_end] if self.forward else
            [c for c in utr if c[2] < cds_start]
        )


class TranscriptBuilder:
    """
    Step-by-step assembly of a transcript

    Setters can be chained; `build` validates the required fields.
    """

    __slots__ = [
        '_name', '_gene', '_chrom', '_strand', '_exons',
        '_cds_start_stat', '_cds_end_stat', '_score', '_bin'
    ]

    def __init__(self) -> None:
        self._name: str | None = None
        self._gene: str | None = None
        self._chrom: str | None = None
        self._strand: Strand = UNKNOWN
        self._exons: list[Exon] = []
        self._cds_start_stat: CdsStat = CdsStat.NONE
        self._cds_end_stat: CdsStat = CdsStat.NONE
        self._score: float | None = None
        self._bin: int | None = None

    def name(self, name: str) -> TranscriptBuilder:
        self._name = name
        return self

    def gene(self, gene: str | None) -> TranscriptBuilder:
        self._gene = gene
        return self

    def chrom(self, chrom: str) -> TranscriptBuilder:
        self._chrom = chrom
        return self

    def strand(self, strand: Strand | str) -> TranscriptBuilder:
        self._strand = Strand(strand)
        return self

    def exons(self, exons: Iterable[Exon]) -> TranscriptBuilder:
        self._exons.extend(exons)
        return self

    def score(self, score: float | None) -> TranscriptBuilder:
        self._score = score
        return self

    def bin(self, bin: int | None) -> TranscriptBuilder:
        self._bin = bin
        return self

    def cds_start_stat(self, stat: CdsStat) -> TranscriptBuilder:
        """Status of the genomic leftmost CDS boundary"""

        self._cds_start_stat = stat
        return self

    def cds_end_stat(self, stat: CdsStat) -> TranscriptBuilder:
        """Status of the genomic rightmost CDS boundary"""

        self._cds_end_stat = stat
        return self

    def cds_start_codon_stat(self, stat: CdsStat) -> TranscriptBuilder:
        """Status of the start codon (set the strand first)"""

        if self._strand.is_plus:
            return self.cds_start_stat(stat)
        if self._strand.is_minus:
            return self.cds_end_stat(stat)
        raise TranscriptBuildError("Cannot set the start codon status without a defined strand!")

    def cds_stop_codon_stat(self, stat: CdsStat) -> TranscriptBuilder:
        """Status of the stop codon (set the strand first)"""

        if self._strand.is_plus:
            return self.cds_end_stat(stat)
        if self._strand.is_minus:
            return self.cds_start_stat(stat)
        raise TranscriptBuildError("Cannot set the stop codon status without a defined strand!")

    def build(self) -> Transcript:
        if self._name is None:
            raise TranscriptBuildError("No name specified!")
        if self._chrom is None:
            raise TranscriptBuildError("No chromosome specified!")
        if self._gene is None:
            raise TranscriptBuildError("No gene specified!")
        if not self._exons:
            raise TranscriptBuildError("No exons specified!")

        return Transcript(
            name=self._name,
            gene=self._gene,
            chrom=self._chrom,
            strand=self._strand,
            exons=tuple(self._exons),
            cds_start_stat=self._cds_start_stat,
            cds_end_stat=self._cds_end_stat,
            score=self._score,
            bin=self._bin)
