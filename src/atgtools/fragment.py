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

from dataclasses import dataclass, field
import logging
from typing import Generator, Iterable

from .enums import CdsStat, FeatureKind
from .errors import NoExonsError, TranscriptBuildError
from .exon import Exon
from .frame import Frame
from .strings.strand import Strand
from .transcript import Transcript, TranscriptBuilder
from .uint_range import UIntRange
from .utils import group_by_first_seen


@dataclass(slots=True, frozen=True)
class AnnotationFragment(UIntRange):
    """
    Single feature of a transcript (e.g. one line of a GTF file)

    Coordinates are one-based and end-inclusive: adapters of zero-based
    formats must shift the start before building fragments.
    """

    kind: FeatureKind
    chrom: str
    strand: Strand
    frame: Frame = Frame.UNSPECIFIED
    score: float | None = None
    gene_id: str | None = None
    transcript_id: str | None = None

    def __post_init__(self) -> None:
        UIntRange.__post_init__(self)
        if not isinstance(self.strand, Strand):
            object.__setattr__(self, 'strand', Strand(self.strand))

    def to_exon(self) -> Exon:
        """Seed exon of a group of adjacent fragments"""

        if self.kind == FeatureKind.CDS or self.kind.is_codon:
            return Exon(self.start, self.end, cds=self.to_range(), frame=self.frame)
        if self.kind.is_utr:
            return Exon(self.start, self.end)
        return Exon(self.start, self.end, frame=self.frame)


def _union(a: UIntRange | None, b: UIntRange) -> UIntRange:
    return UIntRange(min(a.start, b.start), max(a.end, b.end)) if a else b


def merge_fragment(exon: Exon, fragment: AnnotationFragment) -> Exon:
    """Extend an exon to include an overlapping or book-ended fragment"""

    cds = exon.cds
    frame = exon.frame

    match fragment.kind:
        case FeatureKind.CDS:
            cds = _union(cds, fragment.to_range())
            frame = fragment.frame

        case FeatureKind.START_CODON | FeatureKind.STOP_CODON if not fragment.strand.is_unknown:
            # Codons only ever widen the CDS
            cds = _union(cds, fragment.to_range())

    if cds is not None and not frame.is_known:
        frame = fragment.frame

    return Exon(
        min(exon.start, fragment.start),
        max(exon.end, fragment.end),
        cds=cds,
        frame=frame)


def merge_fragments(fragments: Iterable[AnnotationFragment]) -> list[Exon]:
    """
    Merge overlapping or book-ended fragments into exons

    Fragments are processed from the genomic leftmost one; any kind of
    adjacent feature is merged into the current exon.
    """

    exons: list[Exon] = []
    acc: Exon | None = None

    for fragment in sorted(fragments, key=lambda f: f.start):
        if acc is not None and fragment.start <= acc.end + 1:
            acc = merge_fragment(acc, fragment)
        else:
            if acc is not None:
                exons.append(acc)
            acc = fragment.to_exon()

    if acc is not None:
        exons.append(acc)

    return exons


def get_cds_stat(fragments: Iterable[AnnotationFragment], codon_kind: FeatureKind) -> CdsStat:
    has_cds: bool = False
    for fragment in fragments:
        if fragment.kind == codon_kind:
            return CdsStat.COMPLETE
        if fragment.kind == FeatureKind.CDS:
            has_cds = True
    return CdsStat.INCOMPLETE if has_cds else CdsStat.UNKNOWN


@dataclass(slots=True)
class FragmentGroup:
    """All the fragments of one transcript"""

    transcript_id: str
    fragments: list[AnnotationFragment] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.fragments)

    def __str__(self) -> str:
        return f"Transcript {self.transcript_id} with {len(self.fragments)} fragments"

    def add(self, fragment: AnnotationFragment) -> None:
        self.fragments.append(fragment)

    def exons(self) -> list[Exon]:
        return merge_fragments(self.fragments)

    def cds_start_codon_stat(self) -> CdsStat:
        return get_cds_stat(self.fragments, FeatureKind.START_CODON)

    def cds_stop_codon_stat(self) -> CdsStat:
        return get_cds_stat(self.fragments, FeatureKind.STOP_CODON)

    def to_transcript(self) -> Transcript:
        if not self.fragments:
            raise NoExonsError(f"No exons in {self}!")

        first = self.fragments[0]
        exons = self.exons()
        logging.debug("%s: %d exons." % (self, len(exons)))

        builder = (
            TranscriptBuilder()
            .name(self.transcript_id)
            .gene(first.gene_id)
            .chrom(first.chrom)
            .strand(first.strand)
            .score(first.score)
            .exons(exons)
        )

        if first.strand.is_unknown:
            # Unstranded transcripts are read left to right
            builder.cds_start_stat(self.cds_start_codon_stat())
            builder.cds_end_stat(self.cds_stop_codon_stat())
        else:
            builder.cds_start_codon_stat(self.cds_start_codon_stat())
            builder.cds_stop_codon_stat(self.cds_stop_codon_stat())

        return builder.build()


def group_fragments(fragments: Iterable[AnnotationFragment]) -> Generator[FragmentGroup, None, None]:
    """Group fragments by transcript, in the order transcripts are first seen"""

    for transcript_id, transcript_fragments in group_by_first_seen(
        fragments, lambda f: f.transcript_id
    ).items():
        if transcript_id is None:
            raise TranscriptBuildError("Fragment without transcript identifier!")
        yield FragmentGroup(str(transcript_id), transcript_fragments)
