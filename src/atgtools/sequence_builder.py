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

import logging

from .enums import SequenceKind
from .loaders.fasta import FastaReader
from .strings.dna_str import DnaStr
from .transcript import Coordinate, Transcript


def get_sequence_coordinates(transcript: Transcript, kind: SequenceKind) -> list[Coordinate]:
    match kind:
        case SequenceKind.CDS:
            return transcript.cds_coordinates()
        case SequenceKind.EXONS:
            return transcript.exon_coordinates()
        case SequenceKind.TRANSCRIPT:
            return [(transcript.chrom, transcript.tx_start, transcript.tx_end)]
    raise ValueError(f"Invalid sequence kind '{kind}'!")


def build_sequence(transcript: Transcript, reader: FastaReader, kind: SequenceKind) -> DnaStr:
    """
    Assemble the sequence of a transcript in the direction of transcription

    Empty for the CDS of a non-coding transcript.
    """

    coords = get_sequence_coordinates(transcript, kind)
    if not coords:
        logging.debug("No %s sequence for transcript %s." % (kind.value, transcript.name))
        return DnaStr.empty()

    seq = DnaStr(''.join(
        reader.read_sequence(chrom, start, end)
        for chrom, start, end in coords
    ))

    return seq if transcript.forward else seq.reverse_complement()
