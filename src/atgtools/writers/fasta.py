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

from typing import TextIO

from ..constants import DEFAULT_LINE_LENGTH, FASTA_HEADER_PREFIX
from ..enums import SequenceKind
from ..loaders.fasta import FastaReader
from ..sequence_builder import build_sequence
from ..transcript import Transcript


def get_transcript_header(transcript: Transcript) -> str:
    return f"{transcript.gene}:{transcript.name}"


def write_fasta_record(fh: TextIO, header: str, seq: str, line_length: int = DEFAULT_LINE_LENGTH) -> None:
    if line_length < 1:
        raise ValueError("Invalid line length: not strictly positive!")

    fh.write(f"{FASTA_HEADER_PREFIX}{header}\n")
    for i in range(0, len(seq), line_length):
        fh.write(seq[i:i + line_length])
        fh.write('\n')


def write_transcript_fasta(
    fh: TextIO,
    transcript: Transcript,
    reader: FastaReader,
    kind: SequenceKind,
    line_length: int = DEFAULT_LINE_LENGTH
) -> None:
    write_fasta_record(
        fh,
        get_transcript_header(transcript),
        build_sequence(transcript, reader, kind),
        line_length=line_length)
