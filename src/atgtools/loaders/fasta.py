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

from contextlib import contextmanager
from dataclasses import dataclass
import logging
from typing import BinaryIO, Generator, Iterable

import pysam

from ..constants import FAI_COLUMN_COUNT, FAI_SUFFIX
from ..errors import FastaReadError, InvalidIndexLine, PositionOutOfRange, UnknownContig
from ..strings.dna_str import DnaStr


@dataclass(slots=True, frozen=True)
class ContigIndex:
    """
    Line of a FASTA index (.fai)

    `start` is the byte offset of the first base of the contig.
    """

    name: str
    bases: int
    start: int
    line_bases: int
    line_bytes: int

    @classmethod
    def from_line(cls, line: str) -> ContigIndex:
        fields = line.rstrip('\r\n').split('\t')
        if len(fields) != FAI_COLUMN_COUNT:
            raise InvalidIndexLine(
                "Invalid index line: %d fields instead of %d!" %
                (len(fields), FAI_COLUMN_COUNT))

        name, bases, start, line_bases, line_bytes = fields
        try:
            return cls(name, int(bases), int(start), int(line_bases), int(line_bytes))
        except ValueError as ex:
            raise InvalidIndexLine(f"Invalid index line for contig '{name}': {ex}!") from ex

    def offset(self, pos: int) -> int:
        """Byte offset of a one-based position"""

        if pos < 1 or pos > self.bases:
            raise PositionOutOfRange(
                "Position %d out of range for contig %s (1-%d)!" %
                (pos, self.name, self.bases))

        i = pos - 1
        return (
            self.start +
            (i // self.line_bases) * self.line_bytes +
            (i % self.line_bases)
        )


class FastaIndex(dict[str, ContigIndex]):
    """FASTA index mapping contig names to their layout"""

    @classmethod
    def parse(cls, lines: Iterable[str]) -> FastaIndex:
        index = cls()
        for line in lines:
            if not line.strip():
                continue
            contig = ContigIndex.from_line(line)
            index[contig.name] = contig
        return index

    @classmethod
    def load(cls, fp: str) -> FastaIndex:
        logging.debug("Loading FASTA index '%s'..." % fp)
        try:
            with open(fp) as fh:
                index = cls.parse(fh)
        except OSError as ex:
            raise FastaReadError(f"Failed to read FASTA index '{fp}': {ex.strerror}!") from ex
        logging.debug("Loaded %d contigs from FASTA index '%s'." % (len(index), fp))
        return index

    @staticmethod
    def build(fasta_fp: str) -> str:
        """Create the index of a FASTA file, returning its path"""

        logging.info("Indexing FASTA file '%s'..." % fasta_fp)
        try:
            pysam.faidx(fasta_fp)
        except pysam.SamtoolsError as ex:
            raise FastaReadError(f"Failed to index FASTA file '{fasta_fp}': {ex}!") from ex
        return fasta_fp + FAI_SUFFIX

    def get_contig(self, contig: str) -> ContigIndex:
        try:
            return self[contig]
        except KeyError as ex:
            raise UnknownContig(f"Contig '{contig}' not found in the FASTA index!") from ex

    def offset(self, contig: str, pos: int) -> int:
        return self.get_contig(contig).offset(pos)

    def offset_range(self, contig: str, start: int, end: int) -> tuple[int, int]:
        """Byte offsets of a one-based, end-inclusive range (end offset exclusive)"""

        if end < start:
            raise ValueError(f"Invalid range {start}-{end}!")
        ci = self.get_contig(contig)
        return ci.offset(start), ci.offset(end) + 1


class FastaReader:
    """Random access to the sequences of an indexed FASTA file"""

    __slots__ = ['fp', 'index', '_fh']

    def __init__(self, fp: str, index: FastaIndex, fh: BinaryIO) -> None:
        self.fp: str = fp
        self.index: FastaIndex = index
        self._fh: BinaryIO = fh

    @classmethod
    def from_file(cls, fp: str, fai_fp: str | None = None) -> FastaReader:
        index = FastaIndex.load(fai_fp or fp + FAI_SUFFIX)
        try:
            fh = open(fp, 'rb')
        except OSError as ex:
            raise FastaReadError(f"Failed to open FASTA file '{fp}': {ex.strerror}!") from ex
        return cls(fp, index, fh)

    def __enter__(self) -> FastaReader:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def close(self) -> None:
        self._fh.close()

    def read_range(self, contig: str, start: int, end: int) -> bytes:
        """Raw bytes of a one-based, end-inclusive range (line terminators included)"""

        start_offset, end_offset = self.index.offset_range(contig, start, end)
        n = end_offset - start_offset
        try:
            self._fh.seek(start_offset)
            data = self._fh.read(n)
        except OSError as ex:
            raise FastaReadError(f"Failed to read FASTA file '{self.fp}': {ex.strerror}!") from ex

        if len(data) != n:
            raise FastaReadError(
                "Failed to read FASTA file '%s': %d bytes read instead of %d!" %
                (self.fp, len(data), n))

        return data

    def read_sequence(self, contig: str, start: int, end: int) -> DnaStr:
        return DnaStr.from_raw_bytes(self.read_range(contig, start, end))


@contextmanager
def open_fasta(fp: str, fai_fp: str | None = None) -> Generator[FastaReader, None, None]:
    reader = FastaReader.from_file(fp, fai_fp=fai_fp)
    try:
        yield reader
    finally:
        reader.close()
