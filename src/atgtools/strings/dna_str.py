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

from ..errors import SequenceDecodeError
from ..utils import complement, get_invalid_nt_index, is_dna, reverse_complement

LINE_TERMINATORS = b'\r\n'


class DnaStr(str):
    """Nucleotide sequence (A, C, G, T, N)"""

    def __init__(self, s: str) -> None:
        if not is_dna(s):
            raise SequenceDecodeError(f"Invalid DNA sequence: {s}!")
        super().__init__()

    @classmethod
    def parse(cls, s: str | None) -> DnaStr:
        return cls(s.upper()) if s else cls.empty()

    @classmethod
    def empty(cls) -> DnaStr:
        return cls('')

    @classmethod
    def from_raw_bytes(cls, data: bytes) -> DnaStr:
        """
        Decode the raw bytes of a FASTA sequence block

        Line terminators are dropped, so the length of the sequence
        may be lower than the number of bytes.
        """

        s = data.translate(None, LINE_TERMINATORS).decode('ascii', errors='replace').upper()
        i = get_invalid_nt_index(s)
        if i is not None:
            raise SequenceDecodeError(f"Invalid nucleotide {s[i]!r} at offset {i}!")
        return cls(s)

    def __add__(self, other) -> DnaStr:
        return DnaStr(str(self) + str(other))

    def reverse(self) -> DnaStr:
        return DnaStr(self[::-1])

    def complement(self) -> DnaStr:
        return DnaStr(complement(self))

    def reverse_complement(self) -> DnaStr:
        return DnaStr(reverse_complement(self))

    def chunks(self, n: int) -> list[DnaStr]:
        if n < 1:
            raise ValueError("Invalid chunk size: not strictly positive!")
        return [DnaStr(self[i:i + n]) for i in range(0, len(self), n)]
