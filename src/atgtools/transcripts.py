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

from collections import defaultdict
from typing import Iterable, Iterator, Sized

from .transcript import Transcript


class Transcripts(Sized):
    """Transcripts indexed by name and gene"""

    __slots__ = ['_transcripts', '_by_name', '_by_gene']

    def __init__(self, transcripts: Iterable[Transcript] | None = None) -> None:
        self._transcripts: list[Transcript] = []
        self._by_name: defaultdict[str, list[int]] = defaultdict(list)
        self._by_gene: defaultdict[str, list[int]] = defaultdict(list)
        if transcripts is not None:
            for transcript in transcripts:
                self.append(transcript)

    def __len__(self) -> int:
        return len(self._transcripts)

    def __iter__(self) -> Iterator[Transcript]:
        return iter(self._transcripts)

    def append(self, transcript: Transcript) -> None:
        i = len(self._transcripts)
        self._transcripts.append(transcript)
        self._by_name[transcript.name].append(i)
        self._by_gene[transcript.gene].append(i)

    def by_name(self, name: str) -> list[Transcript]:
        # The same transcript may be annotated on multiple contigs (e.g. PAR)
        return [self._transcripts[i] for i in self._by_name.get(name, [])]

    def by_gene(self, gene: str) -> list[Transcript] | None:
        ids = self._by_gene.get(gene)
        return [self._transcripts[i] for i in ids] if ids else None

    def to_list(self) -> list[Transcript]:
        return list(self._transcripts)
