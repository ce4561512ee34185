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


class CdsStat(str, Enum):
    NONE = 'none'
    UNKNOWN = 'unk'
    INCOMPLETE = 'incmpl'
    COMPLETE = 'cmpl'

    @classmethod
    def parse(cls, s: str) -> CdsStat:
        try:
            return CDS_STAT_ALIASES[s]
        except KeyError:
            raise ValueError(f"Invalid CDS status '{s}'!")


CDS_STAT_ALIASES: dict[str, CdsStat] = {
    'none': CdsStat.NONE,
    'unk': CdsStat.UNKNOWN,
    'incmpl': CdsStat.INCOMPLETE,
    'incompl': CdsStat.INCOMPLETE,
    'incomplete': CdsStat.INCOMPLETE,
    'cmpl': CdsStat.COMPLETE,
    'compl': CdsStat.COMPLETE,
    'complete': CdsStat.COMPLETE
}


class FeatureKind(str, Enum):
    EXON = 'exon'
    CDS = 'CDS'
    START_CODON = 'start_codon'
    STOP_CODON = 'stop_codon'
    UTR = 'UTR'
    UTR5 = '5UTR'
    UTR3 = '3UTR'
    INTER = 'inter'
    INTER_CNS = 'inter_CNS'
    INTRON_CNS = 'intron_CNS'
    GENE = 'gene'
    TRANSCRIPT = 'transcript'
    SELENOCYSTEINE = 'Selenocysteine'

    @property
    def is_codon(self) -> bool:
        return self in (FeatureKind.START_CODON, FeatureKind.STOP_CODON)

    @property
    def is_utr(self) -> bool:
        return self in (FeatureKind.UTR, FeatureKind.UTR5, FeatureKind.UTR3)


class SequenceKind(str, Enum):
    CDS = 'cds'
    EXONS = 'exons'
    TRANSCRIPT = 'transcript'
