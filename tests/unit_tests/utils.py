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

from atgtools.exon import Exon
from atgtools.frame import Frame
from atgtools.transcript import Transcript, TranscriptBuilder


def get_exons() -> list[Exon]:
    """
    Exons of the reference transcript

    ```
    11...15   21...25   31...35   41...45   51...55
    =======---===XX---XXXXX---XXXX=---=======
    ```
    """

    return [
        Exon.new(11, 15),
        Exon.new(21, 25, 24, 25, Frame.ZERO),
        Exon.new(31, 35, 31, 35, Frame.TWO),
        Exon.new(41, 45, 41, 44, Frame.ONE),
        Exon.new(51, 55)
    ]


def get_transcript(strand: str = '+', exons: list[Exon] | None = None, name: str = 'TX1') -> Transcript:
    return (
        TranscriptBuilder()
        .name(name)
        .gene('GENE1')
        .chrom('chr1')
        .strand(strand)
        .exons(exons if exons is not None else get_exons())
        .build()
    )


def write_fasta(fp, contigs: dict[str, str], line_length: int) -> None:
    with open(fp, 'w') as fh:
        for name, seq in contigs.items():
            fh.write(f">{name}\n")
            for i in range(0, len(seq), line_length):
                fh.write(seq[i:i + line_length])
                fh.write('\n')
