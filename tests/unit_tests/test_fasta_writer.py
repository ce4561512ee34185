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

from io import StringIO

import pytest
from atgtools.enums import SequenceKind
from atgtools.loaders.fasta import FastaIndex, open_fasta
from atgtools.writers.fasta import write_fasta_record, write_transcript_fasta

from .utils import get_transcript, write_fasta


@pytest.mark.parametrize('seq,line_length,exp', [
    ('ACGTA', 2, '>seq1\nAC\nGT\nA\n'),
    ('ACGT', 2, '>seq1\nAC\nGT\n'),
    ('ACGT', 80, '>seq1\nACGT\n'),
    ('', 80, '>seq1\n')
])
def test_write_fasta_record(seq, line_length, exp):
    fh = StringIO()
    write_fasta_record(fh, 'seq1', seq, line_length=line_length)
    assert fh.getvalue() == exp


def test_write_fasta_record_default_line_length():
    fh = StringIO()
    write_fasta_record(fh, 'seq1', 'A' * 100)
    assert fh.getvalue().splitlines()[1:] == ['A' * 80, 'A' * 20]


def test_write_fasta_record_invalid_line_length():
    with pytest.raises(ValueError):
        write_fasta_record(StringIO(), 'seq1', 'ACGT', line_length=0)


def test_write_transcript_fasta(tmp_path):
    fp = str(tmp_path / 'ref.fa')
    write_fasta(fp, {'chr1': 'A' * 23 + 'ATG' + 'C' * 34}, 60)
    FastaIndex.build(fp)

    fh = StringIO()
    with open_fasta(fp) as reader:
        write_transcript_fasta(fh, get_transcript(), reader, SequenceKind.CDS)

    header, seq = fh.getvalue().splitlines()
    assert header == '>GENE1:TX1'
    assert seq == 'AT' + 'C' * 9
