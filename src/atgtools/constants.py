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

# FASTA index file extension
FAI_SUFFIX = '.fai'

# FASTA index columns: name, bases, offset, line bases, line bytes
FAI_COLUMN_COUNT = 5

# FASTA output line length
DEFAULT_LINE_LENGTH = 80

# FASTA header prefix
FASTA_HEADER_PREFIX = '>'

# Header suffix of reverse complemented sequences
REVCOMP_HEADER_SUFFIX = '/rc'
