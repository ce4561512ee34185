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


class AtgError(Exception):
    pass


class InvalidConfig(AtgError):
    pass


# Model

class InvalidStrand(AtgError, ValueError):
    pass


class InvalidFrame(AtgError, ValueError):
    pass


class FrameError(AtgError):
    pass


class CodonBuildError(AtgError):
    pass


class TranscriptBuildError(AtgError):
    pass


class NoExonsError(AtgError):
    pass


# Sequences

class SequenceDecodeError(AtgError, ValueError):
    pass


class FastaError(AtgError):
    pass


class InvalidIndexLine(FastaError):
    pass


class UnknownContig(FastaError, KeyError):

    def __str__(self) -> str:
        # KeyError would quote the message
        return str(self.args[0]) if self.args else ''


class PositionOutOfRange(FastaError, IndexError):
    pass


class FastaReadError(FastaError):
    pass
