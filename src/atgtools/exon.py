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

from dataclasses import dataclass, replace

from .frame import Frame
from .uint_range import UIntRange


@dataclass(slots=True, frozen=True)
class Exon(UIntRange):
    """
    Exon with an optional coding sub-range

    Coordinates are one-based and end-inclusive.
    """

    cds: UIntRange | None = None
    frame: Frame = Frame.UNSPECIFIED

    def __post_init__(self) -> None:
        UIntRange.__post_init__(self)
        if self.cds is not None and self.cds not in self:
            raise ValueError(
                f"Invalid exon {self.start}-{self.end}: "
                f"CDS {self.cds.start}-{self.cds.end} out of range!")

    def __repr__(self) -> str:
        cds = f" [{self.cds.start}-{self.cds.end}]" if self.cds else ''
        return f"Exon ({self.start}-{self.end}){cds} {self.frame.name}"

    @classmethod
    def new(
        cls,
        start: int,
        end: int,
        cds_start: int | None = None,
        cds_end: int | None = None,
        frame: Frame = Frame.UNSPECIFIED
    ) -> Exon:
        if (cds_start is None) != (cds_end is None):
            raise ValueError("Either both or neither CDS boundaries must be set!")
        cds = (
            UIntRange(cds_start, cds_end)
            if cds_start is not None and cds_end is not None else
            None
        )
        return cls(start, end, cds=cds, frame=frame)

    @property
    def is_coding(self) -> bool:
        return self.cds is not None

    @property
    def cds_start(self) -> int | None:
        return self.cds.start if self.cds else None

    @property
    def cds_end(self) -> int | None:
        return self.cds.end if self.cds else None

    @property
    def coding_len(self) -> int:
        return len(self.cds) if self.cds else 0

    def downstream_frame(self) -> Frame | None:
        """Frame of the next coding exon in genomic order"""

        if not self.cds:
            return None
        return self.frame + Frame.from_integer(self.coding_len)

    def with_frame(self, frame: Frame) -> Exon:
        return replace(self, frame=frame)

    def with_cds(self, cds: UIntRange | None) -> Exon:
        return replace(self, cds=cds)
