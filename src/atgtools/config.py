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

import json
import logging
from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationError

from .constants import DEFAULT_LINE_LENGTH
from .errors import InvalidConfig
from .uint_range import UIntRange
from .utils import parse_region


class FetchConfig(BaseModel):

    # Paths
    ref_fasta_fp: str = Field(alias='refFASTAFilePath')
    fai_fp: Optional[str] = Field(default=None, alias='faiFilePath')
    output_fp: Optional[str] = Field(default=None, alias='outputFilePath')

    # Regions (one-based, end-inclusive)
    regions: List[str] = Field()

    # Output
    reverse_complement: bool = Field(default=False, alias='reverseComplement')
    line_length: int = Field(default=DEFAULT_LINE_LENGTH, alias='lineLength')

    class Config:
        populate_by_name = True

    def __init__(__pydantic_self__, **data: Any) -> None:
        super().__init__(**data)
        if not __pydantic_self__.is_valid():
            raise InvalidConfig()

    def is_valid(self) -> bool:
        success: bool = True

        if not self.regions:
            logging.error("No regions specified!")
            success = False

        for region in self.regions:
            try:
                parse_region(region)
            except ValueError as ex:
                logging.error(ex.args[0])
                success = False

        if self.line_length < 1:
            logging.error("Invalid line length: not strictly positive!")
            success = False

        return success

    def get_regions(self) -> list[tuple[str, UIntRange]]:
        return [parse_region(region) for region in self.regions]

    def write(self, fp: str) -> None:
        with open(fp, 'w') as fh:
            fh.write(self.model_dump_json(by_alias=True))


def load_config(fp: str) -> FetchConfig:
    with open(fp) as fh:
        try:
            config_dict = json.load(fh)
        except json.JSONDecodeError:
            raise InvalidConfig("not a JSON!")

    if not isinstance(config_dict, dict):
        raise InvalidConfig("not a JSON object!")

    try:
        return FetchConfig(**config_dict)
    except ValidationError as ex:
        raise InvalidConfig(f"({ex.error_count()} invalid fields)") from ex
