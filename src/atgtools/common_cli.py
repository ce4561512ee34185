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

from functools import wraps
import logging
import sys

import click

from .errors import AtgError
from .uint_range import UIntRange
from .utils import parse_region


existing_file = click.Path(exists=True, file_okay=True, dir_okay=False)


def set_logger(ctx: click.Context, param: click.Parameter, value: str) -> None:
    logging.basicConfig(level=logging._nameToLevel[value.upper()])


def validate_regions(
    ctx: click.Context,
    param: click.Parameter,
    value: tuple[str, ...]
) -> list[tuple[str, UIntRange]]:
    try:
        return [parse_region(region) for region in value]
    except ValueError as ex:
        raise click.BadParameter(ex.args[0])


def log_option(f):
    return click.option(
        '--log',
        default='WARNING',
        type=click.Choice(list(logging._nameToLevel.keys()), case_sensitive=False),
        callback=set_logger,
        expose_value=False,
        is_eager=True,
        help="Logging level")(f)


def handle_errors(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except AtgError as ex:
            logging.critical(ex)
            sys.exit(1)

    return wrapper
