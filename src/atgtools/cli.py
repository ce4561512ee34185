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

import logging
from typing import Optional

import click

from . import __version__
from .common_cli import existing_file, handle_errors, log_option, validate_regions
from .config import FetchConfig, load_config
from .constants import DEFAULT_LINE_LENGTH, REVCOMP_HEADER_SUFFIX
from .errors import AtgError, InvalidConfig
from .loaders.fasta import FastaIndex, open_fasta
from .uint_range import UIntRange
from .writers.fasta import write_fasta_record


def get_region_header(contig: str, r: UIntRange, reverse_complement: bool) -> str:
    header = f"{contig}:{r.start}-{r.end}"
    return header + REVCOMP_HEADER_SUFFIX if reverse_complement else header


def run_fetch(
    ref_fasta_fp: str,
    regions: list[tuple[str, UIntRange]],
    fai_fp: Optional[str] = None,
    output_fp: Optional[str] = None,
    reverse_complement: bool = False,
    line_length: int = DEFAULT_LINE_LENGTH
) -> None:
    with open_fasta(ref_fasta_fp, fai_fp=fai_fp) as reader:
        with click.open_file(output_fp or '-', 'w') as fh:
            for contig, r in regions:
                seq = reader.read_sequence(contig, r.start, r.end)
                if reverse_complement:
                    seq = seq.reverse_complement()
                write_fasta_record(
                    fh,
                    get_region_header(contig, r, reverse_complement),
                    seq,
                    line_length=line_length)
                logging.debug("Fetched %d bases from %s:%d-%d." % (len(seq), contig, r.start, r.end))


def run_fetch_from_config(config: FetchConfig) -> None:
    run_fetch(
        config.ref_fasta_fp,
        config.get_regions(),
        fai_fp=config.fai_fp,
        output_fp=config.output_fp,
        reverse_complement=config.reverse_complement,
        line_length=config.line_length)


@click.group(invoke_without_command=True)
@click.option('-c', '--config', 'config_fp', type=existing_file, help="Configuration file path")
@click.version_option(__version__)
@click.pass_context
def main(ctx: click.Context, config_fp: Optional[str]):
    if ctx.invoked_subcommand is None:
        if not config_fp:
            raise click.UsageError("Configuration required if no subcommand is specified!")

        # Load configuration
        try:
            config = load_config(config_fp)

        except InvalidConfig as ex:
            logging.critical("Invalid configuration%s!" % (' ' + ex.args[0] if ex.args else ''))
            ctx.exit(1)

        except PermissionError as ex:
            logging.critical(ex)
            ctx.exit(1)

        try:
            run_fetch_from_config(config)

        except AtgError as ex:
            logging.critical(ex)
            ctx.exit(1)

        ctx.exit(0)


@main.command()
@click.argument('ref_fasta_fp', type=existing_file, metavar='REF_FASTA')
@log_option
@handle_errors
def index(ref_fasta_fp: str) -> None:
    """Create the index of a FASTA file"""

    click.echo(FastaIndex.build(ref_fasta_fp))


@main.command()
@click.argument('ref_fasta_fp', type=existing_file, metavar='REF_FASTA')
@click.argument('regions', nargs=-1, required=True, callback=validate_regions, metavar='REGION...')
@click.option('--fai', 'fai_fp', type=existing_file, help="FASTA index file path")
@click.option('--output', 'output_fp', type=click.Path(dir_okay=False), help="Output FASTA file path")
@click.option('--reverse-complement', is_flag=True, help="Reverse complement the sequences")
@click.option(
    '--line-length',
    type=click.IntRange(min=1),
    default=DEFAULT_LINE_LENGTH,
    help="Output FASTA line length")
@log_option
@handle_errors
def fetch(
    ref_fasta_fp: str,
    regions: list[tuple[str, UIntRange]],
    fai_fp: Optional[str],
    output_fp: Optional[str],
    reverse_complement: bool,
    line_length: int
) -> None:
    """Print the sequences of one-based, end-inclusive regions (e.g. chr1:100-200)"""

    run_fetch(
        ref_fasta_fp,
        regions,
        fai_fp=fai_fp,
        output_fp=output_fp,
        reverse_complement=reverse_complement,
        line_length=line_length)
