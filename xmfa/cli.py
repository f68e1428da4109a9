#!/usr/bin/env python3

# ----------------------------------------------------------------------------
# Copyright (c) 2020--, Qiyun Zhu.
#
# Distributed under the terms of the Modified BSD License.
#
# The full license is in the file LICENSE, distributed with this software.
# ----------------------------------------------------------------------------

"""Standalone command-line interface (CLI) of the program.
"""

import click

from . import __version__
from .workflow import info_wf


class NaturalOrderGroup(click.Group):
    """Natural ordering of click command groups.
    """
    def list_commands(self, ctx):
        return self.commands.keys()


GRP_KA = dict(
    cls=NaturalOrderGroup,
    context_settings=dict(help_option_names=['-h', '--help']))
CMD_KA = dict(
    no_args_is_help=True)


@click.version_option(__version__)
@click.group(**GRP_KA)
def cli():
    """xmfa: reader of XMFA multiple genome alignments.
    """
    pass  # pragma: no cover


@cli.command('info', **CMD_KA)
@click.option(
    '--input', '-i', 'input_fp', required=True,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to input XMFA file. Can be compressed.')
@click.option(
    '--strict', is_flag=True,
    help=('Check that numbers of sequences and intervals declared in the '
          'header match the file content.'))
@click.option(
    '--no-exe', is_flag=True,
    help='Disable calling external programs for decompression.')
def info_cmd(**kwargs):
    """Summarize header and alignment blocks of an XMFA file.
    """
    info_wf(**kwargs)


if __name__ == '__main__':
    cli()  # pragma: no cover
