#!/usr/bin/env python3

# ----------------------------------------------------------------------------
# Copyright (c) 2020--, Qiyun Zhu.
#
# Distributed under the terms of the Modified BSD License.
#
# The full license is in the file LICENSE, distributed with this software.
# ----------------------------------------------------------------------------

"""Workflows that read XMFA files and report to the user.

Notes
-----
Only in this script can functions directly interface with the user by screen
output (via `click`), except for raising errors.
"""

from os.path import basename
import click

from .reader import Reader


def info_wf(input_fp:  str,
            strict:   bool = False,
            no_exe:   bool = False) -> dict:
    """Workflow for summarizing an XMFA file.

    Parameters
    ----------
    input_fp : str
        Path to input XMFA file.
    strict : bool, optional
        Check declared counts against file content.
    no_exe : bool, optional
        Disable calling external programs for decompression.

    Returns
    -------
    dict
        Summary statistics: "blocks", "records", "columns".

    See Also
    --------
    .cli.info_cmd
    """
    zippers = None if no_exe else {}
    with Reader.from_file(input_fp, zippers, strict) as reader:
        meta = reader.metadata
        click.echo(f'Input XMFA file: {basename(input_fp)}.')
        click.echo(f'Format version: {meta.format_version}.')
        click.echo(f'Number of sequences: {meta.sequence_count}.')
        click.echo(f'Number of intervals declared: {meta.interval_count}.')
        for i, row in enumerate(seq_rows(meta), 1):
            click.echo(f'  {i}\t' + '\t'.join(row))

        click.echo('Reading alignment blocks...', nl=False)
        res = summarize_blocks(reader)
        click.echo(' Done.')

    click.echo(f'  Number of alignment blocks: {res["blocks"]}.')
    click.echo(f'  Number of aligned records: {res["records"]}.')
    click.echo(f'  Total alignment columns: {res["columns"]}.')
    return res


def seq_rows(meta):
    """Tabulate per-sequence header entries.

    Parameters
    ----------
    meta : Metadata
        Header metadata.

    Returns
    -------
    list of tuple of str
        File name, length and header of each sequence.

    Notes
    -----
    Lists of per-sequence entries may have different lengths. Missing entries
    are reported as "NA".
    """
    cols = (meta.sequence_file_names, meta.sequence_lengths,
            meta.sequence_headers)
    n = max(map(len, cols))
    return [tuple(str(x[i]) if i < len(x) else 'NA' for x in cols)
            for i in range(n)]


def summarize_blocks(reader):
    """Read all remaining blocks and count them.

    Parameters
    ----------
    reader : Reader
        XMFA file reader.

    Returns
    -------
    dict
        Number of blocks, number of records, and total number of alignment
        columns (length of the longest record of each block, summed).
    """
    res = {'blocks': 0, 'records': 0, 'columns': 0}
    for block in reader:
        res['blocks'] += 1
        res['records'] += len(block)
        res['columns'] += max(len(x.seq) for x in block)
    return res
