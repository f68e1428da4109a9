#!/usr/bin/env python3

# ----------------------------------------------------------------------------
# Copyright (c) 2020--, Qiyun Zhu.
#
# Distributed under the terms of the Modified BSD License.
#
# The full license is in the file LICENSE, distributed with this software.
# ----------------------------------------------------------------------------

"""Functions for parsing alignment blocks of an XMFA file.

Notes
-----
An alignment block consists of one or more records, each of which starts with
a coordinate line, followed by zero or more lines of aligned sequence. A line
of a single "=" closes the block:

    >1:0-799 + cluster1 :p1
    tcgcccgtcaccaccccaattcatacaccactagcggttagcaacgatt...
    ...
    >3:200-999 + cluster1 s1:p200
    tcgcccgtcaccaccccaattcatacaccactagcggttagcaacgatt...
    ...
    =

A coordinate line has the format of:
    >{sequence number}:{start}-{stop} {comment}
"""

import re
from collections import namedtuple

from .errors import (
    UnexpectedBlockStart, MalformedCoordinateLine, TruncatedBlock,
    UnexpectedContinuationLine)


Record = namedtuple('Record', [
    'sequence_number', 'start', 'stop', 'comment', 'seq'])

# e.g., >1:800-999 + cluster2 s1:p800
coord_re = re.compile(r'>(\d+):(\d+)-(\d+) (.*)')


def line_kind(line):
    """Determine what a line of the alignment body is.

    Parameters
    ----------
    line : str
        Line to check.

    Returns
    -------
    str
        "eof" (empty string, i.e., end of file), "record" (coordinate line),
        "terminator" (end of block), or "other".
    """
    if not line:
        return 'eof'
    line = line.rstrip('\r\n')
    if line[:1] == '>':
        return 'record'
    if line == '=':
        return 'terminator'
    return 'other'


def parse_coord_line(line):
    """Parse a coordinate line.

    Parameters
    ----------
    line : str
        Coordinate line, without line break.

    Returns
    -------
    tuple of (int, int, int, str)
        Sequence number, start, stop, and comment.

    Raises
    ------
    MalformedCoordinateLine
        Line does not follow the coordinate line format.

    Notes
    -----
    Start and stop are returned as is. Neither their order nor their range
    within the sequence is checked.
    """
    m = coord_re.fullmatch(line)
    if m is None:
        raise MalformedCoordinateLine(
            f'Unexpected XMFA coordinate line: {line}')
    seqnum, start, stop, comment = m.groups()
    return int(seqnum), int(start), int(stop), comment


def read_block(line, it):
    """Read one alignment block.

    Parameters
    ----------
    line : str
        First line of the block, which has already been read.
    it : iterator of str
        Remaining lines of the XMFA file.

    Returns
    -------
    list of Record
        Records in the block, in the order of their coordinate lines.
    str
        Line after the block terminator, or an empty string if the file ends.

    Raises
    ------
    UnexpectedBlockStart
        First line is not a coordinate line.
    UnexpectedContinuationLine
        Sequence data found before the first coordinate line.
    TruncatedBlock
        File ends before the block terminator.

    Notes
    -----
    Sequence lines of a record are concatenated as is, after removing line
    breaks. Records gathered so far are discarded if an error occurs.
    """
    line = line.rstrip('\r\n')
    if line[:1] != '>':
        raise UnexpectedBlockStart(
            f'Unexpected XMFA alignment block starting line: {line}')

    res, head = [], line

    # current record (coordinates, sequence lines)
    this, seqs = None, []

    while line != '=':

        # previous record completes, new record starts
        if line[:1] == '>':
            if this:
                res.append(Record(*this, ''.join(seqs)))
            this, seqs = parse_coord_line(line), []

        # sequence data
        elif this is None:
            raise UnexpectedContinuationLine(
                f'Sequence data found before coordinates: {line}')
        else:
            seqs.append(line)

        line = next(it, '')
        if not line:
            raise TruncatedBlock(
                f'File ended before terminator of alignment block: {head}')
        line = line.rstrip('\r\n')

    res.append(Record(*this, ''.join(seqs)))
    return res, next(it, '')
