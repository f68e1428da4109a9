#!/usr/bin/env python3

# ----------------------------------------------------------------------------
# Copyright (c) 2020--, Qiyun Zhu.
#
# Distributed under the terms of the Modified BSD License.
#
# The full license is in the file LICENSE, distributed with this software.
# ----------------------------------------------------------------------------

"""Functions for parsing the header of an XMFA file.

Notes
-----
The header is the leading region of lines starting with "#". Each line is a
key and a value separated by the first space, e.g.:

    #FormatVersion Parsnp v1.1
    #SequenceCount 3
    ##SequenceIndex 1
    ##SequenceFile genome1.fna
    ##SequenceHeader >genome1 random
    ##SequenceLength 1000bp
    ...
    #IntervalCount 2

Keys with one "#" describe the whole alignment and may appear once (the last
one wins). Keys with two "#" describe a participating sequence and are
collected in order of appearance.
"""

from collections import namedtuple

from .util import uint, unit_int
from .errors import MalformedHeader, IncompleteHeader, InconsistentHeader


Metadata = namedtuple('Metadata', [
    'format_version', 'sequence_count', 'sequence_file_names',
    'sequence_headers', 'sequence_lengths', 'interval_count'])


def seqlen(s):
    """Convert a sequence length string (e.g., "1000bp") to an integer.
    """
    return unit_int(s, 'bp')


# header key: (metadata field, value converter)
# scalar fields are listed in `required`; the others are lists
header_keys = {
    '#FormatVersion':   ('format_version',      str),
    '#SequenceCount':   ('sequence_count',      uint),
    '##SequenceIndex':  None,
    '#IntervalCount':   ('interval_count',      uint),
    '##SequenceFile':   ('sequence_file_names', str),
    '##SequenceHeader': ('sequence_headers',    str),
    '##SequenceLength': ('sequence_lengths',    seqlen)}

required = ('format_version', 'sequence_count', 'interval_count')


def parse_header_line(line):
    """Split a header line into key and converted value.

    Parameters
    ----------
    line : str
        Header line.

    Returns
    -------
    str or None
        Metadata field, or None if the key is to be ignored.
    any
        Converted value.

    Raises
    ------
    MalformedHeader
        Line has no space.
    MalformedHeader
        Key is not recognized.
    MalformedHeader
        Value cannot be converted.
    """
    line = line.rstrip('\r\n')
    key, found, value = line.partition(' ')
    if not found:
        raise MalformedHeader(f'Unexpected line in XMFA header: {line}')
    try:
        rule = header_keys[key]
    except KeyError:
        raise MalformedHeader(f'Unexpected XMFA header entry: {line}')
    if rule is None:
        return None, None
    field, func = rule
    try:
        return field, func(value)
    except ValueError:
        raise MalformedHeader(f'Failed to parse XMFA header line: {line}')


def read_header(it):
    """Read the header of an XMFA file.

    Parameters
    ----------
    it : iterator of str
        Lines of an XMFA file, positioned at the start of the file.

    Returns
    -------
    Metadata
        Header metadata.
    str
        First line after the header, or an empty string if the file ends
        within the header.

    Raises
    ------
    IncompleteHeader
        A required field is missing.

    Notes
    -----
    The lengths of the per-sequence lists are not checked against the
    declared sequence count here. See `check_header`.
    """
    data = {x: None for x in required}
    data.update({x[0]: [] for x in header_keys.values()
                 if x and x[0] not in required})

    line = next(it, '')
    while line[:1] == '#':
        field, value = parse_header_line(line)
        if field in required:
            data[field] = value
        elif field:
            data[field].append(value)
        line = next(it, '')

    for field in required:
        if data[field] is None:
            raise IncompleteHeader(f'Field "{field}" not found in header.')

    for field, value in data.items():
        if isinstance(value, list):
            data[field] = tuple(value)
    return Metadata(**data), line


def check_header(meta):
    """Check whether per-sequence lists match the declared sequence count.

    Parameters
    ----------
    meta : Metadata
        Header metadata.

    Raises
    ------
    InconsistentHeader
        Any list has a length different from the sequence count.
    """
    n = meta.sequence_count
    for field in ('sequence_file_names', 'sequence_headers',
                  'sequence_lengths'):
        m = len(getattr(meta, field))
        if m != n:
            raise InconsistentHeader(
                f'Sequence count is {n} but {m} {field} are found.')
