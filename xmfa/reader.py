#!/usr/bin/env python3

# ----------------------------------------------------------------------------
# Copyright (c) 2020--, Qiyun Zhu.
#
# Distributed under the terms of the Modified BSD License.
#
# The full license is in the file LICENSE, distributed with this software.
# ----------------------------------------------------------------------------

"""Sequential reader of an XMFA file.

Notes
-----
The reader owns a line iterator and one line of lookahead (`line`). Parsing
the header leaves the first line of the first block in `line`. Reading a block
consumes it through the terminator and leaves the line after that, which is
either the start of the next block or an empty string at end of file.

A reader is not thread-safe. Use one reader per file.

Example
-------
>>> with Reader.from_file('parsnp.xmfa') as reader:
>>>     print(reader.metadata.format_version)
>>>     for block in reader:
>>>         for rec in block:
>>>             print(rec.sequence_number, rec.start, rec.stop, len(rec.seq))
"""

from .file import readzip
from .header import read_header, check_header
from .block import read_block, line_kind
from .errors import InconsistentHeader


class Reader:
    """Reader of an XMFA file.

    Parameters
    ----------
    fh : iterable of str
        XMFA file handle, or any other source of lines, positioned at the
        start of the file.
    strict : bool, optional
        Check the declared sequence count and interval count against the
        file content.

    Attributes
    ----------
    metadata : Metadata
        Header metadata.
    line : str
        Current (lookahead) line.
    blocks_read : int
        Number of alignment blocks read so far.

    Raises
    ------
    MalformedHeader, IncompleteHeader
        Header cannot be parsed.
    InconsistentHeader
        Per-sequence header entries don't match sequence count (strict mode).
    """
    def __init__(self, fh, strict=False):
        self.fh = fh
        self.strict = strict
        self._it = iter(fh)
        self._owner = False
        self.blocks_read = 0
        self.metadata, self.line = read_header(self._it)
        if strict:
            check_header(self.metadata)

    @classmethod
    def from_file(cls, fp, zippers=None, strict=False):
        """Open an XMFA file and read its header.

        Parameters
        ----------
        fp : str
            Path to an XMFA file, which may be compressed.
        zippers : dict of bool, optional
            Available external compression programs.
        strict : bool, optional
            Strict mode.

        Returns
        -------
        Reader
            Reader which will close the file when closed.
        """
        fh = readzip(fp, zippers)
        try:
            reader = cls(fh, strict)
        except Exception:
            fh.close()
            raise
        reader._owner = True
        return reader

    @property
    def lookahead(self):
        """Kind of the current line ("record", "terminator", "eof", or
        "other").
        """
        return line_kind(self.line)

    @property
    def at_eof(self):
        return not self.line

    def next_block(self):
        """Read the next alignment block.

        Returns
        -------
        list of Record
            Records of the block.

        Raises
        ------
        UnexpectedBlockStart
            Current line does not start a block. This includes the end of the
            file, which can be told apart by `at_eof`.
        MalformedCoordinateLine, TruncatedBlock
            Block cannot be parsed.
        """
        block, self.line = read_block(self.line, self._it)
        self.blocks_read += 1
        return block

    def __iter__(self):
        """Iterate over remaining alignment blocks until end of file.

        Raises
        ------
        InconsistentHeader
            Number of blocks doesn't match interval count (strict mode).
        """
        while not self.at_eof:
            yield self.next_block()
        if self.strict and self.blocks_read != self.metadata.interval_count:
            raise InconsistentHeader(
                f'Interval count is {self.metadata.interval_count} but '
                f'{self.blocks_read} alignment blocks are found.')

    def close(self):
        """Close the underlying file, if it was opened by the reader.
        """
        if self._owner:
            self.fh.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
