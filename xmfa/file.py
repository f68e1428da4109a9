#!/usr/bin/env python3

# ----------------------------------------------------------------------------
# Copyright (c) 2020--, Qiyun Zhu.
#
# Distributed under the terms of the Modified BSD License.
#
# The full license is in the file LICENSE, distributed with this software.
# ----------------------------------------------------------------------------

"""Functions for opening input files.
"""

from os.path import splitext
from shutil import which
from subprocess import Popen, PIPE
import gzip
import bz2
import lzma


zipfmts = {'.gz':   'gzip', '.gzip':   'gzip',
           '.bz2': 'bzip2', '.bzip2': 'bzip2',
           '.xz':     'xz', '.lz':       'xz', '.lzma': 'xz'}
ziplibs = {'gzip': gzip, 'bzip2': bz2, 'xz': lzma}


def openzip(fp, mode='rt'):
    """Open a regular or compressed file by matching filename extension to
    proper library.

    Parameters
    ----------
    fp : str
        Input filepath.
    mode : str, optional
        Python file mode. Default: "rt" (read as text).

    Returns
    -------
    file handle
        Text stream ready to be read.

    See Also
    --------
    readzip
    """
    ext = splitext(fp)[1]
    zipper = getattr(ziplibs[zipfmts[ext]], 'open') if ext in zipfmts else open
    return zipper(fp, mode)


def readzip(fp, zippers=None):
    """Open a regular or compressed file for reading, optionally via an
    external decompression program.

    Parameters
    ----------
    fp : str
        Input filepath.
    zippers : dict of bool, optional
        Available external compression programs.

    Returns
    -------
    file handle
        Text stream ready to be read.

    Notes
    -----
    XMFA files of whole-genome alignments are large and compress well, so they
    are commonly distributed gzipped. Calling an external program such as
    `gzip -cd` is typically faster than Python's built-in modules, because the
    decompression runs in a separate process.

    The availability of each program is checked at its first use and stored
    in `zippers`, which can be shared across calls. If `zippers` is not
    provided, or the program is not found, Python's built-in modules are used
    (see `openzip`).

    See Also
    --------
    openzip
    """
    ext = splitext(fp)[1]
    if ext not in zipfmts or zippers is None:
        return openzip(fp)

    fmt = zipfmts[ext]

    # check whether specific external program exists
    if fmt not in zippers:
        zippers[fmt] = bool(which(fmt))

    # use external program
    if zippers[fmt]:
        return Popen([fmt, '-cdfq', fp], stdout=PIPE, encoding='utf-8').stdout

    # external program does not exist
    else:
        return openzip(fp)
