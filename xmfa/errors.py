#!/usr/bin/env python3

# ----------------------------------------------------------------------------
# Copyright (c) 2020--, Qiyun Zhu.
#
# Distributed under the terms of the Modified BSD License.
#
# The full license is in the file LICENSE, distributed with this software.
# ----------------------------------------------------------------------------

"""Errors raised while reading an XMFA file.

Notes
-----
All errors are subclasses of `XMFAError`, which is a `ValueError`.

None of these errors is recoverable: once raised, the reader that raised it
is left at an undefined position in the file and should be discarded.
"""


class XMFAError(ValueError):
    """Base class of all XMFA parsing errors.
    """
    pass


class MalformedHeader(XMFAError):
    """Header line has an unknown key, no key-value separator, or a value that
    cannot be converted.
    """
    pass


class IncompleteHeader(XMFAError):
    """A required header field is absent at the end of the header.
    """
    pass


class InconsistentHeader(XMFAError):
    """Declared counts in the header disagree with the file content (strict
    mode only).
    """
    pass


class UnexpectedBlockStart(XMFAError):
    """Current line does not start an alignment block.
    """
    pass


class MalformedCoordinateLine(XMFAError):
    """A ">"-prefixed line does not follow the coordinate line grammar.
    """
    pass


class TruncatedBlock(XMFAError):
    """File ended before the block terminator ("=").
    """
    pass


class UnexpectedContinuationLine(XMFAError):
    """Sequence data found before any coordinate line of a block.
    """
    pass
