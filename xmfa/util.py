#!/usr/bin/env python3

# ----------------------------------------------------------------------------
# Copyright (c) 2020--, Qiyun Zhu.
#
# Distributed under the terms of the Modified BSD License.
#
# The full license is in the file LICENSE, distributed with this software.
# ----------------------------------------------------------------------------

"""Generic utility functions that are not specific to the XMFA format.
"""


def uint(s):
    """Convert a string to a non-negative integer.

    Parameters
    ----------
    s : str
        Integer string.

    Returns
    -------
    int
        Converted number.

    Raises
    ------
    ValueError
        String is not a non-negative integer.

    Notes
    -----
    Unlike Python's built-in `int`, signs ("+", "-") and inner underscores are
    not accepted. Surrounding whitespaces are.
    """
    s = s.strip()
    if not s.isdigit():
        raise ValueError(f'Invalid non-negative integer: "{s}".')
    return int(s)


def unit_int(s, unit):
    """Convert a string of an integer followed by a unit to the integer.

    Parameters
    ----------
    s : str
        Integer string with unit, such as "1000bp".
    unit : str
        Unit that follows the integer.

    Returns
    -------
    int
        Integer preceding the unit.

    Raises
    ------
    ValueError
        Unit is not found.
    ValueError
        Text preceding the unit is not a non-negative integer.

    Notes
    -----
    Only the first occurrence of the unit is considered. Anything after it is
    discarded, e.g., "1000bp (circular)" is 1000.
    """
    num, found, _ = s.partition(unit)
    if not found:
        raise ValueError(f'Unit "{unit}" is not found in "{s}".')
    return uint(num)
