# -*- coding: utf-8 -*-
"""
QR Code Structural Areas Module

Identifies the modules of a QR symbol that scanners rely on to locate and
calibrate the code: the three finder patterns and the two timing lines.
These modules are always rendered as plain squares, whatever style the
caller asked for.

Functions:
    is_finder: Check if a module lies inside a finder pattern
    is_timing: Check if a module lies on a timing line
    is_structural: Finder or timing, with optional quiet zone offset
    build_structural_mask: Evaluate is_structural for a whole matrix
"""

from typing import List


# Finder patterns are 7x7 blocks
FINDER_SIZE = 7

# Row and column index of the timing patterns
TIMING_INDEX = 6


def is_finder(x: int, y: int, size: int) -> bool:
    """
    Check if module (x, y) lies in one of the three finder patterns.

    The finders sit in the top-left, top-right and bottom-left corners. The
    bottom-right corner never holds one.

    Args:
        x (int): Column index
        y (int): Row index
        size (int): Symbol size in modules

    Returns:
        bool: True if the module belongs to a finder pattern

    Example:
        >>> is_finder(0, 0, 21), is_finder(20, 20, 21)
        (True, False)
    """
    # (row0, col0) of each finder, same order as the ISO layout
    finder_positions = [(0, 0), (0, size - FINDER_SIZE), (size - FINDER_SIZE, 0)]

    for (r0, c0) in finder_positions:
        if r0 <= y < r0 + FINDER_SIZE and c0 <= x < c0 + FINDER_SIZE:
            return True
    return False


def is_timing(x: int, y: int, size: int) -> bool:
    """
    Check if module (x, y) lies on the row 6 / column 6 timing lines.

    Modules already covered by a finder pattern are not timing modules.
    """
    if not (0 <= x < size and 0 <= y < size):
        return False
    if x != TIMING_INDEX and y != TIMING_INDEX:
        return False
    return not is_finder(x, y, size)


def is_structural(x: int, y: int, size: int, border: int = 0) -> bool:
    """
    Check if module (x, y) of a matrix is a finder or timing module.

    When the matrix carries a quiet zone, coordinates are shifted into symbol
    space first. Quiet zone modules are never structural.

    Args:
        x (int): Column index in the matrix
        y (int): Row index in the matrix
        size (int): Matrix size in modules, quiet zone included
        border (int): Quiet zone width in modules

    Returns:
        bool: True if the module must render as a plain square
    """
    symbol_size = size - 2 * border
    sx = x - border
    sy = y - border
    if not (0 <= sx < symbol_size and 0 <= sy < symbol_size):
        return False
    return is_finder(sx, sy, symbol_size) or is_timing(sx, sy, symbol_size)


def build_structural_mask(size: int, border: int = 0) -> List[List[bool]]:
    """
    Build a mask marking every structural module of a matrix.

    Args:
        size (int): Matrix size in modules, quiet zone included
        border (int): Quiet zone width in modules

    Returns:
        List[List[bool]]: mask[y][x] = True if (x, y) is structural

    Example:
        >>> mask = build_structural_mask(21)
        >>> print(f"Structural modules: {sum(sum(row) for row in mask)}")
        Structural modules: 161
    """
    return [[is_structural(x, y, size, border) for x in range(size)]
            for y in range(size)]


"""
Structural modules of a version 1 symbol (21x21):

   0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0
 0 F F F F F F F . . . . . . . F F F F F F F
 1 F F F F F F F . . . . . . . F F F F F F F
 2 F F F F F F F . . . . . . . F F F F F F F
 3 F F F F F F F . . . . . . . F F F F F F F
 4 F F F F F F F . . . . . . . F F F F F F F
 5 F F F F F F F . . . . . . . F F F F F F F
 6 F F F F F F F T T T T T T T F F F F F F F
 7 . . . . . . T . . . . . . . . . . . . . .
 8 . . . . . . T . . . . . . . . . . . . . .
 9 . . . . . . T . . . . . . . . . . . . . .
10 . . . . . . T . . . . . . . . . . . . . .
11 . . . . . . T . . . . . . . . . . . . . .
12 . . . . . . T . . . . . . . . . . . . . .
13 . . . . . . T . . . . . . . . . . . . . .
14 F F F F F F F . . . . . . . . . . . . . .
15 F F F F F F F . . . . . . . . . . . . . .
16 F F F F F F F . . . . . . . . . . . . . .
17 F F F F F F F . . . . . . . . . . . . . .
18 F F F F F F F . . . . . . . . . . . . . .
19 F F F F F F F . . . . . . . . . . . . . .
20 F F F F F F F . . . . . . . . . . . . . .

Legend:
F = Finder pattern (7x7, three corners)
T = Timing pattern (row/column 6)
. = Styled module
"""
