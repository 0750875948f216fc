"""
Batch transformation of many points at once, either as delimited text (one point per
line) or as numpy arrays.
"""

__all__ = ['BatchResult', 'transform_array', 'transform_lines']

import re
from typing import List, NamedTuple, Optional

import numpy as np
from pydantic import validate_call

from lambertmaroc.systems import CoordinateSystem
from lambertmaroc.transform import _DEFAULT_TRANSFORMER, Transformer
from lambertmaroc.utils.logging import LOGGER

_FIELD_SEPARATORS = re.compile(r'[\s,;]+')

# Decimal places used when formatting results, by kind of destination system
_GEOGRAPHIC_PRECISION = 8
_GRID_PRECISION = 3


class BatchResult(NamedTuple):
    """Outcome of a text batch transformation"""
    lines: List[str]
    success_count: int
    error_count: int

    @property
    def text(self) -> str:
        """The transformed points, one tab-separated 'x<TAB>y' pair per line"""
        return '\n'.join(self.lines)


@validate_call(config=dict(arbitrary_types_allowed=True))
def transform_lines(
    text: str,
    from_system: CoordinateSystem,
    to_system: CoordinateSystem,
    precision: Optional[int] = None,
    transformer: Optional[Transformer] = None,
) -> BatchResult:
    """
    Transforms points given as text, one per line. The first two fields of each line are
    read as x and y; fields may be separated by whitespace, commas, semicolons or tabs.

    Blank lines are skipped. Lines that cannot be parsed, and points that cannot be
    transformed, are counted as errors and left out of the output.

    Args:
        text:
            The points to transform

        from_system:
            The system the points are expressed in

        to_system:
            The system to transform to

        precision:
            (Default 8 for wgs84, 3 otherwise) Decimal places of the formatted output

        transformer:
            (Default the module transformer) The Transformer to use

    Returns:
        BatchResult
    """
    transformer = transformer or _DEFAULT_TRANSFORMER
    if precision is None:
        precision = (
            _GEOGRAPHIC_PRECISION if to_system is CoordinateSystem.WGS84 else _GRID_PRECISION
        )

    lines, success_count, error_count = [], 0, 0
    for line in text.strip().splitlines():
        line = line.strip()
        if not line:
            continue

        parts = _FIELD_SEPARATORS.split(line)
        try:
            x, y = float(parts[0]), float(parts[1])
        except (IndexError, ValueError):
            error_count += 1
            continue

        result = transformer.transform((x, y), from_system, to_system)
        if result is None:
            error_count += 1
            continue

        rx, ry = result
        lines.append(f'{rx:.{precision}f}\t{ry:.{precision}f}')
        success_count += 1

    if error_count:
        LOGGER.info('%d line(s) could not be transformed from %s to %s',
                    error_count, from_system, to_system)

    return BatchResult(lines, success_count, error_count)


def transform_array(
    points,
    from_system: CoordinateSystem,
    to_system: CoordinateSystem,
    transformer: Optional[Transformer] = None,
) -> np.ndarray:
    """
    Transforms an array of points.

    Args:
        points:
            Array-like of shape (N, 2) holding (x, y) rows

        from_system:
            The system the points are expressed in

        to_system:
            The system to transform to

        transformer:
            (Default the module transformer) The Transformer to use

    Returns:
        A float array of shape (N, 2); rows that could not be transformed (including
        non-finite input rows) are NaN
    """
    transformer = transformer or _DEFAULT_TRANSFORMER
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return np.empty((0, 2))

    arr = np.atleast_2d(arr)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f'points must have shape (N, 2), got {arr.shape}')

    out = np.full(arr.shape, np.nan)
    finite = np.isfinite(arr).all(axis=1)
    for i in np.flatnonzero(finite):
        result = transformer.transform((arr[i, 0], arr[i, 1]), from_system, to_system)
        if result is not None:
            out[i] = result

    return out
