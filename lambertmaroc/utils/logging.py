"""Logging utility for lambertmaroc"""

__all__ = ['LOGGER', 'log_not_converged']

import logging

from lambertmaroc._const import PRECISION_WARNING_TOLERANCE

LOGGER = logging.getLogger('lambertmaroc')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)


def log_not_converged(solver: str, iterations: int, residual: float):
    """
    Reports an iterative solve that hit its iteration cap. The last iterate is still
    used by the caller, so this is a loss of precision rather than a failure. A final
    step above PRECISION_WARNING_TOLERANCE is logged as a warning, anything smaller
    only at debug level.

    Args:
        solver:
            Name of the iterative computation, e.g. 'ecef_to_geodetic'

        iterations:
            The iteration cap that was reached

        residual:
            The change between the last two iterates, in radians
    """
    level = logging.WARNING if residual > PRECISION_WARNING_TOLERANCE else logging.DEBUG
    LOGGER.log(
        level,
        '%s did not converge within %d iterations (last change %.3e rad); '
        'using last iterate',
        solver, iterations, residual
    )
