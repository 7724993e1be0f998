"""Iterate-until-stable driver."""

import logging
import operator
from collections.abc import Callable

from stratagraph._errors import FixedPointOverflowError

logger = logging.getLogger(__name__)


def fixed_point[V](
    data: V,
    step: Callable[[V], V],
    max_iterations: int | None,
    equal: Callable[[V, V], bool] = operator.eq,
) -> V:
    """Repeatedly apply ``step`` to ``data`` until ``equal(old, new)`` holds.

    Args:
        data: The initial value.
        step: The transformation to apply.
        max_iterations: Maximum number of step applications, or None for no
            limit. Only pass None when convergence is guaranteed.
        equal: Equality predicate between successive values.

    Returns:
        The first value that ``step`` leaves unchanged.

    Raises:
        FixedPointOverflowError: If ``max_iterations`` applications of ``step``
            did not converge.

    Example:
        >>> fixed_point(10, lambda x: x // 2, None)
        0

    """
    iteration = 0
    while True:
        if max_iterations is not None and iteration >= max_iterations:
            raise FixedPointOverflowError(max_iterations)
        new_data = step(data)
        iteration += 1
        if equal(data, new_data):
            logger.debug(f"Fixed point reached after {iteration} iterations")
            return new_data
        logger.debug(f"Fixed point iteration {iteration}: value changed")
        data = new_data
