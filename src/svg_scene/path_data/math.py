# %%
"""Mathematical functions for the path geometry helpers."""

# allow mathematical names, which would be invalid otherwise
# ruff: noqa: N803
from __future__ import annotations

import math
import os
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

import numba
from numba import njit
from numpy import nan

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")

# for easier access
f32 = numba.types.float32
Tuple = numba.types.Tuple

if os.environ.get("COVERAGE_DEBUG", "0") == "1":

    def njit(  # pylint: disable=function-redefined
        *args: Any, **kwargs: Any
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """Plain Python functions so coverage can trace them."""
        del args, kwargs

        def decorator(func: Callable[P, R]) -> Callable[P, R]:
            return func

        return decorator


@njit(f32(f32, f32, f32, f32, f32))
def cubic_bezier(t: float, P0: float, P1: float, P2: float, P3: float) -> float:
    """Evaluate one coordinate of a cubic Bezier curve at t."""
    return (
        (1 - t) ** 3 * P0
        + 3 * (1 - t) ** 2 * t * P1
        + 3 * (1 - t) * t**2 * P2
        + t**3 * P3
    )


@njit(Tuple([f32, f32])(f32, f32, f32, f32))
def derivative_roots(P0: float, P1: float, P2: float, P3: float) -> tuple[float, float]:
    """Get the parameters t where one coordinate of the curve turns.

    B'(t) / 3 = at^2 + bt + c, with NaN in place of a missing root.
    """
    a = -P0 + 3 * P1 - 3 * P2 + P3
    b = 2 * (P0 - 2 * P1 + P2)
    c = P1 - P0

    if a == 0:
        if b == 0:
            return (nan, nan)
        return (-c / b, nan)

    discriminant = b**2 - 4 * a * c
    if discriminant < 0:
        return (nan, nan)

    root = math.sqrt(discriminant)
    return ((-b + root) / (2 * a), (-b - root) / (2 * a))


@njit(Tuple([f32, f32])(f32, f32, f32, f32))
def cubic_extrema(P0: float, P1: float, P2: float, P3: float) -> tuple[float, float]:
    """Get the range (min, max) one coordinate of a cubic Bezier curve covers.

    Only turning points with t in [0, 1] lie on the segment.
    """
    low = min(P0, P3)
    high = max(P0, P3)

    for t in derivative_roots(P0, P1, P2, P3):
        if 0 <= t <= 1:
            value = cubic_bezier(t, P0, P1, P2, P3)
            low = min(low, value)
            high = max(high, value)

    return (low, high)
