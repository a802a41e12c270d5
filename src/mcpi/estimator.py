"""
Copyright 2025 The Flame Authors.
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at
    http://www.apache.org/licenses/LICENSE-2.0
Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import logging
import time
from typing import Callable

from .types import (
    MAX_EXPONENT,
    MIN_EXPONENT,
    REFERENCE_PI,
    McpiError,
    McpiErrorCode,
    ResultRow,
    UniformSource,
    sample_label,
)

logger = logging.getLogger(__name__)


def sample_count(exponent: int) -> int:
    """Number of samples drawn for the given exponent, i.e. 10 ** exponent.

    Raises:
        McpiError: If the exponent is outside [MIN_EXPONENT, MAX_EXPONENT]
    """
    if not MIN_EXPONENT <= exponent <= MAX_EXPONENT:
        raise McpiError(
            McpiErrorCode.INVALID_ARGUMENT,
            f"exponent must be in [{MIN_EXPONENT}, {MAX_EXPONENT}], got {exponent}",
        )
    return 10**exponent


def count_inside(num_samples: int, source: UniformSource) -> int:
    """
    Count random points that fall inside the unit circle.

    Args:
        num_samples: Number of random points to sample
        source: Source of uniform draws in [-1, 1]; x is drawn before y

    Returns:
        Number of points with x^2 + y^2 <= 1, boundary included
    """
    draw = source.sample
    inside_circle = 0

    for _ in range(num_samples):
        x = draw()
        y = draw()

        if x * x + y * y <= 1.0:
            inside_circle += 1

    return inside_circle


def estimate_pi(inside: int, num_samples: int) -> float:
    """Estimate PI from the fraction of points inside the circle."""
    if num_samples <= 0:
        raise McpiError(McpiErrorCode.INVALID_ARGUMENT, f"num_samples must be positive, got {num_samples}")
    return 4.0 * inside / num_samples


def error_percent(estimate: float) -> float:
    """Relative error of the estimate against REFERENCE_PI, in percent."""
    return abs(estimate - REFERENCE_PI) / REFERENCE_PI * 100


def run_sweep(
    exponent: int,
    source: UniformSource,
    clock: Callable[[], float] = time.perf_counter,
) -> ResultRow:
    """Run one sweep of 10 ** exponent samples.

    Only the sampling loop is timed.

    Args:
        exponent: Sweep exponent in [MIN_EXPONENT, MAX_EXPONENT]
        source: Source of uniform draws
        clock: Monotonic clock returning seconds

    Returns:
        The ResultRow for this sweep
    """
    num_samples = sample_count(exponent)

    start = clock()
    inside = count_inside(num_samples, source)
    elapsed = clock() - start

    estimate = estimate_pi(inside, num_samples)
    row = ResultRow(
        sample_label=sample_label(exponent),
        estimated_pi=estimate,
        error_percent=error_percent(estimate),
        elapsed_seconds=elapsed,
    )

    logger.info(f"Sweep 10^{exponent}: {inside}/{num_samples} inside, estimate {estimate:.8f} in {elapsed:.6f}s")
    logger.debug(f"row: {row}")
    return row
