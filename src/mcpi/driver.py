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
import sys
from typing import Iterable, List, Optional, TextIO

from .estimator import run_sweep
from .sampler import SystemUniformSource
from .types import EXPONENTS, TABLE_HEADER, TABLE_SEPARATOR, ResultRow, UniformSource

logger = logging.getLogger(__name__)


def simulate(
    exponents: Iterable[int] = EXPONENTS,
    source: Optional[UniformSource] = None,
    out: Optional[TextIO] = None,
) -> List[ResultRow]:
    """Run one sweep per exponent and collect the results.

    A progress line is written to ``out`` as soon as each sweep finishes.

    Args:
        exponents: Sweep exponents, in the order they are run
        source: Source of uniform draws. A freshly seeded SystemUniformSource
                is used if None.
        out: Stream for progress lines, stdout by default

    Returns:
        One ResultRow per exponent, in order
    """
    if source is None:
        source = SystemUniformSource()
    if out is None:
        out = sys.stdout

    exponents = list(exponents)
    logger.info(f"Starting simulation over exponents {exponents}")

    results: List[ResultRow] = []
    for i in exponents:
        results.append(run_sweep(i, source))
        print(f"Done with i = {i}", file=out, flush=True)

    logger.info(f"Simulation finished with {len(results)} rows")
    return results


def format_table(rows: Iterable[ResultRow]) -> str:
    """Render results as the fixed-width report table."""
    lines = ["", TABLE_HEADER, TABLE_SEPARATOR]
    for row in rows:
        lines.append(
            f"{row.sample_label:>9} | "
            f"{row.estimated_pi:12.8f} | "
            f"{row.error_percent:11.8f} | "
            f"{row.elapsed_seconds:12.8f}"
        )
    return "\n".join(lines)


def main() -> int:
    """Run the full sweep and print the report table."""
    results = simulate()
    print(format_table(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
