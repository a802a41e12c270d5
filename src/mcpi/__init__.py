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
import os

_log_file = os.getenv("MCPI_LOG_FILE", "mcpi.log")

if os.getenv("MCPI_LOG_LEVEL", "INFO") == "DEBUG":
    logging.basicConfig(level=logging.DEBUG, filename=_log_file)
else:
    logging.basicConfig(level=logging.INFO, filename=_log_file)

from .types import (
    # Constants
    REFERENCE_PI,
    MIN_EXPONENT,
    MAX_EXPONENT,
    EXPONENTS,
    TABLE_HEADER,
    TABLE_SEPARATOR,

    # Enums
    McpiErrorCode,

    # Classes
    McpiError,
    ResultRow,
    UniformSource,

    # Functions
    sample_label,
)

from .sampler import SystemUniformSource
from .estimator import sample_count, count_inside, estimate_pi, error_percent, run_sweep
from .driver import simulate, format_table, main

__version__ = "0.1.0"

__all__ = [
    # Constants
    "REFERENCE_PI",
    "MIN_EXPONENT",
    "MAX_EXPONENT",
    "EXPONENTS",
    "TABLE_HEADER",
    "TABLE_SEPARATOR",

    # Enums
    "McpiErrorCode",

    # Classes
    "McpiError",
    "ResultRow",
    "UniformSource",
    "SystemUniformSource",

    # Estimator functions
    "sample_label",
    "sample_count",
    "count_inside",
    "estimate_pi",
    "error_percent",
    "run_sweep",

    # Driver functions
    "simulate",
    "format_table",
    "main",
]
