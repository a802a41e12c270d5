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

from abc import ABC, abstractmethod
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field

# Fixed reference value used for the error column. Not math.pi, so reported
# errors stay comparable with other implementations of the benchmark.
REFERENCE_PI = 3.14159265359

MIN_EXPONENT = 2
MAX_EXPONENT = 8
EXPONENTS = range(MIN_EXPONENT, MAX_EXPONENT + 1)

TABLE_HEADER = "Samples   | Est. Pi      | Error (%)   | Run Time (s)"
TABLE_SEPARATOR = "-" * 57


class McpiErrorCode(IntEnum):
    """Error codes for simulation failures."""

    INVALID_ARGUMENT = 0
    INTERNAL = 1


class McpiError(Exception):
    """Error raised by the simulation.

    Attributes:
        code: The error code
        message: Human readable description of the error
    """

    def __init__(self, code: McpiErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.name}: {self.message}"


class ResultRow(BaseModel):
    """Outcome of one sweep at a fixed sample count."""

    model_config = ConfigDict(frozen=True)

    sample_label: str
    estimated_pi: float = Field(ge=0.0, le=4.0)
    error_percent: float = Field(ge=0.0)
    elapsed_seconds: float = Field(ge=0.0)


class UniformSource(ABC):
    """Abstract source of uniform random numbers.

    Implementations back the sampling loop; tests plug in fixed sequences
    to make a sweep reproducible.
    """

    @abstractmethod
    def sample(self) -> float:
        """Draw one number.

        Returns:
            A uniformly distributed float in [-1.0, 1.0]
        """
        pass


def sample_label(exponent: int) -> str:
    """Label a sweep by its sample count, e.g. ``10^2``."""
    return f"10^{exponent}"
