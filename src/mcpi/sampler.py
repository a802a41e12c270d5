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
import random
from typing import Optional

from .types import UniformSource

logger = logging.getLogger(__name__)


class SystemUniformSource(UniformSource):
    """Uniform source backed by a private Mersenne Twister generator.

    Args:
        seed: Seed for the generator. If None (default), a seed is taken
              from os.urandom so every process draws a different stream.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = int.from_bytes(os.urandom(16), "big")
        self._seed = seed
        self._rng = random.Random(seed)
        logger.debug(f"SystemUniformSource seeded with {seed}")

    @property
    def seed(self) -> int:
        return self._seed

    def sample(self) -> float:
        return self._rng.uniform(-1.0, 1.0)
