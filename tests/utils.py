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

import itertools
from typing import Iterable

from mcpi import UniformSource


class SequenceSource(UniformSource):
    """Uniform source that replays a fixed sequence of draws, cycling forever."""

    def __init__(self, values: Iterable[float]):
        self._values = itertools.cycle(list(values))

    def sample(self) -> float:
        return next(self._values)


def fake_clock(*ticks: float):
    """Return a clock that yields the given ticks in order."""
    return iter(ticks).__next__
