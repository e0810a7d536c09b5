"""DOM anchor ids for chart widgets.

Every chart widget attaches to an element by id, so two charts in one
document must never share one. A source instance is created per rendered
document and handed to the renderer.
"""

from __future__ import annotations

import random
from typing import Optional, Set

DEFAULT_PREFIX = "tradingview"


class SequentialAnchorIds:
    """Deterministic ids: ``tradingview_1``, ``tradingview_2``, ..."""

    def __init__(self, prefix: str = DEFAULT_PREFIX):
        self.prefix = prefix
        self._counter = 0

    def next_id(self) -> str:
        self._counter += 1
        return f"{self.prefix}_{self._counter}"


class RandomAnchorIds:
    """Random suffixes, redrawn on collision. Pass ``seed`` for repeatable output."""

    def __init__(
        self,
        prefix: str = DEFAULT_PREFIX,
        seed: Optional[int] = None,
        upper: int = 1_000_000,
    ):
        self.prefix = prefix
        self.upper = upper
        self._random = random.Random(seed)
        self._used: Set[int] = set()

    def next_id(self) -> str:
        if len(self._used) >= self.upper:
            raise RuntimeError(f"anchor id space of {self.upper} exhausted")
        suffix = self._random.randrange(self.upper)
        while suffix in self._used:
            suffix = self._random.randrange(self.upper)
        self._used.add(suffix)
        return f"{self.prefix}_{suffix}"


ANCHOR_ID_SOURCES = {
    "random": RandomAnchorIds,
    "sequential": SequentialAnchorIds,
}


def make_anchor_ids(kind: str = "random", **kwargs):
    try:
        factory = ANCHOR_ID_SOURCES[kind]
    except KeyError:
        raise ValueError(
            f"Unknown anchor id source {kind!r}; expected one of "
            f"{sorted(ANCHOR_ID_SOURCES)}"
        ) from None
    return factory(**kwargs)
