from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, List, Sequence

logger = logging.getLogger(__name__)


@dataclass
class RandomSource:
    """
    A thin wrapper around random.Random to:
    - centralize RNG handling for floor generation
    - support optional deterministic seeding for tests and reproducible floors
    - keep generation independent of the global ``random`` module state
    """

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.seed is not None:
            self._rng = random.Random(self.seed)
            logger.debug("Initialized RandomSource with deterministic seed=%s", self.seed)
        else:
            # Non-deterministic seed using system random state
            self._rng = random.Random()
            logger.debug("Initialized RandomSource with non-deterministic seed")

    def randrange(self, stop: int) -> int:
        return self._rng.randrange(stop)

    def shuffle(self, items: List[Any]) -> None:
        self._rng.shuffle(items)

    def choice(self, seq: Sequence[Any]) -> Any:
        if not seq:
            raise ValueError("RandomSource.choice() received an empty sequence")
        return seq[self._rng.randrange(0, len(seq))]

    def coin_flip(self) -> bool:
        """Fair coin: True with probability 0.5."""
        return self._rng.random() > 0.5


__all__ = ["RandomSource"]
