"""
Random mine placement.

Draws a uniformly random set of distinct cell indices with a partial
Fisher-Yates shuffle.
"""
from typing import Set, Union

import numpy as np

from .errors import InvalidConfiguration


# Anything numpy.random.default_rng accepts, including a Generator
Seed = Union[None, int, np.random.Generator]


class RandomPlacementSampler:
    """
    Sampler of distinct indices in [0, total).

    Every combination of `count` indices is equally likely, and the result
    always has exactly `count` members, including the edge cases
    count == 0 and count == total.
    """

    def __init__(self, seed: Seed = None) -> None:
        """
        Initialize the sampler.

        Args:
            seed: Random seed or generator for reproducibility.
        """
        self.rng = np.random.default_rng(seed)

    def sample(self, total: int, count: int) -> Set[int]:
        """
        Pick `count` distinct indices out of `total`.

        Args:
            total: Size of the index range.
            count: Number of indices to pick.

        Returns:
            Set of sampled indices.

        Raises:
            InvalidConfiguration: If count is not within 0..total.
        """
        if total < 0 or not 0 <= count <= total:
            raise InvalidConfiguration(
                f"Cannot sample {count} indices out of {total}"
            )

        indices = list(range(total))
        for i in range(count):
            j = int(self.rng.integers(i, total))
            indices[i], indices[j] = indices[j], indices[i]
        return set(indices[:count])
