"""
Cache token distribution.

Splits a total input-token count into plain, cache-creation and
cache-read input tokens using a fixed part ratio (1:2:25 by default).
"""

import logging
import operator
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Below this many tokens, everything is reported as plain input
DISTRIBUTION_THRESHOLD = 100


@dataclass(frozen=True)
class DistributionRatio:
    """Part ratio and threshold used to split input tokens."""
    input_part: int = 1
    creation_part: int = 2
    read_part: int = 25
    threshold: int = DISTRIBUTION_THRESHOLD

    def __post_init__(self):
        """Validate ratio parts and threshold."""
        for name in ("input_part", "creation_part", "read_part", "threshold"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer")
            if value < 0:
                raise ValueError(f"{name} cannot be negative")
        if self.total_parts <= 0:
            raise ValueError("ratio must have at least one non-zero part")

    @property
    def total_parts(self) -> int:
        """Sum of all ratio parts (28 for 1:2:25)."""
        return self.input_part + self.creation_part + self.read_part


DEFAULT_RATIO = DistributionRatio()


@dataclass(frozen=True)
class TokenDistribution:
    """Input tokens split into plain and prompt-cache buckets.

    The three fields always sum to the count that was distributed.
    """
    input_tokens: int
    cache_creation_input_tokens: int = 0
    cache_read_input_tokens: int = 0

    @property
    def total_input_tokens(self) -> int:
        """Sum of all input buckets; equals the original input count."""
        return (
            self.input_tokens
            + self.cache_creation_input_tokens
            + self.cache_read_input_tokens
        )

    @property
    def has_cache_tokens(self) -> bool:
        """True if either cache bucket is non-zero."""
        return self.cache_creation_input_tokens > 0 or self.cache_read_input_tokens > 0


def distribute(
    total_input_tokens: int,
    ratio: DistributionRatio = DEFAULT_RATIO
) -> TokenDistribution:
    """Distribute input tokens across the plain and cache buckets.

    Below the ratio threshold all tokens are plain input. Otherwise the
    input and cache-creation shares are floor-divided from the ratio and
    cache-read receives the remainder, so no tokens are lost.

    Example with the default 1:2:25 ratio, 1000 tokens:
        input_tokens                = 1000 * 1 // 28 = 35
        cache_creation_input_tokens = 1000 * 2 // 28 = 71
        cache_read_input_tokens     = 1000 - 35 - 71 = 894

    Args:
        total_input_tokens: Observed input token count
        ratio: Part ratio and threshold (defaults to 1:2:25 over 100)

    Returns:
        TokenDistribution summing to total_input_tokens

    Raises:
        TypeError: If total_input_tokens is not an integer
        ValueError: If total_input_tokens is negative
    """
    if isinstance(total_input_tokens, bool):
        raise TypeError("total_input_tokens must be an integer")
    # Accepts any integer-like value (numpy ints, __index__ objects)
    total_input_tokens = operator.index(total_input_tokens)
    if total_input_tokens < 0:
        raise ValueError("total_input_tokens must be >= 0")

    if total_input_tokens < ratio.threshold:
        logger.debug("%d tokens below threshold %d, not distributed",
                     total_input_tokens, ratio.threshold)
        return TokenDistribution(input_tokens=total_input_tokens)

    input_tokens = total_input_tokens * ratio.input_part // ratio.total_parts
    creation_tokens = total_input_tokens * ratio.creation_part // ratio.total_parts
    # Remainder goes to cache_read
    read_tokens = total_input_tokens - input_tokens - creation_tokens

    logger.debug("Distributed %d tokens as %d/%d/%d", total_input_tokens,
                 input_tokens, creation_tokens, read_tokens)
    return TokenDistribution(
        input_tokens=input_tokens,
        cache_creation_input_tokens=creation_tokens,
        cache_read_input_tokens=read_tokens
    )


def total_input_tokens(distribution: TokenDistribution) -> int:
    """Return the sum of all input buckets of a distribution."""
    return distribution.total_input_tokens


def has_cache_tokens(distribution: TokenDistribution) -> bool:
    """Return True if the distribution carries any cache tokens."""
    return distribution.has_cache_tokens
