"""
Usage reporting in the prompt-caching field format.

Turns a TokenDistribution into the usage block an Anthropic-style
consumer reads (input_tokens, cache_creation_input_tokens,
cache_read_input_tokens, output_tokens).
"""

from typing import Dict, Optional

from .distribution import DEFAULT_RATIO, DistributionRatio, TokenDistribution, distribute


def build_usage(
    distribution: TokenDistribution,
    output_tokens: Optional[int] = None,
    omit_empty_cache_fields: bool = True
) -> Dict[str, int]:
    """Build a usage dictionary from a distribution.

    Args:
        distribution: Distributed input tokens
        output_tokens: Optional completion token count to include
        omit_empty_cache_fields: Drop both cache fields when neither is non-zero

    Returns:
        Usage dictionary keyed by the external field names

    Raises:
        ValueError: If output_tokens is negative
    """
    if output_tokens is not None and output_tokens < 0:
        raise ValueError("output_tokens cannot be negative")

    usage = {"input_tokens": distribution.input_tokens}

    if distribution.has_cache_tokens or not omit_empty_cache_fields:
        usage["cache_creation_input_tokens"] = distribution.cache_creation_input_tokens
        usage["cache_read_input_tokens"] = distribution.cache_read_input_tokens

    if output_tokens is not None:
        usage["output_tokens"] = output_tokens

    return usage


def distribute_usage(
    total_input_tokens: int,
    output_tokens: Optional[int] = None,
    ratio: DistributionRatio = DEFAULT_RATIO,
    omit_empty_cache_fields: bool = True
) -> Dict[str, int]:
    """Distribute a raw input count and return the usage dictionary."""
    distribution = distribute(total_input_tokens, ratio)
    return build_usage(
        distribution,
        output_tokens=output_tokens,
        omit_empty_cache_fields=omit_empty_cache_fields
    )
