"""
Distributing OpenAI client wrapper.

Reshapes completion usage into prompt-caching usage fields.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from openai import OpenAI

from ..core.distribution import DEFAULT_RATIO, DistributionRatio, TokenDistribution, distribute
from ..core.usage_report import build_usage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DistributedCompletion:
    """OpenAI response paired with its distributed usage."""
    response: Any
    distribution: TokenDistribution
    usage: Dict[str, int]


class DistributingOpenAI:
    """OpenAI client wrapper that distributes prompt tokens.

    The wrapped response is returned unchanged; the distributed usage
    is attached alongside it.
    """

    def __init__(
        self,
        model: str,
        ratio: DistributionRatio = DEFAULT_RATIO,
        omit_empty_cache_fields: bool = True
    ):
        """Initialize distributing OpenAI client.

        Args:
            model: OpenAI model name (required)
            ratio: Distribution ratio applied to prompt tokens
            omit_empty_cache_fields: Drop cache fields from usage when both are zero

        Raises:
            ValueError: If model is missing/empty
        """
        if not model or not model.strip():
            raise ValueError("model is required and cannot be empty")

        self.model = model
        self.ratio = ratio
        self.omit_empty_cache_fields = omit_empty_cache_fields
        self.client = OpenAI()

    def chat(
        self,
        messages: List[Dict[str, str]],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        **kwargs: Any
    ) -> DistributedCompletion:
        """Create chat completion and distribute its prompt tokens.

        Args:
            messages: List of message dictionaries (required)
            temperature: Sampling temperature (optional)
            max_tokens: Maximum tokens to generate (optional)
            **kwargs: Additional OpenAI parameters

        Returns:
            DistributedCompletion with the original response

        Raises:
            ValueError: If messages is empty or the response has no usage
            OpenAI API errors: Propagated without modification
        """
        if not messages:
            raise ValueError("messages is required and cannot be empty")

        response = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
            **kwargs
        )

        usage = response.usage
        if not usage:
            logger.warning("Response %s has no usage information", response.id)
            raise ValueError("OpenAI response missing usage information")

        distribution = distribute(usage.prompt_tokens, self.ratio)
        logger.debug("Response %s: %d prompt tokens, %d completion tokens",
                     response.id, usage.prompt_tokens, usage.completion_tokens)

        return DistributedCompletion(
            response=response,
            distribution=distribution,
            usage=build_usage(
                distribution,
                output_tokens=usage.completion_tokens,
                omit_empty_cache_fields=self.omit_empty_cache_fields
            )
        )
