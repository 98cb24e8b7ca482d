"""
SDK for Token Distributor.

Provides client wrappers that report distributed cache usage.
"""

from .openai_client import DistributedCompletion, DistributingOpenAI

__all__ = ["DistributedCompletion", "DistributingOpenAI"]
