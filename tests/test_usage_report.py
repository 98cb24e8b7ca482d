"""
Unit tests for usage reporting.

Tests the external usage-field layout and empty cache field omission.
"""

import pytest

from token_distributor.core.distribution import DistributionRatio, TokenDistribution, distribute
from token_distributor.core.usage_report import build_usage, distribute_usage


class TestBuildUsage:
    """Test build_usage output."""

    def test_distributed_usage_fields(self):
        """Verify all cache fields are reported when present."""
        usage = build_usage(distribute(1000))
        assert usage == {
            "input_tokens": 35,
            "cache_creation_input_tokens": 71,
            "cache_read_input_tokens": 894
        }

    def test_empty_cache_fields_omitted(self):
        """Verify cache fields are dropped when both are zero."""
        usage = build_usage(distribute(50))
        assert usage == {"input_tokens": 50}

    def test_empty_cache_fields_kept_when_requested(self):
        """Verify zero cache fields are kept when omission is off."""
        usage = build_usage(distribute(0), omit_empty_cache_fields=False)
        assert usage == {
            "input_tokens": 0,
            "cache_creation_input_tokens": 0,
            "cache_read_input_tokens": 0
        }

    def test_single_cache_field_reports_both(self):
        """Verify both cache fields appear if only one is non-zero."""
        distribution = TokenDistribution(input_tokens=5, cache_read_input_tokens=3)
        usage = build_usage(distribution)
        assert usage["cache_creation_input_tokens"] == 0
        assert usage["cache_read_input_tokens"] == 3

    def test_output_tokens_included(self):
        """Verify output tokens are appended when given."""
        usage = build_usage(distribute(20), output_tokens=7)
        assert usage == {"input_tokens": 20, "output_tokens": 7}

    def test_zero_output_tokens_included(self):
        """Verify zero output tokens still appear."""
        usage = build_usage(distribute(20), output_tokens=0)
        assert usage["output_tokens"] == 0

    def test_negative_output_tokens_raises_error(self):
        """Verify negative output tokens are rejected."""
        with pytest.raises(ValueError, match="output_tokens cannot be negative"):
            build_usage(distribute(20), output_tokens=-1)


class TestDistributeUsage:
    """Test distribute_usage helper."""

    def test_default_ratio(self):
        """Verify the 1:2:25 ratio is used by default."""
        usage = distribute_usage(1000, output_tokens=12)
        assert usage == {
            "input_tokens": 35,
            "cache_creation_input_tokens": 71,
            "cache_read_input_tokens": 894,
            "output_tokens": 12
        }

    def test_custom_ratio(self):
        """Verify custom ratio and omission settings are honored."""
        usage = distribute_usage(
            500,
            ratio=DistributionRatio(input_part=1, creation_part=0, read_part=1, threshold=1000),
            omit_empty_cache_fields=False
        )
        assert usage == {
            "input_tokens": 500,
            "cache_creation_input_tokens": 0,
            "cache_read_input_tokens": 0
        }

    def test_negative_input_raises_error(self):
        """Verify negative input propagates the distribution error."""
        with pytest.raises(ValueError):
            distribute_usage(-5)
