"""
Configuration management and loading.

Handles the distribution ratio and reporting settings.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from token_distributor.core.distribution import DEFAULT_RATIO, DistributionRatio


@dataclass(frozen=True)
class DistributionConfig:
    """Complete distribution configuration."""
    ratio: DistributionRatio = DEFAULT_RATIO
    omit_empty_cache_fields: bool = True


def default_config() -> DistributionConfig:
    """Return the built-in configuration (1:2:25 ratio, threshold 100)."""
    return DistributionConfig()


def load_distribution_config(path: str) -> DistributionConfig:
    """Load and validate distribution configuration from YAML file.

    Every section is optional; anything not given falls back to the
    built-in defaults. Unknown keys are rejected rather than ignored.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated DistributionConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is invalid
        ValueError: If configuration is invalid
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Distribution config file not found: {path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML in config file {path}: {e}")

    if not raw_config:
        raise ValueError("Configuration file is empty")
    if not isinstance(raw_config, dict):
        raise ValueError("Configuration must be a dictionary")

    allowed_top_keys = {'ratio', 'threshold', 'report'}
    unknown_keys = set(raw_config.keys()) - allowed_top_keys
    if unknown_keys:
        raise ValueError(f"Unknown configuration keys: {unknown_keys}")

    ratio = _parse_ratio(raw_config.get('ratio', {}), raw_config.get('threshold', DEFAULT_RATIO.threshold))

    report_data = raw_config.get('report', {})
    if not isinstance(report_data, dict):
        raise ValueError("'report' must be a dictionary")

    unknown_report_keys = set(report_data.keys()) - {'omit_empty_cache_fields'}
    if unknown_report_keys:
        raise ValueError(f"Unknown report keys: {unknown_report_keys}")

    omit_empty = report_data.get('omit_empty_cache_fields', True)
    if not isinstance(omit_empty, bool):
        raise ValueError("'omit_empty_cache_fields' in report must be a boolean")

    return DistributionConfig(ratio=ratio, omit_empty_cache_fields=omit_empty)


def _parse_ratio(data: Dict[str, Any], threshold: Any) -> DistributionRatio:
    """Parse and validate the ratio section and threshold.

    Args:
        data: Ratio configuration data
        threshold: Raw threshold value

    Returns:
        Validated DistributionRatio

    Raises:
        ValueError: If configuration is invalid
    """
    if not isinstance(data, dict):
        raise ValueError("'ratio' must be a dictionary")

    allowed_keys = {'input', 'cache_creation', 'cache_read'}
    unknown_keys = set(data.keys()) - allowed_keys
    if unknown_keys:
        raise ValueError(f"Unknown keys in ratio: {unknown_keys}")

    parts = {
        'input': data.get('input', DEFAULT_RATIO.input_part),
        'cache_creation': data.get('cache_creation', DEFAULT_RATIO.creation_part),
        'cache_read': data.get('cache_read', DEFAULT_RATIO.read_part),
    }
    for key, value in parts.items():
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"'{key}' in ratio must be an integer >= 0")

    if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 0:
        raise ValueError("'threshold' must be an integer >= 0")

    return DistributionRatio(
        input_part=parts['input'],
        creation_part=parts['cache_creation'],
        read_part=parts['cache_read'],
        threshold=threshold
    )
