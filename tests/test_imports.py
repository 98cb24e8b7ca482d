# test_imports.py
import importlib
import subprocess
import sys

import pytest


@pytest.mark.parametrize("module_name", [
    "token_distributor.core.distribution",
    "token_distributor.core.usage_report",
    "token_distributor.config.loader",
    "token_distributor.sdk",
    "token_distributor.cli.main",
])
def test_module_imports(module_name):
    """Every public module imports without side effects."""
    assert importlib.import_module(module_name) is not None


def test_core_does_not_import_config():
    """The core layer loads without pulling in the YAML config layer."""
    code = (
        "import sys\n"
        "import token_distributor.core.usage_report\n"
        "assert 'token_distributor.config.loader' not in sys.modules\n"
    )
    result = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True)
    assert result.returncode == 0, result.stderr
