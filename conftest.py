"""Configures pytest further."""
import pytest


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip slower tests")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run exhaustive 16-bit sweep tests")


def pytest_collection_modifyitems(config, items):
    skipdict = {}
    if config.getoption("--skip-slow"):
        skipdict["slow"] = pytest.mark.skip(reason="Slow test: needs no --skip-slow option")
    if not config.getoption("--run-extreme"):
        skipdict["extreme"] = pytest.mark.skip(reason="Exhaustive test: needs --run-extreme option")
    if not skipdict:
        return
    for item in items:
        for marker, skip in skipdict.items():
            if marker in item.keywords:
                item.add_marker(skip)
