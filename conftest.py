import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--catalog-file",
        action="store",
        default=None,
        help="also validate this catalog file",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast in-memory tests")
    config.addinivalue_line("markers", "custom_catalog: tests that need --catalog-file")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--catalog-file"):
        return
    skip_custom = pytest.mark.skip(reason="need --catalog-file option to run")
    for item in items:
        if "custom_catalog" in item.keywords:
            item.add_marker(skip_custom)
