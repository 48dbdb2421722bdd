import logging

import pytest

from hasselattice.elements.element_set import ElementSet


def pytest_configure(config):
    """Set up test environment before tests run."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@pytest.fixture
def abc() -> ElementSet:
    return ElementSet(["a", "b", "c"])
