import logging

import pytest

from py_convtable import TableRegistry, create_table
from py_convtable.logger import logger
from tests.fixtures_and_helpers import DISTANCE, TEMPERATURE, TYPOGRAPHY

logger.setLevel(logging.DEBUG)


@pytest.fixture
def typography_raw():
    return {key: dict(spec) for key, spec in TYPOGRAPHY.items()}


@pytest.fixture(scope="module")
def typography():
    return create_table(TYPOGRAPHY, 'typography').unwrap()


@pytest.fixture(scope="module")
def temperature():
    return create_table(TEMPERATURE, 'temperature').unwrap()


@pytest.fixture(scope="module")
def distance():
    return create_table(DISTANCE, 'distance').unwrap()


@pytest.fixture
def registry():
    reg = TableRegistry()
    yield reg
    reg.clear()
