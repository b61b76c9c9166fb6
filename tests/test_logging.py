import importlib

import pytest
from flask import Flask
from loguru import logger

import resource_table
from resource_table import ResourceTable, SortState


@pytest.fixture(scope="function")
def messages():
    records: list[str] = []
    sink_id = logger.add(records.append, format="{message}", level="DEBUG")
    yield records
    logger.remove(sink_id)


def test_import_keeps_host_sinks(messages: list[str]):
    importlib.reload(resource_table)
    logger.info("host app message")
    assert any("host app message" in message for message in messages)


def test_package_records_silent_until_enabled(messages: list[str]):
    importlib.reload(resource_table)
    SortState("name", "random")
    assert not any("Unknown sort direction" in message for message in messages)


def test_init_app_enables_package_records(messages: list[str]):
    importlib.reload(resource_table)
    ResourceTable(Flask(__name__))
    SortState("name", "random")
    assert any("Unknown sort direction 'random'" in message for message in messages)
    assert any("Resource table view: resource-table::simple" in message for message in messages)
