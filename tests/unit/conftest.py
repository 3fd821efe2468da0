from pathlib import Path

import pytest
from _pytest.nodes import Item

UNIT_DIR = Path(__file__).resolve().parent


def pytest_collection_modifyitems(
    session: object, config: object, items: list[Item]
) -> None:
    """Mark every test collected under tests/unit/ as ``unit``.

    Lets ``pytest -m unit`` select the settings, logging, model and error
    tests without tagging each file.
    """
    _ = (session, config)
    for item in items:
        if item.path.resolve().is_relative_to(UNIT_DIR):
            item.add_marker(pytest.mark.unit)
