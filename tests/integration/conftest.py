"""Integration tests need PostgreSQL with migrations applied.

Run them with STACKIT_INTEGRATION=1 and DATABASE__URL pointing at a
disposable database.
"""

import os

import pytest


def pytest_collection_modifyitems(config, items):
    if os.environ.get("STACKIT_INTEGRATION") == "1":
        return

    skip = pytest.mark.skip(reason="set STACKIT_INTEGRATION=1 to run")
    for item in items:
        if "integration" in item.path.parts:
            item.add_marker(skip)
