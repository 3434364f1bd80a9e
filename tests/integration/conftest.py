# tests/integration/conftest.py

import pytest
from pathlib import Path
from click.testing import CliRunner


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark every test collected under tests/integration as 'integration'."""
    for item in items:
        item_path = Path(str(item.fspath))
        if "integration" in item_path.parts:
            item.add_marker("integration")


@pytest.fixture(scope="function")
def runner() -> CliRunner:
    return CliRunner()
