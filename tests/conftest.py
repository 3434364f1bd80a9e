from pathlib import Path
from typing import Any, Callable

import pytest

from imgmaker.coretypes import ParameterSet


@pytest.fixture(autouse=True, scope="session")
def suppress_debug_logging():
    # keep the console quiet while tests run
    from imgmaker.loggers import logger, temporary_log_level

    with temporary_log_level(logger, "CRITICAL"):
        yield


@pytest.fixture
def make_parameters(tmp_path: Path) -> Callable[..., ParameterSet]:
    """Factory for ParameterSet instances writing into `tmp_path`."""

    def _make(filename: str = "image.nrrd", **overrides: Any) -> ParameterSet:
        options: dict[str, Any] = {
            "dimension": 3,
            "number_of_components": 1,
            "scalar_type": "uchar",
            "size": (4, 3, 2),
            "fill_values": (0,),
            "output_path": tmp_path / filename,
        }
        options.update(overrides)
        return ParameterSet(**options)

    return _make
