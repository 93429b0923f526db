#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import pathlib

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def conf_file(tmp_path: pathlib.Path):
    """Fixture to write a TOML display settings file."""

    def _create_file(content: str) -> pathlib.Path:
        file_path = tmp_path / "numlens.toml"
        file_path.write_text(content, encoding="utf-8")
        return file_path

    return _create_file


@pytest.fixture(autouse=True)
def reset_numlens_logger():
    """Drop handlers installed by the CLI so they do not outlive the captured streams."""
    yield
    logger = logging.getLogger("numlens")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
