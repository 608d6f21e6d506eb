import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() reinstalls the root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
