import sys
import pathlib
import logging

import pytest

root_dir = pathlib.Path(__file__).resolve().parents[1]
# Ensure the src package is importable
if str(root_dir / "src") not in sys.path:
    sys.path.append(str(root_dir / "src"))


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
