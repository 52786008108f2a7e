import pytest
import tempfile
import shutil
from pathlib import Path

from fileroute.core.models import Config


@pytest.fixture
def temp_workspace():
    """Create a temporary directory for test files."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def config(temp_workspace):
    """Settings whose working directory is the temporary workspace."""
    return Config(scheme='file', working_directory=str(temp_workspace), log_level='WARNING')


@pytest.fixture
def sample_root(temp_workspace):
    """Create an endpoint root with a small tree of files."""
    root = temp_workspace / "inbox"
    root.mkdir()

    (root / "orders").mkdir()
    (root / "orders" / "2024").mkdir()
    (root / ".hidden").mkdir()

    (root / "readme.txt").write_text("top level")
    (root / "report.csv").write_text("a,b\n1,2\n")
    (root / ".DS_Store").write_bytes(b"\x00\x00")
    (root / "orders" / "order-1.csv").write_text("id\n1\n")
    (root / "orders" / "order-2.json").write_text('{"id": 2}')
    (root / "orders" / "2024" / "order-3.csv").write_text("id\n3\n")
    (root / ".hidden" / "secret.txt").write_text("hidden")

    return root
