"""
Global test configuration and fixtures
"""
import sys
from pathlib import Path
import pytest
import tempfile
import shutil

# Add project root to Python path so tests run without an editable install
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Import fixtures from fixtures module
from tests.fixtures.content_fixtures import *
from tests.fixtures.config_fixtures import *


@pytest.fixture(scope="session")
def test_temp_dir():
    """Create a temporary directory for the test session"""
    temp_dir = tempfile.mkdtemp(prefix="sitespark_tests_")
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def temp_config_dir(test_temp_dir):
    """Create temporary directory for configuration files"""
    config_dir = test_temp_dir / "config"
    config_dir.mkdir(exist_ok=True)
    return config_dir


@pytest.fixture
def temp_content_dir(test_temp_dir):
    """Create temporary directory for site content files"""
    content_dir = test_temp_dir / "content"
    content_dir.mkdir(exist_ok=True)
    return content_dir


@pytest.fixture
def temp_output_dir(tmp_path):
    """Create a fresh output directory per test"""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir
