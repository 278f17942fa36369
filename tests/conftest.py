import sys
from pathlib import Path

import pytest

# Add project root to path so scripts/ is importable without installation
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def workshop_rows():
    return [
        "G-----",
        "XXXXX-",
        "S-X-X-",
        "--X-X-",
        "--X-X-",
        "------",
    ]
