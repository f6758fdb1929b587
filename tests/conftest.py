import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from roomgrid.floor import Floor  # noqa: E402

SAMPLE_SEEDS = range(40)


@pytest.fixture(scope="session")
def sample_floors():
    """A spread of seeded floors of 3 to 12 rooms."""
    return [Floor(3 + seed % 10, seed=seed) for seed in SAMPLE_SEEDS]
