from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hashmatch import Hash  # noqa: E402


@pytest.fixture
def checkerboard_hash() -> Hash:
    # 4x4 grid, 1010 1010 1010 1010
    return Hash.from_bits(0xAAAA, 16, algorithm_id=1)


@pytest.fixture
def hash_64() -> Hash:
    return Hash.from_bits(0x0F0F_3C3C_00FF_8001, 64, algorithm_id=64)
