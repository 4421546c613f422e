from __future__ import annotations
from typing import List

import pytest

# Import project primitives
from unc_token.core import ONE_MILLIUNC, ONE_UNC, U128_MAX, UncToken


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def max_token() -> UncToken:
    return UncToken.from_yoctounc(U128_MAX)


@pytest.fixture()
def one_unc() -> UncToken:
    return UncToken.from_unc(1)


@pytest.fixture()
def tier_boundaries() -> List[int]:
    """Counts on both sides of every display-tier boundary, ascending."""
    return [
        0,
        1,
        ONE_MILLIUNC - 1,
        ONE_MILLIUNC,
        ONE_MILLIUNC + 1,
        999 * ONE_MILLIUNC,
        999 * ONE_MILLIUNC + 1,
        ONE_UNC - 1,
        ONE_UNC,
        ONE_UNC + 1,
        U128_MAX,
    ]
