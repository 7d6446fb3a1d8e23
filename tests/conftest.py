from __future__ import annotations

import pytest

from svm_engine.runtime import BackgroundRunner

XOR_PROBLEM = [
    ([0, 0], 0),
    ([0, 1], 1),
    ([1, 0], 1),
    ([1, 1], 0),
]

XOR_NORM_PROBLEM = [
    ([-1, -1], 0),
    ([-1, 1], 1),
    ([1, -1], 1),
    ([1, 1], 0),
]


@pytest.fixture
def xor_problem():
    return list(XOR_PROBLEM)


@pytest.fixture
def xor_norm_problem():
    return list(XOR_NORM_PROBLEM)


@pytest.fixture
def repeated_xor():
    """The 4-point XOR problem repeated 50 times (200 examples)."""
    return [ex for _ in range(50) for ex in XOR_PROBLEM]


@pytest.fixture
def three_clusters():
    centers = {0: (0.0, 0.0), 1: (5.0, 5.0), 2: (-5.0, 5.0)}
    offsets = [(-0.5, 0.0), (0.5, 0.0), (0.0, -0.5), (0.0, 0.5), (0.3, 0.3), (-0.3, -0.3)]
    return [
        ([cx + dx, cy + dy], label)
        for label, (cx, cy) in centers.items()
        for dx, dy in offsets
    ]


@pytest.fixture
def runner():
    r = BackgroundRunner(max_workers=4, name="svm-engine-test")
    yield r
    r.shutdown(wait=True)
