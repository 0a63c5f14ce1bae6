"""
Tests for Collision Estimate
============================
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hhash.collision import CollisionReport, estimate_collision


class TestEstimateCollision:
    """Tests for estimate_collision()."""

    def test_product_of_sizes(self):
        report = estimate_collision([5, 10, 20])
        assert report.combinations == 1000
        assert report.percentage == pytest.approx(0.1)
        assert report.probability == pytest.approx(0.001)
        assert report.odds == "1 in 1000"

    def test_no_tokens(self):
        """A pattern without tokens always collides."""
        report = estimate_collision([])
        assert report.combinations == 1
        assert report.percentage == pytest.approx(100.0)

    def test_accepts_generator(self):
        report = estimate_collision(n for n in (2, 3))
        assert report.sizes == (2, 3)
        assert report.combinations == 6

    def test_large_patterns_do_not_overflow(self):
        report = estimate_collision([1000] * 10)
        assert report.combinations == 10 ** 30

    def test_rejects_non_positive_sizes(self):
        with pytest.raises(ValueError):
            estimate_collision([3, 0])


class TestCollisionReport:
    """Tests for report formatting."""

    def test_describe(self):
        text = estimate_collision([5, 10, 20]).describe()
        assert text.startswith("there is 1 in 1000 chance (0.1000000000000000%)")
        assert "if allowing repeats" in text

    def test_to_dict(self):
        data = estimate_collision([4, 5]).to_dict()
        assert data["sizes"] == [4, 5]
        assert data["combinations"] == 20
        assert data["odds"] == "1 in 20"

    def test_frozen(self):
        report = CollisionReport(sizes=(2,), combinations=2)
        with pytest.raises(Exception):
            report.combinations = 3
