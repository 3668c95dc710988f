"""
Tests for the NetScore composite.
"""

import pytest

from oss_trust_score.errors import ArityMismatch
from oss_trust_score.scoring import (
    DEFAULT_WEIGHTS,
    compute_net_score,
    normalize_latency,
)


def test_perfect_scores():
    result = compute_net_score([1, 1, 1, 1, 1], DEFAULT_WEIGHTS, [0.1] * 5)
    assert result.score == pytest.approx(1.0)
    assert result.latency == 0.5


def test_positional_slots():
    """The first slot multiplies everything; the second counts twice."""
    result = compute_net_score([1, 0.5, 1, 0, 0], DEFAULT_WEIGHTS, [0] * 5)
    assert result.score == pytest.approx(0.3)


def test_zero_first_slot_zeroes_score():
    result = compute_net_score([0, 1, 1, 1, 1], DEFAULT_WEIGHTS, [0] * 5)
    assert result.score == 0


def test_zero_third_slot_zeroes_score():
    result = compute_net_score([1, 1, 0, 1, 1], DEFAULT_WEIGHTS, [0] * 5)
    assert result.score == 0


def test_weights_are_not_applied():
    scores = [1, 0.5, 0.8, 0.2, 0.4]
    default = compute_net_score(scores, DEFAULT_WEIGHTS, [0] * 5)
    skewed = compute_net_score(scores, [1, 0, 0, 0, 0], [0] * 5)
    assert default.score == skewed.score


def test_latency_rounded():
    result = compute_net_score([0] * 5, DEFAULT_WEIGHTS, [0.1111, 0.2222, 0, 0, 0])
    assert result.latency == 0.333


@pytest.mark.parametrize(
    ("scores", "weights", "latencies"),
    [
        ([1, 1, 1, 1], DEFAULT_WEIGHTS, [0] * 5),
        ([1] * 5, [0.25] * 4, [0] * 5),
        ([1] * 5, DEFAULT_WEIGHTS, [0] * 6),
    ],
)
def test_arity_mismatch(scores, weights, latencies):
    with pytest.raises(ArityMismatch):
        compute_net_score(scores, weights, latencies)


def test_normalize_latency():
    assert normalize_latency(2.5) == 0.5
    assert normalize_latency(12.0) == 1.0
    assert normalize_latency(1.0, max_latency=2.0) == 0.5
