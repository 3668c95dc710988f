"""
Composite scoring (NetScore) and latency normalization.
"""

import logging
from typing import NamedTuple, Sequence

from oss_trust_score.config import DEFAULT_MAX_LATENCY
from oss_trust_score.errors import ArityMismatch

logger = logging.getLogger(__name__)

METRIC_COUNT = 5
DEFAULT_WEIGHTS = (0.2, 0.2, 0.2, 0.2, 0.2)


def normalize_latency(
    elapsed_seconds: float, max_latency: float = DEFAULT_MAX_LATENCY
) -> float:
    """Scale elapsed time against the latency ceiling, clamped at 1."""
    return min(elapsed_seconds / max_latency, 1.0)


class NetScore(NamedTuple):
    """Weighted composite of the five metric scores."""

    score: float
    latency: float


def compute_net_score(
    scores: Sequence[float],
    weights: Sequence[float] = DEFAULT_WEIGHTS,
    latencies: Sequence[float] = (0.0,) * METRIC_COUNT,
) -> NetScore:
    """
    Combine five metric scores into the NetScore.

    Scores arrive in the order
    ``[bus_factor, responsiveness, ramp_up, correctness, license]``. The
    formula reads them by position as ``[license, RM, other, BF, C]``:

        license * (0.4*RM + 0.2*BF + 0.2*C + 0.2*RM) * other

    so RM counts twice and the named terms do not line up with the metrics
    supplying them. Weights are validated but not applied. The result is
    not re-normalized and may exceed 1.

    Latency is the sum of the five (already normalized) latencies, rounded
    to three decimals.

    Raises:
        ArityMismatch: If any input does not have exactly five entries.
    """
    if (
        len(scores) != METRIC_COUNT
        or len(weights) != METRIC_COUNT
        or len(latencies) != METRIC_COUNT
    ):
        raise ArityMismatch(
            "Scores, weights, and latencies must have exactly "
            f"{METRIC_COUNT} elements each "
            f"(got {len(scores)}, {len(weights)}, {len(latencies)})."
        )

    license_slot = scores[0]
    rm_slot = scores[1]
    other_slot = scores[2]
    bf_slot = scores[3]
    c_slot = scores[4]

    score = (
        license_slot
        * (0.4 * rm_slot + 0.2 * bf_slot + 0.2 * c_slot + 0.2 * rm_slot)
        * other_slot
    )
    latency = round(sum(latencies), 3)
    logger.debug("NetScore %s with latency %s", score, latency)
    return NetScore(score=score, latency=latency)
