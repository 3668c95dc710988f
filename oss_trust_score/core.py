"""
Core evaluation pipeline for OSS Trust Score.

Each input line is resolved to a repository, scored by every metric in turn,
combined into a NetScore and appended to the NDJSON export.
"""

import json
import logging
from pathlib import Path
from typing import Any, NamedTuple

from rich.console import Console

from oss_trust_score.config import get_max_latency
from oss_trust_score.metrics import (
    Collaborators,
    MetricResult,
    MetricSpec,
    Subject,
    compute_metric,
    load_metric_specs,
)
from oss_trust_score.resolvers import ReferenceResolver
from oss_trust_score.scoring import (
    DEFAULT_WEIGHTS,
    compute_net_score,
    normalize_latency,
)
from oss_trust_score.vcs import GitClient, GitHubClient

logger = logging.getLogger(__name__)
console = Console()

# Positional input order of compute_net_score, also the export field order
METRIC_ORDER = [
    "BusFactor",
    "ResponsiveMaintainer",
    "RampUp",
    "Correctness",
    "License",
]


class MetricScore(NamedTuple):
    """A metric score paired with its normalized latency."""

    score: float
    normalized_latency: float


class CompositeResult(NamedTuple):
    """The evaluation of one Subject."""

    subject_url: str
    net_score: float
    net_score_latency: float
    per_metric: dict[str, MetricScore]

    def to_record(self) -> dict[str, Any]:
        """Build the export record, rounding every number to 3 decimals."""
        record: dict[str, Any] = {
            "URL": self.subject_url,
            "NetScore": round(self.net_score, 3),
            "NetScore_Latency": round(self.net_score_latency, 3),
        }
        for name in METRIC_ORDER:
            metric = self.per_metric[name]
            record[name] = round(metric.score, 3)
            record[f"{name}_Latency"] = round(metric.normalized_latency, 3)
        return record


def default_collaborators() -> Collaborators:
    """Collaborators backed by the GitHub API and the local git executable."""
    return Collaborators(github=GitHubClient(), git=GitClient())


def evaluate_url(
    url: str,
    collaborators: Collaborators,
    specs: list[MetricSpec] | None = None,
    max_latency: float | None = None,
) -> CompositeResult:
    """
    Score a canonical repository URL with every metric.

    Metrics run sequentially, each timed on its own.

    Raises:
        InvalidRepositoryURL: If the URL has no owner/repository segments.
        Exception: Errors from metrics that do not recover on their own.
    """
    logger.info("Evaluating URL: %s", url)
    subject = Subject.from_url(url)
    if specs is None:
        specs = load_metric_specs()
    if max_latency is None:
        max_latency = get_max_latency()

    results: dict[str, MetricResult] = {}
    for spec in specs:
        results[spec.name] = compute_metric(spec, subject, collaborators)

    per_metric = {
        name: MetricScore(
            score=result.score,
            normalized_latency=normalize_latency(result.elapsed_seconds, max_latency),
        )
        for name, result in results.items()
    }

    net_score = compute_net_score(
        [per_metric[name].score for name in METRIC_ORDER],
        DEFAULT_WEIGHTS,
        [per_metric[name].normalized_latency for name in METRIC_ORDER],
    )

    return CompositeResult(
        subject_url=url,
        net_score=net_score.score,
        net_score_latency=normalize_latency(net_score.latency, max_latency),
        per_metric=per_metric,
    )


class BatchProcessor:
    """Scores every reference in an input file and writes NDJSON records."""

    def __init__(
        self,
        input_file: Path | str,
        output_file: Path | str,
        resolver: ReferenceResolver | None = None,
        collaborators: Collaborators | None = None,
        specs: list[MetricSpec] | None = None,
    ):
        self.input_file = Path(input_file)
        self.output_file = Path(output_file)
        self.resolver = resolver or ReferenceResolver()
        self.collaborators = collaborators or default_collaborators()
        self.specs = specs
        self._clear_output_file()

    def _clear_output_file(self) -> None:
        self.output_file.write_text("", encoding="utf-8")

    def process(self) -> int:
        """
        Process the input file line by line.

        The first error aborts the batch; records written before it remain in
        the output file.

        Returns:
            Number of records written.

        Raises:
            FileNotFoundError: If the input file does not exist.
        """
        logger.info("Processing URLs from file: %s", self.input_file)
        if not self.input_file.exists():
            raise FileNotFoundError(f'File at "{self.input_file}" does not exist.')

        written = 0
        with open(self.input_file, "r", encoding="utf-8") as f:
            for line in f:
                reference = line.strip()
                logger.info("Processing reference: %s", reference)
                repo_url = self.resolver.resolve(reference)
                result = evaluate_url(repo_url, self.collaborators, self.specs)
                self.write_result(result.to_record())
                written += 1
        return written

    def write_result(self, record: dict[str, Any]) -> None:
        """Append one record to the output file and echo it to stdout."""
        formatted = json.dumps(record, separators=(",", ":"))
        with open(self.output_file, "a", encoding="utf-8") as f:
            f.write(formatted + "\n")
        console.print(
            formatted, markup=False, highlight=False, emoji=False, soft_wrap=True
        )


def process_file(input_file: Path | str, output_file: Path | str) -> int:
    """Score every reference in input_file, writing records to output_file."""
    return BatchProcessor(input_file, output_file).process()
