"""Strategies that find which candidate records match a worker."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from .records import MatchingConfig, MatchResult, Worker
from .scoring import DeterministicScorer, MatchQuality, ProbabilisticScorer

_DEFAULT_THRESHOLD = 0.85


class WorkerMatcher(ABC):
    """A strategy for comparing a worker with candidate records."""

    @abstractmethod
    def match_workers(self, worker: Worker, candidate: Worker) -> MatchResult:
        """Score a single candidate against ``worker``."""

    @abstractmethod
    def is_match(self, score: float) -> bool:
        """Whether ``score`` counts as a match under this strategy."""

    def find_matches(self, worker: Worker, candidates: Iterable[Worker]) -> list[MatchResult]:
        """Score every candidate and return the matches, best first."""
        results = (self.match_workers(worker, candidate) for candidate in candidates)
        matches = [result for result in results if self.is_match(result.score)]
        return sorted(matches, key=lambda result: result.score, reverse=True)


class ProbabilisticMatcher(WorkerMatcher):
    """Matches workers with a weighted probabilistic score."""

    def __init__(self, config: MatchingConfig | None = None) -> None:
        self._scorer = ProbabilisticScorer(config)

    def threshold(self) -> float:
        """The default probabilistic matching threshold."""
        return _DEFAULT_THRESHOLD

    def classify_match(self, score: float) -> MatchQuality:
        """Classify ``score`` into a match quality band."""
        return self._scorer.classify_match(score)

    def match_workers(self, worker: Worker, candidate: Worker) -> MatchResult:
        """Score ``candidate`` against ``worker``."""
        return self._scorer.calculate_score(worker, candidate)

    def find_matches(self, worker: Worker, candidates: Iterable[Worker]) -> list[MatchResult]:
        """Candidates reaching the configured threshold, best first."""
        return super().find_matches(worker, candidates)

    def is_match(self, score: float) -> bool:
        """Whether ``score`` reaches the configured threshold."""
        return self._scorer.is_match(score)


class DeterministicMatcher(WorkerMatcher):
    """Matches workers by counting strict rules that hold."""

    def __init__(self, config: MatchingConfig | None = None) -> None:
        self._scorer = DeterministicScorer(config)

    def match_workers(self, worker: Worker, candidate: Worker) -> MatchResult:
        """Score ``candidate`` against ``worker``."""
        return self._scorer.calculate_score(worker, candidate)

    def find_matches(self, worker: Worker, candidates: Iterable[Worker]) -> list[MatchResult]:
        """Candidates satisfying the deterministic rules, best first."""
        return super().find_matches(worker, candidates)

    def is_match(self, score: float) -> bool:
        """Whether enough deterministic rules held."""
        return self._scorer.is_match(score)