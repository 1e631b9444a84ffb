"""Combine component match scores into an overall match score."""

from __future__ import annotations

from enum import Enum

from .algorithms import (
    match_addresses,
    match_birth_dates,
    match_documents,
    match_gender,
    match_identifiers,
    match_names,
    match_tax_ids,
)
from .records import MatchingConfig, MatchResult, MatchScoreBreakdown, Worker

_NAME_WEIGHT = 0.30
_DOB_WEIGHT = 0.25
_GENDER_WEIGHT = 0.10
_ADDRESS_WEIGHT = 0.10
_IDENTIFIER_WEIGHT = 0.10
_TAX_ID_WEIGHT = 0.10
_DOCUMENT_WEIGHT = 0.05

_DEFINITE_SCORE = 0.95
_POSSIBLE_SCORE = 0.50
_DOCUMENT_MATCH_SCORE = 0.98
_DETERMINISTIC_THRESHOLD = 0.75


class MatchQuality(Enum):
    """How confidently two records are judged to be the same worker."""

    DEFINITE = "definite"
    PROBABLE = "probable"
    POSSIBLE = "possible"
    UNLIKELY = "unlikely"

    def __str__(self) -> str:
        return self.value

    def is_match(self) -> bool:
        """Whether this quality counts as a match."""
        return self in (MatchQuality.DEFINITE, MatchQuality.PROBABLE)


class ProbabilisticScorer:
    """Scores candidates with a weighted sum of component similarities."""

    def __init__(self, config: MatchingConfig | None = None) -> None:
        self.config = config if config is not None else MatchingConfig()

    def calculate_score(self, worker: Worker, candidate: Worker) -> MatchResult:
        """Score ``candidate`` against ``worker``."""
        breakdown = MatchScoreBreakdown(
            name_score=match_names(worker.name, candidate.name),
            birth_date_score=match_birth_dates(worker.birth_date, candidate.birth_date),
            gender_score=match_gender(worker.gender, candidate.gender),
            address_score=match_addresses(worker.addresses, candidate.addresses),
            identifier_score=match_identifiers(worker.identifiers, candidate.identifiers),
            tax_id_score=match_tax_ids(worker, candidate),
            document_score=match_documents(worker.documents, candidate.documents),
        )

        # Exact tax ID or document matches are decisive on their own.
        if breakdown.tax_id_score >= 1.0:
            return MatchResult(candidate, 1.0, breakdown)
        if breakdown.document_score >= 1.0:
            return MatchResult(candidate, _DOCUMENT_MATCH_SCORE, breakdown)

        total = (
            breakdown.name_score * _NAME_WEIGHT
            + breakdown.birth_date_score * _DOB_WEIGHT
            + breakdown.gender_score * _GENDER_WEIGHT
            + breakdown.address_score * _ADDRESS_WEIGHT
            + breakdown.identifier_score * _IDENTIFIER_WEIGHT
            + breakdown.tax_id_score * _TAX_ID_WEIGHT
            + breakdown.document_score * _DOCUMENT_WEIGHT
        )
        return MatchResult(candidate, total, breakdown)

    def is_match(self, score: float) -> bool:
        """Whether ``score`` reaches the configured threshold."""
        return score >= self.config.threshold_score

    def classify_match(self, score: float) -> MatchQuality:
        """Classify ``score`` into a match quality band."""
        if score >= _DEFINITE_SCORE:
            return MatchQuality.DEFINITE
        if score >= self.config.threshold_score:
            return MatchQuality.PROBABLE
        if score >= _POSSIBLE_SCORE:
            return MatchQuality.POSSIBLE
        return MatchQuality.UNLIKELY


class DeterministicScorer:
    """Scores candidates by counting strict rules that hold."""

    def __init__(self, config: MatchingConfig | None = None) -> None:
        self.config = config if config is not None else MatchingConfig()

    def calculate_score(self, worker: Worker, candidate: Worker) -> MatchResult:
        """Score ``candidate`` against ``worker`` using fixed rules."""
        tax_id_score = match_tax_ids(worker, candidate)
        if tax_id_score >= 1.0:
            return MatchResult(candidate, 1.0, MatchScoreBreakdown(tax_id_score=tax_id_score))

        identifier_score = match_identifiers(worker.identifiers, candidate.identifiers)
        if identifier_score >= 0.98:
            return MatchResult(
                candidate,
                1.0,
                MatchScoreBreakdown(identifier_score=identifier_score, tax_id_score=tax_id_score),
            )

        document_score = match_documents(worker.documents, candidate.documents)
        if document_score >= 1.0:
            return MatchResult(
                candidate,
                1.0,
                MatchScoreBreakdown(
                    identifier_score=identifier_score,
                    tax_id_score=tax_id_score,
                    document_score=document_score,
                ),
            )

        name_score = match_names(worker.name, candidate.name)
        dob_score = match_birth_dates(worker.birth_date, candidate.birth_date)
        gender_score = match_gender(worker.gender, candidate.gender)

        points_available = 3.0
        points = sum(
            (
                name_score >= 0.90,
                dob_score >= 0.95,
                gender_score >= 1.0,
            )
        )

        address_score = match_addresses(worker.addresses, candidate.addresses)
        if worker.addresses and candidate.addresses:
            points_available += 1.0
            if address_score >= 0.80:
                points += 1

        breakdown = MatchScoreBreakdown(
            name_score=name_score,
            birth_date_score=dob_score,
            gender_score=gender_score,
            address_score=address_score,
            identifier_score=identifier_score,
            tax_id_score=tax_id_score,
            document_score=document_score,
        )
        return MatchResult(candidate, points / points_available, breakdown)

    def is_match(self, score: float) -> bool:
        """Whether at least three quarters of the rules held."""
        return score >= _DETERMINISTIC_THRESHOLD