"""Domain records used by the matching engine."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum


class Gender(Enum):
    """Administrative gender of a worker."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    UNKNOWN = "unknown"


class IdentifierType(Enum):
    """Kind of identifier assigned to a worker."""

    MRN = "MRN"
    SSN = "SSN"
    DL = "DL"
    NPI = "NPI"
    PPN = "PPN"
    TAX = "TAX"
    ODS = "ODS"
    OTHER = "Other"


class IdentifierUse(Enum):
    """Purpose of an identifier."""

    USUAL = "usual"
    OFFICIAL = "official"
    TEMP = "temp"
    SECONDARY = "secondary"
    OLD = "old"


class DocumentType(Enum):
    """Kind of identity document."""

    PASSPORT = "passport"
    DRIVERS_LICENSE = "drivers_license"
    NATIONAL_ID = "national_id"
    OTHER = "other"


_SSN_SYSTEM = "urn:oid:2.16.840.1.113883.4.1"


@dataclass
class HumanName:
    """A person's name split into its parts."""

    family: str
    given: list[str] = field(default_factory=list)
    prefix: list[str] = field(default_factory=list)
    suffix: list[str] = field(default_factory=list)
    use_type: str | None = None


@dataclass
class Address:
    """A postal address."""

    line1: str | None = None
    line2: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    use_type: str | None = None


@dataclass
class Identifier:
    """An identifier issued to a worker within some system."""

    identifier_type: IdentifierType
    system: str
    value: str
    use_type: IdentifierUse | None = None
    assigner: str | None = None

    @classmethod
    def mrn(cls, system: str, value: str) -> Identifier:
        """A medical record number issued by ``system``."""
        return cls(IdentifierType.MRN, system, value, use_type=IdentifierUse.USUAL)

    @classmethod
    def ssn(cls, value: str) -> Identifier:
        """A social security number."""
        return cls(IdentifierType.SSN, _SSN_SYSTEM, value, use_type=IdentifierUse.OFFICIAL)


@dataclass
class IdentityDocument:
    """A passport, licence or similar document."""

    document_type: DocumentType
    number: str
    issuing_country: str | None = None
    issuing_authority: str | None = None
    issue_date: date | None = None
    expiry_date: date | None = None
    verified: bool = False


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Worker:
    """A worker record as compared by the matching engine."""

    name: HumanName
    gender: Gender = Gender.UNKNOWN
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    identifiers: list[Identifier] = field(default_factory=list)
    active: bool = True
    additional_names: list[HumanName] = field(default_factory=list)
    telecom: list = field(default_factory=list)
    worker_type: str | None = None
    birth_date: date | None = None
    tax_id: str | None = None
    documents: list[IdentityDocument] = field(default_factory=list)
    emergency_contacts: list = field(default_factory=list)
    deceased: bool = False
    deceased_datetime: datetime | None = None
    addresses: list[Address] = field(default_factory=list)
    marital_status: str | None = None
    multiple_birth: bool | None = None
    photo: list = field(default_factory=list)
    managing_organization: uuid.UUID | None = None
    links: list = field(default_factory=list)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    def effective_tax_id(self) -> str | None:
        """The tax ID, falling back to the first TAX identifier."""
        if self.tax_id:
            return self.tax_id
        return next(
            (i.value for i in self.identifiers if i.identifier_type is IdentifierType.TAX),
            None,
        )


@dataclass(frozen=True)
class MatchingConfig:
    """Thresholds that govern matching."""

    threshold_score: float = 0.85
    exact_match_score: float = 1.0
    fuzzy_match_score: float = 0.8


@dataclass(frozen=True)
class MatchScoreBreakdown:
    """Per-component scores behind an overall match score."""

    name_score: float = 0.0
    birth_date_score: float = 0.0
    gender_score: float = 0.0
    address_score: float = 0.0
    identifier_score: float = 0.0
    tax_id_score: float = 0.0
    document_score: float = 0.0

    def summary(self) -> str:
        """Comma-separated list of the components that matched well."""
        checks = (
            ("name", self.name_score >= 0.90),
            ("DOB", self.birth_date_score >= 0.90),
            ("gender", self.gender_score >= 0.90),
            ("address", self.address_score >= 0.80),
            ("identifier", self.identifier_score >= 0.95),
            ("tax_id", self.tax_id_score >= 1.0),
            ("document", self.document_score >= 0.95),
        )
        parts = [label for label, ok in checks if ok]
        return ", ".join(parts) if parts else "no strong matches"


@dataclass
class MatchResult:
    """A candidate worker together with its match score."""

    worker: Worker
    score: float
    breakdown: MatchScoreBreakdown