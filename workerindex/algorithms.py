"""Component matchers comparing parts of two worker records.

Every matcher returns a score between 0.0 and 1.0.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from .phonetic import phonetic_similarity
from .records import Address, Gender, HumanName, Identifier, IdentityDocument, Worker
from .similarity import jaro_winkler, normalized_levenshtein

_FAMILY_WEIGHT = 0.5
_GIVEN_WEIGHT = 0.4
_PREFIX_SUFFIX_WEIGHT = 0.1

_NAME_VARIANTS = (
    frozenset({"william", "bill", "billy", "will"}),
    frozenset({"robert", "bob", "bobby", "rob"}),
    frozenset({"richard", "dick", "rick", "ricky"}),
    frozenset({"james", "jim", "jimmy", "jamie"}),
    frozenset({"john", "jack", "johnny"}),
    frozenset({"michael", "mike", "mickey"}),
    frozenset({"elizabeth", "liz", "beth", "betty", "betsy"}),
    frozenset({"margaret", "maggie", "meg", "peggy"}),
    frozenset({"catherine", "cathy", "kate", "katie"}),
    frozenset({"jennifer", "jen", "jenny"}),
    frozenset({"christopher", "chris"}),
    frozenset({"anthony", "tony"}),
    frozenset({"thomas", "tom", "tommy"}),
    frozenset({"joseph", "joe", "joey"}),
    frozenset({"charles", "charlie", "chuck"}),
)

_STREET_ABBREVIATIONS = (
    ("street", "st"),
    ("avenue", "ave"),
    ("road", "rd"),
    ("drive", "dr"),
    ("boulevard", "blvd"),
    ("lane", "ln"),
    ("court", "ct"),
    ("circle", "cir"),
    (".", ""),
    (",", ""),
)


# Names

def match_names(name1: HumanName, name2: HumanName) -> float:
    """Weighted similarity of family, given and prefix/suffix parts."""
    family = match_family_names(name1.family, name2.family)
    given = match_given_names(name1.given, name2.given)
    affixes = _match_prefix_suffix(name1.prefix, name2.prefix, name1.suffix, name2.suffix)
    return family * _FAMILY_WEIGHT + given * _GIVEN_WEIGHT + affixes * _PREFIX_SUFFIX_WEIGHT


def match_family_names(family1: str, family2: str) -> float:
    """Fuzzy and phonetic similarity of two family names."""
    if not family1 or not family2:
        return 0.0
    f1 = family1.strip().lower()
    f2 = family2.strip().lower()
    if f1 == f2:
        return 1.0
    # Names that sound alike score at least 0.85.
    phonetic_floor = 0.85 if phonetic_similarity(f1, f2) >= 1.0 else 0.0
    return max(jaro_winkler(f1, f2), normalized_levenshtein(f1, f2), phonetic_floor)


def match_given_names(given1: Sequence[str], given2: Sequence[str]) -> float:
    """Similarity of the first given names, allowing for nicknames."""
    if not given1 or not given2:
        return 0.0
    first1 = given1[0].strip().lower()
    first2 = given2[0].strip().lower()
    if first1 == first2:
        return 1.0
    if _are_name_variants(first1, first2):
        return 0.95
    return max(jaro_winkler(first1, first2), normalized_levenshtein(first1, first2))


def _are_name_variants(name1: str, name2: str) -> bool:
    return any(name1 in group and name2 in group for group in _NAME_VARIANTS)


def _best_affix_score(parts1: Sequence[str], parts2: Sequence[str]) -> float:
    if not parts1 and not parts2:
        return 1.0
    if not parts1 or not parts2:
        return 0.5
    return max(
        max(0.0, jaro_winkler(p1.lower(), p2.lower()))
        for p1 in parts1
        for p2 in parts2
    )


def _match_prefix_suffix(
    prefix1: Sequence[str],
    prefix2: Sequence[str],
    suffix1: Sequence[str],
    suffix2: Sequence[str],
) -> float:
    return (_best_affix_score(prefix1, prefix2) + _best_affix_score(suffix1, suffix2)) / 2.0


# Dates of birth

def match_birth_dates(dob1: date | None, dob2: date | None) -> float:
    """Similarity of two birth dates, tolerant of common entry errors."""
    if dob1 is None and dob2 is None:
        return 0.5
    if dob1 is None or dob2 is None:
        return 0.0
    if dob1 == dob2:
        return 1.0

    days_diff = abs((dob1 - dob2).days)
    same_year = dob1.year == dob2.year
    same_month = dob1.month == dob2.month

    if same_year and same_month and days_diff <= 2:
        return 0.95
    if same_year and dob1.month == dob2.day and dob1.day == dob2.month:
        return 0.90
    if same_year and same_month:
        return 0.80
    if same_year:
        return 0.50
    if abs(dob1.year - dob2.year) == 1 and same_month and dob1.day == dob2.day:
        return 0.85
    return 0.0


# Gender

def match_gender(gender1: Gender, gender2: Gender) -> float:
    """1.0 when equal, 0.5 when either is unknown, otherwise 0.0."""
    if gender1 == gender2:
        return 1.0
    if Gender.UNKNOWN in (gender1, gender2):
        return 0.5
    return 0.0


# Addresses

def match_addresses(addresses1: Sequence[Address], addresses2: Sequence[Address]) -> float:
    """Compare the primary (first) address of each list."""
    if not addresses1 or not addresses2:
        return 0.0
    return match_address(addresses1[0], addresses2[0])


def match_address(addr1: Address, addr2: Address) -> float:
    """Weighted similarity of postal code, city, state and street."""
    postal = match_postal_codes(addr1.postal_code, addr2.postal_code)
    city = _match_cities(addr1.city, addr2.city)
    state = _match_states(addr1.state, addr2.state)
    street = _match_street_addresses(addr1.line1, addr2.line1)
    return postal * 0.3 + city * 0.2 + state * 0.2 + street * 0.3


def match_postal_codes(zip1: str | None, zip2: str | None) -> float:
    """Exact, five-character or three-character prefix match of postal codes."""
    if zip1 is None or zip2 is None:
        return 0.0
    z1 = zip1.strip().replace("-", "")
    z2 = zip2.strip().replace("-", "")
    if z1 == z2:
        return 1.0
    if len(z1) >= 5 and len(z2) >= 5 and z1[:5] == z2[:5]:
        return 0.95
    if len(z1) >= 3 and len(z2) >= 3 and z1[:3] == z2[:3]:
        return 0.70
    return 0.0


def _match_cities(city1: str | None, city2: str | None) -> float:
    if city1 is None or city2 is None:
        return 0.0
    c1 = city1.strip().lower()
    c2 = city2.strip().lower()
    if c1 == c2:
        return 1.0
    return jaro_winkler(c1, c2)


def _match_states(state1: str | None, state2: str | None) -> float:
    if state1 is None or state2 is None:
        return 0.0
    return 1.0 if state1.strip().upper() == state2.strip().upper() else 0.0


def _match_street_addresses(street1: str | None, street2: str | None) -> float:
    if street1 is None or street2 is None:
        return 0.0
    s1 = _normalize_street(street1)
    s2 = _normalize_street(street2)
    if s1 == s2:
        return 1.0
    return jaro_winkler(s1, s2)


def _normalize_street(street: str) -> str:
    result = street.strip().lower()
    for long_form, short_form in _STREET_ABBREVIATIONS:
        result = result.replace(long_form, short_form)
    return result


# Identifiers

def match_identifiers(ids1: Sequence[Identifier], ids2: Sequence[Identifier]) -> float:
    """Best score over every pair of identifiers."""
    if not ids1 or not ids2:
        return 0.0
    return max(max(0.0, match_identifier(a, b)) for a in ids1 for b in ids2)


def match_identifier(id1: Identifier, id2: Identifier) -> float:
    """Compare identifiers of the same type and system by value."""
    if id1.identifier_type != id2.identifier_type or id1.system != id2.system:
        return 0.0
    v1 = id1.value.strip().lower()
    v2 = id2.value.strip().lower()
    if v1 == v2:
        return 1.0
    if v1.replace("-", "").replace(" ", "") == v2.replace("-", "").replace(" ", ""):
        return 0.98
    return 0.0


# Tax IDs

def match_tax_ids(worker: Worker, candidate: Worker) -> float:
    """1.0 when both workers carry the same normalized tax ID, else 0.0."""
    tid1 = worker.effective_tax_id()
    tid2 = candidate.effective_tax_id()
    if tid1 is None or tid2 is None:
        return 0.0
    t1 = _normalize_tax_id(tid1)
    t2 = _normalize_tax_id(tid2)
    return 1.0 if t1 and t1 == t2 else 0.0


def _normalize_tax_id(tax_id: str) -> str:
    return "".join(c for c in tax_id if c.isascii() and c.isalnum()).lower()


# Identity documents

def match_documents(
    docs1: Sequence[IdentityDocument], docs2: Sequence[IdentityDocument]
) -> float:
    """Best score over every pair of identity documents."""
    if not docs1 or not docs2:
        return 0.0
    return max(max(0.0, match_document(a, b)) for a in docs1 for b in docs2)


def _normalize_document_number(number: str) -> str:
    return number.strip().upper().replace("-", "").replace(" ", "").replace(".", "")


def match_document(doc1: IdentityDocument, doc2: IdentityDocument) -> float:
    """Compare documents of the same type by number and issuing country."""
    if doc1.document_type != doc2.document_type:
        return 0.0
    n1 = _normalize_document_number(doc1.number)
    n2 = _normalize_document_number(doc2.number)
    if not n1 or not n2 or n1 != n2:
        return 0.0
    return 1.0 if doc1.issuing_country == doc2.issuing_country else 0.95