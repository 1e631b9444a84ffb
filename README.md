# workerindex

Tools for working out whether two worker records describe the same person.

The package compares names (Jaro-Winkler, Levenshtein, Soundex and common
nicknames), birth dates (with allowances for typos, month/day swaps and a
year off by one), gender, addresses, identifiers, tax IDs and identity
documents, and combines those comparisons into a single score.

It has no runtime dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Records

`workerindex.records` holds the dataclasses and enums the matchers work on:
`Worker`, `HumanName`, `Address`, `Identifier` (with the `Identifier.mrn` and
`Identifier.ssn` constructors), `IdentityDocument`, `Gender`,
`IdentifierType`, `IdentifierUse`, `DocumentType`, `MatchingConfig`,
`MatchScoreBreakdown` and `MatchResult`.

`Worker.effective_tax_id()` returns the worker's `tax_id`, or failing that the
value of its first identifier of type `IdentifierType.TAX`.
`MatchScoreBreakdown.summary()` lists the components that matched well, or
returns `"no strong matches"`.

## Matching workers

```python
from datetime import date

from workerindex.records import Gender, HumanName, MatchingConfig, Worker
from workerindex.matcher import ProbabilisticMatcher, DeterministicMatcher

config = MatchingConfig(threshold_score=0.60, exact_match_score=1.0, fuzzy_match_score=0.8)

worker = Worker(
    name=HumanName(family="Smith", given=["John"]),
    gender=Gender.MALE,
    birth_date=date(1980, 1, 15),
)
candidates = [
    Worker(name=HumanName(family="Smyth", given=["John"]), gender=Gender.MALE,
           birth_date=date(1980, 1, 15)),
    Worker(name=HumanName(family="Johnson", given=["Bob"]), gender=Gender.MALE,
           birth_date=date(1990, 5, 20)),
]

matcher = ProbabilisticMatcher(config)
for result in matcher.find_matches(worker, candidates):
    print(result.score, matcher.classify_match(result.score), result.breakdown.summary())
```

`find_matches` keeps only candidates whose score passes `is_match` and returns
them best first; `match_workers` scores a single candidate. Both matchers
derive from the abstract `WorkerMatcher`.

`ProbabilisticMatcher` uses a weighted sum of the component scores (name 0.30,
birth date 0.25, gender, address, identifier and tax ID 0.10 each, documents
0.05) and matches at or above `MatchingConfig.threshold_score`. An exact tax
ID match scores 1.0 outright and an exact document match (same type, number
and issuing country) scores 0.98.

`DeterministicMatcher` applies strict rules instead: a matching tax ID,
identifier or identity document is a definite match (score 1.0); otherwise
name, birth date, gender and (when both sides have one) address each count as
one point, and at least three quarters of the points are needed.

## Scoring directly

`workerindex.scoring` holds `ProbabilisticScorer`, `DeterministicScorer` and
`MatchQuality` (`DEFINITE` at 0.95 and above, `PROBABLE` at the threshold and
above, `POSSIBLE` at 0.50 and above, otherwise `UNLIKELY`).

The individual comparisons live in `workerindex.algorithms`: `match_names`,
`match_family_names`, `match_given_names`, `match_birth_dates`,
`match_gender`, `match_addresses`, `match_address`, `match_postal_codes`,
`match_identifiers`, `match_identifier`, `match_tax_ids`, `match_documents`
and `match_document`. Each returns a score between 0.0 and 1.0.

The string measures are in `workerindex.similarity` (`jaro`, `jaro_winkler`,
`levenshtein`, `normalized_levenshtein`) and `workerindex.phonetic`
(`soundex`, `soundex_match`, `phonetic_similarity`):

```python
from workerindex.phonetic import soundex, soundex_match
from workerindex.similarity import jaro_winkler

soundex("Robert")                 # "R163"
soundex_match("Smith", "Smyth")   # True
jaro_winkler("martha", "marhta")
```

## What it does not do

The package is a matching library only. It does not store worker records, keep
an audit trail of changes, provide a database schema, or offer a command-line
tool or a network service; callers supply the records to compare and keep the
results themselves.