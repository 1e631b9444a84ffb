from datetime import date

from workerindex.algorithms import (
    match_address,
    match_addresses,
    match_birth_dates,
    match_document,
    match_documents,
    match_family_names,
    match_gender,
    match_given_names,
    match_identifier,
    match_identifiers,
    match_names,
    match_postal_codes,
    match_tax_ids,
)
from workerindex.records import (
    Address,
    DocumentType,
    Gender,
    HumanName,
    Identifier,
    IdentifierType,
    IdentityDocument,
    Worker,
)

SYSTEM = "urn:oid:facility:hospital-a"


def name(family, *given):
    return HumanName(family=family, given=list(given))


def worker_with_tax_id(tax_id=None):
    w = Worker(name("Smith", "John"), Gender.MALE)
    w.tax_id = tax_id
    return w


def test_exact_name_match():
    n = name("Smith", "John")
    assert match_names(n, HumanName("Smith", ["John"])) > 0.99


def test_fuzzy_name_match():
    assert match_names(name("Smith", "John"), name("Smyth", "John")) > 0.85


def test_name_variants():
    assert match_names(name("Smith", "William"), name("Smith", "Bill")) > 0.90


def test_given_name_variant_score():
    assert match_given_names(["William"], ["Bill"]) == 0.95


def test_name_match_empty_strings():
    assert match_names(name(""), name("")) < 0.5


def test_name_match_similar_spellings():
    assert match_names(name("Muller", "Hans"), name("Mueller", "Hans")) > 0.70


def test_name_match_case_insensitivity():
    assert match_names(name("SMITH", "JOHN"), name("smith", "john")) > 0.99


def test_family_name_phonetic_floor():
    assert match_family_names("Robert", "Rupert") >= 0.85
    assert match_family_names("", "Smith") == 0.0


def test_exact_dob_match():
    dob = date(1980, 1, 15)
    assert match_birth_dates(dob, dob) == 1.0


def test_dob_typo():
    assert match_birth_dates(date(1980, 1, 15), date(1980, 1, 16)) > 0.90


def test_dob_match_exact():
    assert match_birth_dates(date(1990, 6, 15), date(1990, 6, 15)) == 1.0


def test_dob_match_off_by_one_year():
    assert match_birth_dates(date(1980, 3, 10), date(1981, 3, 10)) > 0.80


def test_dob_match_none_values():
    dob = date(1980, 1, 15)
    assert match_birth_dates(None, None) == 0.5
    assert match_birth_dates(dob, None) == 0.0
    assert match_birth_dates(None, dob) == 0.0


def test_dob_transposition():
    assert match_birth_dates(date(1980, 3, 12), date(1980, 12, 3)) == 0.90


def test_dob_unrelated():
    assert match_birth_dates(date(1980, 1, 15), date(1990, 6, 20)) == 0.0


def test_gender_match():
    assert match_gender(Gender.MALE, Gender.MALE) == 1.0
    assert match_gender(Gender.MALE, Gender.FEMALE) == 0.0
    assert match_gender(Gender.MALE, Gender.UNKNOWN) == 0.5


def test_gender_match_same():
    assert match_gender(Gender.FEMALE, Gender.FEMALE) == 1.0
    assert match_gender(Gender.OTHER, Gender.OTHER) == 1.0


def test_gender_match_different():
    assert match_gender(Gender.MALE, Gender.FEMALE) == 0.0
    assert match_gender(Gender.FEMALE, Gender.OTHER) == 0.0


def test_gender_match_unknown():
    assert match_gender(Gender.UNKNOWN, Gender.MALE) == 0.5
    assert match_gender(Gender.FEMALE, Gender.UNKNOWN) == 0.5
    assert match_gender(Gender.UNKNOWN, Gender.UNKNOWN) == 1.0


def test_postal_code_match():
    assert match_postal_codes("12345", "12345") == 1.0
    assert match_postal_codes("12345-6789", "12345") > 0.90


def test_address_match_exact():
    addr = Address(
        line1="123 Main Street", city="Springfield", state="IL",
        postal_code="62701", country="US",
    )
    assert match_addresses([addr], [addr]) > 0.99


def test_address_match_partial():
    addr1 = Address(line1="123 Main Street", city="Springfield", state="IL", postal_code="62701")
    addr2 = Address(line1="456 Oak Avenue", city="Springfield", state="IL", postal_code="62702")
    score = match_addresses([addr1], [addr2])
    assert 0.0 < score < 1.0


def test_address_match_empty():
    assert match_addresses([], [Address()]) == 0.0
    assert match_addresses([], []) == 0.0


def test_street_abbreviations_normalized():
    a = Address(line1="123 Main Street")
    b = Address(line1="123 main st.")
    assert match_address(a, b) == match_address(a, a)


def test_identifier_match_exact():
    id1 = Identifier(IdentifierType.MRN, SYSTEM, "MRN-12345")
    id2 = Identifier(IdentifierType.MRN, SYSTEM, "MRN-12345")
    assert match_identifiers([id1], [id2]) == 1.0


def test_identifier_match_different_type():
    id1 = Identifier(IdentifierType.MRN, SYSTEM, "12345")
    id2 = Identifier(IdentifierType.SSN, SYSTEM, "12345")
    assert match_identifiers([id1], [id2]) == 0.0


def test_identifier_formatting_difference():
    id1 = Identifier(IdentifierType.MRN, SYSTEM, "MRN-12345")
    id2 = Identifier(IdentifierType.MRN, SYSTEM, "mrn 12345")
    assert match_identifier(id1, id2) == 0.98


def test_identifier_different_system():
    id1 = Identifier(IdentifierType.MRN, SYSTEM, "1")
    id2 = Identifier(IdentifierType.MRN, "other", "1")
    assert match_identifier(id1, id2) == 0.0
    assert match_identifiers([], [id1]) == 0.0


def test_tax_id_match_exact():
    assert match_tax_ids(worker_with_tax_id("[national-id]"), worker_with_tax_id("[national-id]")) == 1.0


def test_tax_id_match_none():
    assert match_tax_ids(worker_with_tax_id(), worker_with_tax_id()) == 0.0


def test_tax_id_ignores_formatting():
    assert match_tax_ids(worker_with_tax_id("AB-12 34"), worker_with_tax_id("ab1234")) == 1.0
    assert match_tax_ids(worker_with_tax_id("--"), worker_with_tax_id("--")) == 0.0


def passport(number, country="US", doc_type=DocumentType.PASSPORT, verified=True):
    return IdentityDocument(
        document_type=doc_type, number=number, issuing_country=country, verified=verified,
    )


def test_document_match_exact():
    assert match_documents([passport("X12345678")], [passport("X12345678", verified=False)]) == 1.0


def test_document_match_different_type():
    doc2 = passport("X12345678", doc_type=DocumentType.DRIVERS_LICENSE)
    assert match_documents([passport("X12345678")], [doc2]) == 0.0


def test_document_match_different_country():
    assert match_document(passport("x-1234.5678"), passport("X12345678", country="GB")) == 0.95


def test_document_match_empty_number():
    assert match_document(passport(" - "), passport(" - ")) == 0.0
    assert match_documents([], [passport("X1")]) == 0.0