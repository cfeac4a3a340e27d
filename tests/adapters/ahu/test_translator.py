from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest

from bodsify.adapters.ahu import AhuStatementDeriver, country_code_for, parse_report
from bodsify.domain.identity import statement_id
from bodsify.domain.model import AddressType, InterestType, SourceType
from tests.helpers.ahu_reports import (
    COMPANY_LOCATION,
    COMPANY_NAME,
    make_foreign_owner,
    make_owner,
    make_report,
    make_transaction,
)

if TYPE_CHECKING:
    from bodsify.config import PublicationConfig
    from bodsify.domain.reconciliation import TransactionCandidates
    from tests.helpers.ahu_reports import JsonObject


def _derive(
    publication: PublicationConfig,
    as_of: datetime,
    *owners: JsonObject,
    location: str | None = COMPANY_LOCATION,
    **transaction_fields: object,
) -> TransactionCandidates:
    report = make_report(make_transaction(*owners, **transaction_fields), location=location)
    deriver = AhuStatementDeriver(publication=publication, retrieved_at=as_of)
    (candidates,) = deriver.iter_candidates(report)
    return candidates


def test_company_statement(publication: PublicationConfig, as_of: datetime) -> None:
    company = _derive(publication, as_of).company

    assert company.statement_id == statement_id(
        [{"nama_korporasi": COMPANY_NAME}, COMPANY_LOCATION], prefix="test"
    )
    assert company.name == COMPANY_NAME
    assert company.incorporated_in_jurisdiction is not None
    assert company.incorporated_in_jurisdiction.code == "ID"
    assert [identifier.key for identifier in company.identifiers] == [("ID-KHH", COMPANY_NAME)]
    (address,) = company.addresses
    assert address.type is AddressType.REGISTERED
    assert address.address == COMPANY_LOCATION
    assert address.country == "ID"


def test_company_without_location_has_no_address(
    publication: PublicationConfig, as_of: datetime
) -> None:
    located = _derive(publication, as_of).company
    unlocated = _derive(publication, as_of, location=None).company

    assert unlocated.addresses == ()
    assert unlocated.statement_id != located.statement_id


def test_domestic_person_statement(publication: PublicationConfig, as_of: datetime) -> None:
    (owner,) = _derive(publication, as_of, make_owner()).owners
    person = owner.person

    assert [name.full_name for name in person.names] == ["BUDI SANTOSO"]
    assert person.birth_date == "1970-01-31"
    assert person.place_of_birth is not None
    assert person.place_of_birth.address == "JAKARTA"
    assert [(c.name, c.code) for c in person.nationalities] == [("Indonesia", "ID")]
    assert [identifier.key for identifier in person.identifiers] == [
        ("ID-DJP", "01.234.567.8-901.000"),
        ("MISC-ID-KTP", "3171234567890001"),
    ]
    (residence,) = person.addresses
    assert residence.type is AddressType.RESIDENCE
    assert residence.address == (
        "JL. SUDIRMAN NO. 1, 001, 002, SENAYAN, KEBAYORAN BARU, JAKARTA SELATAN, "
        "DKI JAKARTA, Indonesia"
    )
    assert residence.country == "ID"


def test_foreign_person_statement(publication: PublicationConfig, as_of: datetime) -> None:
    (owner,) = _derive(publication, as_of, make_foreign_owner()).owners
    person = owner.person

    assert [(c.name, c.code) for c in person.nationalities] == [("Singapore", "SG")]
    assert person.identifiers[0].key is None
    assert person.identifiers[1].key == ("MISC-ID-PASPOR", "E1234567")
    (residence,) = person.addresses
    assert residence.address == "1 RAFFLES PLACE, Singapore"
    assert residence.country == "SG"


def test_unknown_country_leaves_code_unset(
    publication: PublicationConfig, as_of: datetime, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="bodsify.adapters.ahu.translator"):
        (owner,) = _derive(publication, as_of, make_foreign_owner(negara="Atlantis")).owners

    assert [(c.name, c.code) for c in owner.person.nationalities] == [("Atlantis", None)]
    assert "Atlantis" in caplog.text


def test_country_code_lookup_is_case_insensitive() -> None:
    assert country_code_for("japan") == "JP"
    assert country_code_for("  Malaysia ") == "MY"


def test_ownership_statement_links_company_and_person(
    publication: PublicationConfig, as_of: datetime
) -> None:
    candidates = _derive(publication, as_of, make_owner())
    (owner,) = candidates.owners
    ownership = owner.ownership

    assert ownership.subject == candidates.company.statement_id
    assert ownership.interested_party == owner.person.statement_id
    (interest,) = ownership.interests
    assert interest.type is InterestType.OTHER_INFLUENCE_OR_CONTROL
    assert interest.details == "Memiliki saham lebih dari 25%"
    assert interest.beneficial_ownership_or_control is True
    assert interest.end_date is None


def test_relationship_change_keeps_person_but_changes_ownership(
    publication: PublicationConfig, as_of: datetime
) -> None:
    (before,) = _derive(publication, as_of, make_owner()).owners
    (after,) = _derive(
        publication, as_of, make_owner(hubungan_bo="Memiliki hak suara lebih dari 25%")
    ).owners

    assert before.person.statement_id == after.person.statement_id
    assert before.ownership.statement_id != after.ownership.statement_id


def test_source_fields_feed_person_ids(publication: PublicationConfig, as_of: datetime) -> None:
    (before,) = _derive(publication, as_of, make_owner()).owners
    (after,) = _derive(publication, as_of, make_owner(), nama_pic="ANDI").owners

    assert before.person.statement_id != after.person.statement_id


def test_run_timestamp_does_not_feed_ids(publication: PublicationConfig) -> None:
    first = _derive(publication, datetime(2024, 1, 1, tzinfo=UTC), make_owner())
    second = _derive(publication, datetime(2025, 6, 1, tzinfo=UTC), make_owner())

    assert [s.statement_id for s in first.statements] == [
        s.statement_id for s in second.statements
    ]


def test_corporate_report_is_third_party_source(
    publication: PublicationConfig, as_of: datetime
) -> None:
    company = _derive(publication, as_of).company

    assert company.source is not None
    assert company.source.types == (SourceType.THIRD_PARTY,)
    assert [agent.name for agent in company.source.asserted_by] == ["PT MAJU BERSAMA"]
    assert company.source.retrieved_at == as_of
    assert company.source.url == publication.source_url


def test_other_reporters_are_self_declarations(
    publication: PublicationConfig, as_of: datetime
) -> None:
    company = _derive(publication, as_of, reporter_type="NOTARIS").company

    assert company.source is not None
    assert company.source.types == (SourceType.SELF_DECLARATION,)
    assert [agent.name for agent in company.source.asserted_by] == ["SITI AMINAH"]


def test_publication_details(publication: PublicationConfig, as_of: datetime) -> None:
    details = _derive(publication, as_of).company.publication_details

    assert details is not None
    assert details.publication_date == as_of.date()
    assert details.bods_version == "0.2"
    assert details.publisher.name == publication.publisher_name


def test_transactions_are_derived_in_report_order(
    publication: PublicationConfig, as_of: datetime
) -> None:
    report = parse_report(
        make_report(
            make_transaction(make_owner("A", npwp="1")),
            make_transaction(make_owner("B", npwp="2"), make_owner("C", npwp="3")),
        )
    )
    deriver = AhuStatementDeriver(publication=publication, retrieved_at=as_of)

    derived = list(deriver.iter_candidates(report))

    assert [[o.person.names[0].full_name for o in c.owners] for c in derived] == [
        ["A"],
        ["B", "C"],
    ]
