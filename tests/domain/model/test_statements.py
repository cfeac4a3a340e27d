from __future__ import annotations

from datetime import date

import pytest

from bodsify.domain.model import (
    EntityStatement,
    Identifier,
    Interest,
    InterestType,
    OwnershipOrControlStatement,
    PersonStatement,
    StatementType,
)


def test_statement_types_are_fixed_per_variant() -> None:
    assert EntityStatement(statement_id="c", name="PT").statement_type is StatementType.ENTITY
    assert PersonStatement(statement_id="p").statement_type is StatementType.PERSON
    ownership = OwnershipOrControlStatement(statement_id="o", subject="c", interested_party="p")
    assert ownership.statement_type is StatementType.OWNERSHIP_OR_CONTROL


def test_ownership_references_its_endpoints() -> None:
    ownership = OwnershipOrControlStatement(statement_id="o", subject="c", interested_party="p")

    assert ownership.referenced_statement_ids() == ("c", "p")
    assert PersonStatement(statement_id="p").referenced_statement_ids() == ()


def test_replacing_returns_a_new_statement() -> None:
    person = PersonStatement(
        statement_id="p2", identifiers=(Identifier(scheme="ID-DJP", id="1"),)
    )

    replaced = person.replacing(["p1"])

    assert replaced.replaces_statements == ("p1",)
    assert person.replaces_statements == ()
    assert replaced.identifiers_of() == person.identifiers_of()


def test_closed_copy_ends_every_interest() -> None:
    ownership = OwnershipOrControlStatement(
        statement_id="o1",
        subject="c",
        interested_party="p",
        interests=(
            Interest(type=InterestType.OTHER_INFLUENCE_OR_CONTROL),
            Interest(type=InterestType.SHAREHOLDING),
        ),
    )

    closed = ownership.closed(statement_id="o1-closed", end_date=date(2024, 3, 1))

    assert closed.statement_id == "o1-closed"
    assert closed.replaces_statements == ("o1",)
    assert [interest.end_date for interest in closed.interests] == [date(2024, 3, 1)] * 2
    assert all(interest.end_date is None for interest in ownership.interests)


def test_statements_are_immutable() -> None:
    person = PersonStatement(statement_id="p")

    with pytest.raises(AttributeError):
        person.statement_id = "other"  # type: ignore[misc]


def test_identifier_without_value_has_no_key() -> None:
    assert Identifier(scheme="ID-DJP", id=None).key is None
    assert Identifier(scheme="ID-DJP", scheme_name="Tax", id="1").key == ("ID-DJP", "1")
