"""Serialize domain statements into BODS 0.2 JSON objects.

Optional fields that are unset are omitted rather than emitted as ``null``.
``replacesStatements`` is always written, empty or not.
"""

from __future__ import annotations

import json
from datetime import UTC
from typing import TYPE_CHECKING, Any, TypeAlias

from bodsify.domain.model import (
    EntityStatement,
    OwnershipOrControlStatement,
    PersonStatement,
)

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

    from bodsify.domain.model import (
        Address,
        Country,
        Identifier,
        Interest,
        PublicationDetails,
        Source,
        Statement,
    )

JsonObject: TypeAlias = dict[str, Any]


def _compact(values: JsonObject) -> JsonObject:
    return {key: value for key, value in values.items() if value is not None}


def _timestamp(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def serialize_identifier(identifier: Identifier) -> JsonObject:
    return _compact(
        {
            "scheme": identifier.scheme,
            "schemeName": identifier.scheme_name,
            "id": identifier.id,
        }
    )


def serialize_address(address: Address) -> JsonObject:
    return _compact(
        {"type": address.type.value, "address": address.address, "country": address.country}
    )


def serialize_country(country: Country) -> JsonObject:
    return _compact({"name": country.name, "code": country.code})


def serialize_interest(interest: Interest) -> JsonObject:
    return _compact(
        {
            "type": interest.type.value,
            "details": interest.details,
            "interestLevel": interest.interest_level.value if interest.interest_level else None,
            "beneficialOwnershipOrControl": interest.beneficial_ownership_or_control,
            "startDate": interest.start_date.isoformat() if interest.start_date else None,
            "endDate": interest.end_date.isoformat() if interest.end_date else None,
        }
    )


def serialize_source(source: Source) -> JsonObject:
    return _compact(
        {
            "type": [source_type.value for source_type in source.types],
            "retrievedAt": _timestamp(source.retrieved_at) if source.retrieved_at else None,
            "url": source.url,
            "assertedBy": [_compact({"name": agent.name}) for agent in source.asserted_by]
            or None,
        }
    )


def serialize_publication_details(details: PublicationDetails) -> JsonObject:
    return {
        "publicationDate": details.publication_date.isoformat(),
        "bodsVersion": details.bods_version,
        "publisher": {"name": details.publisher.name},
    }


def _variant_fields(statement: Statement) -> JsonObject:
    if isinstance(statement, EntityStatement):
        return {
            "entityType": statement.entity_type.value,
            "name": statement.name,
            "incorporatedInJurisdiction": (
                serialize_country(statement.incorporated_in_jurisdiction)
                if statement.incorporated_in_jurisdiction
                else None
            ),
            "addresses": [serialize_address(address) for address in statement.addresses] or None,
        }
    if isinstance(statement, PersonStatement):
        return {
            "personType": statement.person_type.value,
            "names": [
                {"type": name.type.value, "fullName": name.full_name} for name in statement.names
            ]
            or None,
            "birthDate": statement.birth_date,
            "placeOfBirth": (
                serialize_address(statement.place_of_birth) if statement.place_of_birth else None
            ),
            "nationalities": [serialize_country(country) for country in statement.nationalities]
            or None,
            "addresses": [serialize_address(address) for address in statement.addresses] or None,
        }
    if isinstance(statement, OwnershipOrControlStatement):
        return {
            "subject": {"describedByEntityStatement": statement.subject},
            "interestedParty": {"describedByPersonStatement": statement.interested_party},
            "interests": [serialize_interest(interest) for interest in statement.interests],
        }
    raise TypeError(f"Unsupported statement type: {type(statement).__name__}")


def serialize_statement(statement: Statement) -> JsonObject:
    """Return the BODS JSON object for ``statement``."""

    payload: JsonObject = {
        "statementID": statement.statement_id,
        "statementType": statement.statement_type.value,
        "isComponent": statement.is_component,
    }
    payload.update(_variant_fields(statement))
    payload["identifiers"] = [
        serialize_identifier(identifier) for identifier in statement.identifiers
    ] or None
    payload["replacesStatements"] = list(statement.replaces_statements)
    payload["source"] = serialize_source(statement.source) if statement.source else None
    payload["publicationDetails"] = (
        serialize_publication_details(statement.publication_details)
        if statement.publication_details
        else None
    )
    return _compact(payload)


def serialize_statements(statements: Iterable[Statement]) -> list[JsonObject]:
    return [serialize_statement(statement) for statement in statements]


def dump_statements(statements: Iterable[Statement]) -> str:
    """Render statements as an indented JSON array with a trailing newline."""

    return json.dumps(serialize_statements(statements), indent=2, ensure_ascii=False) + "\n"
