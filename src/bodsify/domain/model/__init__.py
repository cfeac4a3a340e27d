"""Public domain model surface."""

from __future__ import annotations

from bodsify.domain.model.components import (
    Address,
    Agent,
    Country,
    Identifier,
    IdentifierKey,
    Interest,
    Name,
    PublicationDetails,
    Publisher,
    Source,
)
from bodsify.domain.model.enums import (
    AddressType,
    EntityType,
    InterestLevel,
    InterestType,
    NameType,
    PersonType,
    SourceType,
    StatementType,
)
from bodsify.domain.model.statements import (
    EntityStatement,
    OwnershipOrControlStatement,
    PersonStatement,
    Statement,
    StatementID,
)

__all__ = [  # noqa: RUF022
    # statements
    "Statement",
    "StatementID",
    "EntityStatement",
    "PersonStatement",
    "OwnershipOrControlStatement",
    # components
    "Address",
    "Agent",
    "Country",
    "Identifier",
    "IdentifierKey",
    "Interest",
    "Name",
    "PublicationDetails",
    "Publisher",
    "Source",
    # enums
    "AddressType",
    "EntityType",
    "InterestLevel",
    "InterestType",
    "NameType",
    "PersonType",
    "SourceType",
    "StatementType",
]
