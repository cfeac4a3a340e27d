"""Statement variants.

``Statement`` is a closed union of exactly three frozen dataclasses. Matching
code never reaches into variant fields; it goes through the capability pair
``identifiers_of()`` / ``referenced_statement_ids()`` so a new statement kind
only has to implement those two methods.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, ClassVar, Self, TypeAlias

from .enums import EntityType, PersonType, StatementType

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date

    from .components import Address, Country, Identifier, Interest, Name, PublicationDetails, Source


StatementID: TypeAlias = str


@dataclass(frozen=True, slots=True, kw_only=True)
class _StatementBase:
    statement_id: StatementID
    identifiers: tuple[Identifier, ...] = ()
    replaces_statements: tuple[StatementID, ...] = ()
    is_component: bool = False
    source: Source | None = None
    publication_details: PublicationDetails | None = None

    # class-level discriminator; subclasses must override
    STATEMENT_TYPE: ClassVar[StatementType]

    @property
    def statement_type(self) -> StatementType:
        return self.STATEMENT_TYPE

    def identifiers_of(self) -> tuple[Identifier, ...]:
        return self.identifiers

    def referenced_statement_ids(self) -> tuple[StatementID, ...]:
        return ()

    def replacing(self, statement_ids: Iterable[StatementID]) -> Self:
        """Return a copy carrying ``statement_ids`` as its replacement links."""

        return replace(self, replaces_statements=tuple(statement_ids))


@dataclass(frozen=True, slots=True, kw_only=True)
class EntityStatement(_StatementBase):
    STATEMENT_TYPE: ClassVar[StatementType] = StatementType.ENTITY

    name: str
    entity_type: EntityType = EntityType.REGISTERED_ENTITY
    incorporated_in_jurisdiction: Country | None = None
    addresses: tuple[Address, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class PersonStatement(_StatementBase):
    STATEMENT_TYPE: ClassVar[StatementType] = StatementType.PERSON

    person_type: PersonType = PersonType.KNOWN_PERSON
    names: tuple[Name, ...] = ()
    birth_date: str | None = None
    place_of_birth: Address | None = None
    nationalities: tuple[Country, ...] = ()
    addresses: tuple[Address, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class OwnershipOrControlStatement(_StatementBase):
    """Relationship between an entity (subject) and a person (interested party).

    For matching, the identity of an ownership statement is the identifiers of
    the two statements it connects, never its own ``identifiers``.
    """

    STATEMENT_TYPE: ClassVar[StatementType] = StatementType.OWNERSHIP_OR_CONTROL

    subject: StatementID
    interested_party: StatementID
    interests: tuple[Interest, ...] = ()

    def referenced_statement_ids(self) -> tuple[StatementID, ...]:
        return (self.subject, self.interested_party)

    def closed(self, *, statement_id: StatementID, end_date: date) -> OwnershipOrControlStatement:
        """Return a closing copy that ends every interest on ``end_date``."""

        return replace(
            self,
            statement_id=statement_id,
            replaces_statements=(self.statement_id,),
            interests=tuple(replace(interest, end_date=end_date) for interest in self.interests),
        )


Statement: TypeAlias = EntityStatement | PersonStatement | OwnershipOrControlStatement
