"""Value objects embedded in statements.

These carry payload only. Reconciliation never inspects them, with the single
exception of ``Identifier`` whose ``(scheme, id)`` pair is the unit of
equality for matching.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from datetime import date, datetime

    from .enums import AddressType, InterestLevel, InterestType, NameType, SourceType


IdentifierKey: TypeAlias = tuple[str, str]


@dataclass(frozen=True, slots=True, kw_only=True)
class Identifier:
    scheme: str
    id: str | None
    scheme_name: str | None = None

    @property
    def key(self) -> IdentifierKey | None:
        """Matching key; ``None`` when the identifier carries no value."""

        if self.id is None:
            return None
        return (self.scheme, self.id)


@dataclass(frozen=True, slots=True, kw_only=True)
class Address:
    type: AddressType
    address: str
    country: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Country:
    name: str
    code: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Name:
    type: NameType
    full_name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class Interest:
    type: InterestType
    details: str | None = None
    interest_level: InterestLevel | None = None
    beneficial_ownership_or_control: bool | None = None
    start_date: date | None = None
    end_date: date | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Agent:
    name: str | None


@dataclass(frozen=True, slots=True, kw_only=True)
class Source:
    types: tuple[SourceType, ...]
    retrieved_at: datetime | None = None
    url: str | None = None
    asserted_by: tuple[Agent, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class Publisher:
    name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class PublicationDetails:
    publication_date: date
    bods_version: str
    publisher: Publisher
