"""Translate AHU report payloads into candidate BODS statements.

Field mapping only: every method here is a pure function of its inputs plus
the run timestamp stamped into source and publication metadata. Cross
transaction memory lives in the reconciliation engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from logging import getLogger
from typing import TYPE_CHECKING, Final

import pycountry
from pydantic import ValidationError

from bodsify.domain.identity import statement_id
from bodsify.domain.model import (
    Address,
    AddressType,
    Agent,
    Country,
    EntityStatement,
    EntityType,
    Identifier,
    Interest,
    InterestLevel,
    InterestType,
    Name,
    NameType,
    OwnershipOrControlStatement,
    PersonStatement,
    PersonType,
    PublicationDetails,
    Publisher,
    Source,
    SourceType,
)
from bodsify.domain.reconciliation import OwnerCandidates, TransactionCandidates

from .schema import CITIZEN, OwnerPayload, ReportPayload, ReportPayloadInput, TransactionPayload

if TYPE_CHECKING:
    from collections.abc import Iterator
    from datetime import datetime

    from bodsify.config import PublicationConfig
    from bodsify.domain.identity import JsonValue
    from bodsify.domain.model import StatementID


log = getLogger(__name__)

INDONESIA: Final[Country] = Country(name="Indonesia", code="ID")
COMPANY_ID_SCHEME: Final[str] = "ID-KHH"
COMPANY_ID_SCHEME_NAME: Final[str] = "Ministry of Justice & Human Rights"
TAX_ID_SCHEME: Final[str] = "ID-DJP"
TAX_ID_SCHEME_NAME: Final[str] = "Director General of Taxes"


class InvalidReportError(ValueError):
    """Raised when a report payload does not have the expected AHU shape."""


def parse_report(payload: ReportPayloadInput) -> ReportPayload:
    if isinstance(payload, ReportPayload):
        return payload
    try:
        return ReportPayload.model_validate(payload)
    except ValidationError as exc:
        raise InvalidReportError(f"Invalid AHU report payload: {exc}") from exc


@lru_cache(maxsize=256)
def country_code_for(name: str) -> str | None:
    """ISO 3166 alpha-2 code for an English country name, if known."""

    try:
        return pycountry.countries.lookup(name.strip()).alpha_2
    except LookupError:
        log.warning("Unknown country name %r; leaving country code unset", name)
        return None


def _join_parts(*parts: str | None) -> str:
    return ", ".join(part for part in parts if part)


@dataclass(frozen=True, slots=True, kw_only=True)
class AhuStatementDeriver:
    """Derive candidate statements for one report.

    ``retrieved_at`` is the run timestamp; it fills ``source.retrievedAt`` and
    the publication date but never feeds a statement id.
    """

    publication: PublicationConfig
    retrieved_at: datetime

    def iter_candidates(self, payload: ReportPayloadInput) -> Iterator[TransactionCandidates]:
        report = parse_report(payload)
        for transaction in report.transactions:
            yield self.derive_transaction(transaction, location=report.company_location)

    def derive_transaction(
        self,
        transaction: TransactionPayload,
        *,
        location: str | None,
    ) -> TransactionCandidates:
        company = self.derive_company_statement(transaction, location=location)
        owners: list[OwnerCandidates] = []
        for owner in transaction.data_bo:
            person = self.derive_person_statement(owner, transaction)
            ownership = self.derive_ownership_statement(company, person, owner, transaction)
            owners.append(OwnerCandidates(person=person, ownership=ownership))
        return TransactionCandidates(company=company, owners=tuple(owners))

    def derive_company_statement(
        self,
        transaction: TransactionPayload,
        *,
        location: str | None,
    ) -> EntityStatement:
        return EntityStatement(
            statement_id=self._statement_id(transaction.company_fields(), location),
            name=transaction.nama_korporasi,
            entity_type=EntityType.REGISTERED_ENTITY,
            incorporated_in_jurisdiction=INDONESIA,
            identifiers=(
                Identifier(
                    scheme=COMPANY_ID_SCHEME,
                    scheme_name=COMPANY_ID_SCHEME_NAME,
                    id=transaction.nama_korporasi,
                ),
            ),
            addresses=(
                (Address(type=AddressType.REGISTERED, address=location, country=INDONESIA.code),)
                if location
                else ()
            ),
            source=self._source(transaction),
            publication_details=self._publication_details(),
        )

    def derive_person_statement(
        self,
        owner: OwnerPayload,
        transaction: TransactionPayload,
    ) -> PersonStatement:
        nationality = self._nationality(owner)
        return PersonStatement(
            statement_id=self._statement_id(owner.person_fields(), transaction.source_fields()),
            person_type=PersonType.KNOWN_PERSON,
            names=(Name(type=NameType.INDIVIDUAL, full_name=owner.nama_lengkap),),
            birth_date=owner.tanggal_lahir,
            place_of_birth=(
                Address(type=AddressType.PLACE_OF_BIRTH, address=owner.tempat_lahir)
                if owner.tempat_lahir
                else None
            ),
            nationalities=(nationality,),
            identifiers=(
                Identifier(scheme=TAX_ID_SCHEME, scheme_name=TAX_ID_SCHEME_NAME, id=owner.npwp),
                Identifier(
                    scheme=f"MISC-ID-{owner.jenis_identitas}",
                    scheme_name=owner.jenis_identitas,
                    id=owner.nomor_identitas,
                ),
            ),
            addresses=(self._residence(owner, nationality),),
            source=self._source(transaction),
            publication_details=self._publication_details(),
        )

    def derive_ownership_statement(
        self,
        company: EntityStatement,
        person: PersonStatement,
        owner: OwnerPayload,
        transaction: TransactionPayload,
    ) -> OwnershipOrControlStatement:
        return OwnershipOrControlStatement(
            statement_id=self._statement_id(
                company.statement_id,
                person.statement_id,
                owner.fields(),
                transaction.source_fields(),
            ),
            subject=company.statement_id,
            interested_party=person.statement_id,
            interests=(
                Interest(
                    type=InterestType.OTHER_INFLUENCE_OR_CONTROL,
                    details=owner.hubungan_bo,
                    interest_level=InterestLevel.DIRECT,
                    beneficial_ownership_or_control=True,
                ),
            ),
            source=self._source(transaction),
            publication_details=self._publication_details(),
        )

    def _statement_id(self, *parts: JsonValue) -> StatementID:
        return statement_id(list(parts), prefix=self.publication.id_prefix)

    def _nationality(self, owner: OwnerPayload) -> Country:
        if not owner.is_foreign:
            name = INDONESIA.name if owner.kewarganegaraan == CITIZEN else (owner.negara or "")
            return Country(name=name, code=INDONESIA.code)
        name = owner.negara or ""
        return Country(name=name, code=country_code_for(name) if name else None)

    def _residence(self, owner: OwnerPayload, nationality: Country) -> Address:
        if owner.is_foreign:
            return Address(
                type=AddressType.RESIDENCE,
                address=_join_parts(owner.alamat, owner.negara),
                country=nationality.code,
            )
        return Address(
            type=AddressType.RESIDENCE,
            address=_join_parts(
                owner.alamat,
                owner.rt,
                owner.rw,
                owner.kelurahan,
                owner.kecamatan,
                owner.kabupaten,
                owner.provinisi,
                INDONESIA.name,
            ),
            country=INDONESIA.code,
        )

    def _source(self, transaction: TransactionPayload) -> Source:
        if transaction.is_corporate_report:
            return Source(
                types=(SourceType.THIRD_PARTY,),
                retrieved_at=self.retrieved_at,
                url=self.publication.source_url,
                asserted_by=(Agent(name=transaction.nama_pelapor),),
            )
        return Source(
            types=(SourceType.SELF_DECLARATION,),
            retrieved_at=self.retrieved_at,
            url=self.publication.source_url,
            asserted_by=(Agent(name=transaction.nama_pic),),
        )

    def _publication_details(self) -> PublicationDetails:
        return PublicationDetails(
            publication_date=self.retrieved_at.date(),
            bods_version=self.publication.bods_version,
            publisher=Publisher(name=self.publication.publisher_name),
        )
