"""Pydantic models describing AHU beneficial-ownership report payloads.

Unknown keys are kept (``extra="allow"``): statement ids are hashes of the raw
fields, so every field the registry sends has to reach the hash.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator

CORPORATE_REPORTER: Final[str] = "KORPORASI"
CITIZEN: Final[str] = "WNI"
FOREIGNER: Final[str] = "WNA"

JsonFields: TypeAlias = dict[str, Any]


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class AhuBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class OwnerPayload(AhuBaseModel):
    """One beneficial owner (``data_bo`` entry) and their relationship to the company."""

    nama_lengkap: str
    tanggal_lahir: str | None = None
    tempat_lahir: str | None = None
    kewarganegaraan: str | None = None
    negara: str | None = None
    npwp: str | None = None
    jenis_identitas: str | None = None
    nomor_identitas: str | None = None
    alamat: str | None = None
    rt: str | None = None
    rw: str | None = None
    kelurahan: str | None = None
    kecamatan: str | None = None
    kabupaten: str | None = None
    provinisi: str | None = None
    hubungan_bo: str | None = None

    # blank ids become null in the hashed fields too, so "" and a missing value hash alike
    _normalize_identifiers = field_validator("npwp", "nomor_identitas", mode="before")(
        _blank_to_none
    )

    @property
    def is_foreign(self) -> bool:
        return self.kewarganegaraan == FOREIGNER

    def fields(self) -> JsonFields:
        return self.model_dump(mode="json")

    def person_fields(self) -> JsonFields:
        """Owner fields describing the person, without the relationship details."""

        return self.model_dump(mode="json", exclude={"hubungan_bo"})


class TransactionPayload(AhuBaseModel):
    """One disclosure snapshot: a company and its complete current owner set."""

    nama_korporasi: str
    jenis_transaksi: str | None = None
    jenis_pelapor: str | None = None
    nama_pelapor: str | None = None
    nama_pic: str | None = None
    data_bo: list[OwnerPayload] = Field(default_factory=list["OwnerPayload"])

    @property
    def is_corporate_report(self) -> bool:
        return self.jenis_pelapor == CORPORATE_REPORTER

    def company_fields(self) -> JsonFields:
        return {"nama_korporasi": self.nama_korporasi}

    def source_fields(self) -> JsonFields:
        """Reporting metadata: every field except the company name, type and owners."""

        return self.model_dump(
            mode="json",
            exclude={"data_bo", "nama_korporasi", "jenis_transaksi"},
        )


class ReportData(AhuBaseModel):
    kedudukan: str | None = None
    data_transaksi: list[TransactionPayload] = Field(
        default_factory=list["TransactionPayload"]
    )


class ReportPayload(AhuBaseModel):
    data: ReportData

    @property
    def company_location(self) -> str | None:
        return self.data.kedudukan

    @property
    def transactions(self) -> tuple[TransactionPayload, ...]:
        return tuple(self.data.data_transaksi)


ReportPayloadInput = ReportPayload | Mapping[str, object]
