"""Publication metadata stamped onto every emitted statement."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

from bodsify.domain.identity import DEFAULT_ID_PREFIX

from .errors import BlankConfigurationError, UnsupportedBodsVersionError

DEFAULT_PUBLISHER_NAME: Final[str] = "Indonesia Ministry for Law and Human Rights"
DEFAULT_SOURCE_URL: Final[str] = "https://bo.ahu.go.id/service/getReportBo"
DEFAULT_BODS_VERSION: Final[str] = "0.2"
SUPPORTED_BODS_VERSIONS: Final[frozenset[str]] = frozenset({"0.2"})


@dataclass(frozen=True, slots=True)
class PublicationConfig:
    publisher_name: str = DEFAULT_PUBLISHER_NAME
    source_url: str = DEFAULT_SOURCE_URL
    bods_version: str = DEFAULT_BODS_VERSION
    id_prefix: str = DEFAULT_ID_PREFIX


def _optional_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    if not value.strip():
        raise BlankConfigurationError(name)
    return value.strip()


def get_publication_config() -> PublicationConfig:
    bods_version = _optional_env("BODSIFY_BODS_VERSION", DEFAULT_BODS_VERSION)
    if bods_version not in SUPPORTED_BODS_VERSIONS:
        raise UnsupportedBodsVersionError(
            "BODSIFY_BODS_VERSION", bods_version, SUPPORTED_BODS_VERSIONS
        )
    return PublicationConfig(
        publisher_name=_optional_env("BODSIFY_PUBLISHER_NAME", DEFAULT_PUBLISHER_NAME),
        source_url=_optional_env("BODSIFY_SOURCE_URL", DEFAULT_SOURCE_URL),
        bods_version=bods_version,
        id_prefix=_optional_env("BODSIFY_ID_PREFIX", DEFAULT_ID_PREFIX),
    )
