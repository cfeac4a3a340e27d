"""Content-derived statement identifiers.

Source registries publish no stable ids for the facts we emit and a
transformation cannot persist ids of its own, so every statement id is a hash
of the data it was built from. Identical data yields an identical id, which
is what lets the reconciler recognise an unchanged fact across transactions.

Hashing uses the RFC 8785 canonical JSON form, so key order in the payload
does not matter.
"""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING, Final, Protocol, TypeAlias

import jcs

if TYPE_CHECKING:
    from datetime import date

    from bodsify.domain.model import StatementID

DEFAULT_ID_PREFIX: Final[str] = "openownership-indonesia"

JsonValue: TypeAlias = "str | int | float | bool | None | list[JsonValue] | dict[str, JsonValue]"


def statement_id(payload: JsonValue, *, prefix: str = DEFAULT_ID_PREFIX) -> StatementID:
    """Return ``<prefix>-<sha256>`` of the canonical JSON form of ``payload``."""

    digest = hashlib.sha256(jcs.canonicalize(payload)).hexdigest()
    return f"{prefix}-{digest}"


class ClosingIdFactory(Protocol):
    """Build the id of a statement that closes ``replaced_id`` on ``closed_on``.

    ``position`` is the ordinal of the closing transaction within the run.
    """

    def __call__(
        self, replaced_id: StatementID, closed_on: date, position: int
    ) -> StatementID: ...


def closing_statement_id(
    replaced_id: StatementID,
    closed_on: date,
    position: int,
    *,
    prefix: str = DEFAULT_ID_PREFIX,
) -> StatementID:
    """Deterministic id for a closing statement.

    Re-running on identical input on the same day yields identical closures.
    The transaction ordinal keeps two closings of the same relationship in
    one run apart, since a relationship can end, reappear and end again.
    """

    return statement_id(
        [replaced_id, "closed", closed_on.isoformat(), position], prefix=prefix
    )


def closing_id_factory(*, prefix: str = DEFAULT_ID_PREFIX) -> ClosingIdFactory:
    def factory(replaced_id: StatementID, closed_on: date, position: int) -> StatementID:
        return closing_statement_id(replaced_id, closed_on, position, prefix=prefix)

    return factory
