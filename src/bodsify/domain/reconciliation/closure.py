"""Closure of ownership relationships that ended without a successor.

Each transaction lists a company's complete owner set, so an ownership
statement of the previous transaction that is neither repeated nor replaced
in the current one describes a relationship that has ended. It is recorded
with a closing statement rather than dropped.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date

    from bodsify.domain.identity import ClosingIdFactory
    from bodsify.domain.model import OwnershipOrControlStatement, Statement, StatementID

    from .matching import StatementIndex


log = getLogger(__name__)


def close_ended_relationships(
    previous: StatementIndex,
    *,
    candidates: Iterable[Statement],
    emitted: Iterable[Statement],
    closed_on: date,
    position: int,
    closing_id: ClosingIdFactory,
) -> tuple[OwnershipOrControlStatement, ...]:
    """Return closing statements for previous ownerships not covered now.

    ``candidates`` is the current transaction's full candidate set, including
    duplicates that were not re-emitted. ``emitted`` holds the statements newly
    emitted for the current transaction, whose ``replaces_statements`` count as
    coverage. ``position`` is the current transaction's ordinal in the run.
    """

    covered: set[StatementID] = {statement.statement_id for statement in candidates}
    for statement in emitted:
        covered.update(statement.replaces_statements)

    closures: list[OwnershipOrControlStatement] = []
    for ownership in previous.ownerships:
        if ownership.statement_id in covered:
            continue
        closure = ownership.closed(
            statement_id=closing_id(ownership.statement_id, closed_on, position),
            end_date=closed_on,
        )
        log.debug("Closing ownership %s as %s", ownership.statement_id, closure.statement_id)
        closures.append(closure)
    return tuple(closures)
