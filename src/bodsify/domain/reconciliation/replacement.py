"""Replacement resolution against the previous transaction's statement set.

Replacement is one hop only: results always reference statements of the
immediately preceding transaction. Older history stays reachable through the
replaced statements' own ``replaces_statements``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bodsify.domain.model import (
        EntityStatement,
        OwnershipOrControlStatement,
        PersonStatement,
        Statement,
        StatementID,
    )

    from .matching import StatementIndex


def replaced_by(new_statement: Statement, previous: StatementIndex) -> tuple[StatementID, ...]:
    """Ids of previous statements of the same type sharing an identifier with ``new_statement``.

    More than one id is possible, for example when the previous transaction
    described one person under two statements that now collapse into one.
    """

    return previous.matching(new_statement)


def replaced_by_ownership(
    new_ownership: OwnershipOrControlStatement,
    new_interested_party: PersonStatement,
    new_subject: EntityStatement,
    previous: StatementIndex,
) -> tuple[StatementID, ...]:
    """Ids of previous ownership statements connecting the same person and company.

    A previous ownership statement qualifies only when both its interested
    party and its subject resolve within ``previous`` and match the new
    endpoints. References that do not resolve never match.
    """

    subject_ids = set(previous.matching(new_subject))
    if not subject_ids:
        return ()

    replaced: list[StatementID] = []
    for party_id in previous.matching(new_interested_party):
        for ownership_id in previous.ownerships_held_by(party_id):
            candidate = previous.get(ownership_id)
            if candidate is None or candidate.statement_type is not new_ownership.statement_type:
                continue
            subject_id, _party_id = candidate.referenced_statement_ids()
            if subject_id in subject_ids:
                replaced.append(ownership_id)
    return previous.ordered(set(replaced))
