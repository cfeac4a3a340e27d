"""Reconciliation core: turn per-transaction candidates into a statement stream.

Layered flow per transaction:
1) deduplicate candidates against every id emitted so far
2) link new statements to the previous transaction's statements they replace
3) close previous ownership relationships that disappeared without a successor
"""

from __future__ import annotations

from .closure import close_ended_relationships
from .engine import (
    OwnerCandidates,
    ReconciliationState,
    Reconciler,
    TransactionCandidates,
    TransactionOutcome,
    reconcile_transaction,
)
from .matching import StatementIndex, identifier_keys, matches
from .replacement import replaced_by, replaced_by_ownership

__all__ = [
    "OwnerCandidates",
    "ReconciliationState",
    "Reconciler",
    "StatementIndex",
    "TransactionCandidates",
    "TransactionOutcome",
    "close_ended_relationships",
    "identifier_keys",
    "matches",
    "reconcile_transaction",
    "replaced_by",
    "replaced_by_ownership",
]
