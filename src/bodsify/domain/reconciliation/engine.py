"""Orchestrator for the reconciliation subsystem.

Transactions are folded strictly in order. The only state carried from one
transaction to the next is ``ReconciliationState``:

- ``seen_ids``: every statement id emitted so far (global deduplication)
- ``previous``: the full candidate set of the immediately preceding
  transaction (replacement and closure baseline)
- ``position``: ordinal of the next transaction, which keeps closing ids of
  repeated closings apart

``reconcile_transaction`` is the pure per-transaction step; ``Reconciler``
threads the state through a whole run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from .closure import close_ended_relationships
from .matching import StatementIndex
from .replacement import replaced_by, replaced_by_ownership

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from datetime import date

    from bodsify.domain.identity import ClosingIdFactory
    from bodsify.domain.model import (
        EntityStatement,
        OwnershipOrControlStatement,
        PersonStatement,
        Statement,
        StatementID,
    )


log = getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class OwnerCandidates:
    """Candidate statements derived from one owner record."""

    person: PersonStatement
    ownership: OwnershipOrControlStatement


@dataclass(frozen=True, slots=True, kw_only=True)
class TransactionCandidates:
    """All candidate statements derived from one transaction, in derivation order."""

    company: EntityStatement
    owners: tuple[OwnerCandidates, ...] = ()

    @property
    def statements(self) -> tuple[Statement, ...]:
        ordered: list[Statement] = [self.company]
        for owner in self.owners:
            ordered.append(owner.person)
            ordered.append(owner.ownership)
        return tuple(ordered)


@dataclass(frozen=True, slots=True)
class ReconciliationState:
    seen_ids: frozenset[StatementID] = frozenset()
    previous: StatementIndex = field(default_factory=StatementIndex)
    position: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class TransactionOutcome:
    """Statements newly emitted for one transaction plus the state for the next."""

    emitted: tuple[Statement, ...]
    state: ReconciliationState
    duplicates: int = 0
    closures: int = 0


def reconcile_transaction(
    candidates: TransactionCandidates,
    state: ReconciliationState,
    *,
    closed_on: date,
    closing_id: ClosingIdFactory,
) -> TransactionOutcome:
    """Deduplicate, link and close one transaction against ``state``."""

    previous = state.previous
    emitted_ids: set[StatementID] = set()
    emitted: list[Statement] = []
    duplicates = 0

    def is_new(statement: Statement) -> bool:
        nonlocal duplicates
        statement_id = statement.statement_id
        if statement_id in state.seen_ids or statement_id in emitted_ids:
            duplicates += 1
            return False
        emitted_ids.add(statement_id)
        return True

    company = candidates.company
    if is_new(company):
        emitted.append(company.replacing(replaced_by(company, previous)))

    for owner in candidates.owners:
        if is_new(owner.person):
            emitted.append(owner.person.replacing(replaced_by(owner.person, previous)))
        if is_new(owner.ownership):
            replaced = replaced_by_ownership(owner.ownership, owner.person, company, previous)
            emitted.append(owner.ownership.replacing(replaced))

    current = StatementIndex.build(candidates.statements)
    closures = [
        closure
        for closure in close_ended_relationships(
            previous,
            candidates=current.statements,
            emitted=emitted,
            closed_on=closed_on,
            position=state.position,
            closing_id=closing_id,
        )
        if is_new(closure)
    ]
    emitted.extend(closures)

    return TransactionOutcome(
        emitted=tuple(emitted),
        state=ReconciliationState(
            seen_ids=state.seen_ids | emitted_ids,
            previous=current,
            position=state.position + 1,
        ),
        duplicates=duplicates,
        closures=len(closures),
    )


@dataclass(slots=True, kw_only=True)
class Reconciler:
    """Fold a sequence of transactions into one ordered statement stream."""

    closed_on: date
    closing_id: ClosingIdFactory

    def iter_outcomes(
        self,
        transactions: Iterable[TransactionCandidates],
        *,
        state: ReconciliationState | None = None,
    ) -> Iterator[TransactionOutcome]:
        current_state = state or ReconciliationState()
        for candidates in transactions:
            outcome = reconcile_transaction(
                candidates,
                current_state,
                closed_on=self.closed_on,
                closing_id=self.closing_id,
            )
            log.debug(
                "Transaction %s: candidates=%s, emitted=%s, duplicates=%s, closures=%s",
                current_state.position,
                len(candidates.statements),
                len(outcome.emitted),
                outcome.duplicates,
                outcome.closures,
            )
            current_state = outcome.state
            yield outcome

    def run(self, transactions: Iterable[TransactionCandidates]) -> list[Statement]:
        """Return the newly emitted statements of every transaction, in order."""

        statements: list[Statement] = []
        processed = 0
        closures = 0
        for outcome in self.iter_outcomes(transactions):
            statements.extend(outcome.emitted)
            processed += 1
            closures += outcome.closures
        log.info(
            "Reconciled %s transactions into %s statements (%s closures)",
            processed,
            len(statements),
            closures,
        )
        return statements
