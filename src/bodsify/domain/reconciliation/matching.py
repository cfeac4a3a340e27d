"""Identifier matching and the previous-transaction lookup index.

Two statements of the same type match when they share at least one
``(scheme, id)`` pair. ``scheme_name`` is informational only.

``StatementIndex`` holds one transaction's full statement set and answers the
same questions a linear scan would, but through dictionaries keyed by
``(statement_type, identifier key)`` and by statement id.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

from bodsify.domain.model import OwnershipOrControlStatement, StatementType

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bodsify.domain.model import IdentifierKey, Statement, StatementID


def identifier_keys(statement: Statement) -> frozenset[IdentifierKey]:
    """Return the matching keys of ``statement``; identifiers without a value are skipped."""

    keys: set[IdentifierKey] = set()
    for identifier in statement.identifiers_of():
        key = identifier.key
        if key is not None:
            keys.add(key)
    return frozenset(keys)


def matches(a: Statement, b: Statement) -> bool:
    """Return whether ``a`` and ``b`` share an identifier.

    Statements of different types never match, and neither does a statement
    without identifiers.
    """

    if a.statement_type is not b.statement_type:
        return False
    return not identifier_keys(a).isdisjoint(identifier_keys(b))


_KeyIndex: TypeAlias = "dict[StatementType, dict[IdentifierKey, list[StatementID]]]"


def _new_key_index() -> _KeyIndex:
    return {statement_type: defaultdict(list) for statement_type in StatementType}


@dataclass(slots=True)
class StatementIndex:
    """Lookup structure over one transaction's full statement set.

    Statements are kept in first-seen order and deduplicated by id, so every
    query returns ids in the order the statements were produced.
    """

    _statements_by_id: dict[StatementID, Statement] = field(
        default_factory=dict["StatementID", "Statement"], repr=False
    )
    _ids_by_key: _KeyIndex = field(default_factory=_new_key_index, repr=False)
    _ownership_ids_by_party: dict[StatementID, list[StatementID]] = field(
        default_factory=lambda: defaultdict(list), repr=False
    )
    _position_by_id: dict[StatementID, int] = field(
        default_factory=dict["StatementID", "int"], repr=False
    )

    @classmethod
    def build(cls, statements: Iterable[Statement]) -> StatementIndex:
        index = cls()
        for statement in statements:
            index.add(statement)
        return index

    def add(self, statement: Statement) -> None:
        statement_id = statement.statement_id
        if statement_id in self._statements_by_id:
            return
        self._position_by_id[statement_id] = len(self._statements_by_id)
        self._statements_by_id[statement_id] = statement
        for key in identifier_keys(statement):
            self._ids_by_key[statement.statement_type][key].append(statement_id)
        references = statement.referenced_statement_ids()
        if references:
            _subject, interested_party = references
            self._ownership_ids_by_party[interested_party].append(statement_id)

    @property
    def statements(self) -> tuple[Statement, ...]:
        return tuple(self._statements_by_id.values())

    @property
    def ownerships(self) -> tuple[OwnershipOrControlStatement, ...]:
        return tuple(
            statement
            for statement in self._statements_by_id.values()
            if isinstance(statement, OwnershipOrControlStatement)
        )

    def get(self, statement_id: StatementID) -> Statement | None:
        return self._statements_by_id.get(statement_id)

    def matching(self, statement: Statement) -> tuple[StatementID, ...]:
        """Ids of indexed statements that match ``statement``, in production order."""

        bucket = self._ids_by_key[statement.statement_type]
        found: set[StatementID] = set()
        for key in identifier_keys(statement):
            found.update(bucket.get(key, ()))
        return self.ordered(found)

    def ownerships_held_by(self, interested_party: StatementID) -> tuple[StatementID, ...]:
        return tuple(self._ownership_ids_by_party.get(interested_party, ()))

    def ordered(self, statement_ids: Iterable[StatementID]) -> tuple[StatementID, ...]:
        return tuple(sorted(statement_ids, key=self._position_by_id.__getitem__))
