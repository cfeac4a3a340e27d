from __future__ import annotations

from datetime import date

from bodsify.domain.identity import (
    DEFAULT_ID_PREFIX,
    closing_id_factory,
    closing_statement_id,
    statement_id,
)


def test_statement_id_is_stable_for_identical_content() -> None:
    payload = [{"nama_korporasi": "PT Maju"}, "Jakarta"]

    assert statement_id(payload) == statement_id([{"nama_korporasi": "PT Maju"}, "Jakarta"])


def test_statement_id_ignores_key_order() -> None:
    first = statement_id({"a": 1, "b": "two"})
    second = statement_id({"b": "two", "a": 1})

    assert first == second


def test_statement_id_changes_with_content() -> None:
    assert statement_id({"npwp": "1"}) != statement_id({"npwp": "2"})


def test_statement_id_uses_prefix() -> None:
    assert statement_id({"a": 1}).startswith(f"{DEFAULT_ID_PREFIX}-")
    assert statement_id({"a": 1}, prefix="test").startswith("test-")


def test_closing_ids_are_reproducible() -> None:
    closed_on = date(2024, 3, 1)

    assert closing_statement_id("old", closed_on, 1) == closing_statement_id("old", closed_on, 1)
    assert closing_statement_id("old", closed_on, 1) != closing_statement_id("other", closed_on, 1)
    assert closing_statement_id("old", closed_on, 1) != closing_statement_id(
        "old", date(2024, 3, 2), 1
    )


def test_closing_ids_differ_per_transaction() -> None:
    closed_on = date(2024, 3, 1)

    assert closing_statement_id("old", closed_on, 1) != closing_statement_id("old", closed_on, 3)


def test_closing_id_factory_binds_prefix() -> None:
    factory = closing_id_factory(prefix="test")

    closing_id = factory("old", date(2024, 3, 1), 2)

    assert closing_id == closing_statement_id("old", date(2024, 3, 1), 2, prefix="test")
    assert closing_id.startswith("test-")
