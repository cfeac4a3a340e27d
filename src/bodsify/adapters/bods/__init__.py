"""BODS 0.2 JSON emitter."""

from __future__ import annotations

from .serializer import dump_statements, serialize_statement, serialize_statements

__all__ = ["dump_statements", "serialize_statement", "serialize_statements"]
