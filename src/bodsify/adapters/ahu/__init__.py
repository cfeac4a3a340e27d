"""Public interface for the AHU (Indonesia) beneficial-ownership adapter."""

from __future__ import annotations

from .schema import OwnerPayload, ReportPayload, ReportPayloadInput, TransactionPayload
from .translator import AhuStatementDeriver, InvalidReportError, country_code_for, parse_report

__all__ = [
    "AhuStatementDeriver",
    "InvalidReportError",
    "OwnerPayload",
    "ReportPayload",
    "ReportPayloadInput",
    "TransactionPayload",
    "country_code_for",
    "parse_report",
]
