"""Application orchestration entry points."""

from __future__ import annotations

from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING

from bodsify.adapters.ahu import AhuStatementDeriver, parse_report
from bodsify.adapters.bods import dump_statements
from bodsify.config import get_publication_config
from bodsify.domain.identity import closing_id_factory
from bodsify.domain.reconciliation import Reconciler

if TYPE_CHECKING:
    from bodsify.adapters.ahu import ReportPayloadInput
    from bodsify.config import PublicationConfig
    from bodsify.domain.model import Statement


log = getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def convert_report(
    payload: ReportPayloadInput,
    *,
    as_of: datetime | None = None,
    publication: PublicationConfig | None = None,
) -> list[Statement]:
    """Convert one AHU report into an ordered BODS statement stream.

    ``as_of`` is the run timestamp. It stamps retrieval and publication
    metadata and is the end date of every relationship closed in this run.
    """

    effective_publication = publication or get_publication_config()
    run_at = as_of or _utcnow()
    report = parse_report(payload)
    log.info(
        "Converting report: transactions=%s, as_of=%s",
        len(report.transactions),
        run_at.isoformat(),
    )

    deriver = AhuStatementDeriver(publication=effective_publication, retrieved_at=run_at)
    reconciler = Reconciler(
        closed_on=run_at.date(),
        closing_id=closing_id_factory(prefix=effective_publication.id_prefix),
    )
    return reconciler.run(deriver.iter_candidates(report))


def convert_report_to_json(
    payload: ReportPayloadInput,
    *,
    as_of: datetime | None = None,
    publication: PublicationConfig | None = None,
) -> str:
    return dump_statements(convert_report(payload, as_of=as_of, publication=publication))
