from __future__ import annotations

import logging
from collections.abc import Iterable
from http import HTTPStatus
from http.client import HTTPException
from urllib.parse import urlsplit

from sumopost.application.serialization import RecordT, serialize_records
from sumopost.domain.endpoint import LogEndpoint
from sumopost.domain.errors import PostingLogsError
from sumopost.infrastructure import transport

logger = logging.getLogger(__name__)


def post_logs(endpoint: LogEndpoint, records: Iterable[RecordT]) -> None:
    """Serialize ``records`` one JSON object per line and post them as a single body.

    Raises ParsingLogsError before any request is made if a record cannot be
    serialized, and PostingLogsError for every failure of the request itself.
    """
    batch = list(records)
    body = serialize_records(batch)
    try:
        post_logs_string(endpoint, body)
    except PostingLogsError as exc:
        raise PostingLogsError(exc.message, status_code=exc.status_code) from exc
    except (OSError, ValueError, HTTPException) as exc:
        raise PostingLogsError(str(exc)) from exc
    logger.debug("logs_posted", extra={"count": len(batch)})


def post_logs_string(endpoint: LogEndpoint, body: str) -> None:
    """Post a pre-formatted, newline separated ``body`` to ``endpoint``.

    Transport errors are raised unchanged. Any status other than 200 raises
    PostingLogsError.
    """
    data = body.encode("utf-8")
    # only the host is logged, collector URLs embed their token in the path
    host = urlsplit(endpoint.url).hostname
    logger.debug("posting_logs", extra={"host": host, "size": len(data)})
    status = transport.post(endpoint.url, data)
    if status != HTTPStatus.OK:
        logger.debug("post_rejected", extra={"host": host, "status": status})
        raise PostingLogsError(
            "unexpected status code when posting logs, "
            f"expected: {HTTPStatus.OK.value}, got: {status}",
            status_code=status,
        )
