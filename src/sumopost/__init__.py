"""Client for posting log records to an HTTP log collection endpoint."""

import logging

from sumopost.application.posting import post_logs, post_logs_string
from sumopost.application.serialization import has_serialization_metadata, serialize_records
from sumopost.domain.endpoint import LogEndpoint, new_log_endpoint
from sumopost.domain.errors import (
    BuildingClientError,
    ParsingLogsError,
    PostingLogsError,
    SumoPostError,
)
from sumopost.domain.models import LogEvent

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "BuildingClientError",
    "LogEndpoint",
    "LogEvent",
    "ParsingLogsError",
    "PostingLogsError",
    "SumoPostError",
    "has_serialization_metadata",
    "new_log_endpoint",
    "post_logs",
    "post_logs_string",
    "serialize_records",
]
