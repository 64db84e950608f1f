"""Core models, configuration and error classification."""

from lexwatch.core.config import ApiConfig, LexwatchConfig, LoggingConfig, MonitorConfig
from lexwatch.core.errors import (
    ErrorCatalog,
    ErrorClassifier,
    ErrorDescriptor,
    ErrorKind,
    TransportOutcome,
    classify,
)
from lexwatch.core.status import JobStatus, StatusCatalog, StatusClassification

__all__ = [
    "ApiConfig",
    "ErrorCatalog",
    "ErrorClassifier",
    "ErrorDescriptor",
    "ErrorKind",
    "JobStatus",
    "LexwatchConfig",
    "LoggingConfig",
    "MonitorConfig",
    "StatusCatalog",
    "StatusClassification",
    "TransportOutcome",
    "classify",
]
