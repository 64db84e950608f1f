"""Job-progress monitoring: polling timer, state machine and presentation."""

from lexwatch.monitor.monitor import (
    EMPTY_STATE,
    JobHandle,
    JobMonitor,
    MonitorPhase,
    MonitorState,
    StatusFetcher,
)
from lexwatch.monitor.periodic import PeriodicTask
from lexwatch.monitor.view import MonitorAction, MonitorView, Tone, describe_state

__all__ = [
    "EMPTY_STATE",
    "JobHandle",
    "JobMonitor",
    "MonitorAction",
    "MonitorPhase",
    "MonitorState",
    "MonitorView",
    "PeriodicTask",
    "StatusFetcher",
    "Tone",
    "describe_state",
]
