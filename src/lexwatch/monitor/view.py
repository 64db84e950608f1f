"""Presentation of a MonitorState.

Reduces a state to what a progress panel shows: a title, a body, a progress
value, the single action offered to the user, and a tone for styling.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from lexwatch.core.constants import PROCESSING_PLACEHOLDER
from lexwatch.core.status import JobStatus
from lexwatch.monitor.monitor import MonitorState


class MonitorAction(str, Enum):
    """Action offered below the progress panel."""

    COMPLETE = "complete"
    RETRY = "retry"
    CLOSE = "close"


class Tone(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    DANGER = "danger"


@dataclass(frozen=True)
class MonitorView:
    title: str | None
    body: str
    progress: int | None
    actions: tuple[MonitorAction, ...]
    tone: Tone


def describe_state(state: MonitorState) -> MonitorView:
    """Derive the panel contents for a state.

    Completion wins over everything else. An error offers RETRY only when
    it is retryable and CLOSE otherwise. Before the first response the body
    is a processing placeholder.
    """
    if state.status is JobStatus.COMPLETED:
        return MonitorView(
            title=None,
            body=state.message or PROCESSING_PLACEHOLDER,
            progress=state.progress,
            actions=(MonitorAction.COMPLETE,),
            tone=Tone.SUCCESS,
        )

    if state.error is not None:
        action = MonitorAction.RETRY if state.error.retryable else MonitorAction.CLOSE
        return MonitorView(
            title=state.error.title,
            body=state.error.message or "",
            progress=None,
            actions=(action,),
            tone=Tone.DANGER,
        )

    return MonitorView(
        title=None,
        body=state.message or PROCESSING_PLACEHOLDER,
        progress=state.progress,
        actions=(),
        tone=Tone.INFO,
    )


__all__ = ["MonitorAction", "MonitorView", "Tone", "describe_state"]
