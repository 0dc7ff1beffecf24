"""Parsing of transition labels and state description texts."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

from .errors import (
    EmptyTransitionError,
    InvalidStateDescriptionError,
    InvalidTransitionDescriptionError,
    UnrecognisedStateDescriptionError,
)

_NAME = r"[A-Za-z_][A-Za-z0-9_]*"

_LABEL_RE = re.compile(
    rf"""\s*
    (?P<event>{_NAME})?
    \s*
    (?:\[\s*(?P<guard>{_NAME})\s*\])?
    \s*
    (?:/\s*(?P<action>{_NAME}))?
    \s*""",
    re.VERBOSE,
)
_STATE_ACTION_RE = re.compile(rf"\s*(?P<kind>entry|exit)\s*/\s*(?P<action>{_NAME})\s*")
_DEFER_RE = re.compile(rf"\s*(?P<event>{_NAME})\s*/\s*defer\s*")


@dataclass(frozen=True)
class TransitionLabel:
    """Event, guard and action named by a transition label; each may be absent."""

    event: Optional[str] = None
    guard: Optional[str] = None
    action: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.event is None and self.guard is None and self.action is None


@dataclass(frozen=True)
class EntryAction:
    """An action run when a state is entered."""

    action: str


@dataclass(frozen=True)
class ExitAction:
    """An action run when a state is left."""

    action: str


@dataclass(frozen=True)
class InternalTransition:
    """A transition handled inside a state without leaving it."""

    label: TransitionLabel


@dataclass(frozen=True)
class DeferredEvent:
    """An event a state postpones until a later state handles it."""

    event: str


StateDescription = Union[EntryAction, ExitAction, InternalTransition, DeferredEvent]


def _match_label(text: str) -> Optional[TransitionLabel]:
    match = _LABEL_RE.fullmatch(text)
    if match is None:
        return None
    return TransitionLabel(
        event=match["event"], guard=match["guard"], action=match["action"]
    )


def parse_transition_label(text: str) -> TransitionLabel:
    """Parse a label of the form ``Event [Guard] / Action``."""
    label = _match_label(text)
    if label is None:
        raise InvalidTransitionDescriptionError(text)
    if label.is_empty:
        raise EmptyTransitionError()
    return label


def parse_state_description(text: str) -> StateDescription:
    """Parse the text written after ``State :`` in a diagram."""
    match = _STATE_ACTION_RE.fullmatch(text)
    if match is not None:
        kind = EntryAction if match["kind"] == "entry" else ExitAction
        return kind(match["action"])

    match = _DEFER_RE.fullmatch(text)
    if match is not None:
        return DeferredEvent(match["event"])

    label = _match_label(text)
    if label is None:
        raise InvalidStateDescriptionError(text)
    if label.is_empty:
        raise UnrecognisedStateDescriptionError(text)
    return InternalTransition(label)