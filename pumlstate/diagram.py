"""Reading the structure of a PlantUML state diagram."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .errors import EmptyInputError, GrammarError, MissingDescriptionError

_NAME = r"[A-Za-z_][A-Za-z0-9_]*"
_ARROW = r"-+(?:(?:up|down|left|right|[udlr])-+)?>"
_INITIAL = r"\[\*\]"

_BLOCK_COMMENT_RE = re.compile(r"/'.*?'/", re.DOTALL)
_START_RE = re.compile(r"@startuml(?:\s+(?P<name>.*?))?\s*")
_END_RE = re.compile(r"@enduml\s*")
_COMMENT_RE = re.compile(r"'.*")
_ENTER_RE = re.compile(rf"{_INITIAL}\s*{_ARROW}\s*(?P<target>{_NAME})\s*(?::.*)?")
_EXIT_RE = re.compile(rf"{_NAME}\s*{_ARROW}\s*{_INITIAL}\s*(?::.*)?")
_TRANSITION_RE = re.compile(
    rf"(?P<source>{_NAME})\s*{_ARROW}\s*(?P<target>{_NAME})\s*(?::(?P<desc>.*))?"
)
_COMPOSITE_RE = re.compile(rf"state\s+(?P<name>{_NAME})\s*\{{\s*(?P<close>\}})?")
_STATE_WITH_DESC_RE = re.compile(rf"state\s+(?P<name>{_NAME})\s*:(?P<desc>.*)")
_STATE_DECL_RE = re.compile(rf"state\s+{_NAME}")
_STATE_DESC_RE = re.compile(rf"(?P<name>{_NAME})\s*:(?P<desc>.*)")
_CLOSE_RE = re.compile(r"\}")


@dataclass(frozen=True)
class StateText:
    """Free text attached to a state, such as ``A : entry / DoIt``."""

    name: str
    description: str


@dataclass(frozen=True)
class TransitionDescription:
    """An arrow between two states with an optional label."""

    source: str
    target: str
    description: Optional[str] = None


@dataclass
class StateElements:
    """Everything declared directly inside one scope of the diagram."""

    enter_states: List[str] = field(default_factory=list)
    transitions: List[TransitionDescription] = field(default_factory=list)
    composite_states: List["CompositeState"] = field(default_factory=list)
    state_descriptions: List[StateText] = field(default_factory=list)


@dataclass
class CompositeState:
    """A named state holding its own nested elements."""

    name: str
    elements: StateElements = field(default_factory=StateElements)


@dataclass
class StateDiagram:
    """A parsed diagram: its optional name and its top-level elements."""

    name: Optional[str]
    elements: StateElements = field(default_factory=StateElements)


def _numbered_lines(text: str) -> Iterator[Tuple[int, str]]:
    for number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if stripped:
            yield number, stripped


def _description_text(raw: str, number: int) -> str:
    text = raw.strip()
    if not text:
        raise MissingDescriptionError()
    return text


def parse_diagram(text: str) -> StateDiagram:
    """Parse a ``@startuml`` ... ``@enduml`` state diagram."""
    if not text.strip():
        raise EmptyInputError()

    cleaned = _BLOCK_COMMENT_RE.sub(lambda m: "\n" * m.group().count("\n"), text)
    lines = _numbered_lines(cleaned)

    number, first = next(lines)
    start = _START_RE.fullmatch(first)
    if start is None:
        raise GrammarError(f"line {number}: expected @startuml")
    name = start["name"] or None

    diagram = StateDiagram(name=name)
    scopes: List[StateElements] = [diagram.elements]
    finished = False

    for number, line in lines:
        if finished:
            raise GrammarError(f"line {number}: unexpected content after @enduml")
        if _END_RE.fullmatch(line):
            if len(scopes) > 1:
                raise GrammarError(f"line {number}: unclosed composite state")
            finished = True
            continue
        _parse_line(line, number, scopes)

    if not finished:
        raise GrammarError("expected @enduml")
    return diagram


def _parse_line(line: str, number: int, scopes: List[StateElements]) -> None:
    scope = scopes[-1]

    if _COMMENT_RE.fullmatch(line):
        return
    if _CLOSE_RE.fullmatch(line):
        if len(scopes) == 1:
            raise GrammarError(f"line {number}: unmatched '}}'")
        scopes.pop()
        return
    if match := _ENTER_RE.fullmatch(line):
        scope.enter_states.append(match["target"])
        return
    if _EXIT_RE.fullmatch(line):
        return
    if match := _TRANSITION_RE.fullmatch(line):
        desc = (match["desc"] or "").strip() or None
        scope.transitions.append(
            TransitionDescription(match["source"], match["target"], desc)
        )
        return
    if match := _COMPOSITE_RE.fullmatch(line):
        composite = CompositeState(match["name"])
        scope.composite_states.append(composite)
        if not match["close"]:
            scopes.append(composite.elements)
        return
    if match := _STATE_WITH_DESC_RE.fullmatch(line):
        scope.state_descriptions.append(
            StateText(match["name"], _description_text(match["desc"], number))
        )
        return
    if _STATE_DECL_RE.fullmatch(line):
        return
    if match := _STATE_DESC_RE.fullmatch(line):
        scope.state_descriptions.append(
            StateText(match["name"], _description_text(match["desc"], number))
        )
        return
    raise GrammarError(f"line {number}: cannot parse {line!r}")