"""Errors raised while reading PlantUML state diagrams and their labels."""

from __future__ import annotations


class ParseError(Exception):
    """Base class for every error raised while parsing a diagram."""

    message = "Parse error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(self.message.format(detail=detail))


class GrammarError(ParseError):
    """The input does not follow the PlantUML diagram grammar."""

    message = "PlantUML grammar error: {detail}"


class EmptyInputError(ParseError):
    """The input holds no diagram."""

    message = "Empty input"


class MissingSourceStateError(ParseError):
    """A transition names no source state."""

    message = "Missing source state in transition"


class MissingDestinationStateError(ParseError):
    """A transition names no destination state."""

    message = "Missing destination state in transition"


class MissingCompositeStateNameError(ParseError):
    """A composite state has no name."""

    message = "Missing name in composite state"


class MissingStateNameError(ParseError):
    """A state description names no state."""

    message = "Missing state name in state description"


class MissingDescriptionError(ParseError):
    """A state description has no text."""

    message = "Missing description in state description"


class InvalidTransitionDescriptionError(ParseError):
    """A transition label cannot be read."""

    message = "Invalid transition description: {detail}"


class EmptyTransitionError(ParseError):
    """A transition label has no event, guard or action."""

    message = "Transition must have at least an event, guard, or action"


class InvalidStateDescriptionError(ParseError):
    """A state description cannot be read."""

    message = "Invalid state description: {detail}"


class UnrecognisedStateDescriptionError(ParseError):
    """A state description is well formed but means nothing known."""

    message = "Unrecognised state description: {detail}"


class MissingStateActionError(ParseError):
    """A state action is neither an entry nor an exit action."""

    message = "Expected entry or exit action"


class MissingActionNameError(ParseError):
    """An action is given without a name."""

    message = "Action name is required"


class MissingEventNameError(ParseError):
    """An event is given without a name."""

    message = "Event name is required"