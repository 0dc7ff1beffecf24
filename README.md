# pumlstate

Read PlantUML state diagrams into plain Python data. You get the diagram's
name, its initial states, its transitions, its nested composite states and
the text attached to states. A second parser reads transition labels
(`Event [Guard] / Action`) and state descriptions (entry and exit actions,
deferred events, internal transitions).

The package has no dependencies beyond the standard library. It needs
Python 3.10 or later.

## Installation

```
pip install pumlstate
```

## Parsing a diagram

```python
from pumlstate.diagram import parse_diagram

diagram = parse_diagram("""
@startuml Traffic
[*] --> Red
Red --> Green : Timer [CanGo] / switchOn
state Green : entry / greenOn
state Yellow {
    [*] --> Blinking
}
@enduml
""")

print(diagram.name)                     # Traffic
print(diagram.elements.enter_states)    # ['Red']
for t in diagram.elements.transitions:
    print(t.source, t.target, t.description)   # Red Green Timer [CanGo] / switchOn
print(diagram.elements.state_descriptions)     # [StateText(name='Green', description='entry / greenOn')]
print(diagram.elements.composite_states[0].elements.enter_states)  # ['Blinking']
```

`parse_diagram(text)` returns a `StateDiagram`. Its `name` is the text after
`@startuml`, or `None` if there is none. Its `elements` is a `StateElements`
value with four lists:

- `enter_states`: the targets of `[*] --> State` lines.
- `transitions`: `TransitionDescription(source, target, description)` values.
  `description` is the stripped text after `:`, or `None` when there is none
  or it is blank.
- `composite_states`: `CompositeState(name, elements)` values for
  `state Name { ... }` blocks, each with its own nested `StateElements`.
- `state_descriptions`: `StateText(name, description)` values for
  `state Name : text` and `Name : text` lines.

What the parser accepts:

- The first non-blank line must be `@startuml`, optionally followed by a
  name. The last must be `@enduml`, and nothing may follow it.
- Arrows are one or more dashes followed by `>`. A direction may sit in the
  middle, as in `-u->`, `-up->` or `-left->`.
- State names are identifiers: letters, digits and underscores, not
  starting with a digit.
- Line comments start with `'`. Block comments are enclosed in `/'` and `'/`.
- Final transitions (`State --> [*]`) and plain declarations (`state Name`)
  are accepted and not recorded.

Descriptions are kept as raw text. Pass them to the label parsers below to
interpret them.

## Parsing labels

```python
from pumlstate.labels import parse_transition_label

label = parse_transition_label("ChangeState [AGuard] / DoSomething")
print(label.event, label.guard, label.action)   # ChangeState AGuard DoSomething

parse_transition_label("[CanGoToD]")             # TransitionLabel(event=None, guard='CanGoToD', action=None)
```

`parse_transition_label(text)` returns a `TransitionLabel`. Each of `event`,
`guard` and `action` may be `None`, but at least one must be present.
`TransitionLabel.is_empty` is true when all three are missing. Whitespace
around each part is ignored.

`parse_state_description(text)` reads the text of a state description. It
returns one of the following:

| Text                   | Result                                   |
|------------------------|------------------------------------------|
| `entry / DoSomething`  | `EntryAction("DoSomething")`             |
| `exit / DoSomething`   | `ExitAction("DoSomething")`              |
| `SomeEvent / defer`    | `DeferredEvent("SomeEvent")`             |
| `Event [Guard] / Act`  | `InternalTransition(TransitionLabel(...))` |

## Errors

Every failure raises a subclass of `pumlstate.errors.ParseError`, so you can
catch the base class or a specific case. The parsers raise these errors:

- `parse_diagram`:
  - `EmptyInputError` for blank input.
  - `GrammarError` for a missing `@startuml` or `@enduml`, content after
    `@enduml`, an unmatched or unclosed brace, or a line it cannot read.
  - `MissingDescriptionError` for a state description with no text after `:`.
- `parse_transition_label`:
  - `InvalidTransitionDescriptionError` for text that is not a label.
  - `EmptyTransitionError` for an empty label.
- `parse_state_description`:
  - `InvalidStateDescriptionError` for text that cannot be read, such as
    `some random text`.
  - `UnrecognisedStateDescriptionError` for empty text.

## What it does not do

This package only reads diagrams and labels into data. It does not:

- build a state-machine model from that data;
- check that transition targets exist;
- generate or run state-machine code;
- provide a command-line tool.