"""
errors.py - exceptions raised by the DES trace engine.

Two kinds of failure exist:

    MalformedInput      - the caller handed us something that is not hex.
    InvariantViolation  - a table or an intermediate value has the wrong
                          shape. This is a bug in configuration data or in
                          the engine itself, never a user-input problem.
"""


class MalformedInput(ValueError):
    """A supplied hex string contains a character outside 0-9A-F."""

    def __init__(self, text: str, position: int):
        self.text = text
        self.position = position
        super().__init__(
            f"Invalid hex digit {text[position]!r} at position {position} in {text!r}"
        )


class InvariantViolation(AssertionError):
    """A permutation index is out of range or two stages disagree on width."""
