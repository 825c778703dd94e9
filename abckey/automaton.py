"""
Finite-state token classifier.

One shared start state fans out into independent per-field graphs.  Every
edge tests the next input character, either for equality with a given char
or against a named predicate (is a colon, is a letter, ...).  Classification
walks from the start state one character at a time and returns the tag of
the first accepting state reached, or TokenType.UNKNOWN.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from .notation import TokenType

logger = logging.getLogger(__name__)


class Predicate(Enum):
    CHAR = "char"
    COLON = "colon"
    LETTER = "letter"
    DIGIT = "digit"
    SPACE = "space"


@dataclass(frozen=True)
class Transition:
    predicate: Predicate
    target: "State"
    char: Optional[str] = None


@dataclass(eq=False)
class State:
    token_type: TokenType
    accepting: bool
    transitions: list[Transition] = field(default_factory=list)

    def add_transition(self, transition: Transition) -> "State":
        """Attach an edge and return its target, so graphs can be chained."""
        self.transitions.append(transition)
        return transition.target

    def on_char(self, char: str, target: "State") -> "State":
        return self.add_transition(Transition(Predicate.CHAR, target, char))

    def on(self, predicate: Predicate, target: "State") -> "State":
        return self.add_transition(Transition(predicate, target))


def matches(transition: Transition, ch: str) -> bool:
    """Evaluate one edge against one input character."""
    p = transition.predicate
    if p is Predicate.CHAR:
        return ch == transition.char
    if p is Predicate.COLON:
        return ch == ":"
    if p is Predicate.LETTER:
        return ch.isalpha()
    if p is Predicate.DIGIT:
        return ch.isdigit()
    if p is Predicate.SPACE:
        return ch in " \t"
    raise ValueError(f"Unhandled predicate {p!r}")


class Automaton:
    """
    Usage:
        automaton = Automaton()
        automaton.add_definition(field_definition("I", TokenType.FIELD_INFORMATION))
        automaton.classify("I:abc-charset utf-8")   # TokenType.FIELD_INFORMATION
    """

    def __init__(self):
        self.start = State(TokenType.UNKNOWN, False)

    def add_definition(self, builder: Callable[[State], None]) -> "Automaton":
        builder(self.start)
        return self

    def _step(self, state: State, ch: str) -> Optional[State]:
        for transition in state.transitions:
            if matches(transition, ch):
                return transition.target
        return None

    def match(self, text: str) -> tuple[TokenType, int]:
        """Return (token type, characters consumed); (UNKNOWN, 0) on failure."""
        state = self.start
        for consumed, ch in enumerate(text, start=1):
            state = self._step(state, ch)
            if state is None:
                break
            if state.accepting:
                return state.token_type, consumed
        logger.debug("No field recognised at %r", text[:8])
        return TokenType.UNKNOWN, 0

    def classify(self, text: str) -> TokenType:
        return self.match(text)[0]
