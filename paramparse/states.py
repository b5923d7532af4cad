# Paramparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The token state machine behind `ParameterParser.parse()`.

Each state handles one trimmed token and answers with a `Transition` that tells the
driver loop what to do next:

- `ADVANCE`: the token was consumed, move on to the next one.
- `RETRY`: a new state was selected, hand it the same token again.
- `STOP`: end parsing. No current state returns it.

States:
- `INIT`: picks `UNNAMED` or the `DASH` state matching the token prefix, then retries.
- `UNNAMED`: stores the token as the next positional value.
- `DASH`: handles `--name=value`, `--flag`, and the two token `--name value` form.
  A `DashState` record per prefix carries the pending name between two tokens.

Every `StateMachine` owns its own `DashState` records, so two parsers never share
an in-progress name.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from paramparse.logger import logger
from paramparse.store import ParameterStore
from paramparse.tokens import (
    LONG_PREFIX,
    SHORT_PREFIX,
    TokenKind,
    classify,
    has_key_value,
    prefix_of,
    split_key_value,
    strip_prefix,
    strip_quotes,
)


class Transition(Enum):
    """Instruction returned by a state to the driver loop."""

    ADVANCE = "advance"
    RETRY = "retry"
    STOP = "stop"

    def __str__(self) -> str:
        return self.value


class StateTag(Enum):
    """Identifies the active state of a `StateMachine`."""

    INIT = "init"
    UNNAMED = "unnamed"
    DASH = "dash"

    def __str__(self) -> str:
        return self.value


@dataclass
class DashState:
    """In-progress buffer of a dash prefixed parameter."""

    prefix: str
    awaiting_value: bool = False
    pending_name: str | None = None

    def hold(self, name: str) -> None:
        """Buffer a name until the next token supplies its value."""
        self.awaiting_value = True
        self.pending_name = name

    def reset(self) -> None:
        self.awaiting_value = False
        self.pending_name = None


class StateMachine:
    """
    Drives the INIT / UNNAMED / DASH transitions for a single token sequence.

    Args:
        store (ParameterStore): Receives positional values, named values and options.
        option_parsing (bool): When True a dash token without `=` is a boolean option,
            otherwise it is the name half of a `name value` pair.
    """

    def __init__(self, store: ParameterStore, option_parsing: bool = True) -> None:
        self.store = store
        self.option_parsing = option_parsing
        self.state = StateTag.INIT
        self.dash_states: dict[str, DashState] = {
            LONG_PREFIX: DashState(LONG_PREFIX),
            SHORT_PREFIX: DashState(SHORT_PREFIX),
        }
        self.active_dash: DashState | None = None
        self._handlers: dict[StateTag, Callable[[str], Transition]] = {
            StateTag.INIT: self._run_init,
            StateTag.UNNAMED: self._run_unnamed,
            StateTag.DASH: self._run_dash,
        }

    def step(self, token: str) -> Transition:
        """Hand a trimmed token to the active state."""
        state = self.state
        transition = self._handlers[state](token)
        logger.debug("[%s] %r -> %s", state, token, transition)
        return transition

    @property
    def pending(self) -> DashState | None:
        """The dash state still waiting for a value, if any."""
        if self.active_dash and self.active_dash.awaiting_value:
            return self.active_dash
        return None

    def _reset(self) -> None:
        if self.active_dash:
            self.active_dash.reset()
        self.active_dash = None
        self.state = StateTag.INIT

    def _run_init(self, token: str) -> Transition:
        kind = classify(token)
        if kind is TokenKind.POSITIONAL:
            self.state = StateTag.UNNAMED
        else:
            self.active_dash = self.dash_states[prefix_of(kind)]
            self.state = StateTag.DASH
        return Transition.RETRY

    def _run_unnamed(self, token: str) -> Transition:
        self.store.add_positional(strip_quotes(token))
        self._reset()
        return Transition.ADVANCE

    def _run_dash(self, token: str) -> Transition:
        dash = self.active_dash
        assert dash is not None, "DASH state entered without a prefix"
        if dash.awaiting_value:
            name = dash.pending_name or ""
            self._reset()
            self.store.add_named(name, strip_quotes(token))
        elif has_key_value(token):
            name, value = split_key_value(token, dash.prefix)
            self._reset()
            self.store.add_named(name, value)
        elif self.option_parsing:
            self._reset()
            self.store.add_option(token)
        else:
            dash.hold(strip_prefix(token, dash.prefix))
        return Transition.ADVANCE
