"""Immutable interactive session and its reducers.

A :class:`Session` is the whole editable state of one visualization page: the
current view, the current palette and the bookkeeping for the single palette
generation request that may be in flight. Every user action is a pure
function ``Session -> Session``; nothing is mutated in place, so the UI can
keep a single reference and swap it after each edit.

Generation lifecycle:

* :func:`begin_generation` hands out a ticket, or ``None`` when a request is
    already pending (at most one per session), the theme is blank or the
    session was closed.
* :func:`complete_generation` / :func:`fail_generation` only apply when the
    ticket is still the pending one and the session is open. Results arriving
    for a torn-down session or a superseded ticket are dropped.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Optional, Tuple

from pi_casso.digits import PI_DIGITS
from pi_casso.generator import GenerationError
from pi_casso.palette import DEFAULT_PALETTE, get_preset, with_color
from pi_casso.types import DigitSequence, PaletteGenerateFn, PaletteMapping, PresetName
from pi_casso.view import DEFAULT_VIEW, ViewConfig, clamp_view

GENERATION_FAILED_MESSAGE: str = "Failed to generate palette. Try again."


@dataclass(frozen=True)
class Session:
    """Snapshot of one interactive session.

    Attributes:
        view: Current grid configuration (already clamped).
        palette: Current digit -> color mapping.
        digits: Digit sequence being visualized.
        pending: Ticket of the outstanding generation request, if any.
        error: User-visible message from the last failed generation.
        closed: True once the session has been torn down.
        next_ticket: Counter used to issue generation tickets.
    """

    view: ViewConfig = DEFAULT_VIEW
    palette: PaletteMapping = DEFAULT_PALETTE
    digits: DigitSequence = field(default=PI_DIGITS, repr=False)
    pending: Optional[int] = None
    error: Optional[str] = None
    closed: bool = False
    next_ticket: int = 0

    @property
    def is_generating(self) -> bool:
        return self.pending is not None


def new_session(
    view: ViewConfig = DEFAULT_VIEW,
    palette: PaletteMapping = DEFAULT_PALETTE,
    digits: DigitSequence = PI_DIGITS,
) -> Session:
    return Session(view=clamp_view(view, len(digits)), palette=palette, digits=digits)


# -------- View & palette edits --------


def update_view(session: Session, **changes: Any) -> Session:
    """Merge ``changes`` into the view and clamp the result."""
    view = clamp_view(replace(session.view, **changes), len(session.digits))
    return replace(session, view=view)


def set_digit_color(session: Session, digit: str, color: str) -> Session:
    return replace(session, palette=with_color(session.palette, digit, color))


def apply_preset(session: Session, name: PresetName | str) -> Session:
    return replace(session, palette=get_preset(name))


def reset_palette(session: Session) -> Session:
    return apply_preset(session, PresetName.DEFAULT)


# -------- Palette generation --------


def can_generate(session: Session, theme: str) -> bool:
    return bool(theme.strip()) and not session.is_generating and not session.closed


def begin_generation(session: Session, theme: str) -> Tuple[Session, Optional[int]]:
    if not can_generate(session, theme):
        return session, None
    ticket = session.next_ticket
    return (
        replace(session, pending=ticket, error=None, next_ticket=ticket + 1),
        ticket,
    )


def _is_current(session: Session, ticket: int) -> bool:
    return not session.closed and session.pending == ticket


def complete_generation(
    session: Session, ticket: int, palette: PaletteMapping
) -> Session:
    if not _is_current(session, ticket):
        return session
    return replace(session, palette=palette, pending=None, error=None)


def fail_generation(session: Session, ticket: int, message: str) -> Session:
    if not _is_current(session, ticket):
        return session
    return replace(session, pending=None, error=message)


def close_session(session: Session) -> Session:
    return replace(session, closed=True, pending=None)


def run_generation(
    session: Session, theme: str, generate: PaletteGenerateFn
) -> Session:
    """Run one generation request synchronously.

    ``generate`` failures are turned into the user-visible error message; the
    current palette is kept so rendering keeps working.
    """
    session, ticket = begin_generation(session, theme)
    if ticket is None:
        return session
    try:
        palette = generate(theme)
    except GenerationError:
        return fail_generation(session, ticket, GENERATION_FAILED_MESSAGE)
    return complete_generation(session, ticket, palette)
