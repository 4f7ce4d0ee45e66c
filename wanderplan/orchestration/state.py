"""View state machine for a planning session.

The whole session (current view, preferences, itinerary, error message) lives in
one immutable ``ViewState``. Every user action and pipeline outcome is an action
object, and ``reduce`` maps (state, action) to the next state.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from pydantic import ValidationError

from wanderplan.models.itinerary import TripItinerary
from wanderplan.models.preferences import TripPreferences
from wanderplan.pipeline.errors import GENERIC_FAILURE_MESSAGE

logger = logging.getLogger(__name__)


class View(str, Enum):
    """Screens of the application."""

    LANDING = "landing"
    WIZARD = "wizard"
    LOADING = "loading"
    ITINERARY = "itinerary"
    ERROR = "error"


@dataclass(frozen=True)
class ViewState:
    """Everything the UI needs to render one screen."""

    view: View = View.LANDING
    preferences: TripPreferences = field(default_factory=TripPreferences)
    itinerary: TripItinerary | None = None
    error_message: str = ""
    # Bumped on every accepted submission; outcomes for older ids are dropped
    request_id: int = 0


# Actions


@dataclass(frozen=True)
class StartPlanning:
    pass


@dataclass(frozen=True)
class EditPreferences:
    changes: dict[str, Any]


@dataclass(frozen=True)
class ToggleInterest:
    interest: str


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class Submit:
    pass


@dataclass(frozen=True)
class GenerationSucceeded:
    request_id: int
    itinerary: TripItinerary


@dataclass(frozen=True)
class GenerationFailed:
    request_id: int
    message: str = GENERIC_FAILURE_MESSAGE


@dataclass(frozen=True)
class TryAgain:
    pass


@dataclass(frozen=True)
class Reset:
    pass


Action = (
    StartPlanning
    | EditPreferences
    | ToggleInterest
    | Back
    | Submit
    | GenerationSucceeded
    | GenerationFailed
    | TryAgain
    | Reset
)


def _edit(state: ViewState, action: EditPreferences | ToggleInterest) -> ViewState:
    try:
        if isinstance(action, ToggleInterest):
            prefs = state.preferences.toggle_interest(action.interest)
        else:
            prefs = state.preferences.with_changes(**action.changes)
    except ValidationError as e:
        logger.debug(f"Rejected preference edit: {e.error_count()} invalid field(s)")
        return state
    return replace(state, preferences=prefs)


def _is_current_outcome(state: ViewState, request_id: int) -> bool:
    if state.view != View.LOADING or request_id != state.request_id:
        logger.info(f"Discarding stale generation outcome (request {request_id})")
        return False
    return True


def reduce(state: ViewState, action: Action) -> ViewState:
    """Apply an action to a view state.

    Pairs not listed in the transition table are no-ops and return ``state``.
    """
    if isinstance(action, StartPlanning):
        if state.view == View.LANDING:
            return replace(state, view=View.WIZARD)
        return state

    if isinstance(action, (EditPreferences, ToggleInterest)):
        if state.view == View.WIZARD:
            return _edit(state, action)
        return state

    if isinstance(action, Back):
        if state.view == View.WIZARD:
            return replace(state, view=View.LANDING)
        return state

    if isinstance(action, Submit):
        # Form validation blocks silently
        if state.view == View.WIZARD and state.preferences.is_submittable():
            return replace(
                state,
                view=View.LOADING,
                error_message="",
                request_id=state.request_id + 1,
            )
        return state

    if isinstance(action, GenerationSucceeded):
        if _is_current_outcome(state, action.request_id):
            return replace(state, view=View.ITINERARY, itinerary=action.itinerary)
        return state

    if isinstance(action, GenerationFailed):
        if _is_current_outcome(state, action.request_id):
            return replace(state, view=View.ERROR, error_message=action.message)
        return state

    if isinstance(action, TryAgain):
        if state.view == View.ERROR:
            return replace(state, view=View.WIZARD)
        return state

    if isinstance(action, Reset):
        if state.view == View.ITINERARY:
            return ViewState(request_id=state.request_id)
        return state

    return state
