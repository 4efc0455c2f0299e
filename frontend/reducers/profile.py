"""Profile slice: the profile being viewed, the developer list and GitHub repos"""
from frontend.actions.types import (
    CLEAR_PROFILE,
    GET_PROFILE,
    GET_PROFILES,
    GET_REPOS,
    NO_REPOS,
    PROFILE_ERROR,
    UPDATE_PROFILE,
)

INITIAL_STATE = {
    "profile": None,
    "profiles": [],
    "repos": [],
    "loading": True,
    "error": {},
}


def profile(state=None, action=None):
    state = INITIAL_STATE if state is None else state
    action = action or {}
    kind = action.get("type")
    payload = action.get("payload")

    if kind in (GET_PROFILE, UPDATE_PROFILE):
        return {**state, "profile": payload, "loading": False}
    if kind == GET_PROFILES:
        return {**state, "profiles": payload, "loading": False}
    if kind == PROFILE_ERROR:
        return {**state, "error": payload, "loading": False, "profile": None}
    if kind == CLEAR_PROFILE:
        return {**state, "profile": None, "repos": [], "loading": False}
    if kind == GET_REPOS:
        return {**state, "repos": payload, "loading": False}
    if kind == NO_REPOS:
        return {**state, "repos": []}
    return state
