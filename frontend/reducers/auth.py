"""Auth slice: token, authentication flag and the loaded user"""
from frontend.actions.types import (
    ACCOUNT_DELETED,
    AUTH_ERROR,
    LOGIN_FAIL,
    LOGIN_SUCCESS,
    LOGOUT,
    REGISTER_FAIL,
    REGISTER_SUCCESS,
    USER_LOADED,
)

INITIAL_STATE = {
    "token": None,
    "isAuthenticated": False,
    "loading": True,
    "user": None,
}

_LOGGED_OUT = (REGISTER_FAIL, LOGIN_FAIL, AUTH_ERROR, LOGOUT, ACCOUNT_DELETED)


def auth(state=None, action=None):
    state = INITIAL_STATE if state is None else state
    action = action or {}
    kind = action.get("type")
    payload = action.get("payload")

    if kind == USER_LOADED:
        return {**state, "isAuthenticated": True, "loading": False, "user": payload}
    if kind in (REGISTER_SUCCESS, LOGIN_SUCCESS):
        return {**state, "token": payload["token"], "isAuthenticated": True, "loading": False}
    if kind in _LOGGED_OUT:
        return {**state, "token": None, "isAuthenticated": False, "loading": False, "user": None}
    return state
