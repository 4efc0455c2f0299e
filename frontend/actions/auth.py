"""Auth actions - register, login, load the current user, logout"""
import logging

from frontend.actions.alert import alert_errors
from frontend.actions.types import (
    AUTH_ERROR,
    CLEAR_PROFILE,
    LOGIN_FAIL,
    LOGIN_SUCCESS,
    LOGOUT,
    REGISTER_FAIL,
    REGISTER_SUCCESS,
    USER_LOADED,
)
from frontend.api import ApiError

logger = logging.getLogger(__name__)


def load_user():
    """Fetch the user behind the held token; any failure logs the client out."""

    def thunk(dispatch, get_state, api):
        try:
            res = api.get("/auth")
        except ApiError as err:
            logger.info("Could not load user: %s", err)
            api.set_token(None)
            dispatch({"type": AUTH_ERROR})
            return
        dispatch({"type": USER_LOADED, "payload": res.data})

    return thunk


def register(form_data: dict):
    def thunk(dispatch, get_state, api):
        try:
            res = api.post("/users", form_data)
        except ApiError as err:
            alert_errors(dispatch, err)
            api.set_token(None)
            dispatch({"type": REGISTER_FAIL})
            return
        api.set_token(res.data["token"])
        dispatch({"type": REGISTER_SUCCESS, "payload": res.data})

    return thunk


def login(email: str, password: str):
    def thunk(dispatch, get_state, api):
        try:
            res = api.post("/auth", {"email": email, "password": password})
        except ApiError as err:
            alert_errors(dispatch, err)
            api.set_token(None)
            dispatch({"type": LOGIN_FAIL})
            return
        api.set_token(res.data["token"])
        dispatch({"type": LOGIN_SUCCESS, "payload": res.data})

    return thunk


def logout():
    def thunk(dispatch, get_state, api):
        api.set_token(None)
        dispatch({"type": CLEAR_PROFILE})
        dispatch({"type": LOGOUT})

    return thunk
