"""Profile actions"""
from frontend.actions.alert import alert_errors, error_payload, set_alert
from frontend.actions.types import (
    ACCOUNT_DELETED,
    CLEAR_PROFILE,
    GET_PROFILE,
    GET_PROFILES,
    GET_REPOS,
    NO_REPOS,
    PROFILE_ERROR,
    UPDATE_PROFILE,
)
from frontend.api import ApiError


def get_current_profile():
    """Load the logged-in user's profile."""

    def thunk(dispatch, get_state, api):
        try:
            res = api.get("/profile/me")
        except ApiError as err:
            dispatch({"type": PROFILE_ERROR, "payload": error_payload(err)})
            return
        dispatch({"type": GET_PROFILE, "payload": res.data})

    return thunk


def get_profiles():
    def thunk(dispatch, get_state, api):
        dispatch({"type": CLEAR_PROFILE})
        try:
            res = api.get("/profile")
        except ApiError as err:
            dispatch({"type": PROFILE_ERROR, "payload": error_payload(err)})
            return
        dispatch({"type": GET_PROFILES, "payload": res.data})

    return thunk


def get_profile_by_id(user_id: str):
    def thunk(dispatch, get_state, api):
        try:
            res = api.get(f"/profile/user/{user_id}")
        except ApiError as err:
            dispatch({"type": PROFILE_ERROR, "payload": error_payload(err)})
            return
        dispatch({"type": GET_PROFILE, "payload": res.data})

    return thunk


def get_github_repos(username: str):
    def thunk(dispatch, get_state, api):
        try:
            res = api.get(f"/profile/github/{username}")
        except ApiError:
            dispatch({"type": NO_REPOS})
            return
        dispatch({"type": GET_REPOS, "payload": res.data})

    return thunk


def create_profile(form_data: dict, edit: bool = False):
    """Create or update the profile; `edit` only changes the success message."""

    def thunk(dispatch, get_state, api):
        try:
            res = api.post("/profile", form_data)
        except ApiError as err:
            alert_errors(dispatch, err)
            dispatch({"type": PROFILE_ERROR, "payload": error_payload(err)})
            return False
        dispatch({"type": GET_PROFILE, "payload": res.data})
        dispatch(set_alert("Profile Updated" if edit else "Profile Created", "success"))
        return True

    return thunk


def _add_entry(path: str, form_data: dict, message: str):
    def thunk(dispatch, get_state, api):
        try:
            res = api.put(path, form_data)
        except ApiError as err:
            alert_errors(dispatch, err)
            dispatch({"type": PROFILE_ERROR, "payload": error_payload(err)})
            return False
        dispatch({"type": UPDATE_PROFILE, "payload": res.data})
        dispatch(set_alert(message, "success"))
        return True

    return thunk


def _remove_entry(path: str, message: str):
    def thunk(dispatch, get_state, api):
        try:
            res = api.delete(path)
        except ApiError as err:
            dispatch({"type": PROFILE_ERROR, "payload": error_payload(err)})
            return
        dispatch({"type": UPDATE_PROFILE, "payload": res.data})
        dispatch(set_alert(message, "success"))

    return thunk


def add_experience(form_data: dict):
    return _add_entry("/profile/experience", form_data, "Experience Added")


def add_education(form_data: dict):
    return _add_entry("/profile/education", form_data, "Education Added")


def delete_experience(exp_id: str):
    return _remove_entry(f"/profile/experience/{exp_id}", "Experience Removed")


def delete_education(edu_id: str):
    return _remove_entry(f"/profile/education/{edu_id}", "Education Removed")


def delete_account():
    """Delete profile, posts and account, then drop the session."""

    def thunk(dispatch, get_state, api):
        try:
            api.delete("/profile")
        except ApiError as err:
            dispatch({"type": PROFILE_ERROR, "payload": error_payload(err)})
            return
        api.set_token(None)
        dispatch({"type": CLEAR_PROFILE})
        dispatch({"type": ACCOUNT_DELETED})
        dispatch(set_alert("Your account has been permanently deleted", "success"))

    return thunk
