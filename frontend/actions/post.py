"""Post actions"""
from frontend.actions.alert import alert_errors, error_payload, set_alert
from frontend.actions.types import (
    ADD_COMMENT,
    ADD_POST,
    DELETE_POST,
    GET_POST,
    GET_POSTS,
    POST_ERROR,
    REMOVE_COMMENT,
    UPDATE_LIKES,
)
from frontend.api import ApiError


def _post_error(dispatch, err, alert: bool = False) -> None:
    if alert:
        if err.errors:
            alert_errors(dispatch, err)
        else:
            dispatch(set_alert(err.msg, "danger"))
    dispatch({"type": POST_ERROR, "payload": error_payload(err)})


def get_posts():
    def thunk(dispatch, get_state, api):
        try:
            res = api.get("/posts")
        except ApiError as err:
            _post_error(dispatch, err)
            return
        dispatch({"type": GET_POSTS, "payload": res.data})

    return thunk


def get_post(post_id: str):
    def thunk(dispatch, get_state, api):
        try:
            res = api.get(f"/posts/{post_id}")
        except ApiError as err:
            _post_error(dispatch, err)
            return
        dispatch({"type": GET_POST, "payload": res.data})

    return thunk


def add_post(form_data: dict):
    def thunk(dispatch, get_state, api):
        try:
            res = api.post("/posts", form_data)
        except ApiError as err:
            _post_error(dispatch, err, alert=True)
            return
        dispatch({"type": ADD_POST, "payload": res.data})
        dispatch(set_alert("Post Created", "success"))

    return thunk


def delete_post(post_id: str):
    def thunk(dispatch, get_state, api):
        try:
            api.delete(f"/posts/{post_id}")
        except ApiError as err:
            _post_error(dispatch, err, alert=True)
            return
        dispatch({"type": DELETE_POST, "payload": post_id})
        dispatch(set_alert("Post Removed", "success"))

    return thunk


def add_like(post_id: str):
    def thunk(dispatch, get_state, api):
        try:
            res = api.put(f"/posts/like/{post_id}")
        except ApiError as err:
            _post_error(dispatch, err, alert=True)
            return
        dispatch({"type": UPDATE_LIKES, "payload": {"id": post_id, "likes": res.data}})

    return thunk


def remove_like(post_id: str):
    def thunk(dispatch, get_state, api):
        try:
            res = api.put(f"/posts/unlike/{post_id}")
        except ApiError as err:
            _post_error(dispatch, err, alert=True)
            return
        dispatch({"type": UPDATE_LIKES, "payload": {"id": post_id, "likes": res.data}})

    return thunk


def add_comment(post_id: str, form_data: dict):
    def thunk(dispatch, get_state, api):
        try:
            res = api.post(f"/posts/comment/{post_id}", form_data)
        except ApiError as err:
            _post_error(dispatch, err, alert=True)
            return
        dispatch({"type": ADD_COMMENT, "payload": res.data})
        dispatch(set_alert("Comment Added", "success"))

    return thunk


def delete_comment(post_id: str, comment_id: str):
    def thunk(dispatch, get_state, api):
        try:
            api.delete(f"/posts/comment/{post_id}/{comment_id}")
        except ApiError as err:
            _post_error(dispatch, err, alert=True)
            return
        dispatch({"type": REMOVE_COMMENT, "payload": comment_id})
        dispatch(set_alert("Comment Removed", "success"))

    return thunk
