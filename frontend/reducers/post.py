"""Post slice: the feed and the post being viewed"""
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

INITIAL_STATE = {
    "posts": [],
    "post": None,
    "loading": True,
    "error": {},
}


def _with_likes(post, likes_update):
    if post is None or post["id"] != likes_update["id"]:
        return post
    return {**post, "likes": likes_update["likes"]}


def post(state=None, action=None):
    state = INITIAL_STATE if state is None else state
    action = action or {}
    kind = action.get("type")
    payload = action.get("payload")

    if kind == GET_POSTS:
        return {**state, "posts": payload, "loading": False}
    if kind == GET_POST:
        return {**state, "post": payload, "loading": False}
    if kind == ADD_POST:
        return {**state, "posts": [payload, *state["posts"]], "loading": False}
    if kind == DELETE_POST:
        return {**state, "posts": [p for p in state["posts"] if p["id"] != payload], "loading": False}
    if kind == POST_ERROR:
        return {**state, "error": payload, "loading": False}
    if kind == UPDATE_LIKES:
        return {
            **state,
            "posts": [_with_likes(p, payload) for p in state["posts"]],
            "post": _with_likes(state["post"], payload),
            "loading": False,
        }
    if kind == ADD_COMMENT and state["post"] is not None:
        return {**state, "post": {**state["post"], "comments": payload}, "loading": False}
    if kind == REMOVE_COMMENT and state["post"] is not None:
        comments = [c for c in state["post"]["comments"] if c["id"] != payload]
        return {**state, "post": {**state["post"], "comments": comments}, "loading": False}
    return state
