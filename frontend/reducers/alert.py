from frontend.actions.types import REMOVE_ALERT, SET_ALERT


def alert(state=None, action=None):
    state = [] if state is None else state
    action = action or {}
    kind = action.get("type")
    if kind == SET_ALERT:
        return [*state, action["payload"]]
    if kind == REMOVE_ALERT:
        return [a for a in state if a["id"] != action["payload"]]
    return state
