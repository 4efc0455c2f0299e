"""Transient user-facing alerts"""
import threading
import uuid

from frontend.actions.types import REMOVE_ALERT, SET_ALERT

DEFAULT_TIMEOUT = 5.0


def set_alert(msg: str, alert_type: str, timeout: float | None = DEFAULT_TIMEOUT):
    """Show an alert; it removes itself after `timeout` seconds (None keeps it)."""

    def thunk(dispatch, get_state, api):
        alert_id = uuid.uuid4().hex
        dispatch({"type": SET_ALERT, "payload": {"id": alert_id, "msg": msg, "alertType": alert_type}})
        if timeout is not None:
            timer = threading.Timer(timeout, dispatch, args=[remove_alert(alert_id)])
            timer.daemon = True
            timer.start()
        return alert_id

    return thunk


def remove_alert(alert_id: str) -> dict:
    return {"type": REMOVE_ALERT, "payload": alert_id}


def alert_errors(dispatch, err) -> None:
    """One danger alert per field error of a failed request."""
    for error in err.errors:
        dispatch(set_alert(error.get("msg", ""), "danger"))


def error_payload(err) -> dict:
    return {"msg": err.msg, "status": err.status}
