"""
Client state container.

State changes only through `dispatch(action)`; reducers are pure
`(state, action) -> state` functions. A dispatched callable is run as a
thunk `(dispatch, get_state, api)` so it can call the API before
dispatching plain actions.
"""
import threading

INIT = "@@INIT"


def combine_reducers(**reducers):
    """Build one reducer whose state is a dict with one slice per named reducer."""

    def combined(state=None, action=None):
        state = state or {}
        next_state = {key: reducer(state.get(key), action) for key, reducer in reducers.items()}
        if all(next_state[key] is state.get(key) for key in reducers):
            return state
        return next_state

    return combined


class Store:
    def __init__(self, reducer, api=None, initial_state=None):
        self.api = api
        self._reducer = reducer
        self._state = reducer(initial_state, {"type": INIT})
        self._listeners = []
        # alert timers dispatch from their own threads
        self._lock = threading.RLock()

    def get_state(self):
        return self._state

    def dispatch(self, action):
        if callable(action):
            return action(self.dispatch, self.get_state, self.api)
        with self._lock:
            self._state = self._reducer(self._state, action)
            listeners = list(self._listeners)
        for listener in listeners:
            listener()
        return action

    def subscribe(self, listener):
        """Call `listener()` after every dispatched action. Returns an unsubscribe function."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe():
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe


def create_store(api=None, initial_state=None) -> Store:
    """Store over the application's root reducer."""
    from frontend.reducers import root_reducer

    return Store(root_reducer, api=api, initial_state=initial_state)
