import streamlit as st


PREFIX = "planner"

_STATE_GETTER = None


def configure(state_getter=None):
    global _STATE_GETTER
    _STATE_GETTER = state_getter


def _state():
    if _STATE_GETTER is None:
        return st.session_state
    return _STATE_GETTER()


def get_slice(slice_name):
    key = f"{PREFIX}.{slice_name}"
    state = _state()
    if key not in state:
        state[key] = {}
    return state[key]


def get_value(slice_name, name, default=None):
    payload = get_slice(slice_name)
    return payload.get(name, default)


def set_value(slice_name, name, value):
    payload = get_slice(slice_name)
    payload[name] = value


def setdefault(slice_name, name, factory):
    payload = get_slice(slice_name)
    if name not in payload:
        payload[name] = factory()
    return payload[name]


def update_slice(slice_name, values):
    payload = get_slice(slice_name)
    payload.update(values)


def clear_slice(slice_name):
    key = f"{PREFIX}.{slice_name}"
    state = _state()
    if key in state:
        del state[key]
