import streamlit as st


PREFIX = "slice"


def get_slice(slice_name):
    key = f"{PREFIX}.{slice_name}"
    if key not in st.session_state:
        st.session_state[key] = {}
    return st.session_state[key]


def get_int(slice_name, name, default=0):
    value = get_slice(slice_name).get(name, default)
    try:
        return int(value)
    except (TypeError, ValueError):
        return int(default or 0)


def update_slice(slice_name, values):
    get_slice(slice_name).update(values)
