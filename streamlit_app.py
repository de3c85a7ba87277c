"""Streamlit entrypoint delegating to the Magic 8 Ball screen."""

from importlib import import_module

import streamlit as st

HOME_MODULE = "Home"


def main() -> None:
    """Render the 8-ball screen when the app entrypoint is loaded."""

    try:
        home_module = import_module(HOME_MODULE)
    except ModuleNotFoundError:
        st.error("Magic 8 Ball screen module not found.")
        return

    render = getattr(home_module, "main", None)
    if not callable(render):
        st.error("Magic 8 Ball screen is missing a main() function.")
        return

    render()


if __name__ == "__main__":
    main()
