"""Feedback component for displaying user messages."""
import streamlit as st


def render_feedback(message: str, type_: str = "info") -> None:
    """
    Display a feedback message.

    Args:
        message: The message to display
        type_: Type of message ('success', 'error', or 'info')
    """
    if type_ == "success":
        st.success(message)
    elif type_ == "error":
        st.error(message)
    else:
        st.info(message)


def color_swatch(color: str) -> str:
    """Small colored square as inline HTML; empty when there is no color."""
    if not color:
        return ""
    return (
        f'<span style="display:inline-block;width:0.9em;height:0.9em;'
        f'background:{color};border-radius:2px;margin-right:0.4em"></span>'
    )
