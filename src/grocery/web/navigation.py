"""Streamlit implementations of the navigation and toast surfaces."""
from typing import Any, Dict, Optional
from urllib.parse import parse_qsl
import streamlit as st

from grocery.viewmodels.navigation import BACK_ROUTE


class StreamlitNavigator:
    """Keeps the current route in session state; the app renders from it."""

    async def go_to(self, route: str, params: Optional[Dict[str, Any]] = None) -> None:
        if route == BACK_ROUTE:
            st.session_state.route = None
            st.session_state.route_params = {}
            st.session_state.route_query = {}
            return

        path, _, query = route.partition("?")
        st.session_state.route = path
        st.session_state.route_params = dict(params or {})
        st.session_state.route_query = dict(parse_qsl(query))


class StreamlitNotifier:
    """Queues toasts so they survive a rerun."""

    async def show(self, message: str) -> None:
        if 'pending_toasts' not in st.session_state:
            st.session_state.pending_toasts = []
        st.session_state.pending_toasts.append(message)


def flush_toasts() -> None:
    """Show and clear every queued toast."""
    for message in st.session_state.get('pending_toasts', []):
        st.toast(message)
    st.session_state.pending_toasts = []
