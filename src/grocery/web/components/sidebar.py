"""Sidebar component for list navigation."""
from typing import Optional
import streamlit as st

from grocery.models import GroceryList
from grocery.services.list_service import ListService
from .feedback import render_feedback, color_swatch


def render_sidebar(list_service: ListService, current_list_id: int) -> Optional[GroceryList]:
    """
    Render the sidebar with the client's lists.

    Args:
        list_service: Service for managing lists
        current_list_id: ID of the list shown now

    Returns:
        The list the user picked, None if nothing was clicked
    """
    with st.sidebar:
        st.title("🛒 Boodschappen")

        with st.expander("Nieuwe lijst", expanded=False):
            with st.form("create_list", clear_on_submit=True):
                name = st.text_input("Naam", key="new_list_name")
                submit = st.form_submit_button("Maken")

                if submit and name:
                    result = list_service.create_list(name)
                    if result.success:
                        render_feedback(f"Lijst '{name}' is gemaakt", type_="success")
                        st.rerun()
                    else:
                        render_feedback(result.error, type_="error")

        st.divider()
        st.subheader("Mijn lijsten")

        summaries = list_service.list_summaries()
        if not summaries:
            st.info("Nog geen lijsten")
            return None

        selected = None
        for summary in summaries:
            col1, col2 = st.columns([1, 8])
            with col1:
                st.markdown(color_swatch(summary.color), unsafe_allow_html=True)
            with col2:
                marker = "▶ " if summary.id == current_list_id else ""
                if st.button(
                    f"{marker}{summary.name} ({summary.item_count})",
                    key=f"list_{summary.id}"
                ):
                    selected = list_service.get(summary.id)

        return selected
