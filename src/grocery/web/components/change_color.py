"""Screen for renaming and recoloring a list."""
import streamlit as st

from grocery.viewmodels import ChangeColorViewModel

DEFAULT_PICKER_COLOR = "#000000"


async def render_change_color(view_model: ChangeColorViewModel) -> bool:
    """
    Render the rename/recolor form.

    Args:
        view_model: View-model of the screen

    Returns:
        True when the screen was left and the app should rerun
    """
    st.header(f"Lijst wijzigen: {view_model.grocery_list.name}")

    with st.form("change_color"):
        name = st.text_input("Naam", value=view_model.name)
        use_color = st.checkbox("Kleur gebruiken", value=bool(view_model.color))
        color = st.color_picker("Kleur", value=view_model.color or DEFAULT_PICKER_COLOR)

        col1, col2 = st.columns(2)
        with col1:
            submit = st.form_submit_button("Opslaan")
        with col2:
            cancel = st.form_submit_button("Annuleren")

    if cancel:
        await view_model.cancel()
        return True

    if submit:
        view_model.name = name
        view_model.color = color if use_color else ""
        result = await view_model.save()
        return result.success

    return False
