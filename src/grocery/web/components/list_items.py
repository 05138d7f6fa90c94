"""Grocery list items screen."""
import streamlit as st

from grocery.viewmodels import GroceryListItemsViewModel
from .feedback import color_swatch


async def render_list_items(view_model: GroceryListItemsViewModel) -> None:
    """
    Render the active list, the product search and the export button.

    Args:
        view_model: View-model of the screen
    """
    grocery_list = view_model.grocery_list
    st.markdown(
        f"## {color_swatch(grocery_list.color)}{grocery_list.name}",
        unsafe_allow_html=True
    )

    col1, col2 = st.columns(2)
    with col1:
        if st.button("🎨 Naam en kleur", key="change_color"):
            await view_model.change_color()
            st.rerun()
    with col2:
        if st.button("💾 Delen", key="share_list"):
            await view_model.share_grocery_list()

    st.subheader("Op de lijst")
    if not len(view_model.my_grocery_list_items):
        st.info("De lijst is leeg")
    for item in view_model.my_grocery_list_items:
        st.write(f"{item.product.name} × {item.amount}")

    st.subheader("Producten")
    query = st.text_input("Zoek product", value=view_model.search_text, key="product_search")
    if query != view_model.search_text:
        view_model.search_text = query

    if not len(view_model.available_products):
        st.info("Geen producten gevonden")
    for product in view_model.available_products:
        name_col, stock_col, add_col = st.columns([4, 2, 1])
        with name_col:
            st.write(product.name)
        with stock_col:
            st.caption(f"Voorraad: {product.stock}")
        with add_col:
            if st.button("➕", key=f"add_{product.id}", help="Toevoegen aan lijst"):
                view_model.add_product(product)
                st.rerun()
