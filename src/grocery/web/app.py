"""Main Streamlit application for the grocery app."""
import asyncio
import uuid
import streamlit as st

from grocery.config.settings import get_settings
from grocery.db.session import get_session
from grocery.services.file_saver import LocalFileSaver
from grocery.services.item_service import ItemService
from grocery.services.list_service import ListService
from grocery.services.product_service import ProductService
from grocery.utils.logger import get_logger
from grocery.viewmodels import (
    ChangeColorViewModel,
    GroceryListItemsViewModel,
    ImmediateDispatcher,
)
from grocery.viewmodels.navigation import CHANGE_COLOR_ROUTE, GROCERY_LIST_PARAM
from grocery.web.components import (
    render_change_color,
    render_list_items,
    render_sidebar,
)
from grocery.web.navigation import StreamlitNavigator, StreamlitNotifier, flush_toasts

# Initialize logger
logger = get_logger(__name__)


def init_session_state() -> None:
    """Initialize session state variables."""
    settings = get_settings()

    if 'session_id' not in st.session_state:
        st.session_state.session_id = str(uuid.uuid4())
        logger.info("New session started", session_id=st.session_state.session_id)

    if 'db_session' not in st.session_state:
        st.session_state.db_session = get_session()

    if 'route' not in st.session_state:
        st.session_state.route = None
        st.session_state.route_params = {}
        st.session_state.route_query = {}

    if 'pending_toasts' not in st.session_state:
        st.session_state.pending_toasts = []

    if 'items_view_model' not in st.session_state:
        db_session = st.session_state.db_session
        client_id = settings.DEFAULT_CLIENT_ID
        # Each script run happens on the thread that renders, so UI work runs inline
        st.session_state.items_view_model = GroceryListItemsViewModel(
            item_service=ItemService(db_session, client_id),
            product_service=ProductService(db_session, client_id),
            file_saver=LocalFileSaver(settings.EXPORT_DIR),
            navigator=StreamlitNavigator(),
            notifier=StreamlitNotifier(),
            dispatcher=ImmediateDispatcher(),
        )


def get_change_color_view_model(list_service: ListService) -> ChangeColorViewModel:
    """Get the view-model for the open change-color screen, creating it on entry."""
    params = st.session_state.route_params
    view_model = st.session_state.get('change_color_view_model')
    if view_model is None or view_model.grocery_list is not params.get(GROCERY_LIST_PARAM):
        view_model = ChangeColorViewModel(
            list_service=list_service,
            navigator=StreamlitNavigator(),
            notifier=StreamlitNotifier(),
        )
        view_model.apply_query_attributes(params)
        st.session_state.change_color_view_model = view_model
    return view_model


async def main() -> None:
    """Main application entry point."""
    logger.info(
        "Starting grocery app",
        session_id=st.session_state.get('session_id', 'init')
    )

    try:
        st.set_page_config(
            layout="wide",
            page_title="Boodschappen",
            page_icon="🛒",
            initial_sidebar_state="expanded"
        )

        init_session_state()
        settings = get_settings()
        list_service = ListService(st.session_state.db_session, settings.DEFAULT_CLIENT_ID)
        items_view_model: GroceryListItemsViewModel = st.session_state.items_view_model

        if st.session_state.route == CHANGE_COLOR_ROUTE:
            view_model = get_change_color_view_model(list_service)
            if await render_change_color(view_model):
                st.session_state.change_color_view_model = None
                # Reload so the new name and color show up
                items_view_model.select_list(items_view_model.grocery_list)
                st.rerun()
            flush_toasts()
            return

        selected = render_sidebar(list_service, items_view_model.grocery_list.id)
        if selected is not None:
            logger.info(
                "Selected list changed",
                session_id=st.session_state.session_id,
                list_id=selected.id
            )
            items_view_model.select_list(selected)

        if items_view_model.is_loaded:
            await render_list_items(items_view_model)
        else:
            st.info("Kies een lijst in het menu")

        flush_toasts()

    except Exception:
        logger.exception(
            "Unhandled error in main application",
            session_id=st.session_state.get('session_id', 'error')
        )
        st.error("Er ging iets mis. Probeer het later opnieuw.")


if __name__ == "__main__":
    asyncio.run(main())
