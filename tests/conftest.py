"""Test configuration and fixtures for the grocery app."""
import pytest
from unittest.mock import AsyncMock
from sqlalchemy import create_engine, event, inspect
from sqlalchemy.orm import Session
import sqlite3

from grocery.config.settings import GrocerySettings
from grocery.models import Base, Client, GroceryList, Product, GroceryListItem
from grocery.services.item_service import ItemService
from grocery.services.list_service import ListService
from grocery.services.product_service import ProductService
from grocery.services.file_saver import LocalFileSaver
from grocery.viewmodels import GroceryListItemsViewModel, MainThreadDispatcher


@pytest.fixture(scope="session")
def engine():
    """Create a test database engine."""
    # Enable SQLite foreign keys
    def _fk_pragma_on_connect(dbapi_con, con_record):
        if isinstance(dbapi_con, sqlite3.Connection):
            dbapi_con.execute('PRAGMA foreign_keys=ON')

    # Create in-memory database
    test_engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False}
    )

    # Enable foreign key support
    event.listen(test_engine, 'connect', _fk_pragma_on_connect)

    return test_engine


@pytest.fixture(scope="session")
def tables(engine):
    """Create all database tables."""
    Base.metadata.create_all(engine)
    yield
    # Drop tables in reverse dependency order
    inspector = inspect(engine)
    table_names = inspector.get_table_names()
    for table in reversed(Base.metadata.sorted_tables):
        if table.name in table_names:
            table.drop(engine)


@pytest.fixture(scope="function")
def session(engine, tables):
    """Create a new database session for a test."""
    connection = engine.connect()
    transaction = connection.begin()
    session = Session(bind=connection)

    yield session

    session.close()
    # Only rollback if transaction is still active
    if transaction.is_active:
        transaction.rollback()
    connection.close()


@pytest.fixture
def settings(tmp_path) -> GrocerySettings:
    """Settings that keep logs and exports inside the test's temp dir."""
    return GrocerySettings(
        DB_URL="sqlite:///:memory:",
        LOG_FILE=tmp_path / "logs" / "grocery.log",
        EXPORT_DIR=tmp_path / "exports",
    )


@pytest.fixture
def client(session) -> Client:
    """Create a test client."""
    client = Client(name="Test", email="test@example.com")
    session.add(client)
    session.commit()
    session.refresh(client)
    return client


@pytest.fixture
def grocery_list(session, client) -> GroceryList:
    """Create a test grocery list."""
    list_ = GroceryList(
        name="Boodschappen",
        color="#FF0000",
        owner_id=client.id,
    )
    session.add(list_)
    session.commit()
    session.refresh(list_)
    return list_


@pytest.fixture
def products(session) -> list[Product]:
    """Create a small catalog where Eggs is sold out."""
    catalog = [
        Product(name="Milk", stock=3),
        Product(name="Eggs", stock=0),
        Product(name="Cheese", stock=1),
        Product(name="Buttermilk", stock=2),
    ]
    session.add_all(catalog)
    session.commit()
    for product in catalog:
        session.refresh(product)
    return catalog


@pytest.fixture
def list_item(session, grocery_list, products) -> GroceryListItem:
    """Put Cheese on the test list."""
    cheese = products[2]
    item = GroceryListItem(
        grocery_list_id=grocery_list.id,
        product_id=cheese.id,
        amount=1,
    )
    session.add(item)
    session.commit()
    session.refresh(item)
    return item


@pytest.fixture
def item_service(session, client):
    """Create an item service instance."""
    return ItemService(session, client.id)


@pytest.fixture
def product_service(session, client):
    """Create a product service instance."""
    return ProductService(session, client.id)


@pytest.fixture
def list_service(session, client):
    """Create a list service instance."""
    return ListService(session, client.id)


@pytest.fixture
def file_saver(settings):
    """Create a file saver writing to the temp export dir."""
    return LocalFileSaver(settings.EXPORT_DIR)


@pytest.fixture
def navigator():
    """Create a mock navigator."""
    mock = AsyncMock()
    mock.go_to = AsyncMock(return_value=None)
    return mock


@pytest.fixture
def notifier():
    """Create a mock toast notifier."""
    mock = AsyncMock()
    mock.show = AsyncMock(return_value=None)
    return mock


@pytest.fixture
def dispatcher():
    """Create a UI dispatcher owned by the test thread."""
    return MainThreadDispatcher()


@pytest.fixture
def make_view_model(item_service, product_service, file_saver, navigator, notifier, dispatcher, settings):
    """Factory for the grocery list items view-model with queued UI updates."""
    def _make(**overrides) -> GroceryListItemsViewModel:
        kwargs = dict(
            item_service=item_service,
            product_service=product_service,
            file_saver=file_saver,
            navigator=navigator,
            notifier=notifier,
            dispatcher=dispatcher,
            settings=settings,
        )
        kwargs.update(overrides)
        vm = GroceryListItemsViewModel(**kwargs)
        dispatcher.process_pending()
        return vm
    return _make


@pytest.fixture
def view_model(products, make_view_model):
    """Create the view-model over the test catalog."""
    return make_view_model()
