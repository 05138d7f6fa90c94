"""Tests for the grocery list items view-model."""
import json
import threading
import pytest
from unittest.mock import AsyncMock, Mock

from grocery.domain.errors import ExportCancelled
from grocery.models import GroceryListItem, Product
from grocery.viewmodels import CollectionChanged, PropertyChanged


def names(products):
    return [p.name for p in products]


@pytest.fixture
def loaded(view_model, dispatcher, grocery_list, list_item):
    """View-model showing the test list, which already holds Cheese."""
    view_model.select_list(grocery_list)
    dispatcher.process_pending()
    return view_model


def test_starts_unloaded(view_model):
    """Test that a new view-model shows the placeholder list."""
    assert not view_model.is_loaded
    assert view_model.grocery_list.id == 0
    assert view_model.grocery_list.name == "None"
    assert len(view_model.my_grocery_list_items) == 0
    assert names(view_model.available_products) == ["Milk", "Cheese", "Buttermilk"]


def test_select_list_builds_available_set(loaded, list_item):
    """Test that sold out products and products on the list are left out."""
    assert loaded.is_loaded
    assert list(loaded.my_grocery_list_items) == [list_item]
    assert names(loaded.all_available_products) == ["Milk", "Buttermilk"]
    assert names(loaded.available_products) == ["Milk", "Buttermilk"]


def test_grocery_list_setter_selects(view_model, dispatcher, grocery_list, list_item):
    """Test that assigning grocery_list reloads like select_list."""
    events = []
    view_model.subscribe(events.append)

    view_model.grocery_list = grocery_list
    dispatcher.process_pending()

    assert PropertyChanged("grocery_list", grocery_list) in events
    assert list(view_model.my_grocery_list_items) == [list_item]


def test_reselect_reloads(loaded, dispatcher, grocery_list, item_service, products):
    """Test that selecting the same list again picks up outside changes."""
    buttermilk = products[3]
    item_service.add(GroceryListItem(
        grocery_list_id=grocery_list.id,
        product_id=buttermilk.id,
        amount=1,
    ))

    loaded.select_list(grocery_list)
    dispatcher.process_pending()

    assert len(loaded.my_grocery_list_items) == 2
    assert names(loaded.available_products) == ["Milk"]


def test_select_none_rejected(view_model):
    """Test that a list is required."""
    with pytest.raises(ValueError):
        view_model.select_list(None)


def test_select_list_propagates_service_errors(make_view_model, grocery_list):
    """Test that load failures are not caught."""
    failing = Mock()
    failing.get_all_on_grocery_list_id.return_value = []
    vm = make_view_model(item_service=failing)
    failing.get_all_on_grocery_list_id.side_effect = RuntimeError("database gone")

    with pytest.raises(RuntimeError, match="database gone"):
        vm.select_list(grocery_list)


@pytest.mark.parametrize(
    "query, expected",
    [
        ("", ["Milk", "Buttermilk"]),
        ("   ", ["Milk", "Buttermilk"]),
        (None, ["Milk", "Buttermilk"]),
        ("milk", ["Milk", "Buttermilk"]),
        ("MILK", ["Milk", "Buttermilk"]),
        ("  butter ", ["Buttermilk"]),
        ("ilk", ["Milk", "Buttermilk"]),
        ("cheese", []),
        ("egg", []),
    ]
)
def test_filter_products(loaded, query, expected):
    """Test case-insensitive substring filtering over the available set."""
    assert names(loaded.filter_products(query)) == expected


def test_filter_products_changes_nothing(loaded, dispatcher):
    """Test that filtering leaves the displayed products alone."""
    before = list(loaded.available_products)

    loaded.filter_products("butter")
    loaded.filter_products("butter")

    assert dispatcher.pending == 0
    assert list(loaded.available_products) == before


def test_search(loaded, dispatcher):
    """Test that search updates the displayed products on the UI thread."""
    loaded.search("butter")
    assert names(loaded.available_products) == ["Milk", "Buttermilk"]

    dispatcher.process_pending()
    assert names(loaded.available_products) == ["Buttermilk"]

    loaded.search("")
    dispatcher.process_pending()
    assert names(loaded.available_products) == ["Milk", "Buttermilk"]


def test_search_text_filters(loaded, dispatcher):
    """Test that changing search_text filters and search(None) reuses it."""
    loaded.search_text = "BUTTER"
    dispatcher.process_pending()
    assert names(loaded.available_products) == ["Buttermilk"]

    loaded.search("")
    dispatcher.process_pending()
    loaded.search()
    dispatcher.process_pending()
    assert names(loaded.available_products) == ["Buttermilk"]


def test_search_text_survives_reload(loaded, dispatcher, grocery_list):
    """Test that a reload keeps applying the search text."""
    loaded.search_text = "butter"
    loaded.select_list(grocery_list)
    dispatcher.process_pending()
    assert names(loaded.available_products) == ["Buttermilk"]


def test_add_product(loaded, dispatcher, grocery_list, products, item_service):
    """Test adding a product to the list."""
    milk = products[0]

    loaded.add_product(milk)
    dispatcher.process_pending()

    items = item_service.get_all_on_grocery_list_id(grocery_list.id)
    assert len(items) == 2
    added = items[-1]
    assert added.product_id == milk.id
    assert added.amount == 1
    assert milk.stock == 2
    assert len(loaded.my_grocery_list_items) == 2
    assert milk not in loaded.all_available_products
    assert milk not in loaded.available_products


def test_added_product_stays_out_of_search(loaded, dispatcher, products):
    """Test that searching again never brings the added product back."""
    milk = products[0]
    loaded.search_text = "milk"
    dispatcher.process_pending()

    loaded.add_product(milk)
    dispatcher.process_pending()
    assert names(loaded.available_products) == ["Buttermilk"]

    loaded.search("milk")
    dispatcher.process_pending()
    assert names(loaded.available_products) == ["Buttermilk"]


def test_add_product_waits_for_ui_thread(loaded, dispatcher, products):
    """Test that displayed collections change only when the UI thread runs."""
    milk = products[0]

    loaded.add_product(milk)

    assert dispatcher.pending > 0
    assert milk in loaded.available_products
    assert milk not in loaded.all_available_products

    dispatcher.process_pending()
    assert milk not in loaded.available_products


def test_added_product_never_reappears(loaded, dispatcher, products):
    """Test that no intermediate display state shows the added product."""
    milk = products[0]
    snapshots = []
    loaded.available_products.subscribe(
        lambda event: snapshots.append(list(loaded.available_products))
    )

    loaded.add_product(milk)
    dispatcher.process_pending()

    assert snapshots
    assert all(milk not in snapshot for snapshot in snapshots)


def test_add_last_unit(loaded, dispatcher, products, grocery_list, make_view_model):
    """Test that a product added with its last unit is sold out afterwards."""
    buttermilk = products[3]
    buttermilk.stock = 1

    loaded.add_product(buttermilk)
    dispatcher.process_pending()
    assert buttermilk.stock == 0

    other = make_view_model()
    assert buttermilk not in other.available_products


@pytest.mark.parametrize("index", [1, 2])
def test_add_unavailable_product_is_noop(loaded, dispatcher, grocery_list, products, item_service, index):
    """Test that sold out products and products already on the list are ignored."""
    product = products[index]
    stock = product.stock

    loaded.add_product(product)

    assert dispatcher.pending == 0
    assert product.stock == stock
    assert len(item_service.get_all_on_grocery_list_id(grocery_list.id)) == 1
    assert names(loaded.all_available_products) == ["Milk", "Buttermilk"]


def test_add_none_is_noop(loaded, dispatcher, grocery_list, item_service):
    """Test that adding nothing changes nothing."""
    loaded.add_product(None)

    assert dispatcher.pending == 0
    assert len(item_service.get_all_on_grocery_list_id(grocery_list.id)) == 1
    assert names(loaded.all_available_products) == ["Milk", "Buttermilk"]


def test_select_list_from_worker_thread(loaded, dispatcher, grocery_list, item_service, products):
    """Test that a load on another thread only touches collections through the UI queue."""
    item_service.add(GroceryListItem(
        grocery_list_id=grocery_list.id,
        product_id=products[0].id,
        amount=1,
    ))
    events = []
    loaded.available_products.subscribe(lambda event: events.append(threading.current_thread()))

    worker = threading.Thread(target=loaded.select_list, args=(grocery_list,))
    worker.start()
    worker.join()

    assert events == []
    dispatcher.process_pending()
    assert events == [threading.current_thread()]
    assert names(loaded.available_products) == ["Buttermilk"]


def test_milk_and_eggs_walkthrough(session, make_view_model, dispatcher, grocery_list, item_service):
    """Test the walkthrough with a two-product catalog and an empty list."""
    milk = Product(name="Milk", stock=3)
    eggs = Product(name="Eggs", stock=0)
    session.add_all([milk, eggs])
    session.commit()

    vm = make_view_model()
    vm.select_list(grocery_list)
    dispatcher.process_pending()
    assert list(vm.available_products) == [milk]

    vm.search("egg")
    dispatcher.process_pending()
    assert list(vm.available_products) == []

    vm.search("")
    dispatcher.process_pending()
    vm.add_product(milk)
    dispatcher.process_pending()

    items = item_service.get_all_on_grocery_list_id(grocery_list.id)
    assert [item.product_id for item in items] == [milk.id]
    assert milk.stock == 2
    assert vm.all_available_products == []
    assert list(vm.available_products) == []


@pytest.mark.asyncio
async def test_change_color(loaded, navigator, grocery_list):
    """Test navigating to the rename/recolor screen."""
    await loaded.change_color()

    navigator.go_to.assert_awaited_once_with(
        "ChangeColorView?Name=Boodschappen",
        {"GroceryList": grocery_list},
    )


@pytest.mark.asyncio
async def test_change_color_quotes_name(loaded, navigator, list_service, grocery_list):
    """Test that the list name is URL-encoded in the route."""
    list_service.update_list(grocery_list.id, "Eten & drinken")

    await loaded.change_color()

    route = navigator.go_to.await_args.args[0]
    assert route == "ChangeColorView?Name=Eten+%26+drinken"


@pytest.mark.asyncio
async def test_share_grocery_list(loaded, notifier, settings, grocery_list, list_item):
    """Test exporting the list to JSON."""
    await loaded.share_grocery_list()

    path = settings.EXPORT_DIR / "Boodschappen.json"
    assert json.loads(path.read_text(encoding="utf-8")) == [
        {
            "Id": list_item.id,
            "GroceryListId": grocery_list.id,
            "ProductId": list_item.product_id,
            "Amount": 1,
        }
    ]
    notifier.show.assert_awaited_once_with("Boodschappenlijst is opgeslagen.")
    assert loaded.my_message == "Boodschappenlijst is opgeslagen."


@pytest.mark.asyncio
async def test_share_empty_list(view_model, notifier, settings):
    """Test that an empty list exports an empty array."""
    await view_model.share_grocery_list()

    path = settings.EXPORT_DIR / "Boodschappen.json"
    assert json.loads(path.read_text(encoding="utf-8")) == []
    notifier.show.assert_awaited_once()


@pytest.mark.asyncio
async def test_share_failure_shows_message(make_view_model, products, notifier):
    """Test that a failed save is reported and not raised."""
    saver = Mock()
    saver.save_file = AsyncMock(side_effect=OSError("schijf vol"))
    vm = make_view_model(file_saver=saver)

    await vm.share_grocery_list()

    notifier.show.assert_awaited_once_with("Opslaan mislukt: schijf vol")
    assert "schijf vol" in vm.my_message


@pytest.mark.asyncio
async def test_share_failure_with_broken_notifier(make_view_model, products, notifier):
    """Test that even a failing toast does not escape the export."""
    saver = Mock()
    saver.save_file = AsyncMock(side_effect=OSError("schijf vol"))
    notifier.show.side_effect = RuntimeError("no UI")
    vm = make_view_model(file_saver=saver)

    await vm.share_grocery_list()

    notifier.show.assert_awaited_once()


@pytest.mark.asyncio
async def test_share_cancelled(loaded, notifier, settings):
    """Test that a cancelled export shows no toast and writes no file."""
    cancel = threading.Event()
    cancel.set()

    await loaded.share_grocery_list(cancel)

    notifier.show.assert_not_awaited()
    assert not (settings.EXPORT_DIR / "Boodschappen.json").exists()


@pytest.mark.asyncio
async def test_share_passes_cancel_event(make_view_model, products, notifier, settings):
    """Test that the cancel event reaches the file saver."""
    saver = Mock()
    saver.save_file = AsyncMock(side_effect=ExportCancelled("geannuleerd"))
    vm = make_view_model(file_saver=saver)
    cancel = threading.Event()

    await vm.share_grocery_list(cancel)

    saver.save_file.assert_awaited_once_with(settings.EXPORT_FILENAME, "[]", cancel)
    notifier.show.assert_not_awaited()


@pytest.mark.asyncio
async def test_share_unsaved_item_shows_message(make_view_model, products, notifier, settings):
    """Test that an item that cannot be serialized is reported and not raised."""
    items = Mock()
    items.get_all_on_grocery_list_id.return_value = [
        GroceryListItem(grocery_list_id=1, product_id=1, amount=1)
    ]
    vm = make_view_model(item_service=items)

    await vm.share_grocery_list()

    notifier.show.assert_awaited_once()
    assert vm.my_message.startswith(settings.EXPORT_FAILURE_PREFIX)
    assert not (settings.EXPORT_DIR / settings.EXPORT_FILENAME).exists()


def test_add_product_without_list_is_noop(view_model, dispatcher, products, item_service):
    """Test that nothing is added while no list is selected."""
    milk = products[0]

    view_model.add_product(milk)
    dispatcher.process_pending()

    assert milk.stock == 3
    assert item_service.get_all_on_grocery_list_id(0) == []
    assert "Milk" in names(view_model.available_products)
