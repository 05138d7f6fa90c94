"""Observable properties and collections that views subscribe to."""
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, Iterator, List, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class PropertyChanged:
    """Raised by an ObservableObject when one of its properties changes."""
    name: str
    value: Any


@dataclass(frozen=True)
class CollectionChanged:
    """Raised by an ObservableCollection after it was mutated.

    action is one of "add", "remove" or "reset". For "reset", items holds the
    full new contents.
    """
    action: str
    items: List[Any] = field(default_factory=list)


Subscriber = Callable[[Any], None]


class _Subscribable:
    """Keeps a list of callbacks and calls them in subscription order."""

    def __init__(self) -> None:
        self._subscribers: List[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a change callback.

        Returns:
            A function that removes the callback again
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, event: Any) -> None:
        for callback in list(self._subscribers):
            callback(event)


class ObservableObject(_Subscribable):
    """Base class for view-models with change-notifying properties."""

    def _set_property(self, name: str, value: Any) -> bool:
        """
        Store a property value and notify subscribers if it changed.

        Args:
            name: Public property name; stored as _name
            value: New value

        Returns:
            True if the value changed
        """
        attr = f"_{name}"
        if hasattr(self, attr) and getattr(self, attr) == value:
            return False
        setattr(self, attr, value)
        self._notify(PropertyChanged(name, value))
        return True


class ObservableCollection(_Subscribable, Generic[T]):
    """A list that notifies subscribers about every mutation."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        super().__init__()
        self._items: List[T] = list(items)

    def add(self, item: T) -> None:
        self._items.append(item)
        self._notify(CollectionChanged("add", [item]))

    def remove(self, item: T) -> bool:
        """Remove an item; returns False if it was not present."""
        try:
            self._items.remove(item)
        except ValueError:
            return False
        self._notify(CollectionChanged("remove", [item]))
        return True

    def clear(self) -> None:
        self.reset(())

    def reset(self, items: Iterable[T]) -> None:
        """Replace the whole contents with a single notification."""
        self._items = list(items)
        self._notify(CollectionChanged("reset", list(self._items)))

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return f"ObservableCollection({self._items!r})"
