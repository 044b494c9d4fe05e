"""Observable cache over a key-value read."""

from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")


class ObservableCache(Generic[T]):
    """
    Memoized value with explicit invalidation and change notification.

    The loader runs on the first ``get`` after construction or after
    ``invalidate``. Writers call ``invalidate()`` followed by ``notify()``
    so subscribers re-read the fresh value.

    Example usage:
        >>> cache = ObservableCache(lambda: store.get("key"))
        >>> unsubscribe = cache.subscribe(lambda: print("changed"))
        >>> cache.invalidate(); cache.notify()
        changed
    """

    def __init__(self, loader: Callable[[], T]) -> None:
        self._loader = loader
        self._value: Optional[T] = None
        self._loaded = False
        self._subscribers: List[Callable[[], None]] = []

    def get(self) -> T:
        if not self._loaded:
            self._value = self._loader()
            self._loaded = True
        return self._value  # type: ignore[return-value]

    def prime(self, value: T) -> None:
        """Memoize ``value`` without running the loader."""
        self._value = value
        self._loaded = True

    def invalidate(self) -> None:
        self._loaded = False
        self._value = None

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register a change callback and return a function that removes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def notify(self) -> None:
        for callback in list(self._subscribers):
            callback()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)
