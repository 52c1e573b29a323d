import threading
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class OnceCell(Generic[T]):
    """A value that is computed at most once and then shared.

    Concurrent first callers of `get_or_init` serialize on a lock; the first
    one runs the initializer, every other caller gets the stored value. After
    that, reads take no lock at all. If the initializer raises, nothing is
    stored and the next caller retries.
    """

    __slots__ = ("_value", "_initialized", "_lock")

    def __init__(self) -> None:
        self._value: Optional[T] = None
        self._initialized = False
        self._lock = threading.Lock()

    def get(self) -> Optional[T]:
        return self._value if self._initialized else None

    def get_or_init(self, init: Callable[[], T]) -> T:
        if self._initialized:
            return self._value  # type: ignore[return-value]
        with self._lock:
            if not self._initialized:
                self._value = init()
                self._initialized = True
        return self._value  # type: ignore[return-value]

    @property
    def initialized(self) -> bool:
        return self._initialized

    def __repr__(self) -> str:
        return f"{type(self).__name__}(initialized={self._initialized})"
