import logging
import threading
from typing import Callable, Generic, TypeVar

__all__ = ["OwnershipError", "Unique", "Shared", "make_unique", "make_shared"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OwnershipError(RuntimeError):
    """Raised when dereferencing a handle that owns nothing."""


class Unique(Generic[T]):
    """Exclusive ownership of a single value.

    Only one handle holds the value at a time; :meth:`move` passes it on and
    leaves this handle empty.
    """

    def __init__(self, value: T | None = None) -> None:
        self._value: T | None = value

    def __bool__(self) -> bool:
        return self._value is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.reset()
        return False

    def get(self) -> T:
        if self._value is None:
            raise OwnershipError("dereferencing empty unique handle")
        return self._value

    def move(self) -> "Unique[T]":
        logger.debug("moving unique ownership of %r", self._value)
        return type(self)(self.release())

    def release(self) -> T | None:
        value, self._value = self._value, None
        return value

    def reset(self, value: T | None = None) -> None:
        self._value = value


class _ControlBlock(Generic[T]):

    def __init__(self, value: T, on_release: Callable[[T], None] | None) -> None:
        self.value: T | None = value
        self.on_release = on_release
        self.count: int = 1
        self.lock = threading.Lock()


class Shared(Generic[T]):
    """Reference counted ownership of a single value.

    Every :meth:`share` adds a holder. The value is released when the last
    holder calls :meth:`reset` or is garbage collected.
    """

    def __init__(self, value: T | None = None, on_release: Callable[[T], None] | None = None) -> None:
        self._block: _ControlBlock[T] | None = None
        if value is not None:
            self._block = _ControlBlock(value, on_release)

    def __bool__(self) -> bool:
        return self._block is not None

    def __repr__(self) -> str:
        value = self._block.value if self._block else None
        return f"{type(self).__name__}({value!r}, use_count={self.use_count})"

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.reset()
        return False

    def __del__(self) -> None:
        if getattr(self, "_block", None) is not None:
            self.reset()

    @property
    def use_count(self) -> int:
        block = self._block
        if block is None:
            return 0
        with block.lock:
            return block.count

    def get(self) -> T:
        block = self._block
        if block is None or block.value is None:
            raise OwnershipError("dereferencing empty shared handle")
        return block.value

    def share(self) -> "Shared[T]":
        holder = type(self)()
        block = self._block
        if block is not None:
            with block.lock:
                block.count += 1
            holder._block = block
        return holder

    def reset(self) -> None:
        block, self._block = self._block, None
        if block is None:
            return
        with block.lock:
            block.count -= 1
            if block.count:
                return
            value, block.value = block.value, None
        logger.debug("last holder released %r", value)
        if block.on_release is not None:
            block.on_release(value)


def make_unique(factory: Callable[..., T], *args, **kwargs) -> Unique[T]:
    return Unique(factory(*args, **kwargs))


def make_shared(factory: Callable[..., T], *args, **kwargs) -> Shared[T]:
    return Shared(factory(*args, **kwargs))
