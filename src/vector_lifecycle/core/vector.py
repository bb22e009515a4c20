import math

from .events import EventDispatcher

__all__ = ["MovedFromError", "Vector3D"]


class MovedFromError(RuntimeError):
    """Raised when writing to a vector whose storage was moved away."""


class Vector3D:
    """Three floating point coordinates owned by a single instance.

    ``Vector3D()`` is the zero vector, ``Vector3D(x, y, z)`` stores the values
    verbatim. Copies get their own storage; :meth:`take` hands the storage of
    another instance over and leaves that instance moved-from. A moved-from
    vector reads as zero and rejects writes until something is assigned to it.

    Lifecycle events are sent to ``events`` when a dispatcher is given.
    """

    def __init__(
        self,
        x: float | None = None,
        y: float | None = None,
        z: float | None = None,
        *,
        events: EventDispatcher | None = None,
    ) -> None:
        self._events: EventDispatcher | None = events
        coords = (x, y, z)
        if any(value is not None for value in coords):
            self._coords: list[float] | None = [0.0 if value is None else float(value) for value in coords]
            self._notify("constructed", self, *self._coords)
        else:
            self._coords = [0.0, 0.0, 0.0]
            self._notify("default_constructed", self)

    @classmethod
    def copy_of(cls, other: "Vector3D", *, events: EventDispatcher | None = None) -> "Vector3D":
        vector = cls.__new__(cls)
        vector._events = events if events is not None else other._events
        vector._coords = list(other)
        vector._notify("copy_constructed", vector, other)
        return vector

    @classmethod
    def take(cls, other: "Vector3D", *, events: EventDispatcher | None = None) -> "Vector3D":
        vector = cls.__new__(cls)
        vector._events = events if events is not None else other._events
        vector._coords = other._release_storage()
        vector._notify("move_constructed", vector, other)
        return vector

    def copy(self) -> "Vector3D":
        return type(self).copy_of(self)

    def __copy__(self) -> "Vector3D":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Vector3D":
        return self.copy()

    def assign_copy(self, other: "Vector3D") -> "Vector3D":
        if other is not self:
            self._coords = list(other)
        self._notify("copy_assigned", self, other)
        return self

    def assign_move(self, other: "Vector3D") -> "Vector3D":
        if other is not self:
            self._coords = other._release_storage()
        self._notify("move_assigned", self, other)
        return self

    def __del__(self) -> None:
        events = getattr(self, "_events", None)
        if events is not None:
            coords = getattr(self, "_coords", None)
            events.notify("destroyed", tuple(coords) if coords is not None else None)

    @property
    def is_moved_from(self) -> bool:
        return self._coords is None

    @property
    def x(self) -> float:
        return self._get(0)

    @x.setter
    def x(self, value: float) -> None:
        self._set(0, value)

    @property
    def y(self) -> float:
        return self._get(1)

    @y.setter
    def y(self, value: float) -> None:
        self._set(1, value)

    @property
    def z(self) -> float:
        return self._get(2)

    @z.setter
    def z(self, value: float) -> None:
        self._set(2, value)

    def set_x(self, value: float) -> None:
        self._set(0, value)

    def set_y(self, value: float) -> None:
        self._set(1, value)

    def set_z(self, value: float) -> None:
        self._set(2, value)

    def length(self) -> float:
        x, y, z = self
        return math.sqrt(x * x + y * y + z * z)

    def display(self) -> str:
        return "({:g}, {:g}, {:g})".format(*self)

    def __iter__(self):
        return iter([self.x, self.y, self.z])

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x!r}, {self.y!r}, {self.z!r})"

    def _get(self, index: int) -> float:
        if self._coords is None:
            return 0.0
        return self._coords[index]

    def _set(self, index: int, value: float) -> None:
        if self._coords is None:
            raise MovedFromError(f"cannot write to moved-from {type(self).__name__}")
        self._coords[index] = float(value)

    def _release_storage(self) -> list[float]:
        coords, self._coords = self._coords, None
        if coords is None:
            return [0.0, 0.0, 0.0]
        return coords

    def _notify(self, event: str, *args) -> None:
        if self._events is not None:
            self._events.notify(event, *args)
