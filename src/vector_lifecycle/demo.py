"""Scripted walk through the lifecycle of :class:`Vector3D`.

Every scene builds its own dispatcher and trace observer, so scenes can run
alone and in any order. Lines are written through ``echo``.
"""

from typing import Callable, Iterable

from .core.events import EventDispatcher
from .core.operations import create_vector, normalize_in_place, transfer_ownership
from .core.ownership import Shared, Unique
from .core.vector import Vector3D

__all__ = ["TraceObserver", "SCENES", "run_scenes"]

Echo = Callable[[str], None]


def format_coords(x: float, y: float, z: float) -> str:
    return f"({x:g}, {y:g}, {z:g})"


class TraceObserver:
    """Writes one line per lifecycle event."""

    def __init__(self, echo: Echo) -> None:
        self.echo = echo

    def on_default_constructed(self, vector) -> None:
        self.echo("Vector3D default constructor")

    def on_constructed(self, vector, x: float, y: float, z: float) -> None:
        self.echo(f"Vector3D parameterized constructor {format_coords(x, y, z)}")

    def on_copy_constructed(self, vector, source) -> None:
        self.echo("Vector3D copy constructor")

    def on_copy_assigned(self, vector, source) -> None:
        self.echo("Vector3D copy assignment operator")

    def on_move_constructed(self, vector, source) -> None:
        self.echo("Vector3D move constructor")

    def on_move_assigned(self, vector, source) -> None:
        self.echo("Vector3D move assignment operator")

    def on_destroyed(self, coords: tuple[float, float, float] | None) -> None:
        if coords is None:
            self.echo("Vector3D destructor")
        else:
            self.echo(f"Vector3D destructor - coordinates: {format_coords(*coords)}")


def make_events(echo: Echo) -> EventDispatcher:
    events = EventDispatcher()
    events.register_observer(TraceObserver(echo))
    return events


def scene_construction(echo: Echo) -> None:
    events = make_events(echo)
    v1 = Vector3D(events=events)
    v2 = Vector3D(1.0, 2.0, 3.0, events=events)
    del v2, v1


def scene_copy(echo: Echo) -> None:
    events = make_events(echo)
    original = Vector3D(4.0, 5.0, 6.0, events=events)
    copy = Vector3D.copy_of(original)
    another_copy = Vector3D(events=events)
    another_copy.assign_copy(original)
    del another_copy, copy, original


def scene_move(echo: Echo) -> None:
    events = make_events(echo)
    source = Vector3D(7.0, 8.0, 9.0, events=events)
    moved = Vector3D.take(source)

    target = Vector3D(events=events)
    target.assign_move(Vector3D(10.0, 11.0, 12.0, events=events))
    del target, moved, source


def scene_unique(echo: Echo) -> None:
    events = make_events(echo)
    unique_vec = Unique(Vector3D(13.0, 14.0, 15.0, events=events))
    echo(f"Original vector: {unique_vec.get()}")

    new_owner = transfer_ownership(unique_vec)
    if new_owner:
        echo(f"After ownership transfer: {new_owner.get()}")

    if not unique_vec:
        echo("Original pointer is now null (ownership transferred)")
    del new_owner, unique_vec


def scene_shared(echo: Echo) -> None:
    events = make_events(echo)
    shared_vec = Shared(Vector3D(3.0, 4.0, 0.0, events=events))
    vector = shared_vec.get()
    echo(f"Original vector: {vector}, length: {vector.length():g}")
    del vector

    shared_vec2 = shared_vec.share()
    echo(f"Use count after copying: {shared_vec.use_count}")

    normalize_in_place(shared_vec)
    echo(f"Normalized vector: {shared_vec2.get()}")

    echo(f"Use count before scope end: {shared_vec.use_count}")
    shared_vec2.reset()
    shared_vec.reset()


def scene_factory(echo: Echo) -> None:
    events = make_events(echo)
    factory_vec = create_vector(20.0, 21.0, 22.0, events=events)
    echo(str(factory_vec.get()))
    del factory_vec


SCENES: list[tuple[str, Callable[[Echo], None]]] = [
    ("Creating objects", scene_construction),
    ("Copy testing", scene_copy),
    ("Movement testing", scene_move),
    ("Working with the unique_ptr", scene_unique),
    ("Working with shared_ptr", scene_shared),
    ("Factory method", scene_factory),
]


def run_scenes(echo: Echo = print, only: Iterable[int] | None = None) -> None:
    selected = set(only) if only else None
    echo("=== Demonstration of working with Vector3D ===")
    echo("")
    for number, (title, scene) in enumerate(SCENES, start=1):
        if selected is not None and number not in selected:
            continue
        echo(f"{number}. {title}:")
        scene(echo)
        echo("")
    echo("=== All tests are completed ===")
