import threading

import pytest

from vector_lifecycle.core.ownership import OwnershipError, Shared, Unique, make_shared, make_unique
from vector_lifecycle.core.vector import Vector3D


def test_unique_holds_value() -> None:
    v = Vector3D(1, 2, 3)
    handle = Unique(v)
    assert handle
    assert handle.get() is v


def test_empty_unique_raises_on_get() -> None:
    handle = Unique()
    assert not handle
    with pytest.raises(OwnershipError):
        handle.get()


def test_unique_move_empties_source() -> None:
    v = Vector3D(1, 2, 3)
    handle = Unique(v)

    new_owner = handle.move()

    assert not handle
    assert new_owner.get() is v


def test_unique_release_and_reset() -> None:
    v = Vector3D()
    handle = Unique(v)
    assert handle.release() is v
    assert not handle

    handle.reset(v)
    assert handle.get() is v
    handle.reset()
    assert not handle


def test_unique_context_manager_releases() -> None:
    with Unique(Vector3D()) as handle:
        assert handle
    assert not handle


def test_make_unique() -> None:
    handle = make_unique(Vector3D, 1, 2, 3)
    assert tuple(handle.get()) == (1.0, 2.0, 3.0)


def test_shared_use_count() -> None:
    first = Shared(Vector3D(3, 4, 0))
    assert first.use_count == 1

    second = first.share()
    assert first.use_count == 2
    assert second.use_count == 2
    assert second.get() is first.get()

    second.reset()
    assert first.use_count == 1
    assert second.use_count == 0
    assert not second


def test_shared_mutation_visible_through_all_holders() -> None:
    first = Shared(Vector3D(1, 2, 3))
    second = first.share()

    first.get().set_x(42)

    assert second.get().x == 42.0


def test_shared_last_holder_releases() -> None:
    released = []
    first = Shared(Vector3D(1, 2, 3), on_release=released.append)
    second = first.share()

    first.reset()
    assert released == []

    second.reset()
    assert len(released) == 1
    assert tuple(released[0]) == (1.0, 2.0, 3.0)


def test_shared_reset_is_idempotent() -> None:
    released = []
    first = Shared(Vector3D(), on_release=released.append)
    first.reset()
    first.reset()
    assert len(released) == 1


def test_shared_released_when_holder_collected() -> None:
    released = []
    first = Shared(Vector3D(), on_release=released.append)
    second = first.share()
    del first
    assert released == []
    del second
    assert len(released) == 1


def test_empty_shared() -> None:
    handle = Shared()
    assert not handle
    assert handle.use_count == 0
    assert not handle.share()
    with pytest.raises(OwnershipError):
        handle.get()


def test_shared_context_manager() -> None:
    released = []
    with Shared(Vector3D(), on_release=released.append) as handle:
        assert handle.use_count == 1
    assert len(released) == 1


def test_shared_count_across_threads() -> None:
    released = []
    root = Shared(Vector3D(), on_release=released.append)
    holders = [root.share() for _ in range(50)]

    threads = [threading.Thread(target=holder.reset) for holder in holders]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert root.use_count == 1
    assert released == []
    root.reset()
    assert len(released) == 1


def test_make_shared() -> None:
    handle = make_shared(Vector3D, 1, 2, 3)
    assert handle.use_count == 1
    assert tuple(handle.get()) == (1.0, 2.0, 3.0)
