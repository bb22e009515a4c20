import logging

from .events import EventDispatcher
from .ownership import Shared, Unique
from .vector import Vector3D

__all__ = ["normalize_in_place", "create_vector", "transfer_ownership"]

logger = logging.getLogger(__name__)


def normalize_in_place(vec: Shared[Vector3D] | None) -> None:
    """Scale the shared vector to unit length, visible to all of its holders."""
    if not vec:
        logger.warning("Null pointer passed to normalize_in_place")
        return

    vector = vec.get()
    length = vector.length()
    if length > 0:
        vector.set_x(vector.x / length)
        vector.set_y(vector.y / length)
        vector.set_z(vector.z / length)
        logger.info("Normalized vector: %s", vector)


def create_vector(x: float, y: float, z: float, *, events: EventDispatcher | None = None) -> Unique[Vector3D]:
    return Unique(Vector3D(x, y, z, events=events))


def transfer_ownership(vec: Unique[Vector3D] | None) -> Unique[Vector3D]:
    """Take ownership from ``vec``, double its x coordinate and hand it back."""
    if vec is None:
        return Unique()
    owned = vec.move()
    if owned:
        vector = owned.get()
        vector.set_x(vector.x * 2)
    return owned
