import logging

__all__ = ["EventDispatcher"]

logger = logging.getLogger(__name__)


class EventDispatcher:
    """Forwards lifecycle events to registered observers.

    An event ``name`` is delivered to ``observer.on_<name>(*args, **kwargs)``.
    Observers without a matching hook are skipped.
    """

    def __init__(self) -> None:
        self._observers: list[object] = []

    @property
    def observers(self) -> list[object]:
        return list(self._observers)

    def register_observer(self, observer: object) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unregister_observer(self, observer: object) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, event: str, *args, **kwargs) -> None:
        name = f"on_{event}"
        for observer in list(self._observers):
            handler = getattr(observer, name, None)
            if handler is None:
                continue
            if not callable(handler):
                logger.warning("skipping non-callable hook %r of %r", name, observer)
                continue
            try:
                handler(*args, **kwargs)
            except Exception as exc:
                logger.exception(exc)
