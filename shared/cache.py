"""
Cache invalidation signal for presentation detail paths.

The backend keeps no payload cache of its own: every read goes to the
database. Mutations that change what a presentation looks like call
:func:`invalidate_presentation`, which notifies subscribed listeners (an
HTTP cache purger, a websocket push, a test recorder) with the detail path
(``/presentations/<id>``) they should refetch.
"""

from collections.abc import Callable

from shared.utils import setup_logging

logger = setup_logging("cache")

InvalidationListener = Callable[[str], None]

_listeners: list[InvalidationListener] = []


def presentation_path(presentation_id: str) -> str:
    """Detail path owned by a presentation."""
    return f"/presentations/{presentation_id}"


def subscribe(listener: InvalidationListener) -> None:
    if listener not in _listeners:
        _listeners.append(listener)


def unsubscribe(listener: InvalidationListener) -> None:
    if listener in _listeners:
        _listeners.remove(listener)


def invalidate_presentation(presentation_id: str | None) -> str | None:
    """
    Signal that a presentation's detail path is stale.

    Args:
        presentation_id: Presentation whose visible state changed

    Returns:
        The invalidated path, or None when there was nothing to invalidate
    """
    if not presentation_id:
        return None
    path = presentation_path(presentation_id)
    logger.debug("Invalidated %s", path)
    for listener in list(_listeners):
        try:
            listener(path)
        except Exception as e:
            logger.warning(f"Invalidation listener failed for {path}: {e!s}")
    return path
