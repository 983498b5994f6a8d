"""Recompute antenna direction whenever a location or heading sample arrives.

Location and compass providers push samples into a SampleStream at their
own pace. DirectionTracker listens to both and re-runs resolve_direction()
from scratch on every change. No caching, no coalescing. A sample that
cannot be used (out-of-range location) is logged and the last good result
is kept.
"""

import logging
from typing import Any, Callable

from .direction import DirectionResult, resolve_direction
from .geo_utils import as_coordinate, azimuth_to_heading

logger = logging.getLogger(__name__)


class SampleStream:
    """Latest-value stream with subscribers. A sample of None means 'no value'."""

    def __init__(self, initial: Any = None):
        self._value = initial
        self._listeners: list[Callable[[Any], None]] = []

    @property
    def latest(self) -> Any:
        return self._value

    def subscribe(self, listener: Callable[[Any], None]) -> Callable[[], None]:
        """Register listener; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, value: Any) -> None:
        self._value = value
        for listener in list(self._listeners):
            listener(value)


class DirectionTracker:
    """Keeps a DirectionResult current for a fixed or changing target.

    Args:
        location: SampleStream of my position ((lat, lon), GeoCoordinate or None)
        heading: SampleStream of compass azimuth in degrees (or None)
        target: Target position, or None until one is entered
    """

    def __init__(self, location: SampleStream, heading: SampleStream, target=None):
        self._location = location
        self._heading = heading
        self._target = as_coordinate(target) if target is not None else None
        self._listeners: list[Callable[[DirectionResult | None], None]] = []
        self._unsubscribe = [
            location.subscribe(lambda _: self._recompute()),
            heading.subscribe(lambda _: self._recompute()),
        ]
        self.result: DirectionResult | None = None
        self._recompute()

    @property
    def target(self):
        return self._target

    def set_target(self, target) -> None:
        """Change the target. None clears it (result becomes None)."""
        self._target = as_coordinate(target) if target is not None else None
        self._recompute()

    def on_change(self, listener: Callable[[DirectionResult | None], None]) -> None:
        self._listeners.append(listener)

    def close(self) -> None:
        """Stop listening to the sample streams."""
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self._unsubscribe = []

    def _recompute(self) -> None:
        heading = self._heading.latest
        if heading is not None:
            heading = azimuth_to_heading(heading)

        try:
            result = resolve_direction(self._location.latest, self._target, heading)
        except ValueError as e:
            # Bad sample: keep the last good result and don't notify
            logger.warning(f"Ignoring sample, direction not updated: {e}")
            return

        self.result = result
        logger.debug("Recomputed direction: %s", self.result)
        for listener in list(self._listeners):
            listener(self.result)
