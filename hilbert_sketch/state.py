"""Order/path state shared by the command line and the interactive window.

The controller owns the current order and the path generated for it. A new
path is built completely before it replaces the old one, so subscribers and
readers only ever observe a path that matches :attr:`CurveController.order`.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional

from .config import Settings, build_settings
from .curve import CurvePath, generate_path

PathListener = Callable[[CurvePath], None]


class CurveController:
    """Holds the selected order and regenerates the path when it changes."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        order: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.settings = settings or build_settings()
        self._logger = logger or logging.getLogger(__name__)
        self._listeners: List[PathListener] = []
        initial = self.settings.order if order is None else order
        self._path = self._build(self._clamp(initial))

    @property
    def order(self) -> int:
        return self._path.order

    @property
    def path(self) -> CurvePath:
        return self._path

    def subscribe(self, listener: PathListener) -> Callable[[], None]:
        """Register ``listener`` for path replacements; returns an unsubscribe hook."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_order(self, order: int) -> CurvePath:
        """Switch to ``order`` (clamped to the configured range).

        Regenerates and notifies listeners only when the order changes.
        """

        order = self._clamp(order)
        if order == self._path.order:
            return self._path
        self._path = self._build(order)
        for listener in list(self._listeners):
            listener(self._path)
        return self._path

    def _clamp(self, order: int) -> int:
        clamped = self.settings.clamp_order(order)
        if clamped != order:
            self._logger.warning(
                "Order %s outside [%d, %d], using %d",
                order,
                self.settings.min_order,
                self.settings.max_order,
                clamped,
            )
        return clamped

    def _build(self, order: int) -> CurvePath:
        start = time.perf_counter()
        path = generate_path(order)
        elapsed = time.perf_counter() - start
        self._logger.info(
            "Generated order %d curve: %d points in %.3fs", order, len(path), elapsed
        )
        return path


__all__ = ["CurveController", "PathListener"]
