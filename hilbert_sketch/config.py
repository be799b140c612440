"""Environment-backed settings for the curve viewer."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Dict, Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, int] = {
    "HILBERT_ORDER": 2,
    "HILBERT_MIN_ORDER": 1,
    "HILBERT_MAX_ORDER": 10,
    "HILBERT_CANVAS_SIZE": 400,
    "HILBERT_LINE_WIDTH": 1,
}


@dataclass(frozen=True)
class Settings:
    """Resolved viewer configuration."""

    order: int
    min_order: int
    max_order: int
    canvas_size: int
    line_width: int

    def clamp_order(self, order: int) -> int:
        return clamp_order(order, self.min_order, self.max_order)


def clamp_order(order: int, min_order: int, max_order: int) -> int:
    """Restrict ``order`` to ``[min_order, max_order]``."""
    return max(min_order, min(max_order, int(order)))


def _int_from_env(name: str, environ: Mapping[str, str]) -> int:
    raw = environ.get(name)
    if raw is None:
        return DEFAULTS[name]
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %d", name, raw, DEFAULTS[name])
        return DEFAULTS[name]


def build_settings(
    overrides: Optional[Dict[str, int]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Return :class:`Settings` from the environment merged with ``overrides``.

    ``overrides`` uses the same keys as :data:`DEFAULTS`; ``None`` values are
    ignored so argparse namespaces can be passed through directly.
    """

    env = os.environ if environ is None else environ
    params = {name: _int_from_env(name, env) for name in DEFAULTS}
    if overrides:
        params.update({k: int(v) for k, v in overrides.items() if v is not None})

    unknown = set(params) - set(DEFAULTS)
    if unknown:
        raise KeyError(f"Unknown settings: {sorted(unknown)}")

    min_order = params["HILBERT_MIN_ORDER"]
    max_order = params["HILBERT_MAX_ORDER"]
    if not 1 <= min_order <= max_order:
        raise ValueError(
            f"order range must satisfy 1 <= min <= max, got [{min_order}, {max_order}]"
        )
    if params["HILBERT_CANVAS_SIZE"] <= 0:
        raise ValueError("canvas size must be positive")
    if params["HILBERT_LINE_WIDTH"] <= 0:
        raise ValueError("line width must be positive")

    return Settings(
        order=clamp_order(params["HILBERT_ORDER"], min_order, max_order),
        min_order=min_order,
        max_order=max_order,
        canvas_size=params["HILBERT_CANVAS_SIZE"],
        line_width=params["HILBERT_LINE_WIDTH"],
    )


__all__ = ["DEFAULTS", "Settings", "build_settings", "clamp_order"]
