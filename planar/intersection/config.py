"""Segment relation configuration and robustness diagnostics."""

import os
import threading
from dataclasses import dataclass
from typing import Dict

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class IntersectionConfig:
    """Numeric and diagnostic switches for the segment relator."""

    # Compute floating determinants in numpy.longdouble
    promote_floats: bool = True

    # Also compute the floating ratio along the second segment
    check_ratio: bool = False

    # Include segment coordinates in fallback log records
    debug_robustness: bool = False

    @classmethod
    def from_env(cls) -> "IntersectionConfig":
        """Load configuration from environment variables."""
        return cls(
            promote_floats=_env_flag("PLANAR_PROMOTE_FLOATS", True),
            check_ratio=_env_flag("PLANAR_CHECK_RATIO", False),
            debug_robustness=_env_flag("PLANAR_DEBUG_ROBUSTNESS", False),
        )


class RobustnessCounters:
    """Thread-safe tally of numeric fallbacks taken by the relator."""

    NAMES = ("zero_determinant", "robust_collinear", "clamped_ratio")

    def __init__(self):
        self._counts: Dict[str, int] = {name: 0 for name in self.NAMES}
        self._lock = threading.Lock()

    def record(self, name: str) -> None:
        if name not in self._counts:
            raise ValueError(f"Unknown robustness counter: {name}")
        with self._lock:
            self._counts[name] += 1

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counts)

    def reset(self) -> None:
        with self._lock:
            for name in self._counts:
                self._counts[name] = 0
