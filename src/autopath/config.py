"""Runtime settings read from the environment.

Entry points call :func:`dotenv.load_dotenv` first so a ``.env`` file in the
project root can provide these values.

``AUTOPATH_DEPLOY_DIR``   deploy directory holding ``pathplanner/*.path``
``AUTOPATH_RESOLUTION``   sampling resolution handed to the trajectory builder
"""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_DEPLOY_DIR = "deploy"
DEFAULT_RESOLUTION = 0.004


@dataclass(frozen=True)
class PlannerSettings:
    """Settings shared by the planner facade, the web app and scripts."""

    deploy_dir: str = DEFAULT_DEPLOY_DIR
    """Directory containing the ``pathplanner`` folder."""

    resolution: float = DEFAULT_RESOLUTION
    """Spline sampling step passed to the trajectory builder factory."""

    def __post_init__(self) -> None:
        if not math.isfinite(self.resolution) or self.resolution <= 0:
            raise ValueError(f"resolution must be a positive number, got {self.resolution!r}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> PlannerSettings:
        """Build settings from *environ* (defaults to :data:`os.environ`).

        Raises:
            ValueError: If ``AUTOPATH_RESOLUTION`` is not a positive number.
        """
        env = os.environ if environ is None else environ
        raw_resolution = env.get("AUTOPATH_RESOLUTION")
        try:
            resolution = float(raw_resolution) if raw_resolution else DEFAULT_RESOLUTION
        except ValueError as exc:
            raise ValueError(
                f"AUTOPATH_RESOLUTION must be a number, got {raw_resolution!r}"
            ) from exc
        return cls(
            deploy_dir=env.get("AUTOPATH_DEPLOY_DIR") or DEFAULT_DEPLOY_DIR,
            resolution=resolution,
        )
