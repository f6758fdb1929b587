from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .exceptions import FloorConfigError
from .floor import DEFAULT_MAX_ATTEMPTS, Floor, validate_floor_request
from .geometry import MAX_DIST_FROM_START
from .rng import RandomSource

logger = logging.getLogger(__name__)


def _as_optional_int(value: str) -> Optional[int]:
    if value.strip().lower() in ("none", "null", ""):
        return None
    return int(value)


ENV_OVERRIDES = {
    "ROOMGRID_ROOMS": ("rooms", int),
    "ROOMGRID_MAX_DISTANCE": ("max_distance", int),
    "ROOMGRID_MAX_ATTEMPTS": ("max_attempts", _as_optional_int),
    "ROOMGRID_SEED": ("seed", _as_optional_int),
}


@dataclass
class FloorSettings:
    """Floor generation settings.

    - rooms: target room count (>= 3)
    - max_distance: grid half-extent on each axis around the starting room
    - max_attempts: growth attempts before giving up; None retries forever
    - seed: seed for reproducible floors; None draws from system randomness
    """

    rooms: int = 8
    max_distance: int = MAX_DIST_FROM_START
    max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS
    seed: Optional[int] = None

    def validate(self) -> None:
        """Raise FloorConfigError if these settings cannot produce a floor."""
        try:
            validate_floor_request(self.rooms, self.max_distance, self.max_attempts)
        except TypeError as exc:
            raise FloorConfigError(str(exc)) from exc
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise FloorConfigError(f"seed must be an integer or null, got {self.seed!r}")

    def build_floor(self, rng: Optional[RandomSource] = None) -> Floor:
        self.validate()
        return Floor(
            self.rooms,
            max_distance=self.max_distance,
            max_attempts=self.max_attempts,
            rng=rng if rng is not None else RandomSource(self.seed),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"floor": dataclasses.asdict(self)}

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        with path.open("r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise FloorConfigError(f"Malformed settings file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise FloorConfigError(f"Settings file {path} must contain a mapping")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def _from_dict(cls, data: dict) -> "FloorSettings":
        section = data.get("floor", {}) or {}
        if not isinstance(section, dict):
            raise FloorConfigError("'floor' settings must be a mapping")
        allowed = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(section) - allowed)
        if unknown:
            logger.warning("Ignoring unknown floor settings: %s", ", ".join(unknown))
        settings = cls(**{k: v for k, v in section.items() if k in allowed})
        settings.validate()
        return settings

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        """Collect overrides from ROOMGRID_* environment variables."""
        env = os.environ if env is None else env
        out: Dict[str, Any] = {}
        for env_key, (field_name, caster) in ENV_OVERRIDES.items():
            if env_key in env and env[env_key] != "":
                try:
                    out[field_name] = caster(env[env_key])
                except ValueError as exc:
                    logger.error("Invalid env for %s=%r: %s", env_key, env[env_key], exc)
        return out

    @classmethod
    def load(
        cls,
        user_path: Optional[Path] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> "FloorSettings":
        """Load settings from built-in defaults, an optional user file and the environment.

        Precedence, lowest first: packaged defaults, user YAML file, ROOMGRID_* variables.
        """
        try:
            with resources.files("roomgrid.data").joinpath("default_settings.yaml").open("r", encoding="utf-8") as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = cls().to_dict()

        user_data: dict = {}
        if user_path is not None:
            if not user_path.exists():
                raise FileNotFoundError(f"Settings file not found: {user_path}")
            user_data = cls._load_yaml(user_path)
            logger.info("Loaded user settings from %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        env_overrides = cls.from_env(env)
        if env_overrides:
            logger.debug("Applying environment overrides: %s", env_overrides)
            merged = cls._deep_merge(merged, {"floor": env_overrides})
        settings = cls._from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(self.to_dict(), f, sort_keys=False)
        logger.info("Saved settings to %s", path)


__all__ = ["ENV_OVERRIDES", "FloorSettings"]
