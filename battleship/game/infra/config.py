"""Application configuration and env loading."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from battleship.game.ai.strategy import DEFAULT_TARGETING_ATTEMPTS
from battleship.game.core.fleet import DEFAULT_PLACEMENT_ATTEMPTS
from battleship.game.core.models import Difficulty, Rule


@dataclass(frozen=True, slots=True)
class GameSettings:
    """Game setup resolved from the environment."""

    rule: Rule = Rule.DEFAULT
    difficulty: Difficulty = Difficulty.EASY
    seed: int | None = None
    placement_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS
    targeting_attempts: int = DEFAULT_TARGETING_ATTEMPTS


def load_settings() -> GameSettings:
    """Build game settings from ``BATTLESHIP_*`` environment variables."""
    return GameSettings(
        rule=Rule.parse(os.getenv("BATTLESHIP_RULE", Rule.DEFAULT.value)),
        difficulty=Difficulty.parse(os.getenv("BATTLESHIP_DIFFICULTY", Difficulty.EASY.value)),
        seed=_optional_int_env("BATTLESHIP_SEED"),
        placement_attempts=_positive_int_env("BATTLESHIP_PLACEMENT_ATTEMPTS", DEFAULT_PLACEMENT_ATTEMPTS),
        targeting_attempts=_positive_int_env("BATTLESHIP_TARGETING_ATTEMPTS", DEFAULT_TARGETING_ATTEMPTS),
    )


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files with optional local overrides.

    Later files win. Default order:
    1) appdata/config/.env.app
    2) appdata/config/.env.app.local
    3) .env.app
    4) .env.app.local
    """
    to_load = (
        tuple(paths)
        if paths is not None
        else (
            "appdata/config/.env.app",
            "appdata/config/.env.app.local",
            ".env.app",
            ".env.app.local",
        )
    )
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def _optional_int_env(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got '{raw}'.") from exc


def _positive_int_env(name: str, default: int) -> int:
    value = _optional_int_env(name)
    if value is None:
        return default
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}.")
    return value


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, frozen exe dir, then project root."""
    candidate = Path(path)
    if candidate.exists():
        return candidate

    if getattr(sys, "frozen", False):
        executable = getattr(sys, "executable", "")
        if executable:
            frozen_dir_candidate = Path(executable).resolve().parent / path
            if frozen_dir_candidate.exists():
                return frozen_dir_candidate

    project_root = Path(__file__).resolve().parents[3]
    return project_root / path
