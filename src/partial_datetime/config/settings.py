from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


def _env_positive_int(name: str) -> int | None:
    raw = str(os.getenv(name, "") or "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    return value if value > 0 else None


class LocaleEngineKind(str, Enum):
    NONE = "none"
    BABEL = "babel"


def _env_locale_engine(name: str, default: LocaleEngineKind) -> LocaleEngineKind:
    raw = str(os.getenv(name, "") or "").strip().lower()
    if raw == LocaleEngineKind.NONE.value:
        return LocaleEngineKind.NONE
    if raw == LocaleEngineKind.BABEL.value:
        return LocaleEngineKind.BABEL
    return default


@dataclass(frozen=True)
class Settings:
    default_lang: str
    locale_engine: LocaleEngineKind
    keep_era: bool
    cache_max_entries: int | None


def get_settings() -> Settings:
    return Settings(
        default_lang=os.getenv("PARTIAL_DATETIME_DEFAULT_LANG", "").strip(),
        locale_engine=_env_locale_engine(
            "PARTIAL_DATETIME_LOCALE_ENGINE", LocaleEngineKind.BABEL
        ),
        keep_era=_env_bool("PARTIAL_DATETIME_KEEP_ERA", False),
        cache_max_entries=_env_positive_int("PARTIAL_DATETIME_CACHE_MAX_ENTRIES"),
    )
