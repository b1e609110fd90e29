from __future__ import annotations

import logging
import re
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from textedit.domain.interfaces import IAppConfig
from textedit.domain.models import HighlightTheme
from textedit.services.config.ini_config_service import IniConfigService
from textedit.utils.constants import DEFAULT_GRAMMAR, DEFAULT_LOG_LEVEL, DEFAULT_THEME

_VERSION_RE = re.compile(r"^v?(\d+\.\d+\.\d+)(?:[-+].*)?$", re.IGNORECASE)
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _project_root_fallback() -> Path:
    """
    Best-effort project root resolution that also works in PyInstaller:
      - PyInstaller onefile/onedir uses sys._MEIPASS as bundle root
      - dev mode uses this file location to walk upward
    """
    meipass = getattr(sys, "_MEIPASS", None)
    if meipass:
        return Path(meipass)

    # textedit/services/config/app_config.py -> parents[3] = repository root
    return Path(__file__).resolve().parents[3]


def _builtin_default_file() -> Path:
    """Placeholder document opened at startup when none is configured: our own app module."""
    return Path(__file__).resolve().parents[2] / "app.py"


def _read_version_file(version_path: Path) -> str | None:
    try:
        raw = version_path.read_text(encoding="utf-8").strip()
    except OSError:
        return None

    m = _VERSION_RE.match(raw)
    return m.group(1) if m else None


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Adapter over IniConfigService with typed editor settings.

    Precedence for version:
      1) <project_root>/version file (semantic e.g. v1.0.5)
      2) ini_config_service.app_version() (fallback)
      3) "0.0.0"
    """

    ini: IniConfigService
    project_root: Path

    def get_version(self) -> str:
        v = _read_version_file(self.project_root / "version")
        if v:
            return v

        v2 = (self.ini.app_version() or "").strip()
        if v2:
            m = _VERSION_RE.match(v2)
            return m.group(1) if m else v2

        return "0.0.0"

    # ---- editor settings ----

    def default_file(self) -> Path:
        raw = (self.ini.get("editor", "default_file", "") or "").strip()
        return Path(raw).expanduser() if raw else _builtin_default_file()

    def default_grammar(self) -> str:
        raw = (self.ini.get("editor", "default_grammar", "") or "").strip().lstrip(".")
        return raw or DEFAULT_GRAMMAR

    def initial_theme_name(self) -> str:
        return (self.ini.get("editor", "theme", "") or "").strip() or DEFAULT_THEME

    def initial_theme(self) -> HighlightTheme:
        try:
            return HighlightTheme.from_style(self.initial_theme_name())
        except ValueError:
            return HighlightTheme.from_style(DEFAULT_THEME)

    def log_level(self) -> str:
        raw = (self.ini.get("logging", "level", "") or "").strip().upper()
        return raw if raw in _LOG_LEVELS else DEFAULT_LOG_LEVEL

    # ---- delegate IniConfigService methods ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return self.ini.as_dict()

    def app_version(self) -> str:
        return self.ini.app_version()

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)


def configure_logging(config: IAppConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, config.log_level()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
