"""Settings for the ``boxborder`` command line tool.

Settings come from a JSON file (``boxborder.json`` in the working directory
unless a path is given) and are then overridden by ``BOXBORDER_<FIELD>``
environment variables, e.g. ``BOXBORDER_FRAMES=9``.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .color import ColorPalette
from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "boxborder.json"
ENV_PREFIX = "BOXBORDER_"


@dataclass
class Settings:
    frames: int = 5
    precision: int = 2
    log_level: str = "WARNING"
    colours: Dict[str, str] = field(default_factory=dict)

    def palette(self) -> ColorPalette:
        palette = ColorPalette()
        for name, spec in self.colours.items():
            try:
                palette.define(name, palette.resolve(spec))
            except (KeyError, ValueError) as exc:
                raise ConfigError(f"colour '{name}': {exc}") from exc
        return palette

    def update(self, values: Mapping[str, Any]) -> None:
        known = {f.name for f in fields(self)}
        for key, value in values.items():
            if key not in known:
                logger.warning("ignoring unknown setting '%s'", key)
                continue
            setattr(self, key, value)
        if not isinstance(self.frames, int) or self.frames < 2:
            raise ConfigError(f"frames must be an integer >= 2, got {self.frames!r}")
        if not isinstance(self.precision, int) or self.precision < 0:
            raise ConfigError(f"precision must be a non-negative integer, got {self.precision!r}")
        if not isinstance(self.colours, dict):
            raise ConfigError("colours must map names to colour specs")


def load_settings(
    path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    settings = Settings()

    config_path = Path(path) if path is not None else Path.cwd() / CONFIG_FILENAME
    if config_path.is_file():
        logger.debug("loading settings from %s", config_path)
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigError(f"{config_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"{config_path}: expected a JSON object")
        settings.update(data)
    elif path is not None:
        raise ConfigError(f"settings file '{config_path}' not found")

    env = os.environ if environ is None else environ
    overrides = {
        key[len(ENV_PREFIX):].lower(): _parse_value(value)
        for key, value in env.items()
        if key.startswith(ENV_PREFIX)
    }
    if overrides:
        settings.update(overrides)
    return settings


def _parse_value(raw: str) -> Any:
    if not raw:
        return raw
    lowered = raw.lower()
    if lowered in ("true", "yes", "on"):
        return True
    if lowered in ("false", "no", "off"):
        return False
    try:
        if "." in raw:
            return float(raw)
        return int(raw)
    except ValueError:
        pass
    if (raw.startswith("\"") and raw.endswith("\"")) or (raw.startswith("'") and raw.endswith("'")):
        return raw[1:-1]
    return raw
