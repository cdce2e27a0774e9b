"""
Layered configuration for iniscan.

Each layer is a TOML document with optional ``[parse]`` and ``[ui]`` tables.
Layers are applied in order, later ones winning key by key:

1. model defaults (ParseConfig / UIConfig)
2. the machine-wide file (first of CONFIG_HOME_CANDIDATES that exists)
3. the nearest ``.iniscan/config.toml`` at or above the parsed file's directory
4. command line overrides
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from iniscan.core.errors import ConfigError
from iniscan.core.models import ParseConfig, UIConfig

# Python 3.11+ has tomllib; for 3.9/3.10 use tomli
try:
    import tomllib  # type: ignore
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore

logger = logging.getLogger(__name__)

REPO_CONFIG = Path(".iniscan") / "config.toml"

CONFIG_HOME_CANDIDATES = (
    "~/.config/iniscan/config.toml",
    "~/.iniscan/config.toml",
)

Table = Dict[str, Any]


def find_global_config() -> Optional[Path]:
    candidates = (Path(c).expanduser() for c in CONFIG_HOME_CANDIDATES)
    return next((p for p in candidates if p.is_file()), None)


def find_repo_config(start_dir: Path) -> Optional[Path]:
    """Nearest ``.iniscan/config.toml`` in ``start_dir`` or any of its parents."""
    here = start_dir.resolve()
    for directory in (here, *here.parents):
        candidate = directory / REPO_CONFIG
        if candidate.is_file():
            return candidate
    return None


def _load_layer(path: Path) -> Table:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except OSError as e:
        raise ConfigError(f"Unable to read config {path}: {e.strerror or e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def _overlay(lower: Table, upper: Table) -> Table:
    """Recursively apply ``upper`` on top of ``lower``; non-table values replace outright."""
    merged = dict(lower)
    for key, value in upper.items():
        below = merged.get(key)
        merged[key] = _overlay(below, value) if isinstance(below, dict) and isinstance(value, dict) else value
    return merged


def _table(document: Table, name: str) -> Table:
    value = document.get(name)
    return value if isinstance(value, dict) else {}


@dataclass(frozen=True)
class LoadedConfig:
    config: ParseConfig
    ui_config: UIConfig
    global_path: Optional[Path] = None
    repo_path: Optional[Path] = None
    layers: List[Path] = field(default_factory=list)


def load_config(
    start_dir: Path,
    cli_overrides: Optional[Table] = None,
) -> LoadedConfig:
    """
    Resolve the effective config for files under ``start_dir``.

    Raises ConfigError when a config file is unreadable, is not valid TOML,
    or holds values the models reject.
    """
    global_path = find_global_config()
    repo_path = find_repo_config(start_dir)

    sources: List[Tuple[Path, Table]] = [
        (p, _load_layer(p)) for p in (global_path, repo_path) if p is not None
    ]

    document: Table = {}
    for path, layer in sources:
        logger.debug("Applying config layer %s", path)
        document = _overlay(document, layer)
    document = _overlay(document, cli_overrides or {})

    try:
        parse_cfg = ParseConfig.model_validate(_table(document, "parse"))
        ui_cfg = UIConfig.model_validate(_table(document, "ui"))
    except ValidationError as e:
        origin = ", ".join(str(p) for p, _ in sources) or "command line"
        raise ConfigError(f"Invalid configuration ({origin}): {e}") from e

    return LoadedConfig(
        config=parse_cfg,
        ui_config=ui_cfg,
        global_path=global_path,
        repo_path=repo_path,
        layers=[p for p, _ in sources],
    )
