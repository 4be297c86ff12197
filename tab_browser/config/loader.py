from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from tab_browser.core.exceptions import ConfigError

from .model import CHART_TYPES, AppConfig

logger = logging.getLogger(__name__)

HISTORY_DEPTH_ENV = "TAB_BROWSER_HISTORY_DEPTH"


def _parse_history_depth(raw: Any) -> Optional[int]:
    if raw is None or (isinstance(raw, str) and raw.strip().lower() in ("", "none", "unbounded")):
        return None
    try:
        depth = int(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"history_depth must be an integer or null, got {raw!r}") from None
    if depth < 1:
        raise ConfigError(f"history_depth must be >= 1, got {depth}")
    return depth


def _parse_max_bins(raw: Any) -> int:
    try:
        bins = int(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"histogram_max_bins must be an integer, got {raw!r}") from None
    if bins < 1:
        raise ConfigError(f"histogram_max_bins must be >= 1, got {bins}")
    return bins


def load_app_config(root: Path | str) -> AppConfig:
    """
    Load application settings from `root/global.json`.

    Keys (all optional):

    - ui_title: defaults to 'Tabular Browser'
    - history_depth: null for unbounded undo/redo, else an int >= 1.
                     The TAB_BROWSER_HISTORY_DEPTH env var overrides the file.
    - default_chart: one of scatter / line / bar / histogram
    - histogram_max_bins: defaults to 50
    - data_root: default directory for data files. If relative, it is
                 resolved relative to 'root'.

    :param root: Directory containing 'global.json'.
    :return: An AppConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if a value is out of range or of the wrong type.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open() as f:
        raw: Dict[str, Any] = json.load(f)

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    history_raw = os.getenv(HISTORY_DEPTH_ENV, raw.get("history_depth"))
    history_depth = _parse_history_depth(history_raw)

    default_chart = str(raw.get("default_chart", "scatter")).lower()
    if default_chart not in CHART_TYPES:
        raise ConfigError(
            f"default_chart must be one of {list(CHART_TYPES)}, got {default_chart!r}"
        )

    # Resolve data_root:
    # - Absolute paths are used as-is.
    # - Relative paths are resolved relative to the config root directory.
    data_root_raw = raw.get("data_root")
    if data_root_raw is None:
        data_root = None
    else:
        data_root_path = Path(data_root_raw)
        if data_root_path.is_absolute():
            data_root = data_root_path
        else:
            data_root = (root / data_root_path).resolve()

    config = AppConfig(
        ui_title=raw.get("ui_title", "Tabular Browser"),
        history_depth=history_depth,
        default_chart=default_chart,
        histogram_max_bins=_parse_max_bins(raw.get("histogram_max_bins", 50)),
        data_root=data_root,
    )
    logger.info(
        "Global config loaded",
        extra={"config_root": str(root), "history_depth": history_depth},
    )
    return config
