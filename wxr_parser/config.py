"""
Configuration loading for the parser and its command-line wrapper.

Configuration is supplied via a JSON file path or directly as a dictionary.
Missing keys are filled with defaults, some of which may be overridden
through environment variables:

* ``filter.post_type`` – ``WXR_POST_TYPE`` (default ``post``)
* ``filter.status`` – ``WXR_STATUS`` (default ``publish``)
* ``logging.level`` – ``WXR_LOG_LEVEL`` (default ``WARNING``)
* ``output.format`` – ``json`` or ``csv`` (default ``json``)
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional

OUTPUT_FORMATS = ("json", "csv")


def load_config(config: Optional[Dict[str, Any]] = None, *, config_file: Optional[str] = None) -> Dict[str, Any]:
    if config_file and os.path.exists(config_file):
        with open(config_file, "r", encoding="utf-8") as f:
            config = json.load(f)
    elif config is None:
        config = {}

    config.setdefault("filter", {})
    config["filter"].setdefault("post_type", os.getenv("WXR_POST_TYPE", "post"))
    config["filter"].setdefault("status", os.getenv("WXR_STATUS", "publish"))

    config.setdefault("logging", {})
    config["logging"].setdefault("level", os.getenv("WXR_LOG_LEVEL", "WARNING"))

    config.setdefault("output", {})
    config["output"].setdefault("format", "json")
    if config["output"]["format"] not in OUTPUT_FORMATS:
        raise ValueError(f"Unsupported output format: {config['output']['format']!r}")

    return config
