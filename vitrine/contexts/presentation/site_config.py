"""
Site Configuration Resolution

Merges an optional site.yaml over the literal defaults in defaults.py.

Examples:
    >>> config = load_site_config()                       # defaults + SITE_CONFIG_PATH if present
    >>> config = load_site_config(Path("config/site.yaml"))
    >>> config["scheduling_url"]
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from omegaconf import OmegaConf

from vitrine.contexts.presentation.defaults import get_default_site_config

load_dotenv()
SITE_CONFIG_PATH = Path(os.getenv("SITE_CONFIG_PATH", "config/site.yaml"))

REQUIRED_KEYS = ("site_name", "base_url", "author", "scheduling_url", "contact_email")


def load_site_config(config_path: Path = None) -> Dict[str, Any]:
    """
    Load site configuration, falling back to defaults for anything not set.

    Args:
        config_path: Optional path to a site.yaml (defaults to SITE_CONFIG_PATH).
            A missing file is not an error; defaults are used.

    Returns:
        Plain dict with every site setting

    Raises:
        ValueError: If the file does not hold a mapping, or blanks a required setting
    """
    if config_path is None:
        config_path = SITE_CONFIG_PATH

    merged = OmegaConf.create(get_default_site_config())

    if config_path.exists():
        overrides = OmegaConf.load(config_path)
        if not OmegaConf.is_dict(overrides):
            raise ValueError(f"Site config at {config_path} must be a mapping")
        merged = OmegaConf.merge(merged, overrides)

    config = OmegaConf.to_container(merged, resolve=True)

    for key in REQUIRED_KEYS:
        if not config.get(key):
            raise ValueError(f"Site config setting '{key}' must not be empty")

    return config
