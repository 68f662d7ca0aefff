"""
Content context logger.

Provides logging interface for the content context with automatic [content] prefix.
All content modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Mapping

from loguru import logger

from vitrine.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[content]"


def setup_content_logger(log_dir: Path, content_root: Path, inventory: Mapping[str, int] = None) -> Path:
    """
    Setup logger for the content context.

    Args:
        log_dir: Directory for this logging session
        content_root: Content store being loaded (recorded in provenance)
        inventory: Files found per category directory, e.g. {"blog": 4}

    Returns:
        Path to log file
    """
    provenance = {"Content store": content_root}
    if inventory is not None:
        provenance["Inventory"] = format_inventory(inventory)

    return _setup_logger(context_name="content", log_dir=log_dir, extra_provenance=provenance)


def format_inventory(inventory: Mapping[str, int]) -> str:
    """
    Example:
        >>> format_inventory({"blog": 4, "ventures": 0})
        'blog=4, ventures=0'
    """
    return ", ".join(f"{directory}={count}" for directory, count in inventory.items()) or "empty"


# Wrapper functions with automatic [content] prefix


def _log_info(message: str) -> None:
    """Log info message with [content] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [content] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [content] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [content] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [content] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level content-specific logging helpers


def log_dropped_file(category: str, path: Path, error: Exception) -> None:
    """Log a content file excluded from a load because it failed to parse or validate."""
    _log_warning(f"Skipping {category} file {path.name}: {error}")


def log_category_loaded(category: str, loaded: int, dropped: int) -> None:
    """Log the outcome of loading one content category."""
    if dropped:
        _log_warning(f"Loaded {loaded} {category} item(s), dropped {dropped}")
    else:
        _log_debug(f"Loaded {loaded} {category} item(s)")
