"""
Presentation context logger.

Provides logging interface for the presentation context with automatic [render] prefix.
All presentation modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitrine.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(
    log_dir: Path,
    output_dir: Path,
    content_root: Path = None,
    include_unpublished: bool = False,
) -> Path:
    """
    Setup logger for a site build.

    Args:
        log_dir: Directory for this build's logs
        output_dir: Directory the site is written to (recorded in provenance)
        content_root: Content store the site is built from
        include_unpublished: Whether unpublished posts are listed

    Returns:
        Path to log file
    """
    provenance = {"Output": output_dir}
    if content_root is not None:
        provenance["Content store"] = content_root
    provenance["Drafts listed"] = "yes" if include_unpublished else "no"

    return _setup_logger(context_name="render", log_dir=log_dir, extra_provenance=provenance)


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_build_start(content_root: Path, output_dir: Path) -> None:
    _log_info(f"Building site from {content_root}")
    _log_debug(f"Output: {output_dir}")


def log_build_result(result, elapsed_time: float) -> None:
    """
    Log the outcome of a site build.

    Args:
        result: BuildResult from Site.build()
        elapsed_time: Time taken in seconds
    """
    _log_success(f"Wrote {len(result.pages)} page(s) ({elapsed_time:.2f}s)")
    _log_info(f"  Output: {result.output_dir}")
