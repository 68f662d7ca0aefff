"""
Generic logger setup utilities for Tier 1 (detailed) logging.

Provides reusable loguru configuration with provenance tracking: every session
log opens with the vitrine version, the command that ran, and which content,
output and config paths came from the environment.
Context-specific wrappers should be defined in contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from vitrine import __version__

load_dotenv()

# Default level colors for console output
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

# Environment settings recorded in every provenance header
PROVENANCE_SETTINGS = ("CONTENT_PATH", "OUTPUT_PATH", "SITE_CONFIG_PATH", "BUILD_EVENTS_FILE")

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {extra[context]: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    level_colors: dict = None,
    console_level: str = "INFO",
) -> Path:
    """
    Configure loguru for one vitrine session (a build or a validation run).

    The file sink tags every line with the context name so content and render
    sessions can be told apart when logs are collected together.

    Args:
        context_name: Context identifier ("content" or "render")
        log_dir: Directory for this logging session
        extra_provenance: Session details for the provenance header (content store, output, ...)
        level_colors: Override default level colors (e.g., {"INFO": "<cyan>"})
        console_level: Minimum level echoed to the console (default: INFO)

    Returns:
        Path to log file

    Example:
        from vitrine.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="render",
            log_dir=Path("outs/logs/build_20251114_123456"),
            extra_provenance={"Output": "outs/site"}
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.configure(extra={"context": context_name})

    colors = {**LEVEL_COLORS, **(level_colors or {})}
    for level_name, color in colors.items():
        logger.level(level_name, color=color)

    # File handler captures everything
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(session=log_dir.name, extra_context=extra_provenance)

    return log_file


def log_provenance(session: str = None, extra_context: dict = None) -> None:
    """
    Log the provenance header for a vitrine session.

    Records the vitrine version, session name, command line and working
    directory, then each path setting with where its value came from
    (environment or built-in default), then any extra context.
    """
    logger.info("=" * 80)
    logger.info(f"vitrine {__version__}")
    if session:
        logger.info(f"Session: {session}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    for name in PROVENANCE_SETTINGS:
        value = os.getenv(name)
        logger.info(f"{name}: {value} (env)" if value else f"{name}: default")

    if extra_context:
        for key, value in extra_context.items():
            logger.info(f"{key}: {value}")

    logger.info("=" * 80)
