"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from storycv.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(log_dir: Path, source: str = "text") -> Path:
    """
    Setup logger for intake context.

    Args:
        log_dir: Directory for this intake session
        source: Where the résumé text came from, for provenance

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="intake",
        log_dir=log_dir,
        extra_provenance={"Source": source},
    )


# Wrapper functions with automatic [intake] prefix


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [intake] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_extraction_summary(profile, defaulted_fields: list[str]) -> None:
    """
    Log what the extractor found and which fields fell back to defaults.

    Args:
        profile: ParsedProfile produced by extract()
        defaulted_fields: Names of fields filled from the fallback policy
    """
    _log_debug(
        f"Extracted profile for {profile.name!r}: {len(profile.roles)} roles, "
        f"{len(profile.projects)} projects, {len(profile.skills)} skills, "
        f"{len(profile.education)} education, {len(profile.certifications)} certifications, "
        f"{len(profile.achievements)} achievements"
    )
    if defaulted_fields:
        _log_debug(f"Fallback values used for: {', '.join(defaulted_fields)}")
    _log_debug(f"Target role: {profile.target_role}")
