"""
Narrative context logger.

Provides logging interface for narrative context with automatic [story] prefix.
All narrative modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from storycv.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[story]"


def setup_story_logger(log_dir: Path, seed: Optional[int] = None) -> Path:
    """
    Setup logger for narrative context.

    Args:
        log_dir: Directory for this story session
        seed: RNG seed used for template selection (recorded for reproducibility)

    Returns:
        Path to log file

    Example:
        from storycv.contexts.narrative.logger import setup_story_logger, _log_info

        log_file = setup_story_logger(log_dir, seed=7)
        _log_info("Synthesizing story...")
    """
    return _setup_logger(
        context_name="story",
        log_dir=log_dir,
        extra_provenance={"Seed": "unseeded" if seed is None else str(seed)},
    )


# Wrapper functions with automatic [story] prefix


def _log_info(message: str) -> None:
    """Log info message with [story] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [story] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [story] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [story] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level narrative logging helpers


def log_story_start(profile_name: str, target_role: str) -> None:
    """Log start of synthesis for a profile."""
    _log_info(f"Composing story for {profile_name} ({target_role})")


def log_variant_choice(section: str, variant: str) -> None:
    """Log which template variant a section was rendered from."""
    _log_debug(f"{section}: using '{variant}' template")


def log_story_result(bundle) -> None:
    """Log a short summary of a finished StoryBundle."""
    skills = ", ".join(soft_skill.skill for soft_skill in bundle.soft_skills)
    _log_debug(f"Story: {len(bundle.paragraphs)} paragraphs, {len(bundle.story)} chars")
    _log_debug(f"Soft skills: {skills}")
