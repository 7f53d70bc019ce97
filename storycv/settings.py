"""Configuration loaded from environment variables (and .env, if present)."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

PACKAGE_ROOT = Path(__file__).resolve().parent

# Per-session log directories are created under this path by the scripts
LOGS_PATH = Path(os.getenv("STORYCV_LOGS_PATH", "outs/logs"))

# Narrative prose templates ({section}/{variant}.txt.jinja)
NARRATIVE_TEMPLATES_PATH = Path(
    os.getenv(
        "STORYCV_TEMPLATES_PATH",
        str(PACKAGE_ROOT / "contexts" / "narrative" / "templates"),
    )
)


def _parse_seed(raw: Optional[str]) -> Optional[int]:
    """Parse an optional integer seed; blank or unset means unseeded."""
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError as e:
        raise ValueError(f"STORYCV_STORY_SEED must be an integer, got {raw!r}") from e


# Pins template and tagline selection for the module-level synthesize()
STORY_SEED: Optional[int] = _parse_seed(os.getenv("STORYCV_STORY_SEED"))
