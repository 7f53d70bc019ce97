"""
StoryCV - Structured career stories from plain résumé text

Turns raw résumé text into structured career data and composes a short
professional narrative, tagline and soft-skill inferences from it.

Architecture:
- Intake Context: Résumé text normalization and heuristic field extraction
- Narrative Context: Career analysis and templated story synthesis
- Pipeline: Text -> ParsedProfile -> StoryBundle composition
"""

__version__ = "0.1.0"
