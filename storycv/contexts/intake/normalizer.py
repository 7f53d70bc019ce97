"""
Résumé text normalizer for the Intake context.

Text arriving from PDF/DOCX extraction or copy-paste carries typographic
characters (non-breaking spaces, smart quotes, assorted bullet glyphs) that
break line-oriented pattern matching. Normalize BEFORE parsing.
"""

import re
import unicodedata

# Unicode replacements: problematic char → ASCII (or canonical bullet) equivalent
UNICODE_REPLACEMENTS = {
    # Spaces
    "\u00a0": " ",  # non-breaking space
    "\u202f": " ",  # narrow no-break space
    "\t": " ",
    # Zero-width characters → remove
    "\u200b": "",  # zero-width space
    "\u200c": "",  # zero-width non-joiner
    "\u200d": "",  # zero-width joiner
    "\u2060": "",  # word joiner
    "\ufeff": "",  # BOM / zero-width no-break space
    # Quotes
    "\u2018": "'",
    "\u2019": "'",
    "\u201c": '"',
    "\u201d": '"',
    # Dashes
    "\u2013": "-",  # en dash
    "\u2014": "-",  # em dash
    "\u2212": "-",  # minus sign
    # Bullets → canonical bullet
    "\u00b7": "•",  # middle dot
    "\u2023": "•",  # triangular bullet
    "\u25aa": "•",  # black small square
    "\u25cf": "•",  # black circle
    "\u25e6": "•",  # white bullet
    "\uf0b7": "•",  # private-use bullet emitted by Word/PDF extractors
}

_LINE_ENDINGS = re.compile(r"\r\n?")


def normalize_unicode(text: str) -> str:
    """
    Normalize unicode characters that cause parsing issues.

    Applies NFKC normalization and replaces common problematic characters
    with ASCII equivalents.

    Args:
        text: Raw text possibly containing problematic unicode

    Returns:
        Text with normalized unicode
    """
    text = unicodedata.normalize("NFKC", text)

    for char, replacement in UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)

    return text


def preprocess_resume_text(text: str) -> str:
    """
    Preprocess raw résumé text before layout parsing.

    Handles:
    - Missing input (None becomes empty text)
    - Line endings (CRLF / CR → LF)
    - Unicode normalization (non-breaking spaces, smart quotes, bullets)
    - Trailing whitespace on every line

    Args:
        text: Raw résumé text

    Returns:
        Normalized text ready for section and field extraction
    """
    if not text:
        return ""

    text = _LINE_ENDINGS.sub("\n", text)
    text = normalize_unicode(text)

    return "\n".join(line.rstrip() for line in text.split("\n"))
