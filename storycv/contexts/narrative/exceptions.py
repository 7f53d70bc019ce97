"""Custom exceptions for the narrative context with template references."""

from pathlib import Path
from typing import Optional


class NarrativeRenderError(Exception):
    """
    Exception raised when a narrative template fails to render.

    Attributes:
        message: Error description
        section: Story section being rendered (e.g., 'introduction')
        variant: Template variant within the section (e.g., 'curiosity')
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        section: Optional[str] = None,
        variant: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.section = section
        self.variant = variant
        self.template_path = template_path
        self.original_error = original_error

        # Build enhanced error message
        parts = [message]

        if section and template_path:
            parts.append(f"\nTemplate: {template_path}")
            parts.append(f"Section: {section} (variant: {variant})")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
