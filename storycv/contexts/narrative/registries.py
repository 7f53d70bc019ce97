"""
Narrative Registries

Registry for loading and caching the Jinja2 prose templates that make up a story.
"""

from pathlib import Path
from typing import Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateError, TemplateNotFound

from storycv.contexts.narrative.exceptions import NarrativeRenderError
from storycv.settings import NARRATIVE_TEMPLATES_PATH
from storycv.utils.text_processing import as_clause, as_sentence, collapse_whitespace

TEMPLATE_SUFFIX = ".txt.jinja"


class NarrativeTemplateRegistry:
    """
    Registry for loading and caching narrative prose templates.

    Templates are stored as {templates_path}/{section}/{variant}.txt.jinja,
    e.g. introduction/curiosity.txt.jinja. Each section directory holds the
    interchangeable variants for one paragraph (or the tagline).

    Rendered output is collapsed to a single line: template files may wrap
    prose freely, but a paragraph never contains a blank line.
    """

    def __init__(self, templates_path: Optional[Path] = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Base directory of section folders. Defaults to
                            STORYCV_TEMPLATES_PATH (the packaged templates)
        """
        if templates_path is None:
            templates_path = NARRATIVE_TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            # Whitespace is collapsed after rendering, so keep it all here
            trim_blocks=False,
            lstrip_blocks=False,
            autoescape=False,
        )
        self.env.filters["sentence"] = as_sentence
        self.env.filters["clause"] = as_clause

    def _key(self, section: str, variant: str) -> str:
        return f"{section}/{variant}{TEMPLATE_SUFFIX}"

    def list_variants(self, section: str) -> List[str]:
        """
        Variant names available for a section, sorted.

        Sorting keeps RNG-driven selection reproducible across filesystems.

        Raises:
            FileNotFoundError: If the section directory does not exist
        """
        section_path = self.templates_path / section
        if not section_path.is_dir():
            raise FileNotFoundError(f"No templates for section '{section}' at {section_path}")
        return sorted(path.name[: -len(TEMPLATE_SUFFIX)] for path in section_path.glob(f"*{TEMPLATE_SUFFIX}"))

    def get_template(self, section: str, variant: str) -> Template:
        """
        Get a template by section and variant, loading and caching it if necessary.

        Args:
            section: Story section (e.g., 'introduction')
            variant: Variant name within the section (e.g., 'curiosity')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        key = self._key(section, variant)
        if key in self._cache:
            return self._cache[key]

        try:
            template = self.env.get_template(key)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{section}/{variant}' at {self.get_template_path(section, variant)}"
            ) from e

        self._cache[key] = template
        return template

    def render(self, section: str, variant: str, **context) -> str:
        """
        Render a template and collapse its whitespace.

        Raises:
            TemplateNotFound: If template file doesn't exist
            NarrativeRenderError: If the template fails to compile or render
        """
        template_path = self.get_template_path(section, variant)
        try:
            template = self.get_template(section, variant)
            rendered = template.render(**context)
        except TemplateNotFound:
            raise
        except TemplateError as e:
            raise NarrativeRenderError(
                f"Failed to render {section} template",
                section=section,
                variant=variant,
                template_path=template_path,
                original_error=e,
            ) from e

        return collapse_whitespace(rendered)

    def get_template_path(self, section: str, variant: str) -> Path:
        """Path to a section variant's template file."""
        return self.templates_path / section / f"{variant}{TEMPLATE_SUFFIX}"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, section: str, variant: str) -> bool:
        """Check if a template is in the cache."""
        return self._key(section, variant) in self._cache
