"""
Narrative Context

Responsibilities:
- Analyzes a ParsedProfile (career progression, technical expertise, project impact)
- Renders the four-paragraph story and tagline from Jinja2 prose templates
- Infers soft skills with their reasoning
- Composes showcase extras (voiceover script, project highlights)

Owns: StoryBundle, prose templates and variant selection
Never: Reads raw résumé text or changes a ParsedProfile
"""
