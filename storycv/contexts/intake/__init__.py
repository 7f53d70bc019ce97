"""
Intake Context

Responsibilities:
- Normalizes raw résumé text (unicode, line endings, bullet glyphs)
- Recognizes section headings and splits the text into labeled sections
- Extracts name, roles, projects, skills, education, certifications and achievements
- Applies the fallback policy so required fields are never empty

Owns: ParsedProfile and the extraction heuristics
Never: Writes narrative prose or chooses story templates
"""
