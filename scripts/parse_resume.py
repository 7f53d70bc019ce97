#!/usr/bin/env python3
"""
Résumé Parsing CLI

Extracts a structured profile from a plain-text résumé and prints the
extracted fields. Optionally saves the profile as YAML so it can be
reviewed, hand-edited and passed to generate_story.py --profile.

Usage:
    python scripts/parse_resume.py resume.txt
    python scripts/parse_resume.py resume.txt --output outs/profiles/jane.yaml
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from storycv.contexts.intake.logger import setup_intake_logger
from storycv.contexts.intake.profile_data_structure import ParsedProfile
from storycv.contexts.intake.profile_extractor import extract
from storycv.settings import LOGS_PATH
from storycv.utils.text_processing import truncate_display
from storycv.utils.timestamp import now

DESCRIPTION_DISPLAY_LENGTH = 100

app = typer.Typer(
    help="Extract a structured profile from a plain-text résumé",
    add_completion=False,
)


def read_resume_text(resume_file: Path) -> str:
    """
    Read a UTF-8 résumé file, exiting with code 1 when it cannot be read.

    Raises:
        typer.Exit: If the file is missing or not valid UTF-8
    """
    if not resume_file.is_file():
        typer.echo(f"Error: Résumé file not found: {resume_file}", err=True)
        raise typer.Exit(code=1)
    try:
        return resume_file.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        typer.echo(f"Error: {resume_file} is not UTF-8 text ({e})", err=True)
        raise typer.Exit(code=1)


def print_profile(profile: ParsedProfile) -> None:
    """Print extracted fields in review-friendly form."""
    typer.echo(f"Name:        {profile.name}")
    typer.echo(f"Target role: {profile.target_role}")

    typer.echo(f"\nRoles ({len(profile.roles)}):")
    for role in profile.roles:
        typer.echo(f"  - {role.title} | {role.company} | {role.duration}")
        typer.echo(f"    {truncate_display(role.description, DESCRIPTION_DISPLAY_LENGTH)}")

    typer.echo(f"\nProjects ({len(profile.projects)}):")
    for project in profile.projects:
        typer.echo(f"  - {project.name} [{project.tech_stack}]")

    typer.echo(f"\nSkills ({len(profile.skills)}): {', '.join(profile.skills)}")

    for label, values in (
        ("Education", profile.education),
        ("Certifications", profile.certifications),
        ("Achievements", profile.achievements),
    ):
        typer.echo(f"\n{label} ({len(values)}):")
        for value in values:
            typer.echo(f"  - {value}")


@app.command()
def main(
    resume_file: Annotated[
        Path,
        typer.Argument(help="Plain-text résumé (UTF-8)", dir_okay=False),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Save the extracted profile as YAML"),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Directory for the session log (default: STORYCV_LOGS_PATH/parse_<timestamp>)"),
    ] = None,
):
    """
    Parse a résumé and print the extracted profile.

    Examples:

        # Print the extracted fields
        python scripts/parse_resume.py resume.txt

        # Save for review or hand-editing
        python scripts/parse_resume.py resume.txt -o profile.yaml
    """
    text = read_resume_text(resume_file)

    if log_dir is None:
        log_dir = LOGS_PATH / f"parse_{now()}"
    setup_intake_logger(log_dir, source=str(resume_file))

    profile = extract(text)
    print_profile(profile)

    if output:
        saved = profile.save_yaml(output)
        typer.echo(f"\n✓ Profile saved to: {saved}")


if __name__ == "__main__":
    app()
