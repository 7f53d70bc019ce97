#!/usr/bin/env python3
"""
Story Generation CLI

Turns a plain-text résumé (or a saved profile YAML) into a professional
story, tagline and inferred soft skills.

Usage:
    python scripts/generate_story.py resume.txt
    python scripts/generate_story.py resume.txt --seed 7 --voiceover
    python scripts/generate_story.py --profile outs/profiles/jane.yaml --output story.yaml
"""

from pathlib import Path
from typing import Optional

import typer
import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from typing_extensions import Annotated

from storycv.contexts.intake.exceptions import InvalidProfileStructureError
from storycv.contexts.intake.profile_data_structure import ParsedProfile
from storycv.contexts.intake.profile_extractor import extract
from storycv.contexts.narrative.logger import setup_story_logger
from storycv.contexts.narrative.showcase import compose_voiceover, summarize_projects
from storycv.contexts.narrative.synthesizer import NarrativeSynthesizer, new_story_rng
from storycv.settings import LOGS_PATH
from storycv.utils.timestamp import now

app = typer.Typer(
    help="Generate a professional story, tagline and soft skills from a résumé",
    add_completion=False,
)


def load_profile(
    resume_file: Optional[Path], profile_file: Optional[Path]
) -> ParsedProfile:
    """
    Build the profile from exactly one source.

    Raises:
        typer.Exit: If the sources are missing, ambiguous or unreadable
    """
    if resume_file and profile_file:
        typer.echo("Error: Cannot specify both RESUME_FILE and --profile", err=True)
        raise typer.Exit(code=1)

    if not resume_file and not profile_file:
        typer.echo("Error: Must specify either RESUME_FILE or --profile", err=True)
        raise typer.Exit(code=1)

    source = resume_file or profile_file
    if not source.is_file():
        typer.echo(f"Error: File not found: {source}", err=True)
        raise typer.Exit(code=1)

    if profile_file:
        try:
            return ParsedProfile.from_yaml(profile_file)
        except (InvalidProfileStructureError, yaml.YAMLError, OmegaConfBaseException) as e:
            typer.echo(f"Error: Invalid profile YAML {profile_file}: {e}", err=True)
            raise typer.Exit(code=1)

    try:
        return extract(resume_file.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        typer.echo(f"Error: {resume_file} is not UTF-8 text ({e})", err=True)
        raise typer.Exit(code=1)


@app.command()
def main(
    resume_file: Annotated[
        Optional[Path],
        typer.Argument(help="Plain-text résumé (UTF-8); omit when using --profile", dir_okay=False),
    ] = None,
    profile_file: Annotated[
        Optional[Path],
        typer.Option("--profile", "-p", help="Profile YAML saved by parse_resume.py"),
    ] = None,
    seed: Annotated[
        Optional[int],
        typer.Option("--seed", help="Seed template selection (default: STORYCV_STORY_SEED or random)"),
    ] = None,
    voiceover: Annotated[
        bool,
        typer.Option("--voiceover", help="Also print a voiceover script and project highlights"),
    ] = False,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Save profile and story as YAML"),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Directory for the session log (default: STORYCV_LOGS_PATH/story_<timestamp>)"),
    ] = None,
):
    """
    Generate a story for a résumé or a saved profile.

    Examples:

        # Story from a résumé, reproducible
        python scripts/generate_story.py resume.txt --seed 7

        # Story from a reviewed profile, saved with the voiceover script
        python scripts/generate_story.py -p profile.yaml --voiceover -o story.yaml
    """
    if log_dir is None:
        log_dir = LOGS_PATH / f"story_{now()}"

    setup_story_logger(log_dir, seed=seed)
    profile = load_profile(resume_file, profile_file)

    synthesizer = NarrativeSynthesizer(rng=new_story_rng(seed))
    bundle = synthesizer.synthesize(profile)

    typer.echo(f"{profile.name} | {profile.target_role}\n")
    typer.echo(bundle.story)
    typer.echo(f"\nTagline: {bundle.tagline}")
    typer.echo("\nSoft skills:")
    for soft_skill in bundle.soft_skills:
        typer.echo(f"  - {soft_skill.skill}: {soft_skill.reasoning}")

    result = {"profile": profile.to_dict(), "story": bundle.to_dict()}

    if voiceover:
        script = compose_voiceover(profile, bundle, registry=synthesizer.registry)
        highlights = summarize_projects(profile)

        typer.echo(f"\nVoiceover:\n{script}")
        typer.echo("\nProject highlights:")
        for highlight in highlights:
            typer.echo(f"\n{highlight.name}\n{highlight.text}")

        result["voiceover"] = script
        result["project_highlights"] = [
            {"name": highlight.name, "bullets": list(highlight.bullets)} for highlight in highlights
        ]

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        OmegaConf.save(OmegaConf.create(result), output)
        typer.echo(f"\n✓ Story saved to: {output}")


if __name__ == "__main__":
    app()
