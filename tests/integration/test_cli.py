"""
Integration test for the command-line scripts.
Tests: parse_resume.py and generate_story.py exit codes, output and saved YAML.
"""

import importlib.util
import sys
from pathlib import Path

import pytest
from loguru import logger
from omegaconf import OmegaConf
from typer.testing import CliRunner

from storycv.contexts.intake.profile_data_structure import ParsedProfile

PROJECT_ROOT = Path(__file__).parent.parent.parent
SCRIPTS_PATH = PROJECT_ROOT / "scripts"
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"
JANE_DOE = FIXTURES_PATH / "resumes" / "jane_doe.txt"
MANAGER_PROFILE = FIXTURES_PATH / "profiles" / "engineering_manager.yaml"

runner = CliRunner()


def load_script(name: str):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_PATH / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


parse_resume = load_script("parse_resume")
generate_story = load_script("generate_story")


def story_lines(output: str) -> list[str]:
    """Printed lines without console log records."""
    return [line for line in output.splitlines() if "INFO" not in line]


@pytest.fixture(autouse=True)
def reset_logger():
    """Scripts add sinks bound to the runner's streams; drop them after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestParseResume:
    @pytest.mark.integration
    def test_prints_profile(self, tmp_path):
        result = runner.invoke(parse_resume.app, [str(JANE_DOE), "--log-dir", str(tmp_path)])

        assert result.exit_code == 0
        assert "Name:        Jane Doe" in result.output
        assert "Senior Software Engineer | Acme Corp | 2020 - Present" in result.output
        assert (tmp_path / "intake.log").exists()

    @pytest.mark.integration
    def test_saves_yaml(self, tmp_path):
        output = tmp_path / "profiles" / "jane.yaml"
        result = runner.invoke(
            parse_resume.app, [str(JANE_DOE), "-o", str(output), "--log-dir", str(tmp_path)]
        )

        assert result.exit_code == 0
        assert "✓ Profile saved to:" in result.output
        assert ParsedProfile.from_yaml(output).name == "Jane Doe"

    @pytest.mark.integration
    def test_missing_file(self, tmp_path):
        result = runner.invoke(
            parse_resume.app, [str(tmp_path / "missing.txt"), "--log-dir", str(tmp_path)]
        )

        assert result.exit_code == 1
        assert "Résumé file not found" in result.output

    @pytest.mark.integration
    def test_non_utf8_file(self, tmp_path):
        resume = tmp_path / "latin1.txt"
        resume.write_bytes("José Pérez".encode("latin-1"))

        result = runner.invoke(parse_resume.app, [str(resume), "--log-dir", str(tmp_path)])

        assert result.exit_code == 1
        assert "not UTF-8" in result.output


class TestGenerateStory:
    @pytest.mark.integration
    def test_story_from_resume(self, tmp_path):
        result = runner.invoke(
            generate_story.app, [str(JANE_DOE), "--seed", "7", "--log-dir", str(tmp_path)]
        )

        assert result.exit_code == 0
        assert "Jane Doe | Senior Software Engineer" in result.output
        assert "Tagline: " in result.output
        assert "  - Leadership: Demonstrated leadership experience" in result.output
        assert (tmp_path / "story.log").exists()

    @pytest.mark.integration
    def test_extraction_is_logged_to_session_file(self, tmp_path):
        result = runner.invoke(generate_story.app, [str(JANE_DOE), "--log-dir", str(tmp_path)])
        logger.remove()

        assert result.exit_code == 0
        log_text = (tmp_path / "story.log").read_text(encoding="utf-8")
        assert "[intake] Parsed " in log_text

    @pytest.mark.integration
    def test_seed_is_reproducible(self, tmp_path):
        args = [str(JANE_DOE), "--seed", "7", "--log-dir", str(tmp_path)]
        first = runner.invoke(generate_story.app, args)
        second = runner.invoke(generate_story.app, args)

        assert story_lines(first.output) == story_lines(second.output)

    @pytest.mark.integration
    def test_story_from_profile_with_voiceover_saved(self, tmp_path):
        output = tmp_path / "story.yaml"
        result = runner.invoke(
            generate_story.app,
            [
                "--profile",
                str(MANAGER_PROFILE),
                "--voiceover",
                "-o",
                str(output),
                "--log-dir",
                str(tmp_path),
            ],
        )

        assert result.exit_code == 0
        assert "Voiceover:" in result.output
        assert "Payments Platform" in result.output
        assert "✓ Story saved to:" in result.output

        saved = OmegaConf.to_container(OmegaConf.load(output))
        assert saved["profile"]["name"] == "Priya Raman"
        assert [item["skill"] for item in saved["story"]["softSkills"]] == [
            "Leadership",
            "Communication",
        ]
        assert saved["voiceover"].startswith("Hi, I'm Priya Raman")
        assert saved["project_highlights"][0]["name"] == "Payments Platform"

    @pytest.mark.integration
    def test_requires_exactly_one_source(self, tmp_path):
        neither = runner.invoke(generate_story.app, ["--log-dir", str(tmp_path)])
        both = runner.invoke(
            generate_story.app,
            [str(JANE_DOE), "--profile", str(MANAGER_PROFILE), "--log-dir", str(tmp_path)],
        )

        assert neither.exit_code == 1
        assert "Must specify either" in neither.output
        assert both.exit_code == 1
        assert "Cannot specify both" in both.output

    @pytest.mark.integration
    def test_invalid_profile(self, tmp_path):
        profile = tmp_path / "bad.yaml"
        profile.write_text("name: Jane Doe\nroles: not-a-list\n", encoding="utf-8")

        result = runner.invoke(
            generate_story.app, ["--profile", str(profile), "--log-dir", str(tmp_path)]
        )

        assert result.exit_code == 1
        assert "Invalid profile YAML" in result.output
