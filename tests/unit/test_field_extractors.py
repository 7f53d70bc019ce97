"""Unit tests for the per-field résumé matchers."""

import pytest

from storycv.contexts.intake.field_extractors import (
    extract_achievements,
    extract_certifications,
    extract_education,
    extract_name,
    extract_projects,
    extract_roles,
    extract_skills,
    infer_target_role,
)
from storycv.contexts.intake.resume_parser import parse_resume_text


def layout_of(text):
    return parse_resume_text(text)


class TestExtractName:
    @pytest.mark.unit
    def test_name_on_first_line(self):
        assert extract_name(layout_of("Jane Doe\nSenior Software Engineer")) == "Jane Doe"

    @pytest.mark.unit
    def test_all_caps_name_is_title_cased(self):
        assert extract_name(layout_of("JANE DOE\njane@example.com")) == "Jane Doe"

    @pytest.mark.unit
    def test_name_before_email(self):
        """A header that is not a name falls through to the contact line."""
        text = "Software Engineer Resume\nJane Doe | jane.doe@example.com"
        assert extract_name(layout_of(text)) == "Jane Doe"

    @pytest.mark.unit
    def test_labeled_name(self):
        text = "Name: Jane Doe\n2020 portfolio review"
        assert extract_name(layout_of(text)) == "Jane Doe"

    @pytest.mark.unit
    def test_job_titles_and_companies_are_not_names(self):
        assert extract_name(layout_of("Senior Engineer\nAcme Corp")) is None

    @pytest.mark.unit
    def test_empty_text(self):
        assert extract_name(layout_of("")) is None


class TestExtractRoles:
    @pytest.mark.unit
    def test_title_company_duration_block(self):
        text = "Jane Doe\nSenior Software Engineer\nAcme Corp\n2020 - Present\nReact, Python, AWS"
        roles = extract_roles(layout_of(text))

        assert roles == [
            {
                "title": "Senior Software Engineer",
                "company": "Acme Corp",
                "duration": "2020 - Present",
                "description": "React, Python, AWS",
            }
        ]

    @pytest.mark.unit
    def test_company_first_block(self):
        text = "Acme Corp\nSoftware Engineer\n2019 - 2021\nBuilt internal tooling for billing"
        roles = extract_roles(layout_of(text))

        assert roles[0]["title"] == "Software Engineer"
        assert roles[0]["company"] == "Acme Corp"
        assert roles[0]["description"] == "Built internal tooling for billing"

    @pytest.mark.unit
    def test_default_description(self):
        roles = extract_roles(layout_of("Data Analyst\nGlobex Corporation\n2015 - 2018"))
        assert roles[0]["description"] == "Professional experience as Data Analyst"

    @pytest.mark.unit
    def test_description_stops_at_blank_line(self):
        text = (
            "Data Analyst\nGlobex Corporation\n2015 - 2018\n"
            "• Automated weekly revenue reports\n\nUnrelated trailing paragraph text"
        )
        roles = extract_roles(layout_of(text))
        assert roles[0]["description"] == "Automated weekly revenue reports"

    @pytest.mark.unit
    def test_block_without_duration_is_ignored(self):
        assert extract_roles(layout_of("Software Engineer\nAcme Corp\nRemote")) == []

    @pytest.mark.unit
    def test_multiple_blocks_in_order(self):
        text = (
            "Lead Developer\nInitech Solutions\n2020 - Present\n\n"
            "Junior Developer\nHooli Inc\n2017 - 2020"
        )
        titles = [role["title"] for role in extract_roles(layout_of(text))]
        assert titles == ["Lead Developer", "Junior Developer"]


class TestExtractProjects:
    @pytest.mark.unit
    def test_projects_section_lines(self):
        text = "PROJECTS\n• Expense Tracker app for small teams\n• Tiny"
        projects = extract_projects(layout_of(text))

        assert projects == [
            {
                "name": "Expense Tracker app for small teams",
                "tech_stack": "Various Technologies",
                "summary": "Expense Tracker app for small teams",
            }
        ]

    @pytest.mark.unit
    def test_action_phrase_with_nearby_technologies(self):
        text = "Built an inventory dashboard with React and Python"
        projects = extract_projects(layout_of(text))

        assert projects[0]["summary"] == "an inventory dashboard with React and Python"
        assert projects[0]["tech_stack"] == "React, Python"

    @pytest.mark.unit
    def test_long_name_is_word_truncated(self):
        summary = (
            "Customer onboarding portal with document upload, e-signature and audit trail"
        )
        projects = extract_projects(layout_of(f"PROJECTS\n{summary}"))

        assert projects[0]["summary"] == summary
        assert len(projects[0]["name"]) <= 60
        assert summary.startswith(projects[0]["name"])

    @pytest.mark.unit
    def test_at_most_four_projects(self):
        lines = "\n".join(f"Side project number {index} for the community" for index in range(6))
        assert len(extract_projects(layout_of(f"PROJECTS\n{lines}"))) == 4

    @pytest.mark.unit
    def test_no_projects(self):
        assert extract_projects(layout_of("Jane Doe")) == []


class TestExtractSkills:
    @pytest.mark.unit
    def test_vocabulary_then_section_tokens_deduplicated(self):
        text = "Used Python daily\nSkills: python, React, react, Kafka"
        assert extract_skills(layout_of(text)) == ["React", "Python", "Kafka"]

    @pytest.mark.unit
    def test_category_labels_are_dropped(self):
        text = "SKILLS\nLanguages: Rust, Elixir\nTools: terraform"
        assert extract_skills(layout_of(text)) == ["Rust", "Elixir", "Terraform"]

    @pytest.mark.unit
    def test_symbol_terms_match_whole_words(self):
        skills = extract_skills(layout_of("Wrote C++ and C# services; some JavaScript"))
        assert skills == ["JavaScript", "C++", "C#"]

    @pytest.mark.unit
    def test_everyday_words_need_exact_casing(self):
        assert extract_skills(layout_of("I like to go outside in spring")) == []

    @pytest.mark.unit
    def test_skill_cap(self):
        tokens = ", ".join(f"Tool{chr(65 + index)}" for index in range(15))
        text = f"JavaScript TypeScript React Angular Vue Node.js Python Java\nSkills: {tokens}"
        assert len(extract_skills(layout_of(text))) == 20


class TestSectionFields:
    @pytest.mark.unit
    def test_education_from_section_and_terms(self):
        text = "EDUCATION\nState College\nMBA, Wharton"
        assert extract_education(layout_of(text)) == ["State College", "MBA, Wharton"]

    @pytest.mark.unit
    def test_state_abbreviation_is_not_a_degree(self):
        assert extract_education(layout_of("Jane Doe\nBoston, MA")) == []

    @pytest.mark.unit
    def test_certifications(self):
        text = "Jane Doe\n• AWS Certified Developer"
        assert extract_certifications(layout_of(text)) == ["AWS Certified Developer"]

    @pytest.mark.unit
    def test_achievements(self):
        text = "• Reduced cloud costs by 20%\n• Wrote code"
        assert extract_achievements(layout_of(text)) == ["Reduced cloud costs by 20%"]


class TestInferTargetRole:
    @pytest.mark.unit
    def test_first_role_title_wins(self):
        roles = [{"title": "Data Engineer"}]
        assert infer_target_role(roles, ["React"]) == "Data Engineer"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "skills, expected",
        [
            (["React", "Python"], "Frontend Developer"),
            (["Python"], "Backend Developer"),
            (["Docker"], "DevOps Engineer"),
            (["Analytics"], "Data Scientist"),
            (["Figma"], None),
            ([], None),
        ],
    )
    def test_skill_categories(self, skills, expected):
        assert infer_target_role([], skills) == expected
