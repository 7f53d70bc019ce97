"""Unit tests for the profile analysis passes."""

import pytest

from storycv.contexts.intake.profile_data_structure import Project, Role
from storycv.contexts.narrative.analysis import (
    analyze_career_progression,
    analyze_project_impact,
    analyze_technical_skills,
)


def role(title, company="Acme Corp", description="Built services"):
    return Role(title=title, company=company, duration="2020 - Present", description=description)


def project(tech_stack):
    return Project(name="Project", tech_stack=tech_stack, summary="Project")


class TestCareerProgression:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "titles, seniority",
        [
            (["Senior Software Engineer"], "senior"),
            (["Principal Engineer"], "senior"),
            (["Junior Developer", "Tech Lead"], "senior"),
            (["Software Engineering Intern"], "junior"),
            (["Software Engineer"], "mid"),
        ],
    )
    def test_seniority(self, titles, seniority):
        career = analyze_career_progression([role(title) for title in titles])
        assert career.seniority == seniority

    @pytest.mark.unit
    def test_leadership_and_mentorship(self):
        career = analyze_career_progression([role("Engineering Manager")])

        assert career.has_leadership
        assert not career.has_mentorship
        assert not career.is_senior

    @pytest.mark.unit
    def test_mentorship_from_description(self):
        career = analyze_career_progression(
            [role("Software Engineer", description="Mentored two interns")]
        )
        assert career.has_mentorship
        assert not career.has_leadership

    @pytest.mark.unit
    def test_lead_title_implies_mentorship(self):
        assert analyze_career_progression([role("Team Lead")]).has_mentorship

    @pytest.mark.unit
    def test_distinct_companies(self):
        roles = [
            role("Engineer", company="Acme Corp"),
            role("Engineer", company="acme corp"),
            role("Engineer", company="Globex"),
        ]
        career = analyze_career_progression(roles)

        assert career.company_count == 2
        assert career.companies == ("Acme Corp", "Globex")


class TestTechnicalExpertise:
    @pytest.mark.unit
    def test_buckets_are_case_insensitive(self):
        tech = analyze_technical_skills(["react", "Python", "SQL", "docker", "Figma"])

        assert tech.frontend == ("react",)
        assert tech.backend == ("Python",)
        assert tech.database == ("SQL",)
        assert tech.cloud == ("docker",)
        assert tech.is_full_stack
        assert tech.is_cloud_native

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "skills, primary_stack",
        [
            (["React", "CSS", "Python"], "frontend"),
            (["React", "Python"], "backend"),
            (["Java"], "backend"),
            (["Figma", "Excel"], "general"),
        ],
    )
    def test_primary_stack(self, skills, primary_stack):
        assert analyze_technical_skills(skills).primary_stack == primary_stack

    @pytest.mark.unit
    def test_not_full_stack_or_cloud(self):
        tech = analyze_technical_skills(["Java", "PostgreSQL"])
        assert not tech.is_full_stack
        assert not tech.is_cloud_native


class TestProjectImpact:
    @pytest.mark.unit
    def test_single_project(self):
        impact = analyze_project_impact([project("React, Python, AWS")])

        assert impact.project_count == 1
        assert not impact.has_multiple_projects
        assert impact.distinct_technology_count == 3
        assert not impact.diverse_tech

    @pytest.mark.unit
    def test_diverse_portfolio(self):
        impact = analyze_project_impact(
            [project("React, Python"), project("python, Go, Rust"), project("Kafka, Scala")]
        )

        assert impact.has_multiple_projects
        assert impact.distinct_technology_count == 6
        assert impact.diverse_tech
        assert impact.technologies == ("React", "Python", "Go", "Rust", "Kafka")
