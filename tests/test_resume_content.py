"""Tests for resume content models and portfolio mapping."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from resume_fit.models.content import ResumeContent, ResumeHeader
from resume_fit.schemas.portfolio import PortfolioPayload
from resume_fit.services.resume_content import content_from_portfolio
from resume_fit.services.resume_pdf import render_portfolio


class TestFromDict:
    def test_full_mapping(self):
        content = ResumeContent.from_dict(
            {
                "header": {"name": " Jane Doe ", "title": "Engineer"},
                "summary": "Builds things.",
                "contacts": ["jane@example.com", "", None],
                "experience": [{"role": "SWE", "organization": "Acme", "period": "2021"}],
                "skills": ["Python", "  "],
                "projects": [{"title": "Tool", "technologies": ["Go"]}],
                "education": [{"institution": "MIT", "degree": "B.S.", "year": 2015}],
            }
        )
        assert content.header == ResumeHeader(name="Jane Doe", title="Engineer")
        assert content.contacts == ("jane@example.com",)
        assert content.experience[0].organization == "Acme"
        assert content.experience[0].description == ""
        assert content.skills == ("Python",)
        assert content.projects[0].technologies == ("Go",)
        assert content.education[0].year == "2015"

    def test_none_values_become_empty(self):
        content = ResumeContent.from_dict(
            {"header": None, "summary": None, "experience": None, "skills": None}
        )
        assert content == ResumeContent()

    def test_header_as_string(self):
        assert ResumeContent.from_dict({"header": "Jane"}).header.name == "Jane"

    @pytest.mark.parametrize("section", ["experience", "projects", "education"])
    def test_non_mapping_items_skipped(self, section):
        content = ResumeContent.from_dict({section: [None, "oops", {}]})
        assert len(getattr(content, section)) == 1

    def test_unknown_keys_ignored(self):
        assert ResumeContent.from_dict({"hobbies": ["chess"]}) == ResumeContent()

    def test_content_is_immutable(self):
        with pytest.raises(AttributeError):
            ResumeContent().summary = "x"  # type: ignore[misc]


class TestContentFromPortfolio:
    def test_splits_hero_title(self):
        content = content_from_portfolio({"hero_title": "Jane Doe - Backend Engineer"})
        assert content.header == ResumeHeader(name="Jane Doe", title="Backend Engineer")

    def test_extra_title_parts_ignored(self):
        content = content_from_portfolio({"hero_title": "Jane - Dev - Lead"})
        assert content.header == ResumeHeader(name="Jane", title="Dev")

    def test_subtitle_fallback(self):
        content = content_from_portfolio(
            {"hero_title": "Jane Doe", "hero_subtitle": "Data Scientist"}
        )
        assert content.header.title == "Data Scientist"

    def test_default_name(self):
        assert content_from_portfolio({}).header.name == "Name"

    def test_strips_html_from_about(self):
        content = content_from_portfolio({"about_text": "<p>Hello <em>world</em></p>"})
        assert content.summary == "Hello world"

    def test_contacts_order_and_scheme(self):
        content = content_from_portfolio(
            {
                "links": {
                    "website": "https://jane.dev/",
                    "github": "https://github.com/jane",
                    "linkedin": "http://www.linkedin.com/in/jane",
                    "phone": "555-0100",
                    "email": "jane@example.com",
                }
            }
        )
        assert content.contacts[:2] == ("jane@example.com", "555-0100")
        assert all("://" not in contact for contact in content.contacts)
        assert len(content.contacts) == 5

    def test_experience_fields(self):
        content = content_from_portfolio(
            {
                "experience": [
                    {
                        "company": "Acme",
                        "role": "Engineer",
                        "period": "2020 - 2022",
                        "description": "- Shipped",
                    }
                ]
            }
        )
        (entry,) = content.experience
        assert entry.role == "Engineer"
        assert entry.organization == "Acme"
        assert entry.period == "2020 - 2022"

    def test_projects_and_education(self):
        content = content_from_portfolio(
            {
                "projects": [
                    {"title": "Tool", "technologies": ["Python", " "], "link": None},
                ],
                "education": [{"institution": "MIT", "degree": "B.S.", "year": "2015"}],
            }
        )
        assert content.projects[0].technologies == ("Python",)
        assert content.projects[0].link == ""
        assert content.education[0].institution == "MIT"

    def test_accepts_validated_payload(self):
        payload = PortfolioPayload(hero_title="Jane", skills=["Python", " "])
        assert content_from_portfolio(payload).skills == ("Python",)

    def test_invalid_shape_raises(self):
        with pytest.raises(ValidationError):
            content_from_portfolio({"skills": "not-a-list"})


class TestNullPortfolioFields:
    @pytest.mark.parametrize(
        "field",
        ["hero_title", "hero_subtitle", "about_text", "skills", "projects", "experience", "education", "links"],
    )
    def test_null_top_level_field(self, field):
        content = content_from_portfolio({"hero_title": "Jane - Dev", field: None})
        assert content.header.name in ("Jane", "Name")

    def test_null_links_give_no_contacts(self):
        assert content_from_portfolio({"links": None}).contacts == ()

    def test_null_link_values(self):
        content = content_from_portfolio({"links": {"email": None, "github": "github.com/jane"}})
        assert content.contacts == ("github.com/jane",)

    def test_null_experience_fields(self):
        content = content_from_portfolio(
            {"experience": [{"company": "Acme", "role": "SWE", "period": None, "description": None}]}
        )
        (entry,) = content.experience
        assert entry.period == ""
        assert entry.description == ""

    @pytest.mark.parametrize(
        "record",
        [
            {"projects": [{"title": "Tool", "description": None, "technologies": None}]},
            {"projects": [{"title": "Tool", "technologies": ["Go", None]}]},
            {"education": [{"institution": None, "degree": "B.S.", "year": None}]},
            {"skills": ["Python", None]},
            {"experience": [None]},
        ],
    )
    def test_null_nested_values(self, record):
        content = content_from_portfolio(record)
        assert content.header.name == "Name"

    def test_renders_with_nulls(self):
        document = render_portfolio(
            {
                "hero_title": "Jane - Dev",
                "skills": None,
                "links": None,
                "experience": [{"role": "SWE", "period": None, "description": None}],
            }
        )
        assert document.page_count == 1
