"""Tests for compression tiers, limits and text shortening."""

from __future__ import annotations

import pytest

from resume_fit.layout.bullets import split_bullets
from resume_fit.layout.compressor import (
    CompressionTier,
    classify,
    compress_bullets,
    compress_summary,
    content_density,
    limits,
    select_tier,
    shorten_bullet,
)
from resume_fit.layout.config import baseline_config
from resume_fit.layout.resolver import resolve_layout
from resume_fit.models.content import ExperienceEntry, ResumeContent, ResumeHeader
from resume_fit.templates import get_template

from conftest import make_experience

_TIER_ORDER = [CompressionTier.NONE, CompressionTier.MEDIUM, CompressionTier.HIGH]


@pytest.fixture
def config():
    return baseline_config(get_template("classic"))


class TestSplitBullets:
    def test_newlines(self):
        assert split_bullets("One\nTwo\n\nThree") == ["One", "Two", "Three"]

    def test_leading_dashes(self):
        assert split_bullets("- Led a team\n- Shipped v2") == ["Led a team", "Shipped v2"]

    def test_bullet_glyphs(self):
        assert split_bullets("• First • Second") == ["First", "Second"]

    def test_standalone_dash_splits(self):
        assert split_bullets("Built APIs - Wrote docs") == ["Built APIs", "Wrote docs"]

    def test_hyphenated_words_stay_whole(self):
        assert split_bullets("Built end-to-end tests") == ["Built end-to-end tests"]

    def test_empty(self):
        assert split_bullets("") == []
        assert split_bullets(" \n - \n") == []


class TestLimits:
    def test_reference_values(self):
        none, medium, high = (limits(t) for t in _TIER_ORDER)
        assert (none.summary_max_chars, none.max_bullets_per_role, none.bullet_max_chars) == (500, 6, 200)
        assert (medium.summary_max_chars, medium.max_bullets_per_role, medium.bullet_max_chars) == (350, 4, 140)
        assert (high.summary_max_chars, high.max_bullets_per_role, high.bullet_max_chars) == (200, 3, 100)
        assert none.max_projects is None
        assert medium.max_projects == 3
        assert high.max_projects == 2

    def test_strictly_monotonic(self):
        none, medium, high = (limits(t) for t in _TIER_ORDER)
        for looser, tighter in ((none, medium), (medium, high)):
            assert tighter.summary_max_chars < looser.summary_max_chars
            assert tighter.max_bullets_per_role < looser.max_bullets_per_role
            assert tighter.bullet_max_chars < looser.bullet_max_chars
            assert tighter.project_description_max_chars < looser.project_description_max_chars
        assert high.max_projects < medium.max_projects


class TestClassify:
    def test_small_content_is_none(self, config, full_content):
        assert classify(full_content, config, 1) == CompressionTier.NONE

    def test_boundaries(self, config):
        content = ResumeContent(
            header=ResumeHeader(name="Jane"),
            experience=make_experience(9, 3, 60),
        )
        density = content_density(content, config, 1)
        expected = (
            CompressionTier.NONE
            if density <= 1.0
            else CompressionTier.MEDIUM
            if density <= 1.5
            else CompressionTier.HIGH
        )
        assert classify(content, config, 1) == expected

    def test_two_pages_halve_density(self, config, full_content):
        one = content_density(full_content, config, 1)
        two = content_density(full_content, config, 2)
        assert two == pytest.approx(one / 2)

    def test_monotonic_in_summary_length(self, config):
        previous = 0
        for length in range(0, 8000, 400):
            content = ResumeContent(
                header=ResumeHeader(name="Jane"),
                summary="x" * length,
                experience=make_experience(3, 4),
            )
            rank = _TIER_ORDER.index(classify(content, config, 1))
            assert rank >= previous
            previous = rank
        assert previous == 2

    def test_monotonic_in_bullet_count(self, config):
        previous = 0
        for bullets in range(0, 30, 2):
            content = ResumeContent(
                header=ResumeHeader(name="Jane"),
                experience=make_experience(4, bullets),
            )
            rank = _TIER_ORDER.index(classify(content, config, 1))
            assert rank >= previous
            previous = rank
        assert previous == 2

    def test_deterministic(self, config, overflowing_content):
        assert classify(overflowing_content, config, 1) == classify(overflowing_content, config, 1)


class TestCompressSummary:
    def test_short_summary_unchanged(self):
        assert compress_summary("Short and sweet.", 200) == "Short and sweet."

    def test_keeps_whole_sentences(self):
        assert compress_summary("One. Two. Three.", 9) == "One. Two."

    def test_stops_before_overflowing_sentence(self):
        text = "First sentence here. Second sentence is rather long indeed."
        assert compress_summary(text, 30) == "First sentence here."

    def test_hard_truncates_single_long_sentence(self):
        text = "word " * 200
        result = compress_summary(text, 200)
        assert result.endswith("...")
        assert len(result) <= 200

    @pytest.mark.parametrize("max_chars", [200, 350, 500])
    def test_never_exceeds_limit(self, max_chars):
        text = "This is a sentence. " * 60 + "x" * 900
        assert len(compress_summary(text, max_chars)) <= max_chars

    def test_idempotent(self):
        text = "Alpha beta gamma. " * 40
        once = compress_summary(text, 200)
        assert compress_summary(once, 200) == once


class TestShortenBullet:
    def test_short_bullet_unchanged(self):
        assert shorten_bullet("Shipped v2", 100) == "Shipped v2"

    def test_cuts_at_last_whitespace(self):
        text = "word " * 50
        result = shorten_bullet(text, 100)
        assert len(result) <= 100
        assert result.endswith("word...")

    def test_hard_cut_without_whitespace(self):
        result = shorten_bullet("x" * 150, 100)
        assert result == "x" * 97 + "..."

    def test_hard_cut_when_whitespace_too_early(self):
        text = "a" * 60 + " " + "b" * 100
        result = shorten_bullet(text, 100)
        assert result == "a" * 60 + " " + "b" * 36 + "..."
        assert len(result) == 100

    @pytest.mark.parametrize("max_chars", [100, 140, 200])
    def test_never_exceeds_limit(self, max_chars):
        text = "Improved throughput of the ingestion service by rewriting hot paths " * 5
        assert len(shorten_bullet(text, max_chars)) <= max_chars

    def test_idempotent(self):
        once = shorten_bullet("Improved throughput " * 20, 100)
        assert shorten_bullet(once, 100) == once


class TestCompressBullets:
    def test_caps_bullet_count(self):
        description = "\n".join(f"Bullet {i}" for i in range(10))
        result = compress_bullets(description, limits(CompressionTier.HIGH))
        assert result == ["Bullet 0", "Bullet 1", "Bullet 2"]

    def test_shortens_each_bullet(self):
        description = "\n".join("z " * 120 for _ in range(2))
        result = compress_bullets(description, limits(CompressionTier.MEDIUM))
        assert len(result) == 2
        assert all(len(b) <= 140 for b in result)


class TestHighDensityScenario:
    """600-char summary and five roles of eight 150-char bullets on one page."""

    @pytest.fixture
    def content(self):
        summary = ("Seasoned engineer building resilient distributed platforms " * 11)[:599] + "."
        return ResumeContent(
            header=ResumeHeader(name="Jane Doe", title="Staff Engineer"),
            summary=summary,
            experience=make_experience(5, 8, 150),
        )

    def test_tier_is_high(self, content, config):
        assert len(content.summary) == 600
        assert classify(content, config, 1) == CompressionTier.HIGH

    def test_summary_truncated(self, content):
        result = compress_summary(content.summary, limits(CompressionTier.HIGH).summary_max_chars)
        assert result.endswith("...")
        assert len(result) <= 200

    def test_roles_capped(self, content):
        high = limits(CompressionTier.HIGH)
        for entry in content.experience:
            bullets = compress_bullets(entry.description, high)
            assert len(bullets) == 3
            assert all(len(b) <= 100 for b in bullets)


class TestLightScenario:
    def test_single_short_role_on_two_pages(self, config):
        content = ResumeContent(
            header=ResumeHeader(name="Jane Doe"),
            experience=(ExperienceEntry(role="SWE", organization="Acme", description="- Built APIs\n- Wrote docs"),),
        )
        tier = classify(content, config, 2)
        assert tier == CompressionTier.NONE
        assert compress_bullets(content.experience[0].description, limits(tier)) == [
            "Built APIs",
            "Wrote docs",
        ]


class TestSelectTier:
    """Tier selection once the shrink ladder has resolved a layout."""

    @pytest.fixture
    def content(self):
        summary = ("Engineer focused on dependable systems. " * 11)[:419] + "."
        return ResumeContent(
            header=ResumeHeader(name="Jane Doe"),
            summary=summary,
            experience=make_experience(5, 4, 120),
        )

    def test_fits_after_ladder_is_uncompressed(self, content, config):
        resolved = resolve_layout(content, get_template("classic"), 1)
        assert resolved.shrink_step == 1
        assert classify(content, config, 1) == CompressionTier.MEDIUM
        assert select_tier(content, resolved, config, 1) == CompressionTier.NONE

    def test_overflow_after_ladder_uses_baseline_density(self, overflowing_content, config):
        resolved = resolve_layout(overflowing_content, get_template("classic"), 1)
        assert select_tier(overflowing_content, resolved, config, 1) == CompressionTier.HIGH

    def test_high_density_scenario_stays_high(self, config):
        content = ResumeContent(
            header=ResumeHeader(name="Jane Doe", title="Staff Engineer"),
            summary=("Seasoned engineer building resilient distributed platforms " * 11)[:599] + ".",
            experience=make_experience(5, 8, 150),
        )
        resolved = resolve_layout(content, get_template("classic"), 1)
        assert select_tier(content, resolved, config, 1) == CompressionTier.HIGH
