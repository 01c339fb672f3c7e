"""Tests for prompt builders."""

import pytest

from designengine.models.requests import TextileOptions
from designengine.prompts import (
    TEXTILE_PROMPT_TEMPLATES,
    build_design_prompt,
    build_edit_prompt,
    build_textile_design_prompt,
    get_prompt_template,
)


def test_design_prompt_includes_category_only_when_given():
    with_category = build_design_prompt("linen summer set", "Dress", "Long flowing silhouettes")
    without_category = build_design_prompt("linen summer set")

    assert "Category: Dress" in with_category
    assert "Description: Long flowing silhouettes" in with_category
    assert "[GARMENT CATEGORY]" not in without_category
    assert "linen summer set" in without_category


def test_textile_prompt_carries_attribution_and_direction():
    options = TextileOptions(artist_name=" Kenta Sato ", textile_title="Morning Forest", category="Coat")

    prompt = build_textile_design_prompt(options, "Make it a statement piece")

    assert "- Artist: Kenta Sato\n" in prompt
    assert '- Artwork: "Morning Forest"' in prompt
    assert "Category: Coat" in prompt
    assert "[USER DIRECTION]\nMake it a statement piece" in prompt


def test_textile_prompt_omits_blank_direction():
    options = TextileOptions(artist_name="Kenta Sato", textile_title="Morning Forest", category="Coat")

    assert "[USER DIRECTION]" not in build_textile_design_prompt(options, "   ")


def test_edit_prompt_wraps_instruction():
    assert "change the collar to navy" in build_edit_prompt("change the collar to navy")


def test_prompt_templates_lookup():
    assert [template.id for template in TEXTILE_PROMPT_TEMPLATES] == ["classic", "casual", "statement", "minimal"]
    assert get_prompt_template("minimal").label == "Minimal"

    with pytest.raises(KeyError):
        get_prompt_template("unknown")
