"""Prompt builders for design and textile generation."""

from designengine.prompts.design_prompts import (
    ANNOTATION_PROMPT,
    INSPIRATION_PROMPT,
    build_design_prompt,
    build_edit_prompt,
    build_single_design_prompt,
)
from designengine.prompts.textile_prompts import (
    TEXTILE_PROMPT_TEMPLATES,
    PromptTemplate,
    build_textile_design_prompt,
    build_textile_inspiration_prompt,
    get_prompt_template,
)

__all__ = [
    "ANNOTATION_PROMPT",
    "INSPIRATION_PROMPT",
    "build_design_prompt",
    "build_edit_prompt",
    "build_single_design_prompt",
    "TEXTILE_PROMPT_TEMPLATES",
    "PromptTemplate",
    "build_textile_design_prompt",
    "build_textile_inspiration_prompt",
    "get_prompt_template",
]
