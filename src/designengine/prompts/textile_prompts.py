"""Instruction text for applying textile artwork to garments."""

from pydantic import BaseModel

from designengine.models.requests import TextileOptions


class PromptTemplate(BaseModel):
    """Preset user direction offered alongside the free-text prompt."""

    id: str
    label: str
    prompt: str


TEXTILE_PROMPT_TEMPLATES: list[PromptTemplate] = [
    PromptTemplate(
        id="classic",
        label="Classic",
        prompt="Classic tailoring with artistic textile as hero. Refined silhouette, let the art speak through quality construction.",
    ),
    PromptTemplate(
        id="casual",
        label="Casual",
        prompt="Relaxed everyday style featuring the artistic textile. Comfortable fit, pattern prominence, approachable fashion.",
    ),
    PromptTemplate(
        id="statement",
        label="Statement",
        prompt="Bold statement piece where the art commands attention. Striking silhouette, gallery-worthy presentation.",
    ),
    PromptTemplate(
        id="minimal",
        label="Minimal",
        prompt="Minimal design that frames the textile art elegantly. Clean lines, strategic pattern placement, quiet sophistication.",
    ),
]


def get_prompt_template(template_id: str) -> PromptTemplate:
    """Look up a preset by id. Raises KeyError for unknown ids."""
    for template in TEXTILE_PROMPT_TEMPLATES:
        if template.id == template_id:
            return template
    raise KeyError(template_id)


def build_textile_design_prompt(options: TextileOptions, user_prompt: str = "") -> str:
    """Instruction that treats the first reference image as the artist's original work."""
    user_block = f"[USER DIRECTION]\n{user_prompt}\n\n" if user_prompt.strip() else ""

    return f"""You are an AI assistant specialised in applying textile art to fashion items.
Apply the textile pattern to the garment beautifully while respecting the artist's work.

[PRIMARY TEXTILE - HERO ELEMENT]
- Artist: {options.artist_name}
- Artwork: "{options.textile_title}"
- This is original artwork - preserve the artist's vision with utmost respect
- The textile pattern is the HERO of the design - the garment is its canvas
- Never distort, unnaturally stretch, or crop the core artistic motif

[TEXTILE APPLICATION - CRITICAL]
- Apply pattern with appropriate scale for the garment type
- Maintain pattern continuity and flow across seams and construction lines
- Consider how the pattern interacts with garment movement and drape
- Pattern should align naturally at seams where possible
- The result should feel like wearable art, not just patterned clothing

[GARMENT CATEGORY]
Category: {options.category}
Description: {options.category_description}
Generate a design specifically for this garment category. The output must clearly be this type of garment.

[COMPOSITION - CRITICAL]
- MUST show exactly ONE model in FULL-BODY view (head to toe visible)
- Camera angle: straight-on or slight angle, showing entire body from head to feet
- NO close-up shots of garments or details
- NO cropped views (waist-up, torso only, etc.)
- NO flat lay or product-only shots
- NO multiple models or collage layouts
- The model should be centered, standing naturally, with full outfit visible
- Background: clean studio environment, gallery-white or neutral

[STYLING]
- Art-forward, gallery-worthy presentation
- Let the textile art speak - garment silhouette should complement, not compete
- Consider appropriate innerwear and accessories that don't distract from the art
- Model styling should be minimal and elegant

{user_block}[ARTIST RESPECT]
- This is original artwork created by an artist with intellectual disabilities
- Honor the artistic intent, visual language, and emotional expression
- The textile is the hero - showcase it with dignity and beauty

[DIVERSITY]
Generate unique variations. Each design should explore different:
- Silhouette interpretations
- Pattern placement and scale
- Color interaction with the textile art
- Construction details that enhance the art

[NEGATIVE]
- NO logos, brand names, monograms, or brand identifiers
- NO text, labels, watermarks, or typography
- NO 3D render look, illustration, or painting style
- NO close-up or detail shots of clothing
- NO cropped or partial body views
- NO flat lay or product-only photography
- NO multiple models or split-screen layouts
- NO distortion of the original textile art
- Must look like a real fashion photograph with single full-body model

Generate ONE unique design variation that draws out the full appeal of the textile art."""


def build_textile_inspiration_prompt(artist_name: str, textile_title: str) -> str:
    """Instruction for a textile-focused creative brief."""
    return f"""Analyse this textile art and write fashion design inspiration.

Artist: {artist_name}
Artwork: "{textile_title}"

Use this format:
- Characteristics of the art (2-3 sentences)
- Recommended silhouette directions (2-3 points)
- Material and texture suggestions (2-3 points)
- How to use the color palette

Respect the artist's expression and propose designs where the textile is the hero."""
