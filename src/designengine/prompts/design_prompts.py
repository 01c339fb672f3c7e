"""Instruction text for fashion design, edit, annotation and inspiration calls."""

from typing import Optional

DESIGN_ROLE = """You are an AI fashion design assistant.
Extract the elements of the reference images and produce a NEW design proposal.

Core rules:
- Never copy brand logos or existing designs directly
- Abstract silhouette, material feel, color palette and details from the references
- Output should look like a fashion look product photograph
- Background: plain white or light grey
- No text, labels or watermarks"""

COMPOSITION_BLOCK = """[COMPOSITION - CRITICAL]
- MUST show exactly ONE model in FULL-BODY view (head to toe visible)
- Camera angle: straight-on or slight angle, showing entire body from head to feet
- NO close-up shots of garments or details
- NO cropped views (waist-up, torso only, etc.)
- NO flat lay or product-only shots
- NO multiple models or collage layouts
- The model should be centered, standing naturally, with full outfit visible"""

DIVERSITY_BLOCK = """[DESIGN DIVERSITY]
Each design should explore a DIFFERENT design approach. Vary silhouettes, construction techniques, fabric choices, and color palettes.
Consider these techniques: clean minimal, structured tailoring, soft draping, deconstructed, volume play, layered composition, precision sportif, neo-classical.
Use specific construction terminology: princess seam, French seam, raglan, saddle shoulder, set-in sleeve, concealed placket, stand collar, shawl lapel, welt pocket, paper-bag waist.
Explore diverse aesthetics: quiet luxury, dark romanticism, Mediterranean ease, Japanese minimalism, power tailoring, soft futurism, artisanal craft."""

STYLING_BLOCK = """[COMPLETE OUTFIT STYLING]
- Show a FULL coordinated look, not just the main garment
- Include appropriate innerwear visible at neckline
- Show stylish footwear that matches the outfit's vibe
- Include accessories where appropriate: belt, bag, scarf, watch, jewelry"""

NEGATIVE_BLOCK = """[NEGATIVE]
- NO logos, brand names, monograms, or brand identifiers
- NO text, labels, watermarks, or typography
- NO 3D render look, illustration, or painting style
- NO close-up or detail shots of clothing
- NO cropped or partial body views
- NO flat lay or product-only photography
- NO multiple models or split-screen layouts
- Must look like a real fashion photograph with single full-body model"""

ANNOTATION_PROMPT = """You are the archivist for a fashion planning team.
Analyse this image and answer in the JSON format below. Give 3 to 12 tags, in English. Avoid vague wording.

{
  "caption": "Short description of the image (1-2 sentences)",
  "tags": ["techwear", "oversized", "layered", ...],
  "silhouette": "oversized / boxy / fitted / A-line etc.",
  "material": "main material (nylon / wool blend / cotton etc.)",
  "pattern": "pattern (solid / stripe / check / floral etc.)",
  "details": "distinctive details (zip, drawstring, utility pockets etc.)",
  "mood": "mood (urban / high-fashion street / casual etc.)",
  "color_palette": ["black", "charcoal", "acid green"]
}

Return JSON only."""

INSPIRATION_PROMPT = """Analyse these fashion images and write inspiration text for a new collection.

Use this format:
- Collection concept (2-3 sentences)
- Keywords (5-8)
- Recommended design directions (3-5 points)"""


def _category_block(category: Optional[str], category_description: Optional[str]) -> str:
    if not category:
        return ""
    lines = ["[GARMENT CATEGORY]", f"Category: {category}"]
    if category_description:
        lines.append(f"Description: {category_description}")
    lines.append(
        "Generate designs specifically for this garment category. The output must clearly be this type of garment."
    )
    return "\n".join(lines)


def build_design_prompt(
    prompt: str,
    category: Optional[str] = None,
    category_description: Optional[str] = None,
) -> str:
    """Full instruction for one variation of a design batch."""
    sections = [
        DESIGN_ROLE,
        _category_block(category, category_description),
        COMPOSITION_BLOCK,
        DIVERSITY_BLOCK,
        STYLING_BLOCK,
        f"User direction:\n{prompt}",
        "Generate ONE unique variation. Vary color, material, details and silhouette to create diversity.",
        NEGATIVE_BLOCK,
    ]
    return "\n\n".join(section for section in sections if section)


def build_single_design_prompt(prompt: str) -> str:
    """Shorter instruction used when callers stream designs one at a time."""
    return "\n\n".join(
        [
            DESIGN_ROLE,
            COMPOSITION_BLOCK,
            f"User direction:\n{prompt}",
            "Generate ONE unique variation.",
        ]
    )


def build_edit_prompt(instruction: str) -> str:
    """Instruction asking for only the described change, preserving everything else."""
    return (
        "Using this image as the base, apply ONLY the following change. "
        "Keep every other element as close to the original as possible:\n\n"
        f"{instruction}\n\n"
        "Make the change look natural. Keep the product-photograph quality and keep the background "
        "and composition unchanged.\n"
        "Do not add text, labels or watermarks."
    )
