"""Best-effort repair of near-valid JSON emitted by text models.

Model output is usually valid JSON wrapped in a markdown fence, or JSON that lost
a comma or brace to truncation. The rules here undo exactly those quirks:

1. Strip a leading/trailing code fence (```json ... ``` or ``` ... ```)
2. Remove trailing commas before a closing brace/bracket
3. Close an object and add the comma when a number is followed by a new ``{``
4. Close an object when a bare ``: <number>`` line is followed by ``,`` or ``]``

This is intentionally a short list of regex transforms, not a lenient parser.
"""

import json
import logging
import re
from typing import Any, Optional, TypeVar, overload

from pydantic import BaseModel

from designengine.models.errors import MalformedJSONError

logger = logging.getLogger(__name__)

TModel = TypeVar("TModel", bound=BaseModel)

_FENCE_OPEN = re.compile(r"^```[\w-]*[ \t]*\n?")
_FENCE_CLOSE = re.compile(r"\n?```$")
_TRAILING_COMMA = re.compile(r",(\s*[}\]])")
_MISSING_ENTRY_COMMA = re.compile(r"(\d+)\s*\n\s*\{")
_UNCLOSED_BEFORE_COMMA = re.compile(r"(:\s*[\d.]+)\s*\n(\s*),")
_UNCLOSED_BEFORE_BRACKET = re.compile(r"(:\s*[\d.]+)\s*\n(\s*)\]")
_UNCLOSED_WEIGHT = re.compile(r'("weight":\s*[\d.]+)(\s*)(,|\])')


def repair(text: str) -> str:
    """Apply the ordered repair rules to ``text`` and return the result."""
    json_text = text.strip()

    if json_text.startswith("```"):
        json_text = _FENCE_OPEN.sub("", json_text, count=1)
        json_text = _FENCE_CLOSE.sub("", json_text, count=1)

    json_text = _TRAILING_COMMA.sub(r"\1", json_text)
    json_text = _MISSING_ENTRY_COMMA.sub("\\1},\n    {", json_text)
    json_text = _UNCLOSED_BEFORE_COMMA.sub(r"\1 }\2,", json_text)
    json_text = _UNCLOSED_BEFORE_BRACKET.sub(r"\1 }\2]", json_text)

    return json_text


def _close_weight_objects(json_text: str) -> str:
    """Second-pass rule: close objects that end in a numeric "weight" field."""
    return _UNCLOSED_WEIGHT.sub(r"\1 }\2\3", json_text)


@overload
def parse_with_repair(text: str) -> Any: ...


@overload
def parse_with_repair(text: str, model: type[TModel]) -> TModel: ...


def parse_with_repair(text: str, model: Optional[type[TModel]] = None) -> Any:
    """
    Repair and parse JSON text, optionally validating it into a pydantic model.

    Args:
        text: Raw model output
        model: Optional pydantic model class to validate the parsed data into

    Returns:
        Parsed JSON data, or a model instance when ``model`` is given

    Raises:
        MalformedJSONError: If the text still fails to parse after both repair passes
        pydantic.ValidationError: If the parsed data does not fit ``model``
    """
    repaired = repair(text)
    try:
        data = json.loads(repaired)
    except json.JSONDecodeError as first_error:
        logger.debug(f"🔧 [JSONRepair] First parse failed ({first_error}), closing weight objects")
        try:
            data = json.loads(_close_weight_objects(repaired))
        except json.JSONDecodeError as e:
            raise MalformedJSONError(f"Could not parse model output as JSON: {e}", text=text) from e

    if model is not None:
        return model.model_validate(data)
    return data
