import json
import re

from soar.schema.errors import ParseError

_FENCE_OPEN = re.compile(r"^```(?:json)?\s*")
_FENCE_CLOSE = re.compile(r"\s*```$")


def strip_fences(text: str) -> str:
    text = _FENCE_OPEN.sub("", text.strip())
    return _FENCE_CLOSE.sub("", text.strip())


def extract_json(text: str):
    """
    Extract the JSON object from model output.

    Tries the whole text first, then the outermost {...} span.
    Raises ParseError when neither parses.
    """
    if not text or not isinstance(text, str):
        raise ParseError("Empty response from model")

    text = strip_fences(text)
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    match = re.search(r"\{.*\}", text, re.DOTALL)
    if not match:
        raise ParseError("Could not find a JSON object in model response")

    try:
        return json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise ParseError(f"Could not parse JSON from model response: {e}") from e
