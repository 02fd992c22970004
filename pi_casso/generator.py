"""AI palette generation.

Asks Gemini for ten hex colors matching a free-text theme. The model is put in
JSON mode with a schema requiring every digit key, and the answer is still
validated locally: anything that is not a complete palette is reported as a
:class:`GenerationError`, never returned.
"""

import json
import logging
import os
from typing import Any, Optional

from google import genai
from google.genai import types

from pi_casso.palette import DIGITS, PaletteError, make_palette
from pi_casso.types import PaletteMapping

logger = logging.getLogger(__name__)

DEFAULT_MODEL: str = "gemini-2.5-flash"
API_KEY_ENV_VARS: tuple[str, ...] = ("GEMINI_API_KEY", "API_KEY")


class GenerationError(RuntimeError):
    """Palette generation failed (credentials, network or malformed answer)."""


def build_prompt(theme: str) -> str:
    return (
        "Create a color palette of 10 distinct hex codes corresponding to digits 0-9 "
        f'based on the theme: "{theme.strip()}".\n'
        "Ensure the colors are visually appealing together.\n"
        'Return strictly a JSON object where keys are "0" through "9" and values are '
        'hex color strings (e.g. "#FF0000").'
    )


def build_config() -> types.GenerateContentConfig:
    schema = types.Schema(
        type=types.Type.OBJECT,
        properties={digit: types.Schema(type=types.Type.STRING) for digit in DIGITS},
        required=list(DIGITS),
    )
    return types.GenerateContentConfig(
        response_mime_type="application/json",
        response_schema=schema,
    )


def resolve_api_key(api_key: Optional[str] = None) -> str:
    """Explicit key first, then ``GEMINI_API_KEY`` / ``API_KEY`` from the env."""
    if api_key:
        return api_key
    for name in API_KEY_ENV_VARS:
        value = os.environ.get(name)
        if value:
            return value
    raise GenerationError(
        f"API key is missing. Set one of: {', '.join(API_KEY_ENV_VARS)}."
    )


def parse_palette_response(text: Optional[str]) -> PaletteMapping:
    """Turn the model's JSON answer into a validated palette."""
    if not text:
        raise GenerationError("No response text from the model.")
    try:
        payload = json.loads(text)
    except ValueError as e:
        raise GenerationError(f"Response is not valid JSON: {text[:80]!r}") from e
    if not isinstance(payload, dict):
        raise GenerationError(f"Expected a JSON object, got {type(payload).__name__}")
    try:
        return make_palette(payload)
    except PaletteError as e:
        raise GenerationError(f"Response is not a complete palette: {e}") from e


def generate_palette(
    theme: str,
    *,
    client: Optional[Any] = None,
    api_key: Optional[str] = None,
    model: str = DEFAULT_MODEL,
) -> PaletteMapping:
    """Generate a palette for ``theme``.

    Arguments:
        theme: Non-empty free-text theme, e.g. ``"Cyberpunk"``.
        client: A ``genai.Client`` (or compatible object); created from the
            resolved API key when omitted.
        api_key: Overrides the environment lookup when building a client.
        model: Gemini model name.

    Raises:
        GenerationError: On blank theme, missing credentials, request failure
            or an unusable response.
    """
    if not theme or not theme.strip():
        raise GenerationError("Theme must not be empty.")
    if client is None:
        client = genai.Client(api_key=resolve_api_key(api_key))

    try:
        response = client.models.generate_content(
            model=model,
            contents=build_prompt(theme),
            config=build_config(),
        )
    except Exception as e:
        logger.error("Palette generation request failed for theme %r: %s", theme, e)
        raise GenerationError(f"Palette generation request failed: {e}") from e

    try:
        return parse_palette_response(response.text)
    except GenerationError as e:
        logger.error("Unusable palette response for theme %r: %s", theme, e)
        raise
