from __future__ import annotations

import copy
import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

SCORING_DEFAULT: dict[str, Any] = {"score": 1, "bullets": []}
FILTERS_DEFAULT: dict[str, Any] = {}


def decode_payload(raw_text: str | None, default: dict[str, Any]) -> dict[str, Any]:
    """Parse model output as a JSON object, falling back to ``default``.

    Never raises: unparsable text and non-object JSON both degrade to a
    fresh copy of the default payload.
    """
    try:
        parsed = json.loads(raw_text or "")
    except (TypeError, ValueError, RecursionError) as exc:
        logger.warning("llm_payload_unparsable chars=%s: %s", len(raw_text or ""), exc)
        return copy.deepcopy(default)

    if not isinstance(parsed, dict):
        logger.warning("llm_payload_not_object type=%s", type(parsed).__name__)
        return copy.deepcopy(default)
    return parsed
