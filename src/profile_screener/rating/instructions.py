"""
Evaluation Instructions and Profile Serialization.

The instructions are fixed for every call. The document is the enriched
profile rendered as JSON and cut to a bounded length.
"""

from __future__ import annotations

import json
from typing import Any, Dict

TRUNCATION_MARKER = "\n...[truncated]"

EVALUATION_INSTRUCTIONS = (
    "You are screening candidates for a startup incubator. "
    "Assess how likely the person described by the profile below is to "
    "found and build a venture-scale company. Weigh prior founding or early "
    "employee experience, technical or domain depth, evidence of ownership "
    "and shipped outcomes, and trajectory. Do not invent facts that are not "
    "in the profile; score conservatively when information is missing.\n\n"
    "Respond with a JSON object with exactly two fields:\n"
    '  "score": an integer from 1 (no founder signal) to 10 (exceptional founder signal)\n'
    '  "reasoning": one or two sentences justifying the score, at most {max_chars} characters\n'
    "Return only the JSON object."
)


def build_instructions(max_reasoning_chars: int) -> str:
    return EVALUATION_INSTRUCTIONS.format(max_chars=max_reasoning_chars)


def serialize_profile(profile: Any, max_chars: int) -> str:
    """
    Render a profile as JSON, truncated to max_chars.

    Text past the limit is replaced by TRUNCATION_MARKER, so the result is
    at most max_chars + len(TRUNCATION_MARKER) characters long.
    """
    if isinstance(profile, str):
        text = profile
    else:
        text = json.dumps(profile, ensure_ascii=False, default=str, indent=1)

    if len(text) <= max_chars:
        return text
    return text[:max_chars] + TRUNCATION_MARKER


def verdict_schema(max_reasoning_chars: int) -> Dict[str, Any]:
    """JSON schema the oracle response is constrained to."""
    return {
        "type": "object",
        "properties": {
            "score": {"type": "integer", "minimum": 1, "maximum": 10},
            "reasoning": {
                "type": "string",
                "description": f"At most {max_reasoning_chars} characters.",
            },
        },
        "required": ["score", "reasoning"],
        "additionalProperties": False,
    }
