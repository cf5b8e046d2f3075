"""
Response Validator - Validate Upstream Responses.

Validates what comes back from the two upstream services:
    - Enrichment bodies: bare list or object wrapping the list
    - Oracle verdicts: exactly `score` (int 1..10) and `reasoning` (str)

Design Notes:
    - Enrichment problems raise UpstreamError (fatal for the run)
    - Verdict problems raise ItemScoringError (fatal for one item only)
    - Strict types: "7" or True are not scores
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from profile_screener.domain.value_objects import OracleVerdict
from profile_screener.resilience.errors import ItemScoringError, UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_LIST_FIELDS = ("results", "data", "output")


def normalize_enrichment_body(
    body: Any,
    list_fields: Sequence[str] = DEFAULT_LIST_FIELDS,
) -> List[Any]:
    """
    Normalize an enrichment response body to a list of records.

    Args:
        body: Decoded response body
        list_fields: Field names that may wrap the list, checked in order

    Returns:
        The records, in the order received

    Raises:
        UpstreamError: If the body holds no record list
    """
    if isinstance(body, list):
        return body

    if isinstance(body, Mapping):
        for field_name in list_fields:
            value = body.get(field_name)
            if isinstance(value, list):
                return value
        raise UpstreamError(
            f"malformed enrichment response: no record list under "
            f"{list(list_fields)} (keys: {sorted(str(k) for k in body.keys())})"
        )

    raise UpstreamError(
        f"malformed enrichment response: expected list or object, "
        f"got {type(body).__name__}"
    )


def validate_verdict(
    raw: Any,
    max_reasoning_chars: Optional[int] = None,
    identifier: Optional[str] = None,
) -> OracleVerdict:
    """
    Parse and validate a raw oracle verdict.

    Args:
        raw: JSON text, bytes, or mapping returned by the oracle
        max_reasoning_chars: Upper bound for the reasoning length
        identifier: Identifier being scored, attached to errors

    Returns:
        Validated OracleVerdict

    Raises:
        ItemScoringError: If the verdict is missing, unparsable or invalid
    """
    if raw is None:
        raise ItemScoringError("empty oracle response", identifier=identifier)

    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8", errors="replace")

    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            raise ItemScoringError("empty oracle response", identifier=identifier)
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise ItemScoringError(
                f"unparsable oracle response: {e.msg} at position {e.pos}",
                identifier=identifier,
            ) from e

    if not isinstance(raw, Mapping):
        raise ItemScoringError(
            f"oracle response must be an object, got {type(raw).__name__}",
            identifier=identifier,
        )

    try:
        verdict = OracleVerdict.model_validate(dict(raw))
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'body'}: {err['msg']}"
            for err in e.errors()
        )
        raise ItemScoringError(
            f"invalid oracle response: {problems}", identifier=identifier
        ) from e

    if max_reasoning_chars is not None and len(verdict.reasoning) > max_reasoning_chars:
        raise ItemScoringError(
            f"invalid oracle response: reasoning has {len(verdict.reasoning)} chars "
            f"> max={max_reasoning_chars}",
            identifier=identifier,
        )

    try:
        verdict.reasoning.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ItemScoringError(
            f"invalid oracle response: reasoning is not valid text ({e.reason})",
            identifier=identifier,
        ) from e

    return verdict
