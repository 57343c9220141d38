from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, TypedDict

from .engine import ReadabilityEngine
from .errors import EmptyInput, InvalidRequest, InvalidVariant, UnsupportedLanguage
from .formulas import FormulaVariant, parse_variant

LOGGER = logging.getLogger(__name__)

STATUS_OK = 0
STATUS_FAILED = -1


@dataclass(slots=True)
class ReadabilityRequest:
    """A decoded readability request."""

    check_string: str
    correlation_id: str | None = None
    readability_type: str | None = None
    language: str | None = None


class RequestPayload(TypedDict):
    CheckString: str | None
    CorrelationID: str | None
    ReadabilityType: str | None
    Language: str | None


class ResultPayload(TypedDict):
    Readability: float | None
    Message: str | None
    StatusCode: int
    ErrorType: str | None


class ResponsePayload(TypedDict):
    ReadabilityRequest: RequestPayload
    Response: ResultPayload


def _optional_str(
    payload: Mapping[str, Any], key: str, *, blank_is_absent: bool = False
) -> str | None:
    value = payload.get(key)
    if isinstance(value, str) and blank_is_absent and not value.strip():
        return None
    if value is None or isinstance(value, str):
        return value
    raise InvalidRequest(f"{key} must be a string when set.")


def parse_request(payload: Any) -> ReadabilityRequest:
    """Decode a request mapping using the CheckString/CorrelationID/ReadabilityType keys."""
    if not isinstance(payload, Mapping):
        raise InvalidRequest("Readability request must be a JSON object.")
    check_string = payload.get("CheckString")
    if check_string is None:
        raise InvalidRequest("ReadabilityRequest.CheckString is required but not set.")
    if not isinstance(check_string, str):
        raise InvalidRequest("ReadabilityRequest.CheckString must be a string.")
    return ReadabilityRequest(
        check_string=check_string,
        correlation_id=_optional_str(payload, "CorrelationID"),
        readability_type=_optional_str(payload, "ReadabilityType"),
        language=_optional_str(payload, "Language", blank_is_absent=True),
    )


def resolve_request_variant(readability_type: str | None) -> FormulaVariant:
    """Absent or empty selectors mean WSTF1; anything else must name a variant."""
    if readability_type is None or not readability_type.strip():
        return FormulaVariant.WSTF1
    return parse_variant(readability_type)


def handle_request(engine: ReadabilityEngine, payload: Any) -> ResponsePayload:
    """
    Score the text of a request and build the response payload.

    Malformed payloads raise InvalidRequest. Scoring errors are reported in the
    response with StatusCode -1; the input text is never echoed back.
    """
    request = parse_request(payload)
    echoed: RequestPayload = {
        "CheckString": None,
        "CorrelationID": request.correlation_id,
        "ReadabilityType": request.readability_type,
        "Language": request.language,
    }
    try:
        variant = resolve_request_variant(request.readability_type)
        score = engine.score(request.check_string, variant, language=request.language)
    except (UnsupportedLanguage, InvalidVariant, EmptyInput) as exc:
        LOGGER.info(
            "Readability request %s failed: %s", request.correlation_id or "-", exc
        )
        return {
            "ReadabilityRequest": echoed,
            "Response": {
                "Readability": None,
                "Message": str(exc),
                "StatusCode": STATUS_FAILED,
                "ErrorType": type(exc).__name__,
            },
        }
    return {
        "ReadabilityRequest": echoed,
        "Response": {
            "Readability": score,
            "Message": None,
            "StatusCode": STATUS_OK,
            "ErrorType": None,
        },
    }
