"""Structural validation of admin records crossing the API/UI boundary.

Every ``validate_*`` function takes an arbitrary decoded payload and returns
the validated, immutable record, or raises a :class:`ContractViolation`
naming the first offending field.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any, Literal, TypeVar, get_args, get_origin

from pydantic import ValidationError

from app.modules.admin.errors import ContractViolation, InvalidEnumValue, SchemaViolation
from app.modules.admin.schemas import (
    BusinessProfile,
    ContractRecord,
    SiteSettings,
    UserMetrics,
    UserSummary,
    WebhookDetails,
    WebhookEventSummary,
)

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=ContractRecord)


def format_field_path(loc: tuple[Any, ...]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path


def _enum_values(model: type[ContractRecord], alias: str) -> tuple[str, ...] | None:
    for name, field in model.model_fields.items():
        if alias not in (name, field.alias):
            continue
        if get_origin(field.annotation) is Literal:
            return tuple(get_args(field.annotation))
        return None
    return None


def _first_error(errors: list[dict[str, Any]], record: Mapping[str, Any]) -> dict[str, Any]:
    # Present keys are checked in payload order; absent ones come last.
    key_order = {key: index for index, key in enumerate(record)}
    fallback = len(key_order)

    def rank(indexed: tuple[int, dict[str, Any]]) -> tuple[int, int]:
        position, error = indexed
        loc = error.get("loc") or ()
        top = loc[0] if loc else None
        return key_order.get(top, fallback), position

    return min(enumerate(errors), key=rank)[1]


def _to_violation(
    model: type[ContractRecord],
    error: dict[str, Any],
) -> ContractViolation:
    loc = tuple(error.get("loc") or ())
    field = format_field_path(loc) or model.__name__

    if error["type"] == "missing":
        return SchemaViolation(field, "field required")

    if error["type"] == "literal_error" and len(loc) == 1:
        allowed = _enum_values(model, str(loc[0]))
        value = error.get("input")
        if allowed and isinstance(value, str):
            return InvalidEnumValue(field, value, allowed)

    return SchemaViolation(field, error.get("msg", "invalid value"))


def validate_as(model: type[RecordT], record: Any) -> RecordT:
    if not isinstance(record, Mapping):
        logger.debug("Rejected %s: payload is %s", model.__name__, type(record).__name__)
        raise SchemaViolation(model.__name__, "expected an object")

    try:
        return model.model_validate(dict(record))
    except ValidationError as exc:
        violation = _to_violation(model, _first_error(exc.errors(), record))
        logger.debug("Rejected %s at %s: %s", model.__name__, violation.field, violation.message)
        raise violation from exc


def validate_webhook_details(record: Any) -> WebhookDetails:
    return validate_as(WebhookDetails, record)


def validate_webhook_event_summary(record: Any) -> WebhookEventSummary:
    return validate_as(WebhookEventSummary, record)


def validate_business_profile(record: Any) -> BusinessProfile:
    return validate_as(BusinessProfile, record)


def validate_site_settings(record: Any) -> SiteSettings:
    return validate_as(SiteSettings, record)


def validate_user_summary(record: Any) -> UserSummary:
    return validate_as(UserSummary, record)


def validate_user_metrics(record: Any) -> UserMetrics:
    return validate_as(UserMetrics, record)


RECORD_VALIDATORS: dict[str, Callable[[Any], ContractRecord]] = {
    "webhook-details": validate_webhook_details,
    "webhook-event": validate_webhook_event_summary,
    "business-profile": validate_business_profile,
    "site-settings": validate_site_settings,
    "user-summary": validate_user_summary,
    "user-metrics": validate_user_metrics,
}


def validate_record(record_type: str, record: Any) -> ContractRecord:
    validator = RECORD_VALIDATORS.get(record_type)
    if validator is None:
        raise KeyError(record_type)
    return validator(record)
