"""Admin view-model builders: raw rows / form input -> contract records."""

import json
import logging
import math
import re
import secrets
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any

from app.core.config import settings
from app.modules.admin.contract import (
    validate_as,
    validate_business_profile,
    validate_site_settings,
    validate_user_metrics,
    validate_user_summary,
    validate_webhook_details,
    validate_webhook_event_summary,
)
from app.modules.admin.errors import SchemaViolation
from app.modules.admin.schemas import (
    BusinessProfile,
    ProfileVerticalOption,
    SiteSettings,
    UserMetrics,
    UserSummary,
    WebhookConfigUpdate,
    WebhookDetails,
    WebhookEventSummary,
)
from app.modules.admin.seed import (
    DEFAULT_SEO_TITLE,
    DEFAULT_SITE_NAME,
    MAX_FOOTER_LINKS,
    MAX_KEYWORD_LENGTH,
    MAX_KEYWORDS,
    PROFILE_VERTICAL_ALIASES,
    PROFILE_VERTICAL_OPTIONS,
    PROFILE_VERTICAL_VALUES,
    SITE_FIELD_LIMITS,
    WEBHOOK_FIELD_LIMITS,
)

logger = logging.getLogger(__name__)

WEBHOOK_SCOPES = ("user", "admin")

_HTTP_URL_RE = re.compile(r"^https?://", re.IGNORECASE)
_KEYWORD_SPLIT_RE = re.compile(r"[,\n]")


def _to_iso(value: Any, field: str) -> str | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        moment = value
    else:
        try:
            moment = datetime.fromisoformat(str(value).strip())
        except ValueError as exc:
            raise SchemaViolation(field, f"invalid timestamp {value!r}") from exc
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _to_money(value: Any) -> float:
    try:
        parsed = float(value if value is not None else 0)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(parsed) or math.isinf(parsed):
        return 0.0
    return round(parsed, 2)


def _to_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


# ── Webhooks ──

def build_webhook_endpoint(webhook_id: str, scope: str = "user") -> str:
    if scope not in WEBHOOK_SCOPES:
        raise ValueError(f"Unknown webhook scope '{scope}'")
    base = settings.app_base_url
    if scope == "admin":
        return f"{base}/api/webhooks/meta/admin/{webhook_id}"
    return f"{base}/api/webhooks/meta/{webhook_id}"


def generate_verify_token() -> str:
    return secrets.token_hex(24)


def serialize_event_payload(payload: Any) -> str:
    return json.dumps(
        payload if payload is not None else {},
        ensure_ascii=False,
        separators=(",", ":"),
        default=str,
    )


def map_webhook_row(row: Mapping[str, Any], scope: str = "admin") -> WebhookDetails:
    webhook_id = row.get("id")
    return validate_webhook_details(
        {
            "id": webhook_id,
            "endpoint": build_webhook_endpoint(str(webhook_id), scope),
            "verifyToken": row.get("verify_token"),
            "appId": row.get("app_id"),
            "businessAccountId": row.get("business_account_id"),
            "phoneNumberId": row.get("phone_number_id"),
            "accessToken": row.get("access_token"),
            "createdAt": _to_iso(row.get("created_at"), "createdAt"),
            "updatedAt": _to_iso(row.get("updated_at"), "updatedAt"),
            "lastEventAt": _to_iso(row.get("last_event_at"), "lastEventAt"),
        }
    )


def map_webhook_event_row(row: Mapping[str, Any]) -> WebhookEventSummary:
    payload = row.get("payload")
    if not isinstance(payload, str):
        payload = serialize_event_payload(payload)

    return validate_webhook_event_summary(
        {
            "id": row.get("id"),
            "eventType": row.get("event_type"),
            "payload": payload,
            "receivedAt": _to_iso(row.get("received_at"), "receivedAt"),
        }
    )


def normalize_webhook_config(payload: Any) -> WebhookConfigUpdate:
    if not isinstance(payload, Mapping):
        raise SchemaViolation("WebhookConfigUpdate", "expected an object")

    verify_token = sanitize_optional_text(
        payload.get("verifyToken"), WEBHOOK_FIELD_LIMITS["verifyToken"]
    )
    if not verify_token:
        raise SchemaViolation("verifyToken", "a verify token is required")

    update = {"verifyToken": verify_token}
    for field in ("appId", "businessAccountId", "phoneNumberId", "accessToken"):
        update[field] = sanitize_optional_text(payload.get(field), WEBHOOK_FIELD_LIMITS[field])
    return validate_as(WebhookConfigUpdate, update)


# ── Users ──

def map_user_row(row: Mapping[str, Any]) -> UserSummary:
    return validate_user_summary(
        {
            "id": row.get("id"),
            "name": row.get("name"),
            "email": row.get("email"),
            "role": row.get("role"),
            "isActive": bool(row.get("is_active")),
            "balance": _to_money(row.get("balance")),
            "whatsappNumber": row.get("whatsapp_number"),
            "avatarUrl": row.get("avatar_url"),
            "createdAt": _to_iso(row.get("created_at"), "createdAt"),
            "updatedAt": _to_iso(row.get("updated_at"), "updatedAt"),
            "activeSessions": _to_int(row.get("active_sessions")),
            "lastSessionAt": _to_iso(row.get("last_session_at"), "lastSessionAt"),
        }
    )


def compute_user_metrics(users: Iterable[UserSummary]) -> UserMetrics:
    total = 0
    active = 0
    sessions = 0
    for user in users:
        total += 1
        if user.is_active:
            active += 1
        sessions += user.active_sessions

    return validate_user_metrics(
        {
            "totalUsers": total,
            "activeUsers": active,
            "inactiveUsers": total - active,
            "activeSessions": sessions,
        }
    )


# ── Site settings ──

def sanitize_text(value: Any, max_length: int) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip()[:max_length]


def sanitize_optional_text(value: Any, max_length: int) -> str | None:
    return sanitize_text(value, max_length) or None


def parse_seo_keywords(value: Any) -> list[str]:
    raw: list[str] = []
    if isinstance(value, (list, tuple)):
        raw.extend(entry for entry in value if isinstance(entry, str))
    elif isinstance(value, str):
        raw.extend(_KEYWORD_SPLIT_RE.split(value))

    seen: set[str] = set()
    keywords: list[str] = []
    for keyword in raw:
        normalized = keyword.strip().lower()
        if not normalized or normalized in seen:
            continue
        seen.add(normalized)
        keywords.append(normalized[:MAX_KEYWORD_LENGTH])
        if len(keywords) >= MAX_KEYWORDS:
            break
    return keywords


def parse_footer_links(value: Any) -> list[dict[str, str]]:
    raw = value
    if isinstance(value, str):
        if not value.strip():
            return []
        try:
            raw = json.loads(value)
        except json.JSONDecodeError:
            logger.debug("Ignoring footer links that are not valid JSON")
            return []

    if not isinstance(raw, list):
        return []

    links: list[dict[str, str]] = []
    for entry in raw:
        if not isinstance(entry, Mapping):
            continue
        label = sanitize_text(entry.get("label"), SITE_FIELD_LIMITS["footerLinkLabel"])
        url = sanitize_text(entry.get("url"), SITE_FIELD_LIMITS["footerLinkUrl"])
        if not label or not url or not _HTTP_URL_RE.match(url):
            continue
        links.append({"label": label, "url": url})
        if len(links) >= MAX_FOOTER_LINKS:
            break
    return links


def default_site_settings() -> SiteSettings:
    return validate_site_settings(
        {
            "siteName": DEFAULT_SITE_NAME,
            "tagline": None,
            "logoUrl": None,
            "faviconUrl": None,
            "seoTitle": DEFAULT_SEO_TITLE,
            "seoDescription": None,
            "seoKeywords": [],
            "footerText": None,
            "footerLinks": [],
            "updatedAt": None,
        }
    )


def normalize_site_settings(
    form: Mapping[str, Any],
    *,
    logo_url: str | None = None,
    favicon_url: str | None = None,
    updated_at: Any = None,
) -> SiteSettings:
    """Sanitize an admin settings form into a SiteSettings record.

    Over-long text is truncated, blank optional text becomes null and invalid
    keywords/links are dropped. Only a missing site name is an error.
    """
    if not isinstance(form, Mapping):
        raise SchemaViolation("SiteSettings", "expected an object")

    site_name = sanitize_text(form.get("siteName"), SITE_FIELD_LIMITS["siteName"])
    if not site_name:
        raise SchemaViolation("siteName", "a site name is required")

    return validate_site_settings(
        {
            "siteName": site_name,
            "tagline": sanitize_optional_text(form.get("tagline"), SITE_FIELD_LIMITS["tagline"]),
            "logoUrl": logo_url,
            "faviconUrl": favicon_url,
            "seoTitle": sanitize_optional_text(form.get("seoTitle"), SITE_FIELD_LIMITS["seoTitle"]),
            "seoDescription": sanitize_optional_text(
                form.get("seoDescription"), SITE_FIELD_LIMITS["seoDescription"]
            ),
            "seoKeywords": parse_seo_keywords(form.get("seoKeywords")),
            "footerText": sanitize_optional_text(
                form.get("footerText"), SITE_FIELD_LIMITS["footerText"]
            ),
            "footerLinks": parse_footer_links(form.get("footerLinks")),
            "updatedAt": _to_iso(updated_at, "updatedAt"),
        }
    )


def _stored_footer_links(raw: Any) -> list[dict[str, str]]:
    if not raw:
        return []
    try:
        parsed = json.loads(raw) if isinstance(raw, str) else raw
    except json.JSONDecodeError:
        logger.warning("Stored footer links are not valid JSON; ignoring them")
        return []
    if not isinstance(parsed, list):
        return []

    return [
        {
            "label": sanitize_text(link["label"], SITE_FIELD_LIMITS["footerLinkLabel"]),
            "url": sanitize_text(link["url"], SITE_FIELD_LIMITS["footerLinkUrl"]),
        }
        for link in parsed
        if isinstance(link, Mapping)
        and isinstance(link.get("label"), str)
        and isinstance(link.get("url"), str)
    ]


def map_site_settings_row(row: Mapping[str, Any] | None) -> SiteSettings:
    if row is None:
        return default_site_settings()

    stored_keywords = row.get("seo_keywords") or ""
    keywords = [keyword.strip() for keyword in stored_keywords.split(",") if keyword.strip()]
    logo_path = row.get("logo_path")
    favicon_path = row.get("favicon_path")

    return validate_site_settings(
        {
            "siteName": row.get("site_name") or DEFAULT_SITE_NAME,
            "tagline": row.get("tagline"),
            "logoUrl": settings.resolve_upload_url(logo_path) if logo_path else None,
            "faviconUrl": settings.resolve_upload_url(favicon_path) if favicon_path else None,
            "seoTitle": row.get("seo_title"),
            "seoDescription": row.get("seo_description"),
            "seoKeywords": keywords,
            "footerText": row.get("footer_text"),
            "footerLinks": _stored_footer_links(row.get("footer_links")),
            "updatedAt": _to_iso(row.get("updated_at"), "updatedAt"),
        }
    )


# ── Business profile ──

def list_profile_verticals() -> list[ProfileVerticalOption]:
    return [ProfileVerticalOption(**option) for option in PROFILE_VERTICAL_OPTIONS]


def normalize_profile_vertical(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    upper = value.strip().upper()
    if not upper:
        return None
    if upper in PROFILE_VERTICAL_VALUES:
        return upper
    return PROFILE_VERTICAL_ALIASES.get(upper)


def _nullable_text(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    return value.strip() or None


def normalize_business_profile(data: Any) -> BusinessProfile:
    """Build a BusinessProfile from a Graph API ``whatsapp_business_profile`` entry."""
    if not isinstance(data, Mapping):
        raise SchemaViolation("BusinessProfile", "expected an object")

    websites = data.get("websites")
    if not isinstance(websites, list):
        websites = []

    return validate_business_profile(
        {
            "about": _nullable_text(data.get("about")),
            "address": _nullable_text(data.get("address")),
            "description": _nullable_text(data.get("description")),
            "email": _nullable_text(data.get("email")),
            "profilePictureUrl": _nullable_text(data.get("profile_picture_url")),
            "vertical": normalize_profile_vertical(data.get("vertical")),
            "websites": [
                site.strip() for site in websites if isinstance(site, str) and site.strip()
            ],
        }
    )
