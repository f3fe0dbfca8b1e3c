from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

UserRole = Literal["admin", "user"]


class ContractRecord(BaseModel):
    """Wire records are camelCase, strictly typed and read-only once validated."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        strict=True,
        frozen=True,
        extra="ignore",
    )

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


# ── Webhooks ──

class WebhookDetails(ContractRecord):
    id: str
    endpoint: str
    verify_token: str
    app_id: Optional[str] = None
    business_account_id: Optional[str] = None
    phone_number_id: Optional[str] = None
    access_token: Optional[str] = None
    created_at: str
    updated_at: str
    last_event_at: Optional[str] = None


class WebhookEventSummary(ContractRecord):
    id: int
    event_type: Optional[str] = None
    payload: str
    received_at: str


class WebhookConfigUpdate(ContractRecord):
    verify_token: str
    app_id: Optional[str] = None
    business_account_id: Optional[str] = None
    phone_number_id: Optional[str] = None
    access_token: Optional[str] = None


# ── Business profile ──

class BusinessProfile(ContractRecord):
    about: Optional[str] = None
    address: Optional[str] = None
    description: Optional[str] = None
    email: Optional[str] = None
    profile_picture_url: Optional[str] = None
    vertical: Optional[str] = None
    websites: list[str]


class ProfileVerticalOption(ContractRecord):
    value: str
    label: str


# ── Site settings ──

class FooterLink(ContractRecord):
    label: str
    url: str


class SiteSettings(ContractRecord):
    site_name: str
    tagline: Optional[str] = None
    logo_url: Optional[str] = None
    favicon_url: Optional[str] = None
    seo_title: Optional[str] = None
    seo_description: Optional[str] = None
    seo_keywords: list[str]
    footer_text: Optional[str] = None
    footer_links: list[FooterLink]
    updated_at: Optional[str] = None


# ── Users ──

class UserSummary(ContractRecord):
    id: int
    name: str
    email: str
    role: UserRole
    is_active: bool
    balance: float = Field(allow_inf_nan=False)
    whatsapp_number: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: str
    updated_at: str
    active_sessions: int = Field(ge=0)
    last_session_at: Optional[str] = None


class UserMetrics(ContractRecord):
    total_users: int = Field(ge=0)
    active_users: int = Field(ge=0)
    inactive_users: int = Field(ge=0)
    active_sessions: int = Field(ge=0)
