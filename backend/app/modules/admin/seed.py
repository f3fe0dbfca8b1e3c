"""Default site settings, field limits and WhatsApp business verticals."""

DEFAULT_SITE_NAME = "Minha loja virtual"
DEFAULT_SEO_TITLE = "Minha loja virtual"

MAX_FOOTER_LINKS = 5
MAX_KEYWORDS = 12
MAX_KEYWORD_LENGTH = 40

# Maximum lengths (characters) of sanitized text fields
SITE_FIELD_LIMITS: dict[str, int] = {
    "siteName": 120,
    "tagline": 160,
    "seoTitle": 120,
    "seoDescription": 320,
    "footerText": 600,
    "footerLinkLabel": 60,
    "footerLinkUrl": 300,
}

WEBHOOK_FIELD_LIMITS: dict[str, int] = {
    "verifyToken": 128,
    "appId": 64,
    "businessAccountId": 64,
    "phoneNumberId": 64,
    "accessToken": 4096,
}

# Business verticals accepted by the WhatsApp Business API
PROFILE_VERTICAL_OPTIONS: list[dict[str, str]] = [
    {"value": "OTHER", "label": "Outro"},
    {"value": "AUTO", "label": "Automotivo"},
    {"value": "BEAUTY", "label": "Beleza"},
    {"value": "APPAREL", "label": "Moda e vestuário"},
    {"value": "EDU", "label": "Educação"},
    {"value": "ENTERTAIN", "label": "Entretenimento"},
    {"value": "EVENT_PLAN", "label": "Eventos"},
    {"value": "FINANCE", "label": "Serviços financeiros"},
    {"value": "GROCERY", "label": "Mercados"},
    {"value": "GOVT", "label": "Governo"},
    {"value": "HOTEL", "label": "Hotéis e hospedagem"},
    {"value": "HEALTH", "label": "Saúde"},
    {"value": "NONPROFIT", "label": "Organizações sem fins lucrativos"},
    {"value": "PROF_SERVICES", "label": "Serviços profissionais"},
    {"value": "RETAIL", "label": "Varejo"},
    {"value": "TRAVEL", "label": "Viagens"},
    {"value": "RESTAURANT", "label": "Restaurantes"},
    {"value": "ALCOHOL", "label": "Bebidas alcoólicas"},
    {"value": "ONLINE_GAMBLING", "label": "Jogos de azar online"},
    {"value": "PHYSICAL_GAMBLING", "label": "Jogos de azar presenciais"},
    {"value": "OTC_DRUGS", "label": "Medicamentos sem prescrição"},
]

PROFILE_VERTICAL_VALUES: frozenset[str] = frozenset(
    option["value"] for option in PROFILE_VERTICAL_OPTIONS
)

# Legacy / Graph API spellings -> current vertical value
PROFILE_VERTICAL_ALIASES: dict[str, str] = {
    "UNDEFINED": "OTHER",
    "EDUCATION": "EDU",
    "ENTERTAINMENT": "ENTERTAIN",
    "EVENT_PLANNING": "EVENT_PLAN",
    "GOVERNMENT": "GOVT",
    "HOTEL_AND_LODGING": "HOTEL",
    "MEDICAL_HEALTH": "HEALTH",
    "NON_PROFIT": "NONPROFIT",
    "PROFESSIONAL_SERVICES": "PROF_SERVICES",
    "PUBLIC_SERVICE": "GOVT",
    "SPORTS_RECREATION": "ENTERTAIN",
}
