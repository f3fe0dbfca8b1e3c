import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def webhook_record():
    return {
        "id": "1",
        "endpoint": "https://x",
        "verifyToken": "t",
        "appId": None,
        "businessAccountId": None,
        "phoneNumberId": None,
        "accessToken": None,
        "createdAt": "2024-01-01",
        "updatedAt": "2024-01-01",
        "lastEventAt": None,
    }


@pytest.fixture()
def user_record():
    return {
        "id": 7,
        "name": "Ana",
        "email": "ana@example.com",
        "role": "user",
        "isActive": True,
        "balance": 12.5,
        "whatsappNumber": None,
        "avatarUrl": None,
        "createdAt": "2024-01-01T00:00:00.000Z",
        "updatedAt": "2024-01-02T00:00:00.000Z",
        "activeSessions": 2,
        "lastSessionAt": None,
    }


@pytest.fixture()
def site_record():
    return {
        "siteName": "Shop",
        "tagline": None,
        "logoUrl": None,
        "faviconUrl": None,
        "seoTitle": None,
        "seoDescription": None,
        "seoKeywords": [],
        "footerText": None,
        "footerLinks": [],
        "updatedAt": None,
    }
