import logging

from app.core.config import Settings
from app.core.logging import setup_logging


def test_app_base_url_strips_trailing_slash():
    assert Settings(APP_URL=" https://store.example/ ").app_base_url == "https://store.example"


def test_app_base_url_default():
    assert Settings(APP_URL="").app_base_url == "http://localhost:4478"


def test_resolve_upload_url():
    assert Settings(UPLOADS_BASE_PATH="").resolve_upload_url("/site/a.png") == "/site/a.png"
    assert Settings(UPLOADS_BASE_PATH="/").resolve_upload_url("site/a.png") == "/site/a.png"
    assert Settings(UPLOADS_BASE_PATH="/painel").resolve_upload_url("site\\a.png") == (
        "/painel/site/a.png"
    )


def test_setup_logging_sets_level():
    setup_logging("debug")
    assert logging.getLogger().level == logging.DEBUG

    setup_logging("not-a-level")
    assert logging.getLogger().level == logging.INFO
