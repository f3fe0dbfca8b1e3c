import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request

from app.modules.admin.contract import RECORD_VALIDATORS, validate_record, validate_user_summary
from app.modules.admin.errors import ContractViolation
from app.modules.admin.service import (
    compute_user_metrics,
    list_profile_verticals,
    normalize_business_profile,
    normalize_site_settings,
    normalize_webhook_config,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Admin"], prefix="/v1/admin")


def _reject(exc: ContractViolation, context: str) -> HTTPException:
    logger.warning("Rejected %s payload: %s", context, exc)
    return HTTPException(status_code=422, detail=exc.to_dict())


async def _read_json(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError as exc:
        logger.warning("Rejected request body that is not valid JSON: %s", exc)
        raise HTTPException(status_code=400, detail="Invalid JSON payload") from exc


@router.post("/contract/{record_type}/validate")
async def validate_record_endpoint(record_type: str, request: Request):
    if record_type not in RECORD_VALIDATORS:
        raise HTTPException(status_code=404, detail=f"Unknown record type '{record_type}'")

    payload = await _read_json(request)
    try:
        record = validate_record(record_type, payload)
    except ContractViolation as exc:
        raise _reject(exc, record_type) from exc
    return {"status": "valid", "record": record.to_wire()}


@router.post("/users/metrics")
async def user_metrics_endpoint(request: Request):
    payload = await _read_json(request)
    if not isinstance(payload, list):
        raise HTTPException(status_code=400, detail="Expected a list of user summaries")

    users = []
    for index, item in enumerate(payload):
        try:
            users.append(validate_user_summary(item))
        except ContractViolation as exc:
            violation = exc.relocated(f"[{index}].{exc.field}")
            raise _reject(violation, "user-summary") from exc
    return compute_user_metrics(users).to_wire()


@router.post("/site/normalize")
async def normalize_site_endpoint(request: Request):
    payload = await _read_json(request)
    try:
        site = normalize_site_settings(payload)
    except ContractViolation as exc:
        raise _reject(exc, "site-settings") from exc
    return site.to_wire()


@router.put("/webhook/config/normalize")
async def normalize_webhook_config_endpoint(request: Request):
    payload = await _read_json(request)
    try:
        update = normalize_webhook_config(payload)
    except ContractViolation as exc:
        raise _reject(exc, "webhook-config") from exc
    return update.to_wire()


@router.post("/business-profile/normalize")
async def normalize_business_profile_endpoint(request: Request):
    payload = await _read_json(request)
    try:
        profile = normalize_business_profile(payload)
    except ContractViolation as exc:
        raise _reject(exc, "business-profile") from exc
    return profile.to_wire()


@router.get("/business-profile/verticals")
async def list_verticals_endpoint():
    return [option.to_wire() for option in list_profile_verticals()]
