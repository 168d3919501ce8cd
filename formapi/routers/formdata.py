import logging
from typing import List

from fastapi import APIRouter, Depends, Request

from formapi.database import FormDataGateway
from formapi.errors import FormDataNotFound, FormValidationError
from formapi.models.formdata import (
    ActionResult,
    CreateResult,
    FormData,
    FormDataIn,
    NotFoundResponse,
    ValidationErrorResponse,
)
from formapi.security import protect_password
from formapi.validation import validate_form_data

logger = logging.getLogger(__name__)
router = APIRouter()


def get_gateway(request: Request) -> FormDataGateway:
    return request.app.state.gateway


def get_hash_passwords(request: Request) -> bool:
    return request.app.state.config.HASH_PASSWORDS


def _checked_record(form_data: FormDataIn, hash_passwords: bool) -> dict:
    record = form_data.model_dump(by_alias=True)
    violations = validate_form_data(record)
    if violations:
        raise FormValidationError(violations)
    return protect_password(record, hash_passwords)


@router.post(
    "",
    response_model=CreateResult,
    status_code=200,
    responses={400: {"model": ValidationErrorResponse}},
)
async def create_form_data(
    form_data: FormDataIn,
    gateway: FormDataGateway = Depends(get_gateway),
    hash_passwords: bool = Depends(get_hash_passwords),
):
    record = _checked_record(form_data, hash_passwords)
    record_id = await gateway.insert(record)
    logger.info(f"Form data {record_id} created")
    return {"success": True, "message": "Form data saved successfully", "id": record_id}


@router.get("", response_model=List[FormData], status_code=200)
async def list_form_data(gateway: FormDataGateway = Depends(get_gateway)):
    records = await gateway.find_all()
    logger.debug(f"Listing {len(records)} form data records")
    return records


@router.get(
    "/{record_id}",
    response_model=FormData,
    status_code=200,
    responses={404: {"model": NotFoundResponse}},
)
async def get_form_data(record_id: str, gateway: FormDataGateway = Depends(get_gateway)):
    record = await gateway.find_by_id(record_id)
    if record is None:
        raise FormDataNotFound(record_id, with_success=False)
    return record


@router.put(
    "/{record_id}",
    response_model=ActionResult,
    status_code=200,
    responses={400: {"model": ValidationErrorResponse}, 404: {"model": ActionResult}},
)
async def update_form_data(
    record_id: str,
    form_data: FormDataIn,
    gateway: FormDataGateway = Depends(get_gateway),
    hash_passwords: bool = Depends(get_hash_passwords),
):
    record = _checked_record(form_data, hash_passwords)
    if not await gateway.update(record_id, record):
        raise FormDataNotFound(record_id)
    logger.info(f"Form data {record_id} updated")
    return {"success": True, "message": "Form data updated successfully"}


@router.delete(
    "/{record_id}",
    response_model=ActionResult,
    status_code=200,
    responses={404: {"model": ActionResult}},
)
async def delete_form_data(record_id: str, gateway: FormDataGateway = Depends(get_gateway)):
    if not await gateway.delete(record_id):
        raise FormDataNotFound(record_id)
    logger.info(f"Form data {record_id} deleted")
    return {"success": True, "message": "Form data deleted successfully"}
