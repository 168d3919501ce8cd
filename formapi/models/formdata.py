from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, StrictStr
from pydantic.alias_generators import to_camel


class FormDataIn(BaseModel):
    """Submitted payload, camelCase keys only.

    Values are taken as sent; presence, type and format are all checked by
    formapi.validation so every bad field is reported together.
    """

    model_config = ConfigDict(alias_generator=to_camel)

    name: Optional[Any] = None
    email: Optional[Any] = None
    password: Optional[Any] = None
    contact: Optional[Any] = None
    address: Optional[Any] = None
    national_id: Optional[Any] = None
    date_of_birth: Optional[Any] = None


class FormData(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel)

    id: str
    name: Optional[StrictStr] = None
    email: Optional[StrictStr] = None
    password: Optional[StrictStr] = None
    contact: Optional[StrictStr] = None
    address: Optional[StrictStr] = None
    national_id: Optional[StrictStr] = None
    date_of_birth: Optional[StrictStr] = None


class FieldError(BaseModel):
    field: str
    message: str


class ActionResult(BaseModel):
    success: bool
    message: str


class CreateResult(ActionResult):
    id: str


class ValidationErrorResponse(ActionResult):
    errors: List[FieldError] = []


class NotFoundResponse(BaseModel):
    message: str
