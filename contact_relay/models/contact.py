from typing import Any, Dict

from pydantic import BaseModel, ValidationError, field_validator
from email_validator import EmailNotValidError, validate_email

from contact_relay.core.errors import ContactValidationError, FieldError

REQUIRED_MESSAGES = {
    "name": "Full name is required",
    "email": "Email is required",
    "message": "Message is required",
}
INVALID_EMAIL_MESSAGE = "Email is invalid"
INVALID_BODY_MESSAGE = "Request body must be a JSON object"


class ContactSubmission(BaseModel):
    name: str
    email: str
    message: str

    @field_validator("name", "message")
    @classmethod
    def check_not_empty(cls, value: str, info) -> str:
        if len(value) < 1:
            raise ValueError(REQUIRED_MESSAGES[info.field_name])
        return value

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        if len(value) < 1:
            raise ValueError(REQUIRED_MESSAGES["email"])
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            raise ValueError(INVALID_EMAIL_MESSAGE)
        return value


def _to_field_error(error: Dict[str, Any]) -> FieldError:
    field = str(error["loc"][0]) if error.get("loc") else "body"
    if error["type"] == "missing":
        message = REQUIRED_MESSAGES.get(field, error["msg"])
    elif error["type"] == "value_error":
        message = str(error["ctx"]["error"])
    else:
        message = error["msg"]
    return FieldError(field=field, message=message)


def validate_contact(data: Any) -> ContactSubmission:
    """
    Turn an untyped request body into a ContactSubmission.

    Raises:
        ContactValidationError: with one FieldError per failed rule
    """
    if not isinstance(data, dict):
        raise ContactValidationError([FieldError(field="body", message=INVALID_BODY_MESSAGE)])

    try:
        return ContactSubmission.model_validate(data)
    except ValidationError as e:
        raise ContactValidationError([_to_field_error(err) for err in e.errors()]) from e
