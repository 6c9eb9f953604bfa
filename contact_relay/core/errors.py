"""
Exceptions raised along the contact pipeline.

Each one maps to exactly one HTTP response; the handlers that render them
are registered on the application in main.py.
"""

from typing import List

from pydantic import BaseModel


class FieldError(BaseModel):
    """A single failed validation rule for one input field"""
    field: str
    message: str


class ContactValidationError(Exception):
    """The submitted body failed one or more field rules (400)"""

    def __init__(self, errors: List[FieldError]):
        self.errors = errors
        super().__init__(", ".join(f"{e.field}: {e.message}" for e in errors))


class ConfigurationError(Exception):
    """Required Slack settings are missing (500)"""


class DeliveryError(Exception):
    """The outbound notification could not be delivered (500)"""
