# Request bodies for the HTTP API. Presence checks live in the services.
from typing import ClassVar, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, field_validator
from pydantic import ValidationError as PydanticValidationError

from errors import ValidationError
from models import PROFILE_FIELDS


class RequestSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Fixed error message; None reports the first failing field
    invalid_message: ClassVar[Optional[str]] = None


class RegisterRequest(RequestSchema):
    username: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    agency: Optional[str] = None
    age: Optional[str] = None
    gender: Optional[str] = None
    height: Optional[str] = None
    weight: Optional[str] = None
    exercise: Optional[str] = None
    fruitsVeg: Optional[str] = None
    water: Optional[str] = None
    tobacco: Optional[str] = None

    # Forms send age, height and weight as numbers as often as strings
    @field_validator(*PROFILE_FIELDS, mode="before")
    @classmethod
    def number_to_str(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    def profile(self):
        return {field: getattr(self, field) for field in PROFILE_FIELDS}


class LoginRequest(RequestSchema):
    username: Optional[str] = None
    password: Optional[str] = None


class PointsRequest(RequestSchema):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)
    invalid_message: ClassVar[Optional[str]] = 'The "points" field must be a number.'

    points: Optional[Union[StrictInt, StrictFloat]] = None


class ProgressRequest(RequestSchema):
    steps: Optional[int] = None
    minutes: Optional[int] = None


class PostRequest(RequestSchema):
    username: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    duration: Optional[str] = None
    activityType: Optional[str] = None

    @field_validator("duration", mode="before")
    @classmethod
    def number_to_str(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


def parse(schema, payload):
    if not isinstance(payload, dict):
        payload = {}
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        if schema.invalid_message:
            raise ValidationError(schema.invalid_message) from e
        field = ".".join(str(part) for part in e.errors()[0]["loc"])
        raise ValidationError(f'Invalid value for "{field}".') from e
