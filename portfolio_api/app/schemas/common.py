"""
Field types and helpers shared by the entity schemas.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Type, TypeVar

import pydantic
from pydantic import AfterValidator, BaseModel, EmailStr, Field, HttpUrl, TypeAdapter

from ..core.errors import ValidationError, format_field_errors

_http_url = TypeAdapter(HttpUrl)
_email = TypeAdapter(EmailStr)

# Largest value SQLite can bind as an INTEGER.
SQLITE_MAX_INT = 2**63 - 1


def _check_url(value: str) -> str:
    # Validate with pydantic's URL rules but keep the caller's spelling.
    try:
        _http_url.validate_python(value)
    except pydantic.ValidationError:
        raise ValueError("must be a valid http(s) URL") from None
    return value


def _check_email(value: str) -> str:
    # EmailStr lowercases the domain; the stored address must be the one sent.
    try:
        _email.validate_python(value)
    except pydantic.ValidationError:
        raise ValueError("must be a valid email address") from None
    return value


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Required text must contain at least one character.
NonEmptyStr = Annotated[str, Field(min_length=1)]

# http(s) URL carried as the exact string the caller sent.
UrlStr = Annotated[str, AfterValidator(_check_url)]

# Email address carried as the exact string the caller sent.
EmailAddress = Annotated[str, AfterValidator(_check_email)]

# Stored timestamps are naive UTC; responses carry the offset.
UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def parse_input(schema: Type[SchemaT], **data: Any) -> SchemaT:
    """Validate ``data`` against ``schema``.

    Raises the domain :class:`ValidationError` listing every offending
    field instead of pydantic's own exception, so callers see one error
    type no matter where validation happened.
    """
    try:
        return schema.model_validate(data)
    except pydantic.ValidationError as e:
        fields = format_field_errors(e.errors())
        names = ", ".join(f["field"] for f in fields)
        raise ValidationError(f"Invalid {schema.__name__}: {names}", fields) from e
