"""Shared validation rules for request schemas and path parameters."""

import re
from typing import Annotated

from fastapi import Path
from pydantic import AfterValidator, Field

OBJECT_ID_PATTERN = r"^[0-9a-fA-F]{24}$"
URL_PATTERN = (
    r"^https?://(www\.)?[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b"
    r"([-a-zA-Z0-9()@:%_+.~#?&/=]*)$"
)

_url_re = re.compile(URL_PATTERN)


def validate_url(value: str) -> str:
    """Accept only http(s) URLs with a domain and an optional path or query."""
    if not _url_re.match(value):
        raise ValueError("must be a valid http or https URL")
    return value


Url = Annotated[str, AfterValidator(validate_url)]
ProfileText = Annotated[str, Field(min_length=2, max_length=30)]
Password = Annotated[str, Field(min_length=8)]

UserId = Annotated[str, Path(pattern=OBJECT_ID_PATTERN, description="24-character hex user id")]
CardId = Annotated[str, Path(pattern=OBJECT_ID_PATTERN, description="24-character hex card id")]
