from __future__ import annotations
from typing import Annotated
from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def _check_email(value: str) -> str:
    # validate only; the caller's exact string is what gets stored and compared
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(str(e))
    return value


AccountEmail = Annotated[str, Field(min_length=1, max_length=320), AfterValidator(_check_email)]
