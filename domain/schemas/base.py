"""Shared pydantic configuration for request and response bodies."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from domain.clock import isoformat_utc

# Naive UTC datetime that goes out on the wire as "...Z"
UtcDatetime = Annotated[
    datetime, PlainSerializer(isoformat_utc, return_type=str, when_used="json")
]


class CamelModel(BaseModel):
    """Snake-case attributes in Python, camelCase keys on the wire"""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )
