"""
Shared schema base: snake_case attributes, camelCase JSON.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from malasngoding.utils.common import iso_format


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Naive UTC datetimes from the DB, rendered as ISO with a Z suffix.
IsoDatetime = Annotated[datetime, PlainSerializer(iso_format, return_type=str)]
