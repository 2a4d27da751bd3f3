"""Shared configuration for API transfer objects."""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


# Money travels as a JSON number; Python code keeps the Decimal
Amount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class TransferModel(BaseModel):
    """Base DTO: snake_case attributes, camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
