"""Base schema configuration for all Pydantic models.

Usage:
    - APIResponse: For payloads this service produces
    - DownstreamResponse: For payloads received from the upstream recipe API
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class _BaseSchema(BaseModel):
    """Private base schema with common configuration.

    Do not use directly - inherit from one of the public subclasses.
    """

    model_config = ConfigDict(
        # Alias configuration for camelCase serialization
        alias_generator=to_camel,
        populate_by_name=True,  # Accept both snake_case and camelCase
        use_enum_values=True,
        validate_default=True,
        # Always serialize to camelCase
        serialize_by_alias=True,
    )


class APIResponse(_BaseSchema):
    """Base class for outgoing API response schemas.

    Configured to forbid extra fields - we should only return
    properties that are explicitly defined in the schema.
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
    )


class DownstreamResponse(_BaseSchema):
    """Base class for responses received from the upstream recipe API.

    Extra fields are ignored so upstream additions never break parsing,
    and instances are frozen: they are read-only views over upstream data.
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        """Treat upstream ``null`` values as absent so field defaults apply.

        ``null`` entries inside lists are dropped as well.
        """
        if not isinstance(data, dict):
            return data
        return {
            key: [item for item in value if item is not None]
            if isinstance(value, list)
            else value
            for key, value in data.items()
            if value is not None
        }
