"""Task model shared by the store and the HTTP layer."""

from typing import Any, List

from pydantic import BaseModel, Field, field_validator, model_validator


class Task(BaseModel):
    # Core identity, assigned by the store
    id: str = ""
    name: str = ""

    # Content
    description: str = ""
    note: str = ""
    applications: List[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        """Treat explicit nulls as missing so the field keeps its zero value."""
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @field_validator("applications", mode="before")
    @classmethod
    def _blank_null_applications(cls, value: Any) -> Any:
        if isinstance(value, list):
            return ["" if item is None else item for item in value]
        return value
