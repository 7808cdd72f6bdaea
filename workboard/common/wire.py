"""Base model for payloads that cross the HTTP boundary.

Attributes stay snake_case in Python; JSON keys are camelCase. Either form is
accepted on input.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
