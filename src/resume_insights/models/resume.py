"""Resume references as submitted by the caller."""

from __future__ import annotations

from pydantic import BaseModel, model_validator
from pydantic.alias_generators import to_camel


class DataUri(BaseModel):
    mime_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


class ResumeReference(BaseModel):
    """Either raw resume text or a ``data:<mime>;base64,...`` document payload."""

    text: str | None = None
    data_uri: str | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @model_validator(mode="after")
    def _exactly_one(self) -> ResumeReference:
        if (self.text is None) == (self.data_uri is None):
            raise ValueError("A resume needs exactly one of text or data_uri.")
        return self
