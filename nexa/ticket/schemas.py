# nexa/ticket/schemas.py
import json
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator


class TicketBody(BaseModel):
    # a JSON body that is not an object carries none of the fields
    @model_validator(mode="before")
    @classmethod
    def non_object_is_empty(cls, value: Any) -> Any:
        if isinstance(value, (dict, BaseModel)):
            return value
        return {}


class TicketCreate(TicketBody):
    # title/priority are checked in the route so a missing one answers 400
    title: str | None = Field(default=None, examples=["Erro de login"])
    priority: str | None = Field(default=None, examples=["Alta"])
    data: datetime | None = None
    status: str | None = None
    user_name: str | None = Field(default=None, examples=["Thiago"])
    feedbacks: Any = None


class TicketUpdate(TicketBody):
    title: str | None = None
    priority: str | None = None
    status: str | None = None


class TicketOut(BaseModel):
    id: int
    data: datetime
    title: str
    priority: str
    status: str | None = None
    user_name: str | None = None
    feedbacks: list[Any] = Field(default_factory=list)

    @field_validator("feedbacks", mode="before")
    @classmethod
    def decode_feedbacks(cls, value: Any) -> Any:
        # drivers without native JSON support hand back the raw column text
        if isinstance(value, (str, bytes)):
            return json.loads(value)
        if value is None:
            return []
        return value


class TicketDeleted(BaseModel):
    message: str
    ticket: TicketOut
