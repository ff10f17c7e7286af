"""Pydantic schemas for request and response bodies."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userid")
    name: str
    github_id: str = Field(alias="github")


class Message(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    timestamp: str
    sequence: Optional[str] = None
    from_id: str = Field(alias="fromid")
    to_id: Optional[str] = Field(default=None, alias="toid")
    message: str

    @property
    def is_broadcast(self) -> bool:
        return not self.to_id
