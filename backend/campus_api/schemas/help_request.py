"""Schemas for the help requests resource."""

from typing import Optional

from pydantic import Field, NaiveDatetime

from campus_api.schemas.common import CamelModel, SurrogateId


class HelpRequestCreate(CamelModel):
    requester_email: str = Field(max_length=255)
    team_id: str = Field(max_length=64)
    table_or_breakout_room: str = Field(max_length=64)
    request_time: NaiveDatetime
    explanation: str
    solved: bool


class HelpRequestUpdate(HelpRequestCreate):
    id: Optional[SurrogateId] = None


class HelpRequestResponse(HelpRequestCreate):
    id: SurrogateId
