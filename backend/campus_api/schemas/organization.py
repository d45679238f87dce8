"""
Schemas for the student organizations resource.

Organizations are keyed by `orgCode`, so the code is part of the create
parameters and of every response; in the update body it is optional and never
applied.
"""

from typing import Annotated, Optional

from pydantic import Field

from campus_api.schemas.common import CamelModel

# Bounded like the `org_code` primary key column
OrgCode = Annotated[str, Field(min_length=1, max_length=32)]


class OrganizationFields(CamelModel):
    org_translation_short: str = Field(max_length=255, description="Short display name")
    org_translation: str = Field(max_length=512, description="Full display name")
    inactive: bool = Field(description="Whether the organization is inactive")


class OrganizationCreate(OrganizationFields):
    org_code: OrgCode = Field(description="Organization code (natural key)")


class OrganizationUpdate(OrganizationFields):
    org_code: Optional[str] = None


class OrganizationResponse(OrganizationCreate):
    pass
