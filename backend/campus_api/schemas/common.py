"""
Campus API Backend: Shared Schemas
====================================

What:  Base model configuration and the response shapes shared by all resources
       (errors, deletion confirmation, health).
"""

from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Range of the BIGINT surrogate key columns (see database.SurrogateKey).
# Keys outside it can never exist, so they are rejected as invalid input
# before reaching the database.
SurrogateId = Annotated[int, Field(ge=-(2**63), le=2**63 - 1)]


class CamelModel(BaseModel):
    """
    Base for every resource schema.

    - alias_generator=to_camel: `date_added` is read and written as `dateAdded`
    - populate_by_name: snake_case names are accepted on input as well
    - from_attributes: responses are built straight from ORM records
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(BaseModel):
    """
    What:  Error body returned by every exception handler.

    Example:
        {
            "type": "EntityNotFoundException",
            "message": "Articles with id 8 not found"
        }
    """

    type: str = Field(description="Machine-readable error tag")
    message: str = Field(description="Human-readable error description")
    details: Optional[List[Any]] = Field(
        default=None,
        description="Field-level validation errors (validation failures only)",
    )


class MessageResponse(BaseModel):
    """Confirmation body returned by delete operations."""

    message: str = Field(description="e.g. 'HelpRequest with id 15 deleted'")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and dependency status.
    Who:   Returned by GET /health for monitoring and load balancer health checks.
    """

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
