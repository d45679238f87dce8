"""
Schemas for the articles resource.

Length limits mirror the `articles` columns, so oversized values are rejected
as a 400 instead of failing at the database. `dateAdded` is a naive
timestamp; values carrying a UTC offset are rejected.
"""

from typing import Optional

from pydantic import Field, NaiveDatetime

from campus_api.schemas.common import CamelModel, SurrogateId


class ArticleCreate(CamelModel):
    """Fields an admin supplies when posting a new article."""

    title: str = Field(max_length=255, description="Article title")
    url: str = Field(max_length=2048, description="Link to the article")
    explanation: str = Field(description="Why the article is worth reading")
    email: str = Field(max_length=255, description="Email of the submitter")
    date_added: NaiveDatetime = Field(
        description="When the article was added (ISO 8601 without offset, e.g. 2022-01-03T00:00:00)"
    )


class ArticleUpdate(ArticleCreate):
    """
    Article record sent as the PUT body.

    `id` and `dateAdded` are accepted and ignored; only title, url,
    explanation and email are applied.
    """

    id: Optional[SurrogateId] = None
    date_added: Optional[NaiveDatetime] = None


class ArticleResponse(ArticleCreate):
    id: SurrogateId = Field(description="Surrogate key")
