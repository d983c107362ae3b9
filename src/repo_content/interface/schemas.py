"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from repo_content.domain.entities import ContentRecord


class RepoContentRequest(BaseModel):
    """Request body for ``POST /repo-content``."""

    repo_url: str

    @field_validator("repo_url")
    @classmethod
    def _must_not_be_empty(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            msg = "repo_url must not be empty."
            raise ValueError(msg)
        return stripped


class DocumentMetadata(BaseModel):
    source: str


class Document(BaseModel):
    """One fetched file in the ``pageContent`` / ``metadata`` wire shape."""

    model_config = ConfigDict(populate_by_name=True)

    page_content: str = Field(alias="pageContent")
    metadata: DocumentMetadata

    @classmethod
    def from_record(cls, record: ContentRecord) -> Document:
        return cls(
            page_content=record.page_content,
            metadata=DocumentMetadata(source=record.metadata.source),
        )


class RepoContentResponse(BaseModel):
    """Successful response from ``POST /repo-content``."""

    documents: list[Document]


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
