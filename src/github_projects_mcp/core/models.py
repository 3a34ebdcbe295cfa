from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GitHubModel(BaseModel):
    """
    Base for decoded API records.
    Unknown keys are ignored; dumps skip unset values so the caller sees the
    same sparse shape GitHub sent.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# --- Lightweight reference models ---


class UserRef(GitHubModel):
    login: Optional[str] = None
    id: Optional[int] = None
    node_id: Optional[str] = None
    html_url: Optional[str] = None
    avatar_url: Optional[str] = None
    type: Optional[str] = None


class MinimalUser(BaseModel):
    login: Optional[str] = None
    id: Optional[int] = None
    profile_url: Optional[str] = None
    avatar_url: Optional[str] = None


def _minimal_user(user: Optional[UserRef]) -> Optional[MinimalUser]:
    if user is None:
        return None
    return MinimalUser(
        login=user.login,
        id=user.id,
        profile_url=user.html_url,
        avatar_url=user.avatar_url,
    )


class ContentRepository(GitHubModel):
    id: Optional[int] = None
    name: Optional[str] = None
    full_name: Optional[str] = None
    description: Optional[str] = None
    html_url: Optional[str] = None


# --- Summary models (output) ---


class ProjectSummary(BaseModel):
    id: Optional[int] = None
    node_id: Optional[str] = None
    owner: Optional[MinimalUser] = None
    creator: Optional[MinimalUser] = None
    title: Optional[str] = None
    description: Optional[str] = None
    public: Optional[bool] = None
    closed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None
    number: Optional[int] = None
    short_description: Optional[str] = None
    deleted_by: Optional[MinimalUser] = None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


# --- Core entities ---


class Project(GitHubModel):
    id: Optional[int] = None
    node_id: Optional[str] = None
    number: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    short_description: Optional[str] = None
    public: Optional[bool] = None
    closed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None
    owner: Optional[UserRef] = None
    creator: Optional[UserRef] = None
    deleted_by: Optional[UserRef] = None

    def to_summary(self) -> ProjectSummary:
        return ProjectSummary(
            id=self.id,
            node_id=self.node_id,
            owner=_minimal_user(self.owner),
            creator=_minimal_user(self.creator),
            title=self.title,
            description=self.description,
            public=self.public,
            closed_at=self.closed_at,
            created_at=self.created_at,
            updated_at=self.updated_at,
            deleted_at=self.deleted_at,
            number=self.number,
            short_description=self.short_description,
            deleted_by=_minimal_user(self.deleted_by),
        )


class ProjectField(GitHubModel):
    """A field definition. Options (single select) and configuration (iteration)
    are passed through as-is."""

    id: Optional[int] = None
    node_id: Optional[str] = None
    name: Optional[str] = None
    data_type: Optional[str] = None
    url: Optional[str] = None
    options: Optional[List[Any]] = None
    configuration: Optional[Any] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def data_type_key(self) -> str:
        return (self.data_type or "").lower()


class ItemFieldValue(GitHubModel):
    id: Optional[int] = None
    name: Optional[str] = None
    data_type: Optional[str] = None
    value: Optional[Any] = None

    @property
    def data_type_key(self) -> str:
        return (self.data_type or "").lower()


class ItemContent(GitHubModel):
    """The issue or pull request an item wraps. ``id`` is the content's own id."""

    id: Optional[int] = None
    number: Optional[int] = None
    title: Optional[str] = None
    body: Optional[str] = None
    state: Optional[str] = None
    state_reason: Optional[str] = Field(default=None, alias="stateReason")
    url: Optional[str] = None
    html_url: Optional[str] = None
    repository: Optional[ContentRepository] = None
    type: Optional[Any] = None
    labels: Optional[List[Any]] = None
    assignees: Optional[List[UserRef]] = None
    milestone: Optional[Any] = None
    closed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProjectItem(GitHubModel):
    """A project row. ``id`` identifies the item, not the wrapped issue/PR."""

    id: Optional[int] = None
    node_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    content_type: Optional[str] = None
    content: Optional[ItemContent] = None
    creator: Optional[UserRef] = None
    item_url: Optional[str] = None
    project_url: Optional[str] = None
    archived_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    fields: List[ItemFieldValue] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        if not self.fields:
            data.pop("fields", None)
        return data


# --- Input models (tool payloads) ---


class UpdateFieldPayload(BaseModel):
    id: int
    value: Any = None

    model_config = ConfigDict(extra="forbid")


class NewProjectItem(BaseModel):
    id: int
    type: str

    model_config = ConfigDict(extra="forbid")
