"""User domain model."""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """An authenticated user profile, persisted under the ``userData`` key."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    username: str
    email: str = ""
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    token: str | None = None
