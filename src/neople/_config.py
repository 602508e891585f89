from pydantic import BaseModel, ConfigDict, Field

from ._utils.constants import DEFAULT_BASE_URL


class Config(BaseModel):
    """Credential and origin shared by every request of one client."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(repr=False)
    base_url: str = DEFAULT_BASE_URL
