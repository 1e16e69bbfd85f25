"""KiroTokenData domain object describing whose token is being cached.

The token exchange hands us a record with the auth method used to log in, the
account email (if the ID token carried one) and the IAM Identity Center start
URL. Cached token JSON uses camelCase keys, so both spellings are accepted.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class KiroTokenData(BaseModel):
    """Identity fields of a Kiro token used to name its cache file.

    Attributes:
        auth_method: How the user logged in (``idc``, ``builder-id``, ``google``, ...)
        email: Account email, possibly empty
        start_url: IAM Identity Center start URL, possibly empty
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    auth_method: Annotated[
        str,
        Field(
            default="",
            alias="authMethod",
            description="Login method reported by the token exchange",
            examples=["idc", "builder-id", "google"],
        ),
    ]
    email: Annotated[
        str,
        Field(default="", description="Account email extracted from the ID token"),
    ]
    start_url: Annotated[
        str,
        Field(
            default="",
            alias="startUrl",
            description="IAM Identity Center start URL",
            examples=["https://d-1234567890.awsapps.com/start"],
        ),
    ]

    @field_validator("auth_method", "email", "start_url", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value
