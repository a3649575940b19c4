from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

ALL_ENDPOINTS = "ALL"

KB = 1024
MB = 1024 * KB
GB = 1024 * MB
TB = 1024 * GB


def default_endpoints() -> List[str]:
    return [ALL_ENDPOINTS]


class DomainModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class LdapConfig(DomainModel):
    """
    LDAP integration for a group.
    Either disabled, or enabled with every field populated. A disabled config
    may still carry values the server kept from an earlier configuration.
    """

    enabled: bool = False
    group: Optional[str] = None
    match_attribute: Optional[str] = None
    search: Optional[str] = None
    search_user_base: Optional[str] = None
    server_url: Optional[str] = None
    user_dn_template: Optional[str] = None

    @model_validator(mode="after")
    def _all_or_nothing(self) -> "LdapConfig":
        if self.enabled:
            missing = [
                name
                for name in (
                    "group",
                    "match_attribute",
                    "search",
                    "search_user_base",
                    "server_url",
                    "user_dn_template",
                )
                if not getattr(self, name)
            ]
            if missing:
                raise ValueError(
                    f"LDAP is enabled but missing: {', '.join(missing)}"
                )
        return self


class Group(DomainModel):
    group_id: str = Field(min_length=1)
    group_name: str = ""
    active: bool = False
    ldap: LdapConfig = Field(default_factory=LdapConfig)
    s3_endpoints_http: List[str] = Field(default_factory=default_endpoints)
    s3_endpoints_https: List[str] = Field(default_factory=default_endpoints)
    s3_website_endpoints: List[str] = Field(default_factory=default_endpoints)

    @field_validator(
        "s3_endpoints_http", "s3_endpoints_https", "s3_website_endpoints"
    )
    @classmethod
    def _never_empty(cls, value: List[str]) -> List[str]:
        # "no restriction" is spelled ["ALL"], never []
        return value or default_endpoints()


class User(DomainModel):
    user_id: str = Field(min_length=1)
    group_id: str = Field(min_length=1)
    user_type: str = "User"
    active: bool = True
    full_name: Optional[str] = None
    email_addr: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    canonical_user_id: Optional[str] = None


class SecurityInfo(DomainModel):
    access_key: str
    secret_key: str
    active: bool = True


class QoS(DomainModel):
    """
    Hard limits for a user or group. None means unlimited.
    Byte-based values are in bytes; rates are per minute.
    """

    storage_quota: Optional[int] = Field(default=None, ge=0)
    storage_quota_count: Optional[int] = Field(default=None, ge=0)
    request_rate: Optional[int] = Field(default=None, ge=0)
    data_rate_inbound: Optional[int] = Field(default=None, ge=0)
    data_rate_outbound: Optional[int] = Field(default=None, ge=0)


__all__ = [
    "ALL_ENDPOINTS",
    "KB",
    "MB",
    "GB",
    "TB",
    "LdapConfig",
    "Group",
    "User",
    "SecurityInfo",
    "QoS",
]
