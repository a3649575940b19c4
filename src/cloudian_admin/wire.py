"""
Payload shapes exactly as the Cloudian Admin API sends and accepts them.

These stay loose on purpose: booleans may arrive as "true"/"false" strings,
most fields may be missing or null, and endpoint lists may be absent.
Nothing outside translate.py should consume these types.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

BoolLike = Union[bool, str, None]


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class GroupWire(WireModel):
    group_id: str = Field(alias="groupId")
    group_name: Optional[str] = Field(default=None, alias="groupName")
    active: BoolLike = None
    ldap_enabled: BoolLike = Field(default=None, alias="ldapEnabled")
    ldap_group: Optional[str] = Field(default=None, alias="ldapGroup")
    ldap_match_attribute: Optional[str] = Field(
        default=None, alias="ldapMatchAttribute"
    )
    ldap_search: Optional[str] = Field(default=None, alias="ldapSearch")
    ldap_search_user_base: Optional[str] = Field(
        default=None, alias="ldapSearchUserBase"
    )
    ldap_server_url: Optional[str] = Field(default=None, alias="ldapServerURL")
    ldap_user_dn_template: Optional[str] = Field(
        default=None, alias="ldapUserDNTemplate"
    )
    s3_endpoints_http: Optional[List[str]] = Field(
        default=None, alias="s3endpointshttp"
    )
    s3_endpoints_https: Optional[List[str]] = Field(
        default=None, alias="s3endpointshttps"
    )
    s3_website_endpoints: Optional[List[str]] = Field(
        default=None, alias="s3websiteendpoints"
    )


class UserWire(WireModel):
    user_id: str = Field(alias="userId")
    group_id: str = Field(alias="groupId")
    user_type: Optional[str] = Field(default=None, alias="userType")
    active: BoolLike = None
    full_name: Optional[str] = Field(default=None, alias="fullName")
    email_addr: Optional[str] = Field(default=None, alias="emailAddr")
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    canonical_user_id: Optional[str] = Field(default=None, alias="canonicalUserId")


class SecurityInfoWire(WireModel):
    access_key: str = Field(alias="accessKey")
    secret_key: str = Field(alias="secretKey")
    active: BoolLike = None


class QosLimitWire(WireModel):
    type: str
    value: Union[int, str, None] = None


class QosLimitsWire(WireModel):
    user_id: Optional[str] = Field(default=None, alias="userId")
    group_id: Optional[str] = Field(default=None, alias="groupId")
    qos_limit_list: List[QosLimitWire] = Field(
        default_factory=list, alias="qosLimitList"
    )


__all__ = [
    "BoolLike",
    "WireModel",
    "GroupWire",
    "UserWire",
    "SecurityInfoWire",
    "QosLimitWire",
    "QosLimitsWire",
]
