"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

Gateway account records.

Covers the account itself, its gateway configuration (antivirus, TLS
decryption, FIPS, activity log, block page, browser isolation, body
scanning, extended email matching, custom certificate), device settings,
logging settings and connectivity settings. Wire names are snake_case.
"""

from datetime import datetime
from enum import Enum
from typing import ClassVar, Dict, FrozenSet, Optional

from pydantic import Field

from zerotrust.models.base import WireModel
from zerotrust.models.teams_rules import TeamsNotificationSettings


class TeamsRuleType(str, Enum):
    """Rule kinds that carry their own logging settings."""

    HTTP = "http"
    DNS = "dns"
    L4 = "l4"


class TeamsInspectionMode(str, Enum):
    SHALLOW = "shallow"
    DEEP = "deep"


class TeamsAccount(WireModel):
    """Gateway account with its internal tag and identity provider."""

    id: str = ""
    provider_name: str = ""
    gateway_tag: str = ""


class TeamsAntivirus(WireModel):
    enabled_download_phase: bool = False
    enabled_upload_phase: bool = False
    fail_closed: bool = False
    notification_settings: Optional[TeamsNotificationSettings] = None

    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({"notification_settings"})


class TeamsTLSDecrypt(WireModel):
    enabled: bool = False


class TeamsProtocolDetection(WireModel):
    enabled: bool = False


class TeamsActivityLog(WireModel):
    enabled: bool = False


class TeamsFIPS(WireModel):
    tls: bool = False


class TeamsBlockPage(WireModel):
    """Branding of the page shown when a request is blocked."""

    enabled: Optional[bool] = None
    footer_text: str = ""
    header_text: str = ""
    logo_path: str = ""
    background_color: str = ""
    name: str = ""
    mailto_address: str = ""
    mailto_subject: str = ""
    suppress_footer: Optional[bool] = None

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({
        "footer_text",
        "header_text",
        "logo_path",
        "background_color",
        "name",
        "mailto_address",
        "mailto_subject",
    })
    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({"enabled", "suppress_footer"})


class BrowserIsolation(WireModel):
    url_browser_isolation_enabled: Optional[bool] = None
    non_identity_enabled: Optional[bool] = None

    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({
        "url_browser_isolation_enabled",
        "non_identity_enabled",
    })


class TeamsBodyScanning(WireModel):
    inspection_mode: str = ""

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"inspection_mode"})


class TeamsExtendedEmailMatching(WireModel):
    enabled: Optional[bool] = None

    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({"enabled"})


class TeamsCustomCertificate(WireModel):
    enabled: Optional[bool] = None
    id: str = ""
    binding_status: str = ""
    qs_pack_id: str = ""
    updated_at: Optional[datetime] = None

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"id", "binding_status", "qs_pack_id"})
    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({"enabled", "updated_at"})


class TeamsAccountSettings(WireModel):
    """
    Gateway feature settings of an account.

    Every entry is optional. On writes an absent entry means "do not
    change"; on reads it means "not configured".
    """

    antivirus: Optional[TeamsAntivirus] = None
    tls_decrypt: Optional[TeamsTLSDecrypt] = None
    activity_log: Optional[TeamsActivityLog] = None
    block_page: Optional[TeamsBlockPage] = None
    browser_isolation: Optional[BrowserIsolation] = None
    fips: Optional[TeamsFIPS] = None
    protocol_detection: Optional[TeamsProtocolDetection] = None
    body_scanning: Optional[TeamsBodyScanning] = None
    extended_email_matching: Optional[TeamsExtendedEmailMatching] = None
    custom_certificate: Optional[TeamsCustomCertificate] = None

    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({
        "antivirus",
        "tls_decrypt",
        "activity_log",
        "block_page",
        "browser_isolation",
        "fips",
        "protocol_detection",
        "body_scanning",
        "extended_email_matching",
        "custom_certificate",
    })


class TeamsConfiguration(WireModel):
    settings: TeamsAccountSettings = Field(default_factory=TeamsAccountSettings)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({"created_at", "updated_at"})


class TeamsDeviceSettings(WireModel):
    gateway_proxy_enabled: bool = False
    gateway_proxy_udp_enabled: bool = Field(False, alias="gateway_udp_proxy_enabled")
    root_certificate_installation_enabled: bool = False
    use_zt_virtual_ip: Optional[bool] = None

    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({"use_zt_virtual_ip"})


class TeamsAccountLoggingConfiguration(WireModel):
    log_all: bool = False
    log_blocks: bool = False


class TeamsLoggingSettings(WireModel):
    """Per rule kind logging, keyed by ``http``, ``dns`` or ``l4``."""

    settings_by_rule_type: Dict[str, TeamsAccountLoggingConfiguration] = Field(default_factory=dict)
    redact_pii: bool = False


class TeamsConnectivitySettings(WireModel):
    icmp_proxy_enabled: Optional[bool] = None
    offramp_warp_enabled: Optional[bool] = None

    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({
        "icmp_proxy_enabled",
        "offramp_warp_enabled",
    })
