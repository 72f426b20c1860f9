"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

Gateway rule records.

A rule is polymorphic by its ``filters`` and ``action``: which parts of
``rule_settings`` are meaningful depends on both. The settings are kept as
one wire-faithful record with every part optional; ``ACTION_FILTERS`` is
the compatibility matrix between actions and filter kinds. Validation of
that matrix is left to the server.
"""

from datetime import datetime
from enum import Enum
from typing import ClassVar, Dict, FrozenSet, List, Optional

from pydantic import Field

from zerotrust.models.base import WireModel
from zerotrust.models.duration import Duration

# precedence and version are unsigned 64-bit on the wire
UINT64_MAX = 2**64 - 1


class TeamsFilterType(str, Enum):
    HTTP = "http"
    DNS = "dns"
    L4 = "l4"
    EGRESS = "egress"
    DNS_RESOLVER = "dns_resolver"


class TeamsGatewayAction(str, Enum):
    ALLOW = "allow"
    BLOCK = "block"
    SAFE_SEARCH = "safesearch"
    YT_RESTRICTED = "ytrestricted"
    ON = "on"
    OFF = "off"
    SCAN = "scan"
    NO_SCAN = "noscan"
    ISOLATE = "isolate"
    NO_ISOLATE = "noisolate"
    OVERRIDE = "override"
    L4_OVERRIDE = "l4_override"
    EGRESS = "egress"
    AUDIT_SSH = "audit_ssh"
    RESOLVE = "resolve"


class TeamsGatewayUntrustedCertAction(str, Enum):
    PASS_THROUGH = "pass_through"
    BLOCK = "block"
    ERROR = "error"


_HTTP = TeamsFilterType.HTTP
_DNS = TeamsFilterType.DNS
_L4 = TeamsFilterType.L4

ACTION_FILTERS: Dict[TeamsGatewayAction, FrozenSet[TeamsFilterType]] = {
    TeamsGatewayAction.ALLOW: frozenset({_DNS, _HTTP, _L4}),
    TeamsGatewayAction.BLOCK: frozenset({_DNS, _HTTP, _L4}),
    TeamsGatewayAction.SAFE_SEARCH: frozenset({_DNS}),
    TeamsGatewayAction.YT_RESTRICTED: frozenset({_DNS}),
    TeamsGatewayAction.ON: frozenset({_HTTP}),
    TeamsGatewayAction.OFF: frozenset({_HTTP}),
    TeamsGatewayAction.SCAN: frozenset({_HTTP}),
    TeamsGatewayAction.NO_SCAN: frozenset({_HTTP}),
    TeamsGatewayAction.ISOLATE: frozenset({_HTTP}),
    TeamsGatewayAction.NO_ISOLATE: frozenset({_HTTP}),
    TeamsGatewayAction.OVERRIDE: frozenset({_HTTP}),
    TeamsGatewayAction.L4_OVERRIDE: frozenset({_L4}),
    TeamsGatewayAction.EGRESS: frozenset({TeamsFilterType.EGRESS}),
    TeamsGatewayAction.AUDIT_SSH: frozenset({_L4}),
    TeamsGatewayAction.RESOLVE: frozenset({TeamsFilterType.DNS_RESOLVER}),
}


def teams_rules_action_values() -> List[str]:
    return [action.value for action in TeamsGatewayAction]


def teams_rules_untrusted_cert_action_values() -> List[str]:
    return [action.value for action in TeamsGatewayUntrustedCertAction]


def filters_for_action(action: str) -> FrozenSet[TeamsFilterType]:
    """
    Return the filter kinds an action is meaningful for.

    Unknown actions map to an empty set rather than raising, since the
    server may introduce actions this client does not know about.
    """
    try:
        return ACTION_FILTERS[TeamsGatewayAction(action)]
    except ValueError:
        return frozenset()


class TeamsNotificationSettings(WireModel):
    enabled: Optional[bool] = None
    message: str = Field("", alias="msg")
    support_url: str = ""

    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({"enabled"})


class UntrustedCertSettings(WireModel):
    action: str = ""


class AuditSSHRuleSettings(WireModel):
    command_logging: bool = False


class EgressSettings(WireModel):
    ipv6_range: str = Field("", alias="ipv6")
    ipv4: str = ""
    ipv4_fallback: str = ""


class TeamsL4OverrideSettings(WireModel):
    """Destination override for l4 rules with the ``l4_override`` action."""

    ip: str = ""
    port: int = 0

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"ip", "port"})


class TeamsBISOAdminControlSettings(WireModel):
    disable_printing: bool = Field(False, alias="dp")
    disable_copy_paste: bool = Field(False, alias="dcp")
    disable_download: bool = Field(False, alias="dd")
    disable_upload: bool = Field(False, alias="du")
    disable_keyboard: bool = Field(False, alias="dk")
    disable_clipboard_redirection: bool = Field(False, alias="dcr")


class TeamsCheckSessionSettings(WireModel):
    enforce: bool = False
    duration: Duration = Field(default_factory=Duration)


class TeamsDnsResolverAddress(WireModel):
    """
    Upstream resolver of a resolver policy.

    The same record serves IPv4 and IPv6 resolvers; the list holding it
    decides which.
    """

    ip: str = ""
    port: Optional[int] = None
    vnet_id: str = ""
    route_through_private_network: Optional[bool] = None

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"vnet_id"})
    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({"port", "route_through_private_network"})


class TeamsDnsResolverSettings(WireModel):
    v4_resolvers: List[TeamsDnsResolverAddress] = Field(default_factory=list, alias="ipv4")
    v6_resolvers: List[TeamsDnsResolverAddress] = Field(default_factory=list, alias="ipv6")

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"v4_resolvers", "v6_resolvers"})


class TeamsDlpPayloadLogSettings(WireModel):
    enabled: bool = False


class TeamsRuleSettings(WireModel):
    """
    Action specific settings of a rule.

    Compatibility with actions:

    - ``override_ips``, ``override_host``: dns ``override``
    - ``block_reason``, ``block_page_enabled``: ``block``
    - ``biso_admin_controls``: ``isolate``
    - ``l4_override``: ``l4_override``
    - ``add_headers``, ``check_session``, ``untrusted_cert``: http ``allow``
    - ``insecure_disable_dnssec_validation``: dns ``allow``
    - ``egress``: ``egress``
    - ``audit_ssh``: ``audit_ssh``
    - ``resolve_dns_through_cloudflare``, ``dns_resolvers``: ``resolve``
    - ``allow_child_bypass``, ``bypass_parent_rule``: MSP accounts only
    """

    override_ips: Optional[List[str]] = None
    block_reason: str = ""
    override_host: str = ""
    biso_admin_controls: Optional[TeamsBISOAdminControlSettings] = None
    l4_override: Optional[TeamsL4OverrideSettings] = Field(None, alias="l4override")
    add_headers: Optional[Dict[str, List[str]]] = None
    check_session: Optional[TeamsCheckSessionSettings] = None
    block_page_enabled: bool = False
    insecure_disable_dnssec_validation: bool = False
    egress: Optional[EgressSettings] = None
    payload_log: Optional[TeamsDlpPayloadLogSettings] = None
    audit_ssh: Optional[AuditSSHRuleSettings] = None
    ip_categories: bool = False
    allow_child_bypass: Optional[bool] = None
    bypass_parent_rule: Optional[bool] = None
    untrusted_cert: Optional[UntrustedCertSettings] = None
    resolve_dns_through_cloudflare: Optional[bool] = None
    dns_resolvers: Optional[TeamsDnsResolverSettings] = None
    notification_settings: Optional[TeamsNotificationSettings] = None

    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({
        "allow_child_bypass",
        "bypass_parent_rule",
        "resolve_dns_through_cloudflare",
        "dns_resolvers",
    })


class TeamsRule(WireModel):
    """
    Gateway rule.

    ``deleted_at`` is set by the server once the rule is deleted and should
    never be set by clients.
    """

    id: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None
    name: str = ""
    description: str = ""
    precedence: int = Field(0, ge=0, le=UINT64_MAX)
    enabled: bool = False
    action: str = ""
    filters: List[str] = Field(default_factory=list)
    traffic: str = ""
    identity: str = ""
    device_posture: str = ""
    version: int = Field(0, ge=0, le=UINT64_MAX)
    rule_settings: TeamsRuleSettings = Field(default_factory=TeamsRuleSettings)

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"id"})
    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({"created_at", "updated_at", "deleted_at"})

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class TeamsRulePatchRequest(WireModel):
    """Subset of a rule accepted by the patch operation."""

    id: str = ""
    name: str = ""
    description: str = ""
    precedence: int = Field(0, ge=0, le=UINT64_MAX)
    enabled: bool = False
    action: str = ""
    rule_settings: Optional[TeamsRuleSettings] = None

    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({"rule_settings"})
