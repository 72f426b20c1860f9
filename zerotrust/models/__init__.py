"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

Domain records exchanged with the Zero Trust, Gateway and Zaraz APIs.
"""

from zerotrust.models.base import WireModel, optional_bool, optional_int, optional_str
from zerotrust.models.duration import Duration
from zerotrust.models.envelope import Envelope, ResponseInfo, ResultInfo
from zerotrust.models.teams_accounts import (
    BrowserIsolation,
    TeamsAccount,
    TeamsAccountLoggingConfiguration,
    TeamsAccountSettings,
    TeamsActivityLog,
    TeamsAntivirus,
    TeamsBlockPage,
    TeamsBodyScanning,
    TeamsConfiguration,
    TeamsConnectivitySettings,
    TeamsCustomCertificate,
    TeamsDeviceSettings,
    TeamsExtendedEmailMatching,
    TeamsFIPS,
    TeamsInspectionMode,
    TeamsLoggingSettings,
    TeamsProtocolDetection,
    TeamsRuleType,
    TeamsTLSDecrypt,
)
from zerotrust.models.teams_rules import (
    ACTION_FILTERS,
    AuditSSHRuleSettings,
    EgressSettings,
    TeamsBISOAdminControlSettings,
    TeamsCheckSessionSettings,
    TeamsDlpPayloadLogSettings,
    TeamsDnsResolverAddress,
    TeamsDnsResolverSettings,
    TeamsFilterType,
    TeamsGatewayAction,
    TeamsGatewayUntrustedCertAction,
    TeamsL4OverrideSettings,
    TeamsNotificationSettings,
    TeamsRule,
    TeamsRulePatchRequest,
    TeamsRuleSettings,
    UntrustedCertSettings,
    filters_for_action,
    teams_rules_action_values,
    teams_rules_untrusted_cert_action_values,
)
from zerotrust.models.zaraz import (
    ZarazAction,
    ZarazButtonTextTranslations,
    ZarazConfig,
    ZarazConfigSettings,
    ZarazConsent,
    ZarazHistoryRecord,
    ZarazPurpose,
    ZarazPurposeWithTranslations,
    ZarazRuleSettings,
    ZarazRuleType,
    ZarazSelectorType,
    ZarazTool,
    ZarazToolType,
    ZarazTrigger,
    ZarazTriggerRule,
    ZarazTriggerSystem,
    ZarazVariable,
    ZarazVariableType,
    ZarazWorker,
)

__all__ = [
    # Primitives
    "WireModel",
    "optional_bool",
    "optional_int",
    "optional_str",
    "Duration",
    "Envelope",
    "ResponseInfo",
    "ResultInfo",
    # Gateway accounts
    "BrowserIsolation",
    "TeamsAccount",
    "TeamsAccountLoggingConfiguration",
    "TeamsAccountSettings",
    "TeamsActivityLog",
    "TeamsAntivirus",
    "TeamsBlockPage",
    "TeamsBodyScanning",
    "TeamsConfiguration",
    "TeamsConnectivitySettings",
    "TeamsCustomCertificate",
    "TeamsDeviceSettings",
    "TeamsExtendedEmailMatching",
    "TeamsFIPS",
    "TeamsInspectionMode",
    "TeamsLoggingSettings",
    "TeamsProtocolDetection",
    "TeamsRuleType",
    "TeamsTLSDecrypt",
    # Gateway rules
    "ACTION_FILTERS",
    "AuditSSHRuleSettings",
    "EgressSettings",
    "TeamsBISOAdminControlSettings",
    "TeamsCheckSessionSettings",
    "TeamsDlpPayloadLogSettings",
    "TeamsDnsResolverAddress",
    "TeamsDnsResolverSettings",
    "TeamsFilterType",
    "TeamsGatewayAction",
    "TeamsGatewayUntrustedCertAction",
    "TeamsL4OverrideSettings",
    "TeamsNotificationSettings",
    "TeamsRule",
    "TeamsRulePatchRequest",
    "TeamsRuleSettings",
    "UntrustedCertSettings",
    "filters_for_action",
    "teams_rules_action_values",
    "teams_rules_untrusted_cert_action_values",
    # Zaraz
    "ZarazAction",
    "ZarazButtonTextTranslations",
    "ZarazConfig",
    "ZarazConfigSettings",
    "ZarazConsent",
    "ZarazHistoryRecord",
    "ZarazPurpose",
    "ZarazPurposeWithTranslations",
    "ZarazRuleSettings",
    "ZarazRuleType",
    "ZarazSelectorType",
    "ZarazTool",
    "ZarazToolType",
    "ZarazTrigger",
    "ZarazTriggerRule",
    "ZarazTriggerSystem",
    "ZarazVariable",
    "ZarazVariableType",
    "ZarazWorker",
]
