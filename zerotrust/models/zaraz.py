"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

Zaraz configuration records.

The configuration is a tree of tools, triggers, variables and consent
settings keyed by server-assigned ids. Wire names are camelCase, except the
consent button translation keys which the API spells in snake_case.
"""

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional

from pydantic import Field

from zerotrust.models.base import WireModel


class ZarazToolType(str, Enum):
    LIBRARY = "library"
    COMPONENT = "component"
    CUSTOM_MC = "custom-mc"


class ZarazVariableType(str, Enum):
    STRING = "string"
    SECRET = "secret"
    WORKER = "worker"


class ZarazRuleType(str, Enum):
    CLICK_LISTENER = "clickListener"
    TIMER = "timer"
    FORM_SUBMISSION = "formSubmission"
    VARIABLE_MATCH = "variableMatch"
    SCROLL_DEPTH = "scrollDepth"
    ELEMENT_VISIBILITY = "elementVisibility"
    CLIENT_EVAL = "clientEval"


class ZarazSelectorType(str, Enum):
    XPATH = "xpath"
    CSS = "css"


class ZarazTriggerSystem(str, Enum):
    PAGELOAD = "pageload"


class ZarazWorker(WireModel):
    """Reference to a Worker used as a tool, a variable or the context enricher."""

    escaped_worker_name: str = Field("", alias="escapedWorkerName")
    worker_tag: str = Field("", alias="workerTag")
    mutable_id: str = Field("", alias="mutableId")

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"mutable_id"})


class ZarazConfigSettings(WireModel):
    auto_inject_script: Optional[bool] = Field(None, alias="autoInjectScript")
    inject_iframes: Optional[bool] = Field(None, alias="injectIframes")
    ecommerce: Optional[bool] = None
    hide_query_params: Optional[bool] = Field(None, alias="hideQueryParams")
    hide_ip_address: Optional[bool] = Field(None, alias="hideIPAddress")
    hide_user_agent: Optional[bool] = Field(None, alias="hideUserAgent")
    hide_external_referer: Optional[bool] = Field(None, alias="hideExternalReferer")
    cookie_domain: str = Field("", alias="cookieDomain")
    init_path: str = Field("", alias="initPath")
    script_path: str = Field("", alias="scriptPath")
    track_path: str = Field("", alias="trackPath")
    events_api_path: str = Field("", alias="eventsApiPath")
    mc_root_path: str = Field("", alias="mcRootPath")
    context_enricher: Optional[ZarazWorker] = Field(None, alias="contextEnricher")

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({
        "cookie_domain",
        "init_path",
        "script_path",
        "track_path",
        "events_api_path",
        "mc_root_path",
    })
    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({
        "auto_inject_script",
        "inject_iframes",
        "ecommerce",
        "hide_query_params",
        "hide_ip_address",
        "hide_user_agent",
        "hide_external_referer",
        "context_enricher",
    })


class ZarazAction(WireModel):
    blocking_triggers: List[str] = Field(default_factory=list, alias="blockingTriggers")
    firing_triggers: List[str] = Field(default_factory=list, alias="firingTriggers")
    data: Dict[str, Any] = Field(default_factory=dict)
    action_type: str = Field("", alias="actionType")

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"action_type"})


class ZarazTool(WireModel):
    """
    Third-party tool loaded by Zaraz.

    ``type`` selects where the tool comes from: a managed ``component``, a
    ``library`` or a ``custom-mc`` Worker.
    """

    blocking_triggers: List[str] = Field(default_factory=list, alias="blockingTriggers")
    enabled: Optional[bool] = None
    default_fields: Dict[str, Any] = Field(default_factory=dict, alias="defaultFields")
    name: str = ""
    actions: Dict[str, ZarazAction] = Field(default_factory=dict)
    type: str = ""
    default_purpose: str = Field("", alias="defaultPurpose")
    library: str = ""
    component: str = ""
    permissions: List[str] = Field(default_factory=list)
    settings: Dict[str, Any] = Field(default_factory=dict)
    worker: Optional[ZarazWorker] = None

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"default_purpose", "library", "component"})
    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({"enabled", "worker"})


class ZarazRuleSettings(WireModel):
    type: str = ""
    selector: str = ""
    wait_for_tags: int = Field(0, alias="waitForTags")
    interval: int = 0
    limit: int = 0
    validate_selector: Optional[bool] = Field(None, alias="validate")
    variable: str = ""
    match: str = ""
    positions: str = ""
    op: str = ""
    value: str = ""

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({
        "type",
        "selector",
        "wait_for_tags",
        "interval",
        "limit",
        "variable",
        "match",
        "positions",
        "op",
        "value",
    })
    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({"validate_selector"})


class ZarazTriggerRule(WireModel):
    """
    Load or exclude rule of a trigger.

    Match rules use ``match``/``op``/``value``; action rules use
    ``action``/``settings``. Both shapes share this record and leave the
    other shape's fields absent.
    """

    id: str = ""
    match: str = ""
    op: str = ""
    value: str = ""
    action: str = ""
    settings: Optional[ZarazRuleSettings] = None

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"id", "match", "op", "value", "action"})
    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({"settings"})

    @property
    def is_action_rule(self) -> bool:
        return bool(self.action)


class ZarazTrigger(WireModel):
    name: str = ""
    description: str = ""
    load_rules: List[ZarazTriggerRule] = Field(default_factory=list, alias="loadRules")
    exclude_rules: List[ZarazTriggerRule] = Field(default_factory=list, alias="excludeRules")
    client_rules: Optional[List[Any]] = Field(None, alias="clientRules")
    system: str = ""

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"description", "system"})
    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({"client_rules"})


class ZarazVariable(WireModel):
    """
    Named value available to tools.

    ``value`` is a string for ``string`` and ``secret`` variables and a
    Worker reference object for ``worker`` variables.
    """

    name: str = ""
    type: str = ""
    value: Any = None

    @classmethod
    def string(cls, name: str, value: str, secret: bool = False) -> "ZarazVariable":
        kind = ZarazVariableType.SECRET if secret else ZarazVariableType.STRING
        return cls(name=name, type=kind.value, value=value)

    @classmethod
    def for_worker(cls, name: str, worker: ZarazWorker) -> "ZarazVariable":
        return cls(name=name, type=ZarazVariableType.WORKER.value, value=worker.to_wire())

    @property
    def worker(self) -> Optional[ZarazWorker]:
        """The Worker reference of a ``worker`` variable, else None."""
        if self.type != ZarazVariableType.WORKER.value:
            return None
        if isinstance(self.value, ZarazWorker):
            return self.value
        if isinstance(self.value, dict):
            return ZarazWorker.model_validate(self.value)
        return None


class ZarazButtonTextTranslations(WireModel):
    accept_all: Dict[str, str] = Field(default_factory=dict)
    reject_all: Dict[str, str] = Field(default_factory=dict)
    confirm_my_choices: Dict[str, str] = Field(default_factory=dict)


class ZarazPurpose(WireModel):
    name: str = ""
    description: str = ""


class ZarazPurposeWithTranslations(WireModel):
    name: Dict[str, str] = Field(default_factory=dict)
    description: Dict[str, str] = Field(default_factory=dict)
    order: int = 0


class ZarazConsent(WireModel):
    enabled: Optional[bool] = None
    button_text_translations: ZarazButtonTextTranslations = Field(
        default_factory=ZarazButtonTextTranslations, alias="buttonTextTranslations"
    )
    company_email: str = Field("", alias="companyEmail")
    company_name: str = Field("", alias="companyName")
    company_street_address: str = Field("", alias="companyStreetAddress")
    consent_modal_intro_html: str = Field("", alias="consentModalIntroHTML")
    consent_modal_intro_html_with_translations: Dict[str, str] = Field(
        default_factory=dict, alias="consentModalIntroHTMLWithTranslations"
    )
    cookie_name: str = Field("", alias="cookieName")
    custom_css: str = Field("", alias="customCSS")
    custom_intro_disclaimer_dismissed: Optional[bool] = Field(None, alias="customIntroDisclaimerDismissed")
    default_language: str = Field("", alias="defaultLanguage")
    hide_modal: Optional[bool] = Field(None, alias="hideModal")
    purposes: Dict[str, ZarazPurpose] = Field(default_factory=dict)
    purposes_with_translations: Dict[str, ZarazPurposeWithTranslations] = Field(
        default_factory=dict, alias="purposesWithTranslations"
    )

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({
        "company_email",
        "company_name",
        "company_street_address",
        "consent_modal_intro_html",
        "consent_modal_intro_html_with_translations",
        "cookie_name",
        "custom_css",
        "default_language",
        "purposes",
        "purposes_with_translations",
    })
    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({
        "enabled",
        "custom_intro_disclaimer_dismissed",
        "hide_modal",
    })


class ZarazConfig(WireModel):
    """Complete Zaraz configuration of a zone."""

    debug_key: str = Field("", alias="debugKey")
    tools: Dict[str, ZarazTool] = Field(default_factory=dict)
    triggers: Dict[str, ZarazTrigger] = Field(default_factory=dict)
    zaraz_version: int = Field(0, alias="zarazVersion")
    consent: ZarazConsent = Field(default_factory=ZarazConsent)
    data_layer: Optional[bool] = Field(None, alias="dataLayer")
    dlp: Optional[List[Any]] = None
    history_change: Optional[bool] = Field(None, alias="historyChange")
    settings: ZarazConfigSettings = Field(default_factory=ZarazConfigSettings)
    variables: Dict[str, ZarazVariable] = Field(default_factory=dict)

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"variables"})
    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({"data_layer", "dlp", "history_change"})


class ZarazHistoryRecord(WireModel):
    id: int = 0
    user_id: str = Field("", alias="userId")
    description: str = ""
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset({"id", "user_id", "description"})
    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset({"created_at", "updated_at"})
