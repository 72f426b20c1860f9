"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

Unit tests for wire model encoding rules and the record types built on them.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from zerotrust.models import (
    ACTION_FILTERS,
    BrowserIsolation,
    TeamsAccountSettings,
    TeamsBlockPage,
    TeamsDeviceSettings,
    TeamsDnsResolverAddress,
    TeamsFilterType,
    TeamsGatewayAction,
    TeamsL4OverrideSettings,
    TeamsLoggingSettings,
    TeamsNotificationSettings,
    TeamsRule,
    TeamsRulePatchRequest,
    TeamsRuleSettings,
    ZarazConfig,
    ZarazConfigSettings,
    ZarazRuleSettings,
    ZarazTriggerRule,
    ZarazVariable,
    ZarazWorker,
    filters_for_action,
    teams_rules_action_values,
    teams_rules_untrusted_cert_action_values,
)
from zerotrust.models.base import optional_bool, optional_int, optional_str


class TestOptionalHelpers:
    def test_optional_bool(self):
        assert optional_bool(None) is None
        assert optional_bool(False) is False
        with pytest.raises(TypeError):
            optional_bool(1)

    def test_optional_int_keeps_zero(self):
        assert optional_int(0) == 0
        assert optional_int(None) is None
        with pytest.raises(TypeError):
            optional_int(True)

    def test_optional_str_keeps_empty(self):
        assert optional_str("") == ""
        with pytest.raises(TypeError):
            optional_str(3)


class TestTriStateFields:
    """Unset, False and True must stay distinguishable on the wire."""

    def test_unset_is_absent(self):
        assert "enabled" not in TeamsNotificationSettings().to_wire()

    def test_false_is_written(self):
        wire = TeamsNotificationSettings(enabled=False).to_wire()
        assert wire["enabled"] is False

    def test_true_is_written(self):
        assert TeamsNotificationSettings(enabled=True).to_wire()["enabled"] is True

    def test_decode_keeps_three_states(self):
        assert TeamsNotificationSettings.from_wire({}).enabled is None
        assert TeamsNotificationSettings.from_wire({"enabled": False}).enabled is False
        assert TeamsNotificationSettings.from_wire({"enabled": True}).enabled is True

    def test_null_decodes_as_unset(self):
        assert TeamsNotificationSettings.from_wire({"enabled": None}).enabled is None

    def test_browser_isolation(self):
        wire = BrowserIsolation(url_browser_isolation_enabled=True).to_wire()
        assert wire == {"url_browser_isolation_enabled": True}


class TestOmitRules:
    def test_required_fields_always_present(self):
        wire = TeamsNotificationSettings().to_wire()
        assert wire == {"msg": "", "support_url": ""}

    def test_omit_if_empty_strings(self):
        assert TeamsBlockPage().to_wire() == {}
        assert TeamsBlockPage(name="Acme").to_wire() == {"name": "Acme"}

    def test_omit_if_empty_numbers(self):
        assert TeamsL4OverrideSettings().to_wire() == {}
        assert TeamsL4OverrideSettings(ip="1.2.3.4", port=80).to_wire() == {
            "ip": "1.2.3.4",
            "port": 80,
        }

    def test_optional_int_zero_survives(self):
        wire = TeamsDnsResolverAddress(ip="10.0.0.2", port=0).to_wire()
        assert wire == {"ip": "10.0.0.2", "port": 0}

    def test_unknown_keys_ignored(self):
        settings = TeamsDeviceSettings.from_wire(
            {"gateway_proxy_enabled": True, "something_new": 1}
        )
        assert settings.gateway_proxy_enabled is True

    def test_aliases_used_on_the_wire(self):
        device = TeamsDeviceSettings(gateway_proxy_udp_enabled=True)
        assert device.to_wire()["gateway_udp_proxy_enabled"] is True

    def test_python_dump_uses_field_names(self):
        dumped = TeamsNotificationSettings(message="hi").model_dump()
        assert dumped["message"] == "hi"
        assert "enabled" not in dumped


class TestTeamsAccountSettings:
    def test_empty_settings_encode_to_empty_object(self):
        assert TeamsAccountSettings().to_wire() == {}

    def test_partial_settings(self):
        settings = TeamsAccountSettings.from_wire(
            {"tls_decrypt": {"enabled": True}, "fips": {"tls": True}}
        )
        assert settings.tls_decrypt.enabled is True
        assert settings.antivirus is None
        assert settings.to_wire() == {"tls_decrypt": {"enabled": True}, "fips": {"tls": True}}

    def test_logging_settings_keyed_by_rule_type(self):
        logging = TeamsLoggingSettings.from_wire({
            "redact_pii": True,
            "settings_by_rule_type": {
                "dns": {"log_all": False, "log_blocks": True},
                "http": {"log_all": True, "log_blocks": False},
            },
        })
        assert logging.settings_by_rule_type["dns"].log_blocks is True
        assert logging.settings_by_rule_type["http"].log_all is True
        assert "l4" not in logging.settings_by_rule_type


class TestTeamsRuleModels:
    def test_action_values(self):
        values = teams_rules_action_values()
        assert len(values) == 15
        assert "l4_override" in values
        assert "resolve" in values

    def test_untrusted_cert_action_values(self):
        assert teams_rules_untrusted_cert_action_values() == ["pass_through", "block", "error"]

    def test_action_filter_matrix(self):
        assert set(ACTION_FILTERS) == set(TeamsGatewayAction)
        assert filters_for_action("block") == {
            TeamsFilterType.DNS,
            TeamsFilterType.HTTP,
            TeamsFilterType.L4,
        }
        assert filters_for_action("safesearch") == {TeamsFilterType.DNS}
        assert filters_for_action("resolve") == {TeamsFilterType.DNS_RESOLVER}

    def test_unknown_action_has_no_filters(self):
        assert filters_for_action("teleport") == frozenset()

    def test_new_rule_omits_server_fields(self):
        rule = TeamsRule(name="egress", action="egress", filters=["egress"])
        wire = rule.to_wire()
        assert "id" not in wire
        assert "created_at" not in wire
        assert "deleted_at" not in wire
        assert wire["precedence"] == 0
        assert wire["rule_settings"]["block_page_enabled"] is False

    def test_rule_settings_aliases(self):
        settings = TeamsRuleSettings(
            l4_override=TeamsL4OverrideSettings(ip="1.1.1.1", port=53),
        )
        wire = settings.to_wire()
        assert wire["l4override"] == {"ip": "1.1.1.1", "port": 53}
        assert "allow_child_bypass" not in wire
        assert "dns_resolvers" not in wire

    def test_negative_precedence_rejected(self):
        with pytest.raises(ValidationError):
            TeamsRule(precedence=-1)

    @pytest.mark.parametrize("field", ["precedence", "version"])
    def test_unsigned_64_bit_bounds(self, field):
        top = 2**64 - 1
        assert getattr(TeamsRule(**{field: top}), field) == top
        assert TeamsRule.from_wire({field: top}).to_wire()[field] == top
        with pytest.raises(ValidationError):
            TeamsRule(**{field: 2**64})
        with pytest.raises(ValidationError):
            TeamsRule.from_wire({field: 2**64})

    def test_patch_precedence_bounds(self):
        with pytest.raises(ValidationError):
            TeamsRulePatchRequest(precedence=2**64)

    def test_deleted_rule(self):
        rule = TeamsRule.from_wire({"deleted_at": "2014-01-01T05:20:00Z"})
        assert rule.is_deleted
        assert rule.deleted_at == datetime(2014, 1, 1, 5, 20, tzinfo=timezone.utc)
        assert not TeamsRule().is_deleted

    def test_patch_request_without_settings(self):
        wire = TeamsRulePatchRequest(id="r1", name="n", action="block").to_wire()
        assert "rule_settings" not in wire
        assert wire["enabled"] is False


class TestZarazModels:
    def test_camel_case_wire_names(self):
        settings = ZarazConfigSettings(auto_inject_script=True, cookie_domain="example.com")
        assert settings.to_wire() == {"autoInjectScript": True, "cookieDomain": "example.com"}

    def test_populate_by_field_name_or_alias(self):
        assert ZarazWorker(escapedWorkerName="w").escaped_worker_name == "w"
        assert ZarazWorker(escaped_worker_name="w").escaped_worker_name == "w"

    def test_worker_mutable_id_omitted_when_empty(self):
        wire = ZarazWorker(escaped_worker_name="w", worker_tag="t").to_wire()
        assert wire == {"escapedWorkerName": "w", "workerTag": "t"}

    def test_match_rule_shape(self):
        rule = ZarazTriggerRule(id="Abcd", match="{{ client.__zarazTrack }}", op="EQUALS", value="Pageview")
        assert rule.to_wire() == {
            "id": "Abcd",
            "match": "{{ client.__zarazTrack }}",
            "op": "EQUALS",
            "value": "Pageview",
        }
        assert not rule.is_action_rule

    def test_action_rule_shape(self):
        rule = ZarazTriggerRule(
            id="Efgh",
            action="clickListener",
            settings=ZarazRuleSettings(type="xpath", selector="/html", wait_for_tags=3),
        )
        assert rule.is_action_rule
        assert rule.to_wire() == {
            "id": "Efgh",
            "action": "clickListener",
            "settings": {"type": "xpath", "selector": "/html", "waitForTags": 3},
        }

    def test_rule_settings_validate_alias(self):
        settings = ZarazRuleSettings.from_wire({"validate": False})
        assert settings.validate_selector is False
        assert settings.to_wire() == {"validate": False}

    def test_string_variable(self):
        variable = ZarazVariable.string("token", "abc", secret=True)
        assert variable.to_wire() == {"name": "token", "type": "secret", "value": "abc"}
        assert variable.worker is None

    def test_worker_variable(self):
        worker = ZarazWorker(escaped_worker_name="ctx", worker_tag="tag")
        variable = ZarazVariable.for_worker("enricher", worker)
        assert variable.to_wire()["value"] == {"escapedWorkerName": "ctx", "workerTag": "tag"}
        assert variable.worker == worker

    def test_worker_variable_decoded(self):
        variable = ZarazVariable.from_wire(
            {"name": "v", "type": "worker", "value": {"escapedWorkerName": "w", "workerTag": "t"}}
        )
        assert variable.worker.worker_tag == "t"

    def test_empty_config(self):
        wire = ZarazConfig().to_wire()
        assert "variables" not in wire
        assert "dataLayer" not in wire
        assert wire["zarazVersion"] == 0
        assert wire["consent"] == {"buttonTextTranslations": {
            "accept_all": {},
            "reject_all": {},
            "confirm_my_choices": {},
        }}

    def test_config_tri_states(self):
        config = ZarazConfig.from_wire({"dataLayer": False, "historyChange": True})
        assert config.data_layer is False
        assert config.history_change is True
        wire = config.to_wire()
        assert wire["dataLayer"] is False
        assert wire["historyChange"] is True
        assert "dlp" not in wire
