"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

SDK Gateway Rule Operations.
"""

from __future__ import annotations

from typing import List, Optional

from zerotrust.models.teams_rules import TeamsRule, TeamsRulePatchRequest
from zerotrust.sdk.resource import (
    ResourceOperations,
    require_account_id,
    require_resource_id,
    result_or,
)


class TeamsRuleOperations(ResourceOperations):
    """Gateway rule CRUD within one account."""

    @staticmethod
    def _rules_path(account_id: str) -> str:
        return f"/accounts/{account_id}/gateway/rules"

    async def list(self, account_id: str, timeout: Optional[float] = None) -> List[TeamsRule]:
        """List all rules of an account, in server order."""
        require_account_id(account_id)
        envelope = await self._call(
            List[TeamsRule], "GET", self._rules_path(account_id), timeout=timeout
        )
        return result_or(envelope, list)

    async def get(
        self, account_id: str, rule_id: str, timeout: Optional[float] = None
    ) -> TeamsRule:
        """Get a rule by ID."""
        require_account_id(account_id)
        require_resource_id(rule_id)
        envelope = await self._call(
            TeamsRule, "GET", f"{self._rules_path(account_id)}/{rule_id}", timeout=timeout
        )
        return result_or(envelope, TeamsRule)

    async def create(
        self, account_id: str, rule: TeamsRule, timeout: Optional[float] = None
    ) -> TeamsRule:
        """Create a rule and return it as stored, with its new ID."""
        require_account_id(account_id)
        envelope = await self._call(
            TeamsRule,
            "POST",
            self._rules_path(account_id),
            body=rule.to_wire(),
            timeout=timeout,
        )
        return result_or(envelope, TeamsRule)

    async def update(
        self,
        account_id: str,
        rule_id: str,
        rule: TeamsRule,
        timeout: Optional[float] = None,
    ) -> TeamsRule:
        """Replace a rule."""
        require_account_id(account_id)
        require_resource_id(rule_id)
        envelope = await self._call(
            TeamsRule,
            "PUT",
            f"{self._rules_path(account_id)}/{rule_id}",
            body=rule.to_wire(),
            timeout=timeout,
        )
        return result_or(envelope, TeamsRule)

    async def patch(
        self,
        account_id: str,
        rule_id: str,
        patch: TeamsRulePatchRequest,
        timeout: Optional[float] = None,
    ) -> TeamsRule:
        """Change the subset of a rule carried by ``patch``."""
        require_account_id(account_id)
        require_resource_id(rule_id)
        envelope = await self._call(
            TeamsRule,
            "PATCH",
            f"{self._rules_path(account_id)}/{rule_id}",
            body=patch.to_wire(),
            timeout=timeout,
        )
        return result_or(envelope, TeamsRule)

    async def delete(
        self, account_id: str, rule_id: str, timeout: Optional[float] = None
    ) -> None:
        """Delete a rule. The response body is not inspected."""
        require_account_id(account_id)
        require_resource_id(rule_id)
        request = self._build_request("DELETE", f"{self._rules_path(account_id)}/{rule_id}")
        await self._execute(request, timeout=timeout)
