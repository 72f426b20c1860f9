"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

SDK Gateway Account Operations.

Reads and replaces the gateway account, its gateway configuration, device
settings, logging settings and connectivity settings.
"""

from __future__ import annotations

from typing import Optional

from zerotrust.models.teams_accounts import (
    TeamsAccount,
    TeamsConfiguration,
    TeamsConnectivitySettings,
    TeamsDeviceSettings,
    TeamsLoggingSettings,
)
from zerotrust.sdk.resource import ResourceOperations, require_account_id, result_or


class TeamsAccountOperations(ResourceOperations):
    """Gateway account settings of one account at a time.

    Update operations replace the whole settings object with the one given
    and return what the server stored.
    """

    async def account(self, account_id: str, timeout: Optional[float] = None) -> TeamsAccount:
        """Get the gateway account."""
        require_account_id(account_id)
        envelope = await self._call(
            TeamsAccount, "GET", f"/accounts/{account_id}/gateway", timeout=timeout
        )
        return result_or(envelope, TeamsAccount)

    async def configuration(
        self, account_id: str, timeout: Optional[float] = None
    ) -> TeamsConfiguration:
        """Get the gateway configuration."""
        require_account_id(account_id)
        envelope = await self._call(
            TeamsConfiguration,
            "GET",
            f"/accounts/{account_id}/gateway/configuration",
            timeout=timeout,
        )
        return result_or(envelope, TeamsConfiguration)

    async def update_configuration(
        self,
        account_id: str,
        config: TeamsConfiguration,
        timeout: Optional[float] = None,
    ) -> TeamsConfiguration:
        """Replace the gateway configuration."""
        require_account_id(account_id)
        envelope = await self._call(
            TeamsConfiguration,
            "PUT",
            f"/accounts/{account_id}/gateway/configuration",
            body=config.to_wire(),
            timeout=timeout,
        )
        return result_or(envelope, TeamsConfiguration)

    async def device_configuration(
        self, account_id: str, timeout: Optional[float] = None
    ) -> TeamsDeviceSettings:
        """Get the device settings."""
        require_account_id(account_id)
        envelope = await self._call(
            TeamsDeviceSettings,
            "GET",
            f"/accounts/{account_id}/devices/settings",
            timeout=timeout,
        )
        return result_or(envelope, TeamsDeviceSettings)

    async def update_device_configuration(
        self,
        account_id: str,
        settings: TeamsDeviceSettings,
        timeout: Optional[float] = None,
    ) -> TeamsDeviceSettings:
        """Replace the device settings."""
        require_account_id(account_id)
        envelope = await self._call(
            TeamsDeviceSettings,
            "PUT",
            f"/accounts/{account_id}/devices/settings",
            body=settings.to_wire(),
            timeout=timeout,
        )
        return result_or(envelope, TeamsDeviceSettings)

    async def logging_configuration(
        self, account_id: str, timeout: Optional[float] = None
    ) -> TeamsLoggingSettings:
        """Get the per rule type logging settings."""
        require_account_id(account_id)
        envelope = await self._call(
            TeamsLoggingSettings,
            "GET",
            f"/accounts/{account_id}/gateway/logging",
            timeout=timeout,
        )
        return result_or(envelope, TeamsLoggingSettings)

    async def update_logging_configuration(
        self,
        account_id: str,
        settings: TeamsLoggingSettings,
        timeout: Optional[float] = None,
    ) -> TeamsLoggingSettings:
        """Replace the per rule type logging settings."""
        require_account_id(account_id)
        envelope = await self._call(
            TeamsLoggingSettings,
            "PUT",
            f"/accounts/{account_id}/gateway/logging",
            body=settings.to_wire(),
            timeout=timeout,
        )
        return result_or(envelope, TeamsLoggingSettings)

    async def connectivity_configuration(
        self, account_id: str, timeout: Optional[float] = None
    ) -> TeamsConnectivitySettings:
        """Get the Zero Trust connectivity settings."""
        require_account_id(account_id)
        envelope = await self._call(
            TeamsConnectivitySettings,
            "GET",
            f"/accounts/{account_id}/zerotrust/connectivity_settings",
            timeout=timeout,
        )
        return result_or(envelope, TeamsConnectivitySettings)

    async def update_connectivity_configuration(
        self,
        account_id: str,
        settings: TeamsConnectivitySettings,
        timeout: Optional[float] = None,
    ) -> TeamsConnectivitySettings:
        """Replace the Zero Trust connectivity settings."""
        require_account_id(account_id)
        envelope = await self._call(
            TeamsConnectivitySettings,
            "PUT",
            f"/accounts/{account_id}/zerotrust/connectivity_settings",
            body=settings.to_wire(),
            timeout=timeout,
        )
        return result_or(envelope, TeamsConnectivitySettings)
