"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

SDK Zaraz Operations.

Zaraz configuration of a zone: the current and default configuration, the
workflow mode, publishing, the configuration history and export.
"""

from __future__ import annotations

from functools import partial
from typing import List, Optional, Tuple

from zerotrust.models.envelope import ResultInfo, decode_record
from zerotrust.models.zaraz import ZarazConfig, ZarazHistoryRecord
from zerotrust.sdk.resource import ResourceOperations, require_zone_id, result_or

HISTORY_DEFAULT_PER_PAGE = 100


class ZarazOperations(ResourceOperations):
    """Zaraz configuration management within one zone.

    The workflow and publish operations send their argument as a bare JSON
    string, not wrapped in an object.
    """

    @staticmethod
    def _path(zone_id: str, leaf: str) -> str:
        return f"/zones/{zone_id}/settings/zaraz/v2/{leaf}"

    async def get_config(self, zone_id: str, timeout: Optional[float] = None) -> ZarazConfig:
        """Get the current Zaraz configuration."""
        require_zone_id(zone_id)
        envelope = await self._call(
            ZarazConfig, "GET", self._path(zone_id, "config"), timeout=timeout
        )
        return result_or(envelope, ZarazConfig)

    async def update_config(
        self, zone_id: str, config: ZarazConfig, timeout: Optional[float] = None
    ) -> ZarazConfig:
        """Replace the Zaraz configuration."""
        require_zone_id(zone_id)
        envelope = await self._call(
            ZarazConfig,
            "PUT",
            self._path(zone_id, "config"),
            body=config.to_wire(),
            timeout=timeout,
        )
        return result_or(envelope, ZarazConfig)

    async def get_workflow(self, zone_id: str, timeout: Optional[float] = None) -> str:
        """Get the workflow mode, e.g. ``"realtime"`` or ``"preview"``."""
        require_zone_id(zone_id)
        envelope = await self._call(str, "GET", self._path(zone_id, "workflow"), timeout=timeout)
        return result_or(envelope, str)

    async def update_workflow(
        self, zone_id: str, workflow: str, timeout: Optional[float] = None
    ) -> str:
        """Set the workflow mode."""
        require_zone_id(zone_id)
        envelope = await self._call(
            str, "PUT", self._path(zone_id, "workflow"), body=workflow, timeout=timeout
        )
        return result_or(envelope, str)

    async def publish(
        self, zone_id: str, description: str, timeout: Optional[float] = None
    ) -> str:
        """Publish the preview configuration; returns the server's status message."""
        require_zone_id(zone_id)
        envelope = await self._call(
            str, "POST", self._path(zone_id, "publish"), body=description, timeout=timeout
        )
        return result_or(envelope, str)

    async def list_history(
        self,
        zone_id: str,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> Tuple[List[ZarazHistoryRecord], ResultInfo]:
        """Get one page of the configuration history.

        Args:
            zone_id: Zone identifier.
            page: Page number, 1 when omitted or below 1.
            per_page: Page size, 100 when omitted or below 1.
            timeout: Optional deadline in seconds.

        Returns:
            The records of the page and the paging metadata of the response.
        """
        require_zone_id(zone_id)
        paging = ResultInfo(
            page=page if page and page >= 1 else 1,
            per_page=per_page if per_page and per_page >= 1 else HISTORY_DEFAULT_PER_PAGE,
        )
        envelope = await self._call(
            List[ZarazHistoryRecord],
            "GET",
            self._path(zone_id, "history"),
            params=paging.as_params(),
            timeout=timeout,
        )
        records = result_or(envelope, list)
        return records, envelope.result_info or ResultInfo()

    async def list_all_history(
        self,
        zone_id: str,
        per_page: int = HISTORY_DEFAULT_PER_PAGE,
        timeout: Optional[float] = None,
    ) -> List[ZarazHistoryRecord]:
        """Get the whole configuration history, one request per page.

        ``timeout`` applies to each page request.
        """
        require_zone_id(zone_id)
        records: List[ZarazHistoryRecord] = []
        page = 1
        while True:
            batch, info = await self.list_history(
                zone_id, page=page, per_page=per_page, timeout=timeout
            )
            records.extend(batch)
            if not batch or info.done:
                return records
            page = max(info.page, page) + 1

    async def get_default_config(
        self, zone_id: str, timeout: Optional[float] = None
    ) -> ZarazConfig:
        """Get the default Zaraz configuration of the zone."""
        require_zone_id(zone_id)
        envelope = await self._call(
            ZarazConfig, "GET", self._path(zone_id, "default"), timeout=timeout
        )
        return result_or(envelope, ZarazConfig)

    async def export_config(self, zone_id: str, timeout: Optional[float] = None) -> None:
        """Export the configuration.

        The export body is a bare configuration, not an envelope. It is
        validated and then discarded.
        """
        require_zone_id(zone_id)
        await self._fetch(
            partial(decode_record, ZarazConfig),
            "GET",
            self._path(zone_id, "export"),
            timeout=timeout,
        )
