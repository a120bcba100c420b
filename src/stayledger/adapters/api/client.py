"""HTTP client for the console's record API."""

from __future__ import annotations

import asyncio
import math
from dataclasses import dataclass, field
from datetime import UTC
from logging import getLogger
from typing import TYPE_CHECKING, Final

import httpx
from pydantic import ValidationError

from stayledger.adapters.http_resilience import ResilientClient
from stayledger.config import RecordApiConfig, get_record_api_config
from stayledger.domain.listing import merge_by_id
from stayledger.domain.ports import FinancialRecordRepository

from .schema import ErrorResponse, InvoiceListResponse
from .translator import parse_financial_record

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from stayledger.config import ResilienceConfig
    from stayledger.domain.model import FinancialRecord, LifecycleStatus
    from stayledger.domain.ports import RecordQuery

log = getLogger(__name__)

INVOICES_PATH: Final[str] = "/admin/invoices"


def _isoformat(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat().replace("+00:00", "Z")


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


class RecordApiError(RuntimeError):
    """Raised when the record API returns an application-level error."""

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        super().__init__(message)
        self.detail = detail


@dataclass(slots=True)
class ApiRecordRepository:
    """Read financial records from ``GET /admin/invoices``.

    The API accepts one status per request, so multi-status queries issue one
    request stream per status and merge the batches by record id.
    """

    config: RecordApiConfig = field(default_factory=get_record_api_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def find(self, query: RecordQuery) -> list[FinancialRecord]:
        return asyncio.run(self._find_async(query))

    async def _find_async(self, query: RecordQuery) -> list[FinancialRecord]:
        async with self.client_factory(self.config.resilience) as client:
            if not query.statuses:
                return await self._fetch_all_pages(client=client, query=query, status=None)

            batches: list[list[FinancialRecord]] = []
            for status in query.statuses:
                batches.append(
                    await self._fetch_all_pages(client=client, query=query, status=status)
                )
            return merge_by_id(*batches)

    async def _fetch_all_pages(
        self,
        *,
        client: ResilientClient,
        query: RecordQuery,
        status: LifecycleStatus | None,
    ) -> list[FinancialRecord]:
        records: list[FinancialRecord] = []
        page = 1
        while True:
            response = await self._request_page(
                client=client,
                params=self._build_params(query, status=status, page=page),
            )
            records.extend(parse_financial_record(item) for item in response.items)

            page_size = response.page_size or self.config.page_size
            total_pages = math.ceil(response.total / page_size)
            if not response.items or page >= total_pages:
                break
            page += 1

        log.debug(
            "Fetched %s record(s) for status=%s across %s page(s)",
            len(records),
            status or "*",
            page,
        )
        return records

    def _build_params(
        self,
        query: RecordQuery,
        *,
        status: LifecycleStatus | None,
        page: int,
    ) -> httpx.QueryParams:
        params: dict[str, str | int] = {
            "page": page,
            "pageSize": self.config.page_size,
        }
        if status is not None:
            params["status"] = status.value
        if query.issued_from is not None:
            params["from"] = _isoformat(query.issued_from)
        if query.issued_to is not None:
            params["to"] = _isoformat(query.issued_to)
        if query.search_term is not None:
            params["q"] = query.search_term
        if query.owner_id is not None:
            params["ownerId"] = query.owner_id
        if query.property_id is not None:
            params["propertyId"] = query.property_id
        if query.min_amount is not None:
            params["minAmount"] = str(query.min_amount)
        if query.max_amount is not None:
            params["maxAmount"] = str(query.max_amount)
        return httpx.QueryParams(params)

    async def _request_page(
        self,
        *,
        client: ResilientClient,
        params: httpx.QueryParams,
    ) -> InvoiceListResponse:
        response = await client.get(
            f"{self.config.base_url}{INVOICES_PATH}",
            params=params,
            headers=self.config.headers,
        )
        payload = _json_payload(response)

        if isinstance(payload, dict) and "error" in payload:
            error_payload = ErrorResponse.model_validate(payload)
            log.error("Record API error: %s", error_payload.error)
            raise RecordApiError(error_payload.error, detail=error_payload.detail) from None

        response.raise_for_status()

        if not isinstance(payload, dict) or "items" not in payload:
            raise RecordApiError("Unexpected record API response payload")

        try:
            return InvoiceListResponse.model_validate(payload)
        except ValidationError as exc:
            raise RecordApiError("Invalid record API response payload", detail=str(exc)) from exc


def _json_payload(response: httpx.Response) -> object:
    try:
        return response.json()
    except ValueError:
        response.raise_for_status()
        raise RecordApiError("Record API returned a non-JSON body") from None


if TYPE_CHECKING:
    _repository_check: FinancialRecordRepository = ApiRecordRepository()
