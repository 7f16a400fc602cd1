"""Persistence API HTTP client for fetching budget entries and benefit accounts"""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

import httpx

from oasis_forecast.config import settings
from oasis_forecast.domain.exceptions import InvalidLedgerDataError, PersistenceAPIError
from oasis_forecast.domain.models import BenefitAccount, EntryKind, LedgerEntry


def parse_ledger_row(row: Dict[str, Any]) -> LedgerEntry:
    """
    Convert a budget_entries row into a LedgerEntry.

    Raises:
        InvalidLedgerDataError: On missing fields, unknown type or negative amount
    """
    if not isinstance(row, dict):
        raise InvalidLedgerDataError(f"Invalid budget entry: expected an object, got {type(row).__name__}")
    try:
        amount = Decimal(str(row["amount"]))
        entry = LedgerEntry(
            category=str(row["category"]),
            amount=amount,
            kind=EntryKind(row["type"]),
            date=date.fromisoformat(str(row["date"])[:10]),
            tag=row.get("tag"),
            description=row.get("description"),
        )
    except (KeyError, ValueError, TypeError, InvalidOperation) as e:
        raise InvalidLedgerDataError(f"Invalid budget entry: {e!r}") from e

    if not amount.is_finite() or amount < 0:
        raise InvalidLedgerDataError(f"Budget entry amount must be non-negative: {amount}")
    return entry


def parse_benefit_row(row: Dict[str, Any]) -> BenefitAccount:
    """
    Convert an ebt_accounts row into a BenefitAccount.

    Raises:
        InvalidLedgerDataError: On a non-object row, missing balance or negative balance
    """
    if not isinstance(row, dict):
        raise InvalidLedgerDataError(f"Invalid benefit account: expected an object, got {type(row).__name__}")
    try:
        refill = row.get("refill_date")
        account = BenefitAccount(
            current_balance=Decimal(str(row["current_balance"])),
            refill_date=date.fromisoformat(str(refill)[:10]) if refill else None,
        )
    except (KeyError, ValueError, TypeError, InvalidOperation) as e:
        raise InvalidLedgerDataError(f"Invalid benefit account: {e!r}") from e

    if not account.current_balance.is_finite() or account.current_balance < 0:
        raise InvalidLedgerDataError(f"Benefit balance must be non-negative: {account.current_balance}")
    return account


class PersistenceClient:
    """Client for the hosted persistence REST API (PostgREST query syntax)"""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.persistence_api_base
        self.api_key = api_key if api_key is not None else settings.persistence_api_key
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def _get_rows(self, table: str, params: Dict[str, str]) -> List[Dict[str, Any]]:
        """
        Fetch rows from a table.

        Raises:
            PersistenceAPIError: On timeout, HTTP errors, or a non-list body
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(
                    f"{self.base_url}/rest/v1/{table}",
                    params=params,
                    headers=self._headers(),
                )
                response.raise_for_status()
                data = response.json()
            except httpx.TimeoutException as e:
                raise PersistenceAPIError(f"Persistence API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise PersistenceAPIError(f"Persistence API error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise PersistenceAPIError(f"Persistence API unreachable: {e}") from e
            except ValueError as e:
                raise PersistenceAPIError("Persistence API returned invalid JSON") from e

        if not isinstance(data, list):
            raise PersistenceAPIError(f"Expected a row list from {table}")
        return data

    async def get_ledger_entries(self, user_id: str, since: date) -> List[LedgerEntry]:
        """Fetch budget entries dated on or after `since`, oldest first"""
        rows = await self._get_rows(
            "budget_entries",
            {
                "select": "*",
                "user_id": f"eq.{user_id}",
                "date": f"gte.{since.isoformat()}",
                "order": "date.asc",
            },
        )
        return [parse_ledger_row(row) for row in rows]

    async def get_benefit_account(self, user_id: str) -> Optional[BenefitAccount]:
        """Fetch the user's EBT account; None when the user has none"""
        rows = await self._get_rows(
            "ebt_accounts",
            {"select": "*", "user_id": f"eq.{user_id}", "limit": "1"},
        )
        if not rows:
            return None
        return parse_benefit_row(rows[0])
