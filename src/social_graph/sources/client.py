from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

import httpx
from pydantic import ValidationError

from social_graph.http import HttpClientFactory, transient_retry

from .models import SourceRecord

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=SourceRecord)
RecordCallback = Callable[[R], Any]


@dataclass(slots=True)
class FetchOutcome:
    """Result of pulling one resource listing.

    A failed fetch keeps whatever records arrived before the failure;
    `error` carries the diagnostic line that was logged.
    """

    path: str
    records: list[dict[str, Any]] = field(default_factory=list)
    error: str | None = None
    delivered: int = 0
    skipped: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


class ThirdPartyApiClient:
    """Base class for JSON listing APIs.

    Subclasses pass the service root as `base_url`; endpoint paths are
    joined onto it with `with_base_url`. Transport and payload failures are
    caught in `fetch` and reported as a failed `FetchOutcome`, never raised.
    """

    def __init__(
        self,
        base_url: str,
        *,
        page_size: int | None = None,
        max_pages: int = 1000,
        attempts: int = 1,
        client: httpx.AsyncClient | None = None,
    ):
        if page_size is not None and page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        if max_pages < 1:
            raise ValueError(f"max_pages must be >= 1, got {max_pages}")
        self.base_url = base_url.rstrip("/")
        self.page_size = page_size
        self.max_pages = max_pages
        self.attempts = max(1, attempts)
        # Only a client created here is closed by `aclose`.
        self._owns_client = client is None
        self._client = client or HttpClientFactory.client(
            headers={"Accept": "application/json"}
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    def with_base_url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET `path` and return the decoded JSON body. Raises on failure."""

        @transient_retry(self.attempts)
        async def _get() -> Any:
            r = await self._client.get(self.with_base_url(path), params=params)
            r.raise_for_status()
            return r.json()

        return await _get()

    async def fetch(self, path: str) -> FetchOutcome:
        outcome = FetchOutcome(path=path)
        try:
            if self.page_size is None:
                outcome.records.extend(self._as_list(await self.get(path)))
                return outcome
            await self._fetch_pages(path, outcome)
            if outcome.ok:
                return outcome
        except httpx.HTTPStatusError as e:
            outcome.error = self._diagnostic(path, e.response.status_code, str(e))
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            outcome.error = self._diagnostic(path, e.__class__.__name__, str(e))
        except ValueError as e:
            outcome.error = self._diagnostic(path, "invalid_payload", str(e))
        logger.warning(outcome.error)
        return outcome

    async def _fetch_pages(self, path: str, outcome: FetchOutcome) -> None:
        previous: list[dict[str, Any]] | None = None
        for page in range(1, self.max_pages + 1):
            items = self._as_list(
                await self.get(path, params={"_page": page, "_limit": self.page_size})
            )
            if items and items == previous:
                # The server ignores _page and keeps sending the same listing.
                logger.warning("%s repeated page %d; treating listing as complete", path, page - 1)
                return
            outcome.records.extend(items)
            if len(items) < self.page_size:
                return
            previous = items
        outcome.error = self._diagnostic(
            path, "too_many_pages", f"listing did not end within {self.max_pages} pages"
        )

    async def iterate(self, path: str, model: type[R], callback: RecordCallback) -> FetchOutcome:
        """Fetch `path` and hand each record to `callback` in listing order.

        Async callbacks are awaited before the next record is delivered.
        Records without a usable identity are logged and skipped; all other
        fields reach the callback untouched via `record.payload()`.
        """
        outcome = await self.fetch(path)
        for raw in outcome.records:
            try:
                record = model.from_payload(raw)
            except ValidationError as e:
                outcome.skipped += 1
                logger.warning("Skipping record without identity from %s: %s", path, e.errors()[:1])
                continue
            result = callback(record)
            if inspect.isawaitable(result):
                await result
            outcome.delivered += 1
        return outcome

    def _diagnostic(self, path: str, code: Any, message: str) -> str:
        return f"Endpoint: {self.with_base_url(path)}|Code: {code}|Message: {message}"

    @staticmethod
    def _as_list(data: Any) -> list[dict[str, Any]]:
        if not isinstance(data, list):
            raise ValueError(f"unexpected payload: expected a JSON array, got {type(data).__name__}")
        return data
