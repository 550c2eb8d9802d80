"""Single-shot asynchronous catalog loading.

The catalog comes from one of three places:
- nothing configured: the built-in demo catalog
- a local JSON file holding an array of product records
- an http(s) URL returning the same array, fetched with httpx
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from shopfront.shared.domain.catalog import Catalog, DuplicateProductError, default_catalog
from shopfront.shared.infrastructure.persistence import products_from_records

logger = logging.getLogger(__name__)

BUILTIN_SOURCE = "builtin"


class CatalogLoadError(RuntimeError):
    """Raised when a catalog source cannot be read or holds invalid data."""


class LoadStatus(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class CatalogLoadState:
    """One state of the loading -> loaded(catalog) | failed(error) machine."""

    __slots__ = ("status", "catalog", "error")

    def __init__(self, status: LoadStatus, catalog: Optional[Catalog] = None, error: Optional[str] = None):
        self.status = status
        self.catalog = catalog
        self.error = error

    @classmethod
    def loading(cls) -> "CatalogLoadState":
        return cls(LoadStatus.LOADING)

    @classmethod
    def loaded(cls, catalog: Catalog) -> "CatalogLoadState":
        return cls(LoadStatus.LOADED, catalog=catalog)

    @classmethod
    def failed(cls, error: str) -> "CatalogLoadState":
        return cls(LoadStatus.FAILED, error=error)

    @property
    def is_terminal(self) -> bool:
        return self.status is not LoadStatus.LOADING

    def __repr__(self) -> str:
        if self.status is LoadStatus.LOADED:
            return f"CatalogLoadState(loaded, {len(self.catalog)} products)"
        if self.status is LoadStatus.FAILED:
            return f"CatalogLoadState(failed, {self.error!r})"
        return "CatalogLoadState(loading)"


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def parse_catalog(data: Any) -> Catalog:
    """Turn decoded JSON into a Catalog.

    Accepts either a bare array of records or ``{"products": [...]}``.
    """
    if isinstance(data, dict) and "products" in data:
        data = data["products"]
    if not isinstance(data, list):
        raise CatalogLoadError(f"catalog data must be a list of records, got {type(data).__name__}")
    try:
        return Catalog(products_from_records(data))
    except (ValidationError, DuplicateProductError) as e:
        raise CatalogLoadError(f"invalid catalog data: {e}") from e


class CatalogSource:
    """Fetches a catalog once from the configured source."""

    def __init__(
        self,
        source: Optional[str] = None,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.source = source or None
        self.timeout = timeout
        self._client = client

    @property
    def label(self) -> str:
        return self.source or BUILTIN_SOURCE

    async def fetch(self) -> Catalog:
        """Load the catalog.

        Raises:
            CatalogLoadError: If the source is unreachable or its data is invalid
        """
        if self.source is None:
            return default_catalog()
        if _is_url(self.source):
            return await self._fetch_url(self.source)
        return self._read_file(Path(self.source))

    async def load(self) -> CatalogLoadState:
        """Fetch and report the outcome as a terminal state; never raises."""
        logger.info(f"Loading catalog from {self.label}")
        try:
            catalog = await self.fetch()
        except CatalogLoadError as e:
            logger.error(f"Catalog load from {self.label} failed: {e}")
            return CatalogLoadState.failed(str(e))
        logger.info(f"Loaded {len(catalog)} products from {self.label}")
        return CatalogLoadState.loaded(catalog)

    async def _fetch_url(self, url: str) -> Catalog:
        client = self._client or httpx.AsyncClient(timeout=self.timeout)
        try:
            response = await client.get(url)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise CatalogLoadError(f"catalog request returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise CatalogLoadError(f"catalog request failed: {e}") from e
        except ValueError as e:
            raise CatalogLoadError(f"catalog response is not valid JSON: {e}") from e
        finally:
            if self._client is None:
                await client.aclose()
        return parse_catalog(data)

    def _read_file(self, path: Path) -> Catalog:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise CatalogLoadError(f"catalog file not found: {path}") from e
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise CatalogLoadError(f"cannot read catalog file {path}: {e}") from e
        return parse_catalog(data)
