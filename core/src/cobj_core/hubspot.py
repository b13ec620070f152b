"""HubSpot custom object API client.

Only the two calls the web front end needs are implemented: list all records of
the configured custom object, and create one. Every failure surfaces as
`RemoteError` so route handlers have a single thing to catch.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Final, Protocol

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cobj_core.config import AppConfig

logger = logging.getLogger(__name__)

# Internal names of the custom object's properties (fixed contract with the portal schema).
PROPERTY_NAMES: Final[tuple[str, ...]] = ("name", "species", "bio", "dog")


class RemoteError(Exception):
    """Any failure talking to the remote API."""

    def __init__(self, message: str, *, status_code: int | None = None, body: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body

    def detail(self) -> Any:
        if self.status_code is None and self.body is None:
            return self.message
        return {"status": self.status_code, "body": self.body}


class CustomObjectRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    properties: dict[str, str | None] = Field(default_factory=dict)
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")
    archived: bool = False

    def prop(self, name: str) -> str:
        return self.properties.get(name) or ""


class RecordProperties(BaseModel):
    """Payload for a new record; values are forwarded untouched."""

    name: str = ""
    species: str = ""
    bio: str = ""
    dog: str = ""


class _RecordPage(BaseModel):
    results: list[CustomObjectRecord]


class CustomObjectClient(Protocol):
    async def list_records(self) -> list[CustomObjectRecord]: ...

    async def create_record(self, properties: RecordProperties) -> None: ...


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class HubSpotClient:
    """`CustomObjectClient` backed by the HubSpot CRM v3 objects API."""

    def __init__(self, config: AppConfig, http: httpx.AsyncClient | None = None):
        self._url = config.objects_url
        self._headers = {
            "Authorization": f"Bearer {config.hubspot_access_token or ''}",
            "Content-Type": "application/json",
        }
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(
            timeout=httpx.Timeout(config.hubspot_timeout_seconds)
        )

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def _request(self, method: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._http.request(method, self._url, headers=self._headers, **kwargs)
        except httpx.HTTPError as exc:
            raise RemoteError(f"{method} {self._url} failed: {exc}") from exc

        if not response.is_success:
            raise RemoteError(
                f"{method} {self._url} returned {response.status_code}",
                status_code=response.status_code,
                body=_response_body(response),
            )
        return response

    async def list_records(self) -> list[CustomObjectRecord]:
        response = await self._request("GET", params={"properties": ",".join(PROPERTY_NAMES)})
        try:
            page = _RecordPage.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise RemoteError(
                f"Unexpected list response: {exc}",
                status_code=response.status_code,
                body=response.text,
            ) from exc
        return page.results

    async def create_record(self, properties: RecordProperties) -> None:
        await self._request("POST", json={"properties": properties.model_dump()})
        logger.debug("Created %s record", self._url.rsplit("/", 1)[-1])


def build_hubspot_client(config: AppConfig) -> HubSpotClient:
    if not config.hubspot_access_token:
        logger.warning("HUBSPOT_ACCESS_TOKEN is not set; remote calls will be rejected")
    return HubSpotClient(config)
