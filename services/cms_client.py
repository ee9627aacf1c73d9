import logging
from typing import Any

import httpx

from exceptions import CmsError
from models.cms.artist import Artist
from models.cms.service import Service
from services.cms_queries import GET_ARTIST_BY_ID, GET_ARTISTS, GET_SERVICE_BY_ID, GET_SERVICES
from utils.cms import map_artist_node, map_service_node

logger = logging.getLogger(__name__)


class CmsClient:
    """
    Reads studio content from the headless CMS.

    The accessors never raise: a failed query is logged and reported as an
    empty list or None.
    """

    def __init__(self, http_client: httpx.AsyncClient, graphql_url: str | None) -> None:
        self.http_client = http_client
        self.graphql_url = graphql_url

    async def fetch_graphql(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        if not self.graphql_url:
            raise CmsError("Missing GraphQL URL")

        try:
            response = await self.http_client.post(
                self.graphql_url,
                json={"query": query, "variables": variables or {}}
            )
        except httpx.HTTPError as e:
            raise CmsError(f"GraphQL fetch error: {e}") from e

        if response.is_error:
            raise CmsError("Network response was not ok")

        try:
            payload = response.json()
        except ValueError as e:
            raise CmsError("Invalid GraphQL response") from e

        if not isinstance(payload, dict):
            raise CmsError("Invalid GraphQL response")

        if payload.get("errors"):
            messages = [error.get("message", "") for error in payload["errors"]]
            raise CmsError("; ".join(messages) or "GraphQL error")

        return payload.get("data") or {}

    async def get_services(self) -> list[Service]:
        try:
            data = await self.fetch_graphql(GET_SERVICES)
        except CmsError as e:
            logger.error("Failed to load services: %s", e.message)
            return []

        nodes = (data.get("services") or {}).get("nodes") or []
        return [map_service_node(node) for node in nodes]

    async def get_service_by_id(self, service_id: str) -> Service | None:
        try:
            data = await self.fetch_graphql(GET_SERVICE_BY_ID, {"id": service_id})
        except CmsError as e:
            logger.error("Failed to load service %s: %s", service_id, e.message)
            return None

        if not data.get("service"):
            return None
        return map_service_node(data["service"])

    async def get_artists(self) -> list[Artist]:
        try:
            data = await self.fetch_graphql(GET_ARTISTS)
        except CmsError as e:
            logger.error("Failed to load artists: %s", e.message)
            return []

        nodes = (data.get("teamMembers") or {}).get("nodes") or []
        return [map_artist_node(node) for node in nodes]

    async def get_artist_by_id(self, artist_id: str) -> Artist | None:
        try:
            data = await self.fetch_graphql(GET_ARTIST_BY_ID, {"id": artist_id})
        except CmsError as e:
            logger.error("Failed to load artist %s: %s", artist_id, e.message)
            return None

        if not data.get("teamMember"):
            return None
        return map_artist_node(data["teamMember"])
