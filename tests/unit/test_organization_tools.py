"""Unit tests for organization tools."""

import json

import pytest


class TestOrganizationTools:
    """Test organization tools."""

    @pytest.mark.asyncio
    async def test_get_organization(self, registry, api):
        api.respond("GET", "/orgs/o1", {"id": "o1", "title": "Acme"})

        result = await registry.call("get_organization", {"orgId": "o1"})

        assert not result.isError

    @pytest.mark.asyncio
    async def test_list_collections(self, registry, api):
        api.respond("GET", "/orgs/o1/collections", {"items": []})

        await registry.call("list_collections", {"orgId": "o1", "page": "n2"})

        assert api.last.url.params["page"] == "n2"

    @pytest.mark.asyncio
    async def test_get_collection(self, registry, api):
        api.respond("GET", "/orgs/o1/collections/col1", {"id": "col1"})

        result = await registry.call(
            "get_collection", {"orgId": "o1", "collectionId": "col1"}
        )

        assert not result.isError

    @pytest.mark.asyncio
    async def test_ask_ai(self, registry, api):
        api.respond("POST", "/orgs/o1/ask", {"answer": "Use the CLI"})

        result = await registry.call("ask_ai", {"orgId": "o1", "query": "How?"})

        assert api.last_json() == {"query": "How?"}
        assert json.loads(result.content[0].text) == {"answer": "Use the CLI"}
