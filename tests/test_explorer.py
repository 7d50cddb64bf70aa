# tests/test_explorer.py
import httpx
import pytest

from evm_wallet_api.chain.explorer import ExplorerClient
from evm_wallet_api.exceptions import ExplorerError, InvalidAddress

ADDRESS = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
API_URL = "https://api.polygonscan.com/api"

def make_client(handler, api_key=None):
    return ExplorerClient(API_URL, api_key=api_key, transport=httpx.MockTransport(handler))

class TestExplorerClient:
    @pytest.mark.asyncio
    async def test_lists_transactions(self):
        seen = {}

        def handler(request):
            seen.update(request.url.params)
            return httpx.Response(200, json={
                "status": "1", "message": "OK",
                "result": [{"hash": "0x01", "value": "1000"}],
            })

        transactions = await make_client(handler, api_key="secret").get_transactions(ADDRESS.lower())

        assert transactions == [{"hash": "0x01", "value": "1000"}]
        assert seen["module"] == "account"
        assert seen["action"] == "txlist"
        assert seen["address"] == ADDRESS
        assert seen["sort"] == "desc"
        assert seen["apikey"] == "secret"

    @pytest.mark.asyncio
    async def test_no_api_key_param_when_unset(self):
        seen = {}

        def handler(request):
            seen.update(request.url.params)
            return httpx.Response(200, json={"status": "1", "message": "OK", "result": []})

        await make_client(handler).get_transactions(ADDRESS)
        assert "apikey" not in seen

    @pytest.mark.asyncio
    async def test_empty_history(self):
        def handler(request):
            return httpx.Response(200, json={
                "status": "0", "message": "No transactions found", "result": [],
            })

        assert await make_client(handler).get_transactions(ADDRESS) == []

    @pytest.mark.asyncio
    async def test_explorer_error_status(self):
        def handler(request):
            return httpx.Response(200, json={
                "status": "0", "message": "NOTOK", "result": "Invalid API Key",
            })

        with pytest.raises(ExplorerError, match="Invalid API Key"):
            await make_client(handler).get_transactions(ADDRESS)

    @pytest.mark.asyncio
    async def test_http_error(self):
        def handler(request):
            return httpx.Response(503, text="unavailable")

        with pytest.raises(ExplorerError, match="Explorer request failed"):
            await make_client(handler).get_transactions(ADDRESS)

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        def handler(request):
            return httpx.Response(200, text="<html>")

        with pytest.raises(ExplorerError, match="invalid JSON"):
            await make_client(handler).get_transactions(ADDRESS)

    @pytest.mark.asyncio
    async def test_invalid_address(self):
        def handler(request):
            raise AssertionError("explorer must not be called")

        with pytest.raises(InvalidAddress):
            await make_client(handler).get_transactions("nope")
