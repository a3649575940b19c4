import base64

import httpx
import pytest
import respx
from cloudian_admin.client import ClientConfig, CloudianClient
from cloudian_admin.errors import (
    CloudianDecodeError,
    CloudianNotFoundError,
    CloudianTransportError,
    CloudianValidationError,
)
from httpx import Response

BASE = "https://mock-cloudian.com:19443"


@pytest.mark.asyncio
async def test_get_request_success():
    async with respx.mock:
        route = respx.get(f"{BASE}/group").mock(
            return_value=Response(200, json={"groupId": "QA", "active": "true"})
        )

        client = CloudianClient(base_url=BASE, password="secret")
        async with client:
            data = await client.get("/group", params={"groupId": "QA"})
            assert data["groupId"] == "QA"

        assert route.called
        assert route.calls[0].request.url.params["groupId"] == "QA"


@pytest.mark.asyncio
async def test_auth_header_is_basic_sysadmin():
    async with respx.mock:
        route = respx.get(f"{BASE}/group/list").mock(
            return_value=Response(200, json=[])
        )

        client = CloudianClient(base_url=BASE, password="secret")
        async with client:
            await client.get("/group/list")

        sent = route.calls[0].request.headers
        expected = "Basic " + base64.b64encode(b"sysadmin:secret").decode()

        assert sent.get("Authorization") == expected


def test_missing_base_url_or_password_rejected():
    with pytest.raises(ValueError):
        CloudianClient(base_url="", password="secret")
    with pytest.raises(ValueError):
        CloudianClient(base_url=BASE, password="")


def test_from_config_uses_all_fields():
    config = ClientConfig(
        base_url=BASE + "/",
        password="pw",
        username="admin",
        timeout_seconds=3.5,
    )
    client = CloudianClient.from_config(config)

    assert client.base_url == BASE
    assert client.username == "admin"
    assert client.timeout_seconds == 3.5


@pytest.mark.asyncio
async def test_204_on_get_by_key_raises_not_found():
    async with respx.mock:
        respx.get(f"{BASE}/group").mock(return_value=Response(204))

        client = CloudianClient(base_url=BASE, password="secret")
        async with client:
            with pytest.raises(CloudianNotFoundError) as exc:
                await client.get(
                    "/group",
                    params={"groupId": "QA"},
                    operation="get_group",
                    key="QA",
                    not_found_on_empty=True,
                )

        assert exc.value.operation == "get_group"
        assert "get_group(QA)" in str(exc.value)


@pytest.mark.asyncio
async def test_empty_response_returns_none_when_absence_is_not_an_error():
    async with respx.mock:
        respx.delete(f"{BASE}/group").mock(return_value=Response(200))

        client = CloudianClient(base_url=BASE, password="secret")
        async with client:
            assert await client.delete("/group", params={"groupId": "QA"}) is None


@pytest.mark.asyncio
async def test_400_with_json_raises_validation_error():
    async with respx.mock:
        respx.put(f"{BASE}/group").mock(
            return_value=Response(400, json={"message": "groupId already exists"})
        )

        client = CloudianClient(base_url=BASE, password="secret")
        async with client:
            with pytest.raises(CloudianValidationError) as exc:
                await client.put("/group", json={"groupId": "QA"})

        assert exc.value.status_code == 400
        assert "groupId already exists" in str(exc.value)


@pytest.mark.asyncio
async def test_500_raises_transport_error():
    async with respx.mock:
        respx.get(f"{BASE}/user/list").mock(
            return_value=Response(500, text="Internal Server Error")
        )

        client = CloudianClient(base_url=BASE, password="secret")
        async with client:
            with pytest.raises(CloudianTransportError) as exc:
                await client.get("/user/list")

        assert exc.value.status_code == 500
        assert exc.value.response_text == "Internal Server Error"


@pytest.mark.asyncio
async def test_connect_timeout_is_not_retried():
    async with respx.mock:
        route = respx.get(f"{BASE}/group").mock(
            side_effect=httpx.ConnectTimeout("boom")
        )

        client = CloudianClient(base_url=BASE, password="secret", timeout_seconds=0.1)
        async with client:
            with pytest.raises(CloudianTransportError) as exc:
                await client.get("/group")

        assert exc.value.status_code is None
        assert isinstance(exc.value.__cause__, httpx.ConnectTimeout)
        assert route.call_count == 1


@pytest.mark.asyncio
async def test_non_json_response_raises_decode_error():
    async with respx.mock:
        respx.get(f"{BASE}/group").mock(
            return_value=Response(200, text="<html>Not JSON</html>")
        )

        client = CloudianClient(base_url=BASE, password="secret")
        async with client:
            with pytest.raises(CloudianDecodeError) as exc:
                await client.get("/group")

            assert "Expected JSON" in str(exc.value)


@pytest.mark.asyncio
async def test_shared_http_client_is_not_closed():
    http = httpx.AsyncClient(base_url=BASE)
    client = CloudianClient(base_url=BASE, password="secret", http=http)
    async with client:
        pass

    assert not http.is_closed
    await http.aclose()
