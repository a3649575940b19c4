import pytest
import respx
from cloudian_admin.client import CloudianClient
from cloudian_admin.errors import CloudianDecodeError
from cloudian_admin.models import GB, KB, MB, QoS, User
from cloudian_admin.operations.qos import (
    get_group_qos,
    get_user_qos,
    set_group_qos,
    set_user_qos,
)
from cloudian_admin.qos import decode_qos, qos_query_map, warning_level
from httpx import Response

BASE = "https://mock-cloudian.com:19443"

ONE_GB_AS_KB = str(1024 * 1024)
SEVENTY_FIVE_PERCENT_OF_1GB = str(int(1024 * 1024 * 0.75))


@pytest.fixture
def client():
    return CloudianClient(base_url=BASE, password="secret")


def test_qos_query_map():
    actual = qos_query_map(
        "1",
        "1",
        QoS(
            storage_quota=1 * GB,
            storage_quota_count=1000,
            request_rate=200,
            data_rate_inbound=1 * GB,
            data_rate_outbound=1 * GB,
        ),
    )

    assert actual == {
        "userId": "1",
        "groupId": "1",
        "hlStorageQuotaKBytes": ONE_GB_AS_KB,
        "wlStorageQuotaKBytes": SEVENTY_FIVE_PERCENT_OF_1GB,
        "hlStorageQuotaCount": "1000",
        "wlStorageQuotaCount": "750",
        "hlRequestRate": "200",
        "wlRequestRate": "150",
        "hlDataKBytesIn": ONE_GB_AS_KB,
        "wlDataKBytesIn": SEVENTY_FIVE_PERCENT_OF_1GB,
        "hlDataKBytesOut": ONE_GB_AS_KB,
        "wlDataKBytesOut": SEVENTY_FIVE_PERCENT_OF_1GB,
    }


def test_qos_query_map_truncates_bytes_to_kb():
    params = qos_query_map("u", "g", QoS(storage_quota=1536 + 1023, request_rate=3))

    assert params["hlStorageQuotaKBytes"] == "2"
    assert params["wlStorageQuotaKBytes"] == "1"
    assert params["wlRequestRate"] == "2"


def test_qos_query_map_unlimited():
    params = qos_query_map("u", "g", QoS())

    assert set(params) >= {"hlRequestRate", "wlDataKBytesOut"}
    assert all(v == "-1" for k, v in params.items() if k not in ("userId", "groupId"))


def test_warning_level():
    assert warning_level(100) == 75
    assert warning_level(1) == 0
    assert warning_level(-1) == -1


def test_decode_qos_reads_hard_levels():
    qos = decode_qos(
        {
            "userId": "u1",
            "groupId": "QA",
            "qosLimitList": [
                {"type": "STORAGE_QUOTA_KBYTES_LH", "value": 1024},
                {"type": "STORAGE_QUOTA_KBYTES_LW", "value": 768},
                {"type": "STORAGE_QUOTA_COUNT_LH", "value": "1000"},
                {"type": "REQUEST_RATE_LH", "value": -1},
                {"type": "DATAKBYTES_IN_LH", "value": 2048},
            ],
        }
    )

    assert qos == QoS(
        storage_quota=1 * MB,
        storage_quota_count=1000,
        data_rate_inbound=2048 * KB,
    )


def test_decode_qos_bad_value():
    with pytest.raises(CloudianDecodeError):
        decode_qos({"qosLimitList": [{"type": "REQUEST_RATE_LH", "value": "fast"}]})


@pytest.mark.asyncio
@respx.mock
async def test_set_user_qos_posts_query_map(client):
    route = respx.post(f"{BASE}/qos/limits").mock(return_value=Response(200))
    qos = QoS(storage_quota=1 * GB, request_rate=200)

    async with client:
        await set_user_qos(client, User(user_id="u1", group_id="QA"), qos)

    params = dict(route.calls[0].request.url.params)
    assert params == qos_query_map("u1", "QA", qos)


@pytest.mark.asyncio
@respx.mock
async def test_group_qos_uses_wildcard_user(client):
    post = respx.post(f"{BASE}/qos/limits").mock(return_value=Response(200))
    get = respx.get(f"{BASE}/qos/limits").mock(
        return_value=Response(
            200,
            json={"qosLimitList": [{"type": "REQUEST_RATE_LH", "value": 50}]},
        )
    )

    async with client:
        await set_group_qos(client, "QA", QoS(request_rate=50))
        qos = await get_group_qos(client, "QA")

    assert qos == QoS(request_rate=50)
    assert post.calls[0].request.url.params["userId"] == "*"
    assert get.calls[0].request.url.params["userId"] == "*"


@pytest.mark.asyncio
@respx.mock
async def test_get_user_qos(client):
    respx.get(f"{BASE}/qos/limits").mock(
        return_value=Response(
            200,
            json={"qosLimitList": [{"type": "DATAKBYTES_OUT_LH", "value": 1048576}]},
        )
    )

    async with client:
        qos = await get_user_qos(client, User(user_id="u1", group_id="QA"))

    assert qos.data_rate_outbound == 1 * GB
    assert qos.storage_quota is None
