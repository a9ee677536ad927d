import pytest
from fastapi.testclient import TestClient

from erpdesk.address import reset_address_catalog
from erpdesk.api.main import create_app
from erpdesk.config import set_config_for_test


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for var in ["ADDRESS_DATA_DIR", "LOCALE", "ADDRESS_SEARCH_LIMIT"]:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def client():
    set_config_for_test(address_data_dir=None, locale="zh-CN")
    reset_address_catalog()
    with TestClient(create_app()) as test_client:
        yield test_client
    reset_address_catalog()


@pytest.fixture
def broken_client(tmp_path):
    """Client whose address dataset directory does not exist."""
    def _make(locale="zh-CN"):
        set_config_for_test(address_data_dir=str(tmp_path / "missing"), locale=locale)
        reset_address_catalog()
        return TestClient(create_app())
    yield _make
    reset_address_catalog()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": "1.0.0"}


def test_list_provinces_envelope(client):
    response = client.get("/address/provinces")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"][0] == {"code": "11", "name": "北京市", "type": "province"}
    assert [p["code"] for p in body["data"]] == ["11", "31", "32", "33", "44", "51"]
    assert "error" not in body


def test_list_cities_uses_parent_code(client):
    body = client.get("/address/provinces/44/cities").json()
    assert body["success"] is True
    assert body["data"] == [
        {"code": "4401", "name": "广州市", "type": "city", "parentCode": "44"},
        {"code": "4403", "name": "深圳市", "type": "city", "parentCode": "44"},
    ]


def test_list_districts(client):
    body = client.get("/address/cities/3101/districts").json()
    assert [d["name"] for d in body["data"]] == ["黄浦区", "徐汇区", "浦东新区"]
    assert all(d["parentCode"] == "3101" for d in body["data"])


def test_unknown_codes_return_empty_data(client):
    for path in ["/address/provinces/unknown-code/cities", "/address/cities/unknown-code/districts"]:
        response = client.get(path)
        assert response.status_code == 200
        assert response.json() == {"success": True, "data": []}


def test_search(client):
    body = client.get("/address/search", params={"keyword": "南山"}).json()
    assert body["success"] is True
    (hit,) = body["data"]
    assert hit["fullPath"] == "广东省 深圳市 南山区"
    assert hit["score"] == 80
    assert hit["district"]["code"] == "440305"
    assert hit["province"] == {"code": "44", "name": "广东省", "type": "province"}


def test_search_limit_and_validation(client):
    body = client.get("/address/search", params={"keyword": "城区", "limit": 1}).json()
    assert len(body["data"]) == 1
    assert client.get("/address/search", params={"keyword": "城区", "limit": 0}).status_code == 422
    assert client.get("/address/search").status_code == 422


def test_search_without_province_only_hits(client):
    body = client.get("/address/search", params={"keyword": "浙江"}).json()
    (hit,) = body["data"]
    assert hit == {
        "province": {"code": "33", "name": "浙江省", "type": "province"},
        "fullPath": "浙江省",
        "score": 80,
    }


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/address/provinces", "获取省份数据失败"),
        ("/address/provinces/11/cities", "获取城市数据失败"),
        ("/address/cities/1101/districts", "获取区县数据失败"),
        ("/address/search?keyword=北京", "搜索地址失败"),
    ],
)
def test_dataset_unavailable_returns_failure_envelope(broken_client, path, expected):
    with broken_client() as client:
        response = client.get(path)
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": expected}


def test_failure_message_follows_locale(broken_client):
    with broken_client(locale="en-US") as client:
        body = client.get("/address/provinces").json()
    assert body == {"success": False, "error": "Failed to load provinces"}


def test_unknown_locale_falls_back_to_english(broken_client):
    with broken_client(locale="fr-FR") as client:
        body = client.get("/address/provinces").json()
    assert body["error"] == "Failed to load provinces"


def test_failure_does_not_leak_internal_details(broken_client, tmp_path):
    with broken_client() as client:
        text = client.get("/address/provinces").text
    assert str(tmp_path) not in text
    assert "Traceback" not in text
