"""Tests for the audit client and audit forwarding of mutations."""

import json

import httpx
import pytest

from shared.config import AuditSettings

from app.services.audit import AuditClient, HttpMethod
from app.services.exceptions import AuditUnavailableError

AUDIT_URL = "http://audit.test/api/v1/audit"


def enabled_settings() -> AuditSettings:
    return AuditSettings(enabled=True, url=AUDIT_URL, api_key="audit-key")


@pytest.fixture
def recorded():
    return []


@pytest.fixture
def audit_client(recorded):
    def handler(request: httpx.Request) -> httpx.Response:
        recorded.append(request)
        return httpx.Response(201, json={"status": "ok"})

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AuditClient(enabled_settings(), source="rbac-registry", http_client=http_client)


@pytest.mark.asyncio
async def test_send_posts_record(audit_client, recorded):
    await audit_client.send(HttpMethod.POST, '{"_id": "abc"}')

    assert len(recorded) == 1
    request = recorded[0]
    assert str(request.url) == AUDIT_URL
    assert request.method == "POST"
    assert request.headers["x-api-key"] == "audit-key"
    assert request.headers["User-Agent"] == "rbac-registry"

    body = json.loads(request.content)
    assert body["source"] == "rbac-registry"
    assert body["method"] == "POST"
    assert body["data"] == '{"_id": "abc"}'
    assert body["timeStamp"]
    await audit_client.close()


@pytest.mark.asyncio
async def test_disabled_sends_nothing():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("audit service contacted")

    client = AuditClient(
        AuditSettings(enabled=False, url=AUDIT_URL),
        source="rbac-registry",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    assert client.enabled is False
    await client.send(HttpMethod.DELETE, "{}")
    await client.close()


@pytest.mark.asyncio
async def test_connection_refused():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = AuditClient(
        enabled_settings(),
        source="rbac-registry",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    with pytest.raises(AuditUnavailableError):
        await client.send(HttpMethod.PUT, "{}")
    await client.close()


@pytest.mark.asyncio
async def test_error_status():
    client = AuditClient(
        enabled_settings(),
        source="rbac-registry",
        http_client=httpx.AsyncClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(401))
        ),
    )
    with pytest.raises(AuditUnavailableError):
        await client.send(HttpMethod.POST, "{}")
    await client.close()


@pytest.mark.asyncio
async def test_mutations_are_audited(test_app, test_client, audit_client, recorded):
    """Every successful change is reported once; reads are not."""
    test_app.state.audit = audit_client

    service = (
        await test_client.post("/api/v1/services", json={"name": "Billing", "operations": [{"name": "op1"}]})
    ).json()
    op_id = service["operations"][0]["_id"]
    await test_client.post(
        "/api/v1/services/operation", json={"_id": service["_id"], "operations": [{"name": "op2"}]}
    )
    await test_client.put(f"/api/v1/services/{service['_id']}", json={"name": "Invoices"})
    role = (
        await test_client.post("/api/v1/roles", json={"name": "Editors", "serviceOpIds": [op_id]})
    ).json()
    await test_client.put(f"/api/v1/roles/{role['_id']}", json={"name": "Writers"})
    await test_client.get(f"/api/v1/roles/{role['_id']}")
    await test_client.get("/api/v1/services")
    await test_client.post("/api/v1/rolexpand", json={"roleIds": [role["_id"]]})
    await test_client.delete(f"/api/v1/roles/{role['_id']}")
    await test_client.delete(f"/api/v1/services/{service['_id']}")

    methods = [json.loads(r.content)["method"] for r in recorded]
    assert methods == ["POST", "POST", "PUT", "POST", "PUT", "DELETE", "DELETE"]
    assert json.loads(json.loads(recorded[0].content)["data"])["_id"] == service["_id"]


@pytest.mark.asyncio
async def test_failed_validation_not_audited(test_app, test_client, audit_client, recorded):
    test_app.state.audit = audit_client

    response = await test_client.post("/api/v1/roles", json={"name": "Bad", "serviceOpIds": []})
    assert response.status_code == 400
    assert recorded == []


@pytest.mark.asyncio
async def test_audit_failure_keeps_committed_change(test_app, test_client):
    """The mutation stays committed when the audit service is down."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    test_app.state.audit = AuditClient(
        enabled_settings(),
        source="rbac-registry",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    response = await test_client.post("/api/v1/services", json={"name": "Billing"})
    assert response.status_code == 424
    assert response.json()["detail"]["error"] == "AUDIT_UNAVAILABLE"

    listing = await test_client.get("/api/v1/services")
    assert [s["name"] for s in listing.json()["results"]] == ["Billing"]
