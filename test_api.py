import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from conftest import make_envelope
from soar.api.routes import get_session
from soar.main import app
from soar.view import ViewSession


@pytest.fixture
def session():
    return ViewSession()


@pytest_asyncio.fixture
async def client(session):
    app.dependency_overrides[get_session] = lambda: session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def loaded(client, sample_dict):
    response = await client.put("/architecture", json=sample_dict)
    assert response.status_code == 200
    return client


# ---- Validation ----

@pytest.mark.asyncio
async def test_validate_valid_envelope(client, sample_dict):
    response = await client.post("/validate", json=sample_dict)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["architecture"]["name"] == "E-Commerce Platform"


@pytest.mark.asyncio
async def test_validate_reports_violations(client):
    response = await client.post("/validate", json=make_envelope(nodes=[]))

    body = response.json()
    assert response.status_code == 200
    assert body["success"] is False
    assert body["errors"][0]["path"] == "architecture.nodes"
    assert body["errors"][0]["code"] == "too_small"


@pytest.mark.asyncio
async def test_validate_non_object_body(client):
    response = await client.post("/validate", json="hello")

    assert response.json()["errors"][0]["path"] == "root"


@pytest.mark.asyncio
async def test_validate_bare_architecture(client, sample_dict):
    response = await client.post("/validate/architecture", json=sample_dict["architecture"])
    assert response.json()["success"] is True


@pytest.mark.asyncio
async def test_sample_endpoint(client, sample_dict):
    response = await client.get("/sample")
    assert response.json() == sample_dict


# ---- Loading ----

@pytest.mark.asyncio
async def test_nothing_loaded(client):
    assert (await client.get("/architecture")).status_code == 404
    assert (await client.get("/visible")).status_code == 404
    assert (await client.get("/nodes/x")).status_code == 404


@pytest.mark.asyncio
async def test_load_architecture_summary(client, sample_dict, session):
    response = await client.put("/architecture", json=sample_dict)

    body = response.json()
    assert response.status_code == 200
    assert body["name"] == "E-Commerce Platform"
    assert body["version"] == "2.1.0"
    assert body["nodeKinds"]["service"] == 4
    assert body["edgeKinds"]["http"] == 3
    assert body["consistency"]["is_consistent"] is True
    assert session.architecture is not None
    assert session.is_loading is False


@pytest.mark.asyncio
async def test_load_invalid_architecture(client, session):
    response = await client.put("/architecture", json=make_envelope(name=""))

    assert response.status_code == 422
    errors = response.json()["detail"]["errors"]
    assert errors == [{
        "path": "architecture.name",
        "message": "Architecture name is required",
        "code": "too_small",
    }]
    assert session.architecture is None
    assert session.error == "1 validation error(s)"


@pytest.mark.asyncio
async def test_load_architecture_only(client, sample_dict):
    response = await client.put(
        "/architecture",
        params={"architecture_only": "true"},
        json=sample_dict["architecture"],
    )

    assert response.status_code == 200
    assert response.json()["summary"] == ""


@pytest.mark.asyncio
async def test_get_architecture_round_trips(loaded, sample_dict):
    response = await loaded.get("/architecture")
    assert response.json() == sample_dict["architecture"]


# ---- Nodes ----

@pytest.mark.asyncio
async def test_get_nested_node(loaded):
    response = await loaded.get("/nodes/user-auth-controller")

    body = response.json()
    assert body["id"] == "user-auth-controller"
    assert body["kind"] == "class"
    assert body["childCount"] == 0
    assert "children" not in body


@pytest.mark.asyncio
async def test_get_unknown_node(loaded):
    response = await loaded.get("/nodes/nope")

    assert response.status_code == 404
    assert response.json()["detail"] == "Node 'nope' not found"


@pytest.mark.asyncio
async def test_node_connections(loaded):
    response = await loaded.get("/nodes/kafka/connections")
    assert [e["id"] for e in response.json()] == ["order-events", "notify-consume"]


@pytest.mark.asyncio
async def test_toggle_and_visible(loaded):
    await loaded.patch("/view", json={"detailLevel": "overview"})
    before = (await loaded.get("/visible")).json()

    toggled = await loaded.post("/nodes/user-service/toggle")
    after = (await loaded.get("/visible")).json()

    assert toggled.json() == {"nodeId": "user-service", "expanded": True}
    assert before["detailLevel"] == "overview"
    assert len(before["nodes"]) == 10
    assert len(after["nodes"]) == 12
    user = next(n for n in before["nodes"] if n["id"] == "user-service")
    assert user["childCount"] == 2


# ---- View state ----

@pytest.mark.asyncio
async def test_view_defaults(client):
    body = (await client.get("/view")).json()

    assert body["loaded"] is False
    assert body["detailLevel"] == "service"
    assert body["cameraPosition"] == {"x": 0.0, "y": 10.0, "z": 20.0}


@pytest.mark.asyncio
async def test_patch_view_partial_update(client):
    await client.patch("/view", json={"selectedNodeId": "a", "showLabels": False})
    body = (await client.patch("/view", json={"hoveredNodeId": "b"})).json()

    assert body["selectedNodeId"] == "a"
    assert body["hoveredNodeId"] == "b"
    assert body["showLabels"] is False
    assert body["showConnections"] is True


@pytest.mark.asyncio
async def test_patch_view_clears_selection_with_null(client):
    await client.patch("/view", json={"selectedNodeId": "a"})
    body = (await client.patch("/view", json={"selectedNodeId": None})).json()
    assert body["selectedNodeId"] is None


@pytest.mark.asyncio
async def test_patch_view_camera(client):
    body = (await client.patch("/view", json={"cameraPosition": {"x": 1, "y": 2, "z": 3}})).json()
    assert body["cameraPosition"] == {"x": 1.0, "y": 2.0, "z": 3.0}


@pytest.mark.asyncio
async def test_patch_view_rejects_unknown_level(client):
    response = await client.patch("/view", json={"detailLevel": "galaxy"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_kind_styles(client):
    body = (await client.get("/kinds")).json()

    assert len(body["nodeKinds"]) == 12
    assert len(body["edgeKinds"]) == 9
    assert body["nodeKinds"]["database"]["shape"] == "cylinder"
    assert body["detailLevels"] == {"overview": 1, "service": 2, "module": 3, "code": 4}
