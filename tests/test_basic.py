# tests/test_basic.py
"""
API tests for the group splitter.
- Test FastAPI endpoints (parse, preview, generate)
- Test error mapping for invalid input
"""

import pytest
from httpx import ASGITransport, AsyncClient
from fastapi import status

from main import app

BASE_URL = "http://test"
PREFIX = "/api/v1/groups"


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE_URL) as ac:
        yield ac


@pytest.mark.asyncio
async def test_index(client):
    response = await client.get("/")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "ok"

@pytest.mark.asyncio
async def test_generate_fixed(client):
    response = await client.post(f"{PREFIX}/generate", json={
        "participants": list("ABCDEFG"),
        "directive": {"type": "fixed", "value": 3},
    })
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [g["size"] for g in data["groups"]] == [3, 4]
    assert [g["id"] for g in data["groups"]] == [1, 2]
    assert data["metadata"] == {
        "totalParticipants": 7,
        "groupCount": 2,
        "averageGroupSize": 3.5,
        "sizeVariation": 1,
    }
    members = sorted(m for g in data["groups"] for m in g["members"])
    assert members == list("ABCDEFG")

@pytest.mark.asyncio
async def test_generate_target_trims_names(client):
    response = await client.post(f"{PREFIX}/generate", json={
        "participants": [" Ann ", "Bob", "Cy  ", "Dee", "Eve"],
        "directive": {"type": "target", "value": 2},
        "avoid_recent_pairings": True,
    })
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [g["size"] for g in data["groups"]] == [3, 2]
    members = sorted(m for g in data["groups"] for m in g["members"])
    assert members == ["Ann", "Bob", "Cy", "Dee", "Eve"]
    assert data["metadata"]["averageGroupSize"] == 2.5

@pytest.mark.asyncio
@pytest.mark.parametrize("body, reason", [
    ({"participants": [], "directive": {"type": "fixed", "value": 2}}, "no participants"),
    ({"participants": ["a", "A"], "directive": {"type": "fixed", "value": 2}}, "duplicate name"),
    ({"participants": ["a", " "], "directive": {"type": "fixed", "value": 2}}, "empty name"),
    ({"participants": ["a", "b"], "directive": {"type": "target", "value": 3}}, "target group count too large"),
])
async def test_generate_invalid(client, body, reason):
    response = await client.post(f"{PREFIX}/generate", json=body)
    assert response.status_code == 422
    assert response.json()["detail"] == reason

@pytest.mark.asyncio
async def test_generate_rejects_long_names(client):
    response = await client.post(f"{PREFIX}/generate", json={
        "participants": ["x" * 51, "Bob"],
        "directive": {"type": "fixed", "value": 2},
    })
    assert response.status_code == 422

@pytest.mark.asyncio
async def test_generate_rejects_unknown_directive(client):
    response = await client.post(f"{PREFIX}/generate", json={
        "participants": ["Ann", "Bob"],
        "directive": {"type": "pairs", "value": 2},
    })
    assert response.status_code == 422

@pytest.mark.asyncio
async def test_generate_text(client):
    response = await client.post(f"{PREFIX}/generate/text", json={
        "participants": ["Ann", "Bob", "Cy", "Dee"],
        "directive": {"type": "fixed", "value": 2},
    })
    assert response.status_code == status.HTTP_200_OK
    assert response.headers["content-type"].startswith("text/plain")
    lines = response.text.split("\n")
    assert [line.split(":")[0] for line in lines] == ["Group 1", "Group 2"]

@pytest.mark.asyncio
async def test_parse(client):
    response = await client.post(f"{PREFIX}/parse", json={"text": "Ann\n  Bob \n\n"})
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"participants": ["Ann", "Bob"]}

@pytest.mark.asyncio
async def test_preview(client):
    response = await client.get(f"{PREFIX}/preview", params={"total": 8, "type": "fixed", "value": 3})
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["sizes"] == [3, 3, 2]
    assert data["summary"] == "2 groups of 3 people, 1 group of 2 people"

@pytest.mark.asyncio
async def test_preview_default_size(client):
    response = await client.get(f"{PREFIX}/preview", params={"total": 8})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["sizes"] == [4, 4]

@pytest.mark.asyncio
async def test_preview_invalid(client):
    response = await client.get(f"{PREFIX}/preview", params={"total": 3, "type": "target", "value": 0})
    assert response.status_code == 422
    assert response.json()["detail"] == "non-positive size"

@pytest.mark.asyncio
async def test_preview_rejects_huge_total(client):
    response = await client.get(f"{PREFIX}/preview", params={"total": 5000000, "type": "target", "value": 2500000})
    assert response.status_code == 422
    assert response.json()["detail"] == "too many participants"

@pytest.mark.asyncio
async def test_preview_at_participant_cap(client):
    response = await client.get(f"{PREFIX}/preview", params={"total": 100, "type": "fixed", "value": 10})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["sizes"] == [10] * 10
