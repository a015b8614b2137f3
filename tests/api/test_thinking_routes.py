"""HTTP route tests — thinking step, tool listing, health, error envelopes.

Invariants:
    - Engine outcomes (ERROR included) come back as HTTP 200
    - Non-object bodies are rejected by FastAPI validation with 400
    - Unknown tool names in the URL are 404 UNKNOWN_TOOL
"""

import pytest
from httpx import ASGITransport, AsyncClient

from occam_razor.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as ac:
        yield ac


@pytest.mark.asyncio
async def test_step_returns_next_thought(client):
    response = await client.post("/api/v1/thinking/step", json={
        "thought": "...",
        "thought_number": 1,
        "thinking_stage": "context_analysis",
        "next_thought_needed": True,
        "user_request": "add a button",
    })
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "NEXT_THOUGHT"
    assert body["next_stage"] == "outcome_definition"
    assert body["thought_number"] == 1
    assert body["next_thought_number"] == 2


@pytest.mark.asyncio
async def test_step_completion(client):
    response = await client.post("/api/v1/thinking/step", json={
        "thought": "Implemented the button.",
        "thought_number": 6,
        "thinking_stage": "implementation",
        "next_thought_needed": False,
    })
    assert response.json() == {
        "status": "COMPLETED",
        "action": "completed",
        "final_thought": "Implemented the button.",
        "thought_number": 6,
    }


@pytest.mark.asyncio
async def test_step_engine_error_is_in_band(client):
    response = await client.post("/api/v1/thinking/step", json={
        "thought": "...",
        "thought_number": 1,
        "thinking_stage": "context_analysis",
        "next_thought_needed": True,
    })
    assert response.status_code == 200
    assert response.json()["status"] == "ERROR"


@pytest.mark.asyncio
async def test_step_invalid_arguments_are_in_band(client):
    response = await client.post("/api/v1/thinking/step", json={"thought": ""})
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ERROR"
    assert body["details"]["error_code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_step_non_object_body_is_400(client):
    response = await client.post("/api/v1/thinking/step", json=[1, 2, 3])
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_list_tools(client):
    response = await client.get("/api/v1/thinking/tools")
    assert response.status_code == 200
    assert response.json()["tools"][0]["name"] == "occams_razor_thinking"


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/api/v1/health/")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_call_tool_by_name(client):
    response = await client.post("/api/v1/thinking/tools/occams_razor_thinking", json={
        "thought": "...",
        "thought_number": 2,
        "thinking_stage": "outcome_definition",
        "next_thought_needed": True,
    })
    assert response.status_code == 200
    assert response.json()["next_stage"] == "solution_exploration"


@pytest.mark.asyncio
async def test_call_unknown_tool_is_404(client):
    response = await client.post("/api/v1/thinking/tools/sequential_thinking", json={})
    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "UNKNOWN_TOOL"
    assert error["category"] == "resource_not_found"
    assert error["tool_name"] == "sequential_thinking"
    assert error["message"] == "Tool 'sequential_thinking' does not exist."
    assert error["timestamp"]


@pytest.mark.asyncio
async def test_step_non_object_body_lists_fields(client):
    response = await client.post("/api/v1/thinking/step", json="just a string")
    error = response.json()["error"]
    assert error["category"] == "validation"
    assert error["details"][0]["field"].startswith("body")
