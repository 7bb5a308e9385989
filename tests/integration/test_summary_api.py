"""Integration tests for summary and export endpoints."""

import re

import pytest
from httpx import AsyncClient


class TestSummary:
    """Test POST /api/summary."""

    @pytest.mark.asyncio
    async def test_summary_of_example_memo(self, client: AsyncClient, italian_memo: str):
        response = await client.post("/api/summary", json={"text": italian_memo})

        assert response.status_code == 200
        data = response.json()
        assert data["key_points"] == [
            {"text": "Questo è molto importante per il progetto", "category": "important"},
            {"text": "Dobbiamo finire entro venerdì prossimo", "category": "action"},
            {"text": "Va tutto bene oggi qui", "category": "other"},
        ]
        assert "PUNTI IMPORTANTI:\n1. Questo è molto importante per il progetto" in data["summary"]

    @pytest.mark.asyncio
    async def test_summary_of_empty_text(self, client: AsyncClient):
        response = await client.post("/api/summary", json={"text": ""})

        assert response.status_code == 200
        data = response.json()
        assert data["key_points"] == []
        for header in (
            "PUNTI IMPORTANTI:",
            "AZIONI DA INTRAPRENDERE:",
            "DECISIONI PRESE:",
            "ALTRI PUNTI CHIAVE:",
        ):
            assert header in data["summary"]

    @pytest.mark.asyncio
    async def test_summary_is_idempotent(self, client: AsyncClient, italian_memo: str):
        first = await client.post("/api/summary", json={"text": italian_memo})
        second = await client.post("/api/summary", json={"text": italian_memo})
        assert first.json() == second.json()

    @pytest.mark.asyncio
    async def test_summary_rejects_non_string_text(self, client: AsyncClient):
        response = await client.post("/api/summary", json={"text": ["not", "text"]})

        assert response.status_code == 400
        assert "error" in response.json()


class TestExport:
    """Test POST /api/export."""

    @pytest.mark.asyncio
    async def test_export_returns_named_attachment(self, client: AsyncClient):
        response = await client.post(
            "/api/export", json={"content": "Riassunto Dettagliato:", "kind": "summary"}
        )

        assert response.status_code == 200
        assert response.text == "Riassunto Dettagliato:"
        assert response.headers["content-type"].startswith("text/plain")
        disposition = response.headers["content-disposition"]
        assert re.search(
            r'attachment; filename="summary-\d{4}-\d{2}-\d{2}T\d{2}-\d{2}-\d{2}\.txt"',
            disposition,
        )

    @pytest.mark.asyncio
    async def test_export_rejects_unknown_kind(self, client: AsyncClient):
        response = await client.post("/api/export", json={"content": "x", "kind": "notes"})
        assert response.status_code == 400
