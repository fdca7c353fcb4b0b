# tests/test_store_failures.py
import pytest


@pytest.mark.parametrize(
    "method, path, body, message",
    [
        ("get", "/tickets/", None, "Erro ao buscar tickets"),
        ("get", "/tickets/1", None, "Erro ao buscar ticket"),
        ("post", "/tickets/", {"title": "T", "priority": "P"}, "Erro ao criar ticket"),
        ("patch", "/tickets/1", {"status": "Fechado"}, "Erro ao atualizar ticket"),
        ("delete", "/tickets/1", None, "Erro ao deletar ticket"),
    ],
)
def test_store_fault_returns_generic_500(broken_client, caplog, method, path, body, message):
    kwargs = {"json": body} if body is not None else {}
    r = broken_client.request(method.upper(), path, **kwargs)

    assert r.status_code == 500
    assert r.json() == {"detail": message}
    assert "db-host" not in r.text
    assert "db-host" in caplog.text


def test_validation_runs_before_store(broken_client, broken_store):
    r = broken_client.post("/tickets/", json={"title": "sem prioridade"})
    assert r.status_code == 400
    assert broken_store.calls == []


def test_ready_reports_unreachable_database(broken_client):
    r = broken_client.get("/ready")
    assert r.status_code == 503
    assert r.json()["status"] == "not ready"
