"""Integration tests for the example endpoint."""

from fastapi.testclient import TestClient

EXPECTED = {"name": "John", "state": "TX"}


class TestGetExample:
    def test_returns_fixed_record(self, client: TestClient):
        resp = client.get("/api/example")
        assert resp.status_code == 200
        assert resp.json() == EXPECTED

    def test_content_type_is_json(self, client: TestClient):
        resp = client.get("/api/example")
        assert resp.headers["content-type"].startswith("application/json")

    def test_body_has_exactly_two_keys(self, client: TestClient):
        data = client.get("/api/example").json()
        assert set(data) == {"name", "state"}

    def test_query_params_ignored(self, client: TestClient):
        resp = client.get("/api/example", params={"foo": "bar", "name": "Jane"})
        assert resp.status_code == 200
        assert resp.json() == EXPECTED

    def test_accept_header_ignored(self, client: TestClient):
        resp = client.get("/api/example", headers={"Accept": "application/json"})
        assert resp.status_code == 200
        assert resp.json() == EXPECTED

    def test_request_body_ignored(self, client: TestClient):
        resp = client.request("GET", "/api/example", json={"name": "Jane", "state": "CA"})
        assert resp.status_code == 200
        assert resp.json() == EXPECTED

    def test_repeated_calls_identical(self, client: TestClient):
        bodies = [client.get("/api/example").content for _ in range(5)]
        assert len(set(bodies)) == 1
        assert client.get("/api/example").json() == EXPECTED


class TestExampleSchema:
    def test_openapi_documents_example_route(self, client: TestClient):
        schema = client.get("/openapi.json").json()
        assert "/api/example" in schema["paths"]
        op = schema["paths"]["/api/example"]["get"]
        ref = op["responses"]["200"]["content"]["application/json"]["schema"]["$ref"]
        assert ref.endswith("/ExampleRead")
        props = schema["components"]["schemas"]["ExampleRead"]["properties"]
        assert set(props) == {"name", "state"}
