import logging

import pytest

from response_simulator.core.shaper import JSON_CONTENT_TYPE, SAMPLE_HEADERS


def assert_invalid(response):
    assert response.status_code == 400
    assert response.get_data() == b"invalid request params"


class TestRequestEndpoint:
    def test_defaults(self, client):
        response = client.get("/request")
        assert response.status_code == 200
        assert response.headers["Content-Type"] == JSON_CONTENT_TYPE
        assert response.get_data() == b'{"a":""' + b"B" * 392 + b'""}'
        for name, value in SAMPLE_HEADERS.items():
            assert response.headers[name] == value

    def test_omitted_params_match_explicit_defaults(self, client):
        implicit = client.get("/request")
        explicit = client.get("/request?time=0&headers=400&body=400")
        assert implicit.status_code == explicit.status_code
        assert implicit.get_data() == explicit.get_data()
        assert sorted(implicit.headers.items()) == sorted(explicit.headers.items())

    def test_no_content(self, client):
        response = client.get("/request?body=0&headers=0")
        assert response.status_code == 204
        assert "Content-Type" not in response.headers
        assert response.get_data() == b""

    def test_no_content_padded(self, client):
        response = client.get("/request?body=0")
        assert response.status_code == 204
        assert "Content-Type" not in response.headers
        assert response.headers["X-Request-Id"] == SAMPLE_HEADERS["X-Request-Id"]

    @pytest.mark.parametrize("size, expected", [
        (1, b"1"),
        (2, b"12"),
        (5, b'""333""'),
        (10, b'{"a":""BB""}'),
    ])
    def test_body_templates(self, client, size, expected):
        response = client.get(f"/request?body={size}")
        assert response.status_code == 200
        assert response.headers["Content-Type"] == JSON_CONTENT_TYPE
        assert response.get_data() == expected

    def test_header_budget_below_content_type_cost(self, client):
        response = client.get("/request?headers=45&body=1")
        assert response.status_code == 200
        assert "X-Request-Id" not in response.headers

    @pytest.mark.parametrize("query", [
        "time=-1", "time=5001", "time=abc",
        "headers=-1", "headers=1001", "headers=",
        "body=-1", "body=2001", "body=1.5",
        "time=10&headers=10&body=x",
    ])
    def test_invalid_params(self, client, query):
        assert_invalid(client.get(f"/request?{query}"))

    @pytest.mark.parametrize("method", ["post", "put", "patch", "delete", "options"])
    def test_method_agnostic(self, client, method):
        response = getattr(client, method)("/request?body=2")
        assert response.status_code == 200
        assert response.get_data() == b"12"

    def test_head(self, client):
        response = client.head("/request?body=10")
        assert response.status_code == 200
        assert response.headers["Content-Type"] == JSON_CONTENT_TYPE
        assert response.get_data() == b""

    def test_first_value_wins(self, client):
        response = client.get("/request?body=1&body=2")
        assert response.get_data() == b"1"

    def test_deterministic(self, client):
        first = client.get("/request?headers=700&body=77")
        second = client.get("/request?headers=700&body=77")
        assert first.get_data() == second.get_data()
        assert sorted(first.headers.items()) == sorted(second.headers.items())

    def test_request_is_logged(self, client, logger, caplog):
        with caplog.at_level(logging.INFO, logger=logger.name):
            client.get("/request?time=1&headers=2&body=3")

        [record] = [r for r in caplog.records if r.getMessage() == "Request received"]
        assert (record.wait_time, record.headers_length, record.body_length) == (1, 2, 3)

    def test_wait_is_applied(self, client, monkeypatch):
        slept = []
        monkeypatch.setattr("response_simulator.api.app.time.sleep", slept.append)
        client.get("/request?time=250")
        assert slept == [0.25]


def test_unknown_path(client):
    response = client.get("/other")
    assert response.status_code == 404
    assert response.get_data() == b"404 page not found\n"
