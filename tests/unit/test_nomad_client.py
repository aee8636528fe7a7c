"""Tests for the Nomad plan client using httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from jobgate.errors import NomadError
from jobgate.models.config import NomadConfig
from jobgate.models.diff import DiffType
from jobgate.nomad.client import NomadClient

_JOB = {"ID": "example", "Name": "example", "TaskGroups": []}


def _client(handler, **kwargs) -> NomadClient:
    return NomadClient("http://nomad.test:4646/", transport=httpx.MockTransport(handler), **kwargs)


class TestPlanRequest:
    def test_request_shape(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"Diff": {"ID": "example", "Type": "Added"}})

        with _client(handler, token="secret", namespace="prod") as client:
            result = client.plan(_JOB)

        assert result.diff.type is DiffType.ADDED
        request = seen[0]
        assert request.method == "PUT"
        assert request.url.path == "/v1/job/example/plan"
        assert request.url.params["namespace"] == "prod"
        assert "region" not in request.url.params
        assert request.headers["X-Nomad-Token"] == "secret"
        assert json.loads(request.content) == {"Job": _JOB, "Diff": True}

    def test_no_token_header_without_token(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert "X-Nomad-Token" not in request.headers
            return httpx.Response(200, json={"Diff": {"Type": "None"}})

        with _client(handler) as client:
            assert client.plan(_JOB).diff.type is DiffType.NONE

    def test_from_config(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.host == "nomad.internal"
            assert request.url.params["region"] == "eu"
            return httpx.Response(200, json={"Diff": {"Type": "Edited"}})

        config = NomadConfig(address="http://nomad.internal:4646", region="eu")
        with NomadClient.from_config(config, transport=httpx.MockTransport(handler)) as client:
            assert client.plan(_JOB).diff.type is DiffType.EDITED

    def test_job_without_id_is_rejected(self) -> None:
        with _client(lambda request: httpx.Response(200, json={})) as client, pytest.raises(ValueError):
            client.plan({"Name": "example"})

    def test_empty_address_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            NomadClient("")


class TestPlanFailures:
    def test_non_2xx_raises_with_status(self) -> None:
        with _client(lambda request: httpx.Response(500, text="rpc error: no leader")) as client:
            with pytest.raises(NomadError) as exc_info:
                client.plan(_JOB)
        assert exc_info.value.status_code == 500
        assert "no leader" in str(exc_info.value)

    def test_connection_error_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with _client(handler) as client, pytest.raises(NomadError) as exc_info:
            client.plan(_JOB)
        assert exc_info.value.status_code is None

    def test_timeout_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with _client(handler) as client, pytest.raises(NomadError, match="timed out"):
            client.plan(_JOB)

    def test_invalid_json_raises(self) -> None:
        with _client(lambda request: httpx.Response(200, text="<html>")) as client:
            with pytest.raises(NomadError, match="not valid JSON"):
                client.plan(_JOB)

    def test_non_object_json_raises(self) -> None:
        with _client(lambda request: httpx.Response(200, json=[1, 2])) as client:
            with pytest.raises(NomadError, match="not a JSON object"):
                client.plan(_JOB)
