"""Minimal Nomad HTTP API client for dry-run job plans.

Only the plan endpoint is used::

    PUT /v1/job/<job id>/plan   {"Job": {...}, "Diff": true}

Every failure (connection error, timeout, non-2xx status, undecodable body)
is raised as :class:`~jobgate.errors.NomadError` so callers have a single
exception to treat as "do not proceed".
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from jobgate.errors import NomadError
from jobgate.models.config import NomadConfig
from jobgate.models.diff import PlanResult

_log = structlog.get_logger(component="nomad.client")


class NomadClient:
    """Synchronous client for the Nomad job plan API.

    Args:
        address:   Base URL of the Nomad agent, e.g. ``http://localhost:4646``.
        token:     ACL token sent as ``X-Nomad-Token`` when non-empty.
        region:    Optional region query parameter.
        namespace: Optional namespace query parameter.
        timeout:   HTTP request timeout in seconds. Defaults to 10.
        transport: Optional httpx transport, used by tests.
    """

    def __init__(
        self,
        address: str,
        token: str = "",
        region: str = "",
        namespace: str = "",
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not address:
            raise ValueError("Nomad address must not be empty")
        headers = {"X-Nomad-Token": token} if token else {}
        self._params = {k: v for k, v in (("region", region), ("namespace", namespace)) if v}
        self._client = httpx.Client(
            base_url=address.rstrip("/"),
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_config(cls, config: NomadConfig, transport: httpx.BaseTransport | None = None) -> NomadClient:
        return cls(
            address=config.address,
            token=config.token,
            region=config.region,
            namespace=config.namespace,
            timeout=float(config.timeout_seconds),
            transport=transport,
        )

    def __enter__(self) -> NomadClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def plan(self, job: dict[str, Any]) -> PlanResult:
        """Run a dry-run plan of *job* with diff output enabled."""
        job_id = job.get("ID")
        if not job_id:
            raise ValueError("Job payload must carry a non-empty ID")

        try:
            response = self._client.put(
                f"/v1/job/{job_id}/plan",
                json={"Job": job, "Diff": True},
                params=self._params,
            )
        except httpx.TimeoutException as exc:
            _log.warning("nomad plan request timed out", job_id=job_id)
            raise NomadError(f"Nomad plan request timed out: {exc}") from exc
        except httpx.HTTPError as exc:
            _log.warning("nomad plan request failed", job_id=job_id, error=str(exc))
            raise NomadError(f"Nomad plan request failed: {exc}") from exc

        if not response.is_success:
            _log.warning(
                "nomad plan non-2xx response",
                job_id=job_id,
                status_code=response.status_code,
                body=response.text[:200],
            )
            raise NomadError(
                f"Nomad plan returned HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise NomadError(f"Nomad plan response is not valid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise NomadError("Nomad plan response is not a JSON object")

        return PlanResult.from_api(payload)
