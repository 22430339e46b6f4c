"""HTTP transport shared by metadata clients."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import time
from urllib.parse import urljoin, urlsplit
import uuid

import requests
from requests.exceptions import RequestException

from imdsbox.metadata.errors import (
    InvalidBaseURLError,
    MetadataError,
    MetadataHTTPError,
    MetadataTimeoutError,
    map_requests_exception,
)
from imdsbox.metadata.paths import DEFAULT_BASE_URL, ROOT

DEFAULT_TIMEOUT_S = 5.0


@dataclass(frozen=True)
class MetadataConfig:
    """Metadata client config.

    Never mutated after construction, so one value can be shared by any
    number of clients and threads.

    Attributes:
        base_url: Metadata root including the API version segment.
            A trailing ``/`` is appended when missing.
        timeout_s: Timeout in seconds for each single request. Applied by
            requests to the connect and to each socket read separately, so it
            is not a total deadline: a server trickling bytes can keep one
            request alive longer.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = DEFAULT_TIMEOUT_S

    def __post_init__(self) -> None:
        parts = urlsplit(self.base_url or "")
        if parts.scheme not in {"http", "https"} or not parts.netloc:
            raise InvalidBaseURLError(f"invalid metadata base url: {self.base_url!r}")
        if not self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", f"{self.base_url}/")


class MetadataTransport:
    """Plain HTTP GET access to the metadata service."""

    def __init__(self, config: MetadataConfig) -> None:
        """Initialize transport.

        Args:
            config: Client configuration.
        """
        self.config = config
        self._logger = logging.getLogger(__name__)

    def url_for(self, path: str) -> str:
        """Resolve a relative metadata path against the base URL.

        Args:
            path: Relative path, e.g. ``meta-data/instance-id``.

        Returns:
            str: Absolute URL.
        """
        return urljoin(self.config.base_url, path)

    def _log_step(self, *, task_id: str, target: str, result: str, started_at: float) -> None:
        """Write key-step logs.

        Args:
            task_id: Generated task id.
            target: Relative metadata path.
            result: Result summary.
            started_at: Monotonic start timestamp.
        """
        duration_ms = int((time.monotonic() - started_at) * 1000)
        self._logger.info(
            "task_id=%s target=%s result=%s duration_ms=%s",
            task_id,
            target or "/",
            result,
            duration_ms,
        )

    def get_text(self, path: str) -> str:
        """GET a metadata path and return the body verbatim.

        Args:
            path: Relative metadata path.

        Returns:
            str: Response body.

        Raises:
            MetadataError: Transport failure, timeout or non-success status.
        """
        task_id = uuid.uuid4().hex[:8]
        started_at = time.monotonic()
        try:
            response = requests.get(self.url_for(path), timeout=self.config.timeout_s)
            response.raise_for_status()
            # IMDS sends bare text/plain; requests would guess ISO-8859-1.
            body = response.content.decode("utf-8")
        except UnicodeDecodeError as exc:
            self._log_step(task_id=task_id, target=path, result="decode_fail", started_at=started_at)
            raise MetadataError(f"GET {path or '/'} body is not valid utf-8", path=path) from exc
        except RequestException as exc:
            mapped = map_requests_exception(path, exc)
            if isinstance(mapped, MetadataHTTPError):
                result = f"http_{mapped.status_code}"
            elif isinstance(mapped, MetadataTimeoutError):
                result = "timeout"
            else:
                result = "fail"
            self._log_step(task_id=task_id, target=path, result=result, started_at=started_at)
            raise mapped from exc

        self._log_step(task_id=task_id, target=path, result="ok", started_at=started_at)
        return body

    def probe(self, path: str = ROOT) -> bool:
        """Check whether the metadata service answers at all.

        Args:
            path: Relative path to probe. Defaults to the base path.

        Returns:
            bool: True when any HTTP response arrives, whatever its status.
        """
        task_id = uuid.uuid4().hex[:8]
        started_at = time.monotonic()
        try:
            response = requests.get(self.url_for(path), timeout=self.config.timeout_s)
        except RequestException as exc:
            self._log_step(
                task_id=task_id,
                target=path,
                result=f"unreachable:{type(exc).__name__}",
                started_at=started_at,
            )
            return False

        self._log_step(
            task_id=task_id,
            target=path,
            result=f"reachable:{response.status_code}",
            started_at=started_at,
        )
        return True
