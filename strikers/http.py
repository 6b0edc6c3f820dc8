import asyncio
import json
import logging
from typing import Any, Dict, Optional

import aiohttp

from .config import BASE_URL, HTTP_TIMEOUT

logger = logging.getLogger(__name__)

NOT_AUTHORIZED_MESSAGE = "Player not authorized."


class TransportError(RuntimeError):
    """A failed GET: non-200 status, unparsable body, timeout or socket error."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        reason: Optional[str] = None,
        detail: str = "",
    ):
        super().__init__(message)
        self.status = status
        self.reason = reason
        self.detail = detail

    @property
    def is_unauthorized(self) -> bool:
        return self.detail == NOT_AUTHORIZED_MESSAGE or self.status in (401, 403)


def _extract_error_detail(text: str) -> str:
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return text[:240]

    if isinstance(data, dict):
        for key in ("error", "message", "detail", "errors"):
            value = data.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
            if isinstance(value, dict):
                message = value.get("message")
                if isinstance(message, str) and message.strip():
                    return message.strip()
                return json.dumps(value)[:240]
            if isinstance(value, list):
                return json.dumps(value)[:240]
    return text[:240]


class StrikersHTTP:
    """Authenticated GET client for the statistics service.

    Both credential headers are fixed when the instance is built and sent on
    every request. The underlying session is created on first use; a session
    handed in by the caller stays owned by the caller.
    """

    def __init__(
        self,
        token: str,
        refresh: str,
        *,
        base_url: str = BASE_URL,
        timeout: float = HTTP_TIMEOUT,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.base_url = str(base_url).rstrip("/")
        self._timeout = timeout
        self._session = session
        self._owns_session = session is None
        self._headers: Dict[str, str] = {
            "X-Authorization": f"Bearer {token}",
            "X-Refresh-Token": refresh,
        }

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    async def ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            logger.debug("Creating new aiohttp ClientSession")
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout)
            )
            self._owns_session = True
        return self._session

    def build_url(self, path: str, query: str = "") -> str:
        url = f"{self.base_url}{path}"
        return f"{url}?{query}" if query else url

    async def get(self, path: str, query: str = "") -> Any:
        sess = await self.ensure_session()
        url = self.build_url(path, query)

        logger.info("HTTP GET %s", url)
        try:
            async with sess.get(url, headers=self._headers) as response:
                try:
                    text = await response.text()
                except UnicodeDecodeError as exc:
                    logger.error("Undecodable body from %s: %s", url, exc)
                    raise TransportError(
                        f"Undecodable body from {path}: {exc.reason}",
                        status=response.status,
                        reason=response.reason,
                    ) from exc
                if response.status != 200:
                    detail = _extract_error_detail(text)
                    logger.error(
                        "HTTP GET failed %s -> %s %s | detail=%s",
                        url,
                        response.status,
                        response.reason,
                        detail,
                    )
                    raise TransportError(
                        f"GET {path} -> {response.status} {response.reason}: {detail}",
                        status=response.status,
                        reason=response.reason,
                        detail=detail,
                    )

                try:
                    payload = json.loads(text)
                except json.JSONDecodeError as exc:
                    logger.error("Invalid JSON from %s: %s", url, text[:240])
                    raise TransportError(
                        f"Invalid JSON from {path}: {text[:120]}",
                        status=response.status,
                        reason=response.reason,
                        detail=text[:240],
                    ) from exc

                logger.debug("HTTP GET success %s (%s bytes)", url, len(text))
                return payload
        except asyncio.TimeoutError as exc:
            logger.error("HTTP GET timeout for %s", url)
            raise TransportError(
                "Request to the statistics service timed out. Please try again later."
            ) from exc
        except aiohttp.ClientError as exc:
            logger.error("HTTP GET error for %s: %s", url, exc)
            raise TransportError(f"GET {path} failed: {exc}") from exc

    async def close(self) -> None:
        if self._owns_session and self._session and not self._session.closed:
            logger.debug("Closing aiohttp ClientSession")
            await self._session.close()
        self._session = None
