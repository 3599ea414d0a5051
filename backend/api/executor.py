import asyncio
import json
from typing import Any, Optional

import httpx

from config import Settings, logger
from models import Envelope, FailureKind, failure, success

JSON_HEADERS = {"Content-Type": "application/json"}

_NO_BODY = object()


def _error_message(status_code: int, body: Any) -> str:
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"HTTP error! status: {status_code}"


def _parse_error_body(response: httpx.Response) -> Optional[Any]:
    try:
        return response.json()
    except ValueError:
        return None


class RequestExecutor:
    """Performs exactly one HTTP call and normalizes the outcome."""

    def __init__(self, settings: Settings):
        self.base_url = settings.BASE_URL.rstrip("/")
        self.timeout = settings.TIMEOUT

    async def __call__(
        self,
        path: str,
        method: str = "GET",
        body: Any = _NO_BODY,
    ) -> Envelope:
        if not path:
            return failure(FailureKind.INVALID_REQUEST, "Request path cannot be empty")

        content = None
        if body is not _NO_BODY:
            try:
                content = json.dumps(body)
            except (TypeError, ValueError) as e:
                return failure(
                    FailureKind.INVALID_REQUEST,
                    f"Request body is not JSON serializable: {e}",
                )

        url = f"{self.base_url}{path}"
        try:
            response = await asyncio.wait_for(
                self._send(method.upper(), url, content),
                timeout=self.timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.error("Request to %s timed out after %.1fs", url, self.timeout)
            return failure(FailureKind.TIMEOUT, f"Request timed out after {self.timeout:g}s")
        except httpx.TransportError as e:
            logger.error("Request error for %s: %s", url, str(e))
            return failure(FailureKind.TRANSPORT, str(e) or type(e).__name__)
        except httpx.DecodingError as e:
            logger.error("Undecodable response from %s: %s", url, str(e))
            return failure(FailureKind.MALFORMED_RESPONSE, str(e))
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error("Request to %s could not be sent: %s", url, str(e))
            return failure(FailureKind.INVALID_REQUEST, str(e) or type(e).__name__)

        return self._classify(url, response)

    async def _send(self, method: str, url: str, content: Optional[str]) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.request(method, url, headers=JSON_HEADERS, content=content)

    def _classify(self, url: str, response: httpx.Response) -> Envelope:
        status_code = response.status_code

        if not 200 <= status_code < 300:
            body = _parse_error_body(response)
            message = _error_message(status_code, body)
            logger.error("HTTP error %s for %s: %s", status_code, url, message)
            return failure(FailureKind.SERVER_STATUS, message, status=status_code, cause=body)

        if status_code == 204:
            return success(None)

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Non-JSON response from %s: %s", url, response.text[:200])
            return failure(
                FailureKind.MALFORMED_RESPONSE,
                f"Invalid JSON in response: {e}",
                cause=response.text[:200],
            )
        return success(data)
