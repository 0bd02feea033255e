"""Shared HTTP plumbing for upstream data sources."""

import logging
import time
from typing import Any, Optional

import requests

from lakescope import config
from lakescope.utils.result import FetchResult

logger = logging.getLogger(__name__)


class BaseSource:
    """Base class for an upstream JSON API.

    Subclasses set SOURCE_NAME and build their own requests; this class
    handles headers, timeouts, retries and turning failures into FetchResult.
    """

    SOURCE_NAME = "upstream"

    def __init__(
        self,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
        user_agent: Optional[str] = None,
    ):
        """Initialize the source.

        Args:
            timeout: Per-request timeout in seconds. Defaults to config.REQUEST_TIMEOUT
            max_retries: Attempts per request. Defaults to config.MAX_RETRIES
            retry_delay: Base backoff delay in seconds. Defaults to config.RETRY_DELAY
            user_agent: User-Agent header. Defaults to config.USER_AGENT
        """
        self.timeout = config.REQUEST_TIMEOUT if timeout is None else timeout
        self.max_retries = max(1, config.MAX_RETRIES if max_retries is None else max_retries)
        self.retry_delay = config.RETRY_DELAY if retry_delay is None else retry_delay
        self.user_agent = user_agent or config.USER_AGENT

    def _retry_with_backoff(self, func, *args, **kwargs) -> Any:
        """Execute a function with retry logic for network errors.

        Args:
            func: Function to execute
            *args: Positional arguments for the function
            **kwargs: Keyword arguments for the function

        Returns:
            Result of the function call

        Raises:
            requests.RequestException: If all retries fail
        """
        last_exception = None
        for attempt in range(self.max_retries):
            try:
                return func(*args, **kwargs)
            except requests.RequestException as e:
                last_exception = e
                if attempt < self.max_retries - 1:
                    delay = self.retry_delay * (2**attempt)
                    logger.warning(
                        f"{self.SOURCE_NAME} attempt {attempt + 1} failed: {e}. "
                        f"Retrying in {delay:.1f}s..."
                    )
                    time.sleep(delay)
                else:
                    logger.error(f"All {self.max_retries} {self.SOURCE_NAME} attempts failed: {e}")
        raise last_exception

    def _headers(self) -> dict[str, str]:
        return {"Accept": "application/json", "User-Agent": self.user_agent}

    def _send(self, method: str, url: str, **kwargs) -> dict:
        if method == "POST":
            response = requests.post(url, headers=self._headers(), timeout=self.timeout, **kwargs)
        else:
            response = requests.get(url, headers=self._headers(), timeout=self.timeout, **kwargs)
        response.raise_for_status()
        return response.json()

    def _request_json(self, method: str, url: str, **kwargs) -> FetchResult[dict]:
        """Send a request and decode JSON, capturing any failure.

        Args:
            method: "GET" or "POST"
            url: Endpoint URL
            **kwargs: Passed to requests (params, data)

        Returns:
            FetchResult holding the decoded body or a FetchError
        """
        try:
            return FetchResult.success(self._retry_with_backoff(self._send, method, url, **kwargs))
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            return FetchResult.failure(
                self.SOURCE_NAME, f"{self.SOURCE_NAME} API returned {status}", status
            )
        except requests.RequestException as e:
            return FetchResult.failure(self.SOURCE_NAME, str(e))
        except ValueError as e:
            return FetchResult.failure(self.SOURCE_NAME, f"Invalid JSON response: {e}")
