"""Low-level HTTP client for the iTwin Access Control API.

Builds request options, sends them through a ``requests`` session and maps the
outcome to an :class:`APIResponse` envelope.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Mapping, Optional
from urllib.parse import quote, urlsplit, urlunsplit

import requests

from .exceptions import InvalidRequestError, MissingAccessTokenError
from .models import APIResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.bentley.com/accesscontrol/itwins"
ACCEPT_HEADER = "application/vnd.bentley.itwin-platform.v2+json"

# Ordered: $top always precedes $skip in the query string.
PAGINATION_PARAMS = (("top", "$top"), ("skip", "$skip"))

Extractor = Callable[[Dict[str, Any]], Any]


def apply_host_prefix(url: str, host_prefix: Optional[str]) -> str:
    """Prepend ``host_prefix`` to the hostname of ``url``.

    Used to target pre-production deployments (e.g. ``qa-`` turns
    ``api.bentley.com`` into ``qa-api.bentley.com``). The port, path and query
    are left untouched.
    """
    if not host_prefix:
        return url
    parts = urlsplit(url)
    if not parts.hostname:
        raise InvalidRequestError(f"Cannot apply host prefix to URL without hostname: {url!r}")
    netloc = host_prefix + parts.hostname
    if parts.port is not None:
        netloc = f"{netloc}:{parts.port}"
    return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))


class BaseClient:
    """HTTP client shared by all Access Control resource clients.

    Features:
    - Uniform ``APIResponse`` envelope for every call
    - Domain errors (4xx) returned, never raised
    - Transport and server faults collapsed into a synthetic 500

    Usage:
        client = BaseClient()
        response = client.send_request(token, "GET", f"{client.base_url}/{itwin_id}/roles",
                                       extract=lambda payload: payload.get("roles"))
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        host_prefix: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the client.

        Args:
            base_url: Service base URL; used verbatim when given
            host_prefix: Hostname prefix applied to the default base URL
            timeout: Optional per-request timeout in seconds (none by default)
            session: Shared ``requests.Session``; a new one is created if omitted
        """
        if base_url is not None:
            self.base_url = base_url.rstrip("/")
        else:
            self.base_url = apply_host_prefix(DEFAULT_BASE_URL, host_prefix)
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def build_request_options(
        self,
        access_token: str,
        method: str,
        url: str,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        """Build keyword arguments for ``requests.Session.request``.

        Raises:
            MissingAccessTokenError: If no access token is supplied
            InvalidRequestError: If the URL is empty
        """
        if not access_token:
            raise MissingAccessTokenError()
        if not url:
            raise InvalidRequestError("URL is required")

        request_headers = {
            "authorization": access_token,
            "content-type": "application/json",
            "accept": ACCEPT_HEADER,
        }
        if headers:
            request_headers.update(headers)

        options: Dict[str, Any] = {
            "method": method,
            "url": url,
            "headers": request_headers,
            "timeout": self.timeout,
        }
        if body is not None:
            options["json"] = body
        return options

    def send_request(
        self,
        access_token: str,
        method: str,
        url: str,
        body: Any = None,
        *,
        extract: Optional[Extractor] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> APIResponse[Any]:
        """Send a request and map the outcome to an envelope.

        Args:
            access_token: Opaque authorization value, sent as-is
            method: HTTP method (GET, POST, PATCH, DELETE)
            url: Absolute request URL
            body: Optional JSON-serializable payload
            extract: Selects the payload from a wrapped body, e.g. ``lambda payload: payload.get("role")``
            headers: Extra headers merged over the defaults

        Returns:
            APIResponse with the HTTP status and either ``data`` or ``error``
        """
        options = self.build_request_options(access_token, method, url, body, headers)
        logger.debug("Access Control request %s %s", method, url)

        try:
            resp = self.session.request(**options)
        except requests.RequestException as exc:
            logger.warning("Access Control request %s %s failed: %s", method, url, exc)
            return APIResponse.internal_error()

        if resp.status_code >= 500:
            logger.warning("Access Control service fault %s on %s %s", resp.status_code, method, url)
            return APIResponse.internal_error()

        response_headers = {key.lower(): value for key, value in resp.headers.items()}

        if resp.status_code == 204 or not resp.content:
            if 200 <= resp.status_code < 300:
                return APIResponse(status=resp.status_code, headers=response_headers)
            logger.warning(
                "Access Control response %s on %s %s carried no body", resp.status_code, method, url
            )
            return APIResponse.internal_error()

        try:
            payload = resp.json()
        except ValueError:
            logger.warning("Access Control response to %s %s is not valid JSON", method, url)
            return APIResponse.internal_error()

        error = payload.get("error") if isinstance(payload, dict) else None
        if _is_api_error(error):
            return APIResponse(status=resp.status_code, error=error, headers=response_headers)

        if resp.status_code >= 400:
            logger.warning(
                "Access Control response %s on %s %s carried no error body", resp.status_code, method, url
            )
            return APIResponse.internal_error()

        data = payload
        links = None
        if extract is not None:
            # missing wrapper field leaves data unset
            data = extract(payload) if isinstance(payload, dict) else None
            links = payload.get("_links") if isinstance(payload, dict) else None
        return APIResponse(status=resp.status_code, data=data, headers=response_headers, links=links)

    @staticmethod
    def pagination_query(top: Optional[int] = None, skip: Optional[int] = None) -> str:
        """Render ``$top``/``$skip`` as a query string.

        Returns:
            ``"?$top=10&$skip=5"`` style string, or ``""`` when both are None
        """
        values = {"top": top, "skip": skip}
        params = [
            f"{name}={quote(str(values[key]), safe='')}"
            for key, name in PAGINATION_PARAMS
            if values[key] is not None
        ]
        if not params:
            return ""
        return "?" + "&".join(params)

    def close(self) -> None:
        self.session.close()


def _is_api_error(error: Any) -> bool:
    return isinstance(error, dict) and isinstance(error.get("code"), str) and isinstance(error.get("message"), str)
