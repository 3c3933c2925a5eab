"""
Thin wrapper around ``requests`` that adds logging, authentication
and unified error handling.

The :class:`HttpRequester` class is the only place in the library that talks
to the network.  It centralises:

* construction of absolute URLs from a base URL,
* basic‑auth or bearer‑token authentication on a shared ``requests.Session``,
* conversion of network failures into :class:`TransportError`,
* conversion of HTTP error codes into the library‑specific
  :class:`ServiceError` hierarchy.

Services describe the request they want with an :class:`ApiRequest` and hand
it to :meth:`HttpRequester.send`; nothing here knows about translator
endpoints.  The requester does not retry failed requests.
"""

import logging

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import requests

from language_translator_lib.exceptions import (
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    ServiceError,
    TransportError,
)


@dataclass(frozen=True)
class ApiRequest:
    """
    Immutable description of a single HTTP request.

    Attributes
    ----------
    method : str
        HTTP verb (``"GET"``, ``"POST"``, ``"DELETE"``).
    path : str
        Path relative to the service base URL, already escaped.
    params : Dict[str, str]
        Query string parameters; only present options are included.
    json : Optional[Dict[str, Any]]
        JSON body.
    data : Optional[Any]
        Raw body, sent as is (used together with a ``Content-Type`` header).
    headers : Dict[str, str]
        Extra request headers.
    files : List[Tuple[str, Tuple[str, Any, str]]]
        Multipart form parts as ``(field, (filename, payload, content_type))``.
    """

    method: str
    path: str
    params: Dict[str, str] = field(default_factory=dict)
    json: Optional[Dict[str, Any]] = None
    data: Optional[Any] = None
    headers: Dict[str, str] = field(default_factory=dict)
    files: List[Tuple[str, Tuple[str, Any, str]]] = field(default_factory=list)


class HttpRequester:
    """
    Helper for making authenticated HTTP calls with error translation.

    Parameters
    ----------
    base_url : str
        Base URL of the remote service.  A trailing slash is stripped
        automatically.
    username, password : Optional[str]
        Basic‑auth credentials; used when both are given.
    token : Optional[str]
        Bearer token used for the ``Authorization`` header; takes precedence
        over basic auth.
    timeout : int, default ``60``
        Per‑request timeout in seconds.
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module‑level logger is created.
    session : Optional[requests.Session]
        Session to reuse; a new one is created when omitted.
    """

    def __init__(
        self,
        base_url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        token: Optional[str] = None,
        timeout: int = 60,
        logger: Optional[logging.Logger] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

        if token:
            self.session.headers.update({"Authorization": f"Bearer {token}"})
        elif username and password:
            self.session.auth = (username, password)

        self.logger = logger or logging.getLogger(__name__)

    def _full_url(self, path: str) -> str:
        return f"{self.base_url}{path if path.startswith('/') else '/' + path}"

    def _handle_response(self, resp: requests.Response) -> requests.Response:
        """
        Translate HTTP error codes into library‑specific exceptions.

        Raises
        ------
        AuthenticationError
            When the server returns ``401`` or ``403``.
        NotFoundError
            When the server returns ``404``.
        RateLimitError
            When the server returns ``429``.
        ServiceError
            For any other client or server error (status code 4xx/5xx).
        """
        if resp.status_code < 400:
            return resp

        body, message = _error_details(resp)
        self.logger.warning(
            "%s %s failed with HTTP %s: %s",
            resp.request.method if resp.request is not None else "?",
            resp.url,
            resp.status_code,
            message,
        )
        if resp.status_code in (401, 403):
            raise AuthenticationError(resp.status_code, message, body)
        if resp.status_code == 404:
            raise NotFoundError(resp.status_code, message, body)
        if resp.status_code == 429:
            raise RateLimitError(resp.status_code, message, body)
        raise ServiceError(resp.status_code, message, body)

    def send(self, request: ApiRequest) -> requests.Response:
        """
        Execute ``request`` and return the validated response.

        Raises
        ------
        TransportError
            When ``requests`` fails before a response is received.
        ServiceError
            When the response has a 4xx/5xx status.
        """
        url = self._full_url(request.path)
        self.logger.debug("%s %s | params=%s", request.method, url, request.params)
        try:
            resp = self.session.request(
                request.method,
                url,
                params=request.params or None,
                json=request.json,
                data=request.data,
                headers=request.headers or None,
                files=request.files or None,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"{request.method} {url} failed: {exc}") from exc
        return self._handle_response(resp)


def _error_details(resp: requests.Response) -> Tuple[Any, str]:
    """
    Extract the decoded body and a human readable message from an error
    response.  The service reports errors as ``{"code": .., "error": ..}``,
    some gateways use ``message`` or ``description`` instead.
    """
    try:
        body = resp.json()
    except ValueError:
        return resp.text, resp.text or resp.reason or ""

    message = None
    if isinstance(body, dict):
        for key in ("error", "message", "description"):
            if body.get(key):
                message = str(body[key])
                break
    return body, message or resp.text
