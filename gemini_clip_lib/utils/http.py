"""
Thin wrapper around ``requests`` that adds logging, the API-key query
credential and unified error handling.

The :class:`HttpRequester` class is the only place the library talks to the
network.  It centralises:

* construction of absolute URLs from a base URL,
* automatic inclusion of the ``key`` query parameter,
* a retry policy via ``urllib3.Retry`` (zero retries by default: one request
  is one attempt),
* conversion of transport failures and HTTP error codes into the library
  exception hierarchy (:class:`AuthenticationError`, :class:`RateLimitError`,
  :class:`TransportError`).

All methods return the raw ``requests.Response`` object after the response has
been validated by ``_handle_response``.
"""

import json
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote, quote_plus

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from gemini_clip_lib.exceptions import (
    AuthenticationError,
    RateLimitError,
    TransportError,
)


def response_detail(resp: requests.Response) -> str:
    """
    Return the most specific description of a failed response.

    The body is re-serialised as compact JSON when it parses, otherwise the
    raw text is used; an empty body falls back to the status line.
    """
    try:
        return json.dumps(resp.json(), ensure_ascii=False, separators=(",", ":"))
    except ValueError:
        pass
    text = (resp.text or "").strip()
    if text:
        return text
    return f"HTTP {resp.status_code} {resp.reason or ''}".strip()


class HttpRequester:
    """
    Helper for making HTTP calls with a retry policy and error translation.

    Parameters
    ----------
    base_url : str
        Base URL of the remote service (e.g.
        ``"https://generativelanguage.googleapis.com/v1beta"``).  A trailing
        slash is stripped automatically.
    api_key : str
        Credential sent as the ``key`` query parameter of every request.
    timeout : float, default ``30``
        Per-request timeout in seconds.
    retries : int, default ``0``
        Number of retry attempts for transient failures (status codes in
        ``status_forcelist``).  The back-off factor is ``0.5`` seconds.
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module-level logger is created.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 30,
        retries: int = 0,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

        self.logger = logger or logging.getLogger(__name__)

        # retry-policy
        retry_strategy = Retry(
            total=retries,
            read=False,
            backoff_factor=0.5,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET", "POST"],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

    def _full_url(self, path: str) -> str:
        """
        Build the absolute URL for a request.

        Parameters
        ----------
        path : str
            URL path to be appended to ``self.base_url``.  The method ensures
            exactly one ``/`` separates the base and the path.

        Returns
        -------
        str
            Fully qualified URL (without the credential).
        """
        return f"{self.base_url}{path if path.startswith('/') else '/' + path}"

    @staticmethod
    def _handle_response(resp: requests.Response) -> requests.Response:
        """
        Translate HTTP error codes into library-specific exceptions.

        * :class:`AuthenticationError` for ``401``/``403``.
        * :class:`RateLimitError` for ``429``.
        * :class:`TransportError` for any other status outside ``2xx``.

        The exception message is the server-provided body (see
        :func:`response_detail`).  Successful responses are returned
        unchanged.
        """
        if resp.status_code in (401, 403):
            raise AuthenticationError(response_detail(resp))
        if resp.status_code == 429:
            raise RateLimitError(response_detail(resp))
        if not 200 <= resp.status_code < 300:
            raise TransportError(response_detail(resp))
        return resp

    def post(
        self, path: str, json: Optional[Dict[str, Any]] = None, **kwargs
    ) -> requests.Response:
        """
        Perform a ``POST`` request with a JSON body.

        Parameters
        ----------
        path : str
            Relative URL path to post to.
        json : Optional[Dict[str, Any]]
            JSON-serialisable payload sent as the request body.
        **kwargs
            Additional arguments forwarded to ``requests.Session.post``.

        Returns
        -------
        requests.Response
            The validated response object.

        Raises
        ------
        TransportError
            On connection errors, timeouts or a non-2xx status.
        """
        url = self._full_url(path)
        self.logger.debug("POST %s | payload=%s", url, json)
        try:
            resp = self.session.post(
                url,
                json=json,
                params={"key": self.api_key},
                timeout=self.timeout,
                **kwargs,
            )
        except requests.exceptions.RequestException as exc:
            detail = str(exc) or type(exc).__name__
            raise TransportError(self.redact(detail)) from exc
        try:
            return self._handle_response(resp)
        except TransportError as exc:
            raise type(exc)(self.redact(str(exc))) from exc

    def redact(self, message: str) -> str:
        """
        Mask the API key in ``message``.

        Transport errors raised by ``requests`` quote the full request URL,
        query credential included; the key is removed in both its raw and
        URL-encoded spelling.
        """
        if not self.api_key:
            return message
        secrets = {self.api_key, quote(self.api_key, safe=""), quote_plus(self.api_key)}
        for secret in secrets:
            message = message.replace(secret, "***")
        return message

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpRequester":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
