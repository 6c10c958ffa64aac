"""
Service layer for invoking Generative Language endpoints.

The module defines a tiny abstract interface that knows how to POST a
payload to a specific HTTP endpoint using a ``HttpRequester`` instance.
Concrete subclasses bind the interface to the endpoint path and the
Pydantic model that parses the response body.
"""

import abc
from typing import Any, Dict, Type

from pydantic import BaseModel, ValidationError

from gemini_clip_lib.utils.http import HttpRequester
from gemini_clip_lib.exceptions import TransportError


class BaseServiceInterface(abc.ABC):
    """
    Abstract base class for endpoint wrappers.

    Sub-classes must set the ``endpoint`` attribute (the relative URL, which
    may contain ``str.format`` fields filled from ``call`` keyword arguments)
    and the ``response_cls`` attribute (the Pydantic model the JSON body is
    validated against).
    """

    # Relative URL of the endpoint to call
    endpoint: str = ""

    # Pydantic model class used to parse the response body.
    response_cls: Type[BaseModel] = None

    def __init__(self, http: HttpRequester, logger):
        """
        Initialise the service wrapper.

        Parameters
        ----------
        http : HttpRequester
            Helper object that knows how to perform HTTP requests.
        logger : logging.Logger
            Logger instance used for debugging and error reporting.
        """
        self.http = http
        self.logger = logger

    def path(self, **path_params: str) -> str:
        return self.endpoint.format(**path_params)

    def call(self, raw_payload: Dict[str, Any], **path_params: str) -> BaseModel:
        """
        Send a POST request to the configured endpoint and parse the body.

        Parameters
        ----------
        raw_payload : Dict[str, Any]
            The request body, already serialised with wire field names.
        **path_params : str
            Values substituted into ``endpoint``.

        Returns
        -------
        BaseModel
            The response body validated as ``self.response_cls``.

        Raises
        ------
        TransportError
            If the body is not JSON or does not match ``response_cls``.
        """
        resp = self.http.post(self.path(**path_params), json=raw_payload)
        try:
            j = resp.json()
        except ValueError as exc:
            raise TransportError(f"Invalid response format: {exc}") from exc
        try:
            return self.response_cls.model_validate(j)
        except ValidationError as exc:
            raise TransportError(f"Invalid response format: {exc}") from exc
