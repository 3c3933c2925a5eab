import abc
import logging
from typing import Any, Dict, Optional, Type, Union

from pydantic import BaseModel, ValidationError as PydanticValidationError

from language_translator_lib.utils.http import ApiRequest, HttpRequester
from language_translator_lib.exceptions import DecodeError, InvalidArgumentError


class BaseTranslatorServiceInterface(abc.ABC):
    """
    Abstract base class for translator‑endpoint wrappers.

    Sub‑classes set the ``endpoint`` and ``method`` attributes, the Pydantic
    model used to validate the options (``options_cls``) and the model the
    JSON response is parsed into (``response_cls``), then implement
    :meth:`build_request`.  The class provides a reusable ``call`` method that
    validates the options, builds the request, sends it through the
    ``HttpRequester`` and decodes the response.
    """

    # Relative URL of the endpoint to call
    endpoint: str = ""

    # HTTP verb used for the endpoint
    method: str = "GET"

    # Pydantic model class used to validate the request options.
    options_cls: Type[BaseModel] = None

    # Pydantic model class the response body is parsed into; ``None`` means
    # the endpoint returns no content.
    response_cls: Optional[Type[BaseModel]] = None

    # Whether calling without options is an error
    options_required: bool = True

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
        self.logger = logger or logging.getLogger(__name__)

    @property
    def name(self) -> str:
        return type(self).__name__

    def prepare_options(
        self, raw_options: Optional[Union[Dict[str, Any], BaseModel]]
    ) -> BaseModel:
        """
        Turn ``raw_options`` into an instance of ``self.options_cls``.

        Raises
        ------
        InvalidArgumentError
            If options are required but missing, have the wrong type, or do
            not pass model validation.
        """
        if raw_options is None:
            if self.options_required:
                raise InvalidArgumentError(f"{self.name}: options cannot be None")
            return self.options_cls()

        if isinstance(raw_options, self.options_cls):
            return raw_options

        if isinstance(raw_options, dict):
            try:
                return self.options_cls(**raw_options)
            except PydanticValidationError as exc:
                raise InvalidArgumentError(f"{self.name}: {exc}") from exc

        raise InvalidArgumentError(
            f"{self.name}: expected {self.options_cls.__name__} or dict, "
            f"got {type(raw_options).__name__}"
        )

    def validate(self, options: BaseModel) -> None:
        """Hook for checks spanning several fields; raises ``InvalidArgumentError``."""
        return None

    @abc.abstractmethod
    def build_request(self, options: BaseModel) -> ApiRequest:
        """Map validated ``options`` to the wire request; must not do any I/O."""
        raise NotImplementedError

    def parse_response(self, resp) -> Any:
        """
        Decode the response body into ``self.response_cls``.

        Raises
        ------
        DecodeError
            If the body is not JSON or does not match ``self.response_cls``.
        """
        if self.response_cls is None:
            return None

        try:
            j = resp.json()
        except ValueError as exc:
            raise DecodeError(f"{self.name}: invalid response format: {exc}") from exc

        try:
            return self.response_cls.model_validate(j)
        except PydanticValidationError as exc:
            raise DecodeError(
                f"{self.name}: response does not match "
                f"{self.response_cls.__name__}: {exc}"
            ) from exc

    def call(self, raw_options: Optional[Union[Dict[str, Any], BaseModel]] = None):
        """
        Validate ``raw_options``, send the request and return the parsed result.

        Validation failures raise :class:`InvalidArgumentError` before any
        network traffic; transport, service and decode errors propagate from
        the ``HttpRequester`` and :meth:`parse_response` unchanged.
        """
        options = self.prepare_options(raw_options)
        self.validate(options)
        request = self.build_request(options)
        self.logger.debug("%s -> %s %s", self.name, request.method, request.path)
        resp = self.http.send(request)
        return self.parse_response(resp)
