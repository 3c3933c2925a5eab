"""
Service wrappers for the translation and language‑identification endpoints.

The file defines thin subclasses of :class:`BaseTranslatorServiceInterface`
that bind a concrete HTTP endpoint, the Pydantic options model and the result
model.  These services can be instantiated with a ``HttpRequester`` and a
logger and then called via the ``.call()`` method provided by the base class.
"""

from language_translator_lib.utils.http import ApiRequest
from language_translator_lib.data_models.constants import (
    CONTENT_TYPE_TEXT,
    IDENTIFIABLE_LANGUAGES_PATH,
    IDENTIFY_PATH,
    TRANSLATE_PATH,
)
from language_translator_lib.data_models.options import (
    IdentifyOptions,
    ListIdentifiableLanguagesOptions,
    TranslateOptions,
)
from language_translator_lib.data_models.responses import (
    IdentifiableLanguages,
    IdentifiedLanguages,
    TranslationResult,
)
from language_translator_lib.services.service_interface import (
    BaseTranslatorServiceInterface,
)


class TranslateService(BaseTranslatorServiceInterface):
    """
    Service for the ``/v2/translate`` endpoint.

    The body always carries ``text``; ``model_id``, ``source`` and ``target``
    are added only when set, so the service can pick its own defaults for the
    missing ones.
    """

    endpoint = TRANSLATE_PATH
    method = "POST"
    options_cls = TranslateOptions
    response_cls = TranslationResult

    def build_request(self, options: TranslateOptions) -> ApiRequest:
        body = {"text": list(options.text)}
        for key in ("model_id", "source", "target"):
            value = getattr(options, key)
            if value is not None:
                body[key] = value
        return ApiRequest(method=self.method, path=self.endpoint, json=body)


class IdentifyService(BaseTranslatorServiceInterface):
    """
    Service for the ``/v2/identify`` endpoint.

    The text is posted as a raw UTF‑8 body with ``Content-Type: text/plain``.
    """

    endpoint = IDENTIFY_PATH
    method = "POST"
    options_cls = IdentifyOptions
    response_cls = IdentifiedLanguages

    def build_request(self, options: IdentifyOptions) -> ApiRequest:
        return ApiRequest(
            method=self.method,
            path=self.endpoint,
            data=options.text.encode("utf-8"),
            headers={"Content-Type": CONTENT_TYPE_TEXT},
        )


class ListIdentifiableLanguagesService(BaseTranslatorServiceInterface):
    """Service for ``GET /v2/identifiable_languages``."""

    endpoint = IDENTIFIABLE_LANGUAGES_PATH
    method = "GET"
    options_cls = ListIdentifiableLanguagesOptions
    response_cls = IdentifiableLanguages
    options_required = False

    def build_request(self, options: ListIdentifiableLanguagesOptions) -> ApiRequest:
        return ApiRequest(method=self.method, path=self.endpoint)
