"""
Service wrappers for the ``/v2/models`` endpoints.

Creating a model uploads glossary/corpus files as a multipart form; the parts
are produced by :func:`build_model_files`, a pure function that can be tested
without a network layer.  Model ids are path‑escaped before they are put into
the URL.
"""

import os
from typing import Any, List, Tuple
from urllib.parse import quote

from language_translator_lib.utils.http import ApiRequest
from language_translator_lib.exceptions import InvalidArgumentError
from language_translator_lib.data_models.constants import (
    BASE_MODEL_ID_PARAM,
    DEFAULT_PARAM,
    MODEL_FILE_PARTS,
    MODELS_PATH,
    NAME_PARAM,
    SOURCE_PARAM,
    TARGET_PARAM,
)
from language_translator_lib.data_models.options import (
    CreateModelOptions,
    DeleteModelOptions,
    GetModelOptions,
    ListModelsOptions,
)
from language_translator_lib.data_models.responses import (
    TranslationModel,
    TranslationModels,
)
from language_translator_lib.services.service_interface import (
    BaseTranslatorServiceInterface,
)


def model_path(model_id: str) -> str:
    """
    Path of a single model; every reserved character of the id is escaped.

    ``.`` and ``..`` are rejected: they are dot segments, which ``requests``
    resolves away no matter how they are percent‑encoded, so the request
    would never reach ``/v2/models/{model_id}``.
    """
    if model_id in (".", ".."):
        raise InvalidArgumentError(f"Invalid model id: {model_id!r}")
    return f"{MODELS_PATH}/{quote(model_id, safe='')}"


def _file_name(part: str, payload: Any, filename: str = None) -> str:
    if filename:
        return filename
    name = getattr(payload, "name", None)
    if isinstance(name, str) and name:
        return os.path.basename(name)
    return part


def build_model_files(
    options: CreateModelOptions,
) -> List[Tuple[str, Tuple[str, Any, str]]]:
    """
    Build the multipart parts for a create‑model request.

    One part is returned for every file payload present in ``options``, as
    ``(field, (filename, payload, content_type))``.  Glossary and parallel
    corpus are sent as ``application/octet-stream``, the monolingual corpus
    as ``text/plain``.  Text payloads are encoded as UTF‑8.
    """
    parts = []
    for part, content_type in MODEL_FILE_PARTS.items():
        payload = getattr(options, part)
        if payload is None:
            continue
        filename = _file_name(part, payload, getattr(options, f"{part}_filename"))
        if isinstance(payload, str):
            payload = payload.encode("utf-8")
        parts.append((part, (filename, payload, content_type)))
    return parts


class CreateModelService(BaseTranslatorServiceInterface):
    """
    Service for ``POST /v2/models``.

    ``base_model_id`` and ``name`` travel as query parameters, the files as a
    multipart form body.  At least one file has to be given.
    """

    endpoint = MODELS_PATH
    method = "POST"
    options_cls = CreateModelOptions
    response_cls = TranslationModel

    def validate(self, options: CreateModelOptions) -> None:
        if all(getattr(options, part) is None for part in MODEL_FILE_PARTS):
            raise InvalidArgumentError(
                "At least one of forced_glossary, parallel_corpus, "
                "or monolingual_corpus must be supplied."
            )

    def build_request(self, options: CreateModelOptions) -> ApiRequest:
        params = {BASE_MODEL_ID_PARAM: options.base_model_id}
        if options.name is not None:
            params[NAME_PARAM] = options.name
        return ApiRequest(
            method=self.method,
            path=self.endpoint,
            params=params,
            files=build_model_files(options),
        )


class DeleteModelService(BaseTranslatorServiceInterface):
    """Service for ``DELETE /v2/models/{model_id}``; returns no content."""

    endpoint = MODELS_PATH
    method = "DELETE"
    options_cls = DeleteModelOptions
    response_cls = None

    def build_request(self, options: DeleteModelOptions) -> ApiRequest:
        return ApiRequest(method=self.method, path=model_path(options.model_id))


class GetModelService(BaseTranslatorServiceInterface):
    """Service for ``GET /v2/models/{model_id}``."""

    endpoint = MODELS_PATH
    method = "GET"
    options_cls = GetModelOptions
    response_cls = TranslationModel

    def build_request(self, options: GetModelOptions) -> ApiRequest:
        return ApiRequest(method=self.method, path=model_path(options.model_id))


class ListModelsService(BaseTranslatorServiceInterface):
    """
    Service for ``GET /v2/models``.

    Each filter becomes a query parameter only when it is set; the
    ``default_models`` flag is sent as ``default=true|false``.
    """

    endpoint = MODELS_PATH
    method = "GET"
    options_cls = ListModelsOptions
    response_cls = TranslationModels
    options_required = False

    def build_request(self, options: ListModelsOptions) -> ApiRequest:
        params = {}
        if options.source is not None:
            params[SOURCE_PARAM] = options.source
        if options.target is not None:
            params[TARGET_PARAM] = options.target
        if options.default_models is not None:
            params[DEFAULT_PARAM] = str(options.default_models).lower()
        return ApiRequest(method=self.method, path=self.endpoint, params=params)
