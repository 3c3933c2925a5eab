import logging
from typing import Optional, Dict, Any, Union, List

from language_translator_lib import constants
from language_translator_lib.utils.http import HttpRequester
from language_translator_lib.exceptions import InvalidArgumentError
from language_translator_lib.services.translation import (
    TranslateService,
    IdentifyService,
    ListIdentifiableLanguagesService,
)
from language_translator_lib.services.models import (
    CreateModelService,
    DeleteModelService,
    GetModelService,
    ListModelsService,
)
from language_translator_lib.data_models.options import (
    TranslateOptions,
    IdentifyOptions,
    ListIdentifiableLanguagesOptions,
    CreateModelOptions,
    DeleteModelOptions,
    GetModelOptions,
    ListModelsOptions,
)
from language_translator_lib.data_models.responses import (
    TranslationResult,
    IdentifiedLanguages,
    IdentifiableLanguages,
    TranslationModel,
    TranslationModels,
)


class LanguageTranslatorClient:
    """
    Client for the Language Translator v2 API.

    Every method takes either an options model, an equivalent ``dict`` or
    keyword arguments (never both), sends exactly one request and returns the parsed
    result.  The client keeps only its configuration and is safe to share
    between threads.
    """

    def __init__(
        self,
        api: str = constants.DEFAULT_SERVICE_URL,
        username: Optional[str] = None,
        password: Optional[str] = None,
        token: Optional[str] = None,
        timeout: int = constants.SERVICE_TIMEOUT,
        logger: Optional[logging.Logger] = None,
        http: Optional[HttpRequester] = None,
    ) -> None:
        self.base_url = api.rstrip("/")
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)
        self.http = http or HttpRequester(
            base_url=self.base_url,
            username=username,
            password=password,
            token=token,
            timeout=self.timeout,
            logger=self.logger,
        )

    @classmethod
    def from_env(cls, **overrides) -> "LanguageTranslatorClient":
        """Build a client from ``LANGUAGE_TRANSLATOR_*`` environment settings."""
        kwargs = {
            "api": constants.SERVICE_URL,
            "username": constants.SERVICE_USERNAME or None,
            "password": constants.SERVICE_PASSWORD or None,
            "token": constants.SERVICE_TOKEN or None,
            "timeout": constants.SERVICE_TIMEOUT,
        }
        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)

    # ------------------------------------------------------------------ #
    def translate(
        self,
        options: Optional[Union[Dict[str, Any], TranslateOptions]] = None,
        text: Optional[Union[str, List[str]]] = None,
        model_id: Optional[str] = None,
        source: Optional[str] = None,
        target: Optional[str] = None,
    ) -> TranslationResult:
        if isinstance(text, str):
            text = [text]
        options = _options_or_arguments(
            "translate",
            options,
            text=text,
            model_id=model_id,
            source=source,
            target=target,
        )
        return TranslateService(self.http, self.logger).call(options)

    # ------------------------------------------------------------------ #
    def identify(
        self,
        options: Optional[Union[Dict[str, Any], IdentifyOptions]] = None,
        text: Optional[str] = None,
    ) -> IdentifiedLanguages:
        options = _options_or_arguments("identify", options, text=text)
        return IdentifyService(self.http, self.logger).call(options)

    # ------------------------------------------------------------------ #
    def list_identifiable_languages(
        self,
        options: Optional[
            Union[Dict[str, Any], ListIdentifiableLanguagesOptions]
        ] = None,
    ) -> IdentifiableLanguages:
        return ListIdentifiableLanguagesService(self.http, self.logger).call(options)

    # ------------------------------------------------------------------ #
    def create_model(
        self,
        options: Optional[Union[Dict[str, Any], CreateModelOptions]] = None,
        **kwargs,
    ) -> TranslationModel:
        options = _options_or_arguments("create_model", options, **kwargs)
        return CreateModelService(self.http, self.logger).call(options)

    # ------------------------------------------------------------------ #
    def delete_model(
        self,
        options: Optional[Union[Dict[str, Any], DeleteModelOptions]] = None,
        model_id: Optional[str] = None,
    ) -> None:
        options = _options_or_arguments("delete_model", options, model_id=model_id)
        DeleteModelService(self.http, self.logger).call(options)

    # ------------------------------------------------------------------ #
    def get_model(
        self,
        options: Optional[Union[Dict[str, Any], GetModelOptions]] = None,
        model_id: Optional[str] = None,
    ) -> TranslationModel:
        options = _options_or_arguments("get_model", options, model_id=model_id)
        return GetModelService(self.http, self.logger).call(options)

    # ------------------------------------------------------------------ #
    def list_models(
        self,
        options: Optional[Union[Dict[str, Any], ListModelsOptions]] = None,
        source: Optional[str] = None,
        target: Optional[str] = None,
        default_models: Optional[bool] = None,
    ) -> TranslationModels:
        options = _options_or_arguments(
            "list_models",
            options,
            source=source,
            target=target,
            default_models=default_models,
        )
        return ListModelsService(self.http, self.logger).call(options)


def _options_or_arguments(method: str, options, **kwargs):
    """
    Return ``options``, or the non-``None`` keyword arguments as a dict when
    no options are given.  Mixing both is an error; ``None`` means neither.
    """
    arguments = {k: v for k, v in kwargs.items() if v is not None}
    if options is not None:
        if arguments:
            raise InvalidArgumentError(
                f"{method}: pass either options or keyword arguments, not both"
            )
        return options
    return arguments or None
