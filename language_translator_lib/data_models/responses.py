"""
Response models returned by the client.

The models are immutable and populated only from the JSON returned by the
service.  Keys the service adds in the future are ignored.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class BaseResponse(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", protected_namespaces=())


class Translation(BaseResponse):
    translation: str


class TranslationResult(BaseResponse):
    """
    Result of a ``translate`` call.

    Attributes
    ----------
    word_count : int
        Number of words in the input text.
    character_count : int
        Number of characters in the input text.
    translations : List[Translation]
        One translation per input fragment, in input order.
    """

    word_count: Optional[int] = None
    character_count: Optional[int] = None
    translations: List[Translation] = []


class IdentifiedLanguage(BaseResponse):
    language: str
    confidence: float


class IdentifiedLanguages(BaseResponse):
    """Candidate languages of the input, ordered by decreasing confidence."""

    languages: List[IdentifiedLanguage] = []


class IdentifiableLanguage(BaseResponse):
    language: str
    name: str


class IdentifiableLanguages(BaseResponse):
    """All languages the service can identify."""

    languages: List[IdentifiableLanguage] = []


class TranslationModel(BaseResponse):
    """
    A translation model, either provided by the service or customised.

    Attributes
    ----------
    model_id : str
        Unique model identifier.
    name : Optional[str]
        Optional name given when the model was created.
    source, target : Optional[str]
        Language codes the model translates between.
    base_model_id : Optional[str]
        Model the customisation is based on; empty for base models.
    domain : Optional[str]
        Domain of the model, e.g. ``"news"``.
    customizable : Optional[bool]
        Whether the model can be used as a base for customisation.
    default_model : Optional[bool]
        Whether the model is the default for its language pair.
    owner : Optional[str]
        Owner of a custom model.
    status : Optional[str]
        Training status, one of
        :class:`~language_translator_lib.data_models.constants.TranslationModelStatus`.
    """

    model_id: str
    name: Optional[str] = None
    source: Optional[str] = None
    target: Optional[str] = None
    base_model_id: Optional[str] = None
    domain: Optional[str] = None
    customizable: Optional[bool] = None
    default_model: Optional[bool] = None
    owner: Optional[str] = None
    status: Optional[str] = None


class TranslationModels(BaseResponse):
    models: List[TranslationModel] = []
