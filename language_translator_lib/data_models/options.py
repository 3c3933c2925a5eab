"""
Pydantic request models for the Language Translator endpoints.

Each class describes the options accepted by a single client method.  Optional
fields default to ``None``, and ``None`` always means *absent*: the service
layer leaves such fields out of the outgoing request instead of sending them as
``null`` or an empty value, because the service applies its own defaults to
omitted fields.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BaseOptions(BaseModel):
    """
    Common base for all request options.

    Unknown keys are rejected so that a typo in a dict payload surfaces as a
    validation error rather than a silently dropped option.
    """

    model_config = ConfigDict(extra="forbid", protected_namespaces=())


# -------------------------------------------------------------------
# Translation
# -------------------------------------------------------------------
class TranslateOptions(BaseOptions):
    """
    Options for the ``translate`` endpoint.

    Attributes
    ----------
    text : List[str]
        Input text fragments, at least one.
    model_id : Optional[str]
        Id of the model to translate with (e.g. ``"en-es"``).
    source : Optional[str]
        Language code of the input text; used together with ``target`` when
        no ``model_id`` is given.
    target : Optional[str]
        Language code of the translation.
    """

    text: List[str] = Field(..., min_length=1)
    model_id: Optional[str] = None
    source: Optional[str] = None
    target: Optional[str] = None


class IdentifyOptions(BaseOptions):
    """
    Options for the ``identify`` endpoint.

    Attributes
    ----------
    text : str
        Raw text whose language should be identified.
    """

    text: str = Field(..., min_length=1)


class ListIdentifiableLanguagesOptions(BaseOptions):
    """The ``identifiable_languages`` endpoint takes no options."""

    ...


# -------------------------------------------------------------------
# Models
# -------------------------------------------------------------------
class CreateModelOptions(BaseOptions):
    """
    Options for creating a custom translation model.

    Each file payload may be given as ``bytes``, ``str`` or an open binary
    file object.  At least one of ``forced_glossary``, ``parallel_corpus``
    and ``monolingual_corpus`` has to be supplied; the check happens in the
    service right before the request is built.

    Attributes
    ----------
    base_model_id : str
        Id of the model that is customised.
    name : Optional[str]
        Name of the new model.
    forced_glossary : Optional[Any]
        TMX glossary that forces specific translations.
    parallel_corpus : Optional[Any]
        TMX corpus of parallel sentences.
    monolingual_corpus : Optional[Any]
        UTF-8 plain text corpus in the target language.
    *_filename : Optional[str]
        File name sent with the matching multipart part.
    """

    base_model_id: str = Field(..., min_length=1)
    name: Optional[str] = None

    forced_glossary: Optional[Any] = None
    forced_glossary_filename: Optional[str] = None

    parallel_corpus: Optional[Any] = None
    parallel_corpus_filename: Optional[str] = None

    monolingual_corpus: Optional[Any] = None
    monolingual_corpus_filename: Optional[str] = None


class DeleteModelOptions(BaseOptions):
    """Options for deleting a custom model identified by ``model_id``."""

    model_id: str = Field(..., min_length=1)


class GetModelOptions(BaseOptions):
    """Options for fetching a single model identified by ``model_id``."""

    model_id: str = Field(..., min_length=1)


class ListModelsOptions(BaseOptions):
    """
    Filters for listing models.

    Attributes
    ----------
    source : Optional[str]
        Only models translating from this language.
    target : Optional[str]
        Only models translating into this language.
    default_models : Optional[bool]
        ``True`` lists only default models, ``False`` only non‑default ones.
    """

    source: Optional[str] = None
    target: Optional[str] = None
    default_models: Optional[bool] = None
