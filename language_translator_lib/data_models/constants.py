API_VERSION_PREFIX = "/v2"

TRANSLATE_PATH = f"{API_VERSION_PREFIX}/translate"
IDENTIFY_PATH = f"{API_VERSION_PREFIX}/identify"
IDENTIFIABLE_LANGUAGES_PATH = f"{API_VERSION_PREFIX}/identifiable_languages"
MODELS_PATH = f"{API_VERSION_PREFIX}/models"

CONTENT_TYPE_TEXT = "text/plain"
CONTENT_TYPE_OCTET_STREAM = "application/octet-stream"

# Query parameter names
BASE_MODEL_ID_PARAM = "base_model_id"
NAME_PARAM = "name"
SOURCE_PARAM = "source"
TARGET_PARAM = "target"
DEFAULT_PARAM = "default"

# Multipart form field -> content type of the uploaded file
FORCED_GLOSSARY_PART = "forced_glossary"
PARALLEL_CORPUS_PART = "parallel_corpus"
MONOLINGUAL_CORPUS_PART = "monolingual_corpus"

MODEL_FILE_PARTS = {
    FORCED_GLOSSARY_PART: CONTENT_TYPE_OCTET_STREAM,
    PARALLEL_CORPUS_PART: CONTENT_TYPE_OCTET_STREAM,
    MONOLINGUAL_CORPUS_PART: CONTENT_TYPE_TEXT,
}


class TranslationModelStatus:
    UPLOADING = "uploading"
    UPLOADED = "uploaded"
    DISPATCHING = "dispatching"
    QUEUED = "queued"
    TRAINING = "training"
    TRAINED = "trained"
    PUBLISHING = "publishing"
    AVAILABLE = "available"
    DELETED = "deleted"
    ERROR = "error"
