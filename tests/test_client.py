import importlib
import os
import unittest
from unittest.mock import patch

from language_translator_lib import constants
from language_translator_lib import (
    DecodeError,
    InvalidArgumentError,
    LanguageTranslatorClient,
    NotFoundError,
)
from language_translator_lib.data_models.constants import TranslationModelStatus
from language_translator_lib.data_models.options import (
    GetModelOptions,
    IdentifyOptions,
    ListModelsOptions,
    TranslateOptions,
)
from language_translator_lib.data_models.responses import (
    IdentifiableLanguages,
    IdentifiedLanguages,
    TranslationModel,
    TranslationModels,
    TranslationResult,
)

from tests.helpers import BASE_URL, make_client, make_response

MODEL = {
    "model_id": "3e7dfdbe-f757-4150-afee-458e71eb93fb",
    "name": "custom-english-to-spanish",
    "source": "en",
    "target": "es",
    "base_model_id": "en-es",
    "domain": "news",
    "customizable": False,
    "default_model": False,
    "owner": "c9b3e4f7",
    "status": "available",
}


class TestTranslate(unittest.TestCase):
    def test_translate_with_language_pair(self):
        client, session = make_client(
            make_response(
                body={
                    "word_count": 1,
                    "character_count": 5,
                    "translations": [{"translation": "Hola"}],
                }
            )
        )

        result = client.translate(text=["Hello"], source="en", target="es")

        args, kwargs = session.request.call_args
        self.assertEqual(args, ("POST", BASE_URL + "/v2/translate"))
        self.assertEqual(kwargs["json"], {"text": ["Hello"], "source": "en", "target": "es"})
        self.assertIsInstance(result, TranslationResult)
        self.assertEqual(result.translations[0].translation, "Hola")
        self.assertEqual(result.word_count, 1)

    def test_translate_single_string_is_wrapped(self):
        client, session = make_client(make_response(body={"translations": []}))
        client.translate(text="Hello", model_id="en-es")
        self.assertEqual(
            session.request.call_args.kwargs["json"],
            {"text": ["Hello"], "model_id": "en-es"},
        )

    def test_translate_accepts_options_model(self):
        client, session = make_client(make_response(body={"translations": []}))
        client.translate(TranslateOptions(text=["a", "b"], model_id="en-de"))
        self.assertEqual(
            session.request.call_args.kwargs["json"],
            {"text": ["a", "b"], "model_id": "en-de"},
        )

    def test_translate_without_anything_fails_before_sending(self):
        client, session = make_client()
        with self.assertRaises(InvalidArgumentError):
            client.translate()
        session.request.assert_not_called()

    def test_result_is_immutable(self):
        client, _ = make_client(
            make_response(body={"translations": [{"translation": "Hola"}]})
        )
        result = client.translate(text=["Hello"], model_id="en-es")
        with self.assertRaises(Exception):
            result.word_count = 10


class TestIdentify(unittest.TestCase):
    def test_identify_plain_text(self):
        client, session = make_client(
            make_response(
                body={
                    "languages": [
                        {"language": "fr", "confidence": 0.98},
                        {"language": "ca", "confidence": 0.01},
                    ]
                }
            )
        )

        result = client.identify(text="Bonjour")

        args, kwargs = session.request.call_args
        self.assertEqual(args, ("POST", BASE_URL + "/v2/identify"))
        self.assertEqual(kwargs["data"], b"Bonjour")
        self.assertEqual(kwargs["headers"], {"Content-Type": "text/plain"})
        self.assertIsNone(kwargs["json"])
        self.assertIsInstance(result, IdentifiedLanguages)
        self.assertEqual(result.languages[0].language, "fr")

    def test_identify_without_text_fails(self):
        client, session = make_client()
        with self.assertRaises(InvalidArgumentError):
            client.identify()
        session.request.assert_not_called()

    def test_list_identifiable_languages(self):
        client, session = make_client(
            make_response(
                body={
                    "languages": [
                        {"language": "en", "name": "English"},
                        {"language": "es", "name": "Spanish"},
                    ]
                }
            )
        )

        result = client.list_identifiable_languages()

        args, kwargs = session.request.call_args
        self.assertEqual(args, ("GET", BASE_URL + "/v2/identifiable_languages"))
        self.assertIsNone(kwargs["params"])
        self.assertIsInstance(result, IdentifiableLanguages)
        self.assertEqual([l.name for l in result.languages], ["English", "Spanish"])


class TestModels(unittest.TestCase):
    def test_create_model(self):
        client, session = make_client(make_response(body=MODEL))

        result = client.create_model(
            base_model_id="en-es",
            name="custom-english-to-spanish",
            forced_glossary=b"<tmx/>",
            forced_glossary_filename="glossary.tmx",
        )

        args, kwargs = session.request.call_args
        self.assertEqual(args, ("POST", BASE_URL + "/v2/models"))
        self.assertEqual(
            kwargs["params"],
            {"base_model_id": "en-es", "name": "custom-english-to-spanish"},
        )
        self.assertEqual(
            kwargs["files"],
            [
                (
                    "forced_glossary",
                    ("glossary.tmx", b"<tmx/>", "application/octet-stream"),
                )
            ],
        )
        self.assertIsInstance(result, TranslationModel)
        self.assertEqual(result.status, TranslationModelStatus.AVAILABLE)

    def test_create_model_without_files_fails_before_sending(self):
        client, session = make_client()
        with self.assertRaises(InvalidArgumentError):
            client.create_model(base_model_id="en-es", name="nothing")
        session.request.assert_not_called()

    def test_create_model_without_options_fails(self):
        client, _ = make_client()
        with self.assertRaises(InvalidArgumentError):
            client.create_model()

    def test_delete_model(self):
        client, session = make_client(make_response(200, text=""))

        self.assertIsNone(client.delete_model(model_id="a/b"))

        args, _ = session.request.call_args
        self.assertEqual(args, ("DELETE", BASE_URL + "/v2/models/a%2Fb"))

    def test_get_model(self):
        client, session = make_client(make_response(body=MODEL))

        result = client.get_model(model_id=MODEL["model_id"])

        args, _ = session.request.call_args
        self.assertEqual(args, ("GET", BASE_URL + "/v2/models/" + MODEL["model_id"]))
        self.assertEqual(result, TranslationModel(**MODEL))

    def test_get_unknown_model_raises_not_found(self):
        client, _ = make_client(
            make_response(404, body={"code": 404, "error": "Model not found"})
        )
        with self.assertRaises(NotFoundError) as ctx:
            client.get_model(model_id="missing")
        self.assertEqual(ctx.exception.message, "Model not found")

    def test_list_models_without_filters(self):
        client, session = make_client(make_response(body={"models": [MODEL]}))

        result = client.list_models()

        args, kwargs = session.request.call_args
        self.assertEqual(args, ("GET", BASE_URL + "/v2/models"))
        self.assertIsNone(kwargs["params"])
        self.assertIsInstance(result, TranslationModels)
        self.assertEqual(len(result.models), 1)

    def test_list_models_with_target_only(self):
        client, session = make_client(make_response(body={"models": []}))
        client.list_models(target="es")
        self.assertEqual(session.request.call_args.kwargs["params"], {"target": "es"})

    def test_list_models_with_options(self):
        client, session = make_client(make_response(body={"models": []}))
        client.list_models(ListModelsOptions(source="en", default_models=True))
        self.assertEqual(
            session.request.call_args.kwargs["params"],
            {"source": "en", "default": "true"},
        )

    def test_list_models_rejects_options_and_filters_together(self):
        client, _ = make_client()
        with self.assertRaises(InvalidArgumentError):
            client.list_models(ListModelsOptions(source="en"), target="es")


class TestDecoding(unittest.TestCase):
    def test_non_json_body_raises_decode_error(self):
        client, _ = make_client(make_response(200, text="<html>oops</html>"))
        with self.assertRaises(DecodeError):
            client.list_models()

    def test_unexpected_shape_raises_decode_error(self):
        client, _ = make_client(make_response(body={"models": "not-a-list"}))
        with self.assertRaises(DecodeError):
            client.list_models()

    def test_unknown_keys_are_ignored(self):
        client, _ = make_client(make_response(body={**MODEL, "new_field": 1}))
        self.assertEqual(client.get_model(model_id="x").model_id, MODEL["model_id"])


class TestClientConfiguration(unittest.TestCase):
    def test_from_env_overrides(self):
        client = LanguageTranslatorClient.from_env(
            api="http://localhost:9000/", token="abc", timeout=3
        )
        self.assertEqual(client.base_url, "http://localhost:9000")
        self.assertEqual(client.http.base_url, "http://localhost:9000")
        self.assertEqual(client.http.timeout, 3)
        self.assertEqual(client.http.session.headers["Authorization"], "Bearer abc")

    def test_from_env_reads_environment(self):
        self.addCleanup(importlib.reload, constants)
        env = {
            "LANGUAGE_TRANSLATOR_URL": "http://translator.local:8080/api/",
            "LANGUAGE_TRANSLATOR_USERNAME": "user",
            "LANGUAGE_TRANSLATOR_PASSWORD": "pass",
            "LANGUAGE_TRANSLATOR_TOKEN": "",
            "LANGUAGE_TRANSLATOR_TIMEOUT": "7",
        }
        with patch.dict(os.environ, env):
            importlib.reload(constants)
            client = LanguageTranslatorClient.from_env()

        self.assertEqual(client.base_url, "http://translator.local:8080/api")
        self.assertEqual(client.http.timeout, 7)
        self.assertEqual(client.http.session.auth, ("user", "pass"))
        self.assertNotIn("Authorization", client.http.session.headers)

    def test_from_env_token_and_explicit_override(self):
        self.addCleanup(importlib.reload, constants)
        env = {
            "LANGUAGE_TRANSLATOR_URL": "http://translator.local:8080/api",
            "LANGUAGE_TRANSLATOR_TOKEN": "env-token",
        }
        with patch.dict(os.environ, env):
            importlib.reload(constants)
            client = LanguageTranslatorClient.from_env(api="http://other:9000")

        self.assertEqual(client.base_url, "http://other:9000")
        self.assertEqual(
            client.http.session.headers["Authorization"], "Bearer env-token"
        )


class TestOptionsOrArguments(unittest.TestCase):
    def test_options_and_keyword_arguments_cannot_be_mixed(self):
        client, session = make_client()
        calls = [
            (client.translate, TranslateOptions(text=["a"]), {"target": "es"}),
            (client.identify, IdentifyOptions(text="Bonjour"), {"text": "Hallo"}),
            (
                client.create_model,
                {"base_model_id": "en-es", "forced_glossary": b"x"},
                {"name": "custom"},
            ),
            (client.delete_model, {"model_id": "a"}, {"model_id": "b"}),
            (client.get_model, GetModelOptions(model_id="a"), {"model_id": "b"}),
            (client.list_models, ListModelsOptions(source="en"), {"target": "es"}),
        ]
        for method, options, kwargs in calls:
            with self.subTest(method=method.__name__):
                with self.assertRaises(InvalidArgumentError):
                    method(options, **kwargs)
        session.request.assert_not_called()

    def test_none_keyword_arguments_do_not_count_as_mixing(self):
        client, session = make_client(make_response(body={"models": []}))
        client.list_models(ListModelsOptions(target="es"), source=None)
        self.assertEqual(session.request.call_args.kwargs["params"], {"target": "es"})

    def test_keyword_arguments_without_required_field_are_rejected(self):
        client, session = make_client()
        with self.assertRaises(InvalidArgumentError):
            client.translate(source="en", target="es")
        session.request.assert_not_called()


if __name__ == "__main__":
    unittest.main()
