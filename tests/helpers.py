import json
from unittest.mock import MagicMock

import requests

from language_translator_lib import LanguageTranslatorClient
from language_translator_lib.utils.http import HttpRequester

BASE_URL = "https://translator.example.com/api"


def make_response(status_code=200, body=None, text=None):
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = BASE_URL
    resp.encoding = "utf-8"
    if body is not None:
        resp._content = json.dumps(body).encode("utf-8")
        resp.headers["Content-Type"] = "application/json"
    else:
        resp._content = (text or "").encode("utf-8")
    return resp


def make_session(response=None):
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    session.auth = None
    session.request.return_value = (
        response if response is not None else make_response(body={})
    )
    return session


def make_client(response=None):
    session = make_session(response)
    http = HttpRequester(base_url=BASE_URL, session=session)
    return LanguageTranslatorClient(api=BASE_URL, http=http), session
