import json
from unittest.mock import patch

import pytest
import requests


def make_response(status=200, body=None, text=None, reason=None):
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason or ("OK" if status < 400 else "Error")
    resp.encoding = "utf-8"
    if body is not None:
        resp._content = json.dumps(body).encode("utf-8")
    else:
        resp._content = (text or "").encode("utf-8")
    return resp


def candidates_body(*candidates, **extra):
    body = {
        "candidates": [
            {"content": {"role": "model", "parts": [{"text": t} for t in parts]}}
            for parts in candidates
        ]
    }
    body.update(extra)
    return body


@pytest.fixture
def mock_post():
    with patch.object(requests.Session, "post", autospec=True) as post:
        yield post


@pytest.fixture
def options():
    return {"apikey": "test-key", "model": "gemini-2.0-flash"}
