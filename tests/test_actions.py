"""Tests for the Improve Writing and Translate actions."""

import json
from unittest.mock import patch

import pytest
import requests

from gemini_clip_lib.actions import ACTIONS, ImproveWritingAction, TranslateAction
from gemini_clip_lib.data_models.constants import (
    DEFAULT_IMPROVE_WRITING_PROMPT,
    DEFAULT_TIMEOUT,
    DEFAULT_TRANSLATE_PROMPT,
)
from gemini_clip_lib.exceptions import ErrorCategory

from conftest import candidates_body, make_response


def sent_body(mock_post):
    return mock_post.call_args.kwargs["json"]


def sent_url(mock_post):
    return mock_post.call_args.args[1]


class TestImproveWritingAction:

    def test_success(self, mock_post, options):
        mock_post.return_value = make_response(body=candidates_body(["Hello", "world"]))

        result = ImproveWritingAction().apply({"text": "helo wrld"}, options)

        assert result == "Hello\nworld"
        assert mock_post.call_count == 1
        assert sent_url(mock_post).endswith("/models/gemini-2.0-flash:generateContent")
        assert mock_post.call_args.kwargs["params"] == {"key": "test-key"}

    def test_request_body(self, mock_post, options):
        mock_post.return_value = make_response(body=candidates_body(["ok"]))

        ImproveWritingAction().apply({"text": "abc"}, options)

        body = sent_body(mock_post)
        assert body["contents"] == [
            {
                "role": "user",
                "parts": [{"text": DEFAULT_IMPROVE_WRITING_PROMPT.replace("{input}", "abc")}],
            }
        ]
        assert body["generationConfig"] == {
            "temperature": 0.3,
            "maxOutputTokens": 1024,
            "topP": 0.95,
            "topK": 40,
        }
        assert body["safetySettings"] == [
            {"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_ONLY_HIGH"}
        ]

    def test_custom_template_replaces_all_placeholders(self, mock_post, options):
        mock_post.return_value = make_response(body=candidates_body(["ok"]))
        options["prompt"] = "A: {input} B: {input}"

        ImproveWritingAction().apply({"text": "xyz"}, options)

        assert sent_body(mock_post)["contents"][0]["parts"][0]["text"] == "A: xyz B: xyz"

    def test_model_defaults_and_list(self, mock_post):
        mock_post.return_value = make_response(body=candidates_body(["ok"]))
        action = ImproveWritingAction()

        action.apply({"text": "a"}, {"apikey": "k"})
        assert sent_url(mock_post).endswith("/models/gemini-2.0-flash-lite:generateContent")

        action.apply({"text": "a"}, {"apikey": "k", "model": ["gemini-2.5-flash"]})
        assert sent_url(mock_post).endswith("/models/gemini-2.5-flash:generateContent")

    def test_empty_input(self, mock_post, options):
        assert ImproveWritingAction().apply({"text": ""}, options) == "Error: no input text."
        assert ImproveWritingAction().apply(None, options) == "Error: no input text."
        mock_post.assert_not_called()

    @pytest.mark.parametrize("apikey", [None, "", "   \t"])
    def test_missing_api_key(self, mock_post, apikey):
        result = ImproveWritingAction().apply({"text": "hi"}, {"apikey": apikey})
        assert "missing API key" in result
        mock_post.assert_not_called()

    def test_block_reason(self, mock_post, options):
        mock_post.return_value = make_response(
            body={"promptFeedback": {"blockReason": "SAFETY"}}
        )
        result = ImproveWritingAction().apply({"text": "hi"}, options)
        assert result == "Error generating content: Generation failed: SAFETY"

    def test_empty_output(self, mock_post, options):
        mock_post.return_value = make_response(body=candidates_body([""]))
        result = ImproveWritingAction().apply({"text": "hi"}, options)
        assert result == "Error generating content: Empty response from model."

    def test_server_error_includes_body(self, mock_post, options):
        error = {"error": {"code": 400, "message": "API key not valid.", "status": "INVALID_ARGUMENT"}}
        mock_post.return_value = make_response(status=400, body=error)

        result = ImproveWritingAction().apply({"text": "hi"}, options)

        assert result == "Error generating content: " + json.dumps(error, separators=(",", ":"))

    def test_timeout(self, mock_post, options):
        mock_post.side_effect = requests.exceptions.Timeout("Read timed out.")

        result = ImproveWritingAction().apply({"text": "hi"}, options)

        assert result == "Error generating content: Read timed out."
        assert mock_post.call_args.kwargs["timeout"] == DEFAULT_TIMEOUT

    def test_timeout_option(self, mock_post, options):
        mock_post.return_value = make_response(body=candidates_body(["ok"]))
        options["timeout"] = 2.5
        ImproveWritingAction().apply({"text": "hi"}, options)
        assert mock_post.call_args.kwargs["timeout"] == 2.5

    def test_unexpected_error_is_reported(self, mock_post, options):
        mock_post.side_effect = RuntimeError("boom")
        result = ImproveWritingAction().apply({"text": "hi"}, options)
        assert result == "Error generating content: boom"

    def test_session_closed_after_call(self, mock_post, options):
        mock_post.return_value = make_response(body=candidates_body(["ok"]))
        with patch.object(requests.Session, "close") as close:
            ImproveWritingAction().apply({"text": "hi"}, options)
        close.assert_called_once()

    def test_session_closed_after_failure(self, mock_post, options):
        mock_post.side_effect = requests.exceptions.ConnectionError("down")
        with patch.object(requests.Session, "close") as close:
            ImproveWritingAction().apply({"text": "hi"}, options)
        close.assert_called_once()

    def test_run_returns_typed_result(self, mock_post, options):
        mock_post.return_value = make_response(
            body={"promptFeedback": {"blockReason": "OTHER"}}
        )
        result = ImproveWritingAction().run({"text": "hi"}, options)
        assert result.is_error
        assert result.error.category == ErrorCategory.GENERATION_BLOCKED
        assert "OTHER" in result.error.detail


class TestTranslateAction:

    def test_default_prompt_and_config(self, mock_post, options):
        mock_post.return_value = make_response(body=candidates_body(["Hello"]))
        options["tolang"] = ["French"]

        result = TranslateAction().apply({"text": "Hola"}, options)

        assert result == "Hello"
        body = sent_body(mock_post)
        expected = DEFAULT_TRANSLATE_PROMPT.replace("{lang}", "French").replace(
            "{input}", "Hola"
        )
        assert body["contents"][0]["parts"][0]["text"] == expected
        assert body["generationConfig"] == {
            "temperature": 1.0,
            "maxOutputTokens": 8192,
            "topP": 0.95,
            "topK": 64,
            "stopSequences": ["Title"],
        }

    def test_custom_template(self, mock_post, options):
        mock_post.return_value = make_response(body=candidates_body(["ok"]))
        options.update(prompt="{input} -> {lang} ({input})", tolang="Spanish")

        TranslateAction().apply({"text": "cat"}, options)

        assert sent_body(mock_post)["contents"][0]["parts"][0]["text"] == "cat -> Spanish (cat)"

    def test_language_defaults_to_english(self, mock_post, options):
        mock_post.return_value = make_response(body=candidates_body(["ok"]))
        options["prompt"] = "{lang}|{input}"
        TranslateAction().apply({"text": "x"}, options)
        assert sent_body(mock_post)["contents"][0]["parts"][0]["text"] == "English|x"

    def test_missing_input(self, mock_post, options):
        assert TranslateAction().apply({"text": ""}, options) == "Error: no input text."
        mock_post.assert_not_called()


class TestManifest:

    def test_registry(self):
        assert ACTIONS == {
            "improve-writing": ImproveWritingAction,
            "translate": TranslateAction,
        }

    def test_improve_writing_options(self):
        manifest = ImproveWritingAction().manifest()
        assert manifest["name"] == "Gemini Improve Writing"
        assert manifest["actions"] == [
            {"title": "Gemini Improve Writing", "after": "paste-result"}
        ]
        assert [o["identifier"] for o in manifest["options"]] == ["apikey", "model", "prompt"]

    def test_translate_options(self):
        options = TranslateAction().manifest()["options"]
        assert [o["identifier"] for o in options] == ["apikey", "model", "prompt", "tolang"]
        assert options[-1]["values"] == [
            "English", "Chinese", "Russian", "French", "Português", "Spanish"
        ]
        assert options[2]["defaultValue"] == DEFAULT_TRANSLATE_PROMPT
