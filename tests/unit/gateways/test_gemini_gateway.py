import unittest
from unittest.mock import patch

import httpx

from src.config.config import GeminiConfig
from src.gateways.gemini import GeminiGateway
from src.utils.exceptions import CollaboratorError, MalformedGenerationOutput


def gemini_response(text, status_code=200):
    return httpx.Response(
        status_code,
        json={"candidates": [{"content": {"parts": [{"text": text}]}}]},
        request=httpx.Request("POST", "https://generativelanguage.googleapis.com"),
    )


class TestParseGenerationJson(unittest.TestCase):
    def test_plain_array(self):
        self.assertEqual(GeminiGateway.parse_generation_json('["a", "b"]'), ["a", "b"])

    def test_code_fenced_object_with_prose(self):
        raw = 'Here you go:\n```json\n{"brandName": "Idro", "nested": {"x": [1, 2]}}\n```\nEnjoy!'

        self.assertEqual(
            GeminiGateway.parse_generation_json(raw),
            {"brandName": "Idro", "nested": {"x": [1, 2]}},
        )

    def test_braces_inside_strings(self):
        raw = '{"content": "<p>{not json}</p>"} trailing'
        self.assertEqual(GeminiGateway.parse_generation_json(raw), {"content": "<p>{not json}</p>"})

    def test_empty_input(self):
        with self.assertRaises(MalformedGenerationOutput) as ctx:
            GeminiGateway.parse_generation_json("   ")
        self.assertTrue(ctx.exception.message.startswith("AI Generation Failed"))

    def test_no_json(self):
        with self.assertRaises(MalformedGenerationOutput):
            GeminiGateway.parse_generation_json("I cannot help with that.")

    def test_malformed_json(self):
        with self.assertRaises(MalformedGenerationOutput):
            GeminiGateway.parse_generation_json('["a", "b"')


class TestGeminiGateway(unittest.TestCase):
    def setUp(self):
        self.gateway = GeminiGateway(GeminiConfig(api_key="test-key"))

    @patch("src.gateways.gemini.httpx.post")
    def test_generate_returns_candidate_text(self, mock_post):
        mock_post.return_value = gemini_response('["x"]')

        self.assertEqual(self.gateway.generate("prompt"), '["x"]')

        args, kwargs = mock_post.call_args
        self.assertTrue(args[0].endswith("/gemini-2.0-flash:generateContent"))
        self.assertEqual(kwargs["params"], {"key": "test-key"})
        self.assertEqual(kwargs["json"]["generationConfig"]["responseMimeType"], "application/json")

    @patch("src.gateways.gemini.httpx.post")
    def test_http_error_becomes_collaborator_error(self, mock_post):
        mock_post.return_value = httpx.Response(
            429,
            json={"error": {"message": "quota exceeded"}},
            request=httpx.Request("POST", "https://generativelanguage.googleapis.com"),
        )

        with self.assertRaises(CollaboratorError) as ctx:
            self.gateway.generate("prompt")

        self.assertEqual(ctx.exception.status_code, 429)
        self.assertIn("Gemini", ctx.exception.message)
        self.assertIn("quota exceeded", ctx.exception.message)

    @patch("src.gateways.gemini.httpx.post")
    def test_network_error_becomes_collaborator_error(self, mock_post):
        mock_post.side_effect = httpx.ConnectError("boom")

        with self.assertRaises(CollaboratorError):
            self.gateway.generate("prompt")

    @patch("src.gateways.gemini.httpx.post")
    def test_missing_candidates_is_malformed(self, mock_post):
        mock_post.return_value = httpx.Response(
            200, json={"candidates": []}, request=httpx.Request("POST", "https://x")
        )

        with self.assertRaises(MalformedGenerationOutput):
            self.gateway.generate("prompt")

    @patch("src.gateways.gemini.httpx.post")
    def test_generate_json_unwraps_keyed_list(self, mock_post):
        mock_post.return_value = gemini_response('{"keywords": ["a", "b"]}')

        self.assertEqual(self.gateway.generate_json("p", list, key="keywords"), ["a", "b"])

    @patch("src.gateways.gemini.httpx.post")
    def test_generate_json_shape_mismatch(self, mock_post):
        mock_post.return_value = gemini_response('["a"]')

        with self.assertRaises(MalformedGenerationOutput):
            self.gateway.generate_json("p", dict)


if __name__ == "__main__":
    unittest.main()
