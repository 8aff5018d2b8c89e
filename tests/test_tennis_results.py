from __future__ import annotations

import unittest
from unittest import mock

import requests

from planner.services.tennis_results import (
    FETCH_FAILED_MESSAGE,
    MISSING_KEY_MESSAGE,
    TennisResultsError,
    fetch_tennis_results,
    parse_response,
)

PAYLOAD = {
    "candidates": [
        {
            "content": {"parts": [{"text": "・全仏オープン\n"}, {"text": "・ウィンブルドン"}]},
            "groundingMetadata": {
                "groundingChunks": [
                    {"web": {"uri": "https://example.com/a", "title": "Example A"}},
                    {"web": {"uri": "https://example.com/b"}},
                    {"web": {"title": "no uri"}},
                    {},
                ]
            },
        }
    ]
}


def _session_returning(payload=None, status=200, exc=None):
    session = mock.Mock()
    if exc is not None:
        session.post.side_effect = exc
        return session
    response = mock.Mock()
    response.status_code = status
    response.json.return_value = payload
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status} error")
    else:
        response.raise_for_status.return_value = None
    session.post.return_value = response
    return session


class TestParseResponse(unittest.TestCase):
    def test_text_and_sources(self) -> None:
        results = parse_response(PAYLOAD)
        self.assertEqual(results.text, "・全仏オープン\n・ウィンブルドン")
        self.assertEqual([source.uri for source in results.sources], ["https://example.com/a", "https://example.com/b"])
        self.assertEqual(results.sources[1].title, "https://example.com/b")

    def test_missing_candidates(self) -> None:
        with self.assertRaises(ValueError):
            parse_response({"candidates": []})
        with self.assertRaises(ValueError):
            parse_response(["not", "an", "object"])
        with self.assertRaises(ValueError):
            parse_response({"candidates": ["x"]})

    def test_malformed_nested_values_are_skipped(self) -> None:
        payload = {
            "candidates": [
                {
                    "content": "str",
                    "groundingMetadata": {"groundingChunks": ["junk", {"web": "x"}, {"web": {"uri": 5}}]},
                }
            ]
        }
        results = parse_response(payload)
        self.assertEqual(results.text, "")
        self.assertEqual(results.sources, [])

        payload = {"candidates": [{"content": {"parts": ["x", {"text": "ok"}]}, "groundingMetadata": []}]}
        self.assertEqual(parse_response(payload).text, "ok")


class TestFetchTennisResults(unittest.TestCase):
    def test_missing_key_fails_without_request(self) -> None:
        session = _session_returning(PAYLOAD)
        with self.assertRaises(TennisResultsError) as ctx:
            fetch_tennis_results("", session=session)
        self.assertEqual(str(ctx.exception), MISSING_KEY_MESSAGE)
        session.post.assert_not_called()

    def test_success_makes_single_grounded_request(self) -> None:
        session = _session_returning(PAYLOAD)
        results = fetch_tennis_results("secret", model="gemini-test", timeout=5, session=session)
        self.assertEqual(len(results.sources), 2)
        session.post.assert_called_once()
        args, kwargs = session.post.call_args
        self.assertTrue(args[0].endswith("/models/gemini-test:generateContent"))
        self.assertEqual(kwargs["params"], {"key": "secret"})
        self.assertEqual(kwargs["json"]["tools"], [{"google_search": {}}])
        self.assertEqual(kwargs["timeout"], 5)

    def test_http_error_is_wrapped(self) -> None:
        session = _session_returning({"error": {}}, status=503)
        with self.assertLogs("planner.services.tennis_results", level="ERROR"):
            with self.assertRaises(TennisResultsError) as ctx:
                fetch_tennis_results("secret", session=session)
        self.assertEqual(str(ctx.exception), FETCH_FAILED_MESSAGE)
        session.post.assert_called_once()

    def test_network_error_is_wrapped(self) -> None:
        session = _session_returning(exc=requests.ConnectionError("down"))
        with self.assertLogs("planner.services.tennis_results", level="ERROR"):
            with self.assertRaises(TennisResultsError):
                fetch_tennis_results("secret", session=session)

    def test_unparseable_body_is_wrapped(self) -> None:
        session = _session_returning({"candidates": []})
        with self.assertLogs("planner.services.tennis_results", level="ERROR"):
            with self.assertRaises(TennisResultsError):
                fetch_tennis_results("secret", session=session)

    def test_malformed_candidate_is_wrapped(self) -> None:
        session = _session_returning({"candidates": ["x"]})
        with self.assertLogs("planner.services.tennis_results", level="ERROR"):
            with self.assertRaises(TennisResultsError) as ctx:
                fetch_tennis_results("secret", session=session)
        self.assertEqual(str(ctx.exception), FETCH_FAILED_MESSAGE)


if __name__ == "__main__":
    unittest.main(verbosity=2)
