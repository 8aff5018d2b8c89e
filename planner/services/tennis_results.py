import logging
from dataclasses import dataclass, field
from typing import List

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger(__name__)

GEMINI_API = "https://generativelanguage.googleapis.com/v1beta"
TENNIS_PROMPT = (
    "直近の主要なテニスの試合結果をいくつか教えてください。"
    "大会名、男女シングルスの優勝・準優勝選手名、スコアを箇条書きでまとめてください。"
)
MISSING_KEY_MESSAGE = "APIキーが設定されていません。"
FETCH_FAILED_MESSAGE = "結果の取得に失敗しました。時間をおいて再試行してください。"


class TennisResultsError(RuntimeError):
    pass


@dataclass(frozen=True)
class Source:
    uri: str
    title: str


@dataclass(frozen=True)
class TennisResults:
    text: str
    sources: List[Source] = field(default_factory=list)


def _build_session():
    session = requests.Session()
    # One attempt only; failures surface to the page instead of retrying.
    retry = Retry(total=0, raise_on_status=False)
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


_SESSION = _build_session()


def _as_dict(value):
    return value if isinstance(value, dict) else {}


def _as_list(value):
    return value if isinstance(value, list) else []


def _extract_text(candidate):
    parts = _as_list(_as_dict(candidate.get("content")).get("parts"))
    return "".join(str(part.get("text", "")) for part in parts if isinstance(part, dict))


def _extract_sources(candidate):
    chunks = _as_list(_as_dict(candidate.get("groundingMetadata")).get("groundingChunks"))
    sources = []
    for chunk in chunks:
        web = _as_dict(_as_dict(chunk).get("web"))
        uri = web.get("uri")
        if not uri or not isinstance(uri, str):
            continue
        sources.append(Source(uri=uri, title=str(web.get("title") or uri)))
    return sources


def parse_response(payload):
    if not isinstance(payload, dict):
        raise ValueError("Gemini response is not a JSON object")
    candidates = _as_list(payload.get("candidates"))
    if not candidates or not isinstance(candidates[0], dict):
        raise ValueError("Gemini response has no candidates")
    candidate = candidates[0]
    return TennisResults(text=_extract_text(candidate), sources=_extract_sources(candidate))


def fetch_tennis_results(api_key, model="gemini-2.5-flash", timeout=30, session=None):
    if not api_key:
        raise TennisResultsError(MISSING_KEY_MESSAGE)
    http = session or _SESSION
    url = f"{GEMINI_API}/models/{model}:generateContent"
    body = {
        "contents": [{"role": "user", "parts": [{"text": TENNIS_PROMPT}]}],
        "tools": [{"google_search": {}}],
    }
    try:
        response = http.post(
            url,
            params={"key": api_key},
            json=body,
            timeout=timeout,
        )
        response.raise_for_status()
        results = parse_response(response.json())
    except (requests.RequestException, ValueError) as exc:
        logger.exception("Failed to fetch tennis results: %s", exc)
        raise TennisResultsError(FETCH_FAILED_MESSAGE) from exc
    logger.info("Fetched tennis results with %d sources", len(results.sources))
    return results
