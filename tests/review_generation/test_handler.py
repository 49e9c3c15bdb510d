import random

import pytest

from src.functions.review_generation.core.config import ServiceConfig
from src.functions.review_generation.core.contracts.review import ReviewBatchResult, ReviewOptions
from src.functions.review_generation.core.errors import (
    ExtractionFailureError,
    GenerationFailureError,
    InputMissingError,
)
from src.functions.review_generation.core.factory import (
    count_from_payload,
    options_from_payload,
    request_from_payload,
    resolve_api_key,
)
from src.functions.review_generation.core.service import ReviewGenerationService
from src.functions.review_generation.functions.main import GENERIC_FAILURE_MESSAGE, handle_request


class FakeGenerator:
    def __init__(self, text):
        self.text = text

    def generate(self, prompt, *, options=None):
        return self.text


class FakeService:
    def __init__(self, error=None):
        self.error = error
        self.requests = []
        self.documents = []

    def generate(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return ReviewBatchResult(reviews=["좋았어요"] * request.count, options=request.options)

    def generate_from_document(self, data, count, options=None):
        self.documents.append((data, count, options))
        if self.error is not None:
            raise self.error
        return ReviewBatchResult(reviews=["좋았어요"] * count, options=options, summary="문서 요약")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("OPENAI_MODEL", "REVIEW_MAX_COUNT", "REVIEW_DOCUMENT_MAX_CHARS", "OPENAI_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)


def test_options_from_payload_defaults():
    options = options_from_payload({})

    assert options == ReviewOptions()


def test_options_from_payload_reads_options_block_and_aliases():
    options = options_from_payload(
        {
            "temperature": "0.2",
            "options": {"emoji": "false", "minPct": 0.2, "maxFraction": "0.4"},
            "llm": {"model": "gpt-4o"},
        }
    )

    assert options.temperature == 0.2
    assert options.emoji is False
    assert options.min_fraction == 0.2
    assert options.max_fraction == 0.4
    assert options.model == "gpt-4o"


def test_options_from_payload_prefers_top_level_model():
    options = options_from_payload({"model": " gpt-4.1-mini ", "llm": {"model": "gpt-4o"}})

    assert options.model == "gpt-4.1-mini"


@pytest.mark.parametrize(
    "payload",
    [
        {"emoji": "sometimes"},
        {"temperature": "hot"},
        {"temperature": 3},
        {"minFraction": 0.5, "maxFraction": 0.2},
        {"maxFraction": 0},
        {"options": "emoji"},
    ],
)
def test_options_from_payload_rejects_invalid_values(payload):
    with pytest.raises(ValueError):
        options_from_payload(payload)


def test_count_from_payload_clamps_and_defaults():
    config = ServiceConfig(max_review_count=50)

    assert count_from_payload({}, 10, config) == 10
    assert count_from_payload({"n": "7"}, 10, config) == 7
    assert count_from_payload({"count": 999}, 10, config) == 50
    assert count_from_payload({"n": -3}, 10, config) == 1
    with pytest.raises(ValueError):
        count_from_payload({"n": "many"}, 10, config)


def test_request_from_payload_requires_summary():
    with pytest.raises(InputMissingError):
        request_from_payload({"n": 3})
    with pytest.raises(InputMissingError):
        request_from_payload({"summary": "   "})

    request = request_from_payload({"summary": " 와인바 ", "n": 3})
    assert request.summary == "와인바"
    assert request.count == 3


def test_resolve_api_key_from_nested_blocks():
    assert resolve_api_key({"llm": {"api_key": "sk-1"}}) == "sk-1"
    assert resolve_api_key({"openai": {"key": "sk-2"}}) == "sk-2"
    assert resolve_api_key({"summary": "x"}) is None


def test_handle_request_missing_summary_returns_400():
    service = FakeService()

    body, status = handle_request({"n": 3}, service=service)

    assert status == 400
    assert body["status"] == "error"
    assert service.requests == []


def test_handle_request_invalid_options_returns_400():
    body, status = handle_request(
        {"summary": "와인바", "minFraction": 0.6, "maxFraction": 0.1},
        service=FakeService(),
    )

    assert status == 400
    assert body["status"] == "error"


@pytest.mark.parametrize(
    "error",
    [
        GenerationFailureError("model unavailable"),
        ExtractionFailureError("bad pdf"),
    ],
)
def test_handle_request_failures_return_generic_500(error):
    body, status = handle_request({"summary": "와인바", "n": 3}, service=FakeService(error=error))

    assert status == 500
    assert body == {"status": "error", "message": GENERIC_FAILURE_MESSAGE}


def test_handle_request_document_without_text_returns_400():
    service = FakeService(error=InputMissingError("no text"))

    body, status = handle_request({}, document=b"%PDF", service=service)

    assert status == 400


def test_handle_request_success_payload():
    service = ReviewGenerationService(
        FakeGenerator("1. 와인이 좋았어요\n2. 직원분이 친절했어요\n3. 또 올게요"),
        rng=random.Random(0),
    )

    body, status = handle_request({"summary": "와인바", "n": 2, "emoji": False}, service=service)

    assert status == 200
    assert body == {
        "status": "success",
        "reviews": ["와인이 좋았어요", "직원분이 친절했어요"],
        "options": {
            "temperature": 0.7,
            "model": "gpt-4o-mini",
            "emoji": False,
            "minFraction": 0.10,
            "maxFraction": 0.15,
        },
    }


def test_handle_request_document_uses_file_defaults():
    service = FakeService()

    body, status = handle_request({"emoji": "true"}, document=b"%PDF", service=service)

    assert status == 200
    assert body["summary"] == "문서 요약"
    assert len(body["reviews"]) == 10
    data, count, options = service.documents[0]
    assert data == b"%PDF"
    assert count == 10
    assert options.emoji is True


def test_handle_request_respects_env_count_limit(monkeypatch):
    monkeypatch.setenv("REVIEW_MAX_COUNT", "4")
    service = FakeService()

    body, status = handle_request({"summary": "와인바", "n": 20}, service=service)

    assert status == 200
    assert service.requests[0].count == 4
