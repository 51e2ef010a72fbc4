"""
Tests for ReviewGenerationAgent (end-to-end pipeline).

The logging and monitoring collaborators are mocked so the tests can
assert on the events the pipeline emits.
"""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import ANY, Mock

import pytest

from src.agents.composition import CLOSING_PHRASES, IndexedPhraseSelector
from src.models.agent_config import AgentConfiguration
from src.models.review_request import ReviewRequest
from src.orchestrator import ReviewGenerationAgent


@pytest.fixture
def mock_logger():
    return Mock()


@pytest.fixture
def agent(mock_logger):
    config = AgentConfiguration(hotel_name="Test Hotel", max_comment_length=200)
    return ReviewGenerationAgent(config=config, logger=mock_logger)


def test_generate_with_valid_input(agent):
    """Test the full scenario from the guest feedback form."""
    request = ReviewRequest(
        features=["excellent customer service", "clean rooms"],
        staff="Sarah",
        comments="Great experience overall",
        platform="booking"
    )

    result = agent.generate(request)

    assert result.success is True
    for fragment in ["Test Hotel", "excellent customer service", "clean rooms",
                     "Sarah", "Great experience overall"]:
        assert fragment in result.review
    assert any(result.review.endswith(phrase) for phrase in CLOSING_PHRASES)
    assert result.confidence == pytest.approx(0.8)
    assert result.quality_score == pytest.approx(1.0)


def test_generate_accepts_dict_request(agent):
    result = agent.generate({
        "features": ["excellent customer service"],
        "staff": "",
        "comments": "",
        "platform": "direct"
    })

    assert result.success is True
    assert "Test Hotel" in result.review
    assert "excellent customer service" in result.review
    assert "exceptional" in result.review


def test_metadata(agent):
    result = agent.generate(ReviewRequest(
        features=["excellent customer service", "clean rooms", "friendly staff"],
        staff="Prefer not to mention",
        comments="",
        platform="google"
    ))

    metadata = result.metadata
    assert metadata["feature_count"] == 3
    assert metadata["has_staff_mention"] is False
    assert metadata["has_comments"] is False
    assert metadata["platform"] == "google"
    assert metadata["character_limit"] == 4096
    assert metadata["categories"] == {"service": 12, "accommodation": 5}
    assert metadata["word_count"] == len(result.review.split())
    assert metadata["sentence_count"] == 3
    assert metadata["generated_at"].endswith("Z")


def test_feature_narrative_shapes(agent):
    two = agent.generate(ReviewRequest(features=["pool", "spa"]))
    four = agent.generate(ReviewRequest(features=["service", "location", "rooms", "dining"]))

    assert "pool and spa were outstanding" in two.review
    assert "service, location, rooms" in four.review
    assert "dining was particularly impressive" in four.review


@pytest.mark.parametrize("request_data", [
    {"features": [], "staff": "", "comments": "", "platform": "booking"},
    {"features": [], "staff": "John", "comments": "   \n ", "platform": "booking"},
    {"features": None, "comments": None},
    {},
    None,
])
def test_insufficient_input_returns_fallback(agent, mock_logger, request_data):
    result = agent.generate(request_data)

    assert result.success is False
    assert "Insufficient input" in result.error
    assert result.error_kind == "InsufficientInput"
    assert result.failed_stage == "validated"
    assert result.fallback
    assert "Test Hotel" in result.fallback
    assert 0.0 <= result.confidence <= 1.0
    assert 0.0 <= result.quality_score <= 1.0
    mock_logger.warn.assert_called_once()


def test_internal_error_is_converted(agent, mock_logger):
    """Test unexpected faults never escape the agent."""
    agent.categorizer.categorize = Mock(side_effect=RuntimeError("table corrupted"))

    result = agent.generate(ReviewRequest(features=["service"]))

    assert result.success is False
    assert result.error_kind == "InternalCompositionError"
    assert "table corrupted" in result.error
    assert result.failed_stage == "features_analyzed"
    assert "Test Hotel" in result.fallback
    mock_logger.error.assert_called_once_with("Review generation failed", ANY)


def test_logs_after_categorization_and_quality(agent, mock_logger):
    agent.generate(ReviewRequest(features=["clean rooms"], staff="Ana", comments="Lovely"))

    mock_logger.info.assert_any_call("Processing review request", ANY)
    mock_logger.debug.assert_any_call("Features analyzed", ANY)
    mock_logger.debug.assert_any_call("Staff recognition processed", {"staff_member": "Ana"})
    mock_logger.debug.assert_any_call("Quality evaluation completed", ANY)
    mock_logger.error.assert_not_called()


def test_review_respects_platform_limit(mock_logger):
    config = AgentConfiguration(hotel_name="Test Hotel", platform_limits={"booking": 120})
    agent = ReviewGenerationAgent(config=config, logger=mock_logger)

    result = agent.generate(ReviewRequest(
        features=["clean rooms"],
        comments="The view from the balcony was lovely every single morning. " * 10,
        platform="booking"
    ))

    assert result.success is True
    assert len(result.review) <= 120


def test_confidence_is_clamped(agent):
    features = [f"highlight {i}" for i in range(10)]

    result = agent.generate(ReviewRequest(features=features, staff="Sarah", comments="Nice"))

    assert result.confidence == 1.0


def test_state_does_not_leak_between_requests(agent):
    first = agent.generate(ReviewRequest(features=["pool", "spa", "gym"], staff="Sarah"))
    second = agent.generate(ReviewRequest(features=["pool"]))

    assert first.confidence == pytest.approx(0.75)
    assert second.confidence == pytest.approx(0.2)
    assert "Sarah" not in second.review


def test_concurrent_requests_are_independent(agent):
    requests = [
        ReviewRequest(features=[f"feature {i}"], staff=f"Staff{i}", platform="booking")
        for i in range(20)
    ]
    expected = [agent.generate(r).review for r in requests]

    with ThreadPoolExecutor(max_workers=8) as pool:
        actual = [r.review for r in pool.map(agent.generate, requests)]

    assert actual == expected


def test_deterministic_by_default(agent):
    request = ReviewRequest(features=["pool"], staff="Sarah", comments="Lovely")

    assert agent.generate(request).review == agent.generate(request).review
    assert "Special thanks to Sarah for exceptional service." in agent.generate(request).review


def test_injected_selector(mock_logger):
    agent = ReviewGenerationAgent(
        config=AgentConfiguration(hotel_name="Test Hotel"),
        logger=mock_logger,
        selector=IndexedPhraseSelector(3)
    )

    result = agent.generate(ReviewRequest(features=["pool"], staff="Sarah"))

    assert result.review.endswith("Five stars!")
    assert "Sarah provided outstanding customer service" in result.review


def test_monitor_receives_review_generated(mock_logger):
    monitor = Mock()
    agent = ReviewGenerationAgent(
        config=AgentConfiguration(hotel_name="Test Hotel"),
        logger=mock_logger,
        monitor=monitor
    )

    agent.generate(ReviewRequest(features=["pool"], platform="expedia"))
    agent.generate(ReviewRequest())

    monitor.track.assert_called_once_with("review_generated", {
        "platform": "expedia",
        "feature_count": 1,
        "quality_score": ANY
    })


def test_monitor_failure_does_not_fail_generation(mock_logger):
    monitor = Mock()
    monitor.track.side_effect = ConnectionError("monitoring down")
    agent = ReviewGenerationAgent(
        config=AgentConfiguration(hotel_name="Test Hotel"),
        logger=mock_logger,
        monitor=monitor
    )

    result = agent.generate(ReviewRequest(features=["pool"]))

    assert result.success is True
    mock_logger.warn.assert_called_once_with("Monitoring event dropped", ANY)


def test_default_logger_uses_standard_logging(caplog):
    agent = ReviewGenerationAgent(config=AgentConfiguration(hotel_name="Test Hotel"))

    with caplog.at_level("INFO", logger="src.orchestrator"):
        agent.generate(ReviewRequest(features=["pool"]))

    assert any("Natural language review generated" in r.getMessage() for r in caplog.records)
