"""Unit tests for correlation ID management.

Tests the correlation ID context management and structlog processor.
"""

import contextvars
import re
import threading

from ballotflow.infrastructure.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)


class TestGenerateCorrelationId:
    """Tests for generate_correlation_id function."""

    def test_generate_returns_uuid_format(self) -> None:
        correlation_id = generate_correlation_id()

        # UUID4 format: xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx
        uuid_pattern = re.compile(
            r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
            re.IGNORECASE,
        )
        assert uuid_pattern.match(correlation_id) is not None

    def test_generate_returns_unique_ids(self) -> None:
        ids = [generate_correlation_id() for _ in range(100)]
        assert len(set(ids)) == 100


class TestCorrelationIdContext:
    """Tests for correlation ID context management."""

    def test_get_returns_empty_string_when_not_set(self) -> None:
        ctx = contextvars.Context()
        assert ctx.run(get_correlation_id) == ""

    def test_set_and_get_correlation_id(self) -> None:
        def scenario() -> str:
            set_correlation_id("test-correlation-id-123")
            return get_correlation_id()

        assert contextvars.copy_context().run(scenario) == "test-correlation-id-123"

    def test_context_isolation_between_threads(self) -> None:
        """Each request thread sees only its own correlation ID."""
        results: dict[str, str] = {}
        barrier = threading.Barrier(2)

        def handle_request(name: str) -> None:
            set_correlation_id(f"corr-{name}")
            barrier.wait()
            results[name] = get_correlation_id()

        threads = [
            threading.Thread(target=handle_request, args=(name,))
            for name in ("alice", "bob")
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == {"alice": "corr-alice", "bob": "corr-bob"}


class TestCorrelationIdProcessor:
    """Tests for the structlog processor."""

    def test_processor_adds_correlation_id_when_set(self) -> None:
        def scenario() -> dict:
            set_correlation_id("proc-test-id")
            return correlation_id_processor(None, "info", {"event": "vote_cast"})

        result = contextvars.copy_context().run(scenario)

        assert result["correlation_id"] == "proc-test-id"
        assert result["event"] == "vote_cast"

    def test_processor_skips_when_no_correlation_id(self) -> None:
        def scenario() -> dict:
            set_correlation_id("")
            return correlation_id_processor(None, "info", {"event": "vote_cast"})

        result = contextvars.copy_context().run(scenario)

        assert "correlation_id" not in result
