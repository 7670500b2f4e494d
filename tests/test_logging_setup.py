"""Tests for log masking and loguru setup."""

import logging

from loguru import logger

from hockey_pool.config.settings import settings
from hockey_pool.logging.setup import MASK, sensitive_data_filter, setup_logging


class TestSensitiveDataFilter:
    def test_masks_configured_token(self, monkeypatch):
        monkeypatch.setattr(settings, "github_token", "ghp_secretvalue")
        record = {"message": "Fetching with ghp_secretvalue", "extra": {}}
        assert sensitive_data_filter(record) is True
        assert record["message"] == f"Fetching with {MASK}"

    def test_masks_token_like_extra_keys(self):
        record = {"message": "hello", "extra": {"api_token": "abc", "pool": "teams"}}
        sensitive_data_filter(record)
        assert record["extra"] == {"api_token": MASK, "pool": "teams"}


class TestSetupLogging:
    def test_stdlib_logging_is_routed_to_loguru(self):
        setup_logging("DEBUG")
        messages = []
        sink_id = logger.add(lambda message: messages.append(message.record["message"]), level="INFO")
        try:
            logging.getLogger("httpx").info("HTTP Request: GET https://nhl.test")
        finally:
            logger.remove(sink_id)
        assert "HTTP Request: GET https://nhl.test" in messages
