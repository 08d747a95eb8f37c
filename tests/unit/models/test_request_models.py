"""Tests for request and result models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from wipedir.models.request_models import SearchRequest
from wipedir.models.types import DeletionOutcome, DeletionStatus, ForceMode


class TestSearchRequest:
    def test_defaults(self, tmp_path):
        request = SearchRequest(root_path=tmp_path, patterns=["bin"])

        assert request.root_path == tmp_path
        assert request.recursive is False
        assert request.force == ForceMode.OFF

    def test_string_root_coerced_to_path(self, tmp_path):
        request = SearchRequest(root_path=str(tmp_path), patterns=["bin"])

        assert isinstance(request.root_path, Path)

    def test_ten_patterns_accepted(self, tmp_path):
        patterns = [f"p{i}" for i in range(10)]

        assert SearchRequest(root_path=tmp_path, patterns=patterns).patterns == patterns

    def test_eleven_patterns_rejected(self, tmp_path):
        with pytest.raises(ValidationError):
            SearchRequest(root_path=tmp_path, patterns=[f"p{i}" for i in range(11)])

    def test_empty_patterns_rejected(self, tmp_path):
        with pytest.raises(ValidationError):
            SearchRequest(root_path=tmp_path, patterns=[])

    def test_request_is_immutable(self, tmp_path):
        request = SearchRequest(root_path=tmp_path, patterns=["bin"])

        with pytest.raises(ValidationError):
            request.recursive = True


class TestForceMode:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (True, ForceMode.REQUESTED),
            (False, ForceMode.OFF),
            (ForceMode.REQUESTED, ForceMode.REQUESTED),
            (ForceMode.OFF, ForceMode.OFF),
        ],
    )
    def test_from_flag(self, value, expected):
        assert ForceMode.from_flag(value) is expected


class TestDeletionOutcome:
    def test_ok(self):
        outcome = DeletionOutcome.ok("/tmp/a")

        assert outcome.status == DeletionStatus.SUCCEEDED
        assert outcome.succeeded
        assert outcome.reason is None

    def test_failed(self):
        outcome = DeletionOutcome.failed("/tmp/a", "gone")

        assert outcome.status == DeletionStatus.FAILED
        assert not outcome.succeeded
        assert outcome.reason == "gone"
