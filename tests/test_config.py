"""Tests for configuration helpers."""

from __future__ import annotations

import pytest

from qspec2mdx import config
from qspec2mdx.exceptions import ConfigError


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/content/exams/q1.qspec.md", True),
        ("C:\\content\\exams\\q1.qspec.md", True),
        ("/content/exams/q1.md", False),
        ("/content/exams/q1.qspec.mdx", False),
    ],
)
def test_suffix_predicate(path: str, expected: bool) -> None:
    assert config.suffix_predicate(".qspec.md")(path) is expected


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/content/exams/questions/q1.md", True),
        ("questions/q1.md", True),
        ("C:\\exams\\questions\\q1.md", True),
        ("/content/exams/questions-old/q1.md", False),
        ("/content/exams/questions/image.png", False),
    ],
)
def test_directory_predicate(path: str, expected: bool) -> None:
    assert config.directory_predicate("questions")(path) is expected


@pytest.mark.parametrize("factory", [config.suffix_predicate, config.directory_predicate])
def test_empty_predicate_values_are_rejected(factory) -> None:
    with pytest.raises(ConfigError):
        factory("")


def test_default_applicability_prefers_directory(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "QSPEC2MDX_SPEC_DIR", "questions")

    gate = config.default_applicability()

    assert gate("/content/questions/q1.md")
    assert not gate("/content/q1.qspec.md")


def test_default_applicability_uses_suffix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "QSPEC2MDX_SPEC_DIR", None)
    monkeypatch.setattr(config, "QSPEC2MDX_SPEC_SUFFIX", ".quiz.md")

    gate = config.default_applicability()

    assert gate("/content/q1.quiz.md")
    assert not gate("/content/q1.qspec.md")


class TestEnvParsing:
    """Tests for environment value parsing."""

    @pytest.mark.parametrize(("raw", "expected"), [("1", True), ("Yes", True), ("off", False), ("", False)])
    def test_env_bool(self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
        monkeypatch.setenv("QSPEC2MDX_TEST_FLAG", raw)
        assert config._env_bool("QSPEC2MDX_TEST_FLAG", not expected) is expected

    def test_env_bool_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("QSPEC2MDX_TEST_FLAG", raising=False)
        assert config._env_bool("QSPEC2MDX_TEST_FLAG", True) is True

    def test_env_bool_rejects_garbage(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QSPEC2MDX_TEST_FLAG", "maybe")
        with pytest.raises(ConfigError, match="QSPEC2MDX_TEST_FLAG"):
            config._env_bool("QSPEC2MDX_TEST_FLAG", False)

    def test_env_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QSPEC2MDX_TEST_LIST", " Exam , 本試験 ,,")
        assert config._env_list("QSPEC2MDX_TEST_LIST", "x") == ("Exam", "本試験")
