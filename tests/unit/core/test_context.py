"""Tests for context creation."""

from pathlib import Path

import pytest

from pluginwatch.core.context import PluginWatchContext, create_context
from pluginwatch.core.http.real import RealHttpClient
from pluginwatch.core.time.real import RealTime
from pluginwatch.core.user_feedback import InteractiveFeedback, SuppressedFeedback
from tests.fakes.user_feedback import FakeUserFeedback


def test_create_context_reads_project_config(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("PLUGINWATCH_TIMEOUT", raising=False)
    (tmp_path / "pyproject.toml").write_text(
        "[tool.pluginwatch]\ntimeout_seconds = 4\n", encoding="utf-8"
    )

    ctx = create_context(cwd=tmp_path)

    assert ctx.cwd == tmp_path
    assert ctx.config.timeout_seconds == 4.0
    assert isinstance(ctx.http, RealHttpClient)
    assert isinstance(ctx.time, RealTime)
    assert isinstance(ctx.feedback, InteractiveFeedback)


def test_create_context_quiet_suppresses_feedback(tmp_path: Path) -> None:
    ctx = create_context(quiet=True, cwd=tmp_path)
    assert isinstance(ctx.feedback, SuppressedFeedback)


def test_create_context_rejects_invalid_config(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.pluginwatch]\nmirror_prefx = "x/"\n', encoding="utf-8"
    )

    with pytest.raises(ValueError, match="mirror_prefx"):
        create_context(cwd=tmp_path)


def test_with_feedback_keeps_other_dependencies() -> None:
    ctx = PluginWatchContext.for_test()
    feedback = FakeUserFeedback()

    swapped = ctx.with_feedback(feedback)

    assert swapped.feedback is feedback
    assert swapped.http is ctx.http
    assert swapped.config == ctx.config


def test_new_checker_starts_with_empty_cache() -> None:
    ctx = PluginWatchContext.for_test()
    assert ctx.new_checker().cached_platform_version is None
