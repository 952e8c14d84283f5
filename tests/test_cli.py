"""Tests for the ``pages`` CLI commands.

Command functions are called directly with explicit arguments, and the
``pages`` app is invoked in-process to cover option parsing and the
environment variable fallbacks. Everything runs in a temporary working
directory, so no repository files are touched.
"""

from __future__ import annotations

import json
from pathlib import Path

import msgspec.json as msgspec_json
import pytest

from buds_pages.cli import app, apply, build, generate


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    for name in ("GITHUB_EVENT_NAME", "GITHUB_EVENT_PATH", "GITHUB_STEP_SUMMARY"):
        monkeypatch.delenv(name, raising=False)
    for name in ("INPUT_PROMPT", "INPUT_CONFIG", "INPUT_SETTINGS", "INPUT_OUTPUT_DIR"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


def test_apply_prompt_writes_config(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    apply(prompt="rename brand to River Care; coral")
    stored = msgspec_json.decode((workspace / "site.json").read_bytes())
    assert stored["brand"] == "River Care"
    assert stored["colors"] == {"accent": "#ef5350"}
    assert capsys.readouterr().out.strip() == "wrote site.json"


def test_apply_reports_unchanged(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    apply(prompt="coral")
    capsys.readouterr()
    apply(prompt="coral")
    assert capsys.readouterr().out.strip() == "unchanged site.json"


def test_apply_skips_without_directive(
    workspace: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    apply(event_name="push")
    assert not (workspace / "site.json").exists()
    assert "skipped" in capsys.readouterr().out


def test_apply_workflow_dispatch_event(workspace: Path) -> None:
    event_path = workspace / "event.json"
    event_path.write_text(json.dumps({"inputs": {"prompt": "add gallery"}}), encoding="utf-8")
    summary = workspace / "summary.md"
    apply(event_name="workflow_dispatch", event_path=event_path, summary=summary)
    stored = msgspec_json.decode((workspace / "site.json").read_bytes())
    assert stored["features"] == {"gallery": True}
    assert "add gallery" in summary.read_text(encoding="utf-8")


def test_generate_writes_pages(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    summary = workspace / "summary.md"
    generate(output_dir=Path("out"), summary=summary)
    names = sorted(path.name for path in (workspace / "out").iterdir())
    assert names == [
        "about.html",
        "cart.html",
        "get-involved.html",
        "index.html",
        "services.html",
        "shop.html",
    ]
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "wrote out/index.html"
    assert summary.read_text(encoding="utf-8") == (
        "\n**Built pages:** index, about, services, shop, get-involved, cart\n"
    )


def test_generate_is_repeatable(workspace: Path) -> None:
    apply(prompt="purple; add faq")
    generate()
    first = {path.name: path.read_text(encoding="utf-8") for path in (workspace / "dist").iterdir()}
    generate()
    second = {path.name: path.read_text(encoding="utf-8") for path in (workspace / "dist").iterdir()}
    assert first == second


def test_settings_file_is_honoured(workspace: Path) -> None:
    settings = workspace / "config" / "site.yaml"
    settings.parent.mkdir()
    settings.write_text(
        "site_config: data/site.json\noutput_dir: public\ncommands: [site]\n",
        encoding="utf-8",
    )
    event_path = workspace / "event.json"
    event_path.write_text(json.dumps({"comment": {"body": "/site green"}}), encoding="utf-8")

    apply(event_name="issue_comment", event_path=event_path)
    generate()

    stored = msgspec_json.decode((workspace / "data" / "site.json").read_bytes())
    assert stored["colors"]["primary"] == "#0f3d2e"
    assert (workspace / "public" / "index.html").exists()


def test_build_applies_then_generates(workspace: Path) -> None:
    build(prompt="add faq", output_dir=Path("site"))
    assert (workspace / "site.json").exists()
    assert "Frequently Asked Questions" in (workspace / "site" / "index.html").read_text(
        encoding="utf-8"
    )


def _invoke(*tokens: str) -> None:
    """Run the ``pages`` app in-process, tolerating a clean exit."""
    try:
        app(list(tokens), exit_on_error=False)
    except SystemExit as exc:
        if exc.code not in (0, None):
            raise


def test_app_build_reads_input_environment(
    workspace: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("INPUT_PROMPT", "purple; add faq")
    monkeypatch.setenv("INPUT_OUTPUT_DIR", "public")
    _invoke("build")

    stored = msgspec_json.decode((workspace / "site.json").read_bytes())
    assert stored["colors"] == {"primary": "#6A1B9A"}
    assert stored["features"] == {"faq": True}
    assert len(list((workspace / "public").glob("*.html"))) == 6


def test_app_apply_reads_github_event(
    workspace: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    event_path = workspace / "event.json"
    event_path.write_text(
        json.dumps({"comment": {"body": "/design rename brand to Hill Co"}}),
        encoding="utf-8",
    )
    summary = workspace / "summary.md"
    monkeypatch.setenv("GITHUB_EVENT_NAME", "issue_comment")
    monkeypatch.setenv("GITHUB_EVENT_PATH", str(event_path))
    monkeypatch.setenv("GITHUB_STEP_SUMMARY", str(summary))
    _invoke("apply")

    stored = msgspec_json.decode((workspace / "site.json").read_bytes())
    assert stored["brand"] == "Hill Co"
    assert "**Applied prompt to site.json**" in summary.read_text(encoding="utf-8")


def test_app_apply_skips_unsupported_event(
    workspace: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("GITHUB_EVENT_NAME", "push")
    _invoke("apply")
    assert capsys.readouterr().out.strip() == "skipped: no directive in trigger"
    assert not (workspace / "site.json").exists()


def test_app_command_line_overrides_environment(
    workspace: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("INPUT_PROMPT", "green")
    _invoke("apply", "--prompt", "coral", "--config", "data/site.json")
    stored = msgspec_json.decode((workspace / "data" / "site.json").read_bytes())
    assert stored["colors"] == {"accent": "#ef5350"}
