"""Behaviour tests for the directive-to-pages build using pytest-bdd.

These scenarios drive ``pages apply`` and ``pages generate`` end-to-end in a
temporary workspace: a directive is merged into ``site.json`` and the pages
are rendered into ``dist/``. Assertions parse the written HTML with
BeautifulSoup so they do not depend on template whitespace.

Usage
-----
Run ``pytest tests/bdd/test_directive_build.py -v`` or the full suite with
``pytest``. The feature file lives at ``features/directive_build.feature``.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec.json as msgspec_json
import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from buds_pages.cli import apply, generate

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "directive_build.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _soup(state: ScenarioState, filename: str) -> BeautifulSoup:
    html = (state["output_dir"] / filename).read_text(encoding="utf-8")
    return BeautifulSoup(html, "html.parser")


@given("a fresh site workspace")
def given_fresh_workspace(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, scenario_state: ScenarioState
) -> None:
    """Create an empty workspace with no prior ``site.json``."""
    monkeypatch.chdir(tmp_path)
    scenario_state["config_path"] = tmp_path / "site.json"
    scenario_state["output_dir"] = tmp_path / "dist"


@when(parsers.re(r'the directive "(?P<text>.*)" is applied'))
def when_directive_applied(text: str, scenario_state: ScenarioState) -> None:
    """Apply ``text`` as a manual prompt.

    An empty prompt would fall through to the CI event, so the empty case is
    sent as a bare slash-command comment instead.
    """
    if text:
        apply(prompt=text, config=scenario_state["config_path"])
        return
    event_path = scenario_state["config_path"].parent / "event.json"
    event_path.write_text('{"comment": {"body": "/deploy"}}', encoding="utf-8")
    apply(
        config=scenario_state["config_path"],
        event_name="issue_comment",
        event_path=event_path,
    )


@when("the site is generated")
def when_site_generated(scenario_state: ScenarioState) -> None:
    """Render the stored configuration into the output directory."""
    generate(
        config=scenario_state["config_path"],
        output_dir=scenario_state["output_dir"],
    )


@then("the home page contains the FAQ block")
def then_home_has_faq(scenario_state: ScenarioState) -> None:
    soup = _soup(scenario_state, "index.html")
    faq = soup.select_one("main section.faq")
    assert faq is not None, "Expected FAQ section in home page main content"
    assert faq.select("details.faq-item"), "Expected FAQ entries"


@then(parsers.re(r'the home hero uses "(?P<url>[^"]+)" as its background'))
def then_home_hero_background(url: str, scenario_state: ScenarioState) -> None:
    hero = _soup(scenario_state, "index.html").select_one("section.hero")
    assert hero is not None
    style = hero.get("style", "")
    assert f"url('{url}')" in style, f"Expected hero style to use {url}, got {style!r}"


@then(parsers.re(r'no other page references "(?P<url>[^"]+)"'))
def then_other_pages_ignore(url: str, scenario_state: ScenarioState) -> None:
    for path in sorted(scenario_state["output_dir"].glob("*.html")):
        if path.name == "index.html":
            continue
        assert url not in path.read_text(encoding="utf-8"), (
            f"{path.name} unexpectedly references the hero image"
        )


def _service_cards(soup: BeautifulSoup) -> list[tuple[str, str, str]]:
    return [
        (
            card.h3.get_text(strip=True),
            card.p.get_text(strip=True),
            card.select_one(".price").get_text(strip=True),
        )
        for card in soup.select(".service-grid .service-card")
    ]


@then("the services page grid matches the home page grid")
def then_services_match_home(scenario_state: ScenarioState) -> None:
    home = _service_cards(_soup(scenario_state, "index.html"))
    services = _service_cards(_soup(scenario_state, "services.html"))
    assert len(home) == 3
    assert home == services


@then("every page shows 3 service cards or none")
def then_card_counts(scenario_state: ScenarioState) -> None:
    for path in sorted(scenario_state["output_dir"].glob("*.html")):
        soup = BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")
        assert len(soup.select(".service-card")) in {0, 3}, path.name


@then(parsers.re(r'the stored brand is "(?P<brand>[^"]+)"'))
def then_stored_brand(brand: str, scenario_state: ScenarioState) -> None:
    stored = msgspec_json.decode(scenario_state["config_path"].read_bytes())
    assert stored["brand"] == brand
    assert len(stored["services"]) == 3


@then(parsers.re(r'every page header shows the brand "(?P<brand>[^"]+)"'))
def then_headers_show_brand(brand: str, scenario_state: ScenarioState) -> None:
    for path in sorted(scenario_state["output_dir"].glob("*.html")):
        soup = BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")
        assert soup.select_one("header .logo-text").get_text() == brand, path.name
        assert soup.title.get_text().endswith(brand), path.name


@then(parsers.re(r'the first home service card is titled "(?P<title>[^"]+)"'))
def then_first_card(title: str, scenario_state: ScenarioState) -> None:
    cards = _service_cards(_soup(scenario_state, "index.html"))
    assert cards[0] == (title, "Tree trims", "from $60")
    assert cards[1:] == [("Service", "Description", "from $100")] * 2
