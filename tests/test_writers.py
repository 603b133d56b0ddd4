"""Unit tests for dalia.core.writers module."""

import yaml

from dalia.core.parser import parse
from dalia.core.writers import extract_cd_targets, render, render_alias, render_yaml
from dalia.model import AliasDefinition


EXPECTED_DOCUMENTED_OUTPUT = """alias workspace='cd ~/Documents/workspace'
alias desktop='cd ~/Desktop'
alias icloud='cd ~/Library/Mobile\\ Documents/com~apple~CloudDocs'
alias music='cd /Users/johnappleseed/Music'
alias photos='cd /Users/johnappleseed/Pictures'"""


def test_render_alias():
    assert render_alias(AliasDefinition("path", "/some/path")) == "alias path='cd /some/path'"


def test_render_empty():
    assert render([]) == ""


def test_render_keeps_order_and_duplicates():
    text = render([AliasDefinition("b", "/2"), AliasDefinition("a", "/1"), AliasDefinition("b", "/3")])
    assert text.splitlines() == [
        "alias b='cd /2'",
        "alias a='cd /1'",
        "alias b='cd /3'",
    ]


def test_render_does_not_escape_single_quotes():
    # Known limitation: the quote ends up unbalanced in the shell.
    assert render_alias(AliasDefinition("x", "/it's")) == "alias x='cd /it's'"


def test_documented_example_end_to_end():
    config = (
        "[workspace]~/Documents/workspace\n"
        "~/Desktop\n"
        "[icloud]~/Library/Mobile\\ Documents/com~apple~CloudDocs\n"
        "/Users/johnappleseed/Music\n"
        "[photos] /Users/johnappleseed/Pictures\n"
    )
    assert render(parse(config).aliases) == EXPECTED_DOCUMENTED_OUTPUT


def test_round_trip_cd_targets():
    definitions = [
        AliasDefinition("workspace", "~/Documents/workspace"),
        AliasDefinition("icloud", "~/Library/Mobile\\ Documents/com~apple~CloudDocs"),
        AliasDefinition("root", "/"),
    ]
    assert extract_cd_targets(render(definitions)) == [d.path for d in definitions]


def test_extract_ignores_other_lines():
    assert extract_cd_targets("# comment\nalias ll='ls -l'\nalias x='cd /x'\n") == ["/x"]


def test_render_yaml_last_definition_wins():
    text = render_yaml([AliasDefinition("a", "/first"), AliasDefinition("b", "~/b"), AliasDefinition("a", "/second")])
    data = yaml.safe_load(text)
    assert data == {"a": "/second", "b": "~/b"}
    assert list(data) == ["a", "b"]


def test_render_yaml_keeps_backslashes():
    text = render_yaml([AliasDefinition("icloud", "~/Mobile\\ Documents")])
    assert yaml.safe_load(text) == {"icloud": "~/Mobile\\ Documents"}
