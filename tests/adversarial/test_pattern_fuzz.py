"""Adversarial tests — odd pattern strings must never crash the filter.

Any string is a valid pattern: either it has the classifier shape or it is
a plain pattern.  Regex metacharacters are literal and only ``*`` is a
wildcard.
"""

from __future__ import annotations

import pytest

from ease.core.artifact_filter import ExcludeFilter, IncludeFilter
from ease.core.patterns import CoordinatePattern

ODD_PATTERNS = [
    "",
    ":",
    "::",
    ":::",
    "::::",
    ":::::",
    "*",
    "**",
    "*:*:*:*",
    "(",
    "[a-z]+",
    "a|b",
    "^org$",
    "\\",
    "org.example:core:jar:sources:1.0:::",
]


class TestPatternFuzz:
    @pytest.mark.parametrize("text", ODD_PATTERNS)
    def test_parse_never_raises(self, text):
        CoordinatePattern.parse(text)

    @pytest.mark.parametrize("text", ODD_PATTERNS)
    def test_filter_query_never_raises(self, text, make_coordinate):
        for f in (IncludeFilter([text]), ExcludeFilter([text])):
            f.include(make_coordinate())
            f.include(make_coordinate(classifier="sources"))

    @pytest.mark.parametrize("text", ["(", "[a-z]+", "a|b", "^org$", "\\"])
    def test_metacharacters_are_literal(self, text, make_coordinate):
        f = IncludeFilter([text])
        assert f.include(make_coordinate(group_id="org")) is False
        assert f.include(make_coordinate(group_id=text)) is True

    def test_double_star(self, make_coordinate):
        assert IncludeFilter(["**"]).include(make_coordinate())

    def test_empty_pattern_matches_everything(self, make_coordinate):
        assert IncludeFilter([""]).include(make_coordinate(classifier="x"))
        assert ExcludeFilter([""]).include(make_coordinate()) is False

    def test_version_client_vs_classifier_client(self, make_coordinate):
        by_version = IncludeFilter([":::client"])
        by_classifier = IncludeFilter([":::client:"])
        client_jar = make_coordinate(classifier="client")
        assert by_classifier.include(client_jar)
        assert not by_version.include(client_jar)
        assert by_version.include(make_coordinate(version="client"))
