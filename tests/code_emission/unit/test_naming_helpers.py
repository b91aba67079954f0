"""Naming helper tests."""

from __future__ import annotations

import pytest
from ecs_fieldgen.code_emission.naming_helpers import COMMENT_TEXT_WIDTH, go_comment, go_type_name


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("ephemeral_id", "EphemeralID"),
        ("host.ip", "HostIP"),
        ("@timestamp", "Timestamp"),
        ("process.ppid", "ProcessPPID"),
        ("url.original", "URLOriginal"),
        ("host.os.family", "HostOSFamily"),
        ("geo.location", "GeoLocation"),
        ("dns.question.ttl", "DNSQuestionTTL"),
        ("tls.client_hash", "TLSClientHash"),
        ("Already", "Already"),
    ],
)
def test_go_type_name(name: str, expected: str) -> None:
    assert go_type_name(name) == expected


def test_go_type_name_ignores_repeated_separators() -> None:
    assert go_type_name("a..b__c") == "ABC"
    assert go_type_name("") == ""


def test_go_comment_folds_line_breaks_into_one_paragraph() -> None:
    assert go_comment("Process id.\nUnique per host.\n") == "// Process id. Unique per host."


def test_go_comment_wraps_long_text() -> None:
    text = " ".join(["word"] * 40)

    lines = go_comment(text).split("\n")

    assert len(lines) > 1
    for line in lines:
        assert line.startswith("// ")
        assert len(line) <= COMMENT_TEXT_WIDTH + len("// ")
    assert " ".join(line[3:] for line in lines) == text


def test_go_comment_keeps_long_words_whole() -> None:
    url = "https://example.com/" + "x" * 100

    assert go_comment(f"See {url}") == f"// See\n// {url}"


def test_go_comment_drops_blank_lines_and_empty_text() -> None:
    assert go_comment("\n\n  Trimmed.  \n\n") == "// Trimmed."
    assert go_comment("") == ""
    assert go_comment("\n \n") == ""


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("user-agent", "User-Agent"),
        ("x509.not-after", "X509Not-After"),
        ("mime:type", "Mime:Type"),
        ("ipv6", "Ipv6"),
    ],
)
def test_go_type_name_capitalizes_after_intra_word_punctuation(name: str, expected: str) -> None:
    assert go_type_name(name) == expected
