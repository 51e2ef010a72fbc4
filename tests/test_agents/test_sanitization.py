"""
Unit tests for Comment Sanitizer.
"""

import pytest

from src.agents.sanitization import CommentSanitizer


@pytest.fixture
def sanitizer():
    return CommentSanitizer()


def test_empty_comments(sanitizer):
    assert sanitizer.sanitize("") == ""
    assert sanitizer.sanitize("   \n ") == ""
    assert sanitizer.sanitize(None) == ""


def test_plain_comments_unchanged(sanitizer):
    comments = "The hotel exceeded my expectations in every way!"

    assert sanitizer.sanitize(comments) == comments


def test_whitespace_normalized(sanitizer):
    comments = "  Multiple   spaces   and  \n\n newlines  "

    assert sanitizer.sanitize(comments) == "Multiple spaces and newlines"


def test_script_removed_with_content(sanitizer):
    comments = 'Great stay! <script>alert("xss")</script>'

    cleaned = sanitizer.sanitize(comments)

    assert cleaned == "Great stay!"
    assert "<script>" not in cleaned
    assert "</script>" not in cleaned
    assert "alert" not in cleaned


def test_markup_tags_stripped_content_kept(sanitizer):
    comments = "<p>Loved the <b>rooftop</b> pool</p><br>Would return"

    cleaned = sanitizer.sanitize(comments)

    assert cleaned == "Loved the rooftop pool Would return"


def test_style_and_iframe_removed(sanitizer):
    comments = "<style>body {color: red}</style>Nice<iframe src='x'>frame</iframe> view"

    assert sanitizer.sanitize(comments) == "Nice view"


def test_encoded_markup_does_not_survive(sanitizer):
    comments = "&lt;script&gt;alert(1)&lt;/script&gt; Lovely staff"

    cleaned = sanitizer.sanitize(comments)

    assert "<" not in cleaned
    assert ">" not in cleaned
    assert cleaned.endswith("Lovely staff")


def test_entities_decoded(sanitizer):
    assert sanitizer.sanitize("Tom &amp; Jerry suite") == "Tom & Jerry suite"


@pytest.mark.parametrize("comments", [
    "Great stay! <script>alert('xss')</script>",
    "  Multiple   spaces \t and \n newlines ",
    "&amp;lt;b&amp;gt;bold&amp;lt;/b&amp;gt;",
    "<div><p>Nested <i>tags</i></p></div>",
    "Visit www.example.com again",
    "Plain text.",
])
def test_sanitize_is_idempotent(sanitizer, comments):
    once = sanitizer.sanitize(comments)

    assert sanitizer.sanitize(once) == once
