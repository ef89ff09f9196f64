"""Tests for HTML document parsing."""

from unittest.mock import patch

import pytest
from bs4 import ParserRejectedMarkup

from readit_core.errors import DecodeError, MalformedMarkup
from readit_core.parsing.document import parse_document


def test_parse_document_supports_css_selectors():
    document = parse_document('<div class="a"><span class="b">hello</span></div>'.encode("utf-8"))
    assert document.select_one("div.a span.b").get_text() == "hello"


def test_parse_document_decodes_utf8():
    document = parse_document("<title>카페 ☕</title>".encode("utf-8"))
    assert document.title.get_text() == "카페 ☕"


def test_partially_malformed_html_still_parses():
    document = parse_document(b"<div class='x'><p>unclosed <b>tags</div><span class='y'>ok")
    assert document.select_one("span.y").get_text() == "ok"


def test_invalid_utf8_raises_decode_error():
    with pytest.raises(DecodeError):
        parse_document(b"<html>\xff\xfe\xfa</html>")


def test_rejected_markup_raises_malformed_markup():
    with patch("readit_core.parsing.document.BeautifulSoup", side_effect=ParserRejectedMarkup("boom")):
        with pytest.raises(MalformedMarkup):
            parse_document(b"<html></html>")
