"""Tests for the default stylesheet."""

from queryhl.lexer.tokens import TokenType
from queryhl.render.styles import DEFAULT_STYLES, PREVIEW_CLASS, stylesheet


class TestStylesheet:
    def test_every_type_has_a_default(self):
        assert set(DEFAULT_STYLES) == set(TokenType)

    def test_rule_per_type(self):
        css = stylesheet()
        for token_type in TokenType:
            assert f".token-{token_type.value} {{" in css

    def test_preview_container_preserves_whitespace(self):
        css = stylesheet()
        assert f".{PREVIEW_CLASS} {{" in css
        assert "white-space: pre-wrap" in css

    def test_custom_prefix(self):
        css = stylesheet(class_prefix="q-")
        assert ".q-key {" in css
        assert ".token-key" not in css

    def test_override_single_type(self):
        css = stylesheet(styles={TokenType.KEY: "color: red;"})
        assert ".token-key { color: red; }" in css
        assert f".token-equals {{ {DEFAULT_STYLES[TokenType.EQUALS]} }}" in css
