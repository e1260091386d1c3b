"""Tests for slug generation."""

from __future__ import annotations

from tocsmith.slugs import SlugRegistry, plain_text, slugify, strip_markdown_links


class TestSlugify:
    """Tests for slugify function."""

    def test_lowercases_and_hyphenates(self) -> None:
        assert slugify("Parameter Expansion") == "parameter-expansion"

    def test_strips_punctuation(self) -> None:
        assert slugify("Parameter Expansion: ${var:-default}") == "parameter-expansion-var-default"

    def test_keeps_underscores_and_hyphens(self) -> None:
        assert slugify("snake_case and kebab-case") == "snake_case-and-kebab-case"

    def test_keeps_unicode_letters(self) -> None:
        assert slugify("Über Straße") == "über-straße"

    def test_link_reduced_to_label(self) -> None:
        assert slugify("[SWIG](http://www.swig.org) interfaces") == "swig-interfaces"

    def test_inline_html_reduced_to_text(self) -> None:
        assert slugify('<a name="intro"></a>Introduction') == "introduction"

    def test_inline_code_backticks_dropped(self) -> None:
        assert slugify("The `%module` directive") == "the-module-directive"

    def test_angle_brackets_in_code_span_kept(self) -> None:
        assert slugify("The `<file>` operator") == "the-file-operator"

    def test_redirection_in_code_span_keeps_digits(self) -> None:
        assert slugify("Merging streams with `2>&1`") == "merging-streams-with-21"

    def test_entity_in_code_span_is_literal(self) -> None:
        assert slugify("Entity `&amp;` literal") == "entity-amp-literal"

    def test_double_backtick_code_span(self) -> None:
        assert slugify("Using ``<<EOF`` here") == "using-eof-here"

    def test_html_outside_code_span_still_stripped(self) -> None:
        assert slugify('<a name="x"></a>Use `<file>`') == "use-file"

    def test_empty_result_falls_back(self) -> None:
        assert slugify("!!!") == "section"


class TestPlainText:
    """Tests for heading text cleanup."""

    def test_strips_reference_links(self) -> None:
        assert strip_markdown_links("See [the manual][man]") == "See the manual"

    def test_image_links_keep_alt_text(self) -> None:
        assert strip_markdown_links("![logo](logo.png) Notes") == "logo Notes"

    def test_html_entities_decoded(self) -> None:
        assert plain_text("Tom &amp; Jerry") == "Tom & Jerry"


class TestSlugRegistry:
    """Tests for SlugRegistry collision handling."""

    def test_duplicates_get_numeric_suffix(self) -> None:
        registry = SlugRegistry()
        assert [registry.claim("foo") for _ in range(3)] == ["foo", "foo-1", "foo-2"]

    def test_skips_suffix_already_taken(self) -> None:
        registry = SlugRegistry()
        assert registry.claim("foo-1") == "foo-1"
        assert registry.claim("foo") == "foo"
        assert registry.claim("foo") == "foo-2"

    def test_suffixed_duplicate_of_generated_slug(self) -> None:
        registry = SlugRegistry()
        registry.claim("foo")
        assert registry.claim("foo") == "foo-1"
        assert registry.claim("foo-1") == "foo-1-1"

    def test_independent_registries(self) -> None:
        assert SlugRegistry().claim("foo") == SlugRegistry().claim("foo") == "foo"
