from dataclasses import dataclass
from typing import Optional

import pytest

from slugline.slugs import SlugBuilder, SlugStrategy, parameterize, resolve_config
from slugline.slugs.strategy import kebab_case, strip_punctuation

NAME_WITH_UNSAFE_CHARACTERS = "----!@@foo!!!!---bar %  baz------^&*"


@dataclass
class SomeObject:
    name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    slug: Optional[str] = None


def build(record, source="name", strategy=None, **options):
    return SlugBuilder(strategy).build(record, resolve_config(type(record), source, **options))


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Test Schnecke", "test-schnecke"),
        (NAME_WITH_UNSAFE_CHARACTERS, "foo-bar-baz"),
        ("  Leading and trailing  ", "leading-and-trailing"),
        ("Crème Brûlée", "creme-brulee"),
        ("Straße", "strasse"),
        ("Don't «Stop» me now", "dont-stop-me-now"),
        ("snake_case_name", "snakecasename"),
        ("Rock & Roll (Live)", "rock-roll-live"),
        ("already-a-slug", "already-a-slug"),
        ("MIXED Case 42", "mixed-case-42"),
    ],
)
def test_normalization(value, expected):
    assert build(SomeObject(name=value)) == expected


def test_parameterize_with_custom_separator():
    assert parameterize("Hello   World", "_") == "hello_world"
    assert parameterize("__Hello World__", "_") == "hello_world"


def test_strip_punctuation_keeps_dashes():
    assert strip_punctuation("a-b!c?(d)") == "a-bcd"


def test_multiple_sources_join_in_order():
    record = SomeObject(first_name="First", last_name="Last Schnecke")
    assert build(record, ["first_name", "last_name"]) == "first-last-schnecke"
    assert build(record, ["last_name", "first_name"]) == "last-schnecke-first"


def test_multiple_sources_use_separator():
    record = SomeObject(first_name="First", last_name="Last Schnecke")
    assert build(record, ["first_name", "last_name"], separator="_") == "first_last_schnecke"


def test_computed_source():
    record = SomeObject(first_name="Ada", last_name="Lovelace")
    assert build(record, lambda r: f"{r.last_name}, {r.first_name}") == "lovelace-ada"


@pytest.mark.parametrize("value", [None, "", "   ", "!!!?", "()"])
def test_blank_source_falls_back_to_type_name(value):
    assert build(SomeObject(name=value)) == "some-object"


def test_blank_source_without_fallback_returns_empty():
    assert build(SomeObject(name=""), generate_on_blank=False) == ""


def test_blank_fallback_is_configurable():
    assert build(SomeObject(), blank_fallback=lambda r: "untitled") == "untitled"


def test_blank_fallback_is_normalized():
    assert build(SomeObject(), blank_fallback=lambda r: "Untitled Post!") == "untitled-post"


def test_all_blank_sources_join_to_separators():
    record = SomeObject(first_name="", last_name=None)
    assert build(record, ["first_name", "last_name"]) == "-"
    assert build(record, ["first_name", "last_name"], separator="_") == "_"


def test_one_blank_source_among_many_keeps_the_others():
    record = SomeObject(first_name="", last_name="Solo")
    assert build(record, ["first_name", "last_name"]) == "-solo"


@pytest.mark.parametrize(
    "type_name, expected",
    [
        ("SomeObject", "some-object"),
        ("Venue", "venue"),
        ("HTTPServer", "http-server"),
        ("app.models.BlogPost2", "blog-post2"),
    ],
)
def test_kebab_case(type_name, expected):
    assert kebab_case(type_name) == expected


def test_truncates_to_exactly_max_length():
    slug = build(SomeObject(name="A name that is clearly longer than thirty two characters"))
    assert len(slug) == 32
    assert slug == "a-name-that-is-clearly-longer-th"


def test_truncation_can_be_disabled():
    name = "word " * 20
    assert len(build(SomeObject(name=name), limit_length=None)) == len("word-" * 20) - 1


def test_short_limit_truncates_fallback_too():
    assert build(SomeObject(), limit_length=4) == "some"


def test_custom_slugify_keeps_the_choreography():
    class ShoutingStrategy(SlugStrategy):
        def slugify(self, value, config):
            return str(value or "").upper().replace(" ", config.separator)

    record = SomeObject(first_name="a b", last_name="")
    slug = build(record, ["first_name", "last_name"], strategy=ShoutingStrategy(), limit_length=3)
    assert slug == "A-B"
