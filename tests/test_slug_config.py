import re
from dataclasses import dataclass
from typing import Optional

import pytest

from slugline.slugs import ConfigurationError, SlugBuilder, resolve_config
from slugline.slugs.config import DEFAULT_MAX_LENGTH, DEFAULT_REQUIRED_FORMAT


@dataclass
class Person:
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    team_id: Optional[int] = None
    slug: Optional[str] = None
    handle: Optional[str] = None

    def display_name(self):
        return f"{self.first_name} {self.last_name}"

    @property
    def initials(self):
        return "".join(part[:1] for part in (self.first_name, self.last_name) if part)


def test_defaults():
    config = resolve_config(Person, "first_name")

    assert config.record_type is Person
    assert config.source_names == ("first_name",)
    assert config.target_field == "slug"
    assert config.separator == "-"
    assert config.max_length == DEFAULT_MAX_LENGTH == 32
    assert config.required is True
    assert config.required_format.pattern == DEFAULT_REQUIRED_FORMAT.pattern
    assert config.generate_on_blank is True
    assert config.blank_fallback is None
    assert config.uniqueness_scope == ()


def test_static_options_are_mapped():
    config = resolve_config(
        Person,
        ["first_name", "last_name"],
        column="handle",
        separator="_",
        limit_length=None,
        required=False,
        generate_on_blank=False,
        require_format=r"^[a-z_]+$",
        uniqueness={"scope": "team_id"},
    )

    assert config.source_names == ("first_name", "last_name")
    assert config.target_field == "handle"
    assert config.separator == "_"
    assert config.max_length is None
    assert config.required is False
    assert config.generate_on_blank is False
    assert isinstance(config.required_format, re.Pattern)
    assert config.required_format.pattern == r"^[a-z_]+$"
    assert config.uniqueness_scope == ("team_id",)


def test_methods_properties_and_callables_are_valid_sources():
    config = resolve_config(Person, ["display_name", "initials", lambda p: p.team_id])
    person = Person(first_name="Ada", last_name="Lovelace", team_id=7)

    assert [source.read(person) for source in config.sources] == ["Ada Lovelace", "AL", 7]


def test_config_is_immutable():
    config = resolve_config(Person, "first_name")
    with pytest.raises(Exception):
        config.separator = "_"


def test_missing_source_raises():
    with pytest.raises(ConfigurationError, match="Source 'nickname' does not exist"):
        resolve_config(Person, "nickname")


def test_empty_source_list_raises():
    with pytest.raises(ConfigurationError):
        resolve_config(Person, [])


def test_missing_column_raises():
    with pytest.raises(ConfigurationError, match="Slug column 'permalink' does not exist"):
        resolve_config(Person, "first_name", column="permalink")


def test_read_only_column_raises():
    with pytest.raises(ConfigurationError, match="Slug column 'initials'"):
        resolve_config(Person, "first_name", column="initials")


def test_method_column_raises():
    with pytest.raises(ConfigurationError):
        resolve_config(Person, "first_name", column="display_name")


def test_uniqueness_conditions_are_rejected():
    with pytest.raises(ConfigurationError, match="conditions"):
        resolve_config(Person, "first_name", uniqueness={"conditions": "active = 1"})


def test_unknown_scope_attribute_raises():
    with pytest.raises(ConfigurationError, match="Uniqueness scope 'org_id'"):
        resolve_config(Person, "first_name", uniqueness={"scope": ["org_id"]})


@pytest.mark.parametrize(
    "options",
    [
        {"limit_length": 0},
        {"limit_length": -4},
        {"colum": "slug"},
        {"require_format": "[unclosed"},
        {"uniqueness": {"scope": ["team_id"], "case_sensitive": False}},
    ],
)
def test_malformed_options_raise(options):
    with pytest.raises(ConfigurationError):
        resolve_config(Person, "first_name", **options)


class PlainRecord:
    def __init__(self, name=None):
        self.name = name
        self.slug = None


def test_plain_class_attributes_are_checked_per_record():
    config = resolve_config(PlainRecord, "name", uniqueness={"scope": ["section"]})
    assert config.check_on_use is True

    record = PlainRecord("Plain Record")
    with pytest.raises(ConfigurationError, match="Uniqueness scope 'section' does not exist on PlainRecord"):
        SlugBuilder().build(record, config)

    record.section = "docs"
    assert SlugBuilder().build(record, config) == "plain-record"


def test_plain_class_with_missing_source_fails_on_build():
    config = resolve_config(PlainRecord, "nickname")
    with pytest.raises(ConfigurationError, match="Source 'nickname' does not exist on PlainRecord"):
        SlugBuilder().build(PlainRecord("x"), config)


def test_declared_types_are_checked_up_front():
    assert resolve_config(Person, "first_name").check_on_use is False
