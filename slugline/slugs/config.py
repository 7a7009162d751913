import inspect
import logging
import re
from types import FunctionType
from typing import Any, Callable, List, Optional, Sequence, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from slugline.slugs.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SLUG_COLUMN = "slug"
DEFAULT_SLUG_SEPARATOR = "-"
DEFAULT_MAX_LENGTH = 32
DEFAULT_REQUIRED_FORMAT = re.compile(r"\A[a-z0-9\-_]+\Z")

SourceSpec = Union[str, Callable[[Any], Any]]


class SlugSource:
    """
    One attribute feeding the slug.

    Wraps either an attribute name (a stored column, a property or a
    zero-argument method) or a callable taking the record, so computed values
    read the same way as stored ones.
    """

    def __init__(self, name: str, reader: Optional[Callable[[Any], Any]] = None):
        self.name = name
        self._reader = reader

    def read(self, record: Any) -> Any:
        if self._reader is not None:
            return self._reader(record)
        value = getattr(record, self.name)
        if callable(value):
            value = value()
        return value

    @property
    def is_named(self) -> bool:
        return self._reader is None

    def __repr__(self) -> str:
        return f"SlugSource({self.name!r})"


# ---------------------------------------------------------------------------
# Raw options
# ---------------------------------------------------------------------------


class UniquenessOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    scope: List[str] = Field(default_factory=list)

    @field_validator("scope", mode="before")
    @classmethod
    def _listify(cls, value):
        if isinstance(value, str):
            return [value]
        return value


class SlugOptions(BaseModel):
    """The static options structure accepted by `resolve_config`."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    column: str = DEFAULT_SLUG_COLUMN
    separator: str = DEFAULT_SLUG_SEPARATOR
    limit_length: Optional[int] = Field(DEFAULT_MAX_LENGTH, gt=0)
    required: bool = True
    generate_on_blank: bool = True
    require_format: Optional[re.Pattern] = DEFAULT_REQUIRED_FORMAT
    uniqueness: UniquenessOptions = Field(default_factory=UniquenessOptions)
    blank_fallback: Optional[Callable[[Any], str]] = None


# ---------------------------------------------------------------------------
# Resolved configuration
# ---------------------------------------------------------------------------


class SlugConfig(BaseModel):
    """Immutable slug settings shared by every record of one type."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    record_type: Type[Any]
    sources: Tuple[SlugSource, ...]
    target_field: str = DEFAULT_SLUG_COLUMN
    separator: str = DEFAULT_SLUG_SEPARATOR
    max_length: Optional[int] = DEFAULT_MAX_LENGTH
    required: bool = True
    required_format: Optional[re.Pattern] = DEFAULT_REQUIRED_FORMAT
    generate_on_blank: bool = True
    blank_fallback: Optional[Callable[[Any], str]] = None
    uniqueness_scope: Tuple[str, ...] = ()
    # Names are checked on each record rather than on the type
    check_on_use: bool = False

    @property
    def source_names(self) -> Tuple[str, ...]:
        return tuple(source.name for source in self.sources)


def _declared_names(record_type: type) -> set:
    names = set(dir(record_type))
    for klass in inspect.getmro(record_type):
        names.update(getattr(klass, "__annotations__", {}))
        slots = getattr(klass, "__slots__", ())
        names.update([slots] if isinstance(slots, str) else slots)
    return names


def declares_fields(record_type: type) -> bool:
    """
    True when the type lists its attributes up front (mapped columns,
    annotations, dataclass fields or `__slots__`). Plain classes that only
    assign attributes in `__init__` don't, and are checked per instance.
    """
    if hasattr(record_type, "__mapper__"):
        return True
    for klass in inspect.getmro(record_type):
        if klass is object:
            continue
        if getattr(klass, "__annotations__", None) or "__slots__" in vars(klass):
            return True
    return False


def _is_writable(record_type: type, name: str, strict: bool = True) -> bool:
    if name not in _declared_names(record_type):
        return not strict
    attr = inspect.getattr_static(record_type, name, None)
    if isinstance(attr, property):
        return attr.fset is not None
    return not isinstance(attr, (FunctionType, staticmethod, classmethod))


def _build_sources(
    record_type: type,
    source: Union[SourceSpec, Sequence[SourceSpec]],
    strict: bool = True,
) -> Tuple[SlugSource, ...]:
    if isinstance(source, str) or callable(source):
        source = [source]
    declared = _declared_names(record_type)
    sources = []
    for item in source:
        if callable(item):
            sources.append(SlugSource(getattr(item, "__name__", repr(item)), item))
        elif isinstance(item, str):
            if strict and item not in declared:
                raise ConfigurationError(
                    f"Source '{item}' does not exist on {record_type.__name__}."
                )
            sources.append(SlugSource(item))
        else:
            raise ConfigurationError(f"Unsupported slug source {item!r}.")
    if not sources:
        raise ConfigurationError(f"{record_type.__name__} needs at least one slug source.")
    return tuple(sources)


def resolve_config(record_type: type, source: Union[SourceSpec, Sequence[SourceSpec]], **options) -> SlugConfig:
    """
    Validate raw slug options for `record_type` and return its `SlugConfig`.

    Raises ConfigurationError when a source or scope attribute can't be read,
    the target column can't be written, or the options are malformed. For
    plain classes without declared attributes the name checks run against
    each record instead, on its first build.
    """
    uniqueness = options.get("uniqueness")
    if isinstance(uniqueness, dict) and "conditions" in uniqueness:
        raise ConfigurationError("Cannot handle uniqueness constraint parameter `conditions`")

    try:
        opts = SlugOptions(**options)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid slug options for {record_type.__name__}: {exc}"
        ) from exc

    strict = declares_fields(record_type)
    sources = _build_sources(record_type, source, strict)

    if not _is_writable(record_type, opts.column, strict):
        raise ConfigurationError(
            f"Slug column '{opts.column}' does not exist on {record_type.__name__}."
        )

    declared = _declared_names(record_type)
    for name in opts.uniqueness.scope:
        if strict and name not in declared:
            raise ConfigurationError(
                f"Uniqueness scope '{name}' does not exist on {record_type.__name__}."
            )

    config = SlugConfig(
        record_type=record_type,
        sources=sources,
        target_field=opts.column,
        separator=opts.separator,
        max_length=opts.limit_length,
        required=opts.required,
        required_format=opts.require_format,
        generate_on_blank=opts.generate_on_blank,
        blank_fallback=opts.blank_fallback,
        uniqueness_scope=tuple(opts.uniqueness.scope),
        check_on_use=not strict,
    )
    logger.debug("Resolved slug config for %s: %s", record_type.__name__, config.source_names)
    return config


def check_record(record: Any, config: SlugConfig) -> None:
    """Per-instance name checks for types that don't declare their attributes."""
    if not config.check_on_use:
        return
    type_name = type(record).__name__
    for source in config.sources:
        if source.is_named and not hasattr(record, source.name):
            raise ConfigurationError(f"Source '{source.name}' does not exist on {type_name}.")
    if not hasattr(record, config.target_field):
        raise ConfigurationError(f"Slug column '{config.target_field}' does not exist on {type_name}.")
    for name in config.uniqueness_scope:
        if not hasattr(record, name):
            raise ConfigurationError(f"Uniqueness scope '{name}' does not exist on {type_name}.")
