from slugline.slugs.errors import SlugError, ConfigurationError, SlugValidationError
from slugline.slugs.config import SlugConfig, SlugOptions, SlugSource, resolve_config
from slugline.slugs.strategy import SlugStrategy, default_strategy, parameterize
from slugline.slugs.builder import SlugBuilder
from slugline.slugs.stores import ExistenceCheck, SessionExistenceCheck, InMemoryExistenceCheck
from slugline.slugs.uniqueness import UniquenessResolver
from slugline.slugs.registry import SlugRegistry, default_registry, slugged
from slugline.slugs.assign import assign_slug, reassign_slug
from slugline.slugs.validation import slug_errors, validate_slug
from slugline.slugs.listeners import enable_auto_slugs, disable_auto_slugs
