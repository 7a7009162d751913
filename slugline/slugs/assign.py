import logging
from typing import Any, Optional

from slugline.slugs.builder import SlugBuilder
from slugline.slugs.config import SlugConfig
from slugline.slugs.registry import SlugRegistry, default_registry
from slugline.slugs.stores import existence_for
from slugline.slugs.strategy import SlugStrategy
from slugline.slugs.uniqueness import UniquenessResolver

logger = logging.getLogger(__name__)


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def assign_slug(db, record: Any, force: bool = False, registry: Optional[SlugRegistry] = None, **opts) -> Optional[str]:
    """
    Assign a slug to `record` unless it already has one.

    `db` is a SQLAlchemy session or any ExistenceCheck. Pass `force=True` (or
    use `reassign_slug`) to regenerate an existing slug. Both hooks of the
    type's strategy always run; `after_assign_slug` is skipped only when
    generation raises. Returns the record's slug.
    """
    config, strategy = (registry or default_registry).lookup(type(record))
    opts["force"] = force

    strategy.before_assign_slug(record, opts)
    _perform_assign(db, record, config, strategy, force)
    strategy.after_assign_slug(record, opts)

    return getattr(record, config.target_field)


def reassign_slug(db, record: Any, registry: Optional[SlugRegistry] = None, **opts) -> Optional[str]:
    """Regenerate the slug even if the record already has one."""
    opts.pop("force", None)
    return assign_slug(db, record, force=True, registry=registry, **opts)


def _perform_assign(db, record: Any, config: SlugConfig, strategy: SlugStrategy, force: bool) -> None:
    current = getattr(record, config.target_field, None)
    if not force and not is_blank(current):
        logger.debug("%s already has slug %r, skipping", type(record).__name__, current)
        return

    candidate = SlugBuilder(strategy).build(record, config)
    slug = UniquenessResolver(existence_for(db), strategy).resolve(candidate, record, config)

    setattr(record, config.target_field, slug)
    logger.debug("Assigned slug %r to %s", slug, type(record).__name__)
