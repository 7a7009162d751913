import logging
from typing import Any, Dict, Optional

from slugline.slugs.config import SlugConfig
from slugline.slugs.stores import ExistenceCheck
from slugline.slugs.strategy import SlugStrategy, default_strategy

logger = logging.getLogger(__name__)


def scope_values(record: Any, config: SlugConfig) -> Dict[str, Any]:
    return {name: getattr(record, name) for name in config.uniqueness_scope}


class UniquenessResolver:
    """
    Makes a candidate unique within its scope by appending `-2`, `-3`, ...

    The suffix is never counted against the length limit, so the base part of
    a slug stays the same whatever collisions happen.
    """

    def __init__(self, existence: ExistenceCheck, strategy: Optional[SlugStrategy] = None):
        self.existence = existence
        self.strategy = strategy or default_strategy

    def exists(self, slug: str, record: Any, config: SlugConfig) -> bool:
        equalities = {config.target_field: slug}
        equalities.update(scope_values(record, config))
        return self.existence.exists_matching(config.record_type, equalities, exclude=record)

    def resolve(self, candidate: str, record: Any, config: SlugConfig) -> str:
        if not self.exists(candidate, record, config):
            return candidate

        logger.debug("Slug %r is taken for %s, searching for a suffix", candidate, config.record_type.__name__)
        return self.strategy.slugify_duplicate(
            candidate, lambda slug: self.exists(slug, record, config), config
        )
