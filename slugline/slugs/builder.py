import logging
from typing import Any, Optional

from slugline.slugs.config import SlugConfig, check_record
from slugline.slugs.strategy import SlugStrategy, default_strategy

logger = logging.getLogger(__name__)


class SlugBuilder:
    """Turns a record's source values into a normalized, truncated candidate."""

    def __init__(self, strategy: Optional[SlugStrategy] = None):
        self.strategy = strategy or default_strategy

    def build(self, record: Any, config: SlugConfig) -> str:
        check_record(record, config)

        parts = [self.strategy.slugify(source.read(record), config) for source in config.sources]
        candidate = self.strategy.slug_concat(parts, config)

        # Several blank sources still join to a run of separators, which is kept
        if not candidate and config.generate_on_blank:
            candidate = self.strategy.slugify_blank(record, config)
            logger.debug(
                "Sources %s are blank, using fallback slug %r",
                config.source_names,
                candidate,
            )

        return self.truncate(candidate, config)

    @staticmethod
    def truncate(candidate: str, config: SlugConfig) -> str:
        if not candidate or config.max_length is None:
            return candidate
        return candidate[: config.max_length]
