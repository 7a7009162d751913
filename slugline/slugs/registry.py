import inspect
import logging
from typing import Any, Dict, Optional, Tuple

from slugline.slugs.config import SlugConfig, resolve_config
from slugline.slugs.errors import ConfigurationError
from slugline.slugs.strategy import SlugStrategy, default_strategy

logger = logging.getLogger(__name__)


class SlugRegistry:
    """Maps each slugged record type to its config and strategy."""

    def __init__(self):
        self._entries: Dict[type, Tuple[SlugConfig, SlugStrategy]] = {}

    def register(self, config: SlugConfig, strategy: Optional[SlugStrategy] = None) -> SlugConfig:
        self._entries[config.record_type] = (config, strategy or default_strategy)
        logger.info(
            "Registered slug for %s: %s -> %s",
            config.record_type.__name__,
            ", ".join(config.source_names),
            config.target_field,
        )
        return config

    def find(self, record_type: type) -> Optional[Tuple[SlugConfig, SlugStrategy]]:
        # Subclasses inherit the config of the nearest registered ancestor.
        for klass in inspect.getmro(record_type):
            if klass in self._entries:
                return self._entries[klass]
        return None

    def lookup(self, record_type: type) -> Tuple[SlugConfig, SlugStrategy]:
        entry = self.find(record_type)
        if entry is None:
            raise ConfigurationError(f"{record_type.__name__} has no slug configured.")
        return entry

    def is_slugged(self, record: Any) -> bool:
        return self.find(type(record)) is not None


default_registry = SlugRegistry()


def slugged(source, strategy: Optional[SlugStrategy] = None, registry: Optional[SlugRegistry] = None, **options):
    """
    Class decorator declaring how a type gets its slug.

        @slugged("name", uniqueness={"scope": ["venue_id"]})
        class Hall(Base):
            ...

    Options are those accepted by `resolve_config`.
    """
    target = registry if registry is not None else default_registry

    def decorator(cls):
        target.register(resolve_config(cls, source, **options), strategy)
        return cls

    return decorator
