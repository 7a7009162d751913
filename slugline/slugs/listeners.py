import logging
from typing import Callable, Optional

from sqlalchemy import event
from sqlalchemy.orm import Session

from slugline.slugs.assign import assign_slug
from slugline.slugs.registry import SlugRegistry, default_registry
from slugline.slugs.validation import validate_slug

logger = logging.getLogger(__name__)


def enable_auto_slugs(target=Session, registry: Optional[SlugRegistry] = None) -> Callable:
    """
    Hook slug handling into flushes of `target` (a Session class or sessionmaker).

    New slugged records get a slug before they are inserted; every new or
    modified slugged record is validated, raising SlugValidationError and
    aborting the flush on failure. Returns the listener so it can be removed
    with `disable_auto_slugs`.
    """
    reg = registry or default_registry

    def _assign_and_validate(session, flush_context, instances):
        with session.no_autoflush:
            for record in list(session.new):
                if reg.is_slugged(record):
                    slug = assign_slug(session, record, registry=reg)
                    logger.info("Assigned slug %r to new %s", slug, type(record).__name__)

            for record in list(session.new) + list(session.dirty):
                if reg.is_slugged(record):
                    validate_slug(session, record, registry=reg)

    event.listen(target, "before_flush", _assign_and_validate)
    return _assign_and_validate


def disable_auto_slugs(listener: Callable, target=Session) -> None:
    event.remove(target, "before_flush", listener)
