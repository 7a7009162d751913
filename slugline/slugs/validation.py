from typing import Any, List, Optional

from slugline.slugs.assign import is_blank
from slugline.slugs.errors import SlugValidationError
from slugline.slugs.registry import SlugRegistry, default_registry
from slugline.slugs.stores import existence_for
from slugline.slugs.uniqueness import UniquenessResolver


def slug_errors(db, record: Any, registry: Optional[SlugRegistry] = None) -> List[str]:
    """
    Check the record's slug against the validations its type declares:
    presence when required, the required format, and uniqueness in scope.
    Returns the failure messages, empty when the slug is valid.
    """
    config, strategy = (registry or default_registry).lookup(type(record))
    field = config.target_field
    value = getattr(record, field, None)

    errors = []
    if is_blank(value):
        if config.required:
            errors.append(f"{field} can't be blank")
        return errors

    value = str(value)
    if config.required_format is not None and not config.required_format.fullmatch(value):
        errors.append(
            f"{field} contains invalid characters. Only {config.required_format.pattern} are allowed"
        )

    if UniquenessResolver(existence_for(db), strategy).exists(value, record, config):
        errors.append(f"{field} has already been taken")

    return errors


def validate_slug(db, record: Any, registry: Optional[SlugRegistry] = None) -> None:
    errors = slug_errors(db, record, registry)
    if errors:
        config, _ = (registry or default_registry).lookup(type(record))
        raise SlugValidationError(record, config.target_field, errors)
