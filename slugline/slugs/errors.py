from typing import Any, List, Optional


class SlugError(Exception):
    """Base class for every error raised by the slug pipeline."""


class ConfigurationError(SlugError):
    """Raised at setup time when a slugged type is misconfigured."""


class SlugValidationError(SlugError):
    """
    Raised when a record's slug fails its declared validations
    (presence, format or uniqueness within the scope).
    """

    def __init__(self, record: Any, field: str, messages: List[str]):
        self.record = record
        self.field = field
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))

    @property
    def first_message(self) -> Optional[str]:
        return self.messages[0] if self.messages else None
