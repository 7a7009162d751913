import re
import unicodedata
from typing import Any, Callable, Dict, List

from unidecode import unidecode

from slugline.slugs.config import SlugConfig

# Unicode punctuation classes removed before parameterizing. Pd (dashes) is kept.
_STRIPPED_PUNCTUATION = {"Pc", "Ps", "Pe", "Pi", "Pf", "Po"}
_UNSAFE_CHARS = re.compile(r"[^a-z0-9\-_]+", re.IGNORECASE)


def strip_punctuation(text: str) -> str:
    return "".join(ch for ch in text if unicodedata.category(ch) not in _STRIPPED_PUNCTUATION)


def parameterize(text: str, separator: str = "-") -> str:
    """Transliterate to ASCII and reduce `text` to lowercase words joined by `separator`."""
    text = _UNSAFE_CHARS.sub(separator, unidecode(text))
    if separator:
        sep = re.escape(separator)
        text = re.sub(f"(?:{sep}){{2,}}", separator, text)
        text = re.sub(f"^(?:{sep})|(?:{sep})$", "", text)
    return text.lower()


def kebab_case(type_name: str) -> str:
    """`SomeObject` -> `some-object`, `HTTPServer` -> `http-server`."""
    name = type_name.rsplit(".", 1)[-1]
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    name = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", name)
    return name.replace("-", "_").lower().replace("_", "-")


class SlugStrategy:
    """
    The overridable operations of the slug pipeline.

    Every slugged type gets an instance of this class (or a subclass). Override
    a single method to change one step: `slugify` for the per-value character
    rules, `slugify_blank` for the fallback used when all sources are blank,
    `slugify_duplicate` for collision handling and `slug_concat` for joining.
    The hooks run around every assignment and do nothing by default.
    """

    def before_assign_slug(self, record: Any, opts: Dict[str, Any]) -> None:
        pass

    def after_assign_slug(self, record: Any, opts: Dict[str, Any]) -> None:
        pass

    def slugify(self, value: Any, config: SlugConfig) -> str:
        if value is None:
            return ""
        text = str(value)
        if not text.strip():
            return ""
        return parameterize(strip_punctuation(text), config.separator)

    def slugify_blank(self, record: Any, config: SlugConfig) -> str:
        if config.blank_fallback is not None:
            return self.slugify(config.blank_fallback(record), config)
        return kebab_case(type(record).__name__)

    def slugify_duplicate(self, slug: str, exists: Callable[[str], bool], config: SlugConfig) -> str:
        """
        Append `<separator>n` to a colliding slug. The second record gets `-2`,
        the third `-3` and so forth; the first free number wins.
        """
        if not slug:
            return slug

        seq = 2
        new_slug = self.slug_concat([slug, seq], config)
        while exists(new_slug):
            seq += 1
            new_slug = self.slug_concat([slug, seq], config)
        return new_slug

    def slug_concat(self, parts: List[Any], config: SlugConfig) -> str:
        return config.separator.join(str(part) for part in parts)


default_strategy = SlugStrategy()
