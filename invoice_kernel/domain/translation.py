"""
Translation -- the injected localization capability.

The kernel never owns a localization system. Callers hand in either a
plain function ``(key) -> str | None`` or any object with a ``lookup``
method; ``as_translator`` turns both (and None) into a ``Translator``.
A lookup that yields None or an empty string counts as "absent" and the
caller falls back to its own default text.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

TranslateFn = Callable[[str], "str | None"]


@runtime_checkable
class Translator(Protocol):
    """Maps a documented label key to display text."""

    def lookup(self, key: str) -> str | None: ...


class NullTranslator:
    """Translator used when the caller supplies none; every key is absent."""

    def lookup(self, key: str) -> str | None:
        return None

    def __repr__(self) -> str:
        return "NullTranslator()"


@dataclass(frozen=True)
class CallableTranslator:
    """Adapts a bare translate function to the Translator protocol."""

    fn: TranslateFn

    def lookup(self, key: str) -> str | None:
        result = self.fn(key)
        if result is None:
            return None
        return str(result)


def as_translator(translate: Translator | TranslateFn | None) -> Translator:
    """
    Normalize the translation argument accepted by the engines.

    Raises:
        TypeError: If translate is neither None, a Translator nor callable.
    """
    if translate is None:
        return NullTranslator()
    if isinstance(translate, Translator):
        return translate
    if callable(translate):
        return CallableTranslator(translate)
    raise TypeError(
        f"translate must be a Translator, a callable or None, got {type(translate)}"
    )


def translate_or_default(translator: Translator, key: str, default: str) -> str:
    """Ask the translator for a key; use the default when the answer is absent."""
    text = translator.lookup(key)
    return text if text else default
