"""
Keyword lexicons for sensitive-content detection.

A Lexicon is an immutable, ordered set of categories. Swap it on the
validator to change vocabulary without touching the detection pass.
"""
import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Tuple

from privguard.models.violation import ViolationSeverity


@dataclass(frozen=True)
class LexiconCategory:
    name: str
    terms: Tuple[str, ...]
    severity: ViolationSeverity = ViolationSeverity.HIGH
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.name:
            raise ValueError("Lexicon category name must not be empty")
        terms = tuple(t.strip() for t in self.terms if t and t.strip())
        if not terms:
            raise ValueError(f"Lexicon category '{self.name}' has no terms")
        object.__setattr__(self, "terms", terms)

        # Longest first so multi-word terms win over their prefixes
        alternation = "|".join(
            re.escape(t).replace(r"\ ", r"\s+") for t in sorted(terms, key=len, reverse=True)
        )
        object.__setattr__(
            self, "pattern", re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)
        )

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


class Lexicon:
    def __init__(self, categories: Iterable[LexiconCategory]):
        self._categories: Tuple[LexiconCategory, ...] = tuple(categories)
        names = [c.name for c in self._categories]
        if len(names) != len(set(names)):
            raise ValueError("Lexicon category names must be unique")

    def __iter__(self) -> Iterator[LexiconCategory]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(c.name for c in self._categories)

    def get(self, name: str) -> Optional[LexiconCategory]:
        for category in self._categories:
            if category.name == name:
                return category
        return None

    def with_category(self, category: LexiconCategory) -> "Lexicon":
        """Return a new lexicon with `category` added, or replaced in place."""
        if self.get(category.name) is None:
            return Lexicon(self._categories + (category,))
        return Lexicon(category if c.name == category.name else c for c in self._categories)

    def without(self, name: str) -> "Lexicon":
        return Lexicon(c for c in self._categories if c.name != name)


DEFAULT_LEXICON = Lexicon([
    LexiconCategory(
        "explicitContent",
        ("pornography", "porn", "adult content", "explicit material", "xxx", "nsfw"),
    ),
    LexiconCategory(
        "relapseTerms",
        ("relapse", "relapsed", "relapsing", "setback", "failure", "gave in", "lost control"),
    ),
    LexiconCategory(
        "addictionTerms",
        ("addiction", "addicted", "dependency", "dependent", "compulsive", "compulsion"),
    ),
    LexiconCategory(
        "emotionalTerms",
        ("shame", "guilt", "worthless", "hopeless", "suicidal", "self-harm", "cutting"),
    ),
    LexiconCategory(
        "behavioralTerms",
        ("masturbation", "self-pleasure", "orgasm", "climax", "ejaculation"),
    ),
    LexiconCategory(
        "mentalHealthTerms",
        ("depression", "anxiety", "panic", "bipolar", "schizophrenia", "ptsd"),
    ),
])
