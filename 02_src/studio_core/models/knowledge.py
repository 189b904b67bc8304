"""Knowledge base data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class KnowledgeEntry:
    """A canned question/answer pair matched by keywords."""

    question: str
    answer: str
    keywords: frozenset[str]

    def __post_init__(self) -> None:
        if not self.keywords:
            raise ValueError(f"Entry {self.question!r} has no keywords")
        for keyword in self.keywords:
            if not keyword or keyword != keyword.lower():
                raise ValueError(
                    f"Keyword {keyword!r} of {self.question!r} must be non-empty lower-case"
                )

    def matches(self, normalized_input: str) -> bool:
        """True if any keyword is a substring of the already lower-cased input."""
        return any(keyword in normalized_input for keyword in self.keywords)
