from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class SubjectRegistry:
    """
    Ordered, read-only table of allowed subjects and their keywords.

    Order matters: the classifier walks subjects in the order they were
    given and the first keyword hit wins.
    """
    entries: tuple[tuple[str, tuple[str, ...]], ...]

    def __post_init__(self):
        seen = set()
        for name, keywords in self.entries:
            if not name or not name.strip():
                raise ValueError("Subject name must not be empty")
            if name in seen:
                raise ValueError(f"Duplicate subject: {name}")
            if not keywords:
                raise ValueError(f"Subject {name} has no keywords")
            for kw in keywords:
                if not kw or kw != kw.lower():
                    raise ValueError(f"Keyword {kw!r} of {name} must be non-empty lowercase")
            seen.add(name)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, Iterable[str]]]) -> "SubjectRegistry":
        return cls(tuple((name, tuple(keywords)) for name, keywords in pairs))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.entries)

    def describe(self) -> str:
        """Human list of subjects: "A, B, and C"."""
        names = self.names
        if not names:
            return ""
        if len(names) == 1:
            return names[0]
        if len(names) == 2:
            return f"{names[0]} and {names[1]}"
        return ", ".join(names[:-1]) + ", and " + names[-1]

    def __iter__(self) -> Iterator[tuple[str, tuple[str, ...]]]:
        return iter(self.entries)


DEFAULT_REGISTRY = SubjectRegistry.from_pairs([
    ("Java", ["java", "jvm", "spring", "servlet"]),
    ("C++", ["c++", "cpp", "c plus"]),
    ("Data Structures", [
        "data structure", "array", "linked list", "tree",
        "graph", "stack", "queue", "heap",
    ]),
    ("Operating Systems", [
        "operating system", "os", "process", "thread",
        "memory management", "scheduling",
    ]),
    ("DBMS", ["dbms", "database", "sql", "query", "normalization", "transaction"]),
    ("Networks", ["network", "tcp", "ip", "http", "osi", "protocol"]),
])
