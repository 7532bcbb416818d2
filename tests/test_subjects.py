import pytest

from subjects.classifier import UNMATCHED, Matched, classify
from subjects.registry import DEFAULT_REGISTRY, SubjectRegistry


def _earlier_subjects_hit(registry, subject, message):
    for name, keywords in registry:
        if name == subject:
            return False
        if any(kw in message for kw in keywords):
            return True
    return False


def test_default_registry_order():
    assert DEFAULT_REGISTRY.names == (
        "Java",
        "C++",
        "Data Structures",
        "Operating Systems",
        "DBMS",
        "Networks",
    )


def test_every_keyword_classifies_to_its_subject():
    for subject, keywords in DEFAULT_REGISTRY:
        for keyword in keywords:
            message = f"... {keyword} ..."
            if _earlier_subjects_hit(DEFAULT_REGISTRY, subject, message):
                continue
            assert classify(message, DEFAULT_REGISTRY) == Matched(subject), keyword


@pytest.mark.parametrize("message", ["", "   ", "\n\t"])
def test_blank_input_is_unmatched(message):
    assert classify(message, DEFAULT_REGISTRY) is UNMATCHED


def test_case_insensitive():
    assert classify("JAVA basics", DEFAULT_REGISTRY) == classify("java basics", DEFAULT_REGISTRY)
    assert classify("JAVA basics", DEFAULT_REGISTRY) == Matched("Java")


def test_first_subject_in_registry_order_wins():
    # "tree" (Data Structures) comes before "network" (Networks)
    assert classify("Is a spanning tree used in a network?", DEFAULT_REGISTRY) == Matched("Data Structures")


def test_substring_match_inside_words():
    # "os" hides inside "host"
    assert classify("How do I host a website?", DEFAULT_REGISTRY) == Matched("Operating Systems")


def test_binary_search_tree_is_data_structures():
    assert classify("What is a binary search tree?", DEFAULT_REGISTRY) == Matched("Data Structures")


def test_weather_is_unmatched():
    assert classify("What's the weather today?", DEFAULT_REGISTRY) is UNMATCHED


def test_alternate_registry():
    registry = SubjectRegistry.from_pairs([
        ("Chemistry", ["atom", "molecule"]),
        ("Physics", ["atom", "force"]),
    ])
    assert classify("Split the ATOM", registry) == Matched("Chemistry")
    assert classify("what is force", registry) == Matched("Physics")
    assert classify("java", registry) is UNMATCHED


def test_describe_lists_subjects():
    assert DEFAULT_REGISTRY.describe() == (
        "Java, C++, Data Structures, Operating Systems, DBMS, and Networks"
    )
    assert SubjectRegistry.from_pairs([("A", ["a"]), ("B", ["b"])]).describe() == "A and B"


def test_registry_iterates_in_declared_order():
    subject, keywords = next(iter(DEFAULT_REGISTRY))
    assert subject == "Java"
    assert keywords == ("java", "jvm", "spring", "servlet")


@pytest.mark.parametrize("pairs", [
    [("A", ["a"]), ("A", ["b"])],
    [("A", [])],
    [("", ["a"])],
    [("A", ["Upper"])],
])
def test_invalid_registries_are_rejected(pairs):
    with pytest.raises(ValueError):
        SubjectRegistry.from_pairs(pairs)


def test_registry_is_immutable():
    with pytest.raises(AttributeError):
        DEFAULT_REGISTRY.entries = ()
