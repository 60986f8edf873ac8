import pytest
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add src to sys.path so we can import flashbang
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from flashbang.core.models import Category, Word  # noqa: E402


VOCABULARY = [
    ("Hund", "dog"),
    ("Katze", "cat"),
    ("Haus", "house"),
    ("Baum", "tree"),
    ("Buch", "book"),
    ("Wasser", "water"),
    ("Brot", "bread"),
    ("Apfel", "apple"),
]


# Common test fixtures
@pytest.fixture
def now() -> datetime:
    """Fixed reference time."""
    return datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def word_pool() -> list[Word]:
    """Eight distinct words, four per category, newest first."""
    return [
        Word(
            id=f"w{i}",
            term=term,
            translation=translation,
            category_id="basics" if i < 4 else "everyday",
        )
        for i, (term, translation) in enumerate(VOCABULARY)
    ]


@pytest.fixture
def categories() -> list[Category]:
    """Categories matching word_pool, one with non-default languages."""
    return [
        Category(id="basics", name="Basics"),
        Category(id="everyday", name="Everyday", source_language="fr", target_language="es"),
    ]
