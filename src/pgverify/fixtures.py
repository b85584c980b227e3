"""Canonical seed data: the values the shipped init scripts insert.

Tests assert against these constants instead of repeating literals, so a
change to an init script only needs a matching change here:
- books (jsonb documents keyed by title/author)
- words (tsvector phrases)
- test (ltree paths of the Top.* catalogue)
- dict (a single hstore row)
"""
from __future__ import annotations

# ---------------------------------------------------------------------------
# init_json.sql
# ---------------------------------------------------------------------------

SEED_BOOKS: list[dict[str, str]] = [
    {"title": "Ulysses",                "author": "James Joyce"},
    {"title": "Mrs Dalloway",           "author": "Virginia Woolf"},
    {"title": "The Trial",              "author": "Franz Kafka"},
    {"title": "In Search of Lost Time", "author": "Marcel Proust"},
]

# ---------------------------------------------------------------------------
# init_tsvector.sql
# ---------------------------------------------------------------------------

SEED_PHRASES: list[str] = [
    "Just get it done",
    "Let it be",
    "Get well soon",
    "Done is better than perfect",
]

# ---------------------------------------------------------------------------
# init_ltree.sql
# ---------------------------------------------------------------------------

SEED_PATHS: list[str] = [
    "Top",
    "Top.Science",
    "Top.Science.Astronomy",
    "Top.Science.Astronomy.Astrophysics",
    "Top.Science.Astronomy.Cosmology",
    "Top.Hobbies",
    "Top.Hobbies.Amateurs_Astronomy",
    "Top.Collections",
    "Top.Collections.Pictures",
    "Top.Collections.Pictures.Astronomy",
    "Top.Collections.Pictures.Astronomy.Stars",
    "Top.Collections.Pictures.Astronomy.Galaxies",
    "Top.Collections.Pictures.Astronomy.Astronauts",
]

SCIENCE_SUBTREE: set[str] = {
    "Top.Science",
    "Top.Science.Astronomy",
    "Top.Science.Astronomy.Astrophysics",
    "Top.Science.Astronomy.Cosmology",
}

# Astronomy paths that do not pass through a "pictures" label
NON_PICTURE_ASTRONOMY: set[str] = {
    "Top.Science.Astronomy",
    "Top.Science.Astronomy.Astrophysics",
    "Top.Science.Astronomy.Cosmology",
}

# ---------------------------------------------------------------------------
# init_hstore.sql
# ---------------------------------------------------------------------------

SEED_DICT: dict[str, str] = {"a": "1", "b": "2", "c": "3"}
