"""Tests for slug derivation and id-or-slug lookup."""

from __future__ import annotations

import pytest

from coursenav.schemas.node import Level, Node
from coursenav.slugs import create_slug, find_by_slug_or_id, unique_slug


def _topic(node_id: str, name: str, slug: str | None = None) -> Node:
    return Node(id=node_id, name=name, level=Level.TOPIC, parent_id="c1", slug=slug)


class TestCreateSlug:
    """Tests for create_slug."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Organic Chemistry", "organic-chemistry"),
            ("Organic   \t Chemistry", "organic-chemistry"),
            ("Newton's First Law", "newtons-first-law"),
            ("C++ Basics", "c-basics"),
            ("JEE Main 2025", "jee-main-2025"),
            ("Café Menu", "caf-menu"),
            ("already-a-slug", "already-a-slug"),
            (" padded ", "-padded-"),
        ],
    )
    def test_derives_slug(self, name: str, expected: str) -> None:
        assert create_slug(name) == expected

    @pytest.mark.parametrize("name", [None, ""])
    def test_empty_input(self, name: str | None) -> None:
        assert create_slug(name) == ""

    def test_is_not_collision_free(self) -> None:
        assert create_slug("C++ Basics") == create_slug("C Basics")


class TestFindBySlugOrId:
    """Tests for find_by_slug_or_id."""

    @pytest.fixture
    def siblings(self) -> list[Node]:
        return [
            _topic("t1", "Motion in a Line"),
            _topic("t2", "Projectiles"),
            _topic("t3", "!!!"),
            _topic("t4", "Vectors", slug="vectors-2"),
        ]

    def test_matches_id(self, siblings: list[Node]) -> None:
        assert find_by_slug_or_id(siblings, "t2") is siblings[1]

    def test_matches_slug(self, siblings: list[Node]) -> None:
        assert find_by_slug_or_id(siblings, "motion-in-a-line") is siblings[0]

    def test_matches_raw_name_through_its_slug(self, siblings: list[Node]) -> None:
        assert find_by_slug_or_id(siblings, "Motion in a Line") is siblings[0]

    def test_matches_name_case_insensitively(self, siblings: list[Node]) -> None:
        """A name that slugifies to nothing can still be found by name."""
        assert find_by_slug_or_id(siblings, "!!!") is siblings[2]

    def test_matches_stored_slug(self, siblings: list[Node]) -> None:
        assert find_by_slug_or_id(siblings, "vectors-2") is siblings[3]
        assert find_by_slug_or_id(siblings, "vectors") is siblings[3]

    def test_duplicate_slugs_resolve_to_first_sibling(self) -> None:
        siblings = [_topic("a", "Introduction"), _topic("b", "introduction")]

        assert find_by_slug_or_id(siblings, "introduction") is siblings[0]

    def test_first_sibling_matching_any_rule_wins(self) -> None:
        siblings = [_topic("x", "Projectiles"), _topic("projectiles", "Other")]

        assert find_by_slug_or_id(siblings, "projectiles") is siblings[0]

    @pytest.mark.parametrize("key", [None, "", "unknown"])
    def test_no_match(self, siblings: list[Node], key: str | None) -> None:
        assert find_by_slug_or_id(siblings, key) is None


class TestUniqueSlug:
    """Tests for unique_slug."""

    def test_free_base_is_kept(self) -> None:
        assert unique_slug("kinematics", {"optics"}) == "kinematics"

    def test_first_free_suffix(self) -> None:
        taken = {"kinematics", "kinematics-1", "kinematics-2"}

        assert unique_slug("kinematics", taken) == "kinematics-3"
