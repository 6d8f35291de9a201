"""Test setup for coursenav."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from coursenav.catalog.memory import InMemoryCatalog  # noqa: E402
from coursenav.schemas.node import Level, Node, NodeStatus  # noqa: E402

NodeSpec = tuple  # (level, id, name, parent_id, order_number[, status])


def build_nodes(specs: list[NodeSpec]) -> list[Node]:
    nodes = []
    for spec in specs:
        level, node_id, name, parent_id, order = spec[:5]
        status = spec[5] if len(spec) > 5 else NodeStatus.ACTIVE
        nodes.append(
            Node(
                id=node_id,
                name=name,
                level=level,
                parent_id=parent_id,
                order_number=order,
                status=status,
            )
        )
    return nodes


# Exam E1 > Subject S1 > Unit U1 > Chapter C1 {Topic T1 {ST1, ST2}, Topic T2}, Chapter C2
WORKED_EXAMPLE: list[NodeSpec] = [
    (Level.EXAM, "E1", "E1", None, 1),
    (Level.SUBJECT, "S1", "S1", "E1", 1),
    (Level.UNIT, "U1", "U1", "S1", 1),
    (Level.CHAPTER, "C1", "C1", "U1", 1),
    (Level.CHAPTER, "C2", "C2", "U1", 2),
    (Level.TOPIC, "T1", "T1", "C1", 1),
    (Level.TOPIC, "T2", "T2", "C1", 2),
    (Level.SUBTOPIC, "ST1", "ST1", "T1", 1),
    (Level.SUBTOPIC, "ST2", "ST2", "T1", 2),
]

# Two exams with uneven depth:
#
# JEE Main
#   Physics
#     Mechanics
#       Kinematics: Motion in a Line {Displacement, Velocity}, Projectiles
#       Laws of Motion: Newton's First Law {Inertia}
#     Thermodynamics
#       Heat
#   Chemistry
# NEET
#   Biology
#     Cell
#       Cell Structure: Organelles {Mitochondria, Ribosome}
CORPUS: list[NodeSpec] = [
    (Level.EXAM, "e1", "JEE Main", None, 1),
    (Level.EXAM, "e2", "NEET", None, 2),
    (Level.SUBJECT, "s1", "Physics", "e1", 1),
    (Level.SUBJECT, "s2", "Chemistry", "e1", 2),
    (Level.SUBJECT, "s3", "Biology", "e2", 1),
    (Level.UNIT, "u1", "Mechanics", "s1", 1),
    (Level.UNIT, "u2", "Thermodynamics", "s1", 2),
    (Level.UNIT, "u3", "Cell", "s3", 1),
    (Level.CHAPTER, "c1", "Kinematics", "u1", 1),
    (Level.CHAPTER, "c2", "Laws of Motion", "u1", 2),
    (Level.CHAPTER, "c3", "Heat", "u2", 1),
    (Level.CHAPTER, "c4", "Cell Structure", "u3", 1),
    (Level.TOPIC, "t1", "Motion in a Line", "c1", 1),
    (Level.TOPIC, "t2", "Projectiles", "c1", 2),
    (Level.TOPIC, "t3", "Newton's First Law", "c2", 1),
    (Level.TOPIC, "t4", "Organelles", "c4", 1),
    (Level.SUBTOPIC, "st1", "Displacement", "t1", 1),
    (Level.SUBTOPIC, "st2", "Velocity", "t1", 2),
    (Level.SUBTOPIC, "st3", "Inertia", "t3", 1),
    (Level.SUBTOPIC, "st4", "Mitochondria", "t4", 1),
    (Level.SUBTOPIC, "st5", "Ribosome", "t4", 2),
]

CORPUS_CHAINS: dict[str, list[str]] = {
    "e1": ["e1"],
    "e2": ["e2"],
    "s1": ["e1", "s1"],
    "s2": ["e1", "s2"],
    "s3": ["e2", "s3"],
    "u1": ["e1", "s1", "u1"],
    "u2": ["e1", "s1", "u2"],
    "u3": ["e2", "s3", "u3"],
    "c1": ["e1", "s1", "u1", "c1"],
    "c2": ["e1", "s1", "u1", "c2"],
    "c3": ["e1", "s1", "u2", "c3"],
    "c4": ["e2", "s3", "u3", "c4"],
    "t1": ["e1", "s1", "u1", "c1", "t1"],
    "t2": ["e1", "s1", "u1", "c1", "t2"],
    "t3": ["e1", "s1", "u1", "c2", "t3"],
    "t4": ["e2", "s3", "u3", "c4", "t4"],
    "st1": ["e1", "s1", "u1", "c1", "t1", "st1"],
    "st2": ["e1", "s1", "u1", "c1", "t1", "st2"],
    "st3": ["e1", "s1", "u1", "c2", "t3", "st3"],
    "st4": ["e2", "s3", "u3", "c4", "t4", "st4"],
    "st5": ["e2", "s3", "u3", "c4", "t4", "st5"],
}


@pytest.fixture
def worked_example() -> InMemoryCatalog:
    """Single exam with two chapters, one of them empty."""
    return InMemoryCatalog(build_nodes(WORKED_EXAMPLE))


@pytest.fixture
def corpus() -> InMemoryCatalog:
    """Two exams with uneven depth (see CORPUS)."""
    return InMemoryCatalog(build_nodes(CORPUS))


@pytest.fixture
def make_catalog() -> Callable[[list[NodeSpec]], InMemoryCatalog]:
    """Factory building an in-memory catalog from node specs."""
    return lambda specs: InMemoryCatalog(build_nodes(specs))


@pytest.fixture
def chains() -> dict[str, list[str]]:
    """Ancestor chains (exam first) for every node in CORPUS."""
    return {node_id: list(chain) for node_id, chain in CORPUS_CHAINS.items()}


@pytest.fixture
def corpus_specs() -> list[NodeSpec]:
    """Node specs of CORPUS, for tests that extend it."""
    return list(CORPUS)
