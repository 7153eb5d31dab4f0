"""Columnar transposition cipher with brute-force and n-gram scoring attacks."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from itertools import permutations
from typing import Sequence

PADDING = "X"

# Relative weights of common Portuguese trigraphs and digraphs.
TRIGRAPHS: dict[str, float] = {
    "que": 72.29, "ent": 70.23, "nte": 55.08, "ado": 51.16,
    "ade": 50.04, "ode": 45.43, "ara": 45.37, "est": 43.90,
    "res": 43.08, "con": 41.73,
}

DIGRAPHS: dict[str, float] = {
    "de": 3.25, "es": 2.89, "en": 2.59, "nt": 2.44,
    "te": 2.38, "er": 2.28, "el": 2.05, "ra": 1.98,
}


@dataclass(frozen=True)
class Candidate:
    """A possible decryption, its score and the column permutation that produced it."""

    text: str
    score: float
    permutation: tuple[int, ...]


def score(text: str) -> float:
    """Score text by how often common Portuguese trigraphs and digraphs occur in it."""
    counts = Counter(text[i:i + 3] for i in range(len(text) - 2))
    counts.update(text[i:i + 2] for i in range(len(text) - 1))
    total = 0.0
    for table in (TRIGRAPHS, DIGRAPHS):
        for gram in sorted(table):
            if counts[gram]:
                total += counts[gram] * table[gram]
    return total


def key_permutation(key: str) -> list[tuple[str, int]]:
    """Pair each key character with its 1-based position, sorted by character."""
    return sorted((char, position) for position, char in enumerate(key, start=1))


def _unscramble(ciphertext: str, permutation: Sequence[int]) -> str:
    columns = len(permutation)
    rows = len(ciphertext) // columns
    original_order = [0] * columns
    for rank, column in enumerate(permutation):
        original_order[column - 1] = rank
    blocks = [ciphertext[rank * rows:rank * rows + rows] for rank in original_order]
    return "".join(
        block[row] for row in range(rows) for block in blocks if row < len(block)
    )


def encode(message: str, key: str) -> str:
    """Write message row by row under key and read the columns in key order."""
    if not key:
        raise ValueError("the key must not be empty")
    columns = len(key)
    rows = -(-len(message) // columns)
    padded = message.ljust(rows * columns, PADDING)
    column_texts = [padded[column::columns] for column in range(columns)]
    return "".join(column_texts[position - 1] for _, position in key_permutation(key))


def decode(ciphertext: str, key: str) -> str:
    """Undo encode for the given key."""
    if not key:
        raise ValueError("the key must not be empty")
    return _unscramble(ciphertext, [position for _, position in key_permutation(key)])


def _check_key_length(key_length: int) -> None:
    if key_length < 1:
        raise ValueError("the key length must be at least 1")


def brute_force(ciphertext: str, key_length: int) -> list[tuple[str, tuple[int, ...]]]:
    """Decode with every column permutation of key_length, in lexicographic order."""
    _check_key_length(key_length)
    return [
        (_unscramble(ciphertext, permutation), permutation)
        for permutation in permutations(range(1, key_length + 1))
    ]


def frequency_attack(ciphertext: str, key_length: int) -> list[Candidate]:
    """Try every permutation of key_length and rank the results by score, best first."""
    candidates = [
        Candidate(text, score(text), permutation)
        for text, permutation in brute_force(ciphertext, key_length)
    ]
    candidates.sort(key=lambda candidate: candidate.score, reverse=True)
    return candidates


def format_brute_force(candidates: list[tuple[str, Sequence[int]]]) -> str:
    """Render brute-force candidates as the report shown to the user."""
    return "".join(
        f"\nResultado : {text} \n\n |  Permutacao utilizada  : "
        + "".join(f"{column} " for column in permutation)
        + "\n"
        for text, permutation in candidates
    )