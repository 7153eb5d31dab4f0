"""Caesar (shift) cipher with brute-force and frequency-analysis attacks."""

from __future__ import annotations

from collections import Counter

ALPHABET_SIZE = 26

# Expected relative frequency (percent) of each letter in Portuguese text.
PORTUGUESE_LETTER_FREQUENCIES: dict[str, float] = {
    "a": 13.9, "b": 1.04, "c": 4.4, "d": 5.4, "e": 12.57,
    "f": 1.02, "g": 1.2, "h": 0.8, "i": 1.0, "j": 0.4,
    "k": 0.1, "l": 2.8, "m": 7.2, "n": 5.8, "o": 11.08,
    "p": 2.52, "q": 1.2, "r": 6.53, "s": 12.2, "t": 4.34,
    "u": 4.9, "v": 1.8, "w": 0.01, "x": 0.21, "y": 0.01,
    "z": 0.4,
}


def _is_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _shift(text: str, offset: int) -> str:
    def shift_char(char: str) -> str:
        if not _is_letter(char):
            return char
        base = ord("a") if char.islower() else ord("A")
        return chr((ord(char) - base + offset) % ALPHABET_SIZE + base)

    return "".join(shift_char(char) for char in text)


def letter_frequencies(text: str) -> dict[str, float]:
    """Return the percentage of each (lower-cased) letter among the letters of text."""
    counts = Counter(char.lower() for char in text if _is_letter(char))
    total = sum(counts.values())
    return {letter: count / total * 100 for letter, count in sorted(counts.items())}


def find_key_by_frequency(ciphertext: str) -> int:
    """Return the shift (1-25) whose letter distribution best matches Portuguese."""
    observed = letter_frequencies(ciphertext)
    best_key = 0
    lowest_error = float("inf")
    for key in range(1, ALPHABET_SIZE):
        error = sum(
            abs(observed.get(_shift(letter, key), 0.0) - expected)
            for letter, expected in PORTUGUESE_LETTER_FREQUENCIES.items()
        )
        if error < lowest_error:
            lowest_error = error
            best_key = key
    return best_key


def encode(message: str, key: int) -> str:
    """Shift every ASCII letter of message forward by key, keeping its case."""
    return _shift(message, key)


def decode(ciphertext: str, key: int) -> str:
    """Shift every ASCII letter of ciphertext back by key, keeping its case."""
    return _shift(ciphertext, -key)


def brute_force(ciphertext: str) -> list[tuple[str, int]]:
    """Decode ciphertext with every key from 1 to 25, as (text, key) pairs."""
    return [(decode(ciphertext, key), key) for key in range(1, ALPHABET_SIZE)]


def format_brute_force(candidates: list[tuple[str, int]]) -> str:
    """Render brute-force candidates as the report shown to the user."""
    return "".join(
        f"resultado : {text} \n \n |  chave utilizada (k) : {key}\n\n"
        for text, key in candidates
    )