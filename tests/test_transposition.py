import math

import pytest

from cifras import transposition
from cifras.transposition import Candidate


def test_key_permutation_sorts_characters():
    assert transposition.key_permutation("GAME") == [
        ("A", 2), ("E", 4), ("G", 1), ("M", 3)
    ]


def test_key_permutation_keeps_positions_of_repeated_characters():
    result = transposition.key_permutation("BAB")
    assert [position for _, position in result] == [2, 1, 3]


def test_encode_worked_example():
    assert transposition.encode("ATTACKATDAWN", "GAME") == "TKAATNACDTAW"


@pytest.mark.parametrize("key", ["GAME", "KEY", "ZEBRAS", "A"])
def test_round_trip_exact_length(key):
    message = "ATTACKATDAWNWITHALLFORCESNOW"[: len(key) * 4]
    assert transposition.decode(transposition.encode(message, key), key) == message


def test_round_trip_with_padding():
    message = "ESTAMENSAGEMESECRETA"
    key = "GAME"
    message = message + "Q"
    decoded = transposition.decode(transposition.encode(message, key), key)
    assert decoded.startswith(message)
    assert set(decoded[len(message):]) == {"X"}
    assert len(decoded) % len(key) == 0


def test_encode_preserves_characters():
    message = "abcdefghij"
    encoded = transposition.encode(message, "KEY")
    assert sorted(encoded) == sorted(message.ljust(12, "X"))


def test_encode_empty_key_raises():
    with pytest.raises(ValueError):
        transposition.encode("abc", "")


def test_decode_empty_key_raises():
    with pytest.raises(ValueError):
        transposition.decode("abc", "")


def test_score_single_trigraph():
    assert transposition.score("que") == pytest.approx(72.29)


def test_score_single_digraph():
    assert transposition.score("de") == pytest.approx(3.25)


def test_score_without_known_grams():
    assert transposition.score("zzz") == 0.0
    assert transposition.score("") == 0.0
    assert transposition.score("q") == 0.0


def test_score_counts_repetitions():
    assert transposition.score("dede") == pytest.approx(2 * transposition.score("de"))


def test_brute_force_enumerates_all_permutations():
    ciphertext = transposition.encode("ATTACKATDAWN", "KEY")
    candidates = transposition.brute_force(ciphertext, 3)
    perms = [perm for _, perm in candidates]
    assert len(candidates) == math.factorial(3)
    assert perms == sorted(perms)
    assert len(set(perms)) == len(perms)


def test_brute_force_contains_correct_decryption():
    key = "GAME"
    ciphertext = transposition.encode("ATTACKATDAWN", key)
    permutation = tuple(position for _, position in transposition.key_permutation(key))
    assert ("ATTACKATDAWN", permutation) in transposition.brute_force(ciphertext, 4)


def test_brute_force_invalid_length():
    with pytest.raises(ValueError):
        transposition.brute_force("abc", 0)


def test_frequency_attack_is_sorted_and_consistent():
    message = "queententeadoadequeententeadoadex"
    ciphertext = transposition.encode(message, "GAME")
    candidates = transposition.frequency_attack(ciphertext, 4)
    scores = [candidate.score for candidate in candidates]
    assert scores == sorted(scores, reverse=True)
    assert all(c.score == transposition.score(c.text) for c in candidates)
    assert {(c.text, c.permutation) for c in candidates} == set(
        transposition.brute_force(ciphertext, 4)
    )


def test_frequency_attack_best_is_at_least_original():
    message = "queententeadoadequeententeadoade"
    ciphertext = transposition.encode(message, "GAME")
    best = transposition.frequency_attack(ciphertext, 4)[0]
    assert isinstance(best, Candidate)
    assert best.score >= transposition.score(message)


def test_frequency_attack_invalid_length():
    with pytest.raises(ValueError):
        transposition.frequency_attack("abc", -1)


def test_format_brute_force():
    report = transposition.format_brute_force([("abc", (2, 1))])
    assert report == "\nResultado : abc \n\n |  Permutacao utilizada  : 2 1 \n"


def test_format_brute_force_many():
    report = transposition.format_brute_force([("ab", (1, 2)), ("ba", (2, 1))])
    assert report.count("Resultado : ") == 2