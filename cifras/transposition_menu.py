"""Interactive menu for encrypting, decrypting and attacking the transposition cipher."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, TextIO

from cifras import transposition
from cifras.console import clear_screen, ensure_input, pause, read_input, warn

INPUT_FILE = "input2.txt"

MENU = (
    "       SIMULADOR DE CIFRA POR TRANSPOSICAO \n\n"
    "1. Criptografar texto\n"
    "2. Descriptografar texto\n"
    "3. Ataque por brute-force\n"
    "4. Ataque por distribuicao de frequencias\n"
    "5. Sair\n"
    "\nEscolha uma opcao: "
)

ENCRYPT_KEY_PROMPT = "Digite a chave de transposicao (Recomendada: GAME): "
DECRYPT_KEY_PROMPT = "Digite a chave utilizada: "
LENGTH_PROMPT = "Digite o tamanho fixo da chave de transposicao: "


def _read_word(stdin: TextIO) -> str | None:
    words = stdin.readline().split()
    return words[0] if words else None


def _ask_key(prompt: str, stdin: TextIO, stdout: TextIO) -> str | None:
    stdout.write(prompt)
    stdout.flush()
    key = _read_word(stdin)
    if key is None:
        stdout.write("\nChave invalida!\n")
    return key


def _ask_length(stdin: TextIO, stdout: TextIO) -> int | None:
    stdout.write(LENGTH_PROMPT)
    stdout.flush()
    word = _read_word(stdin)
    try:
        length = int(word) if word is not None else None
    except ValueError:
        length = None
    if length is None or length < 1:
        stdout.write("\nTamanho de chave invalido!\n")
        return None
    return length


def _encrypt(path: Path, stdin: TextIO, stdout: TextIO, clear: Callable[[], None]) -> None:
    clear()
    warn(path, stdin, stdout)
    text = read_input(path)
    key = _ask_key(ENCRYPT_KEY_PROMPT, stdin, stdout)
    if key is None:
        return
    stdout.write(f"\n\nMensagem criptografada:\n{transposition.encode(text, key)}\n")


def _decrypt(path: Path, stdin: TextIO, stdout: TextIO, clear: Callable[[], None]) -> None:
    clear()
    warn(path, stdin, stdout)
    text = read_input(path)
    key = _ask_key(DECRYPT_KEY_PROMPT, stdin, stdout)
    if key is None:
        return
    stdout.write(f"\n\nMensagem descriptografada:\n\n{transposition.decode(text, key)}\n")


def _brute_force(path: Path, stdin: TextIO, stdout: TextIO, clear: Callable[[], None]) -> None:
    clear()
    warn(path, stdin, stdout)
    text = read_input(path)
    length = _ask_length(stdin, stdout)
    if length is None:
        return
    stdout.write("\nRealizando ataque brute-force...\n")
    stdout.write(transposition.format_brute_force(transposition.brute_force(text, length)))


def _frequency(path: Path, stdin: TextIO, stdout: TextIO, clear: Callable[[], None]) -> None:
    clear()
    warn(path, stdin, stdout)
    text = read_input(path)
    length = _ask_length(stdin, stdout)
    if length is None:
        return
    best = transposition.frequency_attack(text, length)[0]
    stdout.write(f"\n\nMelhor score pela analise: {best.score:g}\n")
    stdout.write(f"Mensagem decifrada:\n\n{best.text}\n")
    stdout.write(
        "\nPermutacao utilizada : "
        + "".join(f"{column} " for column in best.permutation)
        + "\n"
    )


_ACTIONS = {1: _encrypt, 2: _decrypt, 3: _brute_force, 4: _frequency}
_EXIT = 5


def run(
    input_path: str | Path = INPUT_FILE,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    clear: Callable[[], None] | None = None,
) -> int:
    """Show the menu until the user leaves or input ends; return the exit status."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    clear = clear_screen if clear is None else clear
    path = ensure_input(input_path)
    while True:
        clear()
        stdout.write(MENU)
        stdout.flush()
        line = stdin.readline()
        if not line:
            return 0
        clear()
        words = line.split()
        try:
            option = int(words[0]) if words else None
        except ValueError:
            option = None
        if option == _EXIT:
            stdout.write("Encerrando programa...\n")
            return 0
        action = _ACTIONS.get(option)
        if action is None:
            stdout.write("Opcao invalida!\n")
        else:
            action(path, stdin, stdout, clear)
        pause(stdin, stdout)


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point of the transposition cipher menu."""
    parser = argparse.ArgumentParser(description="Simulador de cifra por transposicao.")
    parser.add_argument(
        "-i", "--input", default=INPUT_FILE, help="arquivo com o texto a processar"
    )
    args = parser.parse_args(argv)
    return run(args.input)


if __name__ == "__main__":
    sys.exit(main())