"""Interactive menu for encrypting, decrypting and attacking the Caesar cipher."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, TextIO

from cifras import caesar
from cifras.console import clear_screen, ensure_input, pause, read_input, warn

INPUT_FILE = "input.txt"

MENU = (
    "       SIMULADOR DE CIFRA DE CESAR \n\n"
    "1. Criptografar texto\n"
    "2. Descriptografar texto\n"
    "3. Ataque por brute-force\n"
    "4. Ataque por distribuicao de frequencias\n"
    "5. Sair\n"
    "\nEscolha uma opcao: "
)

KEY_PROMPT = "Digite a chave de deslocamento (1-25): "


def _read_int(stdin: TextIO) -> int | None:
    words = stdin.readline().split()
    if not words:
        return None
    try:
        return int(words[0])
    except ValueError:
        return None


def _ask_key(stdin: TextIO, stdout: TextIO) -> int | None:
    stdout.write(KEY_PROMPT)
    stdout.flush()
    key = _read_int(stdin)
    if key is None:
        stdout.write("\nChave invalida!\n")
    return key


def _encrypt(path: Path, stdin: TextIO, stdout: TextIO, clear: Callable[[], None]) -> None:
    clear()
    warn(path, stdin, stdout)
    text = read_input(path)
    key = _ask_key(stdin, stdout)
    if key is None:
        return
    stdout.write(f"\n\nMensagem criptografada:\n{caesar.encode(text, key)}\n")


def _decrypt(path: Path, stdin: TextIO, stdout: TextIO, clear: Callable[[], None]) -> None:
    clear()
    warn(path, stdin, stdout)
    text = read_input(path)
    key = _ask_key(stdin, stdout)
    if key is None:
        return
    stdout.write(f"\n\nMensagem descriptografada:\n{caesar.decode(text, key)}\n")


def _brute_force(path: Path, stdin: TextIO, stdout: TextIO, clear: Callable[[], None]) -> None:
    clear()
    warn(path, stdin, stdout)
    text = read_input(path)
    stdout.write("\nRealizando ataque brute-force...\n")
    stdout.write(caesar.format_brute_force(caesar.brute_force(text)))


def _frequency(path: Path, stdin: TextIO, stdout: TextIO, clear: Callable[[], None]) -> None:
    clear()
    warn(path, stdin, stdout)
    text = read_input(path)
    key = caesar.find_key_by_frequency(text)
    stdout.write(f"\n\nChave encontrada: {key}\n")
    stdout.write(f"Mensagem decifrada:\n{caesar.decode(text, key)}\n")


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
    """Command-line entry point of the Caesar cipher menu."""
    parser = argparse.ArgumentParser(description="Simulador de cifra de Cesar.")
    parser.add_argument(
        "-i", "--input", default=INPUT_FILE, help="arquivo com o texto a processar"
    )
    args = parser.parse_args(argv)
    return run(args.input)


if __name__ == "__main__":
    sys.exit(main())