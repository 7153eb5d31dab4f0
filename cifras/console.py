"""Terminal helpers shared by the interactive cipher menus."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import TextIO

DEFAULT_TEXT = "Texto padrao para testes. Substitua este conteudo.\n"
PAUSE_PROMPT = "\nPressione Enter para continuar..."


def clear_screen() -> None:
    """Clear the terminal using the platform's clear command."""
    try:
        if sys.platform.startswith("win"):
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass


def pause(stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Ask the user to press Enter and wait for one line of input."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stdout.write(PAUSE_PROMPT)
    stdout.flush()
    stdin.readline()


def ensure_input(path: str | Path) -> Path:
    """Create the input file with placeholder text unless it already exists."""
    path = Path(path)
    if not path.exists():
        path.write_text(DEFAULT_TEXT, encoding="utf-8")
    return path


def read_input(path: str | Path) -> str:
    """Return the whole content of the input file, or an empty string if it is missing."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except FileNotFoundError:
        return ""


def warn(
    path: str | Path,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Tell the user which file is about to be used and wait for confirmation."""
    stdout = sys.stdout if stdout is None else stdout
    name = Path(path).name
    stdout.write("ATENCAO:\n")
    stdout.write(
        f"O texto salvo no arquivo {name} sera utilizado para as seguintes operacoes.\n"
    )
    stdout.write("Caso deseje alterar o plaintext, faca isso antes de prosseguir.")
    pause(stdin, stdout)