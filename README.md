# cifras

This package has two classical ciphers and the attacks that break them.

- **Caesar cipher** (`cifras.caesar`): each ASCII letter is shifted and keeps its case. Other characters are left as they are. The cipher can be broken by brute force over the keys 1 to 25 (`brute_force`). It can also be broken by letter-frequency analysis against Portuguese letter distributions (`letter_frequencies`, `find_key_by_frequency`).
- **Columnar transposition** (`cifras.transposition`): the message is written row by row under a keyword, then read out column by column in the keyword's sorted character order. Short rows are padded with `X`. The cipher can be broken by brute force over every column permutation of a given key length (`brute_force`). The attack can also rank the candidates by a score built from common Portuguese digraphs and trigraphs (`score`, `frequency_attack`). `frequency_attack` returns `Candidate` objects, each with `text`, `score` and `permutation`, best first. An empty key or a key length below 1 raises `ValueError`.

## Installation

```
pip install .
```

## Library use

```python
from cifras import caesar, transposition

cifrado = caesar.encode("Ataque ao amanhecer", 3)
caesar.decode(cifrado, 3)              # "Ataque ao amanhecer"
deslocamento = caesar.find_key_by_frequency(cifrado)
for text, k in caesar.brute_force(cifrado):
    ...
print(caesar.format_brute_force(caesar.brute_force(cifrado)))

colunas = transposition.encode("atacarpelonorte", "GAME")
transposition.decode(colunas, "GAME")  # "atacarpelonorteX"
best = transposition.frequency_attack(colunas, 4)[0]
print(best.text, best.score, best.permutation)
```

## Interactive menus

Each cipher has its own text menu. The menu reads the message from a file. By default the file is in the current directory. If the file does not exist yet, the menu creates it with placeholder text.

```
cifra-cesar                  # uses input.txt
cifra-transposicao           # uses input2.txt
cifra-cesar -i mensagem.txt  # uses another file
```

The menu offers these options:

1. encrypt the file's text
2. decrypt it
3. brute-force attack
4. frequency-analysis attack
5. quit

Edit the input file before you choose an operation. The menus clear the terminal between screens. A menu ends when you choose 5 or when its input runs out. Results are printed to the terminal only. Nothing is written back to the input file or saved anywhere else.

## Tests

```
pip install .[test]
pytest
```