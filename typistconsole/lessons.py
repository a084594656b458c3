"""Practice sentences and random lesson assembly."""

from __future__ import annotations

import random
from typing import Protocol, Sequence

# Each row pairs an English sentence with a Spanish one; the lesson pool
# alternates between the two languages in row order.
_SENTENCE_PAIRS = """
The quick brown fox jumps over the lazy dog. | El sol brilla sobre el campo verde y calido.
Pack my box with five dozen liquor jugs. | Cada dia trae nuevas oportunidades para mejorar.
How razorback-jumping frogs can level six piqued gymnasts. | Mi gato juega con una pelota de papel.
Sphinx of black quartz, judge my vow. | Hoy es un buen dia para comenzar de nuevo.
Just keep typing and do not look back. | La vida es mejor cuando uno aprende cosas nuevas.
Programming is the art of telling another human what one wants the computer to do. | La practica constante es el camino hacia la maestria en mecanografia.
The five boxing wizards jump quickly. | Aprendiendo a teclear con velocidad y precision.
Jackdaws love my big sphinx of quartz. | El conocimiento es la llave que abre las puertas del futuro.
Typing tutor applications help improve your keyboard skills. | La paciencia y la perseverancia son virtudes del buen mecanografo.
Bright vixens jump; dozy fowl quack. | Cada error es una oportunidad para mejorar tu precision.
"""

LESSONS: tuple[str, ...] = tuple(
    sentence.strip()
    for row in _SENTENCE_PAIRS.strip().splitlines()
    for sentence in row.split(" | ")
)

SENTENCES_PER_LESSON = 10
_WORDS_PER_BREAK = 5


class _Rng(Protocol):
    def choice(self, seq: Sequence[str]) -> str: ...

    def random(self) -> float: ...


def get_random_lesson(rng: _Rng | None = None) -> str:
    """Build a lesson from randomly chosen sentences.

    Each sentence is followed by a space. Whenever the total word count is a
    multiple of five, a line break is added with probability one half.
    """
    rng = rng if rng is not None else random.Random()
    parts: list[str] = []
    words = 0
    for _ in range(SENTENCES_PER_LESSON):
        sentence = rng.choice(LESSONS) if LESSONS else ""
        parts.append(sentence + " ")
        words += len(sentence.split())
        if words % _WORDS_PER_BREAK == 0 and rng.random() < 0.5:
            parts.append("\n")
    return "".join(parts)