# typistconsole

A typing tutor that runs in your terminal. Each lesson is built from ten
randomly chosen sentences, some in English and some in Spanish. As you type,
each character is marked as correct or wrong. When you finish, the program
shows your speed and accuracy. The screens are in Spanish.

## Installation

```
pip install .
```

## Usage

Start the program:

```
typistconsole
```

The main menu has three options:

- **[1] Practicar**: start a typing session.
- **[2] Ver progreso**: shows a "Próximamente..." notice. Press any key to
  close it.
- **[3] Salir**: quit.

Press an option's number to choose it. You can also move with the ↑ and ↓ keys
and press Enter. Esc quits.

### During practice

- The target text is shown at the top:
  - correctly typed characters are green and bold;
  - wrongly typed characters are red;
  - the next character to type is highlighted and underlined.
- Below the text you see what you have typed so far and the next expected
  character.
- Backspace deletes the last character you typed. A wrong keystroke still
  counts as a mistake after you delete it.
- Once the whole lesson has been typed, further keys are ignored.
- Esc ends the session and returns to the menu.

When the lesson is complete, a results screen shows:

- characters typed
- errors
- accuracy (%)
- words per minute

Words per minute counts five characters as one word. Press Esc to return to
the menu.

## Using it as a library

```python
import random

from typistconsole.lessons import get_random_lesson
from typistconsole.session import PracticeSession, format_results

session = PracticeSession(get_random_lesson(random.Random(1)))
for ch in "The quick":
    session.type_char(ch)
print(session.next_char())
print(session.char_states()[:3])
stats = session.finish(seconds=30.0)
print(stats.accuracy())
print(format_results(stats))
```

- `typistconsole.lessons.get_random_lesson(rng=None)` builds a lesson. `rng`
  can be any object that has `choice` and `random` methods.
- `PracticeSession` keeps track of typed text and mistakes. It has
  `type_char`, `backspace`, `is_complete`, `next_char`, `char_states` and
  `finish`.
- `compute_wpm(chars, seconds)` returns words per minute.
- `TypingStats` holds the figures for one session. You can convert it with
  `to_dict` and `from_dict`.
- `StoredStats` holds totals and averages over many sessions. You can convert
  it with `to_json` and `from_json`.
- `typistconsole.app` contains the menu (`Menu`, `MenuAction`), `centered_rect`,
  `show_popup`, `run_app` and the `main` command entry point.

## What it does not do

The package does not save results or keep a history of sessions. The "Ver
progreso" menu entry only shows a notice. `StoredStats` can be converted to and
from JSON, but nothing in the package writes it to disk or reads it back.

## Running the tests

```
pip install .[test]
pytest
```