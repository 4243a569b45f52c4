"""Constant lookup tables relating semitone offsets to letter names.

Convention: **C4 = 60** (Middle C), 12 semitones per octave, 7 letters per
octave. Letters are indexed 0-6 from C (0 = C, 1 = D, ... 6 = B) regardless
of the naming style used to display them.

Module-level constants:
- `OFFSET_TO_NAMINGS`: semitone offset above C (0-11) -> every
  ``(letter, accidental)`` spelling of that offset using at most one
  accidental. Offsets that need an accidental list the sharp spelling first.
- `LETTER_TO_OFFSET`: letter index (0-6) -> semitone offset above C.

The tables are immutable tuples built once at import time and are safe to
read from any number of threads.
"""

import typing


MIDDLE_C_PITCH = 60
MIDDLE_C_OCTAVE = 4
NOTES_PER_OCTAVE = 12
LETTERS_PER_OCTAVE = 7


LETTER_TO_OFFSET: typing.Tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)


OFFSET_TO_NAMINGS: typing.Tuple[typing.Tuple[typing.Tuple[int, int], ...], ...] = (
	((0, 0),),
	((0, 1), (1, -1)),
	((1, 0),),
	((1, 1), (2, -1)),
	((2, 0),),
	((3, 0),),
	((3, 1), (4, -1)),
	((4, 0),),          # Perfect fifth
	((4, 1), (5, -1)),
	((5, 0),),
	((5, 1), (6, -1)),
	((6, 0),),
)


def pitch_offset (pitch: int) -> int:

	"""
	Return the semitone offset (0-11) of a pitch above the nearest C at or below it.
	"""

	# Python's modulo is already non-negative for a positive divisor.
	return (pitch - MIDDLE_C_PITCH) % NOTES_PER_OCTAVE


def namings_for_pitch (pitch: int) -> typing.List[typing.Tuple[int, int]]:

	"""Return every single-accidental ``(letter, accidental)`` spelling of a pitch.

	Parameters:
		pitch: Absolute pitch value (60 = C4). Negative values are allowed.

	Returns:
		One pair for natural notes, two pairs (sharp first, then flat) for
		notes that need an accidental.

	Example:
		```python
		namings_for_pitch(60)  # → [(0, 0)]            C
		namings_for_pitch(61)  # → [(0, 1), (1, -1)]   C# / Db
		```
	"""

	return list(OFFSET_TO_NAMINGS[pitch_offset(pitch)])


def letter_offset (letter: int) -> int:

	"""
	Return the semitone offset of a natural letter above C.
	"""

	if not 0 <= letter < LETTERS_PER_OCTAVE:
		raise ValueError(f"Letter index must be 0-{LETTERS_PER_OCTAVE - 1}, got {letter}")

	return LETTER_TO_OFFSET[letter]


def degree_offset (zero_based_degree: int) -> int:

	"""Return the semitone distance of a natural (major-scale) degree above the tonic.

	Degrees past the seventh continue into the following octaves, so degree
	index 7 (the octave) is 12 and index 9 (the tenth) is 16.
	"""

	octaves, step = divmod(zero_based_degree, LETTERS_PER_OCTAVE)

	return LETTER_TO_OFFSET[step] + NOTES_PER_OCTAVE * octaves


def octave_of (pitch: int) -> int:

	"""Return the octave number of a pitch, with octaves starting on C.

	Floor division keeps pitches below middle C correct: 59 is in octave 3,
	48 is in octave 3 and 47 is in octave 2.
	"""

	return MIDDLE_C_OCTAVE + (pitch - MIDDLE_C_PITCH) // NOTES_PER_OCTAVE


def pitch_from_spelling (letter: int, accidental: int, octave: int) -> int:

	"""
	Return the pitch of a spelled note in a written octave (``C4`` → 60, ``B#3`` → 60).
	"""

	return (
		MIDDLE_C_PITCH
		+ (octave - MIDDLE_C_OCTAVE) * NOTES_PER_OCTAVE
		+ letter_offset(letter)
		+ accidental
	)
