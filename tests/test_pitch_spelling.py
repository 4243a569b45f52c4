import pytest

import scalespeller.errors
import scalespeller.naming
import scalespeller.note
import scalespeller.pitch_map


Naming = scalespeller.naming.Naming
Note = scalespeller.note.Note


def spell (root: str, degree: int, accidental: int = 0) -> Note:

	"""Shorthand for spelling a degree above a named root."""

	return Note.from_scale_degree(Note(root), degree, accidental)


# ── Single octave ────────────────────────────────────────────────────

def test_major_third_of_c () -> None:

	"""Degree 3 of C4 is E4."""

	note = spell("C4", 3)

	assert note.namings == (Naming(2, 0),)
	assert note.pitch == 64
	assert note.complex_name() == "E4 (64)"


def test_flat_third_of_c () -> None:

	"""The flat third of C is spelled Eb, not D#."""

	note = spell("C4", 3, -1)

	assert note.namings == (Naming(2, -1),)
	assert note.pitch == 63


def test_c_major_degrees () -> None:

	"""Degrees 1-7 of C4 are the white keys C4-B4."""

	names = [spell("C4", degree).name() for degree in range(1, 8)]
	pitches = [spell("C4", degree).pitch for degree in range(1, 8)]

	assert names == ["C", "D", "E", "F", "G", "A", "B"]
	assert pitches == [60, 62, 64, 65, 67, 69, 71]


@pytest.mark.parametrize("root, degree, accidental, expected", [
	("F#", 7, -1, "E"),
	("F#", 3, -1, "A"),
	("F#", 2, 0, "G#"),
	("F#", 5, 0, "C#"),
	("Eb", 6, -1, "Cb"),
	("Eb", 7, -1, "Db"),
	("Db", 4, 1, "G"),
	("B", 2, 0, "C#"),
	("Bb", 7, 0, "A"),
	("B#", 2, 0, "C##"),
	("B#", 7, 0, "A##"),
	("Cb", 7, 0, "Bb"),
	("Cb", 2, 0, "Db"),
	("E#", 2, 0, "F##"),
	("Fb", 2, 0, "Gb"),
	("Fb", 7, 0, "Eb"),
	("Dbb", 7, 0, "Cb"),
	("G##", 3, -1, "B#"),
	("A", 4, 1, "D#"),
	("A", 5, -1, "Eb"),
])
def test_spelling_follows_letters (root: str, degree: int, accidental: int, expected: str) -> None:

	"""The letter comes from the degree and the accidental absorbs the rest."""

	assert spell(root, degree, accidental).name() == expected


def test_name_only_root_gives_name_only_note () -> None:

	"""A root without a pitch produces a note without a pitch."""

	note = spell("F#", 7, -1)

	assert note.has_name
	assert not note.has_pitch


def test_pitch_only_root_gives_pitch_only_note () -> None:

	"""A root without names produces a note without names."""

	note = Note.from_scale_degree(Note(61, generate_names=False), 3)

	assert note.pitch == 65
	assert not note.has_name
	assert str(note) == "65"


def test_degree_one_is_the_root () -> None:

	"""Degree 1 with no accidental reproduces the root."""

	assert Note.from_scale_degree(Note("Eb4"), 1) == Note("Eb4")


# ── Errors ───────────────────────────────────────────────────────────

@pytest.mark.parametrize("root", [
	Note(),
	Note("F#"),
	Note(61),
	Note(61, generate_names=False),
])
def test_degree_zero_rejected (root: Note) -> None:

	"""There is no 0th scale degree, whatever the root."""

	with pytest.raises(scalespeller.errors.InvalidScaleDegree, match="1-based"):
		Note.from_scale_degree(root, 0)


def test_negative_degree_rejected () -> None:

	"""Negative degrees are rejected like degree 0."""

	with pytest.raises(scalespeller.errors.InvalidScaleDegree):
		Note.from_scale_degree(Note(), -2)


def test_enharmonic_root_is_ambiguous () -> None:

	"""A root spelled two ways cannot decide the letter of other degrees."""

	with pytest.raises(scalespeller.errors.AmbiguousRoot):
		Note.from_scale_degree(Note(61, generate_names=True), 3)

	with pytest.raises(scalespeller.errors.AmbiguousRoot):
		Note.from_scale_degree(Note(66), 5, -1)


def test_pitch_only_root_from_enharmonic_pitch () -> None:

	"""Dropping the generated names gives a pitch-only result instead of an error."""

	fifth = Note.from_scale_degree(Note(61, generate_names=False), 5)

	assert fifth.pitch == 68
	assert not fifth.has_name


def test_root_without_information () -> None:

	"""A root with neither pitch nor name raises NoInformation."""

	with pytest.raises(scalespeller.errors.NoInformation):
		Note.from_scale_degree(Note._from_parts(None, ()), 2)


# ── Octave-crossing degrees ──────────────────────────────────────────

@pytest.mark.parametrize("degree, accidental, expected", [
	(8, 0, "C5 (72)"),
	(9, 0, "D5 (74)"),
	(9, -1, "Db5 (73)"),
	(10, -1, "Eb5 (75)"),
	(11, 1, "F#5 (78)"),
	(12, 0, "G5 (79)"),
	(13, -1, "Ab5 (80)"),
	(14, 0, "B5 (83)"),
	(15, 0, "C6 (84)"),
])
def test_compound_degrees_of_c (degree: int, accidental: int, expected: str) -> None:

	"""Degrees 8-15 of C4 land in the next octave with the simple degree's letter."""

	assert spell("C4", degree, accidental).complex_name() == expected


@pytest.mark.parametrize("degree, accidental, expected", [
	(8, 0, "F#5 (78)"),
	(9, 0, "G#5 (80)"),
	(10, -1, "A5 (81)"),
	(11, 1, "B#5 (84)"),
	(12, 0, "C#6 (85)"),
	(13, -1, "D6 (86)"),
	(14, -1, "E6 (88)"),
])
def test_compound_degrees_of_sharp_root (degree: int, accidental: int, expected: str) -> None:

	"""Compound degrees of F#4 keep sharp-root spelling, including the octave itself."""

	assert spell("F#4", degree, accidental).complex_name() == expected


@pytest.mark.parametrize("root, degree, expected", [
	("C#", 8, "C#"),
	("Fb", 14, "Eb"),
	("Bb", 8, "Bb"),
	("Cb", 14, "Bb"),
	("B#", 9, "C##"),
])
def test_compound_degrees_match_simple_degrees (root: str, degree: int, expected: str) -> None:

	"""A compound degree is spelled like the same degree within one octave."""

	assert spell(root, degree).name() == expected
	assert spell(root, degree - 7).name() == expected


def test_octave_follows_written_letter () -> None:

	"""B#4 and Cb4 stay in octave 4 even though their pitches cross the C boundary."""

	assert spell("C4", 7, 1).complex_name() == "B#4 (72)"
	assert spell("Cb4", 7).complex_name() == "Bb4 (70)"
	assert spell("B#3", 2).complex_name() == "C##4 (62)"
	assert spell("Db4", 7, -1).complex_name() == "Cb5 (71)"


def test_spelled_name_agrees_with_pitch () -> None:

	"""For every root, degree 1-14 and accidental -2..2, name, octave and pitch are consistent."""

	roots = ["C4", "F#3", "Bb2", "Cb4", "B#3", "E#5", "Fb4", "Dbb4", "G##2", "Ab-1"]

	for root_name in roots:

		root = Note(root_name)

		for degree in range(1, 15):
			for accidental in range(-2, 3):

				note = Note.from_scale_degree(root, degree, accidental)
				naming = note.namings[0]

				assert naming.letter == (root.namings[0].letter + degree - 1) % 7
				assert scalespeller.pitch_map.pitch_from_spelling(naming.letter, naming.accidental, note.octave) == note.pitch
				assert note.pitch - root.pitch == scalespeller.pitch_map.degree_offset(degree - 1) + accidental
