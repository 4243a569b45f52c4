import pytest

import scalespeller.errors
import scalespeller.naming


Naming = scalespeller.naming.Naming


# ── Rendering ────────────────────────────────────────────────────────

def test_render_english () -> None:

	"""English names use b and #, repeated per accidental."""

	assert scalespeller.naming.render_naming(Naming(0, 0)) == "C"
	assert scalespeller.naming.render_naming(Naming(6, -1)) == "Bb"
	assert scalespeller.naming.render_naming(Naming(3, 1)) == "F#"
	assert scalespeller.naming.render_naming(Naming(1, -2)) == "Dbb"
	assert scalespeller.naming.render_naming(Naming(4, 2)) == "G##"


def test_render_german_b_and_h () -> None:

	"""German writes B natural as H and B flat as B."""

	german = scalespeller.naming.GERMAN

	assert scalespeller.naming.render_naming(Naming(6, 0), german) == "H"
	assert scalespeller.naming.render_naming(Naming(6, -1), german) == "B"
	assert scalespeller.naming.render_naming(Naming(6, -2), german) == "Bb"
	assert scalespeller.naming.render_naming(Naming(6, 1), german) == "H#"
	assert scalespeller.naming.render_naming(Naming(2, -1), german) == "Eb"


def test_render_french_multi_character_tokens () -> None:

	"""French accidentals are whole words, repeated per accidental."""

	french = scalespeller.naming.FRENCH

	assert scalespeller.naming.render_naming(Naming(4, 0), french) == "Sol"
	assert scalespeller.naming.render_naming(Naming(3, 1), french) == "Fa diese"
	assert scalespeller.naming.render_naming(Naming(6, -2), french) == "Si bemol bemol"


def test_accidental_symbols () -> None:

	"""Accidental tokens follow the style unless ASCII is requested."""

	assert scalespeller.naming.accidental_symbols(0) == ""
	assert scalespeller.naming.accidental_symbols(-3) == "bbb"
	assert scalespeller.naming.accidental_symbols(2) == "##"
	assert scalespeller.naming.accidental_symbols(-2, scalespeller.naming.FRENCH) == " bemol bemol"
	assert scalespeller.naming.accidental_symbols(-2, scalespeller.naming.FRENCH, ascii_only=True) == "bb"


def test_naming_rejects_bad_letter () -> None:

	"""Letters outside 0-6 are refused."""

	with pytest.raises(ValueError):
		Naming(7, 0)

	with pytest.raises(ValueError):
		Naming(-1, 0)


def test_naming_offset () -> None:

	"""The offset of a spelling may fall outside 0-11."""

	assert Naming(2, -1).offset == 3
	assert Naming(0, -1).offset == -1
	assert Naming(6, 1).offset == 12


# ── Parsing ──────────────────────────────────────────────────────────

def test_parse_english () -> None:

	"""Letter, accidentals and optional octave."""

	assert scalespeller.naming.parse_name("C") == (Naming(0, 0), None)
	assert scalespeller.naming.parse_name("Bb4") == (Naming(6, -1), 4)
	assert scalespeller.naming.parse_name("F#") == (Naming(3, 1), None)
	assert scalespeller.naming.parse_name("Ebb3") == (Naming(2, -2), 3)
	assert scalespeller.naming.parse_name("C##5") == (Naming(0, 2), 5)
	assert scalespeller.naming.parse_name("A-1") == (Naming(5, 0), -1)
	assert scalespeller.naming.parse_name("  G7 ") == (Naming(4, 0), 7)


def test_parse_german () -> None:

	"""German B is B flat and H is B natural."""

	german = scalespeller.naming.GERMAN

	assert scalespeller.naming.parse_name("H", german) == (Naming(6, 0), None)
	assert scalespeller.naming.parse_name("B3", german) == (Naming(6, -1), 3)
	assert scalespeller.naming.parse_name("Bb", german) == (Naming(6, -2), None)
	assert scalespeller.naming.parse_name("Eb4", german) == (Naming(2, -1), 4)


def test_parse_french () -> None:

	"""French names accept both the word tokens and ASCII symbols."""

	french = scalespeller.naming.FRENCH

	assert scalespeller.naming.parse_name("Sol", french) == (Naming(4, 0), None)
	assert scalespeller.naming.parse_name("Sol bemol", french) == (Naming(4, -1), None)
	assert scalespeller.naming.parse_name("Fa diese4", french) == (Naming(3, 1), 4)
	assert scalespeller.naming.parse_name("Sib", french) == (Naming(6, -1), None)


def test_parse_rejects_unknown_letter () -> None:

	"""Unknown letters raise InvalidName."""

	with pytest.raises(scalespeller.errors.InvalidName):
		scalespeller.naming.parse_name("X4")

	with pytest.raises(scalespeller.errors.InvalidName):
		scalespeller.naming.parse_name("")

	with pytest.raises(scalespeller.errors.InvalidName):
		scalespeller.naming.parse_name("H")

	with pytest.raises(scalespeller.errors.InvalidName):
		scalespeller.naming.parse_name("Do", scalespeller.naming.ENGLISH)


def test_parse_rejects_flats_and_sharps () -> None:

	"""A name may not mix flats and sharps, in either order."""

	with pytest.raises(scalespeller.errors.InvalidName, match="both flats and sharps"):
		scalespeller.naming.parse_name("Cb#4")

	with pytest.raises(scalespeller.errors.InvalidName):
		scalespeller.naming.parse_name("C#b4")


def test_parse_rejects_trailing_text () -> None:

	"""The whole string must match the grammar."""

	with pytest.raises(scalespeller.errors.InvalidName):
		scalespeller.naming.parse_name("C4x")

	with pytest.raises(scalespeller.errors.InvalidName):
		scalespeller.naming.parse_name("C 4")


def test_parse_german_rejects_sharpened_b () -> None:

	"""German B already carries a flat, so B# is meaningless."""

	with pytest.raises(scalespeller.errors.InvalidName):
		scalespeller.naming.parse_name("B#", scalespeller.naming.GERMAN)


def test_invalid_name_is_value_error () -> None:

	"""InvalidName can be caught as ValueError."""

	with pytest.raises(ValueError):
		scalespeller.naming.parse_name("Q")


# ── Style lookup ─────────────────────────────────────────────────────

def test_get_style () -> None:

	"""Styles are found by case-insensitive name."""

	assert scalespeller.naming.get_style("english") is scalespeller.naming.ENGLISH
	assert scalespeller.naming.get_style("German") is scalespeller.naming.GERMAN
	assert scalespeller.naming.get_style(" FRENCH ") is scalespeller.naming.FRENCH


def test_get_style_unknown () -> None:

	"""Unknown style names raise ValueError."""

	with pytest.raises(ValueError, match="Unknown naming style"):
		scalespeller.naming.get_style("klingon")
