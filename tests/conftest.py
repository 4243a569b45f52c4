import typing

import pytest

import scalespeller.catalogue


CATALOGUE_TEXT = """Name;Difficulty;Degrees
Major;Easy;1,2,3,4,5,6,7
Natural minor;Easy;1,2,b3,4,5,b6,b7
Dorian;Medium;1,2,b3,4,5,6,b7
Mixolydian;Medium;1,2,3,4,5,6,b7
Lydian;Hard;1,2,3,#4,5,6,7
Locrian;Hard;1,b2,b3,4,b5,b6,b7
"""


@pytest.fixture
def catalogue_lines () -> typing.List[str]:

	"""Catalogue rows as read from a file, header included."""

	return CATALOGUE_TEXT.splitlines(keepends=True)


@pytest.fixture
def catalogue (catalogue_lines: typing.List[str]) -> scalespeller.catalogue.ScaleCatalogue:

	"""A small catalogue with two scales per difficulty."""

	return scalespeller.catalogue.ScaleCatalogue.from_lines(catalogue_lines)


@pytest.fixture
def catalogue_file (tmp_path: typing.Any) -> str:

	"""The sample catalogue written to a temporary file."""

	path = tmp_path / "scales.csv"
	path.write_text(CATALOGUE_TEXT, encoding="utf-8")

	return str(path)
