from __future__ import annotations

import unicodedata

import pytest

from core.models import NAMING_CONVENTION_ERROR
from core.services.filename_parser import is_uppercase_token, parse_filename, strip_extension

YEAR_2021 = "Année de 1ère inscription 2021"


def test_one_word_city():
    rec = parse_filename("DOE John PARIS Année de 1ère inscription 2021.jpg")
    assert rec.name == "DOE John"
    assert rec.city == "PARIS"
    assert rec.year == YEAR_2021
    assert rec.error_message == ""
    assert not rec.has_error


def test_two_word_city():
    rec = parse_filename("DOE John SAINT ETIENNE Année de 1ère inscription 2021.jpg")
    assert rec.name == "DOE John"
    assert rec.city == "SAINT ETIENNE"
    assert rec.error_message == ""


def test_st_abbreviation_counts_as_uppercase():
    rec = parse_filename("DOE John St ETIENNE Année de 1ère inscription 2021.jpg")
    assert rec.name == "DOE John"
    assert rec.city == "St ETIENNE"
    assert rec.error_message == ""


def test_compound_first_name_is_kept_in_name():
    rec = parse_filename("MARTIN Jean Pierre LYON Année de 1ère inscription 2019.png")
    assert rec.name == "MARTIN Jean Pierre"
    assert rec.city == "LYON"
    assert rec.year == "Année de 1ère inscription 2019"


@pytest.mark.parametrize(
    "filename, expected_name",
    [
        ("DOE John PARIS 2021.jpg", "DOE John PARIS 2021"),
        ("photo.jpeg", "photo"),
        ("no_extension", "no_extension"),
        ("archive.tar.gz", "archive.tar"),
    ],
)
def test_missing_marker(filename, expected_name):
    rec = parse_filename(filename)
    assert rec.name == expected_name
    assert rec.city == ""
    assert rec.year == ""
    assert rec.error_message == NAMING_CONVENTION_ERROR


def test_fewer_than_three_tokens():
    rec = parse_filename("DOE Année de 1ère inscription 2021.jpg")
    assert rec.name == "DOE"
    assert rec.city == ""
    assert rec.year == YEAR_2021
    assert rec.error_message == NAMING_CONVENTION_ERROR


def test_two_tokens_is_still_an_error():
    rec = parse_filename("DOE John Année de 1ère inscription 2021.jpg")
    assert rec.name == "DOE John"
    assert rec.city == ""
    assert rec.has_error


def test_lowercase_last_token_is_an_error():
    rec = parse_filename("DOE John Paris Année de 1ère inscription 2021.jpg")
    assert rec.name == "DOE John Paris"
    assert rec.city == ""
    assert rec.year == YEAR_2021
    assert rec.error_message == NAMING_CONVENTION_ERROR


def test_city_keeps_original_spelling():
    rec = parse_filename("DOE Jane St DENIS Année de 1ère inscription 2020.jpg")
    assert rec.city == "St DENIS"


def test_image_reference_is_passed_through():
    image = "data:image/png;base64,AAAA"
    rec = parse_filename("DOE John PARIS Année de 1ère inscription 2021.png", image)
    assert rec.image is image


def test_path_is_reduced_to_base_name():
    rec = parse_filename("/tmp/photos/DOE John PARIS Année de 1ère inscription 2021.jpg")
    assert rec.name == "DOE John"


def test_decomposed_accents_still_match_marker():
    filename = unicodedata.normalize("NFD", "DOE John PARIS Année de 1ère inscription 2021.jpg")
    rec = parse_filename(filename)
    assert rec.city == "PARIS"
    assert rec.year == YEAR_2021


def test_year_suffix_is_trimmed():
    rec = parse_filename("DOE John PARIS Année de 1ère inscription   2022  .jpg")
    assert rec.year == "Année de 1ère inscription 2022"


def test_strip_extension_only_removes_last_segment():
    assert strip_extension("a.b.c") == "a.b"
    assert strip_extension("abc") == "abc"


@pytest.mark.parametrize(
    "token, expected",
    [("PARIS", True), ("St", True), ("ST", True), ("Paris", False), ("john", False)],
)
def test_is_uppercase_token(token, expected):
    assert is_uppercase_token(token) is expected


def test_decomposed_name_is_stored_composed():
    composed = "LEFÈVRE Zoé NÎMES Année de 1ère inscription 2021.jpg"
    filename = unicodedata.normalize("NFD", composed)
    rec = parse_filename(filename)
    assert rec.name == "LEFÈVRE Zoé"
    assert rec.name == unicodedata.normalize("NFC", rec.name)
    assert rec.city == "NÎMES"
