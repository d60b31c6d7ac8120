"""Filename parser for the board naming convention.

Files are expected to be named::

    NOM Prénom VILLE Année de 1ère inscription AAAA.jpg

The city is one or two ALL-CAPS tokens right before the marker ("St" counts
as uppercase so that "St ETIENNE" is accepted). Parsing never raises: a
filename that does not follow the convention yields a record whose
`error_message` is set to `NAMING_CONVENTION_ERROR`.
"""

from __future__ import annotations

from pathlib import PurePath
import re
import unicodedata

from core.models import NAMING_CONVENTION_ERROR, PersonRecord

YEAR_MARKER = "Année de 1ère inscription"

_EXTENSION_RE = re.compile(r"\.[^/.]+$")
_MARKER_RE = re.compile(rf"^(.*){re.escape(YEAR_MARKER)}(.*)$")


def strip_extension(filename: str) -> str:
    """Remove the last extension segment, if any."""
    return _EXTENSION_RE.sub("", filename, count=1)


def is_uppercase_token(token: str) -> bool:
    """Return True if `token` is all-uppercase, treating "St" as "ST"."""
    return token.upper() == token.replace("St", "ST", 1)


def parse_filename(filename: str, image: str | None = None) -> PersonRecord:
    """Parse `filename` into a `PersonRecord`.

    The base name is NFC-normalized before matching, so a name given in
    decomposed form (NFD) is stored in composed form.

    Args:
        filename: File name (a path is accepted; only its base name is used).
        image: Opaque image reference merged into the record unchanged.

    Returns:
        The parsed record. `error_message` is empty when the name, city and
        year could all be identified.
    """
    base_name = unicodedata.normalize("NFC", PurePath(filename).name)
    name_without_ext = strip_extension(base_name)

    match = _MARKER_RE.match(name_without_ext)
    if match is None:
        return PersonRecord(
            name=name_without_ext,
            city="",
            year="",
            image=image,
            error_message=NAMING_CONVENTION_ERROR,
        )

    name_part = match.group(1).strip()
    year = f"{YEAR_MARKER} {match.group(2).strip()}"

    tokens = name_part.split(" ")
    if len(tokens) < 3:
        return PersonRecord(
            name=name_part,
            city="",
            year=year,
            image=image,
            error_message=NAMING_CONVENTION_ERROR,
        )

    last = tokens[-1]
    if not is_uppercase_token(last):
        return PersonRecord(
            name=" ".join(tokens).strip(),
            city="",
            year=year,
            image=image,
            error_message=NAMING_CONVENTION_ERROR,
        )

    second_last = tokens[-2]
    if is_uppercase_token(second_last):
        # Two-word city, e.g. "SAINT ETIENNE"
        name = " ".join(tokens[:-2]).strip()
        city = f"{second_last.strip()} {last.strip()}".strip()
    else:
        name = " ".join(tokens[:-1]).strip()
        city = last.strip()

    return PersonRecord(name=name, city=city, year=year, image=image)
