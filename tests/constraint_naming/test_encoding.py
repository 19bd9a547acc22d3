import logging
import re

import pytest

from src import settings
from src.constants import MAX_ENCODED_LENGTH
from src.constraint_naming import encoding
from src.constraint_naming.encoding import (
    HashingUnavailableError,
    ensure_digest_available,
    hashed_name,
    to_radix,
)


# --- to_radix ---

@pytest.mark.parametrize(
    "value, radix, expected",
    [
        (0, 35, "0"),
        (34, 35, "y"),
        (35, 35, "10"),
        (255, 35, "7a"),
        (1225, 35, "100"),
        (255, 16, "ff"),
        (5, 2, "101"),
        (35, 36, "z"),
        (2**128 - 1, 35, "try5wbbiprfp7r727m0oyq2wa"),
    ],
)
def test_to_radix_renders_expected_digits(value, radix, expected):
    assert to_radix(value, radix) == expected


def test_to_radix_rejects_negative_values():
    with pytest.raises(ValueError):
        to_radix(-1, 35)


@pytest.mark.parametrize("radix", [0, 1, 37])
def test_to_radix_rejects_out_of_range_radix(radix):
    with pytest.raises(ValueError):
        to_radix(10, radix)


# --- hashed_name ---

@pytest.mark.parametrize(
    "raw, expected",
    [
        ("table`person`column`age`column`name`", "s8er23owrod166lil8mkloe8t"),
        ("table`person`references`company`column`company_id`", "q9cb6xydynxpqhnmif18lmx83"),
        ("table`person`", "ajijjcn6w74s7sst276mnwy07"),
        ("", "oo6glpyi3e5rd2a0vx2jjdue1"),
    ],
)
def test_hashed_name_matches_pinned_vectors(raw, expected):
    assert hashed_name(raw) == expected


@pytest.mark.parametrize("raw", ["a", "table`t`", "ünïcødé", "x" * 1000])
def test_hashed_name_alphabet_and_length(raw):
    token = hashed_name(raw)
    assert re.fullmatch(r"[0-9a-y]+", token) is not None
    assert "z" not in token
    assert 0 < len(token) <= MAX_ENCODED_LENGTH


def test_hashed_name_is_deterministic():
    assert hashed_name("same input") == hashed_name("same input")
    assert hashed_name("same input") != hashed_name("other input")


# --- missing digest primitive ---

def _refuse(*_, **__):
    raise ValueError("unsupported hash type md5")


def test_hashed_name_raises_when_digest_unavailable(monkeypatch):
    monkeypatch.setattr(encoding.hashlib, "new", _refuse)
    with pytest.raises(HashingUnavailableError) as excinfo:
        hashed_name("anything")
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_ensure_digest_available(monkeypatch):
    ensure_digest_available()
    monkeypatch.setattr(encoding.hashlib, "new", _refuse)
    with pytest.raises(HashingUnavailableError):
        ensure_digest_available()


def test_digest_failure_is_logged_at_error(monkeypatch, caplog):
    monkeypatch.setattr(encoding.hashlib, "new", _refuse)
    with caplog.at_level(logging.ERROR, logger=settings.LOGGER_NAME):
        with pytest.raises(HashingUnavailableError):
            hashed_name("anything")
    assert [r.levelno for r in caplog.records] == [logging.ERROR]
