"""
Tests for the noise filter and its data-driven term list.
"""
from __future__ import annotations

import json

import pytest

from core.config import AppSettings
from core.noise_filter import NoiseFilter
from core.resources_loader import load_noise_terms


@pytest.mark.parametrize("text", ["ab", "Ñu", "12", "  "])
def test_two_char_strings_are_garbage(noise_filter, text):
    assert noise_filter.is_garbage(text)


def test_short_numeric_is_garbage(noise_filter):
    assert noise_filter.is_garbage("1234")
    assert noise_filter.is_garbage("1-2.")


def test_long_numeric_is_kept(noise_filter):
    assert not noise_filter.is_garbage("123456")
    assert not noise_filter.is_garbage("20-12345678-3")


def test_short_text_with_letters_is_kept(noise_filter):
    assert not noise_filter.is_garbage("Ana")


@pytest.mark.parametrize(
    "text",
    [
        "PUBLICIDAD",
        "Usamos Cookies para mejorar tu experiencia",
        "2024 Todos los derechos reservados",
        "Buscá en Datuar",
    ],
)
def test_boilerplate_terms_match_case_insensitively(noise_filter, text):
    assert noise_filter.is_garbage(text)


def test_record_fragment_is_not_garbage(noise_filter):
    assert not noise_filter.is_garbage("PEREZ JUAN CARLOS - CABA")


def test_default_terms_are_packaged():
    terms = load_noise_terms()
    assert "publicidad" in terms
    assert all(t == t.lower() for t in terms)


def test_terms_path_override(tmp_path):
    path = tmp_path / "terms.json"
    path.write_text(json.dumps(["Banner Superior", "", 3, "banner superior"]), encoding="utf-8")

    nf = NoiseFilter.from_settings(AppSettings(noise_terms_path=path))

    assert nf.terms == ("banner superior",)
    assert nf.is_garbage("-- BANNER SUPERIOR --")
    assert not nf.is_garbage("Publicidad")


def test_invalid_terms_file_raises(tmp_path):
    path = tmp_path / "terms.json"
    path.write_text(json.dumps({"terms": "nope"}), encoding="utf-8")

    with pytest.raises(ValueError):
        load_noise_terms(path)
