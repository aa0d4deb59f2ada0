import dataclasses

import pytest

from theater.errors import UnknownGenreError, UnknownPlayIdError
from theater.types import Genre, Invoice, Performance, Play, PlayCatalog


def test_genre_from_label_matches_exact_labels():
    assert Genre.from_label("tragedy") is Genre.TRAGEDY
    assert Genre.from_label("comedy") is Genre.COMEDY


@pytest.mark.parametrize("label", ["history", "", 3, "Comedy", " comedy "])
def test_genre_from_unknown_label_raises(label):
    with pytest.raises(UnknownGenreError) as excinfo:
        Genre.from_label(label)
    assert excinfo.value.category == "PRICING"


@pytest.mark.parametrize("audience", [0, -1, 2.5, True, "10"])
def test_performance_rejects_invalid_audience(audience):
    with pytest.raises(ValueError):
        Performance("hamlet", audience)


def test_values_are_frozen():
    performance = Performance("hamlet", 10)
    with pytest.raises(dataclasses.FrozenInstanceError):
        performance.audience = 20  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        Play("Hamlet", Genre.TRAGEDY).name = "Macbeth"  # type: ignore[misc]


def test_invoice_normalises_performances_to_tuple():
    performances = [Performance("hamlet", 10)]
    invoice = Invoice("BigCo", performances)
    performances.append(Performance("othello", 5))

    assert invoice.performances == (Performance("hamlet", 10),)


def test_catalog_lookup_and_mapping_protocol():
    hamlet = Play("Hamlet", Genre.TRAGEDY)
    catalog = PlayCatalog({"hamlet": hamlet})

    assert catalog.lookup("hamlet") is hamlet
    assert catalog["hamlet"] is hamlet
    assert "hamlet" in catalog
    assert len(catalog) == 1
    assert list(catalog) == ["hamlet"]


def test_catalog_lookup_unknown_raises():
    with pytest.raises(UnknownPlayIdError, match="macbeth"):
        PlayCatalog().lookup("macbeth")


def test_catalog_is_isolated_from_source_mapping():
    source = {"hamlet": Play("Hamlet", Genre.TRAGEDY)}
    catalog = PlayCatalog(source)
    source["othello"] = Play("Othello", Genre.TRAGEDY)

    assert "othello" not in catalog
    with pytest.raises(TypeError):
        catalog["othello"] = source["othello"]  # type: ignore[index]
