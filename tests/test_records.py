import dataclasses

import pytest
from catalog import DEFAULT_DISORDERS, DisorderRecord, GeneRecord


def test_default_catalog_has_three_disorders():
    assert [d.name for d in DEFAULT_DISORDERS] == [
        "Lissencephaly",
        "Tuberous Sclerosis (TSC)",
        "Other Genetic Links",
    ]


def test_every_gene_has_name_and_description(disorders):
    """All built-in genes carry non-empty text."""
    for disorder in disorders:
        assert isinstance(disorder.genes, tuple)
        for gene in disorder.genes:
            assert gene.name.strip()
            assert gene.description.strip()


def test_identifiers_are_unique(disorders):
    disorder_ids = [d.identifier for d in disorders]
    gene_ids = [g.identifier for d in disorders for g in d.genes]
    assert len(set(disorder_ids)) == len(disorder_ids)
    assert len(set(gene_ids)) == len(gene_ids)


def test_records_are_frozen(disorders):
    with pytest.raises(dataclasses.FrozenInstanceError):
        disorders[0].name = "Changed"
    with pytest.raises(dataclasses.FrozenInstanceError):
        disorders[0].genes[0].description = "Changed"


def test_gene_list_is_frozen_into_tuple():
    """A list passed as genes is stored as a tuple and detached from the caller's list."""
    genes = [GeneRecord("RELN", "Reelin, a signal for neuronal positioning.")]
    disorder = DisorderRecord("X", "Y", "link", "cause", "symptoms", genes=genes)
    genes.append(GeneRecord("VLDLR", "Reelin receptor."))
    assert disorder.genes == (GeneRecord("RELN", "Reelin, a signal for neuronal positioning."),)


def test_empty_gene_sequence_is_allowed(geneless_disorder):
    assert geneless_disorder.genes == ()


@pytest.mark.parametrize("name, description", [("", "text"), ("RELN", ""), ("  ", "text"), (None, "text")])
def test_invalid_gene_text_raises(name, description):
    with pytest.raises(ValueError):
        GeneRecord(name, description)


def test_non_gene_entries_raise():
    with pytest.raises(ValueError):
        DisorderRecord("X", "Y", "link", "cause", "symptoms", genes=["RELN"])


@pytest.mark.parametrize("field_name", ["common_name", "icon_name", "cause", "symptoms"])
@pytest.mark.parametrize("bad_value", [None, 42])
def test_non_string_text_fields_raise(field_name, bad_value):
    """Optional text fields may be empty but must be strings."""
    fields = dict(name="X", common_name="", icon_name="", cause="", symptoms="")
    fields[field_name] = bad_value
    with pytest.raises(ValueError):
        DisorderRecord(**fields)
