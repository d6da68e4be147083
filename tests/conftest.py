import os
import pytest

from catalog import DEFAULT_DISORDERS, DisorderRecord


@pytest.fixture(scope="session")
def repo_root() -> str:
    """
    Path to the repository root, where `app.py` and `pages/` live.
    """
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


@pytest.fixture
def disorders():
    return DEFAULT_DISORDERS


@pytest.fixture
def geneless_disorder() -> DisorderRecord:
    """A disorder with no associated genes."""
    return DisorderRecord(
        name="Polymicrogyria",
        common_name="Many Small Folds",
        icon_name="unknown.symbol",
        cause="Abnormal late neuronal migration.",
        symptoms="Excess small gyri on the cortical surface.",
    )


@pytest.fixture(autouse=True)
def _no_catalog_env(monkeypatch):
    monkeypatch.delenv("DISORDERS_CATALOG", raising=False)
