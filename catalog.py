# --- catalog.py ---
# Records, provider and card rendering for the Developmental Disorders catalog

from __future__ import annotations
import html, json, logging, uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple
import pandas as pd
import streamlit as st

logger = logging.getLogger(__name__)

# -----------------------------
# 1) Records
# -----------------------------
def _require_text(value: Any, label: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{label} must be a non-empty string, got {value!r}")


def _require_str(value: Any, label: str) -> None:
    if not isinstance(value, str):
        raise ValueError(f"{label} must be a string, got {type(value).__name__}")


@dataclass(frozen=True)
class GeneRecord:
    """
    A gene implicated in a disorder.

    Attributes:
        name: Gene name, including common aliases (e.g. "LIS1 (PAFAH1B1)").
        description: The gene's function and its role in the disorder.
        identifier: Opaque unique id, generated on construction.
    """

    name: str
    description: str
    identifier: uuid.UUID = field(default_factory=uuid.uuid4, compare=False)

    def __post_init__(self):
        _require_text(self.name, "Gene name")
        _require_text(self.description, "Gene description")


@dataclass(frozen=True)
class DisorderRecord:
    """
    A single corticogenesis disorder.

    Attributes:
        name: Scientific name (e.g. "Lissencephaly").
        common_name: Descriptive name (e.g. "Smooth Brain").
        icon_name: Symbol name for the card icon, see ICONS.
        cause: Underlying cause of the disorder.
        symptoms: Common symptoms.
        genes: Ordered genes implicated in the disorder (may be empty).
        identifier: Opaque unique id, generated on construction.
    """

    name: str
    common_name: str
    icon_name: str
    cause: str
    symptoms: str
    genes: Tuple[GeneRecord, ...] = ()
    identifier: uuid.UUID = field(default_factory=uuid.uuid4, compare=False)

    def __post_init__(self):
        _require_text(self.name, "Disorder name")
        for attr in ("common_name", "icon_name", "cause", "symptoms"):
            _require_str(getattr(self, attr), f"{self.name}: {attr}")
        # frozen dataclass, so go through object.__setattr__
        object.__setattr__(self, "genes", tuple(self.genes))
        for gene in self.genes:
            if not isinstance(gene, GeneRecord):
                raise ValueError(f"{self.name}: genes must be GeneRecord, got {type(gene).__name__}")

# --------------------------------------------
# 2) Built-in catalog
# --------------------------------------------
INTRO_TEXT = (
    "Errors in the complex process of corticogenesis can lead to severe neurological "
    "disorders, often caused by mutations in genes that control neuronal migration."
)

DEFAULT_DISORDERS: Tuple[DisorderRecord, ...] = (
    DisorderRecord(
        name="Lissencephaly",
        common_name="Smooth Brain",
        icon_name="brain.head.profile",
        cause="A failure of proper neuronal migration during development.",
        symptoms="The characteristic lack of normal gyri (folds) and sulci (grooves) in the brain, "
                 "often leading to epilepsy and significant cognitive impairment.",
        genes=(
            GeneRecord("LIS1 (PAFAH1B1)",
                       "Affects nuclear translocation and the function of dynein, a motor protein "
                       "critical for intracellular transport and cell division."),
            GeneRecord("DCX (Doublecortin)",
                       "A microtubule-associated protein. Mutations can cause 'double cortex' "
                       "malformations where a band of grey matter is misplaced."),
        ),
    ),
    DisorderRecord(
        name="Tuberous Sclerosis (TSC)",
        common_name="Tumor-Forming Disorder",
        icon_name="cross.case.fill",
        cause="An autosomal dominant disorder resulting from the inactivation of TSC1 or TSC2 genes.",
        symptoms="Formation of benign tumors (cortical tubers) and white matter nodes in the brain "
                 "and other organs.",
        genes=(
            GeneRecord("TSC1 / TSC2",
                       "Tumor suppressor genes. Their inactivation during corticogenesis leads to "
                       "the growth of abnormal, disorganized tissue."),
        ),
    ),
    DisorderRecord(
        name="Other Genetic Links",
        common_name="Related Ion Channel Variants",
        icon_name="link",
        cause="Variations in genes that control fundamental cellular functions like ion transport.",
        symptoms="Can contribute to a spectrum of cortical malformations by disrupting the "
                 "electrochemical environment necessary for normal cell migration and development.",
        genes=(
            GeneRecord("SCN3A",
                       "A sodium channel gene. Specific variants have been implicated in abnormal "
                       "cortical folding."),
            GeneRecord("ATP1A3",
                       "A Na+/K+ ATPase gene. Variations can disrupt ion balance, impacting early "
                       "brain development."),
        ),
    ),
)

# ---------------------------------------
# 3) Provider (observable record sequence)
# ---------------------------------------
Listener = Callable[[Tuple[DisorderRecord, ...]], None]


class DisorderProvider:
    """
    Holds the ordered disorder records and notifies subscribers when they are published.

    Records are published exactly once, on construction, so every subscriber
    sees a single notification carrying the full catalog.
    """

    def __init__(self, records: Optional[Iterable[DisorderRecord]] = None):
        self._disorders: Tuple[DisorderRecord, ...] = ()
        self._listeners: List[Listener] = []
        self._publish(DEFAULT_DISORDERS if records is None else tuple(records))

    @property
    def disorders(self) -> Tuple[DisorderRecord, ...]:
        return self._disorders

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener; it is called right away with the current records.
        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)
        listener(self._disorders)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def _publish(self, disorders: Tuple[DisorderRecord, ...]) -> None:
        self._disorders = disorders
        logger.info("Published %d disorder records", len(disorders))
        for listener in list(self._listeners):
            listener(disorders)

# --------------------------------------
# 4) Session access and catalog files
# --------------------------------------
CATALOG_ENV_VAR = "DISORDERS_CATALOG"
_PROVIDER_KEY = "disorder_provider"
_CATALOG_WARNING_KEY = "catalog_warning"


def get_provider_from_session(catalog_path: Optional[str] = None) -> DisorderProvider:
    """
    Return the session's provider, creating it on the first run of the session.
    A catalog load warning is kept alongside it and shown again on every run.
    """
    provider = st.session_state.get(_PROVIDER_KEY)
    if not isinstance(provider, DisorderProvider):
        disorders, warning = _load_catalog_checked(catalog_path)
        provider = DisorderProvider(disorders)
        st.session_state[_PROVIDER_KEY] = provider
        st.session_state[_CATALOG_WARNING_KEY] = warning
    warning = st.session_state.get(_CATALOG_WARNING_KEY)
    if warning:
        st.warning(warning)
    return provider


def disorder_from_dict(d: Dict[str, Any]) -> DisorderRecord:
    if not isinstance(d, dict):
        raise TypeError(f"expected a disorder mapping, got {type(d).__name__}")
    raw_genes = d.get("genes") or []
    if not isinstance(raw_genes, list):
        raise TypeError(f"{d.get('name')!r}: genes must be a list, got {type(raw_genes).__name__}")
    genes = []
    for g in raw_genes:
        if not isinstance(g, dict):
            raise TypeError(f"{d.get('name')!r}: expected a gene mapping, got {type(g).__name__}")
        genes.append(GeneRecord(name=g["name"], description=g["description"]))
    return DisorderRecord(
        name=d["name"],
        common_name=d.get("common_name", ""),
        icon_name=d.get("icon_name", ""),
        cause=d.get("cause", ""),
        symptoms=d.get("symptoms", ""),
        genes=genes,
    )


def disorder_to_dict(disorder: DisorderRecord) -> Dict[str, Any]:
    return {
        "name": disorder.name,
        "common_name": disorder.common_name,
        "icon_name": disorder.icon_name,
        "cause": disorder.cause,
        "symptoms": disorder.symptoms,
        "genes": [{"name": g.name, "description": g.description} for g in disorder.genes],
    }


def load_catalog(path: Optional[str] = None) -> Tuple[DisorderRecord, ...]:
    """
    Load disorder records from a JSON/YAML catalog file.
    Falls back to the built-in catalog when no path is given or the file is unusable.
    """
    disorders, warning = _load_catalog_checked(path)
    if warning:
        st.warning(warning)
    return disorders


def _load_catalog_checked(path: Optional[str]) -> Tuple[Tuple[DisorderRecord, ...], Optional[str]]:
    # returns (records, user-facing warning or None)
    if not path:
        return DEFAULT_DISORDERS, None
    import yaml
    try:
        if path.endswith(".json"):
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        elif path.endswith((".yml", ".yaml")):
            with open(path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        else:
            raise ValueError("unsupported catalog extension (expected .json, .yml or .yaml)")
        if isinstance(raw, dict):
            raw = raw["disorders"]
        if not isinstance(raw, list):
            raise TypeError(f"expected a list of disorders, got {type(raw).__name__}")
        disorders = tuple(disorder_from_dict(d) for d in raw)
    except (OSError, ValueError, KeyError, TypeError, yaml.YAMLError) as e:
        # json.JSONDecodeError is a ValueError
        logger.warning("Could not load catalog %s: %s", path, e)
        return DEFAULT_DISORDERS, f"Could not load catalog {path}: {e}. Showing the built-in catalog."
    logger.info("Loaded %d disorders from %s", len(disorders), path)
    return disorders, None

# -----------------------------------
# 5) Card rendering
# -----------------------------------
ICONS: Dict[str, str] = {
    "brain.head.profile": "🧠",
    "cross.case.fill": "🩺",
    "link": "🔗",
}
DEFAULT_ICON = "🧬"

CARD_CSS = """
<style>
.disorder-card {
  border: 1px solid rgba(128,128,128,0.25);
  background: rgba(128,128,128,0.06);
  border-radius: 16px;
  padding: 16px;
  margin-bottom: 20px;
}
.disorder-header {display: flex; gap: 12px; align-items: center;}
.disorder-icon {font-size: 28px; width: 40px; text-align: center;}
.disorder-title {font-size: 22px; font-weight: 700;}
.disorder-subtitle, .secondary {opacity: 0.7;}
.disorder-card hr {margin: 12px 0; opacity: 0.3;}
.info-title, .gene-name {font-weight: 600;}
.info-row, .gene-row {margin-bottom: 12px;}
.gene-section {margin-top: 8px;}
.gene-section-title {font-size: 17px; font-weight: 700; margin-bottom: 8px;}
</style>
"""


def icon_for(icon_name: str) -> str:
    return ICONS.get(icon_name, DEFAULT_ICON)


def info_row_html(title: str, content: str) -> str:
    return (f'<div class="info-row"><div class="info-title">{html.escape(title)}</div>'
            f'<div class="secondary">{html.escape(content)}</div></div>')


def gene_row_html(gene: GeneRecord) -> str:
    return (f'<div class="gene-row"><div class="gene-name">{html.escape(gene.name)}</div>'
            f'<div class="secondary">{html.escape(gene.description)}</div></div>')


def disorder_card_html(disorder: DisorderRecord) -> str:
    """
    One card: header (icon, name, common name), cause, symptoms and,
    only when the disorder has genes, the associated genes section.
    """
    name = html.escape(disorder.name)
    parts = [
        '<div class="disorder-card">',
        '<div class="disorder-header">',
        f'<span class="disorder-icon" role="img" aria-label="Icon for {name}">{icon_for(disorder.icon_name)}</span>',
        f'<div><div class="disorder-title">{name}</div>'
        f'<div class="disorder-subtitle">{html.escape(disorder.common_name)}</div></div>',
        '</div>',
        '<hr/>',
        info_row_html("Cause", disorder.cause),
        info_row_html("Symptoms", disorder.symptoms),
    ]
    if disorder.genes:
        parts.append('<div class="gene-section"><div class="gene-section-title">Associated Genes</div>')
        parts.extend(gene_row_html(g) for g in disorder.genes)
        parts.append('</div>')
    parts.append('</div>')
    return "".join(parts)


def render_cards(disorders: Iterable[DisorderRecord]) -> List[str]:
    return [disorder_card_html(d) for d in disorders]

# -----------------------------------
# 6) Exports
# -----------------------------------
def catalog_frame(disorders: Iterable[DisorderRecord]) -> pd.DataFrame:
    rows = [{"Disorder": d.name, "Common name": d.common_name,
             "Gene": g.name, "Description": g.description}
            for d in disorders for g in d.genes]
    return pd.DataFrame(rows, columns=["Disorder", "Common name", "Gene", "Description"])


def gene_counts(disorders: Iterable[DisorderRecord]) -> pd.Series:
    disorders = list(disorders)
    return pd.Series([len(d.genes) for d in disorders],
                     index=[d.name for d in disorders], name="Genes")


def catalog_to_json(disorders: Iterable[DisorderRecord]) -> str:
    return json.dumps({"disorders": [disorder_to_dict(d) for d in disorders]}, indent=2, ensure_ascii=False)
