# backend/core.py
import logging, numpy as np
from typing import List, Optional, Sequence, Iterable

from .models import (ALL, DrugSensitivityRecord, FilterCriteria, Facets,
                     FilterResult, MatchSummary)
from .reference import DRUGS, CELL_LINES, TISSUE_TYPES, DATASETS, DRUG_CLASSES, BIOMARKERS
from .config import DISPLAY_LIMIT

logger = logging.getLogger(__name__)

ID_PREFIX, REF_PREFIX = "ds-", "PMID: "
SCORE_MIN, SCORE_SPAN = 0.1, 0.9
IC50_MAX = 10.0
REF_LOW, REF_HIGH = 10_000_000, 99_999_999
TIERS = (("high", 0.7), ("medium", 0.4), ("low", float("-inf")))

def _pick(rng, values): return values[int(rng.integers(len(values)))]

def generate_drug_sensitivity_data(count: int, seed: Optional[int] = None,
                                   rng: Optional[np.random.Generator] = None) -> List[DrugSensitivityRecord]:
    """
    Synthesise `count` records. Fields are sampled independently; biomarkers are a
    1-3 long prefix of a fresh permutation of the reference list (shuffle-then-prefix,
    so subsets are not uniformly distributed).
    Pass `seed` or an explicit `rng` for reproducible output.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    rng = rng if rng is not None else np.random.default_rng(seed)
    data: List[DrugSensitivityRecord] = []
    for i in range(count):
        drug, cell, tissue = _pick(rng, DRUGS), _pick(rng, CELL_LINES), _pick(rng, TISSUE_TYPES)
        dataset, drug_class = _pick(rng, DATASETS), _pick(rng, DRUG_CLASSES)
        order = rng.permutation(len(BIOMARKERS))
        n_bm = int(rng.integers(1, 4))
        score = round(float(rng.random()) * SCORE_SPAN + SCORE_MIN, 2)
        ic50 = min(round(float(rng.random()) * IC50_MAX, 4), IC50_MAX - 1e-4)
        ref = int(rng.integers(REF_LOW, REF_HIGH + 1))
        data.append(DrugSensitivityRecord(
            id=f"{ID_PREFIX}{i + 1}",
            drug_name=drug, cell_line=cell,
            sensitivity_score=score,
            biomarkers=[BIOMARKERS[j] for j in order[:n_bm]],
            tissue_type=tissue, dataset=dataset, drug_class=drug_class,
            ic50=ic50, reference=f"{REF_PREFIX}{ref}",
        ))
    logger.debug("generated %d drug sensitivity records", len(data))
    return data

def _matches(rec: DrugSensitivityRecord, c: FilterCriteria, needle: str) -> bool:
    text_ok = (needle in rec.drug_name.lower() or needle in rec.cell_line.lower()
               or any(needle in b.lower() for b in rec.biomarkers))
    return (text_ok
            and (c.tissue == ALL or rec.tissue_type == c.tissue)
            and (c.dataset == ALL or rec.dataset == c.dataset)
            and (c.drug_class == ALL or rec.drug_class == c.drug_class)
            and (not c.biomarker or c.biomarker in rec.biomarkers))

def filter_records(records: Sequence[DrugSensitivityRecord],
                   criteria: FilterCriteria) -> List[DrugSensitivityRecord]:
    # pure projection: generation order kept, input never touched
    needle = criteria.search.lower()
    return [r for r in records if _matches(r, criteria, needle)]

def _distinct(values: Iterable[str]) -> List[str]: return list(dict.fromkeys(values))

def extract_facets(records: Sequence[DrugSensitivityRecord]) -> Facets:
    """Distinct field values over the whole (unfiltered) collection, first-seen order."""
    return Facets(
        biomarkers=_distinct(b for r in records for b in r.biomarkers),
        tissue_types=_distinct(r.tissue_type for r in records),
        datasets=_distinct(r.dataset for r in records),
        drug_classes=_distinct(r.drug_class for r in records),
        cell_lines=_distinct(r.cell_line for r in records),
    )

def sensitivity_tier(score: float) -> str:
    for name, floor in TIERS:
        if score > floor: return name
    return TIERS[-1][0]

def summarize(records: Sequence[DrugSensitivityRecord]) -> MatchSummary:
    by_dataset: dict = {}
    by_tier = {name: 0 for name, _ in TIERS}
    for r in records:
        by_dataset[r.dataset] = by_dataset.get(r.dataset, 0) + 1
        by_tier[sensitivity_tier(r.sensitivity_score)] += 1
    return MatchSummary(by_dataset=by_dataset, by_tier=by_tier)

def truncate(matches: Sequence[DrugSensitivityRecord], limit: int = DISPLAY_LIMIT) -> FilterResult:
    return FilterResult(total=len(matches), limit=limit,
                        records=list(matches[:limit]), summary=summarize(matches))

def query(records: Sequence[DrugSensitivityRecord], criteria: FilterCriteria,
          limit: int = DISPLAY_LIMIT) -> FilterResult:
    matches = filter_records(records, criteria)
    logger.debug("criteria %s -> %d/%d matches", criteria.model_dump(), len(matches), len(records))
    return truncate(matches, limit)
