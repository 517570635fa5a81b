"""
Unit tests for the drug sensitivity generator and filter engine.
"""

import numpy as np
import pytest

from backend.core import (generate_drug_sensitivity_data, filter_records, extract_facets,
                          truncate, query, summarize, sensitivity_tier)
from backend.models import FilterCriteria
from backend.reference import BIOMARKERS, DATASETS, DRUGS, CELL_LINES, TISSUE_TYPES, DRUG_CLASSES
from conftest import make_record


class TestGenerator:
    """Synthetic record generation"""

    @pytest.mark.parametrize("n", [0, 1, 7, 500])
    def test_count_and_sequential_ids(self, n):
        data = generate_drug_sensitivity_data(n, seed=1)
        assert len(data) == n
        assert [r.id for r in data] == [f"ds-{i}" for i in range(1, n + 1)]

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            generate_drug_sensitivity_data(-1)

    def test_numeric_ranges(self):
        data = generate_drug_sensitivity_data(2000, seed=7)
        for r in data:
            assert 0.1 <= r.sensitivity_score <= 1.0
            assert round(r.sensitivity_score, 2) == r.sensitivity_score
            assert 0.0 <= r.ic50 < 10.0
            assert round(r.ic50, 4) == r.ic50

    def test_biomarkers_distinct_and_sized(self):
        data = generate_drug_sensitivity_data(2000, seed=11)
        sizes = set()
        for r in data:
            assert 1 <= len(r.biomarkers) <= 3
            assert len(set(r.biomarkers)) == len(r.biomarkers)
            assert set(r.biomarkers) <= set(BIOMARKERS)
            sizes.add(len(r.biomarkers))
        assert sizes == {1, 2, 3}

    def test_categoricals_from_reference_lists(self):
        for r in generate_drug_sensitivity_data(300, seed=3):
            assert r.drug_name in DRUGS
            assert r.cell_line in CELL_LINES
            assert r.tissue_type in TISSUE_TYPES
            assert r.dataset in DATASETS
            assert r.drug_class in DRUG_CLASSES

    def test_reference_is_eight_digit_pmid(self):
        for r in generate_drug_sensitivity_data(300, seed=5):
            prefix, number = r.reference.split(" ")
            assert prefix == "PMID:"
            assert 10_000_000 <= int(number) <= 99_999_999

    def test_seeded_generation_reproducible(self):
        a = generate_drug_sensitivity_data(50, seed=42)
        b = generate_drug_sensitivity_data(50, rng=np.random.default_rng(42))
        assert [r.model_dump() for r in a] == [r.model_dump() for r in b]


class TestFilterEngine:
    """Multi-criteria filtering"""

    def test_biomarker_highlight_scenario(self, pair):
        out = filter_records(pair, FilterCriteria(biomarker="TUBB3"))
        assert [r.drug_name for r in out] == ["Paclitaxel"]

    def test_case_insensitive_drug_search(self, pair):
        out = filter_records(pair, FilterCriteria(search="cis"))
        assert [r.drug_name for r in out] == ["Cisplatin"]

    def test_search_matches_cell_line_and_biomarker(self, pair):
        assert [r.id for r in filter_records(pair, FilterCriteria(search="mcf"))] == ["ds-2"]
        assert [r.id for r in filter_records(pair, FilterCriteria(search="ercc"))] == ["ds-1"]

    def test_unconstrained_criteria_return_everything(self):
        data = generate_drug_sensitivity_data(400, seed=9)
        out = filter_records(data, FilterCriteria())
        assert [r.id for r in out] == [r.id for r in data]

    def test_unmatched_search_is_empty(self, pair):
        assert filter_records(pair, FilterCriteria(search="zzz-not-a-drug")) == []

    def test_exact_case_sensitive_selects(self, pair):
        assert [r.id for r in filter_records(pair, FilterCriteria(tissue="Lung"))] == ["ds-1"]
        assert filter_records(pair, FilterCriteria(tissue="lung")) == []
        assert [r.id for r in filter_records(pair, FilterCriteria(dataset="GDSC"))] == ["ds-2"]
        assert [r.id for r in filter_records(pair, FilterCriteria(drug_class="Platinum"))] == ["ds-1"]

    def test_criteria_are_anded(self, pair):
        assert filter_records(pair, FilterCriteria(search="cis", tissue="Breast")) == []
        out = filter_records(pair, FilterCriteria(search="a", dataset="GDSC", biomarker="ABCB1"))
        assert [r.id for r in out] == ["ds-2"]

    def test_highlight_needs_exact_biomarker(self, pair):
        assert filter_records(pair, FilterCriteria(biomarker="tubb3")) == []

    def test_idempotent_and_pure(self):
        data = generate_drug_sensitivity_data(300, seed=13)
        snapshot = [r.model_dump() for r in data]
        c = FilterCriteria(search="a", dataset="CCLE")
        first, second = filter_records(data, c), filter_records(data, c)
        assert [r.id for r in first] == [r.id for r in second]
        assert [r.model_dump() for r in data] == snapshot


class TestFacetsAndTruncation:
    """Facets, display cap and summaries"""

    def test_facets_from_full_collection(self, pair):
        facets = extract_facets(pair)
        assert facets.biomarkers == ["ERCC1", "TUBB3", "ABCB1"]
        assert facets.tissue_types == ["Lung", "Breast"]
        assert facets.datasets == ["CCLE", "GDSC"]
        assert facets.drug_classes == ["Platinum", "Taxane"]
        assert facets.cell_lines == ["A549", "MCF-7"]

    def test_display_cap_keeps_order_and_total(self):
        data = [make_record(i) for i in range(1, 151)]
        result = truncate(filter_records(data, FilterCriteria()), limit=100)
        assert result.total == 150
        assert result.limit == 100
        assert [r.id for r in result.records] == [f"ds-{i}" for i in range(1, 101)]

    def test_query_with_fewer_matches_than_cap(self, pair):
        result = query(pair, FilterCriteria(search="cis"), limit=100)
        assert result.total == 1 and len(result.records) == 1

    def test_query_empty_result(self, pair):
        result = query(pair, FilterCriteria(search="nothing"))
        assert result.total == 0
        assert result.records == []
        assert sum(result.summary.by_tier.values()) == 0

    def test_sensitivity_tiers(self):
        assert sensitivity_tier(0.71) == "high"
        assert sensitivity_tier(0.7) == "medium"
        assert sensitivity_tier(0.41) == "medium"
        assert sensitivity_tier(0.4) == "low"
        assert sensitivity_tier(0.1) == "low"

    def test_summary_counts_whole_match_set(self, pair):
        summary = summarize(pair)
        assert summary.by_dataset == {"CCLE": 1, "GDSC": 1}
        assert summary.by_tier == {"high": 1, "medium": 0, "low": 1}
