import pytest

from backend.models import DrugSensitivityRecord


def make_record(i, **overrides):
    fields = dict(
        id=f"ds-{i}",
        drug_name="Cisplatin",
        cell_line="A549",
        sensitivity_score=0.5,
        biomarkers=["ERCC1"],
        tissue_type="Lung",
        dataset="CCLE",
        drug_class="Platinum",
        ic50=1.2345,
        reference="PMID: 12345678",
    )
    fields.update(overrides)
    return DrugSensitivityRecord(**fields)


@pytest.fixture
def pair():
    """Cisplatin/Paclitaxel pair used by the filter scenarios."""
    return [
        make_record(1, drug_name="Cisplatin", cell_line="A549", tissue_type="Lung",
                    dataset="CCLE", drug_class="Platinum", biomarkers=["ERCC1"],
                    sensitivity_score=0.82),
        make_record(2, drug_name="Paclitaxel", cell_line="MCF-7", tissue_type="Breast",
                    dataset="GDSC", drug_class="Taxane", biomarkers=["TUBB3", "ABCB1"],
                    sensitivity_score=0.31),
    ]
