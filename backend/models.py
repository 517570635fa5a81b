# backend/models.py
from pydantic import BaseModel, Field
from typing import List, Dict, Optional

ALL = "all"

class DrugSensitivityRecord(BaseModel):
    id: str
    drug_name: str
    cell_line: str
    sensitivity_score: float = Field(ge=0.1, le=1.0)
    biomarkers: List[str] = Field(min_length=1, max_length=3)
    tissue_type: str
    dataset: str
    drug_class: str
    ic50: Optional[float] = None        # µM
    reference: Optional[str] = None

class FilterCriteria(BaseModel):
    search: str = ""
    tissue: str = ALL
    dataset: str = ALL
    drug_class: str = ALL
    biomarker: Optional[str] = None

class Facets(BaseModel):
    biomarkers: List[str] = []
    tissue_types: List[str] = []
    datasets: List[str] = []
    drug_classes: List[str] = []
    cell_lines: List[str] = []

class MatchSummary(BaseModel):
    by_dataset: Dict[str, int] = {}
    by_tier: Dict[str, int] = {}

class FilterResult(BaseModel):
    total: int
    limit: int
    records: List[DrugSensitivityRecord]
    summary: MatchSummary = Field(default_factory=MatchSummary)

class BioTool(BaseModel):
    name: str
    url: str
    icon: str = ""

class DbStat(BaseModel):
    label: str
    value: str

class DataSource(BaseModel):
    code: str
    name: str
