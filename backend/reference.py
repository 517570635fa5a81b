# backend/reference.py
from typing import List
from .models import BioTool, DbStat, DataSource, Facets, DrugSensitivityRecord

DRUGS = [
    "Paclitaxel", "Cisplatin", "5-Fluorouracil", "Doxorubicin", "Erlotinib",
    "Gemcitabine", "Imatinib", "Oxaliplatin", "Tamoxifen", "Vemurafenib",
    "Irinotecan", "Docetaxel", "Bortezomib", "Sorafenib", "Cetuximab",
    "Pembrolizumab", "Nivolumab", "Olaparib", "Venetoclax", "Rituximab",
]

CELL_LINES = [
    "MCF-7", "A549", "HT-29", "MDA-MB-231", "PC-9",
    "PANC-1", "K562", "HCT-116", "T47D", "A375",
    "HepG2", "U87", "SKOV3", "DU145", "OVCAR-3",
    "BT-474", "SW480", "LN-229", "SKBR-3", "NCI-H460",
]

TISSUE_TYPES = [
    "Breast", "Lung", "Colon", "Pancreas", "Leukemia",
    "Melanoma", "Liver", "Brain", "Ovary", "Prostate",
    "Bladder", "Kidney", "Stomach", "Esophagus", "Cervix",
]

DATASETS = ["CCLE", "GDSC", "CellMiner"]

DRUG_CLASSES = [
    "Taxane", "Platinum", "Antimetabolite", "Anthracycline", "EGFR inhibitor",
    "BRAF inhibitor", "Topoisomerase inhibitor", "Proteasome inhibitor", "SERM", "PARP inhibitor",
    "BCL-2 inhibitor", "Anti-CD20", "PD-1 inhibitor", "VEGF inhibitor", "ALK inhibitor",
]

BIOMARKERS = [
    "TUBB3", "ABCB1", "ERCC1", "BRCA1", "TYMS",
    "DPYD", "TOP2A", "EGFR", "RRM1", "DCK",
    "BCR-ABL", "GSTP1", "ESR1", "CYP2D6", "BRAF V600E",
    "KRAS", "NRAS", "PIK3CA", "PTEN", "TP53",
    "HER2", "PD-L1", "MSI", "TMB", "ALK",
]

BIO_TOOLS = [
    BioTool(name="CellMiner", url="https://discover.nci.nih.gov/cellminer/", icon="🧪"),
    BioTool(name="GDSC", url="https://www.cancerrxgene.org/", icon="🧬"),
    BioTool(name="CCLE", url="https://portals.broadinstitute.org/ccle", icon="🔬"),
    BioTool(name="cBioPortal", url="https://www.cbioportal.org/", icon="🧫"),
    BioTool(name="OncoLens", url="https://www.oncolens.com/", icon="👁️"),
    BioTool(name="TIMER", url="https://cistrome.sh/", icon="⏱️"),
]

DATA_SOURCES = [
    DataSource(code="CCLE", name="Cancer Cell Line Encyclopedia"),
    DataSource(code="GDSC", name="Genomics of Drug Sensitivity"),
    DataSource(code="NCI-60", name="CellMiner Database"),
]

LAST_UPDATED, VERSION = "Jun 2023", "2.1"

def database_stats(records: List[DrugSensitivityRecord], facets: Facets) -> List[DbStat]:
    """Numbers for the Database Stats panel; counts always come from the full collection."""
    return [
        DbStat(label="Total Records", value=f"{len(records):,}"),
        DbStat(label="Cell Lines", value=str(len(facets.cell_lines))),
        DbStat(label="Biomarkers", value=str(len(facets.biomarkers))),
        DbStat(label="Tissue Types", value=str(len(facets.tissue_types))),
        DbStat(label="Last Updated", value=LAST_UPDATED),
        DbStat(label="Version", value=VERSION),
    ]
