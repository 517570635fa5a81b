# backend/main.py
import logging
from functools import lru_cache
from typing import List, Dict, Optional
from fastapi import FastAPI, Depends, HTTPException, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from .config import RECORD_COUNT, DISPLAY_LIMIT, SEED, LOG_LEVEL, LOG_FILE
from .logging_config import setup_logging
from .models import ALL, DrugSensitivityRecord, FilterCriteria, Facets, FilterResult, BioTool
from .core import generate_drug_sensitivity_data, filter_records, extract_facets, query
from .io_utils import records_to_frame, write_any_table
from .reference import BIO_TOOLS, DATA_SOURCES, database_stats

setup_logging(LOG_LEVEL, LOG_FILE)
logger = logging.getLogger(__name__)

app = FastAPI(title="Drug Sensitivity Database API", version="2.1")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"]
)

@lru_cache(maxsize=1)
def get_records() -> List[DrugSensitivityRecord]:
    # one snapshot per process; handlers only read it
    records = generate_drug_sensitivity_data(RECORD_COUNT, seed=SEED)
    logger.info("generated %d records (seed=%s)", len(records), SEED)
    return records

def get_criteria(search: str = "", tissue: str = ALL, dataset: str = ALL,
                 drug_class: str = ALL, biomarker: Optional[str] = None) -> FilterCriteria:
    return FilterCriteria(search=search, tissue=tissue, dataset=dataset,
                          drug_class=drug_class, biomarker=biomarker or None)

@app.get("/health")
def health(records: List[DrugSensitivityRecord] = Depends(get_records)):
    return {"status": "ok", "records": len(records)}

@app.get("/facets", response_model=Facets)
def facets(records: List[DrugSensitivityRecord] = Depends(get_records)):
    return extract_facets(records)

@app.get("/records", response_model=FilterResult)
def records_view(criteria: FilterCriteria = Depends(get_criteria),
                 records: List[DrugSensitivityRecord] = Depends(get_records)):
    """First DISPLAY_LIMIT matches in generation order; `total` counts every match."""
    return query(records, criteria, DISPLAY_LIMIT)

@app.get("/stats")
def stats(records: List[DrugSensitivityRecord] = Depends(get_records)) -> Dict:
    return {"stats": [s.model_dump() for s in database_stats(records, extract_facets(records))],
            "sources": [s.model_dump() for s in DATA_SOURCES]}

@app.get("/tools", response_model=List[BioTool])
def tools():
    return BIO_TOOLS

@app.get("/export")
def export(fmt: str = Query("csv"), criteria: FilterCriteria = Depends(get_criteria),
           records: List[DrugSensitivityRecord] = Depends(get_records)):
    """Full filtered set (not capped) as a downloadable table."""
    matches = filter_records(records, criteria)
    try:
        data, media_type, ext = write_any_table(records_to_frame(matches), fmt)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info("export %s: %d rows", ext, len(matches))
    return Response(content=data, media_type=media_type,
                    headers={"Content-Disposition": f'attachment; filename="drug_sensitivity.{ext}"'})
