# backend/io_utils.py
import io, pandas as pd
from typing import Sequence, Tuple
from .models import DrugSensitivityRecord

# fmt -> (media type, file extension)
EXPORT_FORMATS = {
    "csv": ("text/csv", "csv"),
    "tsv": ("text/tab-separated-values", "tsv"),
    "json": ("application/json", "json"),
    "parquet": ("application/vnd.apache.parquet", "parquet"),
    "xlsx": ("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet", "xlsx"),
}

COLUMNS = ["id", "drug_name", "cell_line", "tissue_type", "dataset", "drug_class",
           "sensitivity_score", "ic50", "biomarkers", "reference"]

def records_to_frame(records: Sequence[DrugSensitivityRecord]) -> pd.DataFrame:
    rows = [r.model_dump() for r in records]
    for row in rows: row["biomarkers"] = ", ".join(row["biomarkers"])
    return pd.DataFrame(rows, columns=COLUMNS)

def write_any_table(df: pd.DataFrame, fmt: str) -> Tuple[bytes, str, str]:
    fmt = (fmt or "").lower().lstrip(".")
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported export format: {fmt!r} (expected one of {', '.join(EXPORT_FORMATS)})")
    media_type, ext = EXPORT_FORMATS[fmt]
    if fmt in ("csv", "tsv"):
        data = df.to_csv(index=False, sep="," if fmt == "csv" else "\t").encode("utf-8")
    elif fmt == "json":
        data = df.to_json(orient="records").encode("utf-8")
    else:
        buf = io.BytesIO()
        if fmt == "parquet": df.to_parquet(buf, index=False, engine="pyarrow")
        else: df.to_excel(buf, index=False, engine="openpyxl")
        data = buf.getvalue()
    return data, media_type, ext
