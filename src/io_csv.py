import logging

import numpy as np
import pandas as pd

from src.backend_logic import convert

logger = logging.getLogger(__name__)

# ------------------------
# CSV helpers (UI-side)
# ------------------------

CPI_ALIASES = ("cgpa", "cpi score")


def _normalise_cols(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df.columns = [str(c).strip().lower() for c in df.columns]
    # allow "cgpa" / "cpi score" headers
    if "cpi" not in df.columns:
        for alias in CPI_ALIASES:
            if alias in df.columns:
                df = df.rename(columns={alias: "cpi"})
                break
    return df


def read_csv_upload(uploaded_file) -> pd.DataFrame:
    # keep cells as typed, so "" stays empty and "abc" stays "abc"
    df = pd.read_csv(uploaded_file, dtype=str, keep_default_na=False)
    return _normalise_cols(df)


def validate_cpi_csv(df: pd.DataFrame) -> pd.DataFrame:
    if "cpi" not in df.columns:
        logger.warning("Rejected CSV upload, columns were %s", list(df.columns))
        raise ValueError("Missing columns: ['cpi']. Expected: CPI.")
    others = [c for c in df.columns if c != "cpi"]
    out = df[["cpi"] + others].copy()
    out = out.rename(columns={"cpi": "CPI"})
    return out


def convert_cpi_frame(df: pd.DataFrame) -> pd.DataFrame:
    """
    Runs every row's raw CPI text through convert().
    Adds 'Percentage' (NaN unless valid) and 'Error' (message or "").
    """
    out = df.copy()
    percentages = []
    errors = []
    for raw in out["CPI"]:
        raw = "" if pd.isna(raw) else str(raw)
        result = convert(raw)
        percentages.append(result.percentage if result.is_valid else np.nan)
        errors.append(result.message or "")

    out["Percentage"] = np.array(percentages, dtype=float)
    out["Error"] = errors

    n_errors = sum(1 for e in errors if e)
    logger.info("Converted %d CPI rows (%d invalid)", len(out), n_errors)
    return out


def to_csv_bytes(df: pd.DataFrame) -> bytes:
    return df.to_csv(index=False).encode("utf-8")
