import io
import logging

import numpy as np
import pandas as pd
import pytest

from src.io_csv import (
    convert_cpi_frame,
    read_csv_upload,
    to_csv_bytes,
    validate_cpi_csv,
)


def _upload(text: str) -> io.BytesIO:
    return io.BytesIO(text.encode("utf-8"))


def test_read_csv_upload_keeps_raw_text_and_normalises_headers():
    df = read_csv_upload(_upload(" Name ,CPI\nasha,7.50\nbilal,\nchen,abc\n"))
    assert list(df.columns) == ["name", "cpi"]
    assert df["cpi"].tolist() == ["7.50", "", "abc"]


@pytest.mark.parametrize("header", ["CGPA", "cpi score", "Cpi"])
def test_read_csv_upload_accepts_aliases(header):
    df = read_csv_upload(_upload(f"{header}\n8\n"))
    assert "cpi" in df.columns


def test_validate_cpi_csv_puts_cpi_first():
    df = pd.DataFrame({"name": ["asha"], "cpi": ["7.5"]})
    out = validate_cpi_csv(df)
    assert list(out.columns) == ["CPI", "name"]


def test_validate_cpi_csv_missing_column(caplog):
    df = pd.DataFrame({"grade": ["7.5"]})
    with caplog.at_level(logging.WARNING, logger="src.io_csv"):
        with pytest.raises(ValueError, match="Missing columns"):
            validate_cpi_csv(df)
    assert "Rejected CSV upload" in caplog.text


def test_convert_cpi_frame_mixed_rows(caplog):
    df = validate_cpi_csv(
        read_csv_upload(_upload("name,cpi\nasha,5\nbilal,\nchen,abc\ndev,10.5\nesha,10\n"))
    )
    with caplog.at_level(logging.INFO, logger="src.io_csv"):
        out = convert_cpi_frame(df)

    assert out["Percentage"].iloc[0] == 53.95
    assert np.isnan(out["Percentage"].iloc[1])
    assert np.isnan(out["Percentage"].iloc[2])
    assert np.isnan(out["Percentage"].iloc[3])
    assert out["Percentage"].iloc[4] == 101.0

    assert out["Error"].tolist() == [
        "",
        "",
        "Please enter a valid number",
        "CPI must be between 0 and 10",
        "",
    ]
    assert "Converted 5 CPI rows (2 invalid)" in caplog.text


def test_convert_cpi_frame_does_not_mutate_input():
    df = pd.DataFrame({"CPI": ["5"]})
    convert_cpi_frame(df)
    assert list(df.columns) == ["CPI"]


def test_convert_cpi_frame_handles_missing_cells():
    df = pd.DataFrame({"CPI": [None, 8.0]})
    out = convert_cpi_frame(df)
    assert np.isnan(out["Percentage"].iloc[0])
    assert out["Error"].iloc[0] == ""
    assert out["Percentage"].iloc[1] == 80.44


def test_to_csv_bytes():
    df = pd.DataFrame({"CPI": ["5"], "Percentage": [53.95], "Error": [""]})
    data = to_csv_bytes(df)
    assert data.decode("utf-8").splitlines() == ["CPI,Percentage,Error", "5,53.95,"]
