import re
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Optional

import numpy as np
import pandas as pd

# ------------------------
# Constants
# ------------------------
CPI_MIN = 0.0
CPI_MAX = 10.0

# Y% = 137.4 - 44.24X + 6.96X² - 0.29X³
FORMULA_TEXT = "Y% = 137.4 - 44.24X + 6.96X² - 0.29X³"


class ErrorKind(str, Enum):
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"


ERROR_MESSAGES = {
    ErrorKind.NOT_A_NUMBER: "Please enter a valid number",
    ErrorKind.OUT_OF_RANGE: "CPI must be between 0 and 10",
}

# Leading numeric prefix, same rule a browser's parseFloat applies.
# ASCII digits only; U+FEFF counts as leading whitespace.
_NUMERIC_PREFIX = re.compile(
    r"[\s\ufeff]*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)


@dataclass(frozen=True)
class ConversionResult:
    """
    One of four states:
      Empty                     -> percentage None, error None
      Invalid(NOT_A_NUMBER)     -> percentage None, error set
      Invalid(OUT_OF_RANGE)     -> percentage None, error set
      Valid(percentage)         -> percentage set, error None
    """

    percentage: Optional[float] = None
    error: Optional[ErrorKind] = None

    @property
    def is_empty(self) -> bool:
        return self.percentage is None and self.error is None

    @property
    def is_valid(self) -> bool:
        return self.percentage is not None

    @property
    def message(self) -> Optional[str]:
        if self.error is None:
            return None
        return ERROR_MESSAGES[self.error]


EMPTY = ConversionResult()


# ------------------------
# Core logic
# ------------------------
def round_2dp_half_up(x: float) -> float:
    return float(Decimal(str(x)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def parse_cpi(raw_input: str) -> Optional[float]:
    """
    Lenient float parse: skips leading whitespace, then reads the longest
    numeric prefix and ignores whatever follows ("7.5 cpi" -> 7.5).
    Returns None when there is no numeric prefix at all.
    """
    match = _NUMERIC_PREFIX.match(raw_input)
    if match is None:
        return None
    return float(match.group(1))


def cpi_to_percentage(cpi: float) -> float:
    return 137.4 - (44.24 * cpi) + (6.96 * cpi ** 2) - (0.29 * cpi ** 3)


def convert(raw_input: str) -> ConversionResult:
    if raw_input == "":
        return EMPTY

    cpi_value = parse_cpi(raw_input)
    if cpi_value is None:
        return ConversionResult(error=ErrorKind.NOT_A_NUMBER)

    # Inclusive bounds; inf lands here as well
    if cpi_value < CPI_MIN or cpi_value > CPI_MAX:
        return ConversionResult(error=ErrorKind.OUT_OF_RANGE)

    return ConversionResult(percentage=round_2dp_half_up(cpi_to_percentage(cpi_value)))


def format_percentage(value: float) -> str:
    """53.95 -> '53.95%', 101.0 -> '101%'"""
    return f"{value:g}%"


# ------------------------
# Reference table
# ------------------------
def conversion_table(start: float = CPI_MIN,
                     stop: float = CPI_MAX,
                     step: float = 0.5) -> pd.DataFrame:
    if step <= 0:
        raise ValueError("step must be positive")
    if step < 0.01:
        raise ValueError("step must be at least 0.01")
    if start > stop:
        raise ValueError("start must not exceed stop")
    if start < CPI_MIN or stop > CPI_MAX:
        raise ValueError("CPI range must lie within 0 and 10")

    # half a step of slack so stop is included despite float drift
    cpis = np.arange(start, stop + step / 2.0, step)
    cpis = np.minimum(cpis, stop)

    rows = []
    for cpi in cpis:
        cpi = round_2dp_half_up(float(cpi))
        result = convert(str(cpi))
        rows.append({"CPI": cpi, "Percentage": result.percentage})

    return pd.DataFrame(rows, columns=["CPI", "Percentage"])
