# src/config.py

import logging
import os
from dataclasses import dataclass, field


def _log_level_from_env() -> str:
    """CPI_CONVERTER_LOG_LEVEL, or WARNING when unset or not a logging level name."""
    level = os.getenv("CPI_CONVERTER_LOG_LEVEL", "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return "WARNING"
    return level


# ---------------------------
# Page / institution configuration
# ---------------------------

@dataclass(frozen=True)
class AppConfig:
    """Static metadata shown around the converter.

    Values can be overridden via environment variables:
    - CPI_CONVERTER_INSTITUTION
    - CPI_CONVERTER_LOGO_URL
    - CPI_CONVERTER_PROGRAMME
    - CPI_CONVERTER_NOTICE_DATE
    - CPI_CONVERTER_ISSUER
    - CPI_CONVERTER_LOG_LEVEL
    """

    institution_name: str = field(
        default_factory=lambda: os.getenv("CPI_CONVERTER_INSTITUTION", "Jamia Millia Islamia")
    )
    logo_url: str = field(
        default_factory=lambda: os.getenv(
            "CPI_CONVERTER_LOGO_URL",
            "https://vendotic.com/public/uploads/small/"
            "jamia-millia-islamia-logo-hd-png-vector-free-download-121.png",
        )
    )
    programme: str = field(
        default_factory=lambda: os.getenv(
            "CPI_CONVERTER_PROGRAMME",
            "For B.Tech. Final Year Examination (w.e.f. Session 2021-22)",
        )
    )
    notice_date: str = field(
        default_factory=lambda: os.getenv("CPI_CONVERTER_NOTICE_DATE", "25 February 2025")
    )
    issuer: str = field(
        default_factory=lambda: os.getenv("CPI_CONVERTER_ISSUER", "Controller of Examinations")
    )
    log_level: str = field(
        default_factory=_log_level_from_env
    )

    @property
    def footer(self) -> str:
        # year is the last token of the notice date ("25 February 2025")
        year = self.notice_date.split()[-1] if self.notice_date.split() else ""
        return f"© {year} {self.institution_name}. All rights reserved."

    @property
    def approval_note(self) -> str:
        return (
            f"This formula has been officially approved by the {self.issuer} for converting "
            "CPI to percentage for B.Tech. Final Year students from the 2021-22 session onwards."
        )


def get_config() -> AppConfig:
    return AppConfig()
