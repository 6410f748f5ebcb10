"""Centralised application settings (dotenv + env overrides)."""
from __future__ import annotations
import os
from pathlib import Path
from typing import List, Tuple
from dotenv import find_dotenv, load_dotenv

PACKAGE_ROOT = Path(__file__).parents[1]
load_dotenv(find_dotenv(usecwd=True), override=False)

class settings:                            # pylint: disable=too-few-public-methods
    LOG_LEVEL        = os.getenv("LOG_LEVEL", "INFO").upper()
    DATA_DIR         = Path(os.getenv("DATA_DIR", PACKAGE_ROOT / "data"))
    SAMSUNG_ADDRESS  = os.getenv("SAMSUNG_ADDRESS", "::1")
    # ports stay raw; DeviceFamilyConfig validates them
    SAMSUNG_PORT     = os.getenv("SAMSUNG_PORT", "3000")
    PHILIPS_ADDRESS  = os.getenv("PHILIPS_ADDRESS", "::1:1")
    PHILIPS_PORT     = os.getenv("PHILIPS_PORT", "8080")

    @classmethod
    def device_families(cls) -> List[Tuple[str, str, str]]:
        """(family, address, port) entries driven by the device demo."""
        return [
            ("Samsung", cls.SAMSUNG_ADDRESS, cls.SAMSUNG_PORT),
            ("Philips", cls.PHILIPS_ADDRESS, cls.PHILIPS_PORT),
        ]
