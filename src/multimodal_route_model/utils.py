"""Shared utility functions for multimodal route model."""
import logging
import sys
from typing import Optional

import pandas as pd


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure and return logger that writes to stdout."""
    logger = logging.getLogger("route_model")

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


def parse_optional_float(val) -> Optional[float]:
    """Parse a numeric cell from Excel; blank cells become None."""
    if val is None or pd.isna(val):
        return None
    if isinstance(val, str):
        val = val.strip()
        if not val:
            return None
        try:
            return float(val)
        except ValueError:
            raise ValueError(f"Cannot parse numeric value: {val}")
    return float(val)


def format_path_nodes(nodes) -> str:
    """Format path nodes as arrow-separated string: Tambaram->Alandur->Anna Nagar"""
    return "->".join(nodes)
