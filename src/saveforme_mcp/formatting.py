"""Formatting utilities for SaveForMe tools and the setup CLI.

Human-readable file sizes for tool responses, and ASCII tables for the
drive and file listings printed by the CLI.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional

import pandas as pd

logger = logging.getLogger(__name__)

SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB")


def format_file_size(size: int) -> str:
    """Format a byte count with binary (1024) units and up to two decimals.

    Examples:
        >>> format_file_size(0)
        '0 Bytes'
        >>> format_file_size(1536)
        '1.5 KB'
        >>> format_file_size(1048576)
        '1 MB'
    """
    if size <= 0:
        return "0 Bytes"

    index = min(int(math.floor(math.log(size, 1024))), len(SIZE_UNITS) - 1)
    value = size / (1024**index)
    # Guard against log() landing just below an exact power of 1024
    if value >= 1024 and index < len(SIZE_UNITS) - 1:
        index += 1
        value = size / (1024**index)
    elif value < 1 and index > 0:
        index -= 1
        value = size / (1024**index)

    number = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{number} {SIZE_UNITS[index]}"


def format_as_table(
    data: List[Dict[str, Any]],
    max_rows: Optional[int] = None,
) -> str:
    """Format a list of records as a readable ASCII table.

    Args:
        data: Records sharing the same keys
        max_rows: Maximum number of rows to display (None for all)

    Returns:
        Formatted table string
    """
    if not data:
        return "No data to display"

    df = pd.DataFrame(data)

    if max_rows and len(df) > max_rows:
        df_display = df.head(max_rows)
        truncated_msg = f"\n... ({len(df) - max_rows} more rows)"
    else:
        df_display = df
        truncated_msg = ""

    try:
        table_str = df_display.to_string(index=False, max_colwidth=40, justify="left")
    except (ValueError, TypeError) as e:
        logger.warning(f"Table formatting failed, using simple representation: {e}")
        table_str = str(df_display.values.tolist())

    return table_str + truncated_msg
