"""Utility functions for the rainfall chart."""

import logging
import sys


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """
    Setup logging configuration for command-line runs.

    Args:
        log_level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Logger instance for the root logger
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove any existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    return root_logger


def safe_label(label: str) -> str:
    """Reduce a source label to characters that are safe in a file name."""
    cleaned = "".join(c if c.isalnum() or c in "_-" else "-" for c in label.strip())
    return cleaned or "chart"


def export_filename(prefix: str, label: str, ext: str) -> str:
    """
    Build the download name for an exported chart.

    Args:
        prefix: Application prefix (e.g., "belize-rainfall")
        label: Label of the currently selected data source
        ext: File extension without the dot

    Returns:
        File name such as "belize-rainfall-rainfall_2023.svg"
    """
    return f"{prefix}-{safe_label(label)}.{ext}"
