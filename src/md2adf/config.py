"""Local configuration for md2adf."""

from __future__ import annotations

import os


DEFAULT_STACK_MARKS = "true"
DEFAULT_RAW_HTML = "text"
DEFAULT_IMAGES = "link"
DEFAULT_JSON_INDENT = 2
DEFAULT_LOG_LEVEL = "WARNING"

# Nested styling accumulates marks on text leaves unless disabled.
MD2ADF_STACK_MARKS = os.getenv("MD2ADF_STACK_MARKS", DEFAULT_STACK_MARKS).lower() in {"1", "true", "yes"}
MD2ADF_RAW_HTML = os.getenv("MD2ADF_RAW_HTML", DEFAULT_RAW_HTML).lower()
MD2ADF_IMAGES = os.getenv("MD2ADF_IMAGES", DEFAULT_IMAGES).lower()
# Validated by ConversionOptions so a bad value is reported, not raised at import.
MD2ADF_JSON_INDENT = os.getenv("MD2ADF_JSON_INDENT", str(DEFAULT_JSON_INDENT))
MD2ADF_LOG_LEVEL = os.getenv("MD2ADF_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
