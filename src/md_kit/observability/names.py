# src/md_kit/observability/names.py

"""Standard metric names for md-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Document Store Metrics
# ============================================================================

# Duration
DOCUMENT_PARSE_DURATION = "document_parse_duration"

# Counters
DOCUMENT_LOADS_TOTAL = "document_loads_total"
DOCUMENT_PARSE_ERRORS_TOTAL = "document_parse_errors_total"

# Gauges
DOCUMENT_BLOCKS = "document_blocks"
DOCUMENT_CODE_BLOCKS = "document_code_blocks"


# ============================================================================
# Renderer Metrics
# ============================================================================

# Duration
RENDER_DURATION = "render_duration"

# Counters
RENDER_REQUESTS_TOTAL = "render_requests_total"
RENDER_ERRORS_TOTAL = "render_errors_total"

# Gauges
RENDER_OUTPUT_CHARS = "render_output_chars"
