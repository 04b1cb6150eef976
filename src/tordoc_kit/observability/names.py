# src/tordoc_kit/observability/names.py

"""Standard metric names for tordoc-kit observability.

Use these constants instead of hardcoded strings.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Annotation Metrics
# ============================================================================

# Counters
ANNOTATION_CHECKS_TOTAL = "annotation_checks_total"
# Labelled with reason="malformed" or reason="unsupported"
ANNOTATION_REJECTED_TOTAL = "annotation_rejected_total"


# ============================================================================
# Dissection Metrics
# ============================================================================

# Duration (read + split, measured in the producer thread)
DISSECTION_DURATION = "dissection_duration"

# Counters
DISSECTION_RUNS_TOTAL = "dissection_runs_total"
DISSECTION_BLURBS_EMITTED = "dissection_blurbs_emitted"
DISSECTION_BLURBS_SKIPPED = "dissection_blurbs_skipped"
# Labelled with reason="read"
DISSECTION_ERRORS_TOTAL = "dissection_errors_total"
DISSECTION_CANCELLED_TOTAL = "dissection_cancelled_total"

# Gauges (characters, after decoding)
DISSECTION_DOCUMENT_SIZE = "dissection_document_size"
