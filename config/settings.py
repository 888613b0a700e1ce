"""
Configuration settings for the storefront review panel.

Centralized defaults for the panel state, summary policy, storage and logging.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_ROOT = PROJECT_ROOT / "data"
OUTPUT_ROOT = PROJECT_ROOT / "output"

# Review dates
DATE_FORMAT = "%Y-%m-%d"  # YYYY-MM-DD, as sent by the storefront

# Rating bounds
MIN_RATING = 1
MAX_RATING = 5

# Panel defaults
DEFAULT_SORT_KEY = "newest"
DEFAULT_FILTER_KEY = "all"
DEFAULT_DRAFT_RATING = 5

# Rating summary policy: "supplied" (use host aggregates) or "derived"
SUMMARY_POLICY = os.getenv("STOREFRONT_SUMMARY_POLICY", "supplied")

# Text rendering
BAR_WIDTH_CHARS = 20

# Logging
LOG_LEVEL = os.getenv("STOREFRONT_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "storefront.log"


# Design Rationale and Trade-offs:
#
# 1. Why environment variables for policy and log level?
#    - Deployments can switch summary source without code changes
#    - Trade-off: Values are read once at import time
#
# 2. Why "supplied" as the default summary policy?
#    - Matches the storefront, where the host sends precomputed aggregates
#    - Trade-off: Summary can drift from the visible list; use "derived" to avoid it
