"""Where: src/relink/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - SCAN_MAX_DEPTH is a safety bound owned by the relocation domain, so it is
  re-exported here rather than read from config.
"""

from __future__ import annotations

from relink.config.config import TRACK_LIST_LIMIT_DEFAULT, config as app_config
from relink.features.relocation.domain.models import SCAN_MAX_DEPTH

# Presentation ----------------------------------------------------------------

_track_list_limit = getattr(app_config, "track_list_limit", TRACK_LIST_LIMIT_DEFAULT)
TRACK_LIST_LIMIT: int = (
    _track_list_limit
    if isinstance(_track_list_limit, int) and _track_list_limit >= 0
    else TRACK_LIST_LIMIT_DEFAULT
)


__all__ = ["SCAN_MAX_DEPTH", "TRACK_LIST_LIMIT"]
