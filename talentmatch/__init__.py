"""
TalentMatch: ranks candidate profiles against a job requirement.

Library use stays silent; call talentmatch.utils.logger.setup_logging()
to see log output.
"""

from loguru import logger

__version__ = "0.1.0"
__app_name__ = "TalentMatch"

logger.disable(__name__)

from talentmatch.core.matching import fuzzy_match, haversine_distance, rank  # noqa: E402
from talentmatch.data import normalize_candidate, normalize_requirement  # noqa: E402

__all__ = [
    "__version__",
    "__app_name__",
    "fuzzy_match",
    "haversine_distance",
    "rank",
    "normalize_candidate",
    "normalize_requirement",
]
