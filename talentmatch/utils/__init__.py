"""
Utility modules for TalentMatch.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Application-wide constants
"""

from talentmatch.utils.config import (
    AppSettings,
    LoggingSettings,
    MatchingSettings,
    get_settings,
    reload_settings,
)
from talentmatch.utils.constants import (
    APP_NAME,
    AuditAction,
    ExclusionReason,
    JobType,
    MatchScoreLevel,
)
from talentmatch.utils.logger import (
    setup_logging,
    get_logger,
    audit_log,
    LoggerMixin,
)

__all__ = [
    # Config
    "AppSettings",
    "LoggingSettings",
    "MatchingSettings",
    "get_settings",
    "reload_settings",
    # Constants
    "APP_NAME",
    "AuditAction",
    "ExclusionReason",
    "JobType",
    "MatchScoreLevel",
    # Logger
    "setup_logging",
    "get_logger",
    "audit_log",
    "LoggerMixin",
]
