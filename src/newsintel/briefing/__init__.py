from newsintel.briefing.service import BriefingService, format_context

__all__ = [
    "BriefingService",
    "format_context",
]
