from .diary import DiaryEntry, DiaryEntryCreate, DiaryEntryUpdate
from .profile import Family, Profile, ProfileCreate, ProfileStatus, ProfileSummary, ProfileUpdate
from .saved_strategy import SavedStrategy, WorkedUpdate
from .strategy import CreatorStats, Strategy, StrategyCreate, StrategyDetail, StrategyUpdate

__all__ = [
    "DiaryEntry", "DiaryEntryCreate", "DiaryEntryUpdate",
    "Family", "Profile", "ProfileCreate", "ProfileStatus", "ProfileSummary", "ProfileUpdate",
    "SavedStrategy", "WorkedUpdate",
    "CreatorStats", "Strategy", "StrategyCreate", "StrategyDetail", "StrategyUpdate",
]
