from spotrun.model.loader import DefaultBuildDescriptionLoader
from spotrun.model.resolver import DefaultTaskResolver
from spotrun.model.types import BuildDescription, ReportSettings, TaskDescription

__all__ = [
    "BuildDescription",
    "DefaultBuildDescriptionLoader",
    "DefaultTaskResolver",
    "ReportSettings",
    "TaskDescription",
]
