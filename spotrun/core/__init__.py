from spotrun.core.assembler import assemble
from spotrun.core.config import Confidence, Effort, SpotBugsExtension, TaskConfig
from spotrun.core.spec import SpotBugsSpec, SpotBugsSpecBuilder
from spotrun.core.task import MAIN_CLASS, RunResult, SpotBugsTask, apply_defaults

__all__ = [
    "MAIN_CLASS",
    "Confidence",
    "Effort",
    "RunResult",
    "SpotBugsExtension",
    "SpotBugsSpec",
    "SpotBugsSpecBuilder",
    "SpotBugsTask",
    "TaskConfig",
    "apply_defaults",
    "assemble",
]
