from spotrun._version import _detect_version

SPOTRUN_VERSION = _detect_version()

__all__ = ["SPOTRUN_VERSION"]
