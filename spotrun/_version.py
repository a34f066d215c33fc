from importlib.metadata import PackageNotFoundError, version


def _detect_version() -> str:
    """
    Detect spotrun version.

    Falls back to a development placeholder if the package metadata
    is not available.
    """
    try:
        return version("spotrun")
    except PackageNotFoundError:
        return "0.0.0-dev"
