from spotrun.deps.configurations import (
    CONFIG_NAME,
    PLUGIN_CONFIG_NAME,
    SLF4J_CONFIG_NAME,
    SPOTBUGS_ARTIFACT,
    SPOTBUGS_GROUP,
    ConfigurationContainer,
    ResolvedArtifact,
    is_spotbugs_artifact,
)

__all__ = [
    "CONFIG_NAME",
    "PLUGIN_CONFIG_NAME",
    "SLF4J_CONFIG_NAME",
    "SPOTBUGS_ARTIFACT",
    "SPOTBUGS_GROUP",
    "ConfigurationContainer",
    "ResolvedArtifact",
    "is_spotbugs_artifact",
]
