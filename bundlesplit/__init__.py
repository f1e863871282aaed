"""bundlesplit - build-time environment selection and chunk partitioning policy."""

from bundlesplit.build import BuildConfiguration, create_build_configuration
from bundlesplit.chunking import ChunkClassifier, classify
from bundlesplit.environment import EnvironmentSelector, select

__version__ = "0.3.0"

__all__ = [
    "BuildConfiguration",
    "create_build_configuration",
    "ChunkClassifier",
    "classify",
    "EnvironmentSelector",
    "select",
    "__version__",
]
