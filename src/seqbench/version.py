"""Version info"""

__version__ = "0.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

__author__ = "seqbench Contributors"
__license__ = "Apache-2.0"
__copyright__ = "Copyright 2026 seqbench Contributors"

PROJECT_NAME = "seqbench"
PROJECT_DESCRIPTION = (
    "A deterministic, instrumented runner for ordered asynchronous benchmark steps"
)
