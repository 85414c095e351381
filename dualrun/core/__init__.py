"""
dualrun Core Module

Execution contexts, the run gate, the outcome merger and the collaborators
they need: command-line arguments, runtime configurations and environment
providers.
"""

from .arguments import CommandLineArguments, FilterSet
from .config import ClusterSettings, DualRunSettings
from .configuration import RuntimeConfiguration, configuration
from .context import (
    Body,
    ClusterContext,
    ExecutionContext,
    LocalContext,
    LocalThenClusterContext,
    create_context,
    execute,
    outcome_of,
)
from .environment import ConfigurationProvider, EnvironmentProvider
from .level_parser import parse_level
from .merger import merge_outcomes
from .model import (
    ClusterNotConfiguredError,
    DualRunException,
    InvalidTargetError,
    OutcomeReport,
)
from .run_gate import ContextKind, allowed, excluded
from .timer import Timer, format_elapsed
from .unique_id import UniqueIdGenerator

__all__ = [
    # Arguments
    "CommandLineArguments",
    "FilterSet",
    # Config
    "ClusterSettings",
    "DualRunSettings",
    # Environment
    "ConfigurationProvider",
    "EnvironmentProvider",
    "RuntimeConfiguration",
    "configuration",
    # Contexts
    "Body",
    "ClusterContext",
    "ExecutionContext",
    "LocalContext",
    "LocalThenClusterContext",
    "create_context",
    "execute",
    "outcome_of",
    # Gate and merge
    "ContextKind",
    "allowed",
    "excluded",
    "merge_outcomes",
    # Levels
    "parse_level",
    # Model
    "ClusterNotConfiguredError",
    "DualRunException",
    "InvalidTargetError",
    "OutcomeReport",
    # Utilities
    "Timer",
    "UniqueIdGenerator",
    "format_elapsed",
]
