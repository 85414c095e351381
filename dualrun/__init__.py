"""
dualrun - run test examples locally, on a cluster, or both

Write one location-agnostic example body and let an execution context decide
where it runs and how the outcomes of several runs are folded into one.

## Architecture

- **datastructures**: Outcome variants and verbosity levels
- **core**: execution contexts, run gate, outcome merger, configuration
- **io**: path helpers for example inputs and outputs
- **testing**: pytest plugin and reporting sink
- **cli**: command-line tools

## Quick Start

```python
from dualrun import CommandLineArguments, LocalThenClusterContext, Success

arguments = CommandLineArguments.from_tokens(["include", "hadoop"])
context = LocalThenClusterContext(arguments=arguments)

outcome = context.run(lambda conf: Success(f"ran in {conf.working_directory}"))
```
"""

from .core import (
    ClusterContext,
    ClusterSettings,
    CommandLineArguments,
    ConfigurationProvider,
    ContextKind,
    DualRunSettings,
    ExecutionContext,
    FilterSet,
    LocalContext,
    LocalThenClusterContext,
    RuntimeConfiguration,
    allowed,
    create_context,
    merge_outcomes,
    parse_level,
)
from .datastructures import (
    Error,
    Failure,
    Level,
    Outcome,
    Skipped,
    Success,
    annotate,
    map_skipped_reason,
)

# Version info
__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    # Contexts
    "ClusterContext",
    "ExecutionContext",
    "LocalContext",
    "LocalThenClusterContext",
    "create_context",
    # Decisions
    "ContextKind",
    "allowed",
    "merge_outcomes",
    "parse_level",
    # Configuration
    "ClusterSettings",
    "CommandLineArguments",
    "ConfigurationProvider",
    "DualRunSettings",
    "FilterSet",
    "RuntimeConfiguration",
    # Outcomes
    "Error",
    "Failure",
    "Level",
    "Outcome",
    "Skipped",
    "Success",
    "annotate",
    "map_skipped_reason",
]
