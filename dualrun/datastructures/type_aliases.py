"""
Semantic type aliases for dualrun datastructures.

These aliases name the raw str/int/float values that flow between the
execution contexts, the gate and the reporting layer.
"""

from collections.abc import Mapping

# Time types
type DurationSeconds = float

# Command-line types
type CommandLineToken = str
type FilterTag = str
type NamespaceMarker = str

# Reporting text
type OutcomeMessage = str
type ExpectedText = str
type SkipReason = str
type StackFrameText = str

# Configuration types
type ConfigurationKey = str
type ConfigurationValue = str
type ConfigurationMapping = Mapping[str, str]
type RunId = int

# Filesystem types
type PathPattern = str
type ByteSize = int
