import os
import tempfile
from dataclasses import dataclass, field

from dualrun.datastructures.type_aliases import NamespaceMarker

from .level_parser import DEFAULT_NAMESPACE

CLUSTER_FS_ENV = "DUALRUN_CLUSTER_FS"
CLUSTER_JOBTRACKER_ENV = "DUALRUN_CLUSTER_JOBTRACKER"
WORK_DIR_ENV = "DUALRUN_WORK_DIR"
NAMESPACE_ENV = "DUALRUN_NAMESPACE"

CONTEXT_NAMES = ("local", "cluster", "local-then-cluster")


@dataclass(frozen=True, slots=True)
class ClusterSettings:
    """Location of the remote nodes used for cluster execution."""

    filesystem: str | None = None
    job_tracker: str | None = None

    @classmethod
    def from_environment(cls) -> "ClusterSettings":
        return cls(
            filesystem=os.environ.get(CLUSTER_FS_ENV) or None,
            job_tracker=os.environ.get(CLUSTER_JOBTRACKER_ENV) or None,
        )


@dataclass(slots=True)
class DualRunSettings:
    """dualrun execution settings."""

    namespace: NamespaceMarker = DEFAULT_NAMESPACE
    default_context: str = "local-then-cluster"
    work_dir: str = ""
    cluster: ClusterSettings = field(default_factory=ClusterSettings)

    def __post_init__(self) -> None:
        if self.default_context not in CONTEXT_NAMES:
            raise ValueError(
                f"Unknown context {self.default_context!r}, expected one of {CONTEXT_NAMES}"
            )
        if not self.work_dir:
            self.work_dir = os.environ.get(WORK_DIR_ENV) or os.path.join(
                tempfile.gettempdir(), "dualrun"
            )

    @classmethod
    def from_environment(cls, **overrides: object) -> "DualRunSettings":
        """Settings with the cluster location and namespace read from the environment."""
        if os.environ.get(NAMESPACE_ENV):
            overrides.setdefault("namespace", os.environ[NAMESPACE_ENV])
        overrides.setdefault("cluster", ClusterSettings.from_environment())
        return cls(**overrides)  # type: ignore[arg-type]
