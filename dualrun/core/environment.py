"""
Environment providers building the configuration an example body runs with.

Every call builds a fresh ``RuntimeConfiguration`` so that a local attempt
and the following cluster attempt never share mutable state.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Protocol

from loguru import logger

from .config import DualRunSettings
from .configuration import (
    CLUSTER_MODE,
    LOCAL_MODE,
    MODE_KEY,
    RUN_ID_KEY,
    WORKDIR_KEY,
    RuntimeConfiguration,
)
from .model import ClusterNotConfiguredError
from .unique_id import UniqueIdGenerator, run_ids

FILESYSTEM_KEY = "fs.defaultFS"
FRAMEWORK_KEY = "mapreduce.framework.name"
JOBTRACKER_KEY = "mapreduce.jobtracker.address"

LOCAL_FILESYSTEM = "file:///"


class EnvironmentProvider(Protocol):
    """Builds local and remote environment handles; either may raise."""

    def local_environment(self) -> RuntimeConfiguration: ...

    def remote_environment(self) -> RuntimeConfiguration: ...


@dataclass(slots=True)
class ConfigurationProvider:
    """Default provider configuring for the local runner or the cluster."""

    settings: DualRunSettings = field(default_factory=DualRunSettings)
    ids: UniqueIdGenerator = field(default_factory=lambda: run_ids)

    def _base(self, mode: str) -> RuntimeConfiguration:
        run_id = self.ids.next()
        conf = RuntimeConfiguration()
        conf.set(MODE_KEY, mode)
        conf.set(RUN_ID_KEY, str(run_id))
        conf.set(WORKDIR_KEY, os.path.join(self.settings.work_dir, f"{mode}-{run_id}"))
        return conf

    def local_environment(self) -> RuntimeConfiguration:
        conf = self._base(LOCAL_MODE)
        conf.set(FILESYSTEM_KEY, LOCAL_FILESYSTEM)
        conf.set(FRAMEWORK_KEY, LOCAL_MODE)
        logger.debug("Built local environment {}", conf.working_directory)
        return conf

    def remote_environment(self) -> RuntimeConfiguration:
        cluster = self.settings.cluster
        if not cluster.filesystem:
            raise ClusterNotConfiguredError("cluster filesystem")

        conf = self._base(CLUSTER_MODE)
        conf.set(FILESYSTEM_KEY, cluster.filesystem)
        conf.set(FRAMEWORK_KEY, "yarn")
        if cluster.job_tracker:
            conf.set(JOBTRACKER_KEY, cluster.job_tracker)
        logger.debug(
            "Built cluster environment {} on {}",
            conf.working_directory,
            cluster.filesystem,
        )
        return conf
