"""Example bodies run by the CLI tests."""

from dualrun.core.configuration import RuntimeConfiguration
from dualrun.datastructures.outcome import Success

NOT_CALLABLE = 42


def passing(conf: RuntimeConfiguration) -> Success:
    mode = "cluster" if conf.is_remote else "local"
    return Success(message=f"word count matched ({mode})")


def failing(conf: RuntimeConfiguration) -> None:
    assert conf.get("missing.key") == "value", "missing.key is not configured"
