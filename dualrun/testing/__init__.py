"""pytest support: context fixtures and the outcome reporting sink."""

from .plugin import arguments_from_config, report_outcome, run_example

__all__ = ["arguments_from_config", "report_outcome", "run_example"]
