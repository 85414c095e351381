"""Tests for the command-line derived filters and switches."""

from dualrun.core.arguments import CommandLineArguments, FilterSet
from dualrun.datastructures.level import Level


class TestFilterSet:
    def test_of_and_keep(self):
        filters = FilterSet.of("hadoop", "local")
        assert filters.keep("hadoop")
        assert filters.keep("local")
        assert not filters.keep("cluster")
        assert "local" in filters
        assert len(filters) == 2

    def test_keep_is_exact(self):
        filters = FilterSet.of("hadoop-nightly")
        assert not filters.keep("hadoop")

    def test_from_csv(self):
        filters = FilterSet.from_csv(["hadoop, local", "", "cluster,"])
        assert filters == FilterSet.of("hadoop", "local", "cluster")

    def test_iteration_is_sorted(self):
        assert list(FilterSet.of("local", "cluster")) == ["cluster", "local"]


class TestCommandLineArguments:
    """Test parsing of raw tokens."""

    def test_empty(self):
        arguments = CommandLineArguments.from_tokens([])
        assert len(arguments.filters) == 0
        assert not arguments.show_times
        assert arguments.verbose_arg is None
        assert arguments.quiet
        assert arguments.level == Level.INFO

    def test_include_keyword(self):
        arguments = CommandLineArguments.from_tokens(["include", "hadoop,cluster"])
        assert arguments.keep("hadoop")
        assert arguments.keep("cluster")
        assert not arguments.keep("include")

    def test_include_option(self):
        arguments = CommandLineArguments.from_tokens(["--include=local"])
        assert arguments.filters == FilterSet.of("local")

    def test_trailing_include_keyword_is_ignored(self):
        arguments = CommandLineArguments.from_tokens(["include"])
        assert len(arguments.filters) == 0

    def test_show_times(self):
        assert CommandLineArguments.from_tokens(["scoobi.times"]).show_times
        assert CommandLineArguments.from_tokens(["scoobi.verbose.times"]).show_times
        assert not CommandLineArguments.from_tokens(["times"]).show_times
        assert not CommandLineArguments.from_tokens(["scoobitimes"]).show_times

    def test_verbose_arg_and_level(self):
        arguments = CommandLineArguments.from_tokens(
            ["include", "local", "scoobi.verbose.finest", "scoobi.verbose.fine"]
        )
        assert arguments.verbose_arg == "scoobi.verbose.finest"
        assert not arguments.quiet
        assert arguments.level == Level.FINEST

    def test_verbose_without_level(self):
        arguments = CommandLineArguments.from_tokens(["scoobi.verbose"])
        assert not arguments.quiet
        assert arguments.level == Level.INFO

    def test_namespace(self):
        arguments = CommandLineArguments.from_tokens(
            ["myapp.verbose.fine.times"], namespace="myapp"
        )
        assert arguments.show_times
        assert arguments.level == Level.FINE
        assert not CommandLineArguments.from_tokens(["myapp.times"]).show_times
