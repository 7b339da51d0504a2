from pathlib import Path

from movemutant.cli import DEFAULT_OUTPUT_DIR, CLIOptions, ModuleFilter
from movemutant.configuration import Configuration
from movemutant.operators.common import Loc, Span


def test_default_configuration():
    config = Configuration()
    assert config.project == CLIOptions()
    assert config.project.out_mutant_dir == Path(DEFAULT_OUTPUT_DIR)
    assert config.project_path is None
    assert config.coverage.all_uncovered_spans == {}


def test_coverage_disabled_by_default_covers_everything():
    config = Configuration(CLIOptions(), None)
    assert config.coverage.check_location("m::f", Loc(0, Span(0, 10))) is True


def test_keeps_given_options_and_path():
    options = CLIOptions(mutate_modules=ModuleFilter.parse("a,b"), no_overwrite=True)
    config = Configuration(options, "some/project")
    assert config.project is options
    assert config.project.mutate_modules.selected == ("a", "b")
    assert config.project_path == Path("some/project")


def test_configurations_do_not_share_coverage():
    first = Configuration()
    second = Configuration()
    first.coverage.all_uncovered_spans["m::f"] = [Span(0, 1)]
    assert second.coverage.all_uncovered_spans == {}