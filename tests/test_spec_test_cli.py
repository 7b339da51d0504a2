from pathlib import Path

import pytest

from movemutant.cli import DEFAULT_OUTPUT_DIR, FunctionFilter, ModuleFilter
from movemutant.spec_test_cli import SpecTestOptions, create_mutator_options


def test_cli_options_starts_empty():
    options = SpecTestOptions()
    assert options.move_sources == []
    assert options.mutate_modules == ModuleFilter()
    assert options.mutate_functions == FunctionFilter()
    assert options.mutator_conf is None
    assert options.prover_conf is None
    assert options.output is None
    assert options.extra_prover_args is None


def test_create_mutator_options_copies_fields():
    options = SpecTestOptions()
    options.move_sources.append(Path("path/to/file"))
    options.mutate_modules = ModuleFilter(("mod1", "mod2"))
    options.mutate_functions = FunctionFilter(("func1", "func2"))
    options.mutator_conf = Path("path/to/mutator/conf")

    mutator_options = create_mutator_options(options)

    assert mutator_options.move_sources == options.move_sources
    assert mutator_options.mutate_modules == options.mutate_modules
    assert mutator_options.mutate_functions == options.mutate_functions


def test_create_mutator_options_keeps_defaults_for_the_rest():
    options = SpecTestOptions(verify_mutants=True, downsampling_ratio_percentage=25)
    mutator_options = create_mutator_options(options)
    assert mutator_options.verify_mutants is True
    assert mutator_options.downsampling_ratio_percentage == 25
    assert mutator_options.out_mutant_dir == Path(DEFAULT_OUTPUT_DIR)
    assert mutator_options.apply_coverage is False
    assert mutator_options.no_overwrite is False


def test_resolve_defaults_to_current_directory():
    assert SpecTestOptions().resolve(None) == Path(".")


def test_resolve_returns_given_package_path():
    assert SpecTestOptions().resolve("some/pkg") == Path("some/pkg")


def test_resolve_rejects_package_path_with_move_sources():
    options = SpecTestOptions(move_sources=[Path("Sub.move")])
    with pytest.raises(ValueError):
        options.resolve("some/pkg")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"mutate_modules": ModuleFilter(("m",))},
        {"mutate_functions": FunctionFilter(("f",))},
        {"mutator_conf": "conf.toml"},
        {"verify_mutants": True},
        {"downsampling_ratio_percentage": 5},
    ],
)
def test_conflicts_with_generated_mutants(kwargs):
    with pytest.raises(ValueError):
        SpecTestOptions(use_generated_mutants="mutants", **kwargs)


def test_paths_are_converted():
    options = SpecTestOptions(
        move_sources=["a.move"], prover_conf="prover.toml", output="report.json"
    )
    assert options.move_sources == [Path("a.move")]
    assert options.prover_conf == Path("prover.toml")
    assert options.output == Path("report.json")