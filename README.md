# movemutant

Building blocks for mutation testing of Move source code. Given expressions
located in a Move source file, the package applies mutation operators to the
source text, lays out the resulting mutant files in an output directory and
records them in a report.

## Installation

```
pip install .
```

To run the test suite, install with the `test` extra and run `pytest`:

```
pip install .[test]
pytest
```

The package has no runtime dependencies beyond the standard library.

## Modules

- `movemutant.cli`
  - `CLIOptions` holds the mutator options: `move_sources`, `mutate_modules`,
    `mutate_functions`, `out_mutant_dir` (default `mutants_output`),
    `verify_mutants`, `no_overwrite`, `downsampling_ratio_percentage` and
    `apply_coverage`.
  - `ModuleFilter` and `FunctionFilter` select names. `parse("all")` selects
    everything; any other text is split on `;`, `-` and `,`.
  - `resolve_package_path(move_sources, package_path)` and
    `CLIOptions.resolve(package_path)` return the package path, or `.` when
    none is given. They raise `ValueError` when a package path is combined
    with explicit sources.
- `movemutant.operators.common` holds the shared pieces:
  - locations: `Span`, `Loc`;
  - the expression model: `Exp`, `ExpKind`, `ExpLoc`, `Operation`, `Value`,
    `ValueKind`, `PrimitiveType`;
  - Move constants such as `MOVE_EMPTY_STMT` and `MOVE_MAX_U256`.
- `movemutant.operator` defines `MutantInfo`, which pairs a mutated source with
  its `Mutation`. `MutantInfo.unique_id()` is a stable 64-bit id derived from
  the content. The module also defines the abstract `MutationOperator`.
- `movemutant.operators.*` holds the operators:
  - `Binary` replaces an operator with the others of its group: arithmetic,
    bitwise, shift, logical or comparison. Compound assignments such as `+=`
    keep their `=`. It skips replacements that are equivalent when one side
    is the literal `0`, for example `x == 0` becoming `x <= 0`.
  - `BinarySwap` swaps the two operands of a commutative operation, but only
    when one of the operands calls a function, a lambda or a closure. In
    every other case it produces nothing.
  - `Unary` replaces the unary expression's text with a single space.
  - `BreakContinue` turns `break` into `continue` or `{}`, and `continue` into
    `break` or `{}`.
  - `DeleteStmt` replaces a statement with `{}`.
  - `IfElse` replaces a condition with `true`, `false` and `!(<condition>)`.
  - `Literal` works by the literal's type:
    - integers up to `u128`: `0`, the type maximum, value + 1 and value - 1,
      saturating at the bounds;
    - bool: `true` and `false`;
    - address: `0x0` and the maximum address;
    - `u256` and untyped numbers: zero and the maximum value.

    Candidates equal to the current text are skipped.
- `movemutant.mutant.Mutant` wraps an operator together with its module and
  function names.
- `movemutant.report` covers reports:
  - `Report` holds `MutationReport` entries, each with its `Mutation`s and
    `Range`s.
  - A report is saved with `save_to_json_file` or `save_to_text_file` and
    loaded with `Report.load_from_json_file`.
  - `MutationReport.create` computes the diff with `make_patch`, a unified
    patch headed `--- original` / `+++ modified`.
- `movemutant.coverage`
  - `Coverage` stores uncovered spans per qualified function name, recorded
    with `add_uncovered_spans`. `check_location` tells whether a location is
    covered.
  - `merge_spans_after_removing_whitespaces` merges spans that are separated
    only by spaces.
- `movemutant.configuration.Configuration` bundles the options, the project
  path and the coverage data.
- `movemutant.output`
  - `find_package_root` looks upward for `Move.toml`.
  - `setup_mutant_path` names a mutant `<stem>_mutant_<hex id>.move`. For a
    file inside a package it keeps the file's place relative to the
    package's `sources` directory.
  - `setup_output_dir` creates a fresh output directory, or raises
    `FileExistsError` when `no_overwrite` is set and the directory exists.
- `movemutant.mutation_test_cli` and `movemutant.spec_test_cli` provide
  `MutationTestOptions` and `SpecTestOptions`. Each module's
  `create_mutator_options` turns them into `CLIOptions`; the mutation-test
  variant always sets `verify_mutants`. Both option classes raise
  `ValueError` when mutant-generation options are combined with
  `use_generated_mutants`.

## Example

```python
from movemutant.operators.common import Exp, ExpKind, ExpLoc, Loc, Operation, Span, Value
from movemutant.operators.binary import Binary

source = "5+2"
left = ExpLoc(Exp(ExpKind.VALUE, value=Value.number(5)), Loc(1, Span(0, 1)))
right = ExpLoc(Exp(ExpKind.VALUE, value=Value.number(2)), Loc(1, Span(2, 3)))
op = Binary(Operation.ADD, Loc(1, Span(0, 3)), [left, right])

for info in op.apply(source):
    print(info.mutated_source)   # 5-2, 5*2, 5/2, 5%2
```

## What it does not do

The package works on expressions and locations that the caller supplies. It
does not do the following:

- parse or compile Move code;
- walk a module to find mutation sites;
- compute coverage from a coverage map;
- check that mutants compile;
- run unit tests or the prover against mutants.

It has no command-line program. The option classes describe runs, but
nothing here executes one.