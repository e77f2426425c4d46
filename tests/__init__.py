"""TERMLEVEL test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : User-visible flows tested end-to-end through the CLI.
- helpers/      : Shared utilities (no tests here).

General guidance
- Keep unit tests deterministic: build a ``ColorClassifier`` from an explicit
  environment mapping instead of relying on the runner's terminal.
- Functional tests drive ``termlevel`` with ``click.testing.CliRunner`` and
  assert user-observable output and exit codes.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, functional, property
"""
