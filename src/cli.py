"""Command-line interface for archmap."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from analysis.formatting import format_console_output, format_json_output
from analysis.pipeline import analyze_file
from analysis.reporter import failure_reason
from artifacts.export import export_to_file
from artifacts.write import generate_all_artifacts
from contract.inputs import ModuleInputError
from contract.validation import validate_artifacts
from logging_utils import configure_logging
from rules.config import ArchmapConfig, ConfigError, load_config, load_config_file
from verify.verify import verify_determinism

_FAILURE_MESSAGES = {
    "cycles": "Error: Cycles detected in dependency graph",
    "threshold": "Error: Modules exceed distance threshold",
}


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        default=".",
        help="Project root holding archmap.toml (default: .)",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to config file (default: <root>/archmap.toml if present)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write debug logs to this file",
    )


def _add_modules_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "modules",
        help="Parsed module records (.jsonl or .json)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="archmap",
        description="Dependency cycles and coupling metrics for parsed modules",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser(
        "analyze", help="Analyze modules and report metrics and violations"
    )
    _add_modules_argument(analyze_parser)
    _add_common_options(analyze_parser)
    analyze_parser.add_argument(
        "--format",
        choices=("console", "json"),
        default=None,
        help="Output format (default: config ci.output_format)",
    )
    analyze_parser.add_argument(
        "--ci",
        action="store_true",
        help="CI mode: JSON output and strict exit codes",
    )
    analyze_parser.add_argument(
        "-e",
        "--export",
        "-o",
        "--output",
        dest="export",
        default=None,
        help="Export the full analysis snapshot to a JSON file",
    )

    generate_parser = subparsers.add_parser("generate", help="Generate artifacts")
    _add_modules_argument(generate_parser)
    _add_common_options(generate_parser)
    generate_parser.add_argument(
        "--out-dir",
        default=None,
        help="Output directory for generated artifacts (default: config output dir)",
    )

    validate_parser = subparsers.add_parser("validate", help="Validate artifacts")
    _add_common_options(validate_parser)
    validate_parser.add_argument(
        "--artifacts-dir",
        default=None,
        help="Artifacts directory (default: config output dir)",
    )
    validate_parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat a missing schema_version as an error",
    )

    verify_parser = subparsers.add_parser(
        "verify", help="Verify determinism of artifacts"
    )
    _add_modules_argument(verify_parser)
    _add_common_options(verify_parser)
    verify_parser.add_argument(
        "--artifacts-dir",
        default=None,
        help="Artifacts directory (default: config output dir)",
    )

    return parser


def _load_config(root: Path, config_path: str | None) -> ArchmapConfig:
    if config_path is None:
        return load_config(root)
    return load_config_file(Path(config_path))


def _with_output_format(config: ArchmapConfig, output_format: str) -> ArchmapConfig:
    ci = config.ci.model_copy(update={"output_format": output_format})
    return config.model_copy(update={"ci": ci})


def _log_file(log_file: str | None) -> Path | None:
    if log_file is None:
        return None
    return Path(log_file).expanduser().resolve()


def _resolve_output_dir(out_dir: str | None) -> Path | None:
    if out_dir is None:
        return None
    return Path(out_dir).expanduser().resolve()


def _resolve_artifacts_dir(
    root: Path, config: ArchmapConfig, artifacts_dir: str | None
) -> Path:
    if artifacts_dir is None:
        return (root / config.output_dir).resolve()
    return Path(artifacts_dir).expanduser().resolve()


def _handle_analyze(args: argparse.Namespace, root: Path) -> int:
    config = _load_config(root, args.config)
    if args.ci:
        config = _with_output_format(config, "json")
    elif args.format is not None:
        config = _with_output_format(config, args.format)

    json_output = config.ci.output_format == "json"
    configure_logging(
        verbose=args.verbose, quiet=json_output, log_file=_log_file(args.log_file)
    )

    result = analyze_file(Path(args.modules).expanduser().resolve(), config)

    if json_output:
        sys.stdout.write(format_json_output(result.report) + "\n")
    else:
        sys.stdout.write(format_console_output(result.report, config))

    if args.export:
        export_path = Path(args.export)
        try:
            export_to_file(result, export_path)
        except OSError as exc:
            sys.stderr.write(
                f"error: failed to export analysis to {export_path}: {exc}\n"
            )
            return 2

    reason = failure_reason(result.report, config)
    if reason is not None:
        if not json_output:
            sys.stderr.write(f"\n{_FAILURE_MESSAGES[reason]}\n")
        return 1
    return 0


def _handle_generate(args: argparse.Namespace, root: Path) -> int:
    config = _load_config(root, args.config)
    configure_logging(verbose=args.verbose, log_file=_log_file(args.log_file))
    generate_all_artifacts(
        root=root,
        modules_path=Path(args.modules).expanduser().resolve(),
        out_dir=_resolve_output_dir(args.out_dir),
        config=config,
    )
    return 0


def _handle_validate(args: argparse.Namespace, root: Path) -> int:
    config = _load_config(root, args.config)
    configure_logging(verbose=args.verbose, log_file=_log_file(args.log_file))
    resolved_artifacts_dir = _resolve_artifacts_dir(root, config, args.artifacts_dir)
    result = validate_artifacts(
        resolved_artifacts_dir, strict_schema_version=args.strict
    )
    for warning in result.warnings:
        sys.stderr.write(f"{warning.location()}: warning: {warning.message}\n")
    if result.errors:
        for error in result.errors:
            sys.stderr.write(f"{error.location()}: {error.message}\n")
        return 1
    return 0


def _handle_verify(args: argparse.Namespace, root: Path) -> int:
    config = _load_config(root, args.config)
    configure_logging(verbose=args.verbose, log_file=_log_file(args.log_file))
    resolved_artifacts_dir = _resolve_artifacts_dir(root, config, args.artifacts_dir)
    try:
        result = verify_determinism(
            root=root,
            modules_path=Path(args.modules).expanduser().resolve(),
            artifacts_dir=resolved_artifacts_dir,
            config=config,
        )
    except (FileNotFoundError, NotADirectoryError) as exc:
        sys.stderr.write(f"artifacts-dir: {resolved_artifacts_dir}\n")
        sys.stderr.write(f"error: {exc}\n")
        return 2
    if not result.ok:
        for label, paths in (
            ("missing", result.missing),
            ("extra", result.extra),
            ("mismatches", result.mismatches),
        ):
            for path in paths:
                sys.stderr.write(f"{label}: {path}\n")
        return 1
    return 0


_HANDLERS = {
    "analyze": _handle_analyze,
    "generate": _handle_generate,
    "validate": _handle_validate,
    "verify": _handle_verify,
}


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    root = Path(args.root).expanduser().resolve()

    handler = _HANDLERS.get(args.command)
    if handler is None:
        raise AssertionError

    try:
        return handler(args, root)
    except (ConfigError, ModuleInputError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
