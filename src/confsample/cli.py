#!/usr/bin/env python3
"""
📝 confsample CLI - Generate sample config files from XML documentation.

Usage:
    confsample doc/core-en_US.xml                   All config files
    confsample -c confbridge.conf doc/core-en_US.xml  A single config file
    confsample --help                               Show help
"""

import argparse
import sys
from pathlib import Path

import yaml
from rich.console import Console
from rich.markup import escape

from confsample import __version__
from confsample.config import GeneratorSettings
from confsample.errors import ConfsampleError, DocumentationInputError

console = Console(highlight=False, soft_wrap=True)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="confsample",
        description="Generate sample configuration file(s) from Asterisk XML documentation.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  confsample doc/core-en_US.xml                      Generate every sample
  confsample -c confbridge.conf doc/core-en_US.xml   Only confbridge.conf.sample
  confsample -o samples -n doc/core-en_US.xml        Into samples/, keep existing files
  confsample -p doc/core-en_US.xml                   Abort files lacking real sample values
  confsample --settings confsample.yaml doc/core-en_US.xml
        """,
    )

    parser.add_argument(
        "xmldocfile",
        type=Path,
        help="Path to doc/core-en_US.xml produced by the Asterisk build process",
    )
    parser.add_argument(
        "--config",
        "-c",
        dest="config_filter",
        help="Specific config file for which to generate a sample (default: all)",
    )
    parser.add_argument(
        "--maxdesc",
        "-d",
        type=int,
        dest="max_description_length",
        help="Maximum length of descriptions to include in config comments",
    )
    parser.add_argument(
        "--linkprefix", "-l", dest="link_prefix", help="Custom link prefix for out-of-tree modules"
    )
    parser.add_argument(
        "--noclobber",
        "-n",
        action="store_true",
        default=None,
        dest="no_clobber",
        help="Don't overwrite existing files",
    )
    parser.add_argument(
        "--outdir",
        "-o",
        type=Path,
        dest="output_dir",
        help="Output directory for sample files (default: current directory)",
    )
    parser.add_argument(
        "--nosampval",
        "-p",
        action="store_false",
        default=None,
        dest="allow_fallback",
        help="Don't use dummy sample values; abort a file if no suitable value is found",
    )
    parser.add_argument(
        "--sampval", "-s", dest="fallback_value", help="Custom dummy sample option value to use"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", default=None, help="Enable verbose log messages"
    )
    parser.add_argument(
        "--wrap",
        "-w",
        type=int,
        dest="wrap_width",
        help="Wrap config comments at this many columns (default: 135)",
    )
    parser.add_argument(
        "--fail-fast",
        "-x",
        action="store_true",
        default=None,
        dest="fail_fast",
        help="Stop the whole run at the first file that fails",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        default=None,
        help="Don't fetch the upstream module list; link all modules to the custom prefix",
    )
    parser.add_argument(
        "--settings", type=Path, help="YAML file with generator settings"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def load_settings(args: argparse.Namespace) -> GeneratorSettings:
    """Combine environment, YAML settings file and command-line flags."""
    settings = GeneratorSettings.from_yaml(args.settings) if args.settings else GeneratorSettings()
    return settings.with_overrides(
        config_filter=args.config_filter,
        max_description_length=args.max_description_length,
        link_prefix=args.link_prefix,
        no_clobber=args.no_clobber,
        output_dir=args.output_dir,
        allow_fallback=args.allow_fallback,
        fallback_value=args.fallback_value,
        verbose=args.verbose,
        wrap_width=args.wrap_width,
        fail_fast=args.fail_fast,
        offline=args.offline,
    )


def generate_samples(xmldocfile: Path, settings: GeneratorSettings) -> int:
    """Generate sample files and report the outcome.

    Returns:
        Process exit code
    """
    from confsample.generator import SampleGenerator
    from confsample.modules import ModuleIndex, StaticModuleIndex
    from confsample.parsers import parse_xml_documentation

    try:
        doc_model = parse_xml_documentation(xmldocfile)
    except DocumentationInputError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 2

    if settings.offline:
        module_index = StaticModuleIndex()
    else:
        module_index = ModuleIndex(
            url=settings.module_list_url, cache_path=settings.module_cache_path
        )

    generator = SampleGenerator(settings, module_index, console)

    try:
        report = generator.generate_all(doc_model)
    except ConfsampleError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1

    processed = report.processed
    console.print(f"{processed} config{'' if processed == 1 else 's'} processed")

    if not report.success:
        console.print(f"[bold red]{len(report.failed)} config(s) had errors[/bold red]")
        return 1
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Error:[/red] Invalid settings: {escape(str(e))}")
        sys.exit(2)

    sys.exit(generate_samples(args.xmldocfile, settings))


if __name__ == "__main__":
    main()
