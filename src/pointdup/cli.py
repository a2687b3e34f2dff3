import argparse
import datetime
import logging
import sys
import textwrap
from functools import wraps
from pathlib import Path

from . import DuplicateAnalyzer, AnalyzerSettings, Processor, DirectoryNotFound, AnalysisCancelled
from .report.store import ResultManifest, ResultStore
from .report.summary import format_summary
from .report.writer import write_report
from .scan.scanner import find_missing_directories
from .settings import SETTING_CONCURRENCY, SETTING_REPORT_OUTPUT
from .utils.profiling import profile_main

DEFAULT_REPORT_FILE_NAME = 'duplicates_within_files_report.txt'


class CommandError(Exception):
    """A command cannot run with the given arguments."""


def needs_processor(func):
    """Decorator for commands that analyze point files.

    The decorated function will receive (analyzer, settings, output, args).
    The wrapper function takes (settings, output, args), creates the Processor unless
    --sequential was requested, and builds the DuplicateAnalyzer.
    """
    @wraps(func)
    def wrapper(settings, output, args):
        concurrency = args.concurrency
        if concurrency is None:
            concurrency = settings.get(SETTING_CONCURRENCY)

        if getattr(args, 'sequential', False):
            analyzer = DuplicateAnalyzer(None, settings, args.extension)
            return func(analyzer, settings, output, args)

        with Processor(concurrency) as processor:
            analyzer = DuplicateAnalyzer(processor, settings, args.extension)
            return func(analyzer, settings, output, args)
    return wrapper


def no_processor(func):
    """Decorator for commands that only work on saved results.

    The decorated function will receive (settings, output, args).
    """
    @wraps(func)
    def wrapper(settings, output, args):
        return func(settings, output, args)
    return wrapper


@profile_main
def pointdup_main(argv=None):
    parser = argparse.ArgumentParser(
        prog='pointdup',
        description='Find point records that are recorded more than once within the same point file. Records are '
                    'identified by their first, second and fifth fields.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent('''
            Examples:
              pointdup analyze /data/points
              pointdup analyze /data/site1 /data/site2 --output reports/duplicates.txt
            ''').strip()
    )
    parser.add_argument(
        '--config',
        metavar='PATH',
        help='Path to a TOML settings file. If not provided, uses POINTDUP_CONFIG environment variable or '
             'pointdup.toml in the current directory when present.')
    parser.add_argument(
        '--log-file',
        metavar='PATH',
        help='Path to log file for operation logging. If not provided, uses logging.path from settings or no '
             'logging.')
    parser.add_argument(
        '--log-level',
        metavar='LEVEL',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to INFO when --log-file is provided.')
    parser.add_argument(
        '--concurrency',
        type=int,
        metavar='N',
        help='Number of worker processes analyzing files (default: processing.concurrency from settings, or the '
             'number of CPUs)')
    subparsers = parser.add_subparsers(
        dest='command',
        title='Commands',
        description='Available commands',
        help='Use "pointdup COMMAND --help" for command-specific help',
        required=True
    )

    parser_analyze = subparsers.add_parser(
        'analyze',
        help='Analyze point files and write the duplicates report',
        description='Analyzes every point file directly inside the given directories (subdirectories are not '
                    'entered), writes the duplicates report and prints a summary.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent(f'''
            Examples:
              pointdup analyze /data/points
              pointdup analyze /data/points --extension .txt --results run.msgpack

            The report is written to {DEFAULT_REPORT_FILE_NAME} unless --output or
            report.output in the settings says otherwise.
            ''').strip())
    parser_analyze.add_argument(
        'directories',
        nargs='+',
        metavar='DIRECTORY',
        help='Directories containing point files')
    parser_analyze.add_argument(
        '--output', '-o',
        metavar='PATH',
        help=f'Path of the report to write (default: {DEFAULT_REPORT_FILE_NAME})')
    parser_analyze.add_argument(
        '--extension',
        metavar='EXT',
        help='Suffix of the point files to analyze (default: scan.extension from settings, or .pts)')
    parser_analyze.add_argument(
        '--results',
        metavar='PATH',
        help='Also save the analysis results to PATH, for later use with the report and summary commands')
    parser_analyze.add_argument(
        '--sequential',
        action='store_true',
        help='Analyze files one after another in this process instead of using worker processes')
    parser_analyze.set_defaults(method=_analyze)

    parser_report = subparsers.add_parser(
        'report',
        help='Write the duplicates report again from saved results',
        description='Renders the duplicates report from a results file saved by "pointdup analyze --results". '
                    'The point files are not read again.')
    parser_report.add_argument(
        'results',
        metavar='RESULTS',
        help='Results file saved by the analyze command')
    parser_report.add_argument(
        '--output', '-o',
        metavar='PATH',
        required=True,
        help='Path of the report to write')
    parser_report.set_defaults(method=_report)

    parser_summary = subparsers.add_parser(
        'summary',
        help='Print the summary of saved results',
        description='Prints the run summary of a results file saved by "pointdup analyze --results".')
    parser_summary.add_argument(
        'results',
        metavar='RESULTS',
        help='Results file saved by the analyze command')
    parser_summary.set_defaults(method=_summary)

    args = parser.parse_args(argv)

    # Configure logging from CLI argument if provided
    if args.log_file:
        log_level = args.log_level if args.log_level is not None else 'INFO'

        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, log_level),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    try:
        settings = AnalyzerSettings.locate(args.config)
        if not args.log_file:
            DuplicateAnalyzer(settings=settings).configure_logging_from_settings()

        args.method(settings, sys.stdout, args)
    except (CommandError, DirectoryNotFound, AnalysisCancelled, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


@needs_processor
def _analyze(analyzer: DuplicateAnalyzer, settings: AnalyzerSettings, output, args):
    directories = [d for d in args.directories if d.strip()]
    if not directories:
        raise CommandError("Please specify at least one valid input directory path.")

    missing = find_missing_directories(directories)
    if missing:
        raise CommandError("The following directories do not exist:\n" + "\n".join(str(p) for p in missing))

    output_path = args.output
    if output_path is None:
        output_path = settings.get(SETTING_REPORT_OUTPUT, DEFAULT_REPORT_FILE_NAME)

    results = analyzer.analyze_and_generate_report(directories, output_path)

    if args.results:
        manifest = ResultManifest(
            timestamp=datetime.datetime.now(datetime.UTC).isoformat(),
            directories=[str(Path(d)) for d in directories],
            report_path=str(output_path)
        )
        ResultStore(args.results).write(manifest, results)

    output.write(format_summary(results, output_path))


@no_processor
def _report(settings: AnalyzerSettings, output, args):
    _, results = ResultStore(args.results).read()
    write_report(results, args.output)
    output.write(f"Report saved to: {args.output}\n")


@no_processor
def _summary(settings: AnalyzerSettings, output, args):
    manifest, results = ResultStore(args.results).read()
    output.write(format_summary(results, manifest.report_path or None))


if __name__ == '__main__':
    pointdup_main()
