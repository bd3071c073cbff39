#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: swiftdot - Swift Module Dependency Visualization Tool $
# $Copyright: 2025 Devin Teske. All rights reserved. $
# pylint: disable=line-too-long
# $FrauBSD$
# pylint: enable=line-too-long
#
############################################################ LICENSE
#
# BSD 2-Clause
#
############################################################ DOCSTRING

"""
Standalone tool for mapping the module dependencies of a Swift code base from
the import declarations at the top of each file, and generating Graphviz dot
architecture visualizations.
"""

############################################################ IMPORTS

import argparse
import sys
import os

# Add parent directory to path so we can import package
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# pylint: disable=wrong-import-position
from swiftdot import analyze_dependencies, VERSION, VERSION_VERBOSE
from swiftdot.analyzer import DEFAULT_OUTPUT, DEFAULT_TOP
from swiftdot.patterns import ConfigurationError
from swiftdot.render import find_dot, open_file, render_graph
from swiftdot.utils import log
# pylint: enable=wrong-import-position

############################################################ FUNCTIONS

def build_parser() -> argparse.ArgumentParser:
    """Build the swiftdot argument parser."""
    parser = argparse.ArgumentParser(
        prog='swiftdot',
        description='Swift module dependency analysis and visualization tool',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze a project, write dependencies.dot
  swiftdot ./project

  # Custom output file
  swiftdot ./project -o custom_deps.dot

  # Skip test targets and mocks, keep system frameworks
  swiftdot ./project --exclude '*Tests' --exclude '*Mocks' --include-system

  # Derive module names from the directory layout
  swiftdot ./project --trim-prefix '^Targets/([^/]+)/' \\
      --trim-prefix '^Toolkit/Sources/([^/]+)/'

  # Generate SVG/PNG/PDF too (requires graphviz)
  swiftdot ./project --render

Exclusion patterns are wildcards ('*' any run of characters, '?' one
character) matched against both file paths (relative to the project root)
and imported module names. Module rules are regular expressions with one
capture group; the first matching rule names the module of a file, and
files no rule matches belong to their top-level directory.
""",
    )

    parser.add_argument(
        'path',
        nargs='?',
        default='.',
        help='Root directory containing Swift files (default: current directory)',
    )

    parser.add_argument(
        '-o', '--output',
        metavar='FILE',
        default=DEFAULT_OUTPUT,
        help=f"Output dot file, '-' for stdout (default: {DEFAULT_OUTPUT})",
    )

    parser.add_argument(
        '-e', '--exclude',
        metavar='PATTERN',
        action='append',
        default=[],
        help='Exclude paths or modules matching wildcard (repeatable)',
    )

    parser.add_argument(
        '--include-system',
        action='store_true',
        help='Include system frameworks in the graph (default: off)',
    )

    parser.add_argument(
        '--trim-prefix',
        metavar='REGEX',
        action='append',
        default=[],
        help='Derive module name from path using regex capture group'
            + ' (repeatable, first matching pattern is used)',
    )

    parser.add_argument(
        '-j', '--jobs',
        metavar='N',
        type=int,
        default=1,
        help='Read and scan files with N worker threads (default: 1)',
    )

    parser.add_argument(
        '-t', '--top',
        metavar='N',
        type=int,
        default=DEFAULT_TOP,
        help=f"Number of top dependencies to report (default: {DEFAULT_TOP})",
    )

    parser.add_argument(
        '-r', '--render',
        action='store_true',
        help='Render svg, png and pdf with Graphviz dot when available',
    )

    parser.add_argument(
        '--open',
        action='store_true',
        help='Open the rendered svg (implies --render)',
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Report every file processed',
    )

    parser.add_argument(
        '-q', '--quiet',
        action='store_true',
        help='Suppress progress and statistics output',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information and exit',
    )

    parser.add_argument(
        '-V', '--version-verbose',
        action='store_true',
        help='Show verbose version with build info and exit',
    )

    return parser


def render(output_file: str, open_svg: bool, quiet: bool):
    """Render the dot file with Graphviz, if installed."""
    dot = find_dot()
    if dot is None:
        if not quiet:
            base = output_file[:-4] if output_file.endswith('.dot') \
                else output_file
            log('Graphviz not found. Install it to generate visualizations.',
                'yellow')
            log('To manually generate visualization:', 'yellow')
            log(f"   dot -Tsvg {output_file} -o {base}.svg", 'yellow')
            log(f"   dot -Tpng {output_file} -o {base}.png", 'yellow')
        return

    if not quiet:
        log('Graphviz detected! Generating visualizations...', 'green')
    generated = render_graph(output_file, dot=dot)
    if not quiet:
        for path in generated:
            log(f"Generated: {path}", 'green')

    if open_svg:
        svg = [path for path in generated if path.endswith('.svg')]
        if svg:
            open_file(svg[0])


def main(argv=None):
    """Main entry point for swiftdot CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Handle version flags
    if args.version_verbose:
        print(VERSION_VERBOSE)
        return 0

    if args.version:
        print(VERSION)
        return 0

    # Run analysis
    try:
        analyze_dependencies(
            root_path=args.path,
            output_file=args.output,
            module_rules=args.trim_prefix,
            exclude_patterns=args.exclude,
            include_system=args.include_system,
            jobs=args.jobs,
            verbose=args.verbose,
            quiet=args.quiet,
            top=args.top,
        )
    except (ConfigurationError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130

    if (args.render or args.open) and args.output != '-':
        render(args.output, args.open, args.quiet)

    if not args.quiet:
        log()
        log('Analysis complete!', 'green')

    return 0

############################################################ MAIN

if __name__ == '__main__':
    sys.exit(main())

################################################################################
# END
################################################################################
