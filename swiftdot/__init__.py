############################################################ IDENT(1)
#
# $Title: Python init for swiftdot package $
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

"""swiftdot: Swift module dependency analysis and visualization tool.

Inspired by FreeBSD bsdconfig's API module, swiftdot provides:
- Module resolution from directory layout (regex capture rules)
- Lexical extraction of leading import declarations
- Wildcard exclusion of files and modules
- Module dependency graphs (Graphviz dot format)

Example:
    from swiftdot import analyze_dependencies

    analyze_dependencies(
        root_path='/path/to/project',
        module_rules=['^Targets/([^/]+)/'],
        exclude_patterns=['*Tests'],
        output_file='dependencies.dot',
    )
"""

############################################################ IMPORTS

from .analyzer import run_dependency_analysis as analyze_dependencies
from .version import VERSION, VERSION_VERBOSE

############################################################ SETUP

__version__ = VERSION
__all__ = ['analyze_dependencies', 'VERSION', 'VERSION_VERBOSE']

################################################################################
# END
################################################################################
