"""
Default values for documentation scope resolution.

Provides the conventions shared by:
- variants.py (per-variant directory names, titles, classifiers)
- scope_resolver.py (aggregator detection, build directory fallback)
- artifact_filter.py (dependency scope sets)
"""

# Packaging of a pure grouping module with no sources of its own
AGGREGATOR_PACKAGING = "pom"

DEFAULT_PACKAGING = "jar"
DEFAULT_ARTIFACT_TYPE = "jar"
DEFAULT_BUILD_DIRECTORY = "target"

# Dependency scopes
SCOPE_COMPILE = "compile"
SCOPE_PROVIDED = "provided"
SCOPE_SYSTEM = "system"
SCOPE_TEST = "test"

# Scopes visible when compiling main sources
MAIN_CLASSPATH_SCOPES = frozenset({SCOPE_COMPILE, SCOPE_PROVIDED, SCOPE_SYSTEM})

# Test sources see everything main sources see, plus test-only dependencies
TEST_CLASSPATH_SCOPES = MAIN_CLASSPATH_SCOPES | {SCOPE_TEST}

# Artifact types whose handler never contributes to a classpath
NON_CLASSPATH_TYPES = frozenset({"pom"})

OVERVIEW_FILENAME = "overview.html"
