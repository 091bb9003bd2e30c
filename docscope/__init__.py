"""
DOCSCOPE - Documentation scope resolution for build modules

Derives the exact inputs a documentation generator consumes for a module:
source roots, class output directories, a filtered classpath, output and
resource directories, and titles, for main or test sources.

Architecture:
- Intake Context: Loads project descriptions and resolution results from YAML
- Scoping Context: Variant policies, scope resolution and classpath filtering
"""

__version__ = "0.1.0"
