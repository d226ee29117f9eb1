"""CLI layer: output sink, exit codes, and the run lifecycle.

This package is the outermost layer of the framework.  It may import
from ``core`` and ``infra``, but no other layer may import from ``cli``
at runtime.
"""
