"""
Core primitives: comparer algebra, numerical safeguards and pipeline prelude.

This package is independent of the data-wrapper modules in fptoolkit.domain,
which consume comparer capability objects from here.
"""
