"""
Only the root tests directory is a regular package, so shared builders are
importable as `tests.helpers...`. Subdirectories are namespace packages (PEP 420)
and keep no __init__.py files; test module names are therefore unique.
"""
