"""
The root tests directory keeps this __init__.py so that shared helpers are
importable as `tests.helpers...` from every test module.

Test subdirectories have no __init__.py files; pytest runs with
`--import-mode=importlib`, so they work as namespace packages (PEP 420).
"""
