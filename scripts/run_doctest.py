"""Run doctests across the py_convtable package.

Discovers all non-package modules under `py_convtable` and executes their
docstring tests with the ELLIPSIS option enabled.

Usage (run from repo root):
        - python scripts/run_doctest.py

Exits with code 1 if any doctests fail, else exits with 0.
"""

import doctest, pkgutil, pathlib, importlib

def main() -> int:
    root = pathlib.Path(__file__).resolve().parents[1] / 'py_convtable'
    mods = [m.name for m in pkgutil.walk_packages([str(root)], prefix='py_convtable.') if not m.ispkg]
    fails = 0
    tried = 0
    for name in sorted(mods):
        if name.endswith('__main__'):
            continue
        try:
            m = importlib.import_module(name)
        except Exception as e:
            print('IMPORT-ERROR', name, e)
            continue
        r = doctest.testmod(m, optionflags=doctest.ELLIPSIS)
        tried += r.attempted
        fails += r.failed
        if r.failed:
            print(f'FAIL {name}: {r.failed}/{r.attempted}')
    print('TOTAL', fails, tried)
    return int(fails > 0)

if __name__ == '__main__':
    raise SystemExit(main())
