#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, walk
from os.path import isfile, join as path_join
from subprocess import run
from sys import executable


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  env = dict(environ)
  env.setdefault('UTEST_WORK_DIR', getcwd())
  # Test scripts import the project packages from the working directory.
  env['PYTHONPATH'] = ':'.join(filter(None, [getcwd(), environ.get('PYTHONPATH')]))

  ok = True
  for path in walk_test_files(args.paths):
    print(path)
    c = run([executable, path], env=env).returncode
    if c != 0:
      ok = False
      print()

  exit(0 if ok else 1)


def walk_test_files(paths:list[str]) -> list[str]:
  'Return the sorted `.ut.py` files found in `paths`, which may name files or directories.'
  found:list[str] = []
  for path in paths:
    if isfile(path):
      found.append(path)
      continue
    for dir_path, dir_names, file_names in walk(path):
      dir_names[:] = sorted(d for d in dir_names if not d.startswith('.') and d != '__pycache__')
      found.extend(path_join(dir_path, n) for n in sorted(file_names) if n.endswith('.ut.py'))
  return found


if __name__ == '__main__': main()
