# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Diagnostic output helpers.
Resolution tracing is switched on by setting the `TAGSMITH_TRACE` environment variable to a nonempty value.
'''

from os import environ
from sys import stderr
from typing import Any, Mapping


def errL(*items:Any, sep='', flush=False) -> None:
  "Write items to std err; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=stderr, flush=flush)



def is_tracing() -> bool:
  'Checked on every call so that tests and embedding processes can toggle tracing at runtime.'
  return bool(environ.get('TAGSMITH_TRACE'))


def trace_layers(subject:str, layers:Mapping[str,Mapping[str,Any]], merged:Mapping[str,Any]) -> None:
  'Print each named attribute layer and the merged result for `subject`.'
  errL(f'tagsmith: resolve {subject}:')
  for name, layer in layers.items():
    if not layer: continue
    errL(f'  {name}: ', ' '.join(f'{k}={v!r}' for k, v in layer.items()))
  errL('  => ', ' '.join(f'{k}={v!r}' for k, v in merged.items()))
