# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes raised by element setters.
'''

from typing import Any, Iterable


class InvalidAttributeValue(ValueError):
  '''
  Raised when a setter receives a value that the attribute cannot hold.
  Since the failure is about the value and not the key, it subclasses ValueError.
  '''
  def __init__(self, *, attr:str, value:Any, expected:str) -> None:
    self.attr = attr
    self.value = value
    self.expected = expected
    super().__init__(f'invalid value for attribute `{attr}`: {value!r}; expected: {expected}.')


class ValueNotInList(InvalidAttributeValue):
  'Raised when an enumerated attribute receives a keyword that is not one of its allowed values.'

  def __init__(self, *, attr:str, value:Any, allowed:Iterable[str]) -> None:
    self.allowed = tuple(allowed)
    super().__init__(attr=attr, value=value, expected=', '.join(repr(a) for a in self.allowed))
