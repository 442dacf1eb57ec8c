# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The global defaults registry, default and theme providers, and the layer merging engine.

Attribute values for an element are resolved from these layers, lowest precedence first:
* built-in class defaults;
* global defaults registered with `set_defaults` for the class or any of its base classes;
* default providers added to the element;
* theme providers added to the element;
* explicit user attributes, from `tag(config)` and setters.
'''

import json
from os import environ
from typing import Any, Iterable, Mapping, TYPE_CHECKING

from .io import errL, is_tracing


if TYPE_CHECKING:
  from .tag import Tag


Config = dict[str,Any]

# Concrete element classes by name, populated as classes are defined. Used to resolve names in defaults files.
element_types:dict[str,type] = {}

_registry:dict[type,Config] = {}


def set_defaults(cls:type, config:Mapping[str,Any]|None) -> None:
  'Register global defaults for `cls` and its subclasses. An empty or None config clears the entry.'
  if not isinstance(cls, type): raise TypeError(f'defaults must be registered for a class; received: {cls!r}')
  if config: _registry[cls] = dict(config)
  else: _registry.pop(cls, None)


def get_defaults(cls:type) -> Config:
  'Return the global defaults for `cls`, merged along its MRO from the most basic class to `cls` itself.'
  return merge_layers(*(_registry.get(c, {}) for c in reversed(cls.__mro__)))


def reset_defaults() -> None:
  'Clear the whole registry.'
  _registry.clear()


def load_defaults(path:str) -> None:
  '''
  Load global defaults from a JSON file containing an object that maps element class names to config objects, e.g.:
  `{"InputText": {"class": "form-control"}, "BaseInput": {"autocomplete": "off"}}`.
  '''
  with open(path) as f:
    try: data = json.load(f)
    except json.JSONDecodeError as e: raise ValueError(f'{path}: invalid defaults JSON: {e}') from e
  if not isinstance(data, dict): raise ValueError(f'{path}: defaults must be a JSON object; received: {type(data).__name__}')
  for name, config in data.items():
    try: cls = element_types[name]
    except KeyError: raise ValueError(f'{path}: unknown element class: {name!r}') from None
    if not (config is None or isinstance(config, dict)):
      raise ValueError(f'{path}: config for {name} must be a JSON object; received: {config!r}')
    set_defaults(cls, config)
    if is_tracing(): errL(f'tagsmith: loaded defaults for {name} from {path}: {config!r}')


def load_defaults_from_env(var:str='TAGSMITH_DEFAULTS') -> bool:
  'If the environment variable `var` names a file, load defaults from it. Returns True if a file was loaded.'
  path = environ.get(var)
  if not path: return False
  load_defaults(path)
  return True


class DefaultsProvider:
  '''
  A named source of fallback attributes for an element.
  Subclasses override `get_defaults`, which receives the element being rendered.
  '''

  def get_defaults(self, tag:'Tag') -> Config:
    raise NotImplementedError(f'{type(self).__name__}.get_defaults')


class ThemeProvider:
  '''
  A source of attributes for an element under a named theme.
  Subclasses override `apply`; an unknown theme should return an empty dict.
  '''

  def apply(self, tag:'Tag', theme:str) -> Config:
    raise NotImplementedError(f'{type(self).__name__}.apply')


def instantiate_provider(provider:Any, base:type) -> Any:
  'Providers can be given as instances or as classes with a no-argument constructor.'
  if isinstance(provider, type):
    if not issubclass(provider, base): raise TypeError(f'provider class must subclass {base.__name__}: {provider!r}')
    return provider()
  if not isinstance(provider, base): raise TypeError(f'provider must be a {base.__name__}: {provider!r}')
  return provider


def merge_layers(*layers:Mapping[str,Any]|None) -> Config:
  '''
  Merge attribute layers, lowest precedence first.
  A later layer overrides values key by key; an overridden key keeps the position where it was first inserted.
  '''
  merged:Config = {}
  for layer in layers:
    if layer: merged.update(layer)
  return merged


def drop_removed(attrs:Config, removed:Iterable[str]) -> Config:
  for k in removed: attrs.pop(k, None)
  return attrs
