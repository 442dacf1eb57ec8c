# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`Tag` is the immutable base builder for all elements.
Every setter returns a modified copy; the original instance is never changed.

Attributes are kept in two layers on the instance:
`_base` holds built-in class defaults merged with the global defaults registered for the class,
and `_attrs` holds explicit user attributes from `tag(config)` and setters.
Default and theme providers are consulted only at render time, between those two layers.
'''

from copy import copy
from enum import Enum
from typing import Any, ClassVar, final, Iterable, Mapping, Self

from .exceptions import InvalidAttributeValue, ValueNotInList
from .factory import (Config, DefaultsProvider, drop_removed, element_types, get_defaults, instantiate_provider,
  merge_layers, ThemeProvider)
from .io import is_tracing, trace_layers
from .markup import AttrKey, attr_key, Content, prefixed_key, render_child, render_element
from .naming import auto_id_prefix, generate_id
from .semantics import aria_roles, Direction, lang_tag_re, Language, Translate
from .template import default_template, render_template


@final
class Unset(Enum):
  'Marks an attribute that no layer assigned; `id(None)` stores None, which suppresses the auto id.'
  _ = 0


class Tag:
  '''
  Base class for elements.
  Concrete subclasses set `tag_name`; subclasses that want an automatically generated id set `auto_id`.
  '''

  tag_name:ClassVar[str] = ''
  auto_id:ClassVar[bool] = False
  builtin_defaults:ClassVar[Mapping[str,Any]] = {}
  default_template:ClassVar[str] = default_template

  # Config keys that are applied by calling the setter of the same name, rather than stored as attributes.
  config_settings:ClassVar[frozenset[str]] = frozenset({
    'aria_describedby_suffix',
    'prefix',
    'prefix_attrs',
    'prefix_tag',
    'suffix',
    'suffix_attrs',
    'suffix_tag',
    'template',
  })


  def __init_subclass__(cls, **kwargs:Any) -> None:
    super().__init_subclass__(**kwargs)
    element_types[cls.__name__] = cls


  def __init__(self) -> None:
    self._base:Config = {}
    self._attrs:Config = {}
    self._removed:frozenset[str] = frozenset()
    self._default_providers:tuple[DefaultsProvider,...] = ()
    self._theme_providers:tuple[tuple[str,ThemeProvider],...] = ()
    self._template = self.default_template
    self._prefix:Content = None
    self._prefix_tag:AttrKey|None = None
    self._prefix_attrs:Config = {}
    self._suffix:Content = None
    self._suffix_tag:AttrKey|None = None
    self._suffix_attrs:Config = {}
    self._aria_describedby_suffix = 'help'
    self._generated_id:str|None = None


  @classmethod
  def tag(cls, config:Mapping[str,Any]|None=None) -> Self:
    '''
    Create an element.
    Built-in class defaults and the global defaults registered for the class form the base layer;
    `config` is then applied as explicit user configuration.
    '''
    t = cls()
    settings, attrs = t._split_config(merge_layers(cls.builtin_defaults, get_defaults(cls)))
    t._base = attrs
    t = t._apply_settings(settings)
    return t.configure(config) if config else t


  def configure(self, config:Mapping[str,Any]) -> Self:
    'Apply a config mapping: setting keys call the setter of the same name; all other keys are set as user attributes.'
    settings, attrs = self._split_config(config)
    c = self._apply_settings(settings)
    return c.attrs(attrs) if attrs else c


  def _split_config(self, config:Mapping[AttrKey,Any]) -> tuple[Config,Config]:
    settings:Config = {}
    attrs:Config = {}
    for k, v in config.items():
      key = attr_key(k)
      if key in self.config_settings: settings[key] = v
      else: attrs[key] = v
    return settings, attrs


  def _apply_settings(self, settings:Mapping[str,Any]) -> Self:
    c = self
    for k, v in settings.items():
      c = getattr(c, k)(v)
    return c


  def _copy(self) -> Self:
    c = copy(self)
    c._attrs = dict(self._attrs)
    return c


  def __repr__(self) -> str: return f'{type(self).__name__}({self.get_attrs()!r})'

  def __str__(self) -> str: return self.render()


  # Generic attribute access.

  def get_attr(self, key:AttrKey, default:Any=None) -> Any:
    'Return the value of an explicit or default attribute, or `default` if it is absent.'
    return self.get_attrs().get(attr_key(key), default)


  def get_attrs(self) -> Config:
    '''
    Return the attributes assigned to the element: built-in and global defaults overridden by explicit user attributes.
    Provider attributes, the auto id and other render-time values are not included.
    '''
    return drop_removed(merge_layers(self._base, self._attrs), self._removed)


  def set_attr(self, key:AttrKey, val:Any) -> Self:
    k = attr_key(key)
    c = self._copy()
    c._attrs[k] = val
    if k in c._removed: c._removed = c._removed - {k}
    return c

  add_attr = set_attr


  def attrs(self, attrs:Mapping[AttrKey,Any]) -> Self:
    'Set multiple attributes.'
    c = self._copy()
    for key, val in attrs.items():
      k = attr_key(key)
      c._attrs[k] = val
      if k in c._removed: c._removed = c._removed - {k}
    return c


  def remove_attr(self, key:AttrKey) -> Self:
    'Remove an attribute from every layer, including defaults and providers.'
    k = attr_key(key)
    c = self._copy()
    c._attrs.pop(k, None)
    c._removed = c._removed | {k}
    return c


  def _set_keyword(self, attr:str, value:Any, allowed:type[Enum]|Iterable[str]) -> Self:
    'Set an enumerated attribute, validating the keyword. None removes the value.'
    if value is None: return self.set_attr(attr, None)
    if isinstance(value, Enum): value = value.value
    allowed_vals = [m.value for m in allowed] if isinstance(allowed, type) else list(allowed)
    if value not in allowed_vals: raise ValueNotInList(attr=attr, value=value, allowed=allowed_vals)
    return self.set_attr(attr, value)


  # Global attributes.

  def id(self, id:str|None) -> Self:
    'Set the id. `None` renders no id and suppresses the auto id.'
    return self.set_attr('id', id)


  def cl(self, value:str|Enum|None, override=False) -> Self:
    '''
    Add a class name to the current classes; `override` replaces them instead.
    A None value with `override` clears the class.
    '''
    if isinstance(value, Enum): value = value.value
    if override: return self.set_attr('class', value)
    if value is None: return self._copy()
    current = self.get_attr('class')
    if isinstance(current, (list, tuple)): current = ' '.join(current)
    if not current: return self.set_attr('class', value)
    words = current.split()
    return self.set_attr('class', current if value in words else f'{current} {value}')


  def title(self, title:str|None) -> Self: return self.set_attr('title', title)

  def accesskey(self, key:str|None) -> Self: return self.set_attr('accesskey', key)

  def hidden(self, hidden:bool=True) -> Self: return self.set_attr('hidden', hidden)

  def autofocus(self, autofocus:bool=True) -> Self: return self.set_attr('autofocus', autofocus)

  def disabled(self, disabled:bool=True) -> Self: return self.set_attr('disabled', disabled)

  def spellcheck(self, spellcheck:bool|None=True) -> Self: return self.set_attr('spellcheck', spellcheck)


  def style(self, style:str|Mapping[str,Any]|None) -> Self:
    'Set the inline style, either as a CSS string or as a mapping of properties.'
    return self.set_attr('style', style)


  def dir(self, dir:str|Direction|None) -> Self: return self._set_keyword('dir', dir, Direction)


  def lang(self, lang:str|Language|None) -> Self:
    'Set the language; strings must have the shape of a BCP 47 tag, e.g. "en" or "pt-BR", or be empty for unknown.'
    if isinstance(lang, Language): lang = lang.value
    if lang is not None and (not isinstance(lang, str) or not lang_tag_re.fullmatch(lang)):
      raise InvalidAttributeValue(attr='lang', value=lang, expected='a BCP 47 language tag')
    return self.set_attr('lang', lang)


  def role(self, role:str|Enum|None) -> Self: return self._set_keyword('role', role, sorted(aria_roles))


  def translate(self, translate:bool|str|Translate|None) -> Self:
    if isinstance(translate, bool) or translate is None: return self.set_attr('translate', translate)
    return self._set_keyword('translate', translate, Translate)


  def tabindex(self, index:int|str|None) -> Self:
    'Set the tab index, which must be an integer greater than or equal to -1.'
    if index is None: return self.set_attr('tabindex', None)
    if isinstance(index, str) and index.lstrip('-').isdigit(): index = int(index)
    if isinstance(index, bool) or not isinstance(index, int) or index < -1:
      raise InvalidAttributeValue(attr='tabindex', value=index, expected='an integer greater than or equal to -1')
    return self.set_attr('tabindex', index)


  # Attribute families.

  def add_aria(self, key:AttrKey, value:Any) -> Self: return self.set_attr(prefixed_key('aria-', key), value)

  def aria_attrs(self, attrs:Mapping[AttrKey,Any]) -> Self:
    return self.attrs({prefixed_key('aria-', k): v for k, v in attrs.items()})

  def remove_aria(self, key:AttrKey) -> Self: return self.remove_attr(prefixed_key('aria-', key))

  def add_data(self, key:AttrKey, value:Any) -> Self: return self.set_attr(prefixed_key('data-', key), value)

  def data_attrs(self, attrs:Mapping[AttrKey,Any]) -> Self:
    return self.attrs({prefixed_key('data-', k): v for k, v in attrs.items()})

  def remove_data(self, key:AttrKey) -> Self: return self.remove_attr(prefixed_key('data-', key))

  def add_event(self, event:AttrKey, handler:str|None) -> Self:
    'Set an event handler attribute; `click` and `onclick` are equivalent.'
    return self.set_attr(prefixed_key('on', event), handler)

  def events(self, events:Mapping[AttrKey,str|None]) -> Self:
    return self.attrs({prefixed_key('on', k): v for k, v in events.items()})

  def remove_event(self, event:AttrKey) -> Self: return self.remove_attr(prefixed_key('on', event))


  # Providers.

  def add_default_provider(self, provider:DefaultsProvider|type[DefaultsProvider]) -> Self:
    c = self._copy()
    c._default_providers = (*self._default_providers, instantiate_provider(provider, DefaultsProvider))
    return c


  def add_theme_provider(self, theme:str, provider:ThemeProvider|type[ThemeProvider]) -> Self:
    c = self._copy()
    c._theme_providers = (*self._theme_providers, (theme, instantiate_provider(provider, ThemeProvider)))
    return c


  # Surrounding markup.

  def template(self, template:str) -> Self:
    'Set the line template; tokens are `{prefix}`, `{tag}` and `{suffix}`, plus any that the element class adds.'
    c = self._copy()
    c._template = template
    return c

  def prefix(self, prefix:Content) -> Self:
    c = self._copy()
    c._prefix = prefix
    return c

  def prefix_tag(self, tag:AttrKey|None) -> Self:
    c = self._copy()
    c._prefix_tag = tag
    return c

  def prefix_attrs(self, attrs:Mapping[AttrKey,Any]) -> Self:
    c = self._copy()
    c._prefix_attrs = {attr_key(k): v for k, v in attrs.items()}
    return c

  def suffix(self, suffix:Content) -> Self:
    c = self._copy()
    c._suffix = suffix
    return c

  def suffix_tag(self, tag:AttrKey|None) -> Self:
    c = self._copy()
    c._suffix_tag = tag
    return c

  def suffix_attrs(self, attrs:Mapping[AttrKey,Any]) -> Self:
    c = self._copy()
    c._suffix_attrs = {attr_key(k): v for k, v in attrs.items()}
    return c


  def aria_describedby_suffix(self, suffix:str) -> Self:
    'Set the suffix used to synthesize `aria-describedby="<id>-<suffix>"`; empty falls back to "help".'
    c = self._copy()
    c._aria_describedby_suffix = suffix or 'help'
    return c


  # Rendering.

  def provider_attrs(self) -> Config:
    return merge_layers(*(p.get_defaults(self) for p in self._default_providers))

  def theme_attrs(self) -> Config:
    return merge_layers(*(p.apply(self, theme) for theme, p in self._theme_providers))


  def render_attrs(self) -> Config:
    'Resolve all attribute layers and the render-time values into the final attributes.'
    layers = {
      'base': self._base,
      'providers': self.provider_attrs(),
      'themes': self.theme_attrs(),
      'user': self._attrs,
    }
    attrs = drop_removed(merge_layers(*layers.values()), self._removed)
    self.finalize_attrs(attrs)
    if is_tracing(): trace_layers(type(self).__name__, layers, attrs)
    return attrs


  def finalize_attrs(self, attrs:Config) -> None:
    'Fill in render-time values. Subclasses extend this to apply element-specific rules.'
    id_ = attrs.get('id', Unset._)
    if id_ is Unset._:
      if self.auto_id:
        id_ = self.generated_id()
        attrs['id'] = id_
      else:
        id_ = None
    describedby = attrs.get('aria-describedby')
    if describedby is True or describedby == 'true':
      if id_ is None: del attrs['aria-describedby']
      else: attrs['aria-describedby'] = f'{id_}-{self._aria_describedby_suffix}'


  def generated_id(self) -> str:
    'Return the auto id, generating it on first use. Copies made afterwards share it.'
    if self._generated_id is None:
      self._generated_id = generate_id(auto_id_prefix(type(self)))
    return self._generated_id


  def render_content(self) -> str: return ''


  def render_tag(self, attrs:Mapping[str,Any]) -> str:
    return render_element(self.tag_name, self.render_content(), attrs)


  def template_tokens(self, attrs:Mapping[str,Any]) -> dict[str,str]:
    return {
      'prefix': render_wrapper(self._prefix, self._prefix_tag, self._prefix_attrs),
      'tag': self.render_tag(attrs),
      'suffix': render_wrapper(self._suffix, self._suffix_tag, self._suffix_attrs),
    }


  def render(self) -> str:
    return render_template(self._template, self.template_tokens(self.render_attrs()))


def render_wrapper(content:Content, tag:AttrKey|None, attrs:Mapping[str,Any]) -> str:
  'Render prefix or suffix content, bare or wrapped in `tag`.'
  if content is None or content == '': return ''
  text = render_child(content)
  return render_element(tag, text, attrs) if tag else text
