# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`markup` provides attribute normalization and the low level rendering of elements to HTML text.
'''

from enum import Enum
from json import dumps as _json_dumps
from typing import Any, Iterable, Mapping, overload, Protocol, Union

from .semantics import phrasing_tags, void_tags


AttrKey = Union[str,Enum]


class EscapedStr:
  'A `str` wrapper class that signifies that the content has already been properly escaped and is emitted verbatim.'

  def __init__(self, string:str):
    self.string = string

  def __repr__(self) -> str: return f'EscapedStr({self.string!r})'

  def __eq__(self, other:Any) -> bool: return isinstance(other, EscapedStr) and self.string == other.string

  def __hash__(self) -> int: return hash(self.string)


class Renderable(Protocol):
  def render(self) -> str: ...


Content = Union[str,EscapedStr,Renderable,int,float,Enum,None]


# Attributes that render before all others, in this order. All other attributes keep their insertion order.
attr_sort_ranks = {
  'class': -4,
  'id': -3,
  'name': -2,
  'type': -1,
}

# Boolean attributes whose values are keywords rather than presence flags.
keyword_bool_attrs:dict[str,tuple[str,str]] = { # Maps attribute name to (true keyword, false keyword).
  'spellcheck': ('true', 'false'),
  'translate': ('yes', 'no'),
}


def attr_key(key:AttrKey) -> str:
  'Normalize an attribute key, which may be a vocabulary enum member.'
  if isinstance(key, Enum): key = key.value
  if not isinstance(key, str): raise TypeError(f'attribute key must be `str` or `Enum`; received: {key!r}')
  return key


def prefixed_key(prefix:str, key:AttrKey) -> str:
  'Return `key` with `prefix` (e.g. "aria-"), unless it is already present.'
  k = attr_key(key)
  return k if k.startswith(prefix) else prefix + k


def is_prefixed_bool_attr(key:str) -> bool:
  return key.startswith('aria-') or key.startswith('data-')


@overload
def prefer_int(v:int) -> int: ...
@overload
def prefer_int(v:float) -> Union[int,float]: ...
@overload
def prefer_int(v:str) -> str: ...

def prefer_int(v:Union[float,int,str]) -> Union[float,int,str]:
  'Convert integral floats to int.'
  if isinstance(v, float):
    i = int(v)
    return i if i == v else v
  return v


def render_attr_val(key:str, val:Any) -> str|None:
  '''
  Normalize an attribute value to its rendered text.
  Returns None if the attribute should be omitted, and the empty string for bare (boolean) attributes.
  '''
  if val is None: return None
  if isinstance(val, Enum): val = val.value
  if isinstance(val, bool):
    if kw_pair := keyword_bool_attrs.get(key): return kw_pair[0] if val else kw_pair[1]
    if is_prefixed_bool_attr(key): return 'true' if val else 'false'
    return '' if val else None
  if isinstance(val, (int, float)): return str(prefer_int(val))
  if isinstance(val, str): return val
  if key == 'style' and isinstance(val, Mapping): return css_inline(val)
  if key.startswith('data-') and isinstance(val, (list, tuple, Mapping)):
    return _json_dumps(val, separators=(',', ':'), default=str)
  if isinstance(val, (list, tuple)):
    return ' '.join(filter(None, (render_attr_val(key, v) for v in val)))
  if isinstance(val, EscapedStr): return val.string
  return str(val)


def css_inline(styles:Mapping[str,Any]) -> str:
  '''
  Create a string for use as an inline style attribute.
  Underscores in keys are translated to dashes; None values are omitted.
  '''
  return ' '.join(f'{k.replace("_", "-")}: {prefer_int(v.value if isinstance(v, Enum) else v)};'
    for k, v in styles.items() if v is not None)


def esc_text(text:str) -> str:
  text = text.replace('&', '&amp;') # Ampersand must be replaced first, because escapes use ampersands.
  text = text.replace('<', '&lt;')
  text = text.replace('>', '&gt;')
  return text


def esc_attr_val(text:str) -> str:
  return esc_text(text).replace('"', '&quot;').replace("'", '&apos;')


def quote_attr_val(key:str, text:str) -> str:
  'Escape and quote an attribute value. Style values use single quotes so that CSS font names can use double quotes.'
  text = esc_attr_val(text)
  return f"'{text}'" if key == 'style' else f'"{text}"'


def sorted_attr_items(attrs:Mapping[str,Any]) -> list[tuple[str,Any]]:
  return sorted(attrs.items(), key=lambda item: attr_sort_ranks.get(item[0], 0))


def fmt_attrs(attrs:Mapping[str,Any]) -> str:
  'Return a string that is either empty or with a leading space, containing all of the formatted attributes.'
  parts:list[str] = []
  for k, v in sorted_attr_items(attrs):
    text = render_attr_val(k, v)
    if text is None: continue
    parts.append(f' {k}' if text == '' and not is_prefixed_bool_attr(k) else f' {k}={quote_attr_val(k, text)}')
  return ''.join(parts)


def render_child(child:Content) -> str:
  if child is None: return ''
  if isinstance(child, str): return esc_text(child)
  if isinstance(child, EscapedStr): return child.string
  if isinstance(child, Enum): return esc_text(str(child.value))
  if isinstance(child, bool): raise TypeError(f'invalid content: {child!r}')
  if isinstance(child, (int, float)): return str(prefer_int(child))
  try: render = child.render
  except AttributeError: pass
  else: return render()
  raise TypeError(f'invalid content type: {type(child)!r}; value: {child!r}')


def render_children(children:Iterable[Content]) -> str:
  return ''.join(render_child(c) for c in children)


def tag_name(tag:AttrKey) -> str:
  name = attr_key(tag)
  if not name: raise ValueError('tag name cannot be empty')
  return name


def render_element(tag:AttrKey, content:str, attrs:Mapping[str,Any]) -> str:
  '''
  Render a complete element from an already rendered `content` string.
  Void elements have no closing tag; phrasing elements render inline; all others put content on its own lines.
  '''
  name = tag_name(tag)
  attrs_str = fmt_attrs(attrs)
  if name in void_tags:
    if content: raise ValueError(f'void element cannot have content: <{name}>; content: {content!r}')
    return f'<{name}{attrs_str}>'
  if name in phrasing_tags:
    return f'<{name}{attrs_str}>{content}</{name}>'
  if content: return f'<{name}{attrs_str}>\n{content}\n</{name}>'
  return f'<{name}{attrs_str}>\n</{name}>'
