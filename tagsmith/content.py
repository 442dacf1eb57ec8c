# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Non-void elements with content. These are used directly, and as the wrappers of prefixes, suffixes and input labels.
'''

from typing import Self

from .markup import Content, EscapedStr, fmt_attrs, render_children
from .tag import Tag


class ContentTag(Tag):
  'An element that has content. Text content is escaped at render time; `html` content is emitted verbatim.'

  config_settings = Tag.config_settings | {'content', 'html'}

  def __init__(self) -> None:
    super().__init__()
    self._content:tuple[Content,...] = ()


  def content(self, *content:Content) -> Self:
    'Set the content; strings are escaped.'
    c = self._copy()
    c._content = content
    return c


  def html(self, *html:Content) -> Self:
    'Set the content; strings are treated as markup and emitted without escaping.'
    c = self._copy()
    c._content = tuple(EscapedStr(h) if isinstance(h, str) else h for h in html)
    return c


  def get_content(self) -> str: return render_children(self._content)

  def render_content(self) -> str: return self.get_content()


class BlockTag(ContentTag):
  '''
  A block element renders its open and close tags on their own lines.
  `begin` and `end` render the tags separately, so that a caller can write the content between them.
  '''

  def begin(self) -> str:
    return f'<{self.tag_name}{fmt_attrs(self.render_attrs())}>\n'

  @classmethod
  def end(cls) -> str: return f'\n</{cls.tag_name}>'


class Div(BlockTag):
  tag_name = 'div'


class P(BlockTag):
  tag_name = 'p'


class Span(ContentTag):
  tag_name = 'span'


class Label(ContentTag):
  tag_name = 'label'

  def for_(self, id:str|None) -> Self:
    'Set the `for` attribute to the id of the labeled control.'
    return self.set_attr('for', id)
