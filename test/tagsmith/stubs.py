# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Provider stubs shared by the tagsmith tests.'

from tagsmith.factory import DefaultsProvider, ThemeProvider


class DefaultProvider(DefaultsProvider):

  def get_defaults(self, tag):
    return {'class': 'default-class', 'title': 'default-title'}


class DefaultThemeProvider(ThemeProvider):

  def apply(self, tag, theme):
    if theme == 'muted': return {'class': 'text-muted'}
    if theme == 'highlight': return {'style': 'background-color: yellow;'}
    return {}
