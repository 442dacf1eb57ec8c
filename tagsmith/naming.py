# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import re
from secrets import token_hex


id_token_bytes = 8


def generate_id(prefix:str='') -> str:
  'Return `prefix` followed by a random hexadecimal token, which is safe for both URLs and CSS selectors.'
  return prefix + token_hex(id_token_bytes)


def auto_id_prefix(cls:type) -> str:
  'The auto id prefix for an element class is its lowercased name and a dash, e.g. "inputhidden-".'
  return cls.__name__.lower() + '-'


def arrayable_name(name:str) -> str:
  'Append `[]` to a form field name so that servers collect multiple values, unless it is already present.'
  return name if name.endswith('[]') else name + '[]'


def html_id_for(title:str) -> str:
  '''
  HTML4 IDs consist of ASCII letters, digits, '_', '-' and '.'
  HTML5 no longer has this restriction.
  We choose to restrict IDs to Unicode letters, digits, '_', '-' and '.'
  '''
  return html_id_invalid_re.sub('_', title)

html_id_invalid_re = re.compile(r'[^-.\w]+')
