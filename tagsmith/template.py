# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Line oriented templates for assembling an element with its surrounding markup.
A template is a string containing `{token}` placeholders, one or more per line.
After substitution, lines that are empty are dropped.
'''

import re
from typing import Mapping


default_template = '{prefix}\n{tag}\n{suffix}'

template_token_re = re.compile(r'\{(\w+)\}')


def render_template(template:str, tokens:Mapping[str,str]) -> str:
  '''
  Substitute each `{token}` in `template` with the corresponding value of `tokens`.
  Placeholders that name missing tokens are left as is; this lets literal braces appear in custom templates.
  '''
  def sub(m:re.Match) -> str:
    try: return tokens[m[1]]
    except KeyError: return m[0]

  rendered = template_token_re.sub(sub, template)
  return '\n'.join(line for line in rendered.split('\n') if line.strip())
