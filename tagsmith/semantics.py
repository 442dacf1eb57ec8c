# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
HTML semantics data: tag categories and the keyword vocabularies of enumerated attributes.
'''

import re
from enum import Enum


void_tags = frozenset({
  'area',
  'base',
  'br',
  'col',
  'embed',
  'hr',
  'img',
  'input',
  'link',
  'meta',
  'param',
  'source',
  'track',
  'wbr',
})

form_input_types = frozenset({
  'button', # Push button with no default behavior.
  'checkbox', # Check box allowing single values to be selected/deselected.
  'color', # Control for specifying a color.
  'date', # Control for entering a date (year, month, and day, with no time).
  'datetime-local', # Control for entering a date and time, with no time zone.
  'email', # Field for editing an e-mail address.
  'file', # Control that lets the user select a file. Use `accept` to define the types of files that the control can select.
  'hidden', # Control that is not displayed but whose value is submitted to the server.
  'image', # Graphical submit button. `src` specifies the image and `alt` specifies alternative text.
  'month', # Control for entering a month and year, with no time zone.
  'number', # Control for entering a number.
  'password', # Single-line text field whose value is obscured.
  'radio', # Radio button, allowing a single value to be selected out of multiple choices.
  'range', # Control for entering a number whose exact value is not important.
  'reset', # Button that resets the contents of the form to default values.
  'search', # Single-line text field for entering search strings.
  'submit', # Button that submits the form.
  'tel', # Control for entering a telephone number.
  'text', # Single-line text field.
  'time', # Control for entering a time value with no time zone.
  'url', # Field for entering a URL.
  'week', # Control for entering a date consisting of a week-year number and a week number with no time zone.
})

phrasing_tags = frozenset({
  'a',
  'abbr',
  'b',
  'bdi',
  'bdo',
  'br',
  'button',
  'cite',
  'code',
  'data',
  'del',
  'dfn',
  'em',
  'i',
  'img',
  'input',
  'ins',
  'kbd',
  'label',
  'mark',
  'output',
  'q',
  's',
  'samp',
  'small',
  'span',
  'strong',
  'sub',
  'sup',
  'time',
  'u',
  'var',
  'wbr',
})

aria_roles = frozenset({
  'alert', 'alertdialog', 'application', 'article', 'banner', 'blockquote', 'button', 'caption', 'cell', 'checkbox',
  'code', 'columnheader', 'combobox', 'complementary', 'contentinfo', 'definition', 'deletion', 'dialog', 'document',
  'emphasis', 'feed', 'figure', 'form', 'generic', 'grid', 'gridcell', 'group', 'heading', 'img', 'insertion', 'link',
  'list', 'listbox', 'listitem', 'log', 'main', 'marquee', 'math', 'menu', 'menubar', 'menuitem', 'menuitemcheckbox',
  'menuitemradio', 'meter', 'navigation', 'none', 'note', 'option', 'paragraph', 'presentation', 'progressbar', 'radio',
  'radiogroup', 'region', 'row', 'rowgroup', 'rowheader', 'scrollbar', 'search', 'searchbox', 'separator', 'slider',
  'spinbutton', 'status', 'strong', 'subscript', 'superscript', 'switch', 'tab', 'table', 'tablist', 'tabpanel', 'term',
  'textbox', 'time', 'timer', 'toolbar', 'tooltip', 'tree', 'treegrid', 'treeitem',
})

# Shape of a BCP 47 language tag: a 2-3 letter primary subtag followed by alphanumeric subtags.
# The empty string is also valid, and means that the language is unknown.
lang_tag_re = re.compile(r'([A-Za-z]{2,3}(-[A-Za-z0-9]{1,8})*)?')


# Attribute names.

class Aria(Enum):
  ATOMIC = 'aria-atomic'
  BUSY = 'aria-busy'
  CHECKED = 'aria-checked'
  CONTROLS = 'aria-controls'
  CURRENT = 'aria-current'
  DESCRIBEDBY = 'aria-describedby'
  DESCRIPTION = 'aria-description'
  DETAILS = 'aria-details'
  DISABLED = 'aria-disabled'
  ERRORMESSAGE = 'aria-errormessage'
  EXPANDED = 'aria-expanded'
  HASPOPUP = 'aria-haspopup'
  HIDDEN = 'aria-hidden'
  INVALID = 'aria-invalid'
  KEYSHORTCUTS = 'aria-keyshortcuts'
  LABEL = 'aria-label'
  LABELLEDBY = 'aria-labelledby'
  LEVEL = 'aria-level'
  LIVE = 'aria-live'
  MODAL = 'aria-modal'
  ORIENTATION = 'aria-orientation'
  OWNS = 'aria-owns'
  PLACEHOLDER = 'aria-placeholder'
  PRESSED = 'aria-pressed'
  READONLY = 'aria-readonly'
  RELEVANT = 'aria-relevant'
  REQUIRED = 'aria-required'
  ROLEDESCRIPTION = 'aria-roledescription'
  SELECTED = 'aria-selected'
  VALUEMAX = 'aria-valuemax'
  VALUEMIN = 'aria-valuemin'
  VALUENOW = 'aria-valuenow'
  VALUETEXT = 'aria-valuetext'


class Data(Enum):
  ACTION = 'data-action'
  ID = 'data-id'
  NAME = 'data-name'
  TARGET = 'data-target'
  TOGGLE = 'data-toggle'
  VALUE = 'data-value'


class GlobalAttribute(Enum):
  ACCESSKEY = 'accesskey'
  AUTOFOCUS = 'autofocus'
  CLASS = 'class'
  DIR = 'dir'
  HIDDEN = 'hidden'
  ID = 'id'
  INPUTMODE = 'inputmode'
  LANG = 'lang'
  ROLE = 'role'
  SPELLCHECK = 'spellcheck'
  STYLE = 'style'
  TABINDEX = 'tabindex'
  TITLE = 'title'
  TRANSLATE = 'translate'


class Attribute(Enum):
  ACCEPT = 'accept'
  ALPHA = 'alpha'
  ALT = 'alt'
  AUTOCOMPLETE = 'autocomplete'
  CAPTURE = 'capture'
  CHECKED = 'checked'
  COLORSPACE = 'colorspace'
  DIRNAME = 'dirname'
  DISABLED = 'disabled'
  FOR = 'for'
  FORM = 'form'
  FORMACTION = 'formaction'
  FORMENCTYPE = 'formenctype'
  FORMMETHOD = 'formmethod'
  FORMNOVALIDATE = 'formnovalidate'
  FORMTARGET = 'formtarget'
  HEIGHT = 'height'
  LIST = 'list'
  MAX = 'max'
  MAXLENGTH = 'maxlength'
  MIN = 'min'
  MINLENGTH = 'minlength'
  MULTIPLE = 'multiple'
  NAME = 'name'
  PATTERN = 'pattern'
  PLACEHOLDER = 'placeholder'
  READONLY = 'readonly'
  REQUIRED = 'required'
  SIZE = 'size'
  SRC = 'src'
  STEP = 'step'
  TYPE = 'type'
  VALUE = 'value'
  WIDTH = 'width'


# Attribute keywords.

Type = Enum('Type', [(t.upper().replace('-', '_'), t) for t in sorted(form_input_types)])
Type.__doc__ = 'The states of the `<input>` `type` attribute.'

Role = Enum('Role', [(r.upper(), r) for r in sorted(aria_roles)])
Role.__doc__ = 'WAI-ARIA roles.'


class Autocomplete(Enum):
  OFF = 'off'
  ON = 'on'
  NAME = 'name'
  EMAIL = 'email'
  USERNAME = 'username'
  NEW_PASSWORD = 'new-password'
  CURRENT_PASSWORD = 'current-password'
  ONE_TIME_CODE = 'one-time-code'
  ORGANIZATION = 'organization'
  STREET_ADDRESS = 'street-address'
  COUNTRY = 'country'
  POSTAL_CODE = 'postal-code'
  BDAY = 'bday'
  TEL = 'tel'
  URL = 'url'


class Direction(Enum):
  AUTO = 'auto'
  LTR = 'ltr'
  RTL = 'rtl'


class Language(Enum):
  'Common primary language subtags. `lang` accepts any well formed BCP 47 tag; these are conveniences.'
  ARABIC = 'ar'
  CHINESE = 'zh'
  DANISH = 'da'
  DUTCH = 'nl'
  ENGLISH = 'en'
  FRENCH = 'fr'
  GERMAN = 'de'
  GREEK = 'el'
  HINDI = 'hi'
  ITALIAN = 'it'
  JAPANESE = 'ja'
  KOREAN = 'ko'
  POLISH = 'pl'
  PORTUGUESE = 'pt'
  RUSSIAN = 'ru'
  SPANISH = 'es'
  SWEDISH = 'sv'
  TURKISH = 'tr'
  UKRAINIAN = 'uk'


class Translate(Enum):
  NO = 'no'
  YES = 'yes'


class InputMode(Enum):
  DECIMAL = 'decimal'
  EMAIL = 'email'
  NONE = 'none'
  NUMERIC = 'numeric'
  SEARCH = 'search'
  TEL = 'tel'
  TEXT = 'text'
  URL = 'url'


class Capture(Enum):
  ENVIRONMENT = 'environment'
  USER = 'user'


class Colorspace(Enum):
  DISPLAY_P3 = 'display-p3'
  LIMITED_SRGB = 'limited-srgb'


class Enctype(Enum):
  APPLICATION_X_WWW_FORM_URLENCODED = 'application/x-www-form-urlencoded'
  MULTIPART_FORM_DATA = 'multipart/form-data'
  TEXT_PLAIN = 'text/plain'


class Method(Enum):
  DIALOG = 'dialog'
  GET = 'get'
  POST = 'post'


class Target(Enum):
  BLANK = '_blank'
  PARENT = '_parent'
  SELF = '_self'
  TOP = '_top'


# Wrapper tags for prefixes, suffixes and labels.

class Inline(Enum):
  A = 'a'
  B = 'b'
  CODE = 'code'
  EM = 'em'
  I = 'i'
  LABEL = 'label'
  SMALL = 'small'
  SPAN = 'span'
  STRONG = 'strong'


class Block(Enum):
  ARTICLE = 'article'
  ASIDE = 'aside'
  DIV = 'div'
  FOOTER = 'footer'
  HEADER = 'header'
  P = 'p'
  SECTION = 'section'
