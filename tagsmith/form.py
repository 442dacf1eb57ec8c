# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Void `<input>` elements.
Each concrete class fixes the `type` attribute and combines the attribute mixins that apply to its type.
'''

from enum import Enum
from typing import Any, Iterable, Mapping, Self

from .content import Label
from .exceptions import InvalidAttributeValue
from .factory import Config
from .markup import AttrKey, attr_key, Content, render_child, render_element
from .naming import arrayable_name
from .semantics import Autocomplete, Capture, Colorspace, Enctype, form_input_types, InputMode, Method, Target, Type
from .tag import Tag


class BaseInput(Tag):
  'Base class for `<input>` elements. Concrete subclasses set `input_type`.'

  tag_name = 'input'
  auto_id = True
  input_type = ''

  def __init_subclass__(cls, **kwargs:Any) -> None:
    super().__init_subclass__(**kwargs)
    if cls.input_type: cls.builtin_defaults = {'type': cls.input_type}


  def name(self, name:str|None) -> Self: return self.set_attr('name', name)

  def form(self, form_id:str|None) -> Self:
    'Associate the input with a `<form>` element by id.'
    return self.set_attr('form', form_id)

  def type(self, type:str|Type) -> Self:
    'Override the input type; this is rarely needed because each class sets its own.'
    return self._set_keyword('type', type, sorted(form_input_types))


# Attribute mixins.

class HasValue(BaseInput):
  def value(self, value:Any) -> Self: return self.set_attr('value', value)


class HasRequired(BaseInput):
  def required(self, required:bool=True) -> Self: return self.set_attr('required', required)


class HasReadonly(BaseInput):
  def readonly(self, readonly:bool=True) -> Self: return self.set_attr('readonly', readonly)


class HasAutocomplete(BaseInput):
  def autocomplete(self, autocomplete:str|Autocomplete|None) -> Self:
    'Set the autofill hint. Values are free-form tokens such as "on", "off" or "current-password".'
    if isinstance(autocomplete, Enum): autocomplete = autocomplete.value
    return self.set_attr('autocomplete', autocomplete)


class HasList(BaseInput):
  def list(self, datalist_id:str|None) -> Self:
    'Set the id of a `<datalist>` of suggested values.'
    return self.set_attr('list', datalist_id)


class HasRange(HasList):
  def min(self, min:int|float|str|None) -> Self: return self.set_attr('min', min)

  def max(self, max:int|float|str|None) -> Self: return self.set_attr('max', max)

  def step(self, step:int|float|str|None) -> Self:
    '`step` is a positive number or the keyword "any".'
    return self.set_attr('step', step)


class HasTextEntry(HasAutocomplete, HasList, HasReadonly, HasRequired):

  def maxlength(self, length:int|None) -> Self: return self._set_length('maxlength', length)

  def minlength(self, length:int|None) -> Self: return self._set_length('minlength', length)

  def pattern(self, pattern:str|None) -> Self: return self.set_attr('pattern', pattern)

  def placeholder(self, placeholder:str|None) -> Self: return self.set_attr('placeholder', placeholder)

  def size(self, size:int|None) -> Self:
    if size is not None and (isinstance(size, bool) or not isinstance(size, int) or size < 1):
      raise InvalidAttributeValue(attr='size', value=size, expected='a positive integer')
    return self.set_attr('size', size)

  def inputmode(self, mode:str|InputMode|None) -> Self: return self._set_keyword('inputmode', mode, InputMode)

  def _set_length(self, attr:str, length:int|None) -> Self:
    if length is not None and (isinstance(length, bool) or not isinstance(length, int) or length < 0):
      raise InvalidAttributeValue(attr=attr, value=length, expected='a non-negative integer')
    return self.set_attr(attr, length)


class HasDirname(BaseInput):
  def dirname(self, dirname:str|None) -> Self:
    'Name of the extra form field that submits the directionality of the text.'
    return self.set_attr('dirname', dirname)


class HasMultiple(BaseInput):
  def multiple(self, multiple:bool=True) -> Self: return self.set_attr('multiple', multiple)


class HasFormSubmission(BaseInput):
  'Attributes of submit buttons that override the owning form.'

  def formaction(self, url:str|None) -> Self: return self.set_attr('formaction', url)

  def formenctype(self, enctype:str|Enctype|None) -> Self: return self._set_keyword('formenctype', enctype, Enctype)

  def formmethod(self, method:str|Method|None) -> Self:
    if isinstance(method, str): method = method.lower()
    return self._set_keyword('formmethod', method, Method)

  def formnovalidate(self, novalidate:bool=True) -> Self: return self.set_attr('formnovalidate', novalidate)

  def formtarget(self, target:str|Target|None) -> Self:
    'Set the browsing context; either a keyword such as "_blank", or a context name.'
    if isinstance(target, Enum): target = target.value
    return self.set_attr('formtarget', target)


class HasDimensions(BaseInput):
  def width(self, width:int|str|None) -> Self: return self.set_attr('width', width)

  def height(self, height:int|str|None) -> Self: return self.set_attr('height', height)


# Choice inputs.

class ChoiceInput(HasValue, HasRequired):
  '''
  Base class for checkbox and radio inputs.
  The input can have a label, rendered either after the input or enclosing it.
  '''

  default_template = '{prefix}\n{tag}\n{label}\n{suffix}'

  config_settings = BaseInput.config_settings | {
    'checked',
    'enclosed_by_label',
    'label',
    'label_attrs',
    'label_for',
    'label_tag',
  }

  def __init__(self) -> None:
    super().__init__()
    self._checked:Any = None
    self._label:Content = None
    self._label_attrs:Config = {}
    self._label_for:str|None = None
    self._label_tag:AttrKey|None = None
    self._enclosed_by_label = False
    self._not_label = False


  def checked(self, checked:Any=True) -> Self:
    '''
    Set the checked state.
    `True` always checks the input; `False` and `None` never do;
    any other value checks the input when it matches the input's `value`.
    '''
    c = self._copy()
    c._checked = checked
    return c


  def label(self, label:Content) -> Self:
    'Set the label content; strings are escaped.'
    c = self._copy()
    c._label = label
    c._not_label = False
    return c

  def label_attrs(self, attrs:Mapping[AttrKey,Any]) -> Self:
    c = self._copy()
    c._label_attrs = {attr_key(k): v for k, v in attrs.items()}
    return c

  def label_class(self, cl:str) -> Self:
    c = self._copy()
    c._label_attrs = {**self._label_attrs, 'class': cl}
    return c

  def label_for(self, id:str|None) -> Self:
    'Override the `for` attribute of the label, which defaults to the id of the input.'
    c = self._copy()
    c._label_for = id
    return c

  def label_tag(self, tag:AttrKey|None) -> Self:
    c = self._copy()
    c._label_tag = tag
    return c

  def enclosed_by_label(self, enclosed:bool=True) -> Self:
    c = self._copy()
    c._enclosed_by_label = enclosed
    return c

  def not_label(self) -> Self:
    'Render the input without its label.'
    c = self._copy()
    c._not_label = True
    return c


  def is_checked(self, value:Any) -> bool:
    checked = self._checked
    if checked is True: return True
    if checked is False or checked is None: return False
    if value is None: return False
    return norm_choice_val(checked) == norm_choice_val(value)


  def finalize_attrs(self, attrs:Config) -> None:
    super().finalize_attrs(attrs)
    value = attrs.get('value')
    if isinstance(value, bool): attrs['value'] = int(value)
    if self.is_checked(value): attrs['checked'] = True


  def render_label(self, id:str|None, content:str) -> str:
    attrs = {'for': id, **self._label_attrs}
    if self._label_for is not None: attrs['for'] = self._label_for
    tag = attr_key(self._label_tag) if self._label_tag is not None else 'label'
    if tag == 'label': return Label.tag().attrs(attrs).html(content).render()
    return render_element(tag, content, attrs)


  def template_tokens(self, attrs:Mapping[str,Any]) -> dict[str,str]:
    tokens = super().template_tokens(attrs)
    if self._not_label or self._label is None or self._label == '':
      tokens['label'] = ''
      return tokens
    label_text = render_child(self._label)
    id_ = attrs.get('id')
    if self._enclosed_by_label:
      tokens['tag'] = self.render_label(id_, f'\n{tokens["tag"]}\n{label_text}\n')
      tokens['label'] = ''
    else:
      tokens['label'] = self.render_label(id_, label_text)
    return tokens


def norm_choice_val(val:Any) -> str:
  if isinstance(val, Enum): val = val.value
  if isinstance(val, bool): return '1' if val else '0'
  return str(val)


class InputCheckbox(ChoiceInput):
  '''
  `<input type="checkbox">`.
  `checked` also accepts a collection of values, and checks the input if any of them matches `value`.
  With `unchecked_value`, a hidden input with the same name precedes the checkbox,
  so that the form submits a value when the box is unchecked.
  '''

  input_type = 'checkbox'
  default_template = '{prefix}\n{unchecked}\n{tag}\n{label}\n{suffix}'
  config_settings = ChoiceInput.config_settings | {'unchecked_value'}

  def __init__(self) -> None:
    super().__init__()
    self._unchecked_value:Any = None


  def unchecked_value(self, value:Any) -> Self:
    c = self._copy()
    c._unchecked_value = value
    return c


  def is_checked(self, value:Any) -> bool:
    checked = self._checked
    if isinstance(checked, (list, tuple, set, frozenset)):
      if value is None: return False
      v = norm_choice_val(value)
      return any(norm_choice_val(c) == v for c in checked)
    return super().is_checked(value)


  def template_tokens(self, attrs:Mapping[str,Any]) -> dict[str,str]:
    tokens = super().template_tokens(attrs)
    value = self._unchecked_value
    if value is None: tokens['unchecked'] = ''
    else:
      if isinstance(value, bool): value = int(value)
      tokens['unchecked'] = InputHidden.tag().id(None).name(attrs.get('name')).value(value).render()
    return tokens


class InputRadio(ChoiceInput):
  '`<input type="radio">`.'

  input_type = 'radio'

  def checked(self, checked:Any=True) -> Self:
    if isinstance(checked, (list, tuple, set, frozenset, dict)):
      raise InvalidAttributeValue(attr='checked', value=checked, expected='a scalar value; radio inputs have a single value')
    return super().checked(checked)


# Concrete inputs.

class InputButton(HasValue):
  input_type = 'button'


class InputColor(HasValue, HasAutocomplete, HasList):
  input_type = 'color'

  def alpha(self, alpha:bool=True) -> Self:
    'Allow the user to choose the opacity of the color.'
    return self.set_attr('alpha', alpha)

  def colorspace(self, colorspace:str|Colorspace|None) -> Self:
    return self._set_keyword('colorspace', colorspace, Colorspace)


class DateTimeInput(HasValue, HasAutocomplete, HasRange, HasReadonly, HasRequired):
  'Base class for the date and time inputs.'


class InputDate(DateTimeInput):
  input_type = 'date'


class InputDateTimeLocal(DateTimeInput):
  input_type = 'datetime-local'


class InputMonth(DateTimeInput):
  input_type = 'month'


class InputTime(DateTimeInput):
  input_type = 'time'


class InputWeek(DateTimeInput):
  input_type = 'week'


class InputEmail(HasValue, HasTextEntry, HasMultiple):
  input_type = 'email'


class InputFile(HasRequired, HasMultiple):
  '''
  `<input type="file">`.
  File inputs have no auto id, and never render a value.
  When `multiple` is set, the name gains a `[]` suffix so that servers collect every file.
  '''

  input_type = 'file'
  auto_id = False

  def accept(self, accept:str|Iterable[str]|None) -> Self:
    'Set the accepted file types, e.g. "image/*" or [".pdf", ".txt"].'
    if accept is not None and not isinstance(accept, str): accept = ','.join(accept)
    return self.set_attr('accept', accept)

  def capture(self, capture:str|Capture|None) -> Self: return self._set_keyword('capture', capture, Capture)

  def finalize_attrs(self, attrs:Config) -> None:
    super().finalize_attrs(attrs)
    attrs.pop('value', None)
    name = attrs.get('name')
    if name and attrs.get('multiple'): attrs['name'] = arrayable_name(name)


class InputHidden(HasValue, HasAutocomplete):
  input_type = 'hidden'


class InputImage(HasFormSubmission, HasDimensions):
  input_type = 'image'

  def alt(self, alt:str|None) -> Self: return self.set_attr('alt', alt)

  def src(self, src:str|None) -> Self: return self.set_attr('src', src)


class InputNumber(HasValue, HasAutocomplete, HasRange, HasReadonly, HasRequired):
  input_type = 'number'

  def placeholder(self, placeholder:str|None) -> Self: return self.set_attr('placeholder', placeholder)


class InputPassword(HasValue, HasTextEntry):
  input_type = 'password'


class InputRange(HasValue, HasAutocomplete, HasRange):
  input_type = 'range'


class InputReset(HasValue):
  input_type = 'reset'


class InputSearch(HasValue, HasTextEntry, HasDirname):
  input_type = 'search'


class InputSubmit(HasValue, HasFormSubmission):
  input_type = 'submit'


class InputTel(HasValue, HasTextEntry):
  input_type = 'tel'


class InputText(HasValue, HasTextEntry, HasDirname):
  input_type = 'text'


class InputUrl(HasValue, HasTextEntry):
  input_type = 'url'
