# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import re

from tagsmith.factory import reset_defaults, set_defaults
from tagsmith.form import InputCheckbox
from tagsmith.markup import EscapedStr
from tagsmith.semantics import Inline
from utest import utest, utest_call, utest_val


c = InputCheckbox.tag().id('inputcheckbox')

utest('<input id="inputcheckbox" type="checkbox">', c.render)
utest('<input class="checkbox-input" id="inputcheckbox" type="checkbox">', c.attrs({'class': 'checkbox-input'}).render)
utest('<input id="inputcheckbox" type="checkbox" autofocus>', c.autofocus().render)
utest('<input id="inputcheckbox" type="checkbox" value="accepted">', c.value('accepted').render)
utest('<input id="inputcheckbox" type="checkbox" required>', c.required().render)
utest('<input id="inputcheckbox" type="checkbox" form="form-id">', c.form('form-id').render)


# Checked state.
utest('<input id="inputcheckbox" type="checkbox" checked>', c.checked().render)
utest('<input id="inputcheckbox" type="checkbox" checked>', c.checked(True).render)
utest('<input id="inputcheckbox" type="checkbox">', c.checked(False).render)
utest('<input id="inputcheckbox" type="checkbox">', c.checked(None).render)
utest('<input id="inputcheckbox" type="checkbox">', c.checked('accepted').render) # No value to match.
utest('<input id="inputcheckbox" type="checkbox" value="accepted" checked>', c.value('accepted').checked('accepted').render)
utest('<input id="inputcheckbox" type="checkbox" value="accepted">', c.value('accepted').checked('declined').render)
utest('<input id="inputcheckbox" type="checkbox" value="2" checked>', c.value(2).checked('2').render)
utest('<input id="inputcheckbox" type="checkbox" value="b" checked>', c.value('b').checked(['a', 'b']).render)
utest('<input id="inputcheckbox" type="checkbox" value="c">', c.value('c').checked(['a', 'b']).render)
utest('<input id="inputcheckbox" type="checkbox" value="1" checked>', c.value(True).checked(1).render)
utest('<input id="inputcheckbox" type="checkbox" value="0">', c.value(False).render)
utest('<input id="inputcheckbox" type="checkbox" value="on" checked>',
  InputCheckbox.tag({'id': 'inputcheckbox', 'value': 'on', 'checked': 'on'}).render)


# Labels.
utest('<input id="inputcheckbox" type="checkbox">\n<label for="inputcheckbox">Label</label>', c.label('Label').render)
utest('<input id="inputcheckbox" type="checkbox">\n<label for="inputcheckbox">&lt;b&gt;</label>', c.label('<b>').render)
utest('<input id="inputcheckbox" type="checkbox">\n<label for="inputcheckbox"><b>Bold</b></label>',
  c.label(EscapedStr('<b>Bold</b>')).render)
utest('<input id="inputcheckbox" type="checkbox">\n<label class="value" for="inputcheckbox">Label</label>',
  c.label('Label').label_attrs({'class': 'value'}).render)
utest('<input id="inputcheckbox" type="checkbox">\n<label class="value" for="inputcheckbox">Label</label>',
  c.label('Label').label_class('value').render)
utest('<input id="inputcheckbox" type="checkbox">\n<label for="value">Label</label>',
  c.label('Label').label_for('value').render)
utest('<input id="inputcheckbox" type="checkbox">\n<label for="attr-for">Label</label>',
  c.label('Label').label_attrs({'for': 'attr-for'}).render)
utest('<input id="inputcheckbox" type="checkbox">\n<span for="inputcheckbox">Label</span>',
  c.label('Label').label_tag(Inline.SPAN).render)
utest('<input id="inputcheckbox" type="checkbox">', c.label('Label').not_label().render)
utest('<input id="inputcheckbox" type="checkbox">', c.label('').render)
utest('<input type="checkbox">\n<label>Label</label>', c.id(None).label('Label').render)

utest('<label for="inputcheckbox">\n<input id="inputcheckbox" type="checkbox">\nLabel\n</label>',
  c.enclosed_by_label().label('Label').render)
utest('<input id="inputcheckbox" type="checkbox">', c.enclosed_by_label().render)
utest('<label for="label-for">\n<input id="inputcheckbox" type="checkbox">\nLabel\n</label>',
  c.enclosed_by_label(True).label('Label').label_for('label-for').render)
utest('<label for="inputcheckbox">\n<input id="inputcheckbox" type="checkbox" value="1" checked>\nRemember me\n</label>',
  InputCheckbox.tag({'id': 'inputcheckbox', 'value': 1, 'checked': True, 'label': 'Remember me', 'enclosed_by_label': True}).render)


# Unchecked value.
utest('<input name="agree" type="hidden" value="0">\n<input id="inputcheckbox" name="agree" type="checkbox" value="1">',
  c.name('agree').value('1').unchecked_value('0').render)
utest('<input name="agree" type="hidden" value="0">\n<input id="inputcheckbox" name="agree" type="checkbox" value="1">\n'
  '<label for="inputcheckbox">Agree</label>',
  c.name('agree').value(True).unchecked_value(False).label('Agree').render)


@utest_call
def test_auto_id_label() -> None:
  html = InputCheckbox.tag().label('Label').render()
  m = re.fullmatch(r'<input id="(inputcheckbox-\w+)" type="checkbox">\n<label for="\1">Label</label>', html)
  utest_val(True, m is not None, 'label refers to the auto id')


@utest_call
def test_global_label_defaults() -> None:
  set_defaults(InputCheckbox, {'label_attrs': {'class': 'form-check-label'}, 'class': 'form-check-input'})
  utest('<input class="form-check-input" id="inputcheckbox" type="checkbox">\n'
    '<label class="form-check-label" for="inputcheckbox">Label</label>',
    InputCheckbox.tag().id('inputcheckbox').label('Label').render)
  reset_defaults()
