# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import re
from os import environ

from tagsmith.content import Div, P, Span
from tagsmith.exceptions import InvalidAttributeValue, ValueNotInList
from tagsmith.form import InputText
from tagsmith.io import is_tracing
from tagsmith.semantics import Aria, Attribute, Data, Direction, GlobalAttribute, Language, Role, Translate
from utest import utest, utest_call, utest_exc, utest_items, utest_val


# Global attributes.
utest('<div accesskey="k">\n</div>', Div.tag().accesskey('k').render)
utest('<div class="a b">\n</div>', Div.tag().cl('a').cl('b').render)
utest('<div dir="ltr">\n</div>', Div.tag().dir('ltr').render)
utest('<div dir="rtl">\n</div>', Div.tag().dir(Direction.RTL).render)
utest('<div hidden>\n</div>', Div.tag().hidden().render)
utest('<div>\n</div>', Div.tag().hidden(False).render)
utest('<div id="main">\n</div>', Div.tag().id('main').render)
utest('<div lang="en">\n</div>', Div.tag().lang(Language.ENGLISH).render)
utest('<div lang="pt-BR">\n</div>', Div.tag().lang('pt-BR').render)
utest('<div role="presentation">\n</div>', Div.tag().role('presentation').render)
utest('<div role="navigation">\n</div>', Div.tag().role(Role.NAVIGATION).render)
utest('<div spellcheck="false">\n</div>', Div.tag().spellcheck(False).render)
utest("<div style='color: red;'>\n</div>", Div.tag().style('color: red;').render)
utest("<div style='color: red; font-size: 12px;'>\n</div>", Div.tag().style({'color': 'red', 'font_size': '12px'}).render)
utest('<div tabindex="0">\n</div>', Div.tag().tabindex(0).render)
utest('<div tabindex="-1">\n</div>', Div.tag().tabindex('-1').render)
utest('<div title="value">\n</div>', Div.tag().title('value').render)
utest('<div translate="no">\n</div>', Div.tag().translate(False).render)
utest('<div translate="yes">\n</div>', Div.tag().translate(Translate.YES).render)
utest('<div autofocus>\n</div>', Div.tag().autofocus().render)


# Attribute families.
utest('<span aria-label="Close"></span>', Span.tag().add_aria('label', 'Close').render)
utest('<span aria-label="Close"></span>', Span.tag().add_aria(Aria.LABEL, 'Close').render)
utest('<span aria-hidden="true"></span>', Span.tag().add_aria('hidden', True).render)
utest('<span aria-controls="menu" aria-label="Menu"></span>',
  Span.tag().aria_attrs({'controls': 'menu', Aria.LABEL: 'Menu'}).render)
utest('<span></span>', Span.tag().add_aria('label', 'Close').remove_aria(Aria.LABEL).render)
utest('<span data-value="v"></span>', Span.tag().add_data(Data.VALUE, 'v').render)
utest('<span data-a="1" data-b="2"></span>', Span.tag().data_attrs({'a': 1, 'data-b': 2}).render)
utest('<span data-config="{&quot;a&quot;:1}"></span>', Span.tag().add_data('config', {'a': 1}).render)
utest('<span></span>', Span.tag().add_data('value', 'test').remove_data('value').render)
utest('<p onclick="alert(&apos;Clicked!&apos;)">\n</p>', P.tag().add_event('click', "alert('Clicked!')").render)
utest('<p onfocus="handleFocus()" onblur="handleBlur()">\n</p>',
  P.tag().events({'focus': 'handleFocus()', 'blur': 'handleBlur()'}).render)
utest('<p>\n</p>', P.tag().add_event('click', "alert('Clicked!')").remove_event('onclick').render)


# Generic attribute access.
utest('default', Div.tag().get_attr, 'data-test', 'default')
utest(None, Div.tag().get_attr, 'data-test')
utest('value', Div.tag().add_attr('data-test', 'value').get_attr, 'data-test')
utest_items([('data-test', 'value')], Div.tag().add_attr('data-test', 'value').get_attrs)
utest_items([('class', 'x'), ('title', 't')], Div.tag().attrs({'class': 'x', 'title': 't'}).get_attrs)
utest('<div>\n</div>', Div.tag().set_attr('data-test', 'value').remove_attr('data-test').render)
utest('<div data-test="again">\n</div>',
  Div.tag().set_attr('data-test', 'value').remove_attr('data-test').set_attr('data-test', 'again').render)
utest("Div({'title': 't'})", repr, Div.tag().title('t'))
utest('<div class="default-class">\n</div>', Div.tag({'class': 'default-class'}).render)
utest('<div title="t">\n</div>', Div.tag().set_attr(GlobalAttribute.TITLE, 't').render)
utest('<input id="t" type="text" placeholder="p">', InputText.tag({Attribute.PLACEHOLDER: 'p', GlobalAttribute.ID: 't'}).render)


# Validation.
utest_exc(ValueNotInList(attr='dir', value='invalid-value', allowed=['auto', 'ltr', 'rtl']),
  Div.tag().dir, 'invalid-value')
utest_exc(InvalidAttributeValue, Div.tag().lang, 'invalid-value')
utest_exc(ValueNotInList, Div.tag().role, 'invalid-value')
utest_exc(ValueNotInList(attr='translate', value='invalid-value', allowed=['no', 'yes']),
  Div.tag().translate, 'invalid-value')
utest_exc(InvalidAttributeValue, Div.tag().tabindex, -2)
utest_exc(InvalidAttributeValue, Div.tag().tabindex, 'first')
utest_exc(InvalidAttributeValue, Div.tag().tabindex, True)
utest_exc(TypeError, Div.tag().set_attr, 1, 'x')


@utest_call
def test_immutability() -> None:
  t = InputText.tag()
  setters = [
    lambda: t.id('x'),
    lambda: t.cl('x'),
    lambda: t.title('x'),
    lambda: t.set_attr('data-x', 1),
    lambda: t.remove_attr('data-x'),
    lambda: t.add_aria('label', 'x'),
    lambda: t.add_event('click', 'f()'),
    lambda: t.prefix('x'),
    lambda: t.suffix_tag('span'),
    lambda: t.template('{tag}'),
    lambda: t.aria_describedby_suffix('x'),
    lambda: t.value('x'),
  ]
  for setter in setters:
    utest_val(True, setter() is not t, 'setter returns a new instance')
  utest_items([('type', 'text')], t.get_attrs)


@utest_call
def test_auto_id() -> None:
  t = InputText.tag()
  html = t.render()
  m = re.fullmatch(r'<input id="(inputtext-\w+)" type="text">', html)
  utest_val(True, m is not None, 'auto id rendered')
  utest_val(html, t.render(), 'rendering is deterministic')
  utest_val(html, str(t), 'str renders')
  # Copies made after the id is generated share it.
  utest_val(True, t.title('x').render().startswith(html[:-1]), 'copies share generated id')
  # An explicit id replaces the auto id; None suppresses it.
  utest('<input id="given" type="text">', InputText.tag().id('given').render)
  utest('<input type="text">', InputText.tag().id(None).render)
  # Elements without an auto id render none.
  utest('<div>\n</div>', Div.tag().render)


@utest_call
def test_aria_describedby() -> None:
  t = InputText.tag().id('name')
  utest('<input id="name" type="text" aria-describedby="name-help">', t.add_aria('describedby', True).render)
  utest('<input id="name" type="text" aria-describedby="name-help">', t.add_aria('describedby', 'true').render)
  utest('<input id="name" type="text" aria-describedby="custom-help">', t.add_aria('describedby', 'custom-help').render)
  utest('<input id="name" type="text" aria-describedby="name-value">',
    t.add_aria('describedby', True).aria_describedby_suffix('value').render)
  utest('<input id="name" type="text" aria-describedby="name-help">',
    t.add_aria('describedby', True).aria_describedby_suffix('').render)
  utest('<input type="text">', t.id(None).add_aria('describedby', True).render)
  utest('<input id="name" type="text" aria-describedby="name-help">',
    InputText.tag({'aria-describedby': True, 'id': 'name'}).render)
  # The synthesized value uses the auto id when no id is given.
  html = InputText.tag().add_aria(Aria.DESCRIBEDBY, True).render()
  utest_val(True, bool(re.fullmatch(r'<input id="(inputtext-\w+)" type="text" aria-describedby="\1-help">', html)),
    'describedby uses the auto id')


@utest_call
def test_tracing() -> None:
  environ.pop('TAGSMITH_TRACE', None)
  utest(False, is_tracing)
  environ['TAGSMITH_TRACE'] = '1'
  utest(True, is_tracing)
  utest('<input id="t" type="text">', InputText.tag().id('t').render) # Trace output goes to stderr.
  del environ['TAGSMITH_TRACE']
