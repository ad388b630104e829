import re
import math
from collections.abc import MutableMapping

from boltons.funcutils import format_nonexp_repr


FRIENDLY_TYPE_NAMES = {bool: 'boolean',
                       int: 'integer',
                       float: 'decimal',
                       str: 'string'}

FALSE_VALUES = ('false', '0')

# the whole value must be consumed: no whitespace, no '+', no '_'
_INT_RE = re.compile(r'-?[0-9]+\Z')
_FLOAT_RE = re.compile(r'-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?\Z'
                       r'|-?(?:inf|infinity|nan)\Z', re.IGNORECASE)
_INF_RE = re.compile(r'-?inf(?:inity)?\Z', re.IGNORECASE)


def parse_bool(text):
    """Absent (None) and any other value is true, only 'false' and '0'
    are false. Never fails."""
    return text not in FALSE_VALUES


def parse_int(text):
    if not _INT_RE.match(text):
        raise ValueError('expected integer, not: %r' % text)
    return int(text)


def parse_float(text):
    if not _FLOAT_RE.match(text):
        raise ValueError('expected decimal, not: %r' % text)
    ret = float(text)
    if math.isinf(ret) and not _INF_RE.match(text):
        raise ValueError('decimal out of range: %r' % text)
    return ret


def parse_str(text):
    return text


_BUILTIN_PARSERS = {bool: parse_bool,
                    int: parse_int,
                    float: parse_float,
                    str: parse_str}


def get_type_desc(parse_as):
    "Human-friendly label for a converter, used in help text"
    try:
        return FRIENDLY_TYPE_NAMES[parse_as]
    except KeyError:
        pass
    try:
        return parse_as.__name__
    except AttributeError:
        return repr(parse_as)


def format_default(value):
    "Render a slot's value the way usage text shows defaults"
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        ret = repr(value)
        if ret.endswith('.0'):
            ret = ret[:-2]
        return ret
    if isinstance(value, int):
        return str(value)
    if value is None:
        return ''
    return '"%s"' % (value,)


class Binding(object):
    """A Binding writes string arguments into a single typed slot: an
    attribute of *target*, or a key of *target* if it is a mapping.

    Args:
       target: The object (or dict) owning the slot.
       attr (str): The attribute name or key.
       parse_as: ``bool``, ``int``, ``float``, ``str``, or any
          callable taking the argument text and returning the value
          to store. Callables signal bad input by raising ValueError
          or TypeError. Defaults to ``str``.

    Only ``bool`` bindings are flags: options bound to them do not
    take a value from the next argument.
    """
    def __init__(self, target, attr, parse_as=str):
        if not callable(parse_as):
            raise TypeError('expected callable or type for parse_as, not: %r' % (parse_as,))
        self.target = target
        self.attr = attr
        self.parse_as = parse_as
        self._convert = _BUILTIN_PARSERS.get(parse_as, parse_as)

    @property
    def is_flag(self):
        return self.parse_as is bool

    def get(self, default=None):
        if isinstance(self.target, MutableMapping):
            return self.target.get(self.attr, default)
        return getattr(self.target, self.attr, default)

    def set(self, value):
        if isinstance(self.target, MutableMapping):
            self.target[self.attr] = value
        else:
            setattr(self.target, self.attr, value)

    def convert(self, value):
        """Convert *value* text with this binding's rules, raising
        ValueError on failure. Does not touch the slot."""
        if value is None and not self.is_flag:
            raise ValueError('expected a value for %r' % self.attr)
        try:
            return self._convert(value)
        except (ValueError, TypeError, ArithmeticError) as e:
            raise ValueError('%s failed to parse %r: %r' % (get_type_desc(self.parse_as), value, e))

    def assign(self, value):
        """Convert *value* and store it in the slot. Returns False on
        conversion failure, leaving the slot untouched."""
        try:
            val = self.convert(value)
        except ValueError:
            return False
        self.set(val)
        return True

    def default_repr(self):
        return format_default(self.get())

    def __repr__(self):
        return format_nonexp_repr(self, ['attr', 'parse_as'])


class ListBinding(Binding):
    """Collects every assigned value into a list in the slot, in the
    order given. Conversion of each element follows the scalar rules
    of *parse_as*; a failed element is not appended. A missing or None
    slot starts out as an empty list.
    """
    @property
    def is_flag(self):
        return False

    def assign(self, value):
        try:
            val = self.convert(value)
        except ValueError:
            return False
        cur = self.get()
        if cur is None:
            cur = []
            self.set(cur)
        elif not self._owns_slot():
            # a class-level default list, copy before the first append
            cur = list(cur)
            self.set(cur)
        cur.append(val)
        return True

    def _owns_slot(self):
        if isinstance(self.target, MutableMapping):
            return True
        inst_dict = getattr(self.target, '__dict__', None)
        if inst_dict is None:
            # __slots__ values always live on the instance
            return True
        return self.attr in inst_dict

    def default_repr(self):
        return '...'


def bind(target, attr, parse_as=None):
    """Create a Binding for *attr* of *target*, inferring the converter
    from the slot's current value when *parse_as* is not passed::

      >>> class Args(object):
      ...     debug, count, names = False, 0, []
      >>> bind(Args, 'count').parse_as
      <class 'int'>

    A list-valued slot produces a :class:`ListBinding`, whose element
    type is *parse_as* (defaulting to ``str``).
    """
    if isinstance(target, MutableMapping):
        try:
            cur = target[attr]
        except KeyError:
            raise ValueError('expected target to have key %r' % (attr,))
    else:
        try:
            cur = getattr(target, attr)
        except AttributeError:
            raise ValueError('expected target to have attribute %r' % (attr,))

    if isinstance(cur, list):
        return ListBinding(target, attr, parse_as=parse_as or str)
    if parse_as is None:
        # bool before int, as bool is a subclass
        for type_ in (bool, int, float, str):
            if isinstance(cur, type_):
                parse_as = type_
                break
        else:
            if cur is not None:
                raise TypeError('cannot infer converter for %r from value %r,'
                                ' pass parse_as' % (attr, cur))
            parse_as = str
    return Binding(target, attr, parse_as=parse_as)
