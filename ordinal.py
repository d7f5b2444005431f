
'''
This module provides the type Ordinal, that formats an integer as an ordinal number.

e.g:
>>> str(Ordinal(1))
'1st'
>>> Ordinal(113).suffix()
'th'
>>> to_ordinal(-22).format()
'-22nd'
'''

from typing import *
import logging
import operator
from errors import ConversionError, NotAnIntegerError
from utils import is_integer, magnitude_digits, suffix_from_digits
from widths import get_width


logger = logging.getLogger(__name__)



def suffix(value) -> str:
    '''
    Returns the ordinal suffix of an integer: 'st', 'nd', 'rd' or 'th'
    The sign of the value is ignored (-1 and 1 both take 'st')
    '''
    if not is_integer(value):
        raise NotAnIntegerError(value, func='suffix')
    return suffix_from_digits(magnitude_digits(value))



def format_ordinal(value) -> str:
    '''
    Returns the decimal representation of an integer followed by its ordinal suffix
    e.g: format_ordinal(-4) == '-4th'
    '''
    if not is_integer(value):
        raise NotAnIntegerError(value, func='format_ordinal')
    return str(operator.index(value)) + suffix(value)



class Ordinal:
    '''
    Immutable wrapper around an integer that knows how to render itself as
    an ordinal number.
    Equality, ordering and hashing are the same as those of the wrapped value,
    but ordinals are only comparable with other ordinals.
    '''
    __slots__ = ('_value',)

    def __init__(self, value=0):
        '''
        Constructor.
        :param value: Any integer (int or any object accepted by operator.index except bool)
        Default is 0
        '''
        if not is_integer(value):
            raise NotAnIntegerError(value)
        object.__setattr__(self, '_value', value)


    def __setattr__(self, key, value):
        raise AttributeError('{} objects are immutable'.format(type(self).__name__))

    def __delattr__(self, key):
        raise AttributeError('{} objects are immutable'.format(type(self).__name__))

    def __reduce__(self):
        return type(self), (self._value,)


    @property
    def value(self):
        '''
        The wrapped value
        '''
        return self._value


    def suffix(self) -> str:
        '''
        Returns the suffix of the ordinal number.
        For example, 1 returns 'st', 2 returns 'nd', 3 returns 'rd', and 4 returns 'th'.
        This method is useful when you want to format the ordinal number yourself.
        '''
        return suffix(self._value)


    def format(self) -> str:
        return format_ordinal(self._value)

    to_string = format


    def __str__(self):
        return self.format()

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self._value)


    def __eq__(self, other):
        if not isinstance(other, Ordinal):
            return NotImplemented
        return self._value == other._value

    def __ne__(self, other):
        if not isinstance(other, Ordinal):
            return NotImplemented
        return self._value != other._value

    def __lt__(self, other):
        if not isinstance(other, Ordinal):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other):
        if not isinstance(other, Ordinal):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other):
        if not isinstance(other, Ordinal):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other):
        if not isinstance(other, Ordinal):
            return NotImplemented
        return self._value >= other._value

    def __hash__(self):
        return hash(self._value)


    def to_primitive(self):
        '''
        Returns the primitive value of the ordinal number (the wrapped object itself)
        '''
        return self._value


    def narrow(self, width: str, options: Mapping[str, Any]=None) -> int:
        '''
        Returns the primitive value of the ordinal number converted to a fixed-width
        integer type.
        :param width: Name of the integer type: 'i8', 'i16', 'i32', 'i64', 'i128', 'isize',
        'u8', 'u16', 'u32', 'u64', 'u128' or 'usize'
        :param options: Settings that override the global ones (only 'pointer_width' is used)

        Raises ConversionError if the value does not fit in the given type
        '''
        return self._narrow(width, 'narrow', options)


    def _narrow(self, width, func, options=None):
        width = get_width(width, options)
        value = operator.index(self._value)
        if value not in width:
            logger.debug('%d does not fit in %s', value, width.describe())
            raise ConversionError(value, width, func)
        return value


    def to_i8(self) -> int:
        return self._narrow('i8', 'to_i8')

    def to_i16(self) -> int:
        return self._narrow('i16', 'to_i16')

    def to_i32(self) -> int:
        return self._narrow('i32', 'to_i32')

    def to_i64(self) -> int:
        return self._narrow('i64', 'to_i64')

    def to_i128(self) -> int:
        return self._narrow('i128', 'to_i128')

    def to_isize(self) -> int:
        return self._narrow('isize', 'to_isize')

    def to_u8(self) -> int:
        return self._narrow('u8', 'to_u8')

    def to_u16(self) -> int:
        return self._narrow('u16', 'to_u16')

    def to_u32(self) -> int:
        return self._narrow('u32', 'to_u32')

    def to_u64(self) -> int:
        return self._narrow('u64', 'to_u64')

    def to_u128(self) -> int:
        return self._narrow('u128', 'to_u128')

    def to_usize(self) -> int:
        return self._narrow('usize', 'to_usize')



def to_ordinal(value) -> Ordinal:
    '''
    Builds an ordinal from a bare integer value. Same as Ordinal(value)
    '''
    return Ordinal(value)
