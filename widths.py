
from typing import *
from config import resolve



# Fixed width integer types: name -> (bits, signed)
# Pointer sized types have no fixed number of bits (it depends on the settings)
width_specs = dict(
    i8=(8, True),
    i16=(16, True),
    i32=(32, True),
    i64=(64, True),
    i128=(128, True),
    isize=(None, True),
    u8=(8, False),
    u16=(16, False),
    u32=(32, False),
    u64=(64, False),
    u128=(128, False),
    usize=(None, False)
)

# A list of all posible widths
all_widths = list(width_specs.keys())



class IntegerWidth:
    '''
    Describes a fixed-width integer type (its name, number of bits and signedness)
    '''
    __slots__ = ('name', 'bits', 'signed')

    def __init__(self, name: str, bits: int, signed: bool) -> None:
        assert bits > 0
        self.name, self.bits, self.signed = name, bits, signed


    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1


    def __contains__(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


    def describe(self) -> str:
        return '{} ({}..{})'.format(self.name, self.min_value, self.max_value)


    def __eq__(self, other):
        if not isinstance(other, IntegerWidth):
            return NotImplemented
        return (self.name, self.bits, self.signed) == (other.name, other.bits, other.signed)

    def __hash__(self):
        return hash((self.name, self.bits, self.signed))

    def __repr__(self):
        return 'IntegerWidth({!r}, {}, {})'.format(self.name, self.bits, self.signed)



def get_width(name: str, options: Mapping[str, Any]=None) -> IntegerWidth:
    '''
    Return the fixed-width integer type with the given name
    :param name: One of the names in all_widths (e.g 'u8', 'i64', 'usize')
    :param options: Settings that override the global ones when resolving pointer
    sized types
    '''
    options = resolve(options)

    try:
        bits, signed = width_specs[name]
    except KeyError:
        raise KeyError('{} is not a valid integer width'.format(name))

    if bits is None:
        # isize & usize
        bits = options['pointer_width']
    return IntegerWidth(name, bits, signed)
