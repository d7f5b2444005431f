
'''
Helper functions for general purpose on this library
'''

import operator


# Suffix of the last digit (when it is not part of 11, 12 or 13)
DIGIT_SUFFIXES = {'1': 'st', '2': 'nd', '3': 'rd'}

# Endings that always take 'th'
TEEN_ENDINGS = ('11', '12', '13')



def is_integer(obj):
    '''
    Check if the object can be used as an integer
    :param obj: The obj to be checked

    An object is an integer if operator.index() accepts it (int, numpy integers,
    gmpy2.mpz, ...). bool is excluded even though it is a subclass of int
    '''
    if isinstance(obj, bool):
        return False
    try:
        operator.index(obj)
    except TypeError:
        return False
    return True



def magnitude_digits(k):
    '''
    Return the decimal digits of the absolute value of the integer k
    e.g: magnitude_digits(-113) == '113'
    '''
    return str(abs(operator.index(k)))



def suffix_from_digits(digits):
    '''
    Return the ordinal suffix for a string of decimal digits
    :param digits: Must be a non empty string of decimal digits (no sign)
    '''
    assert len(digits) > 0 and digits.isdigit()

    # 11, 12 & 13 are checked first so they are not mistaken for 1, 2 & 3
    if digits.endswith(TEEN_ENDINGS):
        return 'th'
    return DIGIT_SUFFIXES.get(digits[-1], 'th')
