
from typing import *
import collections.abc
import ctypes



# Allowed values of each setting
setting_choices = dict(
    pointer_width=(32, 64) # Number of bits of isize & usize
)

# A list of all posible settings
all_settings = list(setting_choices.keys())


# Default values for each setting
default_settings = dict(
    pointer_width=ctypes.sizeof(ctypes.c_ssize_t) * 8
)



class Settings(collections.abc.MutableMapping):
    '''
    Objects of this class are used to store setting values.
    Entries that are not set take the value in default_settings
    '''
    def __init__(self, **kwargs):
        object.__setattr__(self, '_entries', {})
        self.update(kwargs)


    def __getitem__(self, key):
        if key not in setting_choices:
            raise KeyError('setting {} not found'.format(key))
        return self._entries.get(key, default_settings[key])

    def __setitem__(self, key, value):
        if key not in setting_choices:
            raise KeyError('{} is not a valid setting'.format(key))

        choices = setting_choices[key]
        if isinstance(value, bool) or not isinstance(value, type(choices[0])):
            raise TypeError('{} setting must be a {} value'.format(key, type(choices[0]).__name__))
        if value not in choices:
            raise ValueError('{} setting must be one of this values: {}'.format(key, ', '.join(map(str, choices))))

        self._entries[key] = value

    def __delitem__(self, key):
        self._entries.pop(key, None)


    def __getattr__(self, key):
        try:
            return self[key]
        except KeyError as e:
            raise AttributeError(*e.args)

    def __setattr__(self, key, value):
        try:
            self[key] = value
        except KeyError as e:
            raise AttributeError(*e.args)


    def clear(self):
        self._entries.clear()

    def __iter__(self):
        return iter(all_settings)

    def __len__(self):
        return len(all_settings)

    def __repr__(self):
        return repr(dict(self.items()))

    def copy(self):
        other = Settings()
        other._entries.update(self._entries)
        return other


# Global settings
settings = Settings()



def resolve(options: Optional[Mapping[str, Any]]=None) -> Settings:
    '''
    Returns the global settings with the given options applied on top of them
    :param options: Mapping with some of the settings (the rest keep their global value)
    '''
    resolved = settings.copy()
    if options is not None:
        resolved.update(options)
    return resolved
