""" Provides decorators for classes that dispatch on argument type. """

from functools import partial

_REGISTERED_METHOD_ATTR = '_registered_method'
_REGISTERED_METHOD_KEY = '_registered_method_key'

def registered_method_for(key):
    """ A decorator for methods that handle values of type `key`. """
    return partial(registered_method, key=key)

def registered_method(func, key=None):
    """ A decorator for registered methods. """
    setattr(func, _REGISTERED_METHOD_ATTR, True)
    if key is None:
        key = func.__name__
    setattr(func, _REGISTERED_METHOD_KEY, key)
    return func

class MethodRegister:
    """ A class with methods registered to handle particular types.

    Subclasses decorate methods with `registered_method_for(SomeType)`
    and then call `dispatch(value)` to call whichever method handles
    `type(value)` (or its nearest registered superclass).

    Example:
        ```
        class Example(MethodRegister):

            @registered_method_for(int)
            def handle_int(self, value):
                print("int", value)

            @registered_method_for(str)
            def handle_str(self, value):
                print("str", value)

        Example().dispatch(5)  # prints "int 5"
        ```
    """

    def __init_subclass__(cls, **kwargs):
        """ Registers methods decorated by `registered_method`[`_for`]. """
        super().__init_subclass__(**kwargs)
        # Copy rather than mutate, so that sibling subclasses don't
        # share (and overwrite) one another's registrations:
        cls.registered_methods = dict(getattr(cls, 'registered_methods', {}))
        for name in dir(cls):
            attr = getattr(cls, name)
            if callable(attr) and getattr(attr, _REGISTERED_METHOD_ATTR, False):
                key = getattr(attr, _REGISTERED_METHOD_KEY, name)
                cls.registered_methods[key] = attr

    def dispatch(self, value, *args, **kwargs):
        """ Calls the method registered for `value`'s type.

        `value` is passed as the first argument (after `self`),
        followed by `*args` and `**kwargs`.

        Raises:
            TypeError: No method is registered for `value`'s type.
        """
        for value_type in type(value).__mro__:
            if value_type in self.registered_methods:
                method = self.registered_methods[value_type]
                # Registered methods are *unbound*, so pass `self`:
                return method(self, value, *args, **kwargs)
        raise TypeError(
            str(type(value).__name__) + ' is not a supported type for '
            + type(self).__name__)
