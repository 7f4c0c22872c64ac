# Collection of our favorite functional idioms
# Note in many cases you'll see normal python functions
# with the arguments reversed, data last, so they can be
# partially applied and handed to a zipper as a hook.

from functools import wraps
from inspect import signature


def curry(f):
    """
    Returns a version of f that keeps accepting positional arguments until
    it has as many as f declares, then calls f.

    >>> add = curry(lambda x, y, z: x + y + z)
    >>> add(1)(2)(3) == add(1, 2)(3) == add(1, 2, 3) == 6
    True
    """
    arity = len(signature(f).parameters)

    @wraps(f)
    def curry_(*args):
        if len(args) >= arity:
            return f(*args)

        def more(*more_args):
            return curry_(*(args + more_args))
        return more
    return curry_

