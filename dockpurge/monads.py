"""
Minimal OK/Fail result values.

Every fallible operation in dockpurge returns either ``OK(value)`` or
``Fail(error)``; callers chain the next step with ``bind``/``then`` and decide
what to do with failures with ``catch``/``catchError``.
"""

__all__ = ['Try', 'OK', 'Fail', 'defer']


def defer(func, *args, **kwargs):
  '''
  Bind arguments now, call later. Arguments supplied at call time are
  appended to the bound ones.
  '''
  def deferred(*moreArgs, **moreKwargs):
    kw = dict(kwargs)
    kw.update(moreKwargs)
    return func(*(args + moreArgs), **kw)
  return deferred


class Try(object):

  def __init__(self, value):
    self.value = value

  @staticmethod
  def attempt(func, *args, **kwargs):
    try:
      return OK(func(*args, **kwargs))
    except Exception as err:
      return Fail(err)

  def isOK(self):
    return isinstance(self, OK)

  def isFail(self):
    return isinstance(self, Fail)

  def getOK(self):
    return self.value if self.isOK() else None

  def getFail(self):
    return self.value if self.isFail() else None

  def __rshift__(self, func):
    return self.bind(func)

  def __eq__(self, other):
    return type(self) is type(other) and self.value == other.value

  def __ne__(self, other):
    return not self.__eq__(other)

  def __repr__(self):
    return "%s(%r)" % (self.__class__.__name__, self.value)


class OK(Try):

  def bind(self, func, *args, **kwargs):
    return _ensureTry(func(self.value, *args, **kwargs))

  def then(self, func, *args, **kwargs):
    return _ensureTry(func(*args, **kwargs))

  def map(self, func, *args, **kwargs):
    return Try.attempt(func, self.value, *args, **kwargs)

  def catch(self, func, *args, **kwargs):
    return self

  def catchError(self, errorType, func, *args, **kwargs):
    return self


class Fail(Try):

  def bind(self, func, *args, **kwargs):
    return self

  def then(self, func, *args, **kwargs):
    return self

  def map(self, func, *args, **kwargs):
    return self

  def catch(self, func, *args, **kwargs):
    return _ensureTry(func(self.value, *args, **kwargs))

  def catchError(self, errorType, func, *args, **kwargs):
    if isinstance(self.value, errorType):
      return self.catch(func, *args, **kwargs)
    return self


def _ensureTry(result):
  if isinstance(result, Try):
    return result
  return OK(result)
