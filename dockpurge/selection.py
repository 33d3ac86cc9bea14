"""
Container selection syntax.

A selection is a comma-separated list of container numbers and inclusive
ranges, e.g. ``1,3,5,7-10,13``. Every number must name a listed container and
may be selected only once, including through overlapping ranges.
"""

import re

from dockpurge.monads import *
from dockpurge.exceptions import (
  EmptySelectionError,
  InvalidFormatError,
  InvalidRangeError,
  OutOfRangeError,
  DuplicateSelectionError,
)

_TOKEN = r'\s*[0-9]+(?:-[0-9]+)?\s*'

SELECTION_RE = re.compile(r'%s(?:,%s)*' % (_TOKEN, _TOKEN))
NUMBER_RE = re.compile(r'([0-9]+)')
RANGE_RE = re.compile(r'([0-9]+)-([0-9]+)')

# Longer literals can never name a listed container.
MAX_DIGITS = 18


class Selection(object):
  '''
  Validated container numbers in the order they were entered.
  '''

  def __init__(self, indices):
    self.indices = tuple(indices)

  def __iter__(self):
    return iter(self.indices)

  def __len__(self):
    return len(self.indices)

  def __contains__(self, index):
    return index in self.indices

  def __eq__(self, other):
    return isinstance(other, Selection) and self.indices == other.indices

  def __ne__(self, other):
    return not self.__eq__(other)

  def __repr__(self):
    return "Selection(%s)" % list(self.indices)


def tooLarge(digits):
  return len(digits.lstrip('0')) > MAX_DIGITS


def expandRange(token):
  '''
  Expand "5" to [5] and "3-7" to [3, 4, 5, 6, 7]. Bounds are not checked
  here; the result is a lazy sequence so huge ranges cost nothing until
  iterated.
  '''
  match = RANGE_RE.fullmatch(token) or NUMBER_RE.fullmatch(token)
  if not match:
    return Fail(InvalidFormatError("Invalid input: '%s' is not a number or a range." % token))

  if any(tooLarge(digits) for digits in match.groups()):
    return Fail(OutOfRangeError("Invalid input: number too large."))

  numbers = [int(digits.lstrip('0') or '0') for digits in match.groups()]
  start, end = numbers[0], numbers[-1]
  if start > end:
    return Fail(InvalidRangeError("Invalid input: range '%s' starts after it ends." % token))
  return OK(range(start, end + 1))


def outOfRange(maxValue):
  return Fail(OutOfRangeError(
    "Invalid input. Please enter numbers between 1 and %d." % maxValue))


def parseSelection(rawInput, maxValue):
  if not rawInput or not rawInput.strip():
    return Fail(EmptySelectionError("No containers selected."))

  if not SELECTION_RE.fullmatch(rawInput.strip()):
    return Fail(InvalidFormatError(
      "Invalid input: use comma-separated numbers or ranges, e.g. 1,3,5,7-10,13."))

  expanded = []
  for token in rawInput.split(','):
    numbers = expandRange(token.strip())
    if numbers.isFail():
      if isinstance(numbers.getFail(), OutOfRangeError):
        return outOfRange(maxValue)
      return numbers
    for number in numbers.getOK():
      if number < 1 or number > maxValue:
        return outOfRange(maxValue)
      expanded.append(number)

  seen = set()
  for number in expanded:
    if number in seen:
      return Fail(DuplicateSelectionError(
        "Invalid input: Duplicate numbers detected (%d selected more than once)." % number))
    seen.add(number)

  return OK(Selection(expanded))
