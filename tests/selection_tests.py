import unittest
import tests

from dockpurge.monads import *
from dockpurge.selection import (expandRange, parseSelection, Selection)
from dockpurge.exceptions import (
  EmptySelectionError,
  InvalidFormatError,
  InvalidRangeError,
  OutOfRangeError,
  DuplicateSelectionError,
)

class TestExpandRange(tests.TestBase):

  def testSingleNumber(self):
    for n in range(1, 20):
      self.assertEqual(list(expandRange(str(n)).getOK()), [n])

  def testRange(self):
    self.assertEqual(list(expandRange("3-7").getOK()), [3, 4, 5, 6, 7])
    self.assertEqual(list(expandRange("4-4").getOK()), [4])

  def testZeroIsExpanded(self):
    self.assertEqual(list(expandRange("0").getOK()), [0])

  def testInvertedRange(self):
    res = expandRange("7-3")
    self.assertIsInstance(res, Fail)
    self.assertIsInstance(res.getFail(), InvalidRangeError)

  def testInvalidFormat(self):
    for token in ["", "a", "1-", "-3", "1-2-3", "1.5", "+2", "1 2"]:
      res = expandRange(token)
      self.assertIsInstance(res.getFail(), InvalidFormatError, token)

  def testOversizedNumber(self):
    for token in ["9" * 5000, "1-" + "9" * 5000, "9" * 5000 + "-1"]:
      self.assertIsInstance(expandRange(token).getFail(), OutOfRangeError)
    self.assertEqual(list(expandRange("0" * 5000 + "7").getOK()), [7])

  def testHugeRangeIsLazy(self):
    res = expandRange("1-1000000000000")
    self.assertEqual(res.getOK()[0], 1)
    self.assertEqual(len(res.getOK()), 1000000000000)


class TestParseSelection(tests.TestBase):

  def assertFailsWith(self, raw, maxValue, errorType):
    res = parseSelection(raw, maxValue)
    self.assertIsInstance(res, Fail, raw)
    self.assertIsInstance(res.getFail(), errorType, raw)
    return res.getFail()

  def testEmptyInput(self):
    for raw in ["", "   ", "\t", None]:
      self.assertFailsWith(raw, 5, EmptySelectionError)

  def testInvalidFormat(self):
    for raw in ["1,3,abc", "1;3", "1,,3", ",1", "1,", "1 3", "1-3-5", "#1", "3 - 4", "3- 4"]:
      self.assertFailsWith(raw, 10, InvalidFormatError)

  def testInvalidRange(self):
    self.assertFailsWith("1,7-3", 10, InvalidRangeError)

  def testDuplicates(self):
    for raw in ["1,3,3", "1-5,3", "1-3,2-4", "3-3,3", "2, 2"]:
      self.assertFailsWith(raw, 10, DuplicateSelectionError)

  def testOutOfRange(self):
    err = self.assertFailsWith("0", 5, OutOfRangeError)
    self.assertIn("between 1 and 5", err.errorLabel)
    self.assertFailsWith("6", 5, OutOfRangeError)
    self.assertFailsWith("4-6", 5, OutOfRangeError)
    self.assertFailsWith("1-1000000000000", 5, OutOfRangeError)

  def testOversizedNumberIsOutOfRange(self):
    for raw in ["9" * 5000, "1-" + "9" * 5000, "1, " + "9" * 5000]:
      err = self.assertFailsWith(raw, 5, OutOfRangeError)
      self.assertIn("between 1 and 5", err.errorLabel)

  def testBoundsCheckedBeforeDuplicates(self):
    self.assertFailsWith("1,1,99", 5, OutOfRangeError)

  def testValidSelection(self):
    res = parseSelection("1,3,5,7-10,13", 13)
    self.assertIsInstance(res, OK)
    self.assertEqual(list(res.getOK()), [1, 3, 5, 7, 8, 9, 10, 13])

  def testWhitespaceAroundTokens(self):
    res = parseSelection(" 1 , 3-4 ", 5)
    self.assertEqual(res.getOK(), Selection([1, 3, 4]))

  def testEntryOrderIsKept(self):
    res = parseSelection("5,1-2", 5)
    self.assertEqual(list(res.getOK()), [5, 1, 2])

  def testUpperBoundIsInclusive(self):
    res = parseSelection("1-5", 5)
    self.assertEqual(len(res.getOK()), 5)
    self.assertIn(5, res.getOK())


if __name__ == '__main__':
  unittest.main()
