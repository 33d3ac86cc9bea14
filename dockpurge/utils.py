import os
import logging
from importlib import metadata
from shlex import quote
import yaml

from dockpurge.exceptions import (
  ConfigSyntaxError,
  FileSystemError,
)

logger = logging.getLogger(__name__)

def getPackageVersion():
  try:
    return metadata.version('dockpurge')
  except metadata.PackageNotFoundError:
    from dockpurge._version import __version__
    return __version__

def walkUpForFile(root, findfile):
  lastRoot = root
  while root:
    candidate = os.path.join(root, findfile)
    if os.path.isfile(candidate):
      return candidate
    lastRoot = root
    root = os.path.dirname(lastRoot)
    if root == lastRoot:
      break

def readYAML(filename):
  try:
    with open(filename, "r") as stream:
      return yaml.safe_load(stream)
  except yaml.YAMLError as exc:
    msg = "Syntax error in file %s" % filename
    if hasattr(exc, 'problem_mark'):
      mark = exc.problem_mark
      msg += " Error position: (%s:%s)" % (mark.line+1, mark.column+1)
    raise ConfigSyntaxError(msg)
  except Exception as err:
    raise FileSystemError("Failed to read configuration file %s : %s" % (filename, err))

def mergeDict(a, b, path=None):
  if path is None: path = []
  for key in b:
    if key in a:
      if isinstance(a[key], dict) and isinstance(b[key], dict):
        mergeDict(a[key], b[key], path + [str(key)])
      elif a[key] == b[key]:
        pass # same leaf value
      else:
        a[key] = b[key]
    else:
      a[key] = b[key]
  return a

def truncate(value, width):
  value = "%s" % value
  if width:
    return value[0:width]
  return value

def shortId(cid):
  return cid[0:12] if cid else cid

def safeQuote(string):
  return quote(str(string))
