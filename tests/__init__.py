import os
import shutil
import tempfile
import unittest
from contextlib import contextmanager

from dockpurge.monads import *
from dockpurge.exceptions import DockerError


class TestBase(unittest.TestCase):

  def addTemporaryDir(self):
    path = tempfile.mkdtemp(prefix='dockpurge-tests-')
    self.addCleanup(shutil.rmtree, path, True)
    return path

  @staticmethod
  def raiser(err):
    raise err

  @contextmanager
  def pushd(self, newDir):
    previousDir = os.getcwd()
    os.chdir(newDir)
    try:
      yield
    finally:
      os.chdir(previousDir)

  @staticmethod
  def messages(logs):
    return [record.getMessage() for record in logs.records]


def container(cid, name, image, status="Up 2 hours"):
  return {'id': cid, 'name': name, 'image': image, 'status': status}

def volumeMount(name):
  return {'type': 'volume', 'name': name}

def bindMount(source):
  return {'type': 'bind', 'name': None, 'source': source}


class FakeEngine(object):
  '''
  In-memory stand-in for DockerEngine. Removal of any target listed in
  ``failures`` fails with the given message.
  '''

  def __init__(self, containers=None, mounts=None, failures=None, listError=None):
    self.containers = containers or []
    self.mounts = mounts or {}
    self.failures = failures or {}
    self.listError = listError
    self.calls = []

  def listContainers(self):
    self.calls.append(('list',))
    if self.listError:
      return Fail(DockerError(message=self.listError, stderr=self.listError))
    return OK(list(self.containers))

  def inspectMounts(self, containerId):
    self.calls.append(('inspect', containerId))
    mounts = self.mounts.get(containerId, [])
    if isinstance(mounts, Exception):
      return Fail(mounts)
    return OK(mounts)

  def remove(self, kind, target, force):
    self.calls.append((kind, target, force))
    failure = self.failures.get(target)
    if isinstance(failure, Exception):
      return Fail(failure)
    if failure:
      return Fail(DockerError(code=1, message=failure, stderr=failure))
    return OK({'code': 0, 'stdout': target, 'stderr': ''})

  def removeContainer(self, containerId, force=True):
    return self.remove('container', containerId, force)

  def removeImage(self, image, force=True):
    return self.remove('image', image, force)

  def removeVolume(self, name, force=False):
    return self.remove('volume', name, force)

  def removals(self):
    return [call for call in self.calls if call[0] in ('container', 'image', 'volume')]
