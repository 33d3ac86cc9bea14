import logging

from dockpurge.monads import *
from dockpurge.exceptions import (InventoryMismatchError, RemovalError, UserInterruptError)

logger = logging.getLogger(__name__)

CONTAINER = 'container'
IMAGE = 'image'
VOLUME = 'volume'

PHASES = (CONTAINER, IMAGE, VOLUME)


class RemovalPlan(object):
  '''
  Everything a selection removes: the selected containers in selection
  order, then each distinct image and named volume they use, in first-seen
  order.
  '''

  def __init__(self):
    self.containers = []
    self.images = []
    self.volumes = []

  def addEntry(self, entry):
    self.containers.append((entry.containerId, entry.containerName))
    if entry.image and entry.image not in self.images:
      self.images.append(entry.image)
    for volume in entry.volumes:
      if volume not in self.volumes:
        self.volumes.append(volume)
    return self


class RemovalReport(object):

  def __init__(self):
    self.removed = dict((phase, []) for phase in PHASES)
    self.failed = dict((phase, []) for phase in PHASES)

  def addRemoved(self, kind, target):
    self.removed[kind].append(target)
    return OK(target)

  def addFailure(self, error):
    self.failed[error.kind].append(error)
    return OK(error)

  def failures(self):
    return [err for phase in PHASES for err in self.failed[phase]]

  def hasFailures(self):
    return len(self.failures()) > 0


def resolvePlan(selection, inventory):
  byIndex = dict((entry.index, entry) for entry in inventory)
  plan = RemovalPlan()
  for index in selection:
    entry = byIndex.get(index)
    if entry is None:
      return Fail(InventoryMismatchError(
        "Container [%d] is not in the container list. The list changed since it was read." % index))
    plan.addEntry(entry)
  return OK(plan)


def executePlan(plan, engine):
  report = RemovalReport()

  logger.info("\nRemoving selected containers...")
  for containerId, containerName in plan.containers:
    logger.info("Removing container: %s (ID: %s)" % (containerName, containerId))
    op = removeItem(report, CONTAINER, containerId, engine.removeContainer(containerId, force=True))
    if op.isFail():
      return op

  logger.info("\nRemoving associated images...")
  for image in plan.images:
    logger.info("Removing image: %s" % image)
    op = removeItem(report, IMAGE, image, engine.removeImage(image, force=True))
    if op.isFail():
      return op

  if plan.volumes:
    logger.info("\nRemoving associated volumes...")
    for volume in plan.volumes:
      logger.info("Removing volume: %s" % volume)
      op = removeItem(report, VOLUME, volume, engine.removeVolume(volume, force=False))
      if op.isFail():
        return op

  return OK(report)


def removeItem(report, kind, target, result):
  '''
  Record the outcome of one removal. Engine failures end up in the report
  as OK; only a user interrupt stays a Fail.
  '''
  def onFailure(err):
    if isinstance(err, UserInterruptError):
      return Fail(err)
    error = RemovalError(kind, target, errorMessage(err))
    logger.error("Error removing %s %s: %s" % (kind, target, error.errorLabel))
    return report.addFailure(error)

  return result \
    .then(report.addRemoved, kind, target) \
    .catch(onFailure)


def errorMessage(err):
  message = getattr(err, 'errorLabel', None) or str(err)
  return message.strip() or "unknown error"
