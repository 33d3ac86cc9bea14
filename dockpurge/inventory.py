import logging
import tabulate

from dockpurge.monads import *
from dockpurge.utils import (truncate, shortId)

logger = logging.getLogger(__name__)

INVENTORY_HEADERS = ["#", "CONTAINER NAME", "CONTAINER ID", "IMAGE", "STATUS", "VOLUMES"]


class InventoryEntry(object):
  '''
  One listed container. Indices start at 1 and follow the engine listing
  order of the current run.
  '''
  __slots__ = ('index', 'containerId', 'containerName', 'image', 'status', 'volumes')

  def __init__(self, index, containerId, containerName, image, status="", volumes=()):
    object.__setattr__(self, 'index', index)
    object.__setattr__(self, 'containerId', containerId)
    object.__setattr__(self, 'containerName', containerName)
    object.__setattr__(self, 'image', image)
    object.__setattr__(self, 'status', status)
    object.__setattr__(self, 'volumes', tuple(volumes))

  def __setattr__(self, name, value):
    raise AttributeError("InventoryEntry is read-only")

  def __repr__(self):
    return "InventoryEntry(%d, %s)" % (self.index, self.containerName)

  @staticmethod
  def fromListing(index, container, mounts):
    return InventoryEntry(
      index,
      container['id'],
      container['name'],
      container['image'],
      container.get('status', ''),
      volumeNames(mounts))

  def getCol(self, field, width=None):
    v = getattr(self, field, None)
    if field == 'containerId':
      v = shortId(v)
    elif field == 'volumes':
      v = ','.join(v) if v else None
    return truncate(v, width) if v else "-"


def volumeNames(mounts):
  names = []
  for mount in mounts:
    if mount.get('type') != 'volume' or not mount.get('name'):
      continue
    if mount['name'] not in names:
      names.append(mount['name'])
  return names


def buildInventory(engine):
  listing = engine.listContainers()
  if listing.isFail():
    return listing

  inventory = []
  for index, container in enumerate(listing.getOK(), 1):
    mounts = engine.inspectMounts(container['id'])
    if mounts.isFail():
      logger.warning("Could not read volumes of '%s': %s" % (container['name'], mounts.getFail()))
      mounts = OK([])
    inventory.append(InventoryEntry.fromListing(index, container, mounts.getOK()))
  return OK(inventory)


def tabulateInventory(inventory, tablefmt="plain", width=None):
  table = []
  for entry in inventory:
    table.append([
      "[%d]" % entry.index,
      entry.getCol('containerName', width),
      entry.getCol('containerId'),
      entry.getCol('image', width),
      entry.getCol('status', width),
      entry.getCol('volumes', width),
    ])
  return tabulate.tabulate(table, headers=INVENTORY_HEADERS, tablefmt=tablefmt, disable_numparse=True)
