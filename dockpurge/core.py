import os
import copy
import logging
from dockpurge.monads import *
from dockpurge.exceptions import *
from dockpurge.utils import (readYAML, mergeDict, walkUpForFile)
from dockpurge.docker import (DockerEngine, DOCKER_CLIENT)
from dockpurge.inventory import buildInventory
from dockpurge.selection import parseSelection
from dockpurge.plan import (resolvePlan, executePlan)

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "dockpurge.yml"

ENV_CONFIG_FILE = "DOCKPURGE_CONF"
ENV_DOCKER_CLIENT = "DOCKPURGE_DOCKER"

DEFAULT_CONFIG = {
  'client': DOCKER_CLIENT,
  'table': {
    'format': 'plain',
    'width': 30,
  },
}

class Core(object):

  def __init__(self):
    self.configFile = None
    self.initialized = False
    self.config = copy.deepcopy(DEFAULT_CONFIG)
    self.engine = None

  def initialize(self):
    if self.initialized:
      return OK(None)
    return self.loadConfig() \
      .then(self.loadEnvironment) \
      .then(self.setupEngine) \
      .then(defer(self.setInitialized, b=True))

  def setInitialized(self, b):
    self.initialized = b

  def loadConfig(self):
    configFile = self.findConfigFile()
    if not configFile:
      logger.debug("No %s found, using defaults." % CONFIG_FILENAME)
      return OK(self)
    logger.debug("CONF %s" % configFile)
    return Try.attempt(readYAML, configFile) \
      .bind(self.validateConfig) \
      .bind(self.setConfig)

  def findConfigFile(self):
    if self.configFile:
      return self.configFile
    if os.environ.get(ENV_CONFIG_FILE):
      self.configFile = os.environ.get(ENV_CONFIG_FILE)
      return self.configFile
    self.configFile = walkUpForFile(os.getcwd(), CONFIG_FILENAME)
    return self.configFile

  def loadEnvironment(self):
    if os.environ.get(ENV_DOCKER_CLIENT):
      self.config['client'] = os.environ.get(ENV_DOCKER_CLIENT)
    return OK(self)

  def validateConfig(self, config):
    if config is None:
      return OK({})
    if not isinstance(config, dict):
      return Fail(InvalidConfigError("%s: expected a mapping of options." % self.configFile))

    for key, value in config.items():
      if key not in DEFAULT_CONFIG:
        return Fail(InvalidConfigError("%s: unknown option '%s'." % (self.configFile, key)))
      if key == 'client' and not (isinstance(value, str) and value.strip()):
        return Fail(InvalidConfigError("%s: 'client' must be the name of the engine client binary." % self.configFile))
      if key == 'table':
        if not isinstance(value, dict):
          return Fail(InvalidConfigError("%s: 'table' must be a mapping." % self.configFile))
        for tkey, tvalue in value.items():
          if tkey not in DEFAULT_CONFIG['table']:
            return Fail(InvalidConfigError("%s: unknown option 'table.%s'." % (self.configFile, tkey)))
          if tkey == 'width' and (isinstance(tvalue, bool) or not isinstance(tvalue, int) or tvalue < 0):
            return Fail(InvalidConfigError("%s: 'table.width' must be a positive number or 0." % self.configFile))
          if tkey == 'format' and not isinstance(tvalue, str):
            return Fail(InvalidConfigError("%s: 'table.format' must be a table format name." % self.configFile))
    return OK(config)

  def setConfig(self, config):
    mergeDict(self.config, config)
    return OK(self)

  def setupEngine(self):
    if self.engine is None:
      self.engine = DockerEngine(client=self.config['client'])
    return OK(self.engine)

  def getTableFormat(self):
    return self.config['table']['format']

  def getTableWidth(self):
    return self.config['table']['width']

  ### Commands ###

  def inventory(self):
    return buildInventory(self.engine)

  def select(self, rawInput, inventory):
    return parseSelection(rawInput, len(inventory))

  def plan(self, selection, inventory):
    return resolvePlan(selection, inventory)

  def purge(self, plan):
    logger.debug("PURGE %d container(s), %d image(s), %d volume(s)" % (
      len(plan.containers), len(plan.images), len(plan.volumes)))
    return executePlan(plan, self.engine)
