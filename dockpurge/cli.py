import os
import sys
import logging
from dockpurge import (Program, Core)
from dockpurge.exceptions import ConfigFileNotFound
from dockpurge.utils import getPackageVersion

logger = logging.getLogger(__name__)

class DockpurgeCLI(Program):
  """Dockpurge CLI command"""

  def __init__(self):
    super(DockpurgeCLI, self).__init__()
    self.name = 'dockpurge'
    self.defaultCommand = 'select'

  def setupCommands(self):
    self.addCommand('help', 'dockpurge.command.help')
    self.addCommand('select', 'dockpurge.command.select')
    self.addCommand('remove', 'dockpurge.command.remove')
    self.addCommand('list', 'dockpurge.command.list')
    return self

  def getShellOptions(self, optparser):
    optparser.add_option("-f", dest="configFile", help="Override default config file")
    optparser.add_option("-d", dest="debug", help="Activate debugging output", default=False, action="store_true")
    optparser.add_option("-y", dest="assumeYes", help="Skip the removal confirmation and proceed", default=False, action="store_true")
    return optparser

  def getUsage(self):
    return "dockpurge [options] [COMMAND] [command-options]"

  def getHelpTitle(self):
    version = getPackageVersion()
    return "Selective removal of containers, their images and volumes (version: %s)" % version

  def initCommand(self, command):
    core = Core()
    if self.getOption('assumeYes'):
      command.assumeYes = True

    configFile = self.getOption('configFile')
    if configFile:
      if not os.path.isfile(configFile):
        self.exitError(ConfigFileNotFound("Could not locate config file: %s" % configFile))
      logger.debug("CONF %s" % configFile)
      core.configFile = configFile

    if command.autoInitCore:
      core.initialize().catch(self.exitError)

    command.core = core
    return command

def cli():
  args = sys.argv[1:]

  prog = DockpurgeCLI()
  prog.execute(args)
