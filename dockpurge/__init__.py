import sys
import logging
import importlib
from optparse import OptionParser

import dockpurge.logs
from dockpurge.logs import enableDebug
from dockpurge.monads import *
from dockpurge.core import Core

logger = logging.getLogger(__name__)


class Command(object):
  """Base class of every CLI command"""

  def __init__(self):
    self.name = None
    self.parent = None
    self.core = None
    self.options = None
    self.args = []
    self.commands = {}
    self.optparser = None
    self.autoInitCore = True
    self.assumeYes = False

  def initialize(self):
    if self.optparser is None:
      parser = self.getParserClass()(usage=self.getUsage(), add_help_option=False)
      parser.add_option("-h", "--help", dest="help", help="Show this help", default=False, action="store_true")
      self.optparser = self.getShellOptions(parser)
      self.setupCommands()
    return self

  def getParserClass(self):
    return OptionParser

  def getShellOptions(self, optparser):
    return optparser

  def getUsage(self):
    return ""

  def getHelpTitle(self):
    return ""

  def setupCommands(self):
    return self

  def addCommand(self, name, module):
    self.commands[name] = module
    return self

  def loadCommand(self, name):
    module = importlib.import_module(self.commands[name])
    command = getattr(module, name.capitalize())()
    command.name = name
    command.parent = self
    return command

  def getCommand(self, name):
    if name not in self.commands:
      return self.exitWithHelp("Unknown command: %s" % name)
    return self.loadCommand(name)

  def parseArgs(self, args):
    (self.options, self.args) = self.optparser.parse_args(args)
    return self

  def getOption(self, name):
    return getattr(self.options, name, None)

  def execute(self, args):
    self.initialize()
    self.parseArgs(args)
    if self.getOption('help'):
      return self.exitHelp()
    return self.main()

  def main(self):
    return OK(None)

  def getHelp(self):
    lines = []
    if self.getHelpTitle():
      lines += [self.getHelpTitle(), ""]
    lines.append(self.optparser.format_help().rstrip())
    if self.commands:
      lines += ["", "Commands:"]
      for name in sorted(self.commands):
        lines.append("  %-10s %s" % (name, self.loadCommand(name).getHelpTitle()))
    return "\n".join(lines)

  def exitHelp(self):
    logger.info(self.getHelp())
    sys.exit(0)

  def exitWithHelp(self, msg):
    logger.info(self.getHelp())
    logger.info("")
    logger.error(msg)
    sys.exit(1)

  def exitError(self, err):
    label = getattr(err, 'errorLabel', None) or str(err)
    logger.error("Error: %s" % label)
    sys.exit(1)


class Program(Command):
  """Top level command dispatching to sub commands"""

  def __init__(self):
    super(Program, self).__init__()
    self.defaultCommand = None

  def initialize(self):
    super(Program, self).initialize()
    self.optparser.disable_interspersed_args()
    return self

  def initCommand(self, command):
    return command

  def execute(self, args):
    self.initialize()
    self.parseArgs(args)

    if self.getOption('debug'):
      enableDebug()
    if self.getOption('help'):
      return self.exitHelp()

    if self.args:
      name, commandArgs = self.args[0], self.args[1:]
    elif self.defaultCommand:
      name, commandArgs = self.defaultCommand, []
    else:
      return self.exitWithHelp("Please provide a command.")

    command = self.getCommand(name)
    command.initialize()
    self.initCommand(command)
    return command.execute(commandArgs)
