import logging
from dockpurge.monads import *
from dockpurge import (Command)
from dockpurge.inventory import tabulateInventory

logger = logging.getLogger(__name__)

class List(Command):

  def getShellOptions(self, optparser):
    return optparser

  def getUsage(self):
    return "dockpurge list"

  def getHelpTitle(self):
    return "Output the numbered container table"

  def main(self):
    return self.core.inventory() \
      .bind(self.tabulate) \
      .catch(self.exitError) \
      .bind(logger.info)

  def tabulate(self, inventory):
    if not inventory:
      return OK("No containers found.")
    return OK(tabulateInventory(inventory,
      tablefmt=self.core.getTableFormat(),
      width=self.core.getTableWidth()))
