import logging
from dockpurge.monads import *
from dockpurge import (Command)
from dockpurge.logs import dinfo
from dockpurge.shell import Shell
from dockpurge.inventory import tabulateInventory
from dockpurge.exceptions import (EmptySelectionError, UserInterruptError)
from dockpurge.utils import shortId

logger = logging.getLogger(__name__)

SELECTION_PROMPT = "\nEnter the numbers of containers to remove (comma-separated, e.g., 1,3,5,7-10,13) or press Enter to cancel"
CONFIRM_PROMPT = "\nDo you want to proceed with removal? (y/n)"

class Select(Command):

  def getShellOptions(self, optparser):
    return optparser

  def getUsage(self):
    return "dockpurge select"

  def getHelpTitle(self):
    return "Pick containers from a list and remove them with their images and volumes"

  def main(self):
    inventory = self.core.inventory()
    if inventory.isFail():
      return inventory.catch(self.exitError)

    if not inventory.getOK():
      logger.info("No containers found.")
      return OK(None)

    return self.removeFrom(inventory.getOK())

  def removeFrom(self, inventory):
    self.showInventory(inventory)
    return self.readSelection(inventory) \
      .bind(self.core.plan, inventory) \
      .bind(self.confirmPlan) \
      .bind(self.core.purge) \
      .bind(self.showCompletion) \
      .bind(dinfo("\nOperation completed.")) \
      .catchError(UserInterruptError, dinfo("Operation cancelled.")) \
      .catch(self.exitError)

  def readSelection(self, inventory):
    while True:
      answer = Shell.readInput(SELECTION_PROMPT)
      if answer.isFail():
        return answer

      selection = self.core.select(answer.getOK(), inventory)
      if selection.isOK():
        return selection

      err = selection.getFail()
      if isinstance(err, EmptySelectionError):
        return Fail(UserInterruptError(message=err.errorLabel))
      logger.error(err.errorLabel)

  def confirmPlan(self, plan):
    self.showPlan(plan)
    return Shell.printConfirm(CONFIRM_PROMPT, assumeYes=self.assumeYes) \
      .then(lambda: OK(plan))

  def showInventory(self, inventory):
    table = tabulateInventory(inventory,
      tablefmt=self.core.getTableFormat(),
      width=self.core.getTableWidth())
    logger.info("\nList of Docker containers:\n")
    logger.info(table)

  def showPlan(self, plan):
    logger.info("\nThe following items will be removed:")

    logger.info("\nContainers:")
    for containerId, containerName in plan.containers:
      logger.info("- %s (ID: %s)" % (containerName, shortId(containerId)))

    if plan.images:
      logger.info("\nAssociated Images:")
      for image in plan.images:
        logger.info("- %s" % image)

    if plan.volumes:
      logger.info("\nAssociated Volumes:")
      for volume in plan.volumes:
        logger.info("- %s" % volume)

  def showCompletion(self, report):
    failures = report.failures()
    if failures:
      logger.warning("\n%d item(s) could not be removed." % len(failures))
    return OK(report)
