import logging
import shlex
import subprocess
from subprocess import Popen
from dockpurge.monads import *
from dockpurge.exceptions import (ShellCommandError, UserInterruptError)

# pylint: disable=W0232

logger = logging.getLogger(__name__)

class Shell(object):

  @staticmethod
  def readInput(msg):
    logger.info(msg)
    try:
      return OK(input())
    except (KeyboardInterrupt, EOFError):
      return Fail(UserInterruptError(message="User interrupted."))

  @staticmethod
  def printConfirm(msg, assumeYes=False):
    if assumeYes:
      return OK(True)

    res = Shell.readInput(msg)
    if res.isFail():
      return res
    # Only a literal "y" proceeds; "Y" and "yes" cancel.
    if res.getOK().strip() == 'y':
      return OK(True)
    return Fail(UserInterruptError(message="User declined."))

  @staticmethod
  def procCommand(cmd):
    try:
      logger.debug("COMMAND: %s", cmd)
      proc = Popen(shlex.split(cmd), stdout=subprocess.PIPE, stderr=subprocess.PIPE,
                   universal_newlines=True)
      pout, perr = proc.communicate()
      if proc.returncode == 0:
        return OK({"code": proc.returncode, "stdout": pout, "stderr": perr})
      else:
        return Fail(ShellCommandError(code=proc.returncode, message=perr.strip() or pout.strip(),
                                      stdout=pout, stderr=perr, cmd=cmd))
    except OSError as err:
      return Fail(ShellCommandError(code=127, message="Error running '%s': %s" % (cmd, err.strerror), cmd=cmd))
    except KeyboardInterrupt:
      logger.info("CTRL-C Received...Exiting.")
      return Fail(UserInterruptError(message="User interrupted."))
