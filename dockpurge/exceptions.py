
class DockpurgeError(Exception):
  '''
  Base class to all dockpurge exceptions
  '''
  errorLabel = ""
  def __init__(self, message=''):
    super(DockpurgeError, self).__init__(message)
    self.errorLabel = message

class ConfigFileNotFound(DockpurgeError):
  ''' Config file not found '''

class ConfigSyntaxError(DockpurgeError):
  ''' Config syntax error '''

class FileSystemError(DockpurgeError):
  ''' File system exception '''

class ShellCommandError(DockpurgeError):
  def __init__(self, code=None, message='', stdout='', stderr='', cmd=''):
    super(ShellCommandError, self).__init__(message)
    self.code = code
    self.stdout = stdout
    self.stderr = stderr
    self.cmd = cmd

class UserInterruptError(ShellCommandError):
  ''' Raised when the user interrupts a process or declines a prompt '''

class InvalidConfigError(DockpurgeError):
  '''
  Raised on an invalid configuration is found
  '''

class DockerError(ShellCommandError):
  '''
  Raised when a docker error is encountered
  '''

class SelectionError(DockpurgeError):
  ''' Base class for rejected container selections '''

class EmptySelectionError(SelectionError):
  ''' Nothing was entered; the caller cancels '''

class InvalidFormatError(SelectionError):
  ''' Selection contains something other than numbers and ranges '''

class InvalidRangeError(SelectionError):
  ''' Range start is greater than its end '''

class OutOfRangeError(SelectionError):
  ''' A selected number is not a listed container '''

class DuplicateSelectionError(SelectionError):
  ''' The same container was selected more than once '''

class InventoryMismatchError(DockpurgeError):
  '''
  Raised when a validated selection does not match the inventory it was
  validated against
  '''

class RemovalError(DockpurgeError):
  ''' A single container, image or volume could not be removed '''
  def __init__(self, kind, target, message=''):
    super(RemovalError, self).__init__(message)
    self.kind = kind
    self.target = target
