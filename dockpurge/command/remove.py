from dockpurge.command.select import Select

class Remove(Select):

  def getUsage(self):
    return "dockpurge remove [options] SELECTION"

  def getHelpTitle(self):
    return "Remove the numbered containers (as shown by 'list') with their images and volumes"

  def main(self):
    if not len(self.args) > 0:
      return self.exitWithHelp("Please provide a selection, e.g. 1,3,5,7-10.")
    return super(Remove, self).main()

  def readSelection(self, inventory):
    return self.core.select(' '.join(self.args), inventory)
