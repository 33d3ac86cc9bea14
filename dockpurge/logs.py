import logging
import logging.config
from dockpurge.monads import OK

class StdoutFilter(logging.Filter):
  def __init__(self, level):
    self._level = level
    logging.Filter.__init__(self)
  def filter(self, rec):
    return rec.levelno < self._level

class LevelLogFormatter(logging.Formatter):
  def format(self, record):
    message = super(LevelLogFormatter, self).format(record)
    if record.levelno == logging.DEBUG:
      message = '[%s] %s' % (record.levelname, message)
    return message

LOG_SETTINGS = {
  'version': 1,
  'disable_existing_loggers': False,
  'loggers': {
    'dockpurge': {
      'level': 'INFO',
      'handlers': ['stdout', 'stderr'],
      'propagate': False
    }
  },
  'handlers': {
    'stdout': {
      'level': 'NOTSET',
      'formatter': 'levelformatter',
      'class': 'logging.StreamHandler',
      'stream': 'ext://sys.stdout',
      'filters': ['StdoutFilter'],
    },
    'stderr': {
      'level': 'WARNING',
      'formatter': 'levelformatter',
      'class': 'logging.StreamHandler',
      'stream': 'ext://sys.stderr'
    }
  },
  'filters': {
    'StdoutFilter': {
      '()': StdoutFilter,
      'level': logging.WARNING
    }
  },
  'formatters': {
    'levelformatter': {
      '()': LevelLogFormatter, 'format': '%(message)s' },
  }
}

logging.config.dictConfig(LOG_SETTINGS)

logger = logging.getLogger("dockpurge")


def enableDebug():
  logger.setLevel(logging.DEBUG)

def dinfo(msg, *args, **kwargs):
  return dlog(logging.INFO, msg, *args, **kwargs)

def dlog(level, msg, *args, **kwargs):
  if args:
    msg = msg % args
  def deferredLog(data=None, *args, **kwargs):
    logger.log(level, msg)
    return OK(data)
  return deferredLog
