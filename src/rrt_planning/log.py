import logging
import sys

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARN,
    "err": logging.ERROR,
    "crit": logging.CRITICAL
}


class Logger():
    """
    Small logging facade used by the planners. Messages are routed to every configured handler:
    'stdout' prints the message, 'logging' forwards it to a standard library logger named
    'rrt_planning.<name>'.

    Args:
        name (str): Name of the component doing the logging.
        handlers (list): Any of 'stdout' or 'logging'.
        level (str): One of 'debug', 'info', 'warn', 'err' or 'crit'.
    """

    def __init__(self, name="rrt_planning", handlers=None, level='info'):
        self.handlers = list(handlers) if handlers is not None else ['logging']
        for handler in self.handlers:
            if handler not in ['stdout', 'logging']:
                raise ValueError("Handlers must be one of 'stdout' or 'logging'")
        if level not in LEVELS:
            raise ValueError("{} is not a valid log level. Must be one of {}".format(level, list(LEVELS.keys())))
        self.level = level
        self.name = name
        self.logger = logging.getLogger("rrt_planning.{}".format(name))
        # the stdlib logger is shared per name, so each instance filters on its own level in _emit
        self.logger.setLevel(logging.DEBUG)
        if 'logging' in self.handlers and not self.logger.handlers:
            formatter = logging.Formatter('[%(asctime)s - %(name)s - %(levelname)s] - %(message)s')
            handler = logging.StreamHandler(stream=sys.stdout)
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def add_handler(self, handle):
        if handle not in ['stdout', 'logging']:
            raise ValueError("Handlers must be one of 'stdout' or 'logging'")
        self.handlers.append(handle)

    def _emit(self, level, msg):
        if LEVELS[level] < LEVELS[self.level]:
            return
        if 'stdout' in self.handlers:
            print(msg)
        if 'logging' in self.handlers:
            self.logger.log(LEVELS[level], msg)

    def debug(self, msg):
        self._emit('debug', msg)

    def info(self, msg):
        self._emit('info', msg)

    def warn(self, msg):
        self._emit('warn', msg)

    def err(self, msg):
        self._emit('err', msg)

    def crit(self, msg):
        self._emit('crit', msg)
