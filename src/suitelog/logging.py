
import json
import logging
import re
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, Optional, Union
from zoneinfo import ZoneInfo
from rich.logging import RichHandler

if TYPE_CHECKING:
    from .config import AppConfig

NOTICE = 25
ALERT = 55
EMERGENCY = 60
logging.addLevelName(NOTICE, "NOTICE")
logging.addLevelName(ALERT, "ALERT")
logging.addLevelName(EMERGENCY, "EMERGENCY")

# RFC 5424 severity codes -> logging levels
SYSLOG_LEVELS = {
    100: logging.DEBUG,
    200: logging.INFO,
    250: NOTICE,
    300: logging.WARNING,
    400: logging.ERROR,
    500: logging.CRITICAL,
    550: ALERT,
    600: EMERGENCY,
}
LEVEL_NAMES = {logging.getLevelName(lvl): lvl for lvl in SYSLOG_LEVELS.values()}

def to_level(level: Union[str, int]) -> int:
    """Resolve a level name (any case) or an RFC 5424 code to a logging level."""
    if isinstance(level, int):
        if level in SYSLOG_LEVELS:
            return SYSLOG_LEVELS[level]
        if level in SYSLOG_LEVELS.values():
            return level
        raise ValueError(f"unknown log level: {level!r}")
    name = level.strip().upper()
    if name.isdigit():
        return to_level(int(name))
    if name not in LEVEL_NAMES:
        raise ValueError(f"unknown log level: {level!r}")
    return LEVEL_NAMES[name]

def interpolate(message: str, context: Dict[str, Any]) -> str:
    """Replace ``{key}`` placeholders with scalar context values."""
    for key, val in context.items():
        if isinstance(val, (str, int, float, bool)):
            message = message.replace("{" + key + "}", str(val))
    return message

class ContextFormatter(logging.Formatter):
    """Formatter aware of the ``context`` mapping the listener attaches to records.

    Expands ``{key}`` placeholders unless the record sets ``interpolate=False``,
    exposes ``%(context_json)s`` and stamps times in an explicit timezone.
    """
    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None, timezone: str = "UTC"):
        super().__init__(fmt, datefmt)
        self.tz = ZoneInfo(timezone)

    def formatTime(self, record, datefmt=None):
        dt = datetime.fromtimestamp(record.created, self.tz)
        return dt.strftime(datefmt) if datefmt else dt.isoformat(timespec="seconds")

    def formatMessage(self, record):
        ctx = getattr(record, "context", None) or {}
        if getattr(record, "interpolate", True):
            record.message = interpolate(record.message, ctx)
        record.context_json = json.dumps(ctx, default=str, sort_keys=True)
        return super().formatMessage(record)

Callback = Callable[[logging.LogRecord, int], bool]

class CallbackFilter(logging.Filter):
    """Pass a record only when every callback accepts it.

    Callbacks get ``(record, level)`` where ``level`` is the level of the
    handler being filtered.
    """
    def __init__(self, callbacks: Iterable[Callback], level: int = logging.NOTSET):
        super().__init__()
        self.callbacks = list(callbacks)
        self.level = level

    def filter(self, record):
        return all(cb(record, self.level) for cb in self.callbacks)

def notify_callback(pattern: str = r"^Results") -> Callback:
    """Records above the handler level, or at it when the message matches."""
    rx = re.compile(pattern)
    def _accept(record: logging.LogRecord, level: int) -> bool:
        if record.levelno < level:
            return False
        if record.levelno > level:
            return True
        return rx.search(record.getMessage()) is not None
    return _accept

FILE_FORMAT = "%(asctime)s %(name)s.%(levelname)s: %(message)s %(context_json)s"

def setup_logging(cfg: Optional["AppConfig"] = None, level: Optional[Union[str, int]] = None) -> logging.Logger:
    from .config import AppConfig
    cfg = cfg or AppConfig()
    logger = logging.getLogger(cfg.channel)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(to_level(level if level is not None else cfg.level))
    logger.propagate = False

    if cfg.console:
        console = RichHandler(rich_tracebacks=True)
        console.setFormatter(ContextFormatter("%(message)s", datefmt="[%X]", timezone=cfg.timezone))
        if cfg.console_filter:
            flt_level = to_level(cfg.console_filter.level)
            console.setLevel(flt_level)
            console.addFilter(CallbackFilter([notify_callback(cfg.console_filter.pattern)], flt_level))
        logger.addHandler(console)

    if cfg.file:
        if cfg.file.rotate:
            fh = TimedRotatingFileHandler(cfg.file.path, when="midnight", backupCount=cfg.file.backup_count,
                                          encoding="utf-8")
        else:
            fh = logging.FileHandler(cfg.file.path, encoding="utf-8")
        fh.setFormatter(ContextFormatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S%z", timezone=cfg.timezone))
        logger.addHandler(fh)
    return logger
