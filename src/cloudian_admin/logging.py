import logging
from typing import Any, Optional

PACKAGE_LOGGER = "cloudian_admin"

# extras set by client.request, Paginator.pages and log_event
LOG_EXTRA_FIELDS = (
    "operation",
    "key",
    "method",
    "url",
    "status",
    "duration_ms",
    "offset",
    "page_size",
)


class LogfmtFormatter(logging.Formatter):
    """logfmt lines for client events; missing extras are skipped."""

    def format(self, record: logging.LogRecord) -> str:
        kv = [
            f"level={record.levelname.lower()}",
            f"logger={record.name}",
            f"event={self._fmt_val(record.getMessage())}",
        ]
        kv.extend(
            f"{field}={self._fmt_val(getattr(record, field))}"
            for field in LOG_EXTRA_FIELDS
            if getattr(record, field, None) is not None
        )
        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            kv.append(f"exc_type={type(exc).__name__}")
            kv.append(f"exc={self._fmt_val(exc)}")
        return " ".join(kv)

    @staticmethod
    def _fmt_val(val: Any) -> str:
        if isinstance(val, (int, float, bool)):
            return str(val)
        s = str(val)
        if not s or any(c in s for c in ' ="'):
            s = '"' + s.replace('"', '\\"') + '"'
        return s


def setup_logging(
    level: str = "INFO", handler: Optional[logging.Handler] = None
) -> logging.Logger:
    """
    Attach a logfmt handler to the cloudian_admin logger and return it.
    The root logger is left to the host application.
    """
    log = logging.getLogger(PACKAGE_LOGGER)
    for h in list(log.handlers):
        log.removeHandler(h)

    handler = handler or logging.StreamHandler()
    handler.setFormatter(LogfmtFormatter())
    log.addHandler(handler)
    log.setLevel(getattr(logging, level.upper(), logging.INFO))
    return log


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS", "PACKAGE_LOGGER"]
