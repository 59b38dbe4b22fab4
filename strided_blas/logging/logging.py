import json
import logging
import logging.config
from logging.handlers import RotatingFileHandler
import pathlib
import datetime as dt
from typing import override, Any

PACKAGED_CONFIG = pathlib.Path(__file__).parent.resolve() / "config.json"
USER_CONFIG = pathlib.Path("logging_config.json")


def setup_logging(config_file: str | pathlib.Path | None = None) -> pathlib.Path:
    """
    Configures the strided_blas loggers from a dictConfig JSON file.
    Lookup order: `config_file`, 'logging_config.json' in the working
    directory, the config.json shipped next to this module.

    Returns the path that was loaded.
    """
    if config_file is not None:
        path = pathlib.Path(config_file)
    elif USER_CONFIG.is_file():
        path = USER_CONFIG
    else:
        path = PACKAGED_CONFIG
    with open(path) as f_in:
        logging.config.dictConfig(json.load(f_in))
    return path


class StridedBlasJSONFormatter(logging.Formatter):
    """
    JSON lines formatter
    Attributes:
        fmt_keys (dict): output key -> LogRecord attribute

    Records logged with ``extra={"stride": {...}}`` (failed validations
    carry view, n, inc, length and required) keep that dict under the
    "stride" key.
    """

    def __init__(
        self,
        *,
        fmt_keys: dict[str, str] | None = None,
    ) -> None:
        super().__init__()
        self.fmt_keys = fmt_keys if fmt_keys is not None else {}

    @override
    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(self._prepare_log_dict(record), default=str)

    def _prepare_log_dict(self, record: logging.LogRecord) -> dict:
        message: dict[str, Any] = {
            key: getattr(record, attr, None) for key, attr in self.fmt_keys.items()
        }
        message["message"] = record.getMessage()
        message["timestamp"] = dt.datetime.fromtimestamp(
            record.created, tz=dt.timezone.utc
        ).isoformat()

        stride = getattr(record, "stride", None)
        if stride is not None:
            message["stride"] = dict(stride)
        if record.exc_info is not None:
            message["exc_info"] = self.formatException(record.exc_info)
        return message


class RotatingFileHandlerWithDir(RotatingFileHandler):
    """
    RotatingFileHandler creating the parent directory of its log file
    """

    def __init__(self, filename: str, *args: Any, **kwargs: Any) -> None:
        pathlib.Path(filename).parent.mkdir(parents=True, exist_ok=True)
        super().__init__(filename, *args, **kwargs)
