import json
from datetime import datetime

from pythonjsonlogger.jsonlogger import JsonFormatter
from sentry_sdk import get_current_span

LOG_FORMAT = (
    "%(message)s %(asctime)s %(name)s %(levelname)s %(lineno)s %(pathname)s "
    "%(funcName)s %(threadName)s"
)


class BaseLogger(JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super(BaseLogger, self).add_fields(log_record, record, message_dict)

        asctime = log_record.get("asctime")
        if asctime:
            asctime_format = "%Y-%m-%d %H:%M:%S,%f"
            log_record["utctime"] = datetime.strptime(
                asctime, asctime_format
            ).isoformat()

    def format_json_on_new_lines(self, json_str):
        data = json.loads(json_str)
        return json.dumps(data, indent=4, default=str)


class CustomLocalJsonFormatter(BaseLogger):
    """
    Readable output for local development: the level and message first, then
    whatever was passed in `extra` as indented json.
    """

    def jsonify_log_record(self, log_record):
        levelname = log_record.pop("levelname", "")
        message = log_record.pop("message", "")
        exc_info = log_record.pop("exc_info", "")
        content = super().jsonify_log_record(log_record)
        formatted = self.format_json_on_new_lines(content) if content else "{}"
        if exc_info:
            return f"{levelname}: {message} --- {formatted}\n{exc_info}"
        return f"{levelname}: {message} --- {formatted}"


class CustomDatadogJsonFormatter(BaseLogger):
    def add_fields(self, log_record, record, message_dict):
        super(CustomDatadogJsonFormatter, self).add_fields(
            log_record, record, message_dict
        )
        if not log_record.get("logger.name") and log_record.get("name"):
            log_record["logger.name"] = log_record.get("name")
        if not log_record.get("logger.thread_name") and log_record.get("threadName"):
            log_record["logger.thread_name"] = log_record.get("threadName")
        if log_record.get("level"):
            log_record["level"] = log_record["level"].upper()
        else:
            log_record["level"] = record.levelname

        span = get_current_span()
        if span and span.trace_id:
            log_record["sentry_trace_id"] = span.trace_id
