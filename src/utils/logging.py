"""Shared logging configuration for the recommendation functions."""
import os
import sys
import json
import traceback
from functools import partial
from typing import Optional
from aws_lambda_powertools import Logger

SERVICE_NAME = os.environ.get('POWERTOOLS_SERVICE_NAME', 'wellness_recommendations')

def single_line_traceback(exc_info) -> Optional[str]:
    """Render exception info as one log line, frames joined with ' | '."""
    if exc_info is True:
        exc_info = sys.exc_info()

    if not (isinstance(exc_info, tuple) and len(exc_info) == 3) or exc_info[0] is None:
        return None

    try:
        lines = traceback.format_exception(*exc_info)
    except Exception as e:
        return f"Error formatting exception: {str(e)}"
    return ' | '.join(line.strip() for line in ''.join(lines).splitlines() if line.strip())

class SingleLineLogger(Logger):
    """Powertools logger that keeps tracebacks on the same CloudWatch line."""

    def exception(self, message, *args, **kwargs):
        extra = dict(kwargs.pop('extra', None) or {})
        extra['exception'] = single_line_traceback(kwargs.pop('exc_info', True))
        super().error(message, *args, exc_info=False, extra=extra, **kwargs)

logger = SingleLineLogger(
    service=SERVICE_NAME,
    level=os.environ.get('LOG_LEVEL', 'INFO'),
    log_uncaught_exceptions=True,
    json_serializer=partial(json.dumps, default=str),
    use_rfc3339=True
)

logger.append_keys(
    region=os.environ.get('AWS_REGION'),
    function=os.environ.get('AWS_LAMBDA_FUNCTION_NAME'),
    version=os.environ.get('AWS_LAMBDA_FUNCTION_VERSION')
)
