LOG_FMT = "[{id}] {message}"


def get_flow_id(context):
    flow_id = getattr(context, "flow_id", None) or "UNKNOWN"
    return flow_id


def mdui_logging(logger, level, message, context, **kwargs):
    """
    Adds the flow id of the current request to the message.

    :type logger: logging.Logger
    :type level: int
    :type message: str
    :type context: mduiflow.context.Context

    :param logger: Logger to use
    :param level: Logger level (ex: logging.DEBUG/logging.WARN/...)
    :param message: Message
    :param context: The current request context
    :param kwargs: set exc_info=True to get an exception stack trace in the log
    """
    flow_id = get_flow_id(context)
    logline = LOG_FMT.format(id=flow_id, message=message)
    logger.log(level, logline, **kwargs)
