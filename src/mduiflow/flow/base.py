"""
Flow actions for the login flow
"""
from typing import Any, Callable, Optional

import mduiflow.context


class FlowOutcome(object):
    """
    Signal returned to the enclosing flow by an action
    """

    def __init__(self, event_id: str):
        self.event_id = event_id

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, FlowOutcome) and self.event_id == other.event_id

    def __hash__(self) -> int:
        return hash(self.event_id)

    def __repr__(self) -> str:
        return "FlowOutcome({!r})".format(self.event_id)


CONTINUE = FlowOutcome("success")

FlowActionCallSignature = Callable[[mduiflow.context.Context], FlowOutcome]


class FlowAction(object):
    """
    Abstract class for flow actions
    """

    def __init__(self, name: str):
        self.name = name
        self.next: Optional[FlowActionCallSignature] = None

    def process(self, context: mduiflow.context.Context) -> FlowOutcome:
        """
        This is where the action should do its work.
        Subclasses must call this method to let the flow continue.

        :param context: The current context
        :return: the outcome of the next chained action, or CONTINUE
        """
        if self.next is None:
            return CONTINUE
        return self.next(context)
