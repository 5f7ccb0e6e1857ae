from typing import Any, Optional
from uuid import uuid4


class Context(object):
    """
    Holds the request parameters and the flow state of the current request
    """

    KEY_UNAUTHORIZED_REDIRECT_URL = "unauthorizedRedirectUrl"
    KEY_SERVICE_UI_METADATA = "serviceUserInterfaceMetadata"

    def __init__(self, request: Optional[dict[str, Any]] = None) -> None:
        self.request: dict[str, Any] = request if request is not None else {}
        self.flow_id: str = uuid4().urn
        # Flow scoped data shared between the steps of the login flow.
        self.internal_data: dict[str, Any] = {}

    def get_parameter(self, name: str) -> Optional[str]:
        """
        Read a request parameter

        :param name: name of the query or form parameter
        :return: the parameter value, or None if it was not sent as a string
        """
        value = self.request.get(name)
        if isinstance(value, list):
            value = value[0] if value else None
        if not isinstance(value, str):
            return None
        return value

    def decorate(self, key: str, value: Any) -> "Context":
        """
        Add information to the flow state
        """
        self.internal_data[key] = value
        return self

    def get_decoration(self, key: str) -> Any:
        """
        Retrieve information from the flow state
        """

        value = self.internal_data.get(key)
        return value
