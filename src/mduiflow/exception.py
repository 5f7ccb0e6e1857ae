"""
Exceptions for MDUIFlow
"""


class MDUIFlowError(Exception):
    """
    Base MDUIFlow exception
    """
    pass


class MDUIFlowConfigurationError(MDUIFlowError):
    """
    MDUIFlow configuration error
    """
    pass


class UnauthorizedServiceError(MDUIFlowError):
    """
    Raised when a service provider is unknown to the service registry or its
    access strategy does not allow it to use the login flow.

    This is expected control flow for denied service providers; the enclosing
    flow routes it to the unauthorized-service view instead of the generic
    error page.
    """

    CODE_UNAUTHZ_SERVICE = "screen.service.error.message"

    def __init__(self, entity_id, code=CODE_UNAUTHZ_SERVICE, message=None):
        """
        :type entity_id: str
        :type code: str
        :type message: Optional[str]

        :param entity_id: the entity id of the denied service provider
        :param code: message code the view resolves to a localized text
        :param message: log friendly description
        """
        message = message or "Entity [{}] not recognized".format(entity_id)
        super().__init__(message)
        self.entity_id = entity_id
        self.code = code

    @property
    def message(self):
        """
        :rtype: str
        :return: Exception message
        """
        return self.args[0]
