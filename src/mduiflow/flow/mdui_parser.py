import logging

from mduiflow.context import Context
from mduiflow.exception import UnauthorizedServiceError
from mduiflow.logging_util import mdui_logging

from .base import FlowAction


logger = logging.getLogger(__name__)

DEFAULT_ENTITY_ID_PARAMETER_NAME = "entityId"


class SamlMetadataUIParserAction(FlowAction):
    """
    Puts the MDUI of the requesting SAML service provider into the flow state.

    The entity id is read from the request parameter `entity_id_parameter_name`.
    Service providers that are unknown to the service registry, or whose access
    strategy denies access, are rejected with an UnauthorizedServiceError.
    Requests without an entity id pass through untouched.

    Best run right before the login page renders, so that the page can show
    the name and logo of the service provider.
    """

    def __init__(self, entity_id_parameter_name, metadata_locator, service_factory, services_manager,
                 name="mdui_parser"):
        """
        :type entity_id_parameter_name: str
        :type metadata_locator: mduiflow.mdui.MetadataUILocator
        :type service_factory: mduiflow.services.ServiceFactory
        :type services_manager: mduiflow.services.ServicesManager
        """
        super().__init__(name)
        self.entity_id_parameter_name = entity_id_parameter_name
        self.metadata_locator = metadata_locator
        self.service_factory = service_factory
        self.services_manager = services_manager

    def process(self, context):
        entity_id = (context.get_parameter(self.entity_id_parameter_name) or "").strip()
        if not entity_id:
            msg = "No entity id found for parameter [{}]".format(self.entity_id_parameter_name)
            mdui_logging(logger, logging.DEBUG, msg, context)
            return super().process(context)

        service = self.service_factory.create_service(entity_id)
        registered_service = self.services_manager.find_service_by(service)
        if registered_service is None or not registered_service.access_strategy.is_service_access_allowed():
            msg = "Entity id [{}] is not recognized/allowed by the service registry".format(entity_id)
            mdui_logging(logger, logging.DEBUG, msg, context)

            if registered_service is not None:
                context.decorate(
                    Context.KEY_UNAUTHORIZED_REDIRECT_URL,
                    registered_service.access_strategy.unauthorized_redirect_url,
                )
            raise UnauthorizedServiceError(entity_id)

        mdui = self.metadata_locator.locate(entity_id, registered_service)
        context.decorate(Context.KEY_SERVICE_UI_METADATA, mdui)
        return super().process(context)
