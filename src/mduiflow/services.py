"""
Service registry: resolves requesting applications to registered services.
"""
import logging
import re

from .exception import MDUIFlowConfigurationError
from .yaml import load_file as yaml_load_file


logger = logging.getLogger(__name__)


class Service(object):
    """
    The application a login request is made on behalf of
    """

    def __init__(self, service_id):
        self.id = service_id

    def __eq__(self, other):
        return isinstance(other, Service) and self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __repr__(self):
        return "Service({!r})".format(self.id)


class ServiceFactory(object):
    """
    Creates service objects out of raw service identifiers
    """

    def create_service(self, service_id):
        """
        Never fails; an identifier that no registered service matches simply
        yields a service the services manager will not find.

        :type service_id: str
        :rtype: mduiflow.services.Service
        """
        return Service((service_id or "").strip())


class AccessStrategy(object):
    """
    Decides whether a registered service may use the login flow
    """

    def __init__(self, enabled=True, unauthorized_redirect_url=None):
        self.enabled = enabled
        self.unauthorized_redirect_url = unauthorized_redirect_url

    def is_service_access_allowed(self):
        return self.enabled

    @classmethod
    def from_dict(cls, data):
        data = data or {}
        return cls(
            enabled=data.get("enabled", True),
            unauthorized_redirect_url=data.get("unauthorized_redirect_url"),
        )


class RegisteredService(object):
    """
    A service registry entry. `service_id` is a regular expression that has to
    match the whole service identifier.
    """

    def __init__(self, service_id, name=None, id=None, description=None, logo=None,
                 information_url=None, privacy_url=None, evaluation_order=0, access_strategy=None):
        try:
            self._pattern = re.compile(service_id)
        except (re.error, TypeError) as e:
            raise MDUIFlowConfigurationError(
                "Invalid service_id pattern {!r}: {}".format(service_id, e)
            ) from e
        self.service_id = service_id
        self.name = name
        self.id = id
        self.description = description
        self.logo = logo
        self.information_url = information_url
        self.privacy_url = privacy_url
        self.evaluation_order = evaluation_order
        self.access_strategy = access_strategy or AccessStrategy()

    def matches(self, service):
        """
        :type service: mduiflow.services.Service
        :rtype: bool
        """
        return service is not None and self._pattern.fullmatch(service.id) is not None

    @classmethod
    def from_dict(cls, data):
        """
        :type data: dict[str, Any]
        :rtype: mduiflow.services.RegisteredService
        """
        if not isinstance(data, dict) or "service_id" not in data:
            raise MDUIFlowConfigurationError("Registered service must be a mapping with a 'service_id': {!r}".format(data))

        return cls(
            data["service_id"],
            name=data.get("name"),
            id=data.get("id"),
            description=data.get("description"),
            logo=data.get("logo"),
            information_url=data.get("information_url"),
            privacy_url=data.get("privacy_url"),
            evaluation_order=data.get("evaluation_order", 0),
            access_strategy=AccessStrategy.from_dict(data.get("access_strategy")),
        )

    def __repr__(self):
        return "RegisteredService(service_id={!r}, name={!r})".format(self.service_id, self.name)


class ServicesManager(object):
    """
    In-memory service registry
    """

    def __init__(self, services=None):
        """
        :type services: Optional[list[mduiflow.services.RegisteredService]]
        """
        indexed = enumerate(services or [])
        ordered = sorted(indexed, key=lambda item: (item[1].evaluation_order, item[0]))
        self._services = [service for _, service in ordered]

    def find_service_by(self, service):
        """
        Find the registered service matching the given service.

        :type service: mduiflow.services.Service
        :rtype: Optional[mduiflow.services.RegisteredService]
        """
        for registered_service in self._services:
            if registered_service.matches(service):
                return registered_service

        logger.debug("No registered service matches {}".format(service))
        return None

    def __len__(self):
        return len(self._services)

    @classmethod
    def load(cls, config):
        """
        Build a services manager from a list of service definitions or a path
        to a yaml file holding such a list.

        :type config: str | list[dict[str, Any]]
        :rtype: mduiflow.services.ServicesManager
        """
        if isinstance(config, str):
            config = yaml_load_file(config)
        if config is None:
            config = []
        if not isinstance(config, list):
            raise MDUIFlowConfigurationError("Service registry must be a list of services")

        services = [RegisteredService.from_dict(data) for data in config]
        logger.info("Loaded {} registered services".format(len(services)))
        return cls(services)
