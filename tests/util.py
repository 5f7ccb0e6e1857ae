"""
Contains help methods and classes to perform tests.
"""
from saml2.config import Config
from saml2.metadata import entity_descriptor


def create_metadata_from_config_dict(config):
    nspair = {"xs": "http://www.w3.org/2001/XMLSchema"}
    conf = Config().load(config)
    return entity_descriptor(conf).to_string(nspair).decode("utf-8")


class FakeServicesManager(object):
    """
    Services manager double that records the services it was asked about.
    """

    def __init__(self, registered_service=None):
        self.registered_service = registered_service
        self.lookups = []

    def find_service_by(self, service):
        self.lookups.append(service)
        return self.registered_service


class FakeMetadataUILocator(object):
    """
    Metadata UI locator double returning a fixed result.
    """

    def __init__(self, mdui=None):
        self.mdui = mdui
        self.calls = []

    def locate(self, entity_id, registered_service):
        self.calls.append((entity_id, registered_service))
        return self.mdui
