"""
Locates the MDUI (metadata user interface) extension of a service provider
in SAML metadata.
"""
import logging

from saml2.config import Config
from saml2.extension.mdui import NAMESPACE as UI_NAMESPACE
from saml2.mdstore import MetadataStore


logger = logging.getLogger(__name__)

UI_INFO_EXTENSION = "{}&UIInfo".format(UI_NAMESPACE)


class SamlMetadataUIInfo(object):
    """
    MDUI data of a service provider.

    Every value prefers the entry for the requested locale, then the first
    entry found in metadata and finally the value held by the registered
    service itself.
    """

    def __init__(self, registered_service, ui_info=None, locale=None):
        """
        :type registered_service: mduiflow.services.RegisteredService
        :type ui_info: Optional[dict[str, Any]]
        :type locale: Optional[str]

        :param registered_service: the registered service the entity resolved to
        :param ui_info: the UIInfo element as returned by pysaml2's metadata store
        :param locale: preferred language
        """
        self.registered_service = registered_service
        self.ui_info = ui_info or {}
        self.locale = locale

    def _localized(self, values):
        if not values:
            return None
        if self.locale:
            for value in values:
                if value.get("lang") == self.locale:
                    return value
        return values[0]

    def _text(self, element, fallback_attr):
        value = self._localized(self.ui_info.get(element))
        if value and value.get("text"):
            return value["text"]
        return getattr(self.registered_service, fallback_attr, None)

    def _values(self, element):
        return [
            {"text": value.get("text"), "lang": value.get("lang")}
            for value in self.ui_info.get(element, [])
        ]

    @property
    def display_name(self):
        return self._text("display_name", "name")

    @property
    def description(self):
        return self._text("description", "description")

    @property
    def information_url(self):
        return self._text("information_url", "information_url")

    @property
    def privacy_statement_url(self):
        return self._text("privacy_statement_url", "privacy_url")

    @property
    def display_names(self):
        return self._values("display_name")

    @property
    def descriptions(self):
        return self._values("description")

    @property
    def logos(self):
        return [
            {
                "url": logo.get("text"),
                "width": logo.get("width"),
                "height": logo.get("height"),
                "lang": logo.get("lang"),
            }
            for logo in self.ui_info.get("logo", [])
        ]

    @property
    def logo_url(self):
        logo = self._localized(self.ui_info.get("logo"))
        if logo and logo.get("text"):
            return logo["text"]
        return getattr(self.registered_service, "logo", None)

    @property
    def logo_width(self):
        logo = self._localized(self.ui_info.get("logo"))
        return int(logo["width"]) if logo and logo.get("width") else None

    @property
    def logo_height(self):
        logo = self._localized(self.ui_info.get("logo"))
        return int(logo["height"]) if logo and logo.get("height") else None

    def to_dict(self):
        """
        Returns a dictionary representation suitable for rendering the login page.
        :rtype: dict[str, Any]
        """
        return {
            "display_name": self.display_name,
            "description": self.description,
            "information_url": self.information_url,
            "privacy_statement_url": self.privacy_statement_url,
            "logo_url": self.logo_url,
            "logo_width": self.logo_width,
            "logo_height": self.logo_height,
        }

    def __repr__(self):
        return "SamlMetadataUIInfo({!r})".format(self.to_dict())


class MetadataUILocator(object):
    """
    Looks up the UIInfo extension of service providers in a pysaml2 metadata store
    """

    def __init__(self, metadata_store, locale=None):
        """
        :type metadata_store: saml2.mdstore.MetadataStore
        :type locale: Optional[str]
        """
        self.metadata_store = metadata_store
        self.locale = locale

    def locate(self, entity_id, registered_service):
        """
        Locate the MDUI of the given entity.

        :type entity_id: str
        :type registered_service: mduiflow.services.RegisteredService
        :rtype: mduiflow.mdui.SamlMetadataUIInfo

        :param entity_id: entity id of the service provider
        :param registered_service: the registered service the entity resolved to
        :return: the MDUI, backed by the registered service where metadata has none
        """
        extensions = self.metadata_store.extension(entity_id, "spsso_descriptor", UI_INFO_EXTENSION)
        if not extensions:
            logger.debug("No MDUI found in metadata for entity id {}".format(entity_id))
            return SamlMetadataUIInfo(registered_service, locale=self.locale)

        logger.debug("Located MDUI for entity id {}".format(entity_id))
        return SamlMetadataUIInfo(registered_service, extensions[0], locale=self.locale)

    @classmethod
    def from_config(cls, metadata_conf, locale=None):
        """
        :type metadata_conf: dict[str, Any]
        :param metadata_conf: pysaml2 metadata configuration (local, inline, remote, mdq)
        """
        metadata_store = MetadataStore(None, Config())
        metadata_store.imp(metadata_conf)
        return cls(metadata_store, locale=locale)
