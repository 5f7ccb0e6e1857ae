"""
This module contains methods to load, verify and build the configuration of the MDUI flow step.
"""
import logging
import logging.config
import os

from .exception import MDUIFlowConfigurationError
from .flow.mdui_parser import DEFAULT_ENTITY_ID_PARAMETER_NAME
from .flow.mdui_parser import SamlMetadataUIParserAction
from .mdui import MetadataUILocator
from .services import ServiceFactory
from .services import ServicesManager
from .yaml import load_file as yaml_load_file


logger = logging.getLogger(__name__)


class MDUIFlowConfig(object):
    """
    Configuration of the MDUI flow step. Verifies that the given config holds all the
    necessary parameters.
    """
    env_override_keys = ["ENTITY_ID_PARAMETER_NAME"]
    mandatory_dict_keys = ["SERVICE_REGISTRY", "METADATA"]

    def __init__(self, config):
        """
        Reads a given config and builds the MDUIFlowConfig.

        :type config: str | dict
        :rtype: mduiflow.config.MDUIFlowConfig

        :param config: Can be a file path or a dictionary
        """
        if isinstance(config, dict):
            self._config = dict(config)
        elif isinstance(config, str):
            self._config = yaml_load_file(config)
        else:
            self._config = None

        self._verify_dict(self._config)

        for key in MDUIFlowConfig.env_override_keys:
            val = os.environ.get("MDUIFLOW_{key}".format(key=key))
            if val:
                self._config[key] = val

        self._config.setdefault("ENTITY_ID_PARAMETER_NAME", DEFAULT_ENTITY_ID_PARAMETER_NAME)

    def _verify_dict(self, conf):
        """
        Check that the configuration contains all necessary keys.

        :type conf: dict
        :rtype: None
        :raise MDUIFlowConfigurationError: if the configuration is incorrect
        """
        if not conf or not isinstance(conf, dict):
            raise MDUIFlowConfigurationError("Missing configuration or unknown format")

        for key in MDUIFlowConfig.mandatory_dict_keys:
            if key not in conf:
                raise MDUIFlowConfigurationError("Missing key '%s' in config" % key)

    def __getitem__(self, item):
        return self._config[item]

    def __setitem__(self, key, value):
        self._config[key] = value

    def __contains__(self, key):
        return key in self._config

    def get(self, item, default=None):
        return self._config.get(item, default)


def build_mdui_parser_action(config):
    """
    Wires the collaborators of the MDUI flow step from configuration.

    :type config: mduiflow.config.MDUIFlowConfig | dict | str
    :rtype: mduiflow.flow.mdui_parser.SamlMetadataUIParserAction
    """
    if not isinstance(config, MDUIFlowConfig):
        config = MDUIFlowConfig(config)

    if config.get("LOGGING"):
        logging.config.dictConfig(config["LOGGING"])

    services_manager = ServicesManager.load(config["SERVICE_REGISTRY"])
    metadata_locator = MetadataUILocator.from_config(config["METADATA"], locale=config.get("LOCALE"))
    logger.info("MDUI flow step reading entity ids from parameter '{}'".format(config["ENTITY_ID_PARAMETER_NAME"]))
    return SamlMetadataUIParserAction(
        config["ENTITY_ID_PARAMETER_NAME"],
        metadata_locator,
        ServiceFactory(),
        services_manager,
    )
