import logging
import os

import pytest
import yaml

from mduiflow.config import MDUIFlowConfig
from mduiflow.config import build_mdui_parser_action
from mduiflow.exception import MDUIFlowConfigurationError
from mduiflow.flow.mdui_parser import SamlMetadataUIParserAction


class TestMDUIFlowConfig:
    def test_read_config_from_dict(self, mduiflow_config_dict):
        config = MDUIFlowConfig(mduiflow_config_dict)
        assert config["ENTITY_ID_PARAMETER_NAME"] == "entityId"
        assert config["SERVICE_REGISTRY"] == mduiflow_config_dict["SERVICE_REGISTRY"]
        assert "METADATA" in config

    def test_read_config_from_yaml_file(self, mduiflow_config_dict, tmpdir):
        config_file = os.path.join(str(tmpdir), "mduiflow_config.yaml")
        with open(config_file, "w") as f:
            yaml.dump(mduiflow_config_dict, f)

        config = MDUIFlowConfig(config_file)
        assert config["SERVICE_REGISTRY"] == mduiflow_config_dict["SERVICE_REGISTRY"]

    def test_entity_id_parameter_name_defaults(self, mduiflow_config_dict):
        del mduiflow_config_dict["ENTITY_ID_PARAMETER_NAME"]
        config = MDUIFlowConfig(mduiflow_config_dict)
        assert config["ENTITY_ID_PARAMETER_NAME"] == "entityId"

    def test_entity_id_parameter_name_from_env_var(self, monkeypatch, mduiflow_config_dict):
        monkeypatch.setenv("MDUIFLOW_ENTITY_ID_PARAMETER_NAME", "providerId")
        config = MDUIFlowConfig(mduiflow_config_dict)
        assert config["ENTITY_ID_PARAMETER_NAME"] == "providerId"

    @pytest.mark.parametrize("missing_key", ["SERVICE_REGISTRY", "METADATA"])
    def test_missing_mandatory_key(self, mduiflow_config_dict, missing_key):
        del mduiflow_config_dict[missing_key]
        with pytest.raises(MDUIFlowConfigurationError):
            MDUIFlowConfig(mduiflow_config_dict)

    @pytest.mark.parametrize("config", [None, {}, 42])
    def test_unknown_format(self, config):
        with pytest.raises(MDUIFlowConfigurationError):
            MDUIFlowConfig(config)

    def test_unparsable_yaml_file(self, tmpdir):
        config_file = os.path.join(str(tmpdir), "broken.yaml")
        with open(config_file, "w") as f:
            f.write("SERVICE_REGISTRY: [\n")
        with pytest.raises(MDUIFlowConfigurationError):
            MDUIFlowConfig(config_file)

    def test_env_tag_in_yaml_file(self, monkeypatch, tmpdir):
        monkeypatch.setenv("SP_PARAM", "spId")
        config_file = os.path.join(str(tmpdir), "env.yaml")
        with open(config_file, "w") as f:
            f.write("ENTITY_ID_PARAMETER_NAME: !ENV SP_PARAM\nSERVICE_REGISTRY: []\nMETADATA: {}\n")

        config = MDUIFlowConfig(config_file)
        assert config["ENTITY_ID_PARAMETER_NAME"] == "spId"


class TestBuildMDUIParserAction:
    @pytest.fixture
    def mduiflow_logger(self):
        logger = logging.getLogger("mduiflow")
        level = logger.level
        yield logger
        logger.setLevel(level)

    def test_build_from_dict(self, mduiflow_config_dict):
        mduiflow_config_dict["ENTITY_ID_PARAMETER_NAME"] = "spEntityId"
        action = build_mdui_parser_action(mduiflow_config_dict)
        assert isinstance(action, SamlMetadataUIParserAction)
        assert action.entity_id_parameter_name == "spEntityId"
        assert len(action.services_manager) == 3

    def test_logging_config_is_applied(self, mduiflow_config_dict, mduiflow_logger):
        mduiflow_config_dict["LOGGING"] = {
            "version": 1,
            "disable_existing_loggers": False,
            "loggers": {"mduiflow": {"level": "DEBUG"}},
        }
        build_mdui_parser_action(MDUIFlowConfig(mduiflow_config_dict))
        assert mduiflow_logger.level == logging.DEBUG
