import pytest

saml2 = pytest.importorskip('saml2')
from saml2 import BINDING_HTTP_POST

from mduiflow.context import Context
from .util import create_metadata_from_config_dict

SP_ENTITY_ID = "https://sp.example"
NO_MDUI_SP_ENTITY_ID = "https://plain.example"


@pytest.fixture
def context():
    return Context()


def _sp_conf(entity_id, ui_info=None):
    spconfig = {
        "entityid": entity_id,
        "service": {
            "sp": {
                "endpoints": {
                    "assertion_consumer_service": [
                        ("%s/acs/post" % entity_id, BINDING_HTTP_POST)
                    ],
                },
                "want_response_signed": False,
            },
        },
        "metadata": {"inline": []},
    }
    if ui_info is not None:
        spconfig["service"]["sp"]["ui_info"] = ui_info
    return spconfig


@pytest.fixture
def sp_ui_info():
    return {
        "display_name": [
            {"text": "Example SP", "lang": "en"},
            {"text": "Exempel-SP", "lang": "sv"},
        ],
        "description": [{"text": "Service provider used in unit tests.", "lang": "en"}],
        "information_url": [{"text": "https://sp.example/info", "lang": "en"}],
        "privacy_statement_url": [{"text": "https://sp.example/privacy", "lang": "en"}],
        "logo": [{"text": "https://sp.example/logo.png", "width": "120", "height": "60", "lang": "en"}],
    }


@pytest.fixture
def sp_conf(sp_ui_info):
    return _sp_conf(SP_ENTITY_ID, sp_ui_info)


@pytest.fixture
def sp_metadata_str(sp_conf):
    return create_metadata_from_config_dict(sp_conf)


@pytest.fixture
def sp_without_mdui_metadata_str():
    return create_metadata_from_config_dict(_sp_conf(NO_MDUI_SP_ENTITY_ID))


@pytest.fixture
def metadata_conf(sp_metadata_str, sp_without_mdui_metadata_str):
    return {"inline": [sp_metadata_str, sp_without_mdui_metadata_str]}


@pytest.fixture
def service_registry():
    return [
        {
            "service_id": "^https://sp\\.example(/.*)?$",
            "name": "Example SP from registry",
            "id": 1,
            "evaluation_order": 10,
        },
        {
            "service_id": "^https://plain\\.example(/.*)?$",
            "name": "Plain SP",
            "description": "SP without MDUI in its metadata",
            "logo": "https://plain.example/logo.png",
            "id": 2,
            "evaluation_order": 20,
        },
        {
            "service_id": "^https://denied\\.example(/.*)?$",
            "name": "Denied SP",
            "id": 3,
            "evaluation_order": 30,
            "access_strategy": {
                "enabled": False,
                "unauthorized_redirect_url": "https://denied.example/denied",
            },
        },
    ]


@pytest.fixture
def mduiflow_config_dict(service_registry, metadata_conf):
    return {
        "ENTITY_ID_PARAMETER_NAME": "entityId",
        "SERVICE_REGISTRY": service_registry,
        "METADATA": metadata_conf,
    }
