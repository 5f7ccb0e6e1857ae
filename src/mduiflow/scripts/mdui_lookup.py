import json
import sys

import click

from ..config import MDUIFlowConfig
from ..config import build_mdui_parser_action
from ..context import Context
from ..exception import UnauthorizedServiceError


def lookup_mdui(config, entity_id, context=None):
    """
    Runs the MDUI flow step for a single entity id.

    :type config: str | dict
    :type entity_id: str
    :type context: Optional[mduiflow.context.Context]
    :rtype: mduiflow.context.Context
    :raise UnauthorizedServiceError: if the entity is not allowed to log in
    """
    action = build_mdui_parser_action(MDUIFlowConfig(config))
    context = context or Context()
    context.request[action.entity_id_parameter_name] = entity_id
    action.process(context)
    return context


@click.command()
@click.argument("config")
@click.argument("entity_id")
def mdui_lookup(config, entity_id):
    """
    Show the MDUI the login page would get for ENTITY_ID.
    """
    context = Context()
    try:
        lookup_mdui(config, entity_id, context)
    except UnauthorizedServiceError as e:
        click.echo("{} ({})".format(e.message, e.code), err=True)
        redirect_url = context.get_decoration(Context.KEY_UNAUTHORIZED_REDIRECT_URL)
        if redirect_url:
            click.echo("Unauthorized redirect url: {}".format(redirect_url), err=True)
        sys.exit(1)

    mdui = context.get_decoration(Context.KEY_SERVICE_UI_METADATA)
    click.echo(json.dumps(mdui.to_dict() if mdui else None, indent=2))
