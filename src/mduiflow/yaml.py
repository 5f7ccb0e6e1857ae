import logging
import os

from yaml import SafeLoader as _safe_loader
from yaml import YAMLError
from yaml import safe_load as load

from .exception import MDUIFlowConfigurationError


logger = logging.getLogger(__name__)

TAG_ENV = "!ENV"
TAG_ENVFILE = "!ENVFILE"


def _constructor_env_variables(loader, node):
    """
    Extracts the environment variable from the node's value.
    :param yaml.Loader loader: the yaml loader
    :param node: the current node in the yaml
    :return: value of the environment variable
    """
    raw_value = loader.construct_scalar(node)
    new_value = os.environ.get(raw_value)
    if new_value is None:
        msg = "Cannot construct value from {node}: {value}".format(
            node=node, value=new_value
        )
        raise YAMLError(msg)
    return new_value


def _constructor_envfile_variables(loader, node):
    """
    Reads the file pointed to by the environment variable in the node's value.
    :param yaml.Loader loader: the yaml loader
    :param node: the current node in the yaml
    :return: content of the file
    """
    raw_value = loader.construct_scalar(node)
    filepath = os.environ.get(raw_value)
    try:
        with open(filepath, "r") as fd:
            new_value = fd.read()
    except (TypeError, IOError) as e:
        msg = "Cannot construct value from {node}: {path}".format(
            node=node, path=filepath
        )
        raise YAMLError(msg) from e
    else:
        return new_value


_safe_loader.add_constructor(TAG_ENV, _constructor_env_variables)
_safe_loader.add_constructor(TAG_ENVFILE, _constructor_envfile_variables)


def load_file(path):
    """
    Load a yaml document from a file.

    :type path: str
    :rtype: Any
    :raise MDUIFlowConfigurationError: if the file can not be read or parsed
    """
    try:
        with open(os.path.abspath(path)) as f:
            return load(f.read())
    except YAMLError as exc:
        logger.error("Could not parse '{}' as YAML: {}".format(path, exc))
        if hasattr(exc, "problem_mark"):
            mark = exc.problem_mark
            logger.error("Error position: ({line}:{column})".format(line=mark.line + 1, column=mark.column + 1))
        raise MDUIFlowConfigurationError("Could not parse '{}' as YAML".format(path)) from exc
    except IOError as exc:
        logger.error("Could not open file: {}".format(exc))
        raise MDUIFlowConfigurationError("Could not open '{}'".format(path)) from exc
