# -*- coding: utf-8 -*-
"""
    mduiflow
    ~~~~~~~~~~~~~~~~

    Login flow step that authorizes a SAML service provider against a
    service registry and exposes its MDUI (display name, logo, description)
    to the login page.

    :license: APACHE 2.0, see LICENSE for more details.
"""
try:
    from importlib.metadata import version as _resolve_package_version
except ImportError:
    from importlib_metadata import version as _resolve_package_version  # type: ignore[no-redef]


def _parse_version():
    value = _resolve_package_version("mduiflow")
    return value


version = _parse_version()
