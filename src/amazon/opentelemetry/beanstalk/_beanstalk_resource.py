# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""Resource describing the service when running on AWS Elastic Beanstalk.

The Beanstalk X-Ray integration writes a small JSON document describing the current deployment, e.g.::

    {"deployment_id": "23", "version_label": "app-v3", "environment_name": "my-env"}

The document is read once per process and mapped onto service and cloud resource attributes.
"""
import json
import os
from logging import Logger, getLogger
from threading import Lock
from typing import Any, Dict, Optional

from amazon.opentelemetry.beanstalk._utils import get_beanstalk_config_path
from opentelemetry.sdk.resources import Resource
from opentelemetry.semconv.resource import CloudPlatformValues, CloudProviderValues, ResourceAttributes
from opentelemetry.semconv.schemas import Schemas

_logger: Logger = getLogger(__name__)

DEPLOYMENT_ID: str = "deployment_id"
VERSION_LABEL: str = "version_label"
ENVIRONMENT_NAME: str = "environment_name"

SCHEMA_URL: str = Schemas.V1_25_0.value

# Config keys we understand, everything else in the document is ignored
_BEANSTALK_FIELDS: Dict[str, str] = {
    DEPLOYMENT_ID: ResourceAttributes.SERVICE_INSTANCE_ID,
    VERSION_LABEL: ResourceAttributes.SERVICE_VERSION,
    ENVIRONMENT_NAME: ResourceAttributes.SERVICE_NAMESPACE,
}

# Whitespace allowed by JSON, unlike str.isspace() this excludes e.g. U+00A0
_JSON_WHITESPACE: str = " \t\r\n"

# First characters of the non-object JSON values
_JSON_VALUE_START: str = "[\"-0123456789tfn"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON number: {name}")


# Numbers keep their literal text, "1.10" must not become "1.1"
_DECODER = json.JSONDecoder(parse_float=str, parse_int=str, parse_constant=_reject_constant)

_resource: Optional[Resource] = None
_resource_lock: Lock = Lock()


def get() -> Resource:
    """Returns the Beanstalk resource for this process.

    The config file is parsed on the first call only. Later calls return the same Resource even if the file changes.
    """
    global _resource  # pylint: disable=global-statement
    if _resource is None:
        with _resource_lock:
            if _resource is None:
                _resource = build_resource(get_beanstalk_config_path())
    return _resource


def build_resource(config_path: str) -> Resource:
    """Builds a Resource from the Beanstalk config file found at config_path.

    Returns the empty Resource when the file is missing or cannot be parsed. A file whose top-level JSON value is
    not an object yields a Resource with no attributes that still carries the schema URL.
    """
    if not os.path.exists(config_path):
        return Resource.get_empty()

    attributes: Dict[str, str] = {}
    try:
        with open(config_path, encoding="utf-8-sig") as config_file:
            content = config_file.read()

        start = len(content) - len(content.lstrip(_JSON_WHITESPACE))
        if start < len(content) and content[start] not in "{" + _JSON_VALUE_START:
            raise ValueError(f"Unexpected character {content[start]!r} at position {start}")
        if not content.startswith("{", start):
            _logger.warning("Invalid Beanstalk config, expected a JSON object: %s", config_path)
            return Resource(attributes, SCHEMA_URL)

        # raw_decode stops at the end of the object and ignores anything after it
        config, _ = _DECODER.raw_decode(content, start)
    except (OSError, ValueError) as exc:
        _logger.warning("Could not parse Beanstalk config %s: %s", config_path, exc)
        return Resource.get_empty()

    for key, value in config.items():
        attribute_key = _BEANSTALK_FIELDS.get(key)
        if attribute_key is not None:
            attributes[attribute_key] = _to_attribute_value(value)

    attributes[ResourceAttributes.CLOUD_PROVIDER] = CloudProviderValues.AWS.value
    attributes[ResourceAttributes.CLOUD_PLATFORM] = CloudPlatformValues.AWS_ELASTIC_BEANSTALK.value

    return Resource(attributes, SCHEMA_URL)


def _to_attribute_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    # true/false/null and nested values are kept as their compact JSON text
    return json.dumps(value, separators=(",", ":"))
