# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import os

# Written by the X-Ray integration when X-Ray is enabled on the Beanstalk environment, see
# https://docs.aws.amazon.com/xray/latest/devguide/xray-services-beanstalk.html
BEANSTALK_CONF_PATH: str = "/var/elasticbeanstalk/xray/environment.conf"
BEANSTALK_CONF_PATH_WINDOWS: str = "C:\\Program Files\\Amazon\\XRay\\environment.conf"


def get_beanstalk_config_path() -> str:
    """Where the Beanstalk environment config lives on the current platform"""
    if os.name == "nt":
        return BEANSTALK_CONF_PATH_WINDOWS
    return BEANSTALK_CONF_PATH
