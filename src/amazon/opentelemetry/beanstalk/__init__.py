# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from amazon.opentelemetry.beanstalk._beanstalk_resource import build_resource, get
from amazon.opentelemetry.beanstalk.aws_beanstalk_resource_detector import AwsBeanstalkResourceDetector
from amazon.opentelemetry.beanstalk.version import __version__

__all__ = ["AwsBeanstalkResourceDetector", "build_resource", "get", "__version__"]
