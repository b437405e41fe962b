# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from amazon.opentelemetry.beanstalk import _beanstalk_resource
from opentelemetry.sdk.resources import Resource, ResourceDetector


class AwsBeanstalkResourceDetector(ResourceDetector):
    """Detects attribute values only available when the app is running on AWS Elastic Beanstalk.

    Requires X-Ray to be enabled on the Beanstalk environment. Registered as the ``aws_beanstalk`` resource detector,
    so it can be enabled with OTEL_EXPERIMENTAL_RESOURCE_DETECTORS or passed to get_aggregated_resources directly.

    The config file is read once per process, every detector instance returns the same Resource.
    """

    def detect(self) -> Resource:
        return _beanstalk_resource.get()
