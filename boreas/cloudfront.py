"""This module is a little wrapper around boto3 CloudFront API, exposing only
the calls needed to find distributions and invalidate their caches.
"""

import boto3
import mypy_boto3_cloudfront
from mypy_boto3_cloudfront.type_defs import DistributionSummaryTypeDef, InvalidationBatchTypeDef
from typing import Iterator, List, Protocol


class CloudFrontAPI(Protocol):
    """The subset of the CloudFront API used by the finder and the
    invalidator.
    """
    def list_distributions(self) -> Iterator[DistributionSummaryTypeDef]:
        ...

    def create_invalidation(self, distribution_id: str, caller_reference: str,
                            paths: List[str]) -> str:
        ...

    def get_invalidation_status(self, distribution_id: str,
                                invalidation_id: str) -> str:
        ...


def new_client() -> mypy_boto3_cloudfront.CloudFrontClient:
    return boto3.client('cloudfront')


def new_api() -> 'Client':
    return Client(new_client())


class Client(object):
    def __init__(self, client: mypy_boto3_cloudfront.CloudFrontClient):
        """
        Args:
            client (mypy_boto3_cloudfront.CloudFrontClient):
                A CloudFront API client.
        """
        self.client = client

    def list_distributions(self) -> Iterator[DistributionSummaryTypeDef]:
        """Iterate over every distribution, walking all the pages returned by
        the API.

        Returns:
            Iterator[DistributionSummaryTypeDef]:
                The distribution summaries, in the order returned by the API.
        """
        paginator = self.client.get_paginator('list_distributions')
        for page in paginator.paginate():
            yield from page['DistributionList'].get('Items', [])

    def create_invalidation(self, distribution_id: str, caller_reference: str,
                            paths: List[str]) -> str:
        """Create a cache invalidation for a CloudFront distribution.

        Args:
            distribution_id (str):
                The ID of the CloudFront distribution to invalidate.
            caller_reference (str):
                A string used for request idempotency.
            paths (List[str]):
                A list of paths to invalidate (wildcards are supported).

        Returns:
            str:
                The ID of the CloudFront invalidation created.
        """
        invalidation_batch: InvalidationBatchTypeDef = {
            'Paths': {
                'Quantity': len(paths),
                'Items': paths,
            },
            'CallerReference': caller_reference,
        }
        resp = self.client.create_invalidation(
            DistributionId=distribution_id,
            InvalidationBatch=invalidation_batch)

        return resp['Invalidation']['Id']

    def get_invalidation_status(self, distribution_id: str,
                                invalidation_id: str) -> str:
        """Fetch the current status of an invalidation (e.g. "InProgress" or
        "Completed").
        """
        resp = self.client.get_invalidation(DistributionId=distribution_id,
                                            Id=invalidation_id)

        return resp['Invalidation']['Status']
