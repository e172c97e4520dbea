"""Tools for finding the CloudFront distributions associated with a CNAME."""

from .cloudfront import CloudFrontAPI
from typing import Dict, List


def list_aliases(api: CloudFrontAPI) -> Dict[str, List[str]]:
    """List the CNAME aliases of every CloudFront distribution.

    Args:
        api (CloudFrontAPI): The CloudFront API to query.

    Returns:
        Dict[str, List[str]]:
            Distribution IDs mapped to their aliases. Distributions without
            any alias are mapped to an empty list.
    """
    aliases: Dict[str, List[str]] = {}

    for distribution in api.list_distributions():
        items = distribution.get('Aliases', {}).get('Items', [])
        aliases.setdefault(distribution['Id'], []).extend(items)

    return aliases


def find_by_name(api: CloudFrontAPI, name: str) -> List[str]:
    """Find the IDs of the distributions having an alias matching name.

    Aliases are compared case-insensitively.

    Args:
        api (CloudFrontAPI): The CloudFront API to query.
        name (str): The CNAME to look for.

    Returns:
        List[str]: Matching distribution IDs, empty when nothing matches.
    """
    expected = name.casefold()

    return [
        dist_id for dist_id, cnames in list_aliases(api).items()
        if any(cname.casefold() == expected for cname in cnames)
    ]
