from .cloudfront import CloudFrontAPI, Client, new_api, new_client
from .context import Context, pass_context
from .dispatcher import INVALIDATION_COMPLETED, INVALIDATION_EVENTS, INVALIDATION_PENDING, INVALIDATION_SUBMITTED, INVALIDATION_WAIT_ENDED, INVALIDATION_WAIT_STARTED, Dispatcher
from .durations import format_duration, parse_duration
from .exceptions import BoreasError, ConfigurationError, InvalidationTimeoutError
from .finder import find_by_name, list_aliases
from .invalidator import Invalidator, State, default_caller_reference, normalize_paths

__all__ = [
    # from cloudfront module
    'CloudFrontAPI',
    'Client',
    'new_api',
    'new_client',

    # from context module
    'Context',
    'pass_context',

    # from dispatcher module
    'Dispatcher',
    'INVALIDATION_COMPLETED',
    'INVALIDATION_EVENTS',
    'INVALIDATION_PENDING',
    'INVALIDATION_SUBMITTED',
    'INVALIDATION_WAIT_ENDED',
    'INVALIDATION_WAIT_STARTED',

    # from durations module
    'format_duration',
    'parse_duration',

    # from exceptions module
    'BoreasError',
    'ConfigurationError',
    'InvalidationTimeoutError',

    # from finder module
    'find_by_name',
    'list_aliases',

    # from invalidator module
    'Invalidator',
    'State',
    'default_caller_reference',
    'normalize_paths',
]
