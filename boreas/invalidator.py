"""Tools for invalidating the cache of a CloudFront distribution and waiting
for the invalidation to complete. Progress is reported through the events
defined in the dispatcher module.
"""

import datetime
import enum
import time
from .cloudfront import CloudFrontAPI
from .dispatcher import INVALIDATION_COMPLETED, INVALIDATION_PENDING, INVALIDATION_SUBMITTED, INVALIDATION_WAIT_ENDED, INVALIDATION_WAIT_STARTED, Dispatcher
from .exceptions import ConfigurationError, InvalidationTimeoutError
from typing import Iterable, List, Optional

DEFAULT_WAIT = datetime.timedelta(minutes=15)
DEFAULT_INTERVAL = datetime.timedelta(seconds=10)
DEFAULT_PATHS = ['/*']
COMPLETED_STATUS = 'Completed'


class State(enum.Enum):
    UNSUBMITTED = 'unsubmitted'
    SUBMITTED = 'submitted'
    COMPLETED = 'completed'
    TIMED_OUT = 'timed_out'
    FAILED = 'failed'


def normalize_paths(paths: Iterable[str]) -> List[str]:
    """Prefix with a slash every path not starting with one.

    Args:
        paths (Iterable[str]): The paths to normalize.

    Returns:
        List[str]: The normalized paths, or ['/*'] when no path is given.
    """
    normalized = [p if p.startswith('/') else '/' + p for p in paths]
    return normalized if normalized else list(DEFAULT_PATHS)


def default_caller_reference() -> str:
    return str(int(time.time()))


class Invalidator(object):
    """Invalidator submits a single invalidation request to a CloudFront
    distribution and checks its status.

    It goes through the states unsubmitted, submitted and then one of
    completed, timed_out or failed.
    """
    def __init__(self,
                 api: CloudFrontAPI,
                 distribution_id: str,
                 paths: Iterable[str] = (),
                 caller_reference: Optional[str] = None,
                 wait: datetime.timedelta = DEFAULT_WAIT,
                 interval: datetime.timedelta = DEFAULT_INTERVAL,
                 dispatcher: Optional[Dispatcher] = None):
        """
        Args:
            api (CloudFrontAPI):
                The CloudFront API used to submit and watch the invalidation.
            distribution_id (str):
                The ID of the CloudFront distribution to invalidate.
            paths (Iterable[str]):
                The paths to invalidate. Paths not starting with a slash get
                one prepended. Defaults to '/*'.
            caller_reference (Optional[str]):
                A unique identifier for this invalidation request. The
                current Unix timestamp is used if left empty.
            wait (datetime.timedelta):
                How long execute() waits for the invalidation to complete. A
                null or negative duration disables waiting.
            interval (datetime.timedelta):
                Time between two status checks.
            dispatcher (Optional[Dispatcher]):
                Receives the progress events of the invalidation.
        """
        self.api = api
        self.distribution_id = distribution_id
        self.paths = normalize_paths(paths)
        self.caller_reference = caller_reference or default_caller_reference()
        self.wait = wait
        self.interval = interval
        self.dispatcher = dispatcher if dispatcher is not None else Dispatcher(
        )
        self.state = State.UNSUBMITTED
        self.invalidation_id: Optional[str] = None

    def invalidate(self) -> str:
        """Submit the invalidation batch.

        Returns:
            str: The ID of the invalidation, to be passed to done().

        Raises:
            ConfigurationError: When no distribution ID is set.
            RuntimeError: When the invalidation has already been submitted.
        """
        if not self.distribution_id:
            raise ConfigurationError("distribution must be set")
        if self.state != State.UNSUBMITTED:
            raise RuntimeError(
                "Invalidation {0} has already been submitted.".format(
                    self.invalidation_id))

        try:
            invalidation_id = self.api.create_invalidation(
                self.distribution_id, self.caller_reference, self.paths)
        except Exception:
            self.state = State.FAILED
            raise

        self.invalidation_id = invalidation_id
        self.state = State.SUBMITTED
        self.dispatcher.emit(INVALIDATION_SUBMITTED,
                             invalidation_id=invalidation_id)

        return invalidation_id

    def done(self, invalidation_id: str) -> bool:
        """Check whether the given invalidation has completed."""
        try:
            status = self.api.get_invalidation_status(self.distribution_id,
                                                      invalidation_id)
        except Exception:
            self.state = State.FAILED
            raise

        return status == COMPLETED_STATUS

    def execute(self) -> State:
        """Submit the invalidation and wait for its completion, unless
        waiting is disabled.

        Returns:
            State: Either SUBMITTED (no wait) or COMPLETED.

        Raises:
            ConfigurationError: When no distribution ID is set.
            InvalidationTimeoutError:
                When the invalidation hasn't completed within the configured
                wait duration.
        """
        invalidation_id = self.invalidate()

        if self.wait <= datetime.timedelta(0):
            return self.state

        self.dispatcher.emit(INVALIDATION_WAIT_STARTED,
                             invalidation_id=invalidation_id,
                             wait=self.wait)
        try:
            self._poll(invalidation_id)
        finally:
            self.dispatcher.emit(INVALIDATION_WAIT_ENDED,
                                 invalidation_id=invalidation_id,
                                 state=self.state)

        return self.state

    def _poll(self, invalidation_id: str):
        deadline = time.monotonic() + self.wait.total_seconds()

        while time.monotonic() < deadline:
            time.sleep(self.interval.total_seconds())

            if self.done(invalidation_id):
                self.state = State.COMPLETED
                self.dispatcher.emit(INVALIDATION_COMPLETED,
                                     invalidation_id=invalidation_id)
                return

            self.dispatcher.emit(INVALIDATION_PENDING,
                                 invalidation_id=invalidation_id)

        self.state = State.TIMED_OUT
        raise InvalidationTimeoutError(self.wait, invalidation_id)
