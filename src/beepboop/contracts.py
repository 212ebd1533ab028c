"""
Core interfaces for beepboop.

These abstract base classes are the seams between the polling driver and its
collaborators: the component that answers "is the target up right now?" and
the component that tells the user when it finally is.
"""

import abc


class TargetChecker(abc.ABC):
    """
    Abstract interface for a component that checks a single target.
    """

    @abc.abstractmethod
    async def check_once(self) -> bool:
        """
        Performs one reachability check.

        Returns:
            bool: True if the target answered as expected, False if it was
                cleanly reported as down.

        Raises:
            CheckError: If the check could not produce an answer.
            asyncio.CancelledError: If the surrounding task was cancelled.
        """
        pass

    @abc.abstractmethod
    async def check_with_retries(self, retries: int) -> bool:
        """
        Performs up to retries + 1 checks, stopping at the first success.

        Args:
            retries: Number of additional attempts after the first one.

        Returns:
            bool: True as soon as one attempt reports the target up.

        Raises:
            CheckError: The last error seen, when every attempt failed and at
                least one of them raised.
            asyncio.CancelledError: If the surrounding task was cancelled.
        """
        pass


class SignalEmitter(abc.ABC):
    """
    Abstract interface for the side effect triggered once the target is up.
    """

    @abc.abstractmethod
    def emit(self) -> None:
        pass
