import logging
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence


class CommandExecutionError(RuntimeError):
    """External command could not be run to completion.
    """


class CommandRunner(ABC):
    """Abstract interface for running external commands.
    """

    @abstractmethod
    def run(
        self,
        args: Sequence[str],
        timeout: float | None = None,
    ) -> bytes:
        """Run a command and return its raw standard output.

        A non-zero exit status is not an error; the output is returned
        as is.

        Raises:
            CommandExecutionError: If the command cannot be started or
                does not finish within the timeout
        """


class SubprocessCommandRunner(CommandRunner):
    """Command runner backed by subprocess.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def run(
        self,
        args: Sequence[str],
        timeout: float | None = None,
    ) -> bytes:
        """Run a command without a shell and capture its standard output.

        Args:
            args: Program and arguments
            timeout: Seconds to wait before giving up, None waits forever

        Returns:
            The captured standard output

        Raises:
            CommandExecutionError: If the command cannot be started or
                times out
        """
        self._logger.debug('Running command: %s', ' '.join(args))

        try:
            completed = subprocess.run(
                list(args),
                stdin=subprocess.DEVNULL,
                capture_output=True,
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise CommandExecutionError(
                f'{args[0]} timed out after {timeout} seconds'
            ) from e
        except OSError as e:
            raise CommandExecutionError(
                f'Failed to run {args[0]}: {e}'
            ) from e

        if completed.returncode != 0:
            self._logger.debug(
                'Command %s exited with status %d',
                args[0],
                completed.returncode,
            )

        return completed.stdout
