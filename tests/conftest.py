from collections.abc import Sequence

import pytest

from sdunits.system.commands import CommandExecutionError, CommandRunner

SSHD_UNIT = """[Unit]
Description=OpenSSH Daemon
Wants=sshdgenkeys.service
After=sshdgenkeys.service
After=network.target

[Service]
ExecStart=/usr/bin/sshd -D
ExecReload=/bin/kill -HUP $MAINPID
KillMode=process
Restart=always

[Install]
WantedBy=multi-user.target
"""


class FakeCommandRunner(CommandRunner):
    """Command runner returning canned output instead of spawning processes.
    """

    def __init__(
        self,
        output: bytes = b'',
        error: Exception | None = None,
    ) -> None:
        self.output = output
        self.error = error
        self.calls: list[tuple[list[str], float | None]] = []

    def run(
        self,
        args: Sequence[str],
        timeout: float | None = None,
    ) -> bytes:
        self.calls.append((list(args), timeout))
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture
def sshd_unit_file(tmp_path):
    path = tmp_path / 'sshd.service'
    path.write_text(SSHD_UNIT)
    return path


@pytest.fixture
def fake_runner():
    return FakeCommandRunner(output=b'-- Journal begins --\nline 2\n')


@pytest.fixture
def failing_runner():
    return FakeCommandRunner(
        error=CommandExecutionError('Failed to run journalctl: not found'),
    )
