from unittest.mock import AsyncMock, patch

from click.testing import CliRunner
from dbus_next.errors import DBusError

from sdunits.cli import cli
from sdunits.models.analyze import BlameEntry
from sdunits.models.systemd_unit import UnitFileEntry
from sdunits.services.unit_enumerator import UnitEnumerator
from sdunits.system.journal import JournalReader
from sdunits.systemd.errors import UnrecognizedUnitState
from sdunits.systemd.types import UnitState

from conftest import FakeCommandRunner


def _enumeration():
    return UnitEnumerator().enumerate([
        UnitFileEntry(
            path='/usr/lib/systemd/system/sshd.service',
            state_message='string"enabled"',
        ),
        UnitFileEntry(
            path='/usr/lib/systemd/system/fstrim.timer',
            state_message='string"disabled"',
        ),
        UnitFileEntry(
            path='/usr/lib/systemd/system/odd.thing',
            state_message='string"static"',
        ),
    ])


class TestListUnits:
    """Tests for the list-units command."""

    @patch('sdunits.cli.commands.list_units._fetch_units', new_callable=AsyncMock)
    def test_prints_table_and_skipped_units(self, mock_fetch):
        mock_fetch.return_value = _enumeration()

        result = CliRunner().invoke(cli, ['list-units'])

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0].split() == ['UNIT', 'TYPE', 'STATE']
        assert lines[2].split() == ['fstrim.timer', 'timer', 'disabled']
        assert lines[3].split() == ['sshd.service', 'service', 'enabled']
        assert 'skipped odd.thing' in result.stderr
        mock_fetch.assert_awaited_once_with(False)

    @patch('sdunits.cli.commands.list_units._fetch_units', new_callable=AsyncMock)
    def test_filters(self, mock_fetch):
        mock_fetch.return_value = _enumeration()

        result = CliRunner().invoke(
            cli,
            ['list-units', '--user', '--type', 'timer'],
        )

        assert result.exit_code == 0
        assert 'fstrim.timer' in result.stdout
        assert 'sshd.service' not in result.stdout
        mock_fetch.assert_awaited_once_with(True)

    @patch('sdunits.cli.commands.list_units._fetch_units', new_callable=AsyncMock)
    def test_no_matching_units(self, mock_fetch):
        mock_fetch.return_value = _enumeration()

        result = CliRunner().invoke(cli, ['list-units', '--state', 'masked'])

        assert result.stdout.strip() == 'No units found.'

    @patch('sdunits.cli.commands.list_units._fetch_units', new_callable=AsyncMock)
    def test_bus_error(self, mock_fetch):
        mock_fetch.side_effect = DBusError(
            'org.freedesktop.DBus.Error.AccessDenied',
            'denied',
        )

        result = CliRunner().invoke(cli, ['list-units'])

        assert result.exit_code == 1
        assert 'Error: denied' in result.stderr


class TestClassify:
    """Tests for the classify command."""

    def test_classifies_paths(self):
        result = CliRunner().invoke(
            cli,
            ['classify', '/etc/systemd/system/a.socket', 'b.swap'],
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            '/etc/systemd/system/a.socket socket',
            'b.swap swap',
        ]

    def test_reports_unknown_paths(self):
        result = CliRunner().invoke(
            cli,
            ['classify', 'a.path', 'notes.txt'],
        )

        assert result.exit_code == 1
        assert result.stdout == 'a.path path\n'
        assert 'skipped notes.txt' in result.stderr


class TestShow:
    """Tests for the show command."""

    def test_shows_unit_file(self, sshd_unit_file):
        result = CliRunner().invoke(cli, ['show', str(sshd_unit_file)])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == 'Type: service'
        assert lines[1] == 'Description: OpenSSH Daemon'
        assert 'ExecStart=/usr/bin/sshd -D' in result.output

    def test_missing_file(self, tmp_path):
        result = CliRunner().invoke(
            cli,
            ['show', str(tmp_path / 'gone.target')],
        )

        assert result.exit_code == 0
        assert 'Description: N/A' in result.output


class TestJournal:
    """Tests for the journal command."""

    def test_prints_journal(self):
        runner = FakeCommandRunner(output=b'newest\noldest\n')

        with patch(
            'sdunits.cli.commands.inspect.JournalReader',
            side_effect=lambda timeout: JournalReader(runner, timeout),
        ):
            result = CliRunner().invoke(
                cli,
                ['journal', 'sshd.service', '--timeout', '3'],
            )

        assert result.exit_code == 0
        assert result.output == 'newest\noldest\n'
        assert runner.calls[0][1] == 3.0


class TestBlame:
    """Tests for the blame command."""

    @patch('sdunits.cli.commands.blame.UnitService')
    def test_sorted_and_limited(self, mock_service):
        mock_service.return_value.blame.return_value = [
            BlameEntry(unit='fast.service', time_ms=12),
            BlameEntry(unit='slow.service', time_ms=62345),
            BlameEntry(unit='mid.service', time_ms=1500),
        ]

        result = CliRunner().invoke(cli, ['blame', '--limit', '2'])

        assert result.exit_code == 0
        assert [line.split() for line in result.output.splitlines()] == [
            ['TIME', 'UNIT'],
            ['1min', '2.345s', 'slow.service'],
            ['1.500s', 'mid.service'],
        ]

    @patch('sdunits.cli.commands.blame.UnitService')
    def test_no_entries(self, mock_service):
        mock_service.return_value.blame.return_value = []

        result = CliRunner().invoke(cli, ['blame'])

        assert result.output.strip() == 'No boot timing information available.'


class TestState:
    """Tests for the state command."""

    @patch('sdunits.cli.commands.list_units._fetch_state', new_callable=AsyncMock)
    def test_prints_state(self, mock_fetch):
        mock_fetch.return_value = UnitState.MASKED

        result = CliRunner().invoke(cli, ['state', 'cups.service', '--user'])

        assert result.exit_code == 0
        assert result.stdout == 'masked\n'
        mock_fetch.assert_awaited_once_with('cups.service', True)

    @patch('sdunits.cli.commands.list_units._fetch_state', new_callable=AsyncMock)
    def test_unknown_state(self, mock_fetch):
        mock_fetch.side_effect = UnrecognizedUnitState('alias')

        result = CliRunner().invoke(cli, ['state', 'cups.service'])

        assert result.exit_code == 1
        assert "Unknown unit state: 'alias'" in result.stderr
