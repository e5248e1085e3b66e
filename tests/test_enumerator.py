from pathlib import Path

from sdunits.models.systemd_unit import UnitFileEntry
from sdunits.services.unit_enumerator import UnitEnumerator
from sdunits.systemd.types import UnitState, UnitType


def _entry(path: str, state: str) -> UnitFileEntry:
    return UnitFileEntry(path=path, state_message=f'string"{state}"')


class TestUnitEnumerator:
    """Tests for UnitEnumerator."""

    def test_builds_units_in_order(self):
        result = UnitEnumerator().enumerate([
            _entry('/usr/lib/systemd/system/sshd.service', 'enabled'),
            _entry('/usr/lib/systemd/system/fstrim.timer', 'disabled'),
        ])

        assert result.success
        assert [u.name for u in result.units] == [
            'sshd.service',
            'fstrim.timer',
        ]
        assert result.units[1].utype is UnitType.TIMER
        assert result.units[1].state is UnitState.DISABLED

    def test_malformed_entries_do_not_abort_batch(self):
        result = UnitEnumerator().enumerate([
            _entry('/usr/lib/systemd/system/sshd.service', 'enabled'),
            _entry('/usr/lib/systemd/system/weird.device', 'static'),
            _entry('/usr/lib/systemd/system/cups.socket', 'alias'),
            _entry('/usr/lib/systemd/system/swap.target', 'static'),
        ])

        assert not result.success
        assert [u.name for u in result.units] == [
            'sshd.service',
            'swap.target',
        ]
        assert [(f.name, f.error) for f in result.failures] == [
            ('weird.device', 'UnrecognizedUnitType'),
            ('cups.socket', 'UnrecognizedUnitState'),
        ]
        assert result.failures[0].path == \
            Path('/usr/lib/systemd/system/weird.device')

    def test_empty_batch(self):
        result = UnitEnumerator().enumerate([])

        assert result.success
        assert result.units == []

    def test_build_unit(self):
        unit = UnitEnumerator().build_unit(
            _entry('/etc/systemd/system/home.automount', 'generated'),
        )

        assert unit.utype is UnitType.AUTOMOUNT
        assert unit.state is UnitState.GENERATED
