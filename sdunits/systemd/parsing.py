from sdunits.system.constants import UnitFileConfig


def get_unit_description(info: str) -> str | None:
    """Return the value of the first Description= line of a unit file.

    Args:
        info: Contents of the unit file

    Returns:
        Text following 'Description=', or None if the unit has no
        description line
    """
    prefix = UnitFileConfig.DESCRIPTION_PREFIX

    # Only '\n' ends a line; a trailing '\r' belongs to the line break.
    for line in info.split('\n'):
        line = line.removesuffix('\r')
        if line.startswith(prefix):
            return line[len(prefix):]

    return None
