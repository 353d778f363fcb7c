import logging
import re

import click

from . import config
from .cauchy import exists_element_of_order
from .errors import InvalidArgument, Unsatisfiable
from .group import (AbelianGroup, AlternatingGroup, CyclicGroup,
                    DihedralGroup, SymmetricGroup)
from .sylow import exists_subgroup_of_order, p_part, sylow_subgroup

_GROUPS = {
    'S': SymmetricGroup,
    'A': AlternatingGroup,
    'D': DihedralGroup,
}


def parse_group(spec: str):
    """Build a group from ``S4``, ``A4``, ``D4``, ``Z6`` or ``Z2xZ4``."""
    spec = spec.strip()
    m = re.fullmatch(r'([SAD])(\d+)', spec)
    if m:
        return _GROUPS[m.group(1)](int(m.group(2)))
    factors = spec.split('x')
    if all(re.fullmatch(r'Z\d+', f) for f in factors):
        n = [int(f[1:]) for f in factors]
        if len(n) == 1:
            return CyclicGroup(n[0])
        return AbelianGroup(*n)
    raise ValueError(f"unknown group '{spec}'")


class GroupType(click.ParamType):
    name = 'group'

    def convert(self, value, param, ctx):
        try:
            return parse_group(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


@click.group()
@click.option('--config', '-c', 'config_file',
              type=click.Path(exists=True, dir_okay=False),
              help='JSON file overriding the default configuration')
@click.option('--verbose', '-v', is_flag=True, help='Log every step')
def main(config_file, verbose):
    if config_file is not None:
        config.load_config(config_file)
    level = 'DEBUG' if verbose else config.get('log_level')
    logging.basicConfig(level=level)


@main.command()
@click.argument('group', type=GroupType())
@click.argument('p', type=int)
def cauchy(group, p):
    """Print an element of GROUP of prime order P."""
    try:
        x = exists_element_of_order(group, p)
    except (InvalidArgument, Unsatisfiable) as e:
        raise click.UsageError(str(e))
    click.echo(f'{x!r}')


@main.command()
@click.argument('group', type=GroupType())
@click.argument('p', type=int)
@click.argument('n', type=int)
def subgroup(group, p, n):
    """Print a subgroup of GROUP of order P**N."""
    try:
        H = exists_subgroup_of_order(group, p, n)
    except (InvalidArgument, Unsatisfiable) as e:
        raise click.UsageError(str(e))
    _echo_subgroup(H)


@main.command()
@click.argument('group', type=GroupType())
@click.argument('p', type=int)
def sylow(group, p):
    """Print a Sylow P-subgroup of GROUP."""
    try:
        H = sylow_subgroup(group, p)
    except InvalidArgument as e:
        raise click.UsageError(str(e))
    click.echo(f'Sylow {p}-subgroup, order {p_part(group.order(), p)}')
    _echo_subgroup(H)


def _echo_subgroup(H):
    click.echo(f'order: {H.order()}')
    for x in H:
        click.echo(f'  {x!r}')


if __name__ == '__main__':
    main()
