"""Petrials of polyhedron names."""

from ..spec.structures import Name, Petrial


def petrial(name: Name) -> Name:
    """
    Makes a Petrial out of the name.

    Petrials are involutions: petrial(petrial(x)) == x.
    """
    if isinstance(name, Petrial):
        return name.base
    return Petrial(name)
