"""Nomad API access for jobgate."""

from jobgate.nomad.client import NomadClient

__all__ = ["NomadClient"]
