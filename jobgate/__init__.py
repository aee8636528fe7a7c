"""jobgate: gate Nomad job deployments on the scheduler's plan diff."""

__version__ = "0.1.0"
