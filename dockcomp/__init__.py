"""dockcomp — command-line completion resolver for the docker client."""

__version__ = "0.1.0"
