"""Resource models and command-line settings for Jupyter workspaces on Kubernetes."""

__version__ = "0.1.0"